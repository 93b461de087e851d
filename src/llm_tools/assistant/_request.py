"""Request configuration: turn a task, a model and input text into a RequestConfig."""

from __future__ import annotations

import html
import logging

from llm_tools.assistant._errors import ConfigurationError
from llm_tools.assistant._tasks import TaskDefinition
from llm_tools.llm._types import RequestConfig, ThinkingBudget, ThinkingLevel, ThinkingPolicy

logger = logging.getLogger(__name__)

DEFAULT_THINKING_BUDGET = 1024

_G3_PREFIX = "gemini-3"
_G3_PRO_PREFIX = "gemini-3-pro"
_G3_PRO_LEVELS = frozenset({ThinkingLevel.LOW, ThinkingLevel.HIGH})


def _normalize_model_name(model: str) -> str:
    return model.strip().lower().removeprefix("models/")


def is_gemini3_model(model: str) -> bool:
    """Models of this family take a thinking level instead of a token budget."""
    return _normalize_model_name(model).startswith(_G3_PREFIX)


def is_gemini3_pro_model(model: str) -> bool:
    return _normalize_model_name(model).startswith(_G3_PRO_PREFIX)


def parse_thinking_level(level: str) -> ThinkingLevel:
    """Parse ``minimal|low|medium|high`` (case-insensitive)."""
    try:
        return ThinkingLevel(level.strip().lower())
    except ValueError:
        choices = "|".join(lvl.value for lvl in ThinkingLevel)
        raise ConfigurationError(
            f"Invalid thinking level {level!r} (choose from {choices})"
        ) from None


def resolve_thinking(
    model: str, enable_thinking: bool, requested_level: str | None = None
) -> ThinkingPolicy:
    """Pick the thinking policy appropriate to the model family."""
    if not is_gemini3_model(model):
        return ThinkingBudget(DEFAULT_THINKING_BUDGET if enable_thinking else 0)

    if requested_level and requested_level.strip():
        level = parse_thinking_level(requested_level)
    elif enable_thinking:
        level = ThinkingLevel.HIGH
    else:
        level = ThinkingLevel.LOW

    if is_gemini3_pro_model(model) and level not in _G3_PRO_LEVELS:
        raise ConfigurationError(
            f"Model {model!r} only supports thinking level low or high, got {level.value!r}"
        )
    return level


def escape_input(text: str) -> str:
    return html.escape(text)


def unescape_output(text: str) -> str:
    return html.unescape(text)


def build_request_config(
    task: TaskDefinition,
    model: str,
    input_text: str,
    *,
    enable_thinking: bool = False,
    thinking_level: str | None = None,
) -> RequestConfig:
    """Resolve the full request for one invocation.

    The token ceiling is ``len(input_text) * multiplier + base``; in budget mode
    the thinking budget is added on top. Level-mode models account for their
    reasoning tokens themselves, so nothing is added for them.
    """
    thinking = resolve_thinking(model, enable_thinking, thinking_level)

    max_tokens = len(input_text) * task.max_tokens_multiplier + task.max_tokens_base
    if isinstance(thinking, ThinkingBudget):
        max_tokens += thinking.tokens

    request = RequestConfig(
        system_instruction=task.system_instruction,
        model=model,
        max_tokens=max_tokens,
        input_text=task.input_prefix + escape_input(input_text) + task.input_suffix,
        thinking=thinking,
        include_thoughts=enable_thinking,
    )
    logger.debug(
        "Resolved request for task %s: model=%s thinking=%r max_tokens=%d",
        task.name,
        model,
        thinking,
        max_tokens,
    )
    return request
