"""Assistant: task-aware streaming request pipeline."""

from llm_tools.assistant._discovery import list_available_models
from llm_tools.assistant._errors import (
    AssistantError,
    CallFailedError,
    ConfigurationError,
    ModelUnavailableError,
    UnknownTaskError,
)
from llm_tools.assistant._metadata import format_metadata, print_metadata
from llm_tools.assistant._pipeline import run_request
from llm_tools.assistant._render import FragmentQueue, TypewriterRenderer
from llm_tools.assistant._request import (
    build_request_config,
    is_gemini3_model,
    is_gemini3_pro_model,
    parse_thinking_level,
    resolve_thinking,
)
from llm_tools.assistant._stream import stream_content
from llm_tools.assistant._tasks import (
    DEFAULT_TASK,
    TASK_ALIASES,
    TASK_DEFINITIONS,
    TaskDefinition,
    get_task_definition,
    task_usage_lines,
)

__all__ = [
    "DEFAULT_TASK",
    "TASK_ALIASES",
    "TASK_DEFINITIONS",
    "AssistantError",
    "CallFailedError",
    "ConfigurationError",
    "FragmentQueue",
    "ModelUnavailableError",
    "TaskDefinition",
    "TypewriterRenderer",
    "UnknownTaskError",
    "build_request_config",
    "format_metadata",
    "get_task_definition",
    "is_gemini3_model",
    "is_gemini3_pro_model",
    "list_available_models",
    "parse_thinking_level",
    "print_metadata",
    "resolve_thinking",
    "run_request",
    "stream_content",
    "task_usage_lines",
]
