"""Unified types for streamed generation requests and responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TypeAlias

# --- Thinking / reasoning ---


@dataclass(frozen=True, slots=True)
class ThinkingBudget:
    """Numeric token allowance for the model's reasoning phase (0 disables it)."""

    tokens: int = 0

    def __post_init__(self) -> None:
        if self.tokens < 0:
            raise ValueError(f"Thinking budget must be non-negative, got {self.tokens}")


class ThinkingLevel(enum.Enum):
    """Categorical reasoning depth for model families without a numeric budget."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


ThinkingPolicy: TypeAlias = ThinkingBudget | ThinkingLevel


# --- Request ---


@dataclass(frozen=True, slots=True)
class RequestConfig:
    """A fully resolved generation request for one invocation."""

    system_instruction: str
    model: str
    max_tokens: int
    input_text: str
    thinking: ThinkingPolicy
    include_thoughts: bool = False


# --- Streaming ---


@dataclass(frozen=True, slots=True)
class TextPiece:
    """A text part of a streamed result, either answer text or reasoning."""

    text: str
    thought: bool = False


@dataclass(frozen=True, slots=True)
class UsageSnapshot:
    """Token counts as reported at one point of the stream."""

    prompt_tokens: int = 0
    candidates_tokens: int = 0
    thoughts_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class StreamFragment:
    """One unit of a streamed generation result."""

    pieces: tuple[TextPiece, ...] = ()
    usage: UsageSnapshot | None = None
    model_version: str = ""


# --- Model catalog ---


@dataclass(frozen=True, slots=True)
class ModelSummary:
    """A model entry from the provider's catalog."""

    name: str
    description: str = ""
    supported_actions: tuple[str, ...] = ()

    def supports(self, action: str) -> bool:
        return action in self.supported_actions


@dataclass(frozen=True, slots=True)
class ModelPage:
    """One page of the model catalog; an empty token means no more pages."""

    models: tuple[ModelSummary, ...] = ()
    next_page_token: str = ""


# --- Call metadata ---


@dataclass(slots=True)
class CallMetadata:
    """Aggregated metadata of one streaming call.

    Usage counters are snapshots: each update overwrites the previous values.
    """

    api_call_time: float = 0.0
    model_version: str = ""
    prompt_token_count: int = 0
    candidates_token_count: int = 0
    thoughts_token_count: int = 0
    total_token_count: int = 0

    def update(self, fragment: StreamFragment) -> None:
        """Fold one fragment's model version and usage snapshot into the record."""
        if fragment.model_version:
            self.model_version = fragment.model_version
        if fragment.usage is not None:
            self.prompt_token_count = fragment.usage.prompt_tokens
            self.candidates_token_count = fragment.usage.candidates_tokens
            self.thoughts_token_count = fragment.usage.thoughts_tokens
            self.total_token_count = fragment.usage.total_tokens
