"""Exceptions raised by the request pipeline."""

from __future__ import annotations


class AssistantError(Exception):
    """Base class for pipeline errors."""


class ConfigurationError(AssistantError):
    """Raised when a request cannot be resolved (e.g. invalid thinking level)."""


class UnknownTaskError(AssistantError, LookupError):
    """Raised when a task name matches neither a task nor an alias."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown task: {name!r}")


class ModelUnavailableError(AssistantError):
    """Raised when the requested model does not exist or cannot generate content."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(
            f"Model {model!r} was not found or does not support generateContent"
        )


class CallFailedError(AssistantError):
    """Raised when the streaming call fails for any other reason."""

    def __init__(self, model: str, cause: BaseException) -> None:
        self.model = model
        super().__init__(f"API call to {model!r} failed: {cause}")
