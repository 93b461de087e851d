"""Exceptions for Gemini API errors."""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class ModelNotFoundError(APIError):
    """Raised on HTTP 404: the requested model or resource does not exist."""


def error_for_status(status_code: int, body: dict[str, Any] | str) -> APIError:
    """Map an HTTP error status to the matching exception instance."""
    if status_code == 404:
        return ModelNotFoundError(status_code, body)
    return APIError(status_code, body)
