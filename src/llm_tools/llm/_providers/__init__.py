"""Provider registry: maps provider names to factory functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from llm_tools.llm._providers._gemini import GeminiProvider
from llm_tools.llm._providers._vertex import VertexAIProvider

if TYPE_CHECKING:
    from llm_tools.llm._providers._base import BaseProvider

SUPPORTED_PROVIDERS = ("gemini", "vertex-ai")


def _require(value: str | None, what: str) -> str:
    if not value:
        raise ValueError(f"No {what} provided.")
    return value


def create_provider(
    name: str,
    *,
    api_key: str | None = None,
    project: str | None = None,
    location: str | None = None,
    access_token: str | None = None,
    timeout: int = 120,
) -> BaseProvider:
    """Create a provider instance by name.

    Credentials are passed in explicitly; nothing is read from the environment.
    """
    if name == "gemini":
        return GeminiProvider(_require(api_key, "API key"), timeout=timeout)

    if name == "vertex-ai":
        return VertexAIProvider(
            _require(project, "Google Cloud project"),
            _require(location, "Vertex AI location"),
            _require(access_token, "Vertex AI access token"),
            timeout=timeout,
        )

    raise ValueError(f"Unknown provider {name!r}. Supported: {sorted(SUPPORTED_PROVIDERS)}")
