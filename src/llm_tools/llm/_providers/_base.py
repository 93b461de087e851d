"""Abstract base for LLM providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from llm_tools.llm._types import ModelPage, RequestConfig, StreamFragment


class BaseProvider(ABC):
    """Interface that every provider must implement."""

    #: Human-readable name of the API the provider talks to.
    api_method: str = ""

    @abstractmethod
    def astream_fragments(self, request: RequestConfig) -> AsyncIterator[StreamFragment]: ...

    @abstractmethod
    def list_models(self, *, page_size: int = 20, page_token: str = "") -> ModelPage: ...
