"""Shared test fixtures."""

from __future__ import annotations

import io
from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests
from rich.console import Console

from llm_tools.assistant._tasks import TaskDefinition
from llm_tools.llm._providers._base import BaseProvider
from llm_tools.llm._types import ModelPage, RequestConfig, StreamFragment, ThinkingBudget


class MockResponse:
    """Mimics ``requests.Response`` for testing get_json."""

    def __init__(
        self,
        json_data: dict[str, Any] | None = None,
        status_code: int = 200,
        text: str = "",
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300

    def json(self) -> dict[str, Any]:
        if self._json_data is None:
            raise requests.JSONDecodeError("No JSON", "", 0)
        return self._json_data


class FakeProvider(BaseProvider):
    """In-memory provider: yields canned fragments, then optionally raises."""

    api_method = "Fake API"

    def __init__(
        self,
        fragments: list[StreamFragment] | None = None,
        *,
        error: BaseException | None = None,
        pages: dict[str, ModelPage] | None = None,
        list_error: BaseException | None = None,
    ) -> None:
        self._fragments = fragments or []
        self._error = error
        self._pages = pages or {"": ModelPage()}
        self._list_error = list_error
        self.requests: list[RequestConfig] = []
        self.page_tokens: list[str] = []

    async def astream_fragments(self, request: RequestConfig) -> AsyncIterator[StreamFragment]:
        self.requests.append(request)
        for fragment in self._fragments:
            yield fragment
        if self._error is not None:
            raise self._error

    def list_models(self, *, page_size: int = 20, page_token: str = "") -> ModelPage:
        self.page_tokens.append(page_token)
        if self._list_error is not None:
            raise self._list_error
        return self._pages[page_token]


def make_console() -> tuple[Console, io.StringIO]:
    """A colorless console writing into a buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, color_system=None, width=120), buffer


@pytest.fixture
def mock_get(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.get`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.get", mock)
    return mock


@pytest.fixture
def translate_task() -> TaskDefinition:
    return TaskDefinition(
        name="translate",
        description="test translation",
        system_instruction="Translate.",
        input_prefix="JAPANESE:\n\n",
        input_suffix="\n\n",
        max_tokens_multiplier=10,
        max_tokens_base=0,
    )


@pytest.fixture
def request_config() -> RequestConfig:
    return RequestConfig(
        system_instruction="Translate.",
        model="gemini-2.5-flash",
        max_tokens=50,
        input_text="JAPANESE:\n\nこんにちは\n\n",
        thinking=ThinkingBudget(0),
    )
