"""Provider for the Google Gemini streamGenerateContent API."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx

from llm_tools.llm._async_http import async_stream_sse
from llm_tools.llm._exceptions import error_for_status
from llm_tools.llm._http import get_json
from llm_tools.llm._providers._base import BaseProvider
from llm_tools.llm._types import (
    ModelPage,
    ModelSummary,
    RequestConfig,
    StreamFragment,
    TextPiece,
    ThinkingBudget,
    ThinkingLevel,
    UsageSnapshot,
)

logger = logging.getLogger(__name__)

_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def _thinking_to_gemini(request: RequestConfig) -> dict[str, Any]:
    config: dict[str, Any] = {"includeThoughts": request.include_thoughts}
    if isinstance(request.thinking, ThinkingBudget):
        config["thinkingBudget"] = request.thinking.tokens
    elif isinstance(request.thinking, ThinkingLevel):
        config["thinkingLevel"] = request.thinking.value.upper()
    return config


def build_payload(request: RequestConfig) -> dict[str, Any]:
    """Build a generateContent request body from a resolved request."""
    payload: dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": request.input_text}]}],
        "generationConfig": {
            "maxOutputTokens": request.max_tokens,
            "thinkingConfig": _thinking_to_gemini(request),
        },
    }
    if request.system_instruction:
        payload["systemInstruction"] = {"parts": [{"text": request.system_instruction}]}
    return payload


def parse_fragment(chunk: dict[str, Any]) -> StreamFragment:
    """Convert one decoded SSE chunk into a :class:`StreamFragment`.

    An ``error`` object sent after the stream has started is raised as the
    matching :class:`APIError`.
    """
    if (error := chunk.get("error")) is not None:
        code = error.get("code", 500) if isinstance(error, dict) else 500
        raise error_for_status(code, chunk)

    pieces: list[TextPiece] = []
    for candidate in chunk.get("candidates", []):
        for part in candidate.get("content", {}).get("parts", []):
            if part.get("text"):
                pieces.append(TextPiece(text=part["text"], thought=bool(part.get("thought"))))

    usage: UsageSnapshot | None = None
    if raw_usage := chunk.get("usageMetadata"):
        usage = UsageSnapshot(
            prompt_tokens=raw_usage.get("promptTokenCount", 0),
            candidates_tokens=raw_usage.get("candidatesTokenCount", 0),
            thoughts_tokens=raw_usage.get("thoughtsTokenCount", 0),
            total_tokens=raw_usage.get("totalTokenCount", 0),
        )

    return StreamFragment(
        pieces=tuple(pieces),
        usage=usage,
        model_version=chunk.get("modelVersion", ""),
    )


def _parse_model(raw: dict[str, Any]) -> ModelSummary:
    actions = raw.get("supportedGenerationMethods") or raw.get("supportedActions") or []
    if isinstance(actions, dict):
        actions = list(actions)
    return ModelSummary(
        name=raw.get("name", ""),
        description=raw.get("description", ""),
        supported_actions=tuple(actions),
    )


class GeminiProvider(BaseProvider):
    """Google Gemini API provider (API-key authentication)."""

    api_method = "Gemini API"

    #: Key of the model list in a catalog page.
    _models_key = "models"

    def __init__(
        self,
        api_key: str,
        *,
        timeout: int = 120,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }
        self._timeout = timeout
        self._transport = transport

    def _stream_url(self, model: str) -> str:
        model = model.removeprefix("models/")
        return f"{_BASE_URL}/models/{model}:streamGenerateContent?alt=sse"

    def _models_url(self) -> str:
        return f"{_BASE_URL}/models"

    async def astream_fragments(self, request: RequestConfig) -> AsyncIterator[StreamFragment]:
        payload = build_payload(request)
        logger.debug("Streaming %s (maxOutputTokens=%d)", request.model, request.max_tokens)
        async for data in async_stream_sse(
            self._stream_url(request.model),
            self._headers,
            payload,
            timeout=self._timeout,
            transport=self._transport,
        ):
            try:
                chunk = json.loads(data)
            except json.JSONDecodeError:
                logger.debug("Skipping undecodable SSE payload: %r", data)
                continue
            yield parse_fragment(chunk)

    def list_models(self, *, page_size: int = 20, page_token: str = "") -> ModelPage:
        params: dict[str, Any] = {"pageSize": page_size}
        if page_token:
            params["pageToken"] = page_token
        raw = get_json(self._models_url(), self._headers, params=params, timeout=60)
        return ModelPage(
            models=tuple(_parse_model(m) for m in raw.get(self._models_key, [])),
            next_page_token=raw.get("nextPageToken", ""),
        )
