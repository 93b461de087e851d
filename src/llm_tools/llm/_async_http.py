"""Server-sent event streaming over ``httpx``."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import httpx

from llm_tools.llm._exceptions import error_for_status

_DATA_PREFIX = "data:"


async def _error_from_response(r: httpx.Response) -> Exception:
    await r.aread()
    try:
        body: dict[str, Any] | str = r.json()
    except json.JSONDecodeError:
        body = r.text
    return error_for_status(r.status_code, body)


async def async_stream_sse(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: int = 120,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[str]:
    """POST ``payload`` and yield the ``data:`` field of each event.

    An error status is raised before anything is yielded. Comment lines and
    other SSE fields are ignored. Nothing is retried.
    """
    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        async with client.stream("POST", url, headers=headers, json=payload) as r:
            if not r.is_success:
                raise await _error_from_response(r)
            async for line in r.aiter_lines():
                if line.startswith(_DATA_PREFIX):
                    yield line[len(_DATA_PREFIX) :].lstrip(" ")
