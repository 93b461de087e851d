"""Run one request end to end: stream, render, then hand back the metadata."""

from __future__ import annotations

import asyncio

from rich.console import Console

from llm_tools.assistant._render import DEFAULT_QUEUE_SIZE, FragmentQueue, TypewriterRenderer
from llm_tools.assistant._stream import stream_content
from llm_tools.llm._providers._base import BaseProvider
from llm_tools.llm._types import CallMetadata, RequestConfig


async def run_request(
    request: RequestConfig,
    provider: BaseProvider,
    *,
    renderer: TypewriterRenderer | None = None,
    diagnostics: Console | None = None,
    queue_size: int = DEFAULT_QUEUE_SIZE,
) -> CallMetadata:
    """Stream ``request`` while rendering it concurrently.

    Returns (or raises) only after the renderer has drained the queue and
    written its trailing newline, so anything printed afterwards starts on
    its own line. If the renderer itself fails (a closed stdout, say), the
    stream is abandoned and the renderer's error is raised.
    """
    renderer = renderer or TypewriterRenderer()
    diagnostics = diagnostics or Console(stderr=True)
    queue = FragmentQueue(queue_size)
    render_task = asyncio.create_task(renderer.run(queue))
    stream_task = asyncio.create_task(
        stream_content(request, provider, queue, diagnostics=diagnostics)
    )

    await asyncio.wait({render_task, stream_task}, return_when=asyncio.FIRST_COMPLETED)
    if not stream_task.done() and render_task.exception() is not None:
        stream_task.cancel()
        await asyncio.gather(stream_task, return_exceptions=True)
        await render_task

    try:
        return await stream_task
    finally:
        await render_task
