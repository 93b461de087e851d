"""Stream consumer: drive the generation stream and feed the renderer."""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import aclosing

import httpx
from rich.console import Console

from llm_tools.assistant._discovery import list_available_models
from llm_tools.assistant._errors import CallFailedError, ModelUnavailableError
from llm_tools.assistant._render import FragmentQueue
from llm_tools.assistant._request import unescape_output
from llm_tools.llm._exceptions import APIError, ModelNotFoundError
from llm_tools.llm._providers._base import BaseProvider
from llm_tools.llm._types import CallMetadata, RequestConfig, TextPiece

logger = logging.getLogger(__name__)


async def stream_content(
    request: RequestConfig,
    provider: BaseProvider,
    queue: FragmentQueue,
    *,
    diagnostics: Console,
) -> CallMetadata:
    """Stream ``request`` through ``provider`` into ``queue`` and return the call metadata.

    Text is unescaped before it is queued. ``queue`` is closed on every exit
    path. A missing model triggers model discovery and raises
    :class:`ModelUnavailableError`; any other failure raises
    :class:`CallFailedError`. Both chain the original exception.
    """
    metadata = CallMetadata()
    start = time.monotonic()
    try:
        async with aclosing(provider.astream_fragments(request)) as fragments:
            async for fragment in fragments:
                for piece in fragment.pieces:
                    if piece.text:
                        await queue.put(TextPiece(unescape_output(piece.text), piece.thought))
                metadata.update(fragment)
    except ModelNotFoundError as exc:
        diagnostics.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        await asyncio.to_thread(list_available_models, provider, diagnostics)
        raise ModelUnavailableError(request.model) from exc
    except (APIError, httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
        raise CallFailedError(request.model, exc) from exc
    finally:
        await queue.close()

    metadata.api_call_time = time.monotonic() - start
    logger.debug("Stream for %s finished in %.3fs", request.model, metadata.api_call_time)
    return metadata
