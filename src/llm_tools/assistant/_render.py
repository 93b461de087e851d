"""Typewriter-style terminal rendering of streamed text."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from rich.console import Console
from rich.style import Style

from llm_tools.llm._types import TextPiece

DEFAULT_QUEUE_SIZE = 100
CHARS_PER_STEP = 5
SECONDS_PER_STEP = 0.025
THOUGHT_STYLE = "blue"


class FragmentQueue:
    """Bounded queue of text pieces between the stream consumer and the renderer.

    The producer closes it exactly once; iterating ends when the close marker
    is reached. A full queue makes ``put`` wait for the renderer, but ``close``
    never waits, so the producer can always finish even if nobody is reading.
    ``maxsize=0`` means unbounded.
    """

    def __init__(self, maxsize: int = DEFAULT_QUEUE_SIZE) -> None:
        self._queue: asyncio.Queue[TextPiece | None] = asyncio.Queue()
        self._slots = asyncio.Semaphore(maxsize) if maxsize > 0 else None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def put(self, piece: TextPiece) -> None:
        if self._closed:
            raise RuntimeError("put() on a closed FragmentQueue")
        if self._slots is not None:
            await self._slots.acquire()
        self._queue.put_nowait(piece)

    async def close(self) -> None:
        if self._closed:
            raise RuntimeError("FragmentQueue is already closed")
        self._closed = True
        self._queue.put_nowait(None)

    async def __aiter__(self) -> AsyncIterator[TextPiece]:
        while True:
            item = await self._queue.get()
            if item is None:
                return
            if self._slots is not None:
                self._slots.release()
            yield item


class TypewriterRenderer:
    """Prints queued text in small slices with a fixed pause between them.

    Presentation speed stays constant however the network delivers the text.
    Text is written to the console's file as is: tabs, carriage returns and
    escape sequences reach the terminal unchanged. Reasoning text is wrapped
    in ``thought_style`` when the console is a color terminal. When the queue
    is closed a trailing newline is written unless the output already ends
    with one.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        chars_per_step: int = CHARS_PER_STEP,
        seconds_per_step: float = SECONDS_PER_STEP,
        thought_style: str = THOUGHT_STYLE,
    ) -> None:
        if chars_per_step < 1:
            raise ValueError("chars_per_step must be at least 1")
        self._console = console or Console()
        self._chars_per_step = chars_per_step
        self._seconds_per_step = seconds_per_step
        self._thought_style = Style.parse(thought_style)
        self._ended_with_newline = False

    @property
    def ended_with_newline(self) -> bool:
        return self._ended_with_newline

    def _write(self, text: str, *, thought: bool = False) -> None:
        if thought and self._console.is_terminal and self._console.color_system:
            text = self._thought_style.render(text)
        file = self._console.file
        file.write(text)
        file.flush()

    async def _emit(self, piece: TextPiece) -> None:
        text = piece.text
        start = 0
        while start < len(text):
            end = min(start + self._chars_per_step, len(text))
            self._write(text[start:end], thought=piece.thought)
            start = end
            # No pause after the last slice of a piece.
            if start < len(text):
                await asyncio.sleep(self._seconds_per_step)
        self._ended_with_newline = text.endswith("\n")

    async def run(self, queue: FragmentQueue) -> None:
        """Drain ``queue`` until it is closed, then normalize the trailing newline."""
        async for piece in queue:
            if piece.text:
                await self._emit(piece)
        if not self._ended_with_newline:
            self._write("\n")
            self._ended_with_newline = True
