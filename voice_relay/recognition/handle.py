"""Contract between the stream manager and a concrete recognition engine."""

from __future__ import annotations

from typing import Protocol
from collections.abc import Callable, Awaitable

from .events import StreamCallbacks


class RecognitionHandle(Protocol):
    def write(self, frame: bytes) -> None:
        """Queue one audio frame; must not block."""

    def unsent_frames(self) -> list[bytes]:
        """Take back frames accepted by `write` that never reached the engine.

        Called once the stream has ended; later writes are ignored.
        """

    async def close(self) -> None:
        """Half-close the stream and release it; safe to call more than once."""


OpenStreamFn = Callable[[StreamCallbacks], Awaitable[RecognitionHandle]]

__all__ = ["OpenStreamFn", "RecognitionHandle"]
