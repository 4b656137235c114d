"""Audio held while no recognition stream is accepting input."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable


class AudioFrameBuffer:
    """FIFO of raw audio frames.

    Unbounded when max_bytes <= 0. When bounded, the oldest frames are dropped
    until the buffered audio fits; the newest frame is always kept.
    """

    def __init__(self, *, max_bytes: int = 0) -> None:
        self._frames: deque[bytes] = deque()
        self._size_bytes: int = 0
        self._max_bytes = max(0, int(max_bytes))

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def size_bytes(self) -> int:
        return self._size_bytes

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    def append(self, frame: bytes) -> int:
        """Store a frame and return how many bytes the bound evicted."""
        self._frames.append(frame)
        self._size_bytes += len(frame)
        return self._enforce_bound()

    def requeue(self, frames: list[bytes]) -> int:
        """Put frames back at the front, ahead of anything buffered since.

        Returns how many bytes the bound evicted, like `append`.
        """
        for frame in reversed(frames):
            self._frames.appendleft(frame)
            self._size_bytes += len(frame)
        return self._enforce_bound()

    def drain_into(self, write: Callable[[bytes], None]) -> int:
        # Each frame leaves the deque before it is written, so frames appended
        # from inside `write` are picked up by this same loop exactly once.
        written = 0
        while self._frames:
            frame = self._frames.popleft()
            self._size_bytes -= len(frame)
            write(frame)
            written += 1
        self._size_bytes = max(0, self._size_bytes)
        return written

    def clear(self) -> None:
        self._frames.clear()
        self._size_bytes = 0

    def _enforce_bound(self) -> int:
        if self._max_bytes <= 0:
            return 0
        dropped = 0
        while len(self._frames) > 1 and self._size_bytes > self._max_bytes:
            old = self._frames.popleft()
            self._size_bytes -= len(old)
            dropped += len(old)
        return dropped


__all__ = ["AudioFrameBuffer"]
