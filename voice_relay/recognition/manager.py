"""Per-session recognition stream lifecycle (lazy start, feed, restart, finalize)."""

from __future__ import annotations

import asyncio
import logging
import functools
from collections.abc import Callable

from .states import StreamState
from .buffer import AudioFrameBuffer
from .handle import OpenStreamFn, RecognitionHandle
from .events import StreamCallbacks, TranscriptEvent

logger = logging.getLogger(__name__)


class RecognitionStreamManager:
    """Owns at most one live recognition stream for a session.

    Frames that arrive while no stream is ACTIVE are buffered and replayed in
    order once the next stream opens. A stream that ends or errors moves the
    manager to ENDED; the next frame opens a fresh one. Frames the ended stream
    never sent go back to the front of the buffer.
    """

    def __init__(
        self,
        *,
        open_stream: OpenStreamFn,
        on_final_transcript: Callable[[str], None],
        buffer: AudioFrameBuffer | None = None,
    ) -> None:
        self._open_stream = open_stream
        self._on_final_transcript = on_final_transcript
        self._buffer = buffer if buffer is not None else AudioFrameBuffer()

        self._state = StreamState.INACTIVE
        self._handle: RecognitionHandle | None = None
        self._start_task: asyncio.Task | None = None
        # Bumped per stream so late callbacks from a replaced stream are ignored.
        self._generation: int = 0
        self._finalized: bool = False
        self._streams_opened: int = 0

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def streams_opened(self) -> int:
        return self._streams_opened

    @property
    def pending_frames(self) -> int:
        return len(self._buffer)

    def feed(self, frame: bytes) -> None:
        if self._finalized:
            logger.debug("recognition: dropping frame after finalize")
            return

        if self._state is StreamState.ACTIVE and self._handle is not None:
            self._handle.write(frame)
            return

        self._warn_dropped(self._buffer.append(frame))

        if self._state in (StreamState.INACTIVE, StreamState.ENDED):
            self._begin_start()

    async def finalize(self) -> None:
        """Close the session's stream for good; later calls are no-ops."""
        if self._finalized:
            return
        self._finalized = True
        self._generation += 1

        task = self._start_task
        self._start_task = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        handle = self._handle
        self._handle = None
        self._state = StreamState.ENDED
        self._buffer.clear()

        if handle is None:
            return
        try:
            await handle.close()
        except Exception:
            logger.debug("recognition: stream close failed", exc_info=True)

    def _begin_start(self) -> None:
        self._generation += 1
        self._state = StreamState.STARTING
        self._start_task = asyncio.create_task(self._start(self._generation))

    def _callbacks(self, generation: int) -> StreamCallbacks:
        return StreamCallbacks(
            on_transcript=functools.partial(self._handle_transcript, generation),
            on_error=functools.partial(self._handle_error, generation),
            on_end=functools.partial(self._handle_end, generation),
        )

    async def _start(self, generation: int) -> None:
        try:
            handle = await self._open_stream(self._callbacks(generation))
        except asyncio.CancelledError:
            return
        except Exception:
            logger.exception("recognition: failed to open stream")
            if generation == self._generation:
                self._state = StreamState.ENDED
            return

        if self._finalized or generation != self._generation or self._state is not StreamState.STARTING:
            # The stream ended before it was handed over, or the session is gone.
            await self._discard(handle)
            return

        self._handle = handle
        self._state = StreamState.ACTIVE
        self._streams_opened += 1
        replayed = self._buffer.drain_into(handle.write)
        logger.info("recognition: stream #%s active (replayed %s buffered frames)", self._streams_opened, replayed)

    async def _discard(self, handle: RecognitionHandle) -> None:
        try:
            await handle.close()
        except Exception:
            logger.debug("recognition: discarding stream failed", exc_info=True)

    def _handle_transcript(self, generation: int, event: TranscriptEvent) -> None:
        if self._finalized or generation != self._generation:
            return
        if not event.is_final:
            return
        logger.debug("recognition: final transcript (%s chars)", len(event.text))
        self._on_final_transcript(event.text)

    def _handle_error(self, generation: int, exc: BaseException) -> None:
        logger.error("recognition: stream error: %s", exc)
        self._mark_ended(generation)

    def _handle_end(self, generation: int) -> None:
        self._mark_ended(generation)

    def _mark_ended(self, generation: int) -> None:
        if generation != self._generation:
            return
        if self._state is StreamState.ENDED:
            return
        handle = self._handle
        self._handle = None
        self._state = StreamState.ENDED
        unsent = handle.unsent_frames() if handle is not None else []
        logger.info("recognition: stream ended (%s unsent frames kept for the next stream)", len(unsent))
        if unsent:
            self._warn_dropped(self._buffer.requeue(unsent))

    def _warn_dropped(self, dropped: int) -> None:
        if dropped:
            logger.warning(
                "recognition: pending audio over %s bytes; dropped %s oldest bytes",
                self._buffer.max_bytes,
                dropped,
            )


__all__ = ["RecognitionStreamManager"]
