"""One Google Cloud Speech streaming_recognize call exposed as a RecognitionHandle."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import AsyncIterator

from google.cloud import speech_v1p1beta1 as speech

from .events import StreamCallbacks, TranscriptEvent

logger = logging.getLogger(__name__)


class GoogleRecognitionStream:
    """Feeds queued audio into a bidirectional recognition call.

    The first request carries the streaming config; every later request carries
    one audio frame. A `None` sentinel ends the request iterator, which is how
    the server is told no more audio will follow.
    """

    def __init__(
        self,
        *,
        client: Any,
        streaming_config: speech.StreamingRecognitionConfig,
        callbacks: StreamCallbacks,
        close_timeout_s: float,
    ) -> None:
        self._client = client
        self._streaming_config = streaming_config
        self._callbacks = callbacks
        self._close_timeout_s = max(0.0, float(close_timeout_s))
        self._queue: asyncio.Queue[bytes | None] = asyncio.Queue()
        self._task: asyncio.Task | None = None
        self._input_closed = False
        self._ended = False

    @property
    def ended(self) -> bool:
        return self._ended

    async def start(self) -> None:
        responses = await self._client.streaming_recognize(requests=self._requests())
        self._task = asyncio.create_task(self._pump(responses))

    def write(self, frame: bytes) -> None:
        if self._input_closed or self._ended:
            logger.debug("recognition: write after stream end ignored")
            return
        self._queue.put_nowait(frame)

    def unsent_frames(self) -> list[bytes]:
        # Frames still queued when the call ended were never sent to the engine.
        self._input_closed = True
        frames: list[bytes] = []
        while True:
            try:
                frame = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                break
            if frame is not None:
                frames.append(frame)
        self._queue.put_nowait(None)
        return frames

    async def close(self) -> None:
        if not self._input_closed:
            self._input_closed = True
            self._queue.put_nowait(None)

        task = self._task
        if task is None or task.done():
            return
        try:
            await asyncio.wait_for(asyncio.shield(task), timeout=self._close_timeout_s)
        except TimeoutError:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

    async def _requests(self) -> AsyncIterator[speech.StreamingRecognizeRequest]:
        yield speech.StreamingRecognizeRequest(streaming_config=self._streaming_config)
        while True:
            frame = await self._queue.get()
            if frame is None:
                return
            yield speech.StreamingRecognizeRequest(audio_content=frame)

    async def _pump(self, responses: Any) -> None:
        try:
            async for response in responses:
                for result in response.results:
                    if not result.alternatives:
                        continue
                    event = TranscriptEvent(
                        text=result.alternatives[0].transcript,
                        is_final=bool(result.is_final),
                    )
                    self._callbacks.on_transcript(event)
        except asyncio.CancelledError:
            return
        except Exception as exc:
            self._callbacks.on_error(exc)
        finally:
            self._ended = True
            self._callbacks.on_end()


__all__ = ["GoogleRecognitionStream"]
