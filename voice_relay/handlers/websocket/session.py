"""One client connection bound to its recognition stream and reply pipeline."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

from voice_relay.state.services import RelayServices
from voice_relay.pipeline.reply import ReplyPipeline
from voice_relay.pipeline.dispatcher import ReplyDispatcher
from voice_relay.recognition.buffer import AudioFrameBuffer
from voice_relay.state.settings import AppSettings
from voice_relay.recognition.manager import RecognitionStreamManager

from .outbound import safe_send_json

logger = logging.getLogger(__name__)


class ConnectionSession:
    """Routes inbound audio to recognition and reply messages back to the socket.

    Owns exactly one buffer, one stream manager and one reply dispatcher for
    the whole connection. `close` is idempotent.
    """

    def __init__(self, ws: WebSocket, *, services: RelayServices, settings: AppSettings) -> None:
        self._ws = ws
        self._closed = False

        pipeline = ReplyPipeline(
            generate=services.generate_reply,
            synthesize=services.synthesize_speech,
            send=self.send,
            generation_timeout_s=settings.generation.timeout_s,
            synthesis_timeout_s=settings.synthesis.timeout_s,
        )
        self._replies = ReplyDispatcher(pipeline.run, serialize=settings.limits.serialize_replies)
        self._recognition = RecognitionStreamManager(
            open_stream=services.open_recognition_stream,
            on_final_transcript=self._replies.submit,
            buffer=AudioFrameBuffer(max_bytes=settings.recognition.max_pending_bytes),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def recognition(self) -> RecognitionStreamManager:
        return self._recognition

    @property
    def replies(self) -> ReplyDispatcher:
        return self._replies

    def feed_audio(self, frame: bytes) -> None:
        if self._closed:
            return
        self._recognition.feed(frame)

    def is_busy(self) -> bool:
        return self._replies.busy

    async def send(self, message: dict[str, Any]) -> bool:
        if self._closed:
            return False
        return await safe_send_json(self._ws, message)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._recognition.finalize()
        self._replies.close()
        logger.debug("session closed after %s recognition streams", self._recognition.streams_opened)


__all__ = ["ConnectionSession"]
