"""Final transcript -> generated reply -> synthesized speech -> client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar
from collections.abc import Callable, Awaitable

from voice_relay.errors import StageTimeoutError
from voice_relay.state.services import GenerateFn, SynthesizeFn

from .messages import (
    describe_error,
    build_error_message,
    build_audio_message,
    build_audio_complete_message,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
SendFn = Callable[[dict[str, Any]], Awaitable[bool]]


class ReplyPipeline:
    """Runs one reply round trip per call; holds no per-call state.

    Outcomes of `run`:
    - blank transcript or blank reply: nothing is sent
    - success: `audio` then `audio_complete`
    - any generation/synthesis failure: a single `error` message
    """

    def __init__(
        self,
        *,
        generate: GenerateFn,
        synthesize: SynthesizeFn,
        send: SendFn,
        generation_timeout_s: float = 0.0,
        synthesis_timeout_s: float = 0.0,
    ) -> None:
        self._generate = generate
        self._synthesize = synthesize
        self._send = send
        self._generation_timeout_s = max(0.0, float(generation_timeout_s))
        self._synthesis_timeout_s = max(0.0, float(synthesis_timeout_s))

    async def run(self, transcript: str) -> bool:
        """Return True when the synthesized audio reached the client."""
        if not transcript or not transcript.strip():
            logger.info("reply: empty transcript, skipping")
            return False

        logger.info("reply: user said %r", transcript)
        try:
            reply_text = await self._stage(self._generate(transcript), "text generation", self._generation_timeout_s)
            if not reply_text or not reply_text.strip():
                logger.info("reply: generator returned empty text, skipping synthesis")
                return False
            audio = await self._stage(self._synthesize(reply_text), "speech synthesis", self._synthesis_timeout_s)
        except Exception as exc:
            logger.exception("reply: pipeline failed")
            await self._send(build_error_message(describe_error(exc)))
            return False

        if not await self._send(build_audio_message(audio)):
            logger.info("reply: client gone before audio could be sent")
            return False
        await self._send(build_audio_complete_message())
        logger.info("reply: sent %s bytes of audio", len(audio))
        return True

    @staticmethod
    async def _stage(call: Awaitable[T], stage: str, timeout_s: float) -> T:
        if timeout_s <= 0:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=timeout_s)
        except TimeoutError as exc:
            raise StageTimeoutError(stage=stage, timeout_s=timeout_s) from exc


__all__ = ["ReplyPipeline", "SendFn"]
