from __future__ import annotations

import asyncio
from typing import Any

import pytest

from voice_relay.pipeline.reply import ReplyPipeline


class _Recorder:
    def __init__(self, *, reply: str = "hi there", audio: bytes = b"\x01\x02", connected: bool = True) -> None:
        self.reply = reply
        self.audio = audio
        self.connected = connected
        self.generated: list[str] = []
        self.synthesized: list[str] = []
        self.sent: list[dict[str, Any]] = []
        self.generate_error: BaseException | None = None
        self.synthesize_error: BaseException | None = None
        self.generate_delay_s = 0.0

    async def generate(self, text: str) -> str:
        self.generated.append(text)
        if self.generate_delay_s:
            await asyncio.sleep(self.generate_delay_s)
        if self.generate_error is not None:
            raise self.generate_error
        return self.reply

    async def synthesize(self, text: str) -> bytes:
        self.synthesized.append(text)
        if self.synthesize_error is not None:
            raise self.synthesize_error
        return self.audio

    async def send(self, message: dict[str, Any]) -> bool:
        if not self.connected:
            return False
        self.sent.append(message)
        return True

    def pipeline(self, **kwargs: float) -> ReplyPipeline:
        return ReplyPipeline(generate=self.generate, synthesize=self.synthesize, send=self.send, **kwargs)


@pytest.mark.asyncio
@pytest.mark.parametrize("transcript", ["", "   ", "\n\t"])
async def test_blank_transcript_sends_nothing(transcript: str) -> None:
    rec = _Recorder()
    assert await rec.pipeline().run(transcript) is False
    assert rec.generated == []
    assert rec.sent == []


@pytest.mark.asyncio
@pytest.mark.parametrize("reply", ["", "  "])
async def test_blank_reply_skips_synthesis(reply: str) -> None:
    rec = _Recorder(reply=reply)
    assert await rec.pipeline().run("hello") is False
    assert rec.generated == ["hello"]
    assert rec.synthesized == []
    assert rec.sent == []


@pytest.mark.asyncio
async def test_success_sends_audio_then_complete() -> None:
    rec = _Recorder()
    assert await rec.pipeline().run("hello") is True
    assert rec.synthesized == ["hi there"]
    assert rec.sent == [{"type": "audio", "data": "AQI="}, {"type": "audio_complete"}]


@pytest.mark.asyncio
async def test_synthesis_failure_sends_exactly_one_error() -> None:
    rec = _Recorder()
    rec.synthesize_error = RuntimeError("quota exceeded")
    assert await rec.pipeline().run("hello") is False
    assert rec.sent == [{"type": "error", "message": "quota exceeded"}]


@pytest.mark.asyncio
async def test_generation_failure_without_message_uses_exception_name() -> None:
    rec = _Recorder()
    rec.generate_error = ValueError()
    await rec.pipeline().run("hello")
    assert rec.sent == [{"type": "error", "message": "ValueError"}]
    assert rec.synthesized == []


@pytest.mark.asyncio
async def test_generation_timeout_reports_stage() -> None:
    rec = _Recorder()
    rec.generate_delay_s = 1.0
    assert await rec.pipeline(generation_timeout_s=0.01).run("hello") is False
    assert rec.sent == [{"type": "error", "message": "text generation timed out after 0.01s"}]


@pytest.mark.asyncio
async def test_closed_transport_drops_audio_silently() -> None:
    rec = _Recorder(connected=False)
    assert await rec.pipeline().run("hello") is False
    assert rec.synthesized == ["hi there"]
    assert rec.sent == []
