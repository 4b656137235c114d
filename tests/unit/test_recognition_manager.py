from __future__ import annotations

import asyncio

import pytest

from voice_relay.recognition.states import StreamState
from voice_relay.recognition.buffer import AudioFrameBuffer
from voice_relay.recognition.manager import RecognitionStreamManager

from .fakes import FakeRecognitionEngine, settle


def _manager(engine: FakeRecognitionEngine, transcripts: list[str], **kwargs) -> RecognitionStreamManager:
    return RecognitionStreamManager(open_stream=engine.open, on_final_transcript=transcripts.append, **kwargs)


@pytest.mark.asyncio
async def test_first_frame_opens_stream_and_replays_buffer_in_order() -> None:
    engine = FakeRecognitionEngine()
    engine.gate = asyncio.Event()
    manager = _manager(engine, [])

    assert manager.state is StreamState.INACTIVE
    manager.feed(b"f1")
    manager.feed(b"f2")
    assert manager.state is StreamState.STARTING
    await settle()
    manager.feed(b"f3")
    assert manager.pending_frames == 3

    engine.gate.set()
    await settle()

    assert manager.state is StreamState.ACTIVE
    assert engine.open_calls == 1
    assert engine.latest.frames == [b"f1", b"f2", b"f3"]
    assert manager.pending_frames == 0

    manager.feed(b"f4")
    assert engine.latest.frames == [b"f1", b"f2", b"f3", b"f4"]


@pytest.mark.asyncio
async def test_frame_after_stream_end_opens_new_stream() -> None:
    engine = FakeRecognitionEngine()
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    first = engine.latest
    first.end()
    assert manager.state is StreamState.ENDED

    manager.feed(b"b")
    await settle()

    assert manager.state is StreamState.ACTIVE
    assert manager.streams_opened == 2
    assert first.frames == [b"a"]
    assert engine.latest.frames == [b"b"]


@pytest.mark.asyncio
async def test_stream_error_marks_ended_without_raising() -> None:
    engine = FakeRecognitionEngine()
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    engine.latest.fail(RuntimeError("engine went away"))

    assert manager.state is StreamState.ENDED
    assert not manager.finalized


@pytest.mark.asyncio
async def test_only_final_transcripts_are_forwarded() -> None:
    engine = FakeRecognitionEngine()
    transcripts: list[str] = []
    manager = _manager(engine, transcripts)

    manager.feed(b"a")
    await settle()
    engine.latest.emit("hel", is_final=False)
    engine.latest.emit("hello", is_final=True)

    assert transcripts == ["hello"]


@pytest.mark.asyncio
async def test_callbacks_from_replaced_stream_are_ignored() -> None:
    engine = FakeRecognitionEngine()
    transcripts: list[str] = []
    manager = _manager(engine, transcripts)

    manager.feed(b"a")
    await settle()
    old = engine.latest
    old.end()
    manager.feed(b"b")
    await settle()

    old.emit("late result")
    old.end()

    assert transcripts == []
    assert manager.state is StreamState.ACTIVE


@pytest.mark.asyncio
async def test_open_failure_ends_stream_and_next_frame_retries() -> None:
    engine = FakeRecognitionEngine()
    engine.error = RuntimeError("no credentials")
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    assert manager.state is StreamState.ENDED
    assert manager.pending_frames == 1

    engine.error = None
    manager.feed(b"b")
    await settle()

    assert manager.state is StreamState.ACTIVE
    assert engine.latest.frames == [b"a", b"b"]


@pytest.mark.asyncio
async def test_finalize_is_idempotent_and_stops_feeding() -> None:
    engine = FakeRecognitionEngine()
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    stream = engine.latest

    await manager.finalize()
    await manager.finalize()
    manager.feed(b"b")
    await settle()

    assert manager.finalized
    assert manager.state is StreamState.ENDED
    assert stream.close_calls == 1
    assert stream.frames == [b"a"]
    assert engine.open_calls == 1


@pytest.mark.asyncio
async def test_finalize_while_starting_cancels_open() -> None:
    engine = FakeRecognitionEngine()
    engine.gate = asyncio.Event()
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    await manager.finalize()

    assert manager.state is StreamState.ENDED
    assert manager.pending_frames == 0
    assert engine.streams == []


@pytest.mark.asyncio
async def test_bounded_buffer_drops_oldest_pending_audio() -> None:
    engine = FakeRecognitionEngine()
    engine.gate = asyncio.Event()
    manager = _manager(engine, [], buffer=AudioFrameBuffer(max_bytes=4))

    for frame in (b"aa", b"bb", b"cc"):
        manager.feed(frame)
    engine.gate.set()
    await settle()

    assert engine.latest.frames == [b"bb", b"cc"]


@pytest.mark.asyncio
async def test_frames_unsent_by_ended_stream_go_to_next_stream_first() -> None:
    engine = FakeRecognitionEngine()
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    first = engine.latest
    first.stalled = True
    manager.feed(b"b")
    manager.feed(b"c")
    first.end()

    assert manager.state is StreamState.ENDED
    assert manager.pending_frames == 2

    manager.feed(b"d")
    await settle()

    assert first.frames == [b"a"]
    assert engine.latest is not first
    assert engine.latest.frames == [b"b", b"c", b"d"]


@pytest.mark.asyncio
async def test_error_also_returns_unsent_frames() -> None:
    engine = FakeRecognitionEngine()
    manager = _manager(engine, [])

    manager.feed(b"a")
    await settle()
    engine.latest.stalled = True
    manager.feed(b"b")
    engine.latest.fail(RuntimeError("quota exceeded"))

    assert manager.pending_frames == 1
    manager.feed(b"c")
    await settle()
    assert engine.latest.frames == [b"b", b"c"]
