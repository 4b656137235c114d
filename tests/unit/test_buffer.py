from __future__ import annotations

from voice_relay.recognition.buffer import AudioFrameBuffer


def test_unbounded_buffer_keeps_every_frame_in_order() -> None:
    buf = AudioFrameBuffer()
    for frame in (b"a", b"bb", b"ccc"):
        assert buf.append(frame) == 0

    written: list[bytes] = []
    assert buf.drain_into(written.append) == 3
    assert written == [b"a", b"bb", b"ccc"]
    assert len(buf) == 0
    assert buf.size_bytes == 0


def test_drain_picks_up_frames_appended_while_draining() -> None:
    buf = AudioFrameBuffer()
    buf.append(b"1")
    buf.append(b"2")
    written: list[bytes] = []

    def write(frame: bytes) -> None:
        written.append(frame)
        if frame == b"1":
            buf.append(b"3")

    buf.drain_into(write)
    assert written == [b"1", b"2", b"3"]


def test_bounded_buffer_drops_oldest_frames() -> None:
    buf = AudioFrameBuffer(max_bytes=4)
    buf.append(b"aa")
    buf.append(b"bb")
    dropped = buf.append(b"cc")

    assert dropped == 2
    assert buf.size_bytes == 4
    written: list[bytes] = []
    buf.drain_into(written.append)
    assert written == [b"bb", b"cc"]


def test_bounded_buffer_always_keeps_newest_frame() -> None:
    buf = AudioFrameBuffer(max_bytes=2)
    buf.append(b"a")
    dropped = buf.append(b"oversized")

    assert dropped == 1
    assert len(buf) == 1
    assert buf.size_bytes == len(b"oversized")


def test_clear_empties_buffer() -> None:
    buf = AudioFrameBuffer()
    buf.append(b"abc")
    buf.clear()
    assert len(buf) == 0
    assert buf.size_bytes == 0


def test_requeue_puts_frames_ahead_of_newer_audio() -> None:
    buf = AudioFrameBuffer()
    buf.append(b"c")
    assert buf.requeue([b"a", b"b"]) == 0
    assert buf.size_bytes == 3

    written: list[bytes] = []
    buf.drain_into(written.append)
    assert written == [b"a", b"b", b"c"]


def test_requeue_respects_bound() -> None:
    buf = AudioFrameBuffer(max_bytes=4)
    buf.append(b"cc")
    dropped = buf.requeue([b"aa", b"bb"])

    assert dropped == 2
    written: list[bytes] = []
    buf.drain_into(written.append)
    assert written == [b"bb", b"cc"]
