from __future__ import annotations

import asyncio

import pytest

from voice_relay.state.settings import WebSocketSettings
from voice_relay.handlers.websocket.lifecycle import WebSocketLifecycle
from voice_relay.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_MAX_DURATION_CODE,
    WS_CLOSE_MAX_DURATION_REASON,
)

from .fakes import FakeWebSocket


class _Clock:
    def __init__(self) -> None:
        self.t = 0.0

    def __call__(self) -> float:
        return self.t


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_on_max_duration() -> None:
    ws = FakeWebSocket()
    settings = WebSocketSettings(idle_timeout_s=9999.0, watchdog_tick_s=0.01, max_connection_duration_s=0.05)
    lifecycle = WebSocketLifecycle(ws, settings)
    lifecycle.start()

    for _ in range(100):
        if ws.close_code is not None:
            break
        await asyncio.sleep(0.01)
    assert ws.close_code == WS_CLOSE_MAX_DURATION_CODE
    assert ws.close_reason == WS_CLOSE_MAX_DURATION_REASON
    assert lifecycle.should_close()

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_idle_timeout_counts_from_last_frame() -> None:
    clock = _Clock()
    settings = WebSocketSettings(idle_timeout_s=10.0, watchdog_tick_s=1.0, max_connection_duration_s=0.0)
    lifecycle = WebSocketLifecycle(FakeWebSocket(), settings, now_fn=clock)

    clock.t = 8.0
    lifecycle.touch()
    clock.t = 15.0
    assert lifecycle.expired() is None

    clock.t = 18.0
    verdict = lifecycle.expired()
    assert verdict is not None
    assert verdict[0] == WS_CLOSE_IDLE_CODE


@pytest.mark.asyncio
async def test_busy_session_is_never_idle() -> None:
    clock = _Clock()
    busy = True
    settings = WebSocketSettings(idle_timeout_s=10.0, watchdog_tick_s=1.0, max_connection_duration_s=0.0)
    lifecycle = WebSocketLifecycle(FakeWebSocket(), settings, is_busy_fn=lambda: busy, now_fn=clock)

    clock.t = 60.0
    assert lifecycle.expired() is None

    busy = False
    assert lifecycle.expired() == (WS_CLOSE_IDLE_CODE, "idle timeout")
