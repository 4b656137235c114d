from __future__ import annotations

from contextlib import AsyncExitStack

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from voice_relay import server
from voice_relay.state import RuntimeDeps
from voice_relay.state.services import RelayServices
from voice_relay.config.websocket import WS_CLOSE_BUSY_CODE
from voice_relay.handlers.connections import ConnectionManager

from .fakes import FakeRecognitionEngine, make_settings


async def _generate(text: str) -> str:
    return f"you said {text}"


async def _synthesize(text: str) -> bytes:
    return b"\x01\x02"


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    engine = FakeRecognitionEngine(final_on_write="hello")
    settings = make_settings(max_concurrent_connections=1)

    async def build_runtime_deps() -> RuntimeDeps:
        return RuntimeDeps(
            connections=ConnectionManager(max_connections=settings.limits.max_concurrent_connections),
            services=RelayServices(
                open_recognition_stream=engine.open,
                generate_reply=_generate,
                synthesize_speech=_synthesize,
            ),
            settings=settings,
            _resources=AsyncExitStack(),
        )

    monkeypatch.setattr(server, "build_runtime_deps", build_runtime_deps)
    with TestClient(server.app) as test_client:
        yield test_client


def test_health_endpoints(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/healthz").json() == {"status": "ok"}


def test_audio_frame_round_trips_to_synthesized_reply(client: TestClient) -> None:
    with client.websocket_connect("/") as ws:
        ws.send_bytes(b"\x00\x00\x00\x00")
        assert ws.receive_json() == {"type": "audio", "data": "AQI="}
        assert ws.receive_json() == {"type": "audio_complete"}


def test_text_frames_are_ignored(client: TestClient) -> None:
    with client.websocket_connect("/") as ws:
        ws.send_text("hello?")
        ws.send_bytes(b"\x00\x00")
        assert ws.receive_json()["type"] == "audio"


def test_connection_over_capacity_is_rejected(client: TestClient) -> None:
    with client.websocket_connect("/") as first:
        with client.websocket_connect("/") as second:
            assert second.receive_json() == {"type": "error", "message": "server at capacity"}
            with pytest.raises(WebSocketDisconnect) as exc:
                second.receive_text()
            assert exc.value.code == WS_CLOSE_BUSY_CODE
        first.send_bytes(b"\x00\x00")
        assert first.receive_json()["type"] == "audio"
