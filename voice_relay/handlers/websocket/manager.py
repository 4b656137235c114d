"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from voice_relay.state import RuntimeDeps
from voice_relay.config.websocket import WS_CLOSE_BUSY_CODE, WS_CLOSE_BUSY_REASON

from .session import ConnectionSession
from .outbound import reject_connection
from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def _admit(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.connections.connect(ws):
        await reject_connection(ws, message=WS_CLOSE_BUSY_REASON, close_code=WS_CLOSE_BUSY_CODE)
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    lifecycle: WebSocketLifecycle | None = None
    session: ConnectionSession | None = None
    admitted = False
    frames = 0
    try:
        if not await _admit(ws, runtime_deps):
            return
        admitted = True

        session = ConnectionSession(ws, services=runtime_deps.services, settings=runtime_deps.settings)
        lifecycle = WebSocketLifecycle(ws, runtime_deps.settings.websocket, is_busy_fn=session.is_busy)
        lifecycle.start()

        logger.info("Client connected. Active: %s", runtime_deps.connections.get_connection_count())
        frames = await run_message_loop(ws, lifecycle, session)
    finally:
        if session is not None:
            try:
                await session.close()
            except Exception:
                logger.exception("session teardown failed")

        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        if admitted:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.disconnect(ws)
            logger.info(
                "Client disconnected after %s audio frames. Active: %s",
                frames,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
