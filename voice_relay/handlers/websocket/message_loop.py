"""Inbound WebSocket frame loop for one connection."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from .session import ConnectionSession
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)

_DISCONNECT = "websocket.disconnect"


async def _recv_with_watchdog(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[dict[str, Any] | None, bool]:
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=lifecycle.watchdog_tick_s * 2)
        return message, False
    except TimeoutError:
        return None, lifecycle.should_close()


async def run_message_loop(ws: WebSocket, lifecycle: WebSocketLifecycle, session: ConnectionSession) -> int:
    """Feed binary frames into the session until the client goes away.

    Text frames carry no meaning in this protocol and are ignored. Returns the
    number of audio frames received.
    """
    frames = 0
    try:
        while True:
            message, should_exit = await _recv_with_watchdog(ws, lifecycle)
            if should_exit:
                return frames
            if message is None:
                continue
            if message.get("type") == _DISCONNECT:
                return frames

            lifecycle.touch()

            data = message.get("bytes")
            if data is not None:
                if data:
                    session.feed_audio(data)
                    frames += 1
                continue
            logger.debug("ignoring text frame")
    except WebSocketDisconnect:
        return frames
    except Exception:
        # Transport failures end the session quietly; the client is not told.
        logger.warning("WebSocket receive failed; tearing down session", exc_info=True)
        return frames


__all__ = ["run_message_loop"]
