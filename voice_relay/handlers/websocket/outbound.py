"""Outbound sends that never raise into the caller."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from voice_relay.pipeline.messages import build_error_message

logger = logging.getLogger(__name__)


def is_transport_open(ws: WebSocket) -> bool:
    return ws.client_state == WebSocketState.CONNECTED and ws.application_state == WebSocketState.CONNECTED


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    # Checked right before every send: replies may finish after the client left.
    if not is_transport_open(ws):
        return False
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, message: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(message).decode("utf-8"))


async def reject_connection(ws: WebSocket, *, message: str, close_code: int) -> None:
    # Accept so the client can read why, then close.
    try:
        await ws.accept()
    except Exception:
        return
    await safe_send_json(ws, build_error_message(message))
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = ["is_transport_open", "reject_connection", "safe_send_json", "safe_send_text"]
