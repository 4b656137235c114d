"""Outbound JSON message builders."""

from __future__ import annotations

import base64
from typing import Any

from voice_relay.config.websocket import (
    WS_KEY_DATA,
    WS_KEY_TYPE,
    WS_MSG_AUDIO,
    WS_MSG_ERROR,
    WS_KEY_MESSAGE,
    WS_MSG_AUDIO_COMPLETE,
)


def build_audio_message(audio: bytes) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_MSG_AUDIO, WS_KEY_DATA: base64.b64encode(audio).decode("ascii")}


def build_audio_complete_message() -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_MSG_AUDIO_COMPLETE}


def build_error_message(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_MSG_ERROR, WS_KEY_MESSAGE: message}


def describe_error(exc: BaseException) -> str:
    text = str(exc).strip()
    return text or type(exc).__name__


__all__ = [
    "build_audio_complete_message",
    "build_audio_message",
    "build_error_message",
    "describe_error",
]
