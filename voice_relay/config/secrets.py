"""Secrets and credential file configuration."""

from __future__ import annotations

from pathlib import Path

ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_SYSTEM_PROMPT = "SYSTEM_PROMPT"
ENV_GOOGLE_SPEECH_KEY_FILE = "GOOGLE_SPEECH_KEY_FILE"
ENV_GOOGLE_TTS_KEY_FILE = "GOOGLE_TTS_KEY_FILE"

DEFAULT_GOOGLE_SPEECH_KEY_FILE = Path("speech_key.json")
DEFAULT_GOOGLE_TTS_KEY_FILE = Path("tts_key.json")

# Startup aborts when any of these is unset or blank.
REQUIRED_ENV_VARS = (ENV_GEMINI_API_KEY, ENV_SYSTEM_PROMPT)

__all__ = [
    "DEFAULT_GOOGLE_SPEECH_KEY_FILE",
    "DEFAULT_GOOGLE_TTS_KEY_FILE",
    "ENV_GEMINI_API_KEY",
    "ENV_GOOGLE_SPEECH_KEY_FILE",
    "ENV_GOOGLE_TTS_KEY_FILE",
    "ENV_SYSTEM_PROMPT",
    "REQUIRED_ENV_VARS",
]
