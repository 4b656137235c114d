"""Text generation (Gemini) configuration."""

from __future__ import annotations

ENV_GEMINI_MODEL = "GEMINI_MODEL"
ENV_GENERATION_TIMEOUT_S = "GENERATION_TIMEOUT_S"

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GENERATION_TIMEOUT_S = 30.0

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GENERATION_TIMEOUT_S",
    "ENV_GEMINI_MODEL",
    "ENV_GENERATION_TIMEOUT_S",
]
