"""Speech synthesis configuration.

The voice is a static profile: every reply in the process uses the same
language, voice name, encoding and sample rate.
"""

from __future__ import annotations

ENV_TTS_LANGUAGE = "TTS_LANGUAGE"
ENV_TTS_VOICE = "TTS_VOICE"
ENV_TTS_SAMPLE_RATE_HZ = "TTS_SAMPLE_RATE_HZ"
ENV_SYNTHESIS_TIMEOUT_S = "SYNTHESIS_TIMEOUT_S"

DEFAULT_TTS_LANGUAGE = "te-IN"
DEFAULT_TTS_VOICE = "te-IN-Chirp3-HD-Achernar"
DEFAULT_TTS_SAMPLE_RATE_HZ = 24000
DEFAULT_SYNTHESIS_TIMEOUT_S = 30.0

__all__ = [
    "DEFAULT_SYNTHESIS_TIMEOUT_S",
    "DEFAULT_TTS_LANGUAGE",
    "DEFAULT_TTS_SAMPLE_RATE_HZ",
    "DEFAULT_TTS_VOICE",
    "ENV_SYNTHESIS_TIMEOUT_S",
    "ENV_TTS_LANGUAGE",
    "ENV_TTS_SAMPLE_RATE_HZ",
    "ENV_TTS_VOICE",
]
