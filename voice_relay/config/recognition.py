"""Streaming speech recognition configuration (env names and defaults only)."""

from __future__ import annotations

ENV_RECOGNITION_LANGUAGE = "RECOGNITION_LANGUAGE"
ENV_RECOGNITION_MODEL = "RECOGNITION_MODEL"
ENV_RECOGNITION_PUNCTUATION = "RECOGNITION_PUNCTUATION"
ENV_RECOGNITION_INTERIM_RESULTS = "RECOGNITION_INTERIM_RESULTS"
ENV_RECOGNITION_CLOSE_TIMEOUT_S = "RECOGNITION_CLOSE_TIMEOUT_S"
ENV_RECOGNITION_MAX_PENDING_SECONDS = "RECOGNITION_MAX_PENDING_SECONDS"

DEFAULT_RECOGNITION_LANGUAGE = "en-US"
DEFAULT_RECOGNITION_MODEL = "latest_long"
DEFAULT_RECOGNITION_PUNCTUATION = True
# Only final results drive replies; interim results are dropped by the manager anyway.
DEFAULT_RECOGNITION_INTERIM_RESULTS = False

# How long a half-closed stream may keep delivering results before it is cancelled.
DEFAULT_RECOGNITION_CLOSE_TIMEOUT_S = 2.0

# Audio held while no stream is active. 0 keeps every frame (unbounded).
DEFAULT_RECOGNITION_MAX_PENDING_SECONDS = 0.0

__all__ = [
    "DEFAULT_RECOGNITION_CLOSE_TIMEOUT_S",
    "DEFAULT_RECOGNITION_INTERIM_RESULTS",
    "DEFAULT_RECOGNITION_LANGUAGE",
    "DEFAULT_RECOGNITION_MAX_PENDING_SECONDS",
    "DEFAULT_RECOGNITION_MODEL",
    "DEFAULT_RECOGNITION_PUNCTUATION",
    "ENV_RECOGNITION_CLOSE_TIMEOUT_S",
    "ENV_RECOGNITION_INTERIM_RESULTS",
    "ENV_RECOGNITION_LANGUAGE",
    "ENV_RECOGNITION_MAX_PENDING_SECONDS",
    "ENV_RECOGNITION_MODEL",
    "ENV_RECOGNITION_PUNCTUATION",
]
