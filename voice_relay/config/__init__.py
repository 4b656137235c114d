"""Configuration module exports (env variable names and defaults only)."""

from .audio import INPUT_SAMPLE_RATE_HZ, INPUT_BYTES_PER_SECOND
from .server import DEFAULT_PORT, DEFAULT_HOST

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "INPUT_BYTES_PER_SECOND",
    "INPUT_SAMPLE_RATE_HZ",
]
