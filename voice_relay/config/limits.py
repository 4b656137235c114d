"""Admission control and reply scheduling configuration."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
ENV_REPLY_SERIALIZE = "REPLY_SERIALIZE"

DEFAULT_MAX_CONCURRENT_CONNECTIONS = 100

# One reply in flight per session; later transcripts wait their turn.
DEFAULT_REPLY_SERIALIZE = True

__all__ = [
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_REPLY_SERIALIZE",
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "ENV_REPLY_SERIALIZE",
]
