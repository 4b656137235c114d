"""Recognition stream lifecycle states."""

from __future__ import annotations

from enum import Enum


class StreamState(str, Enum):
    INACTIVE = "inactive"
    STARTING = "starting"
    ACTIVE = "active"
    ENDED = "ended"


__all__ = ["StreamState"]
