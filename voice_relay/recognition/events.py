"""Recognition notifications (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class TranscriptEvent:
    text: str
    is_final: bool


@dataclass(frozen=True, slots=True)
class StreamCallbacks:
    """Notifications one recognition stream delivers to its owner.

    `on_error` may be followed by `on_end`; owners must tolerate either order
    and repeated calls.
    """

    on_transcript: Callable[[TranscriptEvent], None]
    on_error: Callable[[BaseException], None]
    on_end: Callable[[], None]


__all__ = ["StreamCallbacks", "TranscriptEvent"]
