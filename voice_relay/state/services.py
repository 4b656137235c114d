"""Process-wide collaborator handles shared by every session."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable, Awaitable

from voice_relay.recognition.handle import OpenStreamFn

GenerateFn = Callable[[str], Awaitable[str]]
SynthesizeFn = Callable[[str], Awaitable[bytes]]


@dataclass(frozen=True, slots=True)
class RelayServices:
    """Stateless, reentrant entry points into the three external services."""

    open_recognition_stream: OpenStreamFn
    generate_reply: GenerateFn
    synthesize_speech: SynthesizeFn


__all__ = ["GenerateFn", "RelayServices", "SynthesizeFn"]
