"""Streaming recognition: pending-audio buffer and per-session stream lifecycle.

Keep this package engine-agnostic; Google-specific code lives in
`google_stream` and `google_recognizer` and is only imported by the runtime.
"""

from .states import StreamState
from .buffer import AudioFrameBuffer
from .manager import RecognitionStreamManager
from .events import StreamCallbacks, TranscriptEvent
from .handle import OpenStreamFn, RecognitionHandle

__all__ = [
    "AudioFrameBuffer",
    "OpenStreamFn",
    "RecognitionHandle",
    "RecognitionStreamManager",
    "StreamCallbacks",
    "StreamState",
    "TranscriptEvent",
]
