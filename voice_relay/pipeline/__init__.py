from .reply import ReplyPipeline
from .dispatcher import ReplyDispatcher
from .messages import (
    build_error_message,
    build_audio_message,
    build_audio_complete_message,
)

__all__ = [
    "ReplyDispatcher",
    "ReplyPipeline",
    "build_audio_complete_message",
    "build_audio_message",
    "build_error_message",
]
