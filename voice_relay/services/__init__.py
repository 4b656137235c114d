"""Single-shot text generation and speech synthesis clients."""

from .synthesis import GoogleSpeechSynthesizer
from .generation import GeminiTextGenerator

__all__ = ["GeminiTextGenerator", "GoogleSpeechSynthesizer"]
