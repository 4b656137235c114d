"""Opens Google Cloud Speech streaming recognition sessions."""

from __future__ import annotations

from typing import Any

from google.cloud import speech_v1p1beta1 as speech

from voice_relay.state.settings import RecognitionSettings

from .events import StreamCallbacks
from .google_stream import GoogleRecognitionStream


def build_streaming_config(settings: RecognitionSettings) -> speech.StreamingRecognitionConfig:
    config = speech.RecognitionConfig(
        encoding=speech.RecognitionConfig.AudioEncoding[settings.encoding],
        sample_rate_hertz=settings.sample_rate_hz,
        language_code=settings.language_code,
        enable_automatic_punctuation=settings.enable_automatic_punctuation,
        model=settings.model,
    )
    return speech.StreamingRecognitionConfig(config=config, interim_results=settings.interim_results)


class GoogleStreamingRecognizer:
    """Shared across sessions; every `open` starts an independent call."""

    def __init__(self, *, client: Any, settings: RecognitionSettings) -> None:
        self._client = client
        self._settings = settings
        self._streaming_config = build_streaming_config(settings)

    async def open(self, callbacks: StreamCallbacks) -> GoogleRecognitionStream:
        stream = GoogleRecognitionStream(
            client=self._client,
            streaming_config=self._streaming_config,
            callbacks=callbacks,
            close_timeout_s=self._settings.close_timeout_s,
        )
        await stream.start()
        return stream


__all__ = ["GoogleStreamingRecognizer", "build_streaming_config"]
