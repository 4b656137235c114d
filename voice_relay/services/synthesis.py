"""Google Cloud Text-to-Speech synthesis with a static voice profile."""

from __future__ import annotations

from typing import Any

from google.cloud import texttospeech

from voice_relay.state.settings import SynthesisSettings


class GoogleSpeechSynthesizer:
    def __init__(self, *, client: Any, settings: SynthesisSettings) -> None:
        self._client = client
        self._voice = texttospeech.VoiceSelectionParams(
            language_code=settings.language_code,
            name=settings.voice_name,
        )
        self._audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding[settings.encoding],
            sample_rate_hertz=settings.sample_rate_hz,
        )

    async def synthesize(self, text: str) -> bytes:
        response = await self._client.synthesize_speech(
            input=texttospeech.SynthesisInput(text=text),
            voice=self._voice,
            audio_config=self._audio_config,
        )
        return bytes(response.audio_content)


__all__ = ["GoogleSpeechSynthesizer"]
