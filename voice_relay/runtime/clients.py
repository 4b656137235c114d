"""Google Cloud and Gemini client bootstrap."""

from __future__ import annotations

import logging
from pathlib import Path
from contextlib import AsyncExitStack

import google.generativeai as genai
from google.cloud import texttospeech
from google.cloud import speech_v1p1beta1 as speech

from voice_relay.errors import ConfigError
from voice_relay.state.settings import AppSettings
from voice_relay.state.services import RelayServices
from voice_relay.services.synthesis import GoogleSpeechSynthesizer
from voice_relay.services.generation import GeminiTextGenerator
from voice_relay.recognition.google_recognizer import GoogleStreamingRecognizer

logger = logging.getLogger(__name__)


def _require_key_file(path: Path, label: str) -> str:
    if not path.is_file():
        raise ConfigError(f"{label} key file not found at: {path}")
    return str(path)


async def build_relay_services(settings: AppSettings, stack: AsyncExitStack) -> RelayServices:
    """Create the process-wide clients; their transports close with `stack`."""
    speech_key = _require_key_file(settings.credentials.speech_key_file, "Speech-to-Text")
    tts_key = _require_key_file(settings.credentials.tts_key_file, "Text-to-Speech")

    speech_client = speech.SpeechAsyncClient.from_service_account_file(speech_key)
    stack.push_async_callback(speech_client.transport.close)

    tts_client = texttospeech.TextToSpeechAsyncClient.from_service_account_file(tts_key)
    stack.push_async_callback(tts_client.transport.close)

    genai.configure(api_key=settings.credentials.gemini_api_key)
    model = genai.GenerativeModel(
        model_name=settings.generation.model_name,
        system_instruction=settings.generation.system_prompt,
    )

    recognizer = GoogleStreamingRecognizer(client=speech_client, settings=settings.recognition)
    generator = GeminiTextGenerator(model=model)
    synthesizer = GoogleSpeechSynthesizer(client=tts_client, settings=settings.synthesis)

    logger.info(
        "clients: recognition=%s/%s generation=%s voice=%s",
        settings.recognition.language_code,
        settings.recognition.model,
        settings.generation.model_name,
        settings.synthesis.voice_name,
    )
    return RelayServices(
        open_recognition_stream=recognizer.open,
        generate_reply=generator.generate,
        synthesize_speech=synthesizer.synthesize,
    )


__all__ = ["build_relay_services"]
