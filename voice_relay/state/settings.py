"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    static_dir: Path
    ws_path: str


@dataclass(frozen=True, slots=True)
class CredentialSettings:
    gemini_api_key: str
    speech_key_file: Path
    tts_key_file: Path


@dataclass(frozen=True, slots=True)
class RecognitionSettings:
    encoding: str
    sample_rate_hz: int
    language_code: str
    model: str
    enable_automatic_punctuation: bool
    interim_results: bool
    close_timeout_s: float
    max_pending_bytes: int


@dataclass(frozen=True, slots=True)
class GenerationSettings:
    model_name: str
    system_prompt: str
    timeout_s: float


@dataclass(frozen=True, slots=True)
class SynthesisSettings:
    encoding: str
    language_code: str
    voice_name: str
    sample_rate_hz: int
    timeout_s: float


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    serialize_replies: bool


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    credentials: CredentialSettings
    recognition: RecognitionSettings
    generation: GenerationSettings
    synthesis: SynthesisSettings
    limits: LimitsSettings
    websocket: WebSocketSettings


__all__ = [
    "AppSettings",
    "CredentialSettings",
    "GenerationSettings",
    "LimitsSettings",
    "RecognitionSettings",
    "ServerSettings",
    "SynthesisSettings",
    "WebSocketSettings",
]
