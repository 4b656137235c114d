"""Environment parsing for runtime settings.

Env variable names and defaults live in `voice_relay/config/*`; this module
resolves them into the structured dataclasses the rest of the server uses.
"""

from __future__ import annotations

import os
from pathlib import Path

from voice_relay.errors import ConfigError
from voice_relay.config.audio import INPUT_ENCODING, OUTPUT_ENCODING, INPUT_SAMPLE_RATE_HZ, INPUT_BYTES_PER_SECOND
from voice_relay.config.secrets import (
    ENV_SYSTEM_PROMPT,
    REQUIRED_ENV_VARS,
    ENV_GEMINI_API_KEY,
    ENV_GOOGLE_TTS_KEY_FILE,
    ENV_GOOGLE_SPEECH_KEY_FILE,
    DEFAULT_GOOGLE_TTS_KEY_FILE,
    DEFAULT_GOOGLE_SPEECH_KEY_FILE,
)
from voice_relay.state.settings import (
    AppSettings,
    LimitsSettings,
    ServerSettings,
    SynthesisSettings,
    WebSocketSettings,
    CredentialSettings,
    GenerationSettings,
    RecognitionSettings,
)
from voice_relay.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_STATIC_DIR,
    DEFAULT_STATIC_DIR,
    ENV_WS_ENDPOINT_PATH,
    DEFAULT_WS_ENDPOINT_PATH,
)
from voice_relay.config.synthesis import (
    ENV_TTS_VOICE,
    DEFAULT_TTS_VOICE,
    ENV_TTS_LANGUAGE,
    DEFAULT_TTS_LANGUAGE,
    ENV_TTS_SAMPLE_RATE_HZ,
    ENV_SYNTHESIS_TIMEOUT_S,
    DEFAULT_TTS_SAMPLE_RATE_HZ,
    DEFAULT_SYNTHESIS_TIMEOUT_S,
)
from voice_relay.config.generation import (
    ENV_GEMINI_MODEL,
    DEFAULT_GEMINI_MODEL,
    ENV_GENERATION_TIMEOUT_S,
    DEFAULT_GENERATION_TIMEOUT_S,
)
from voice_relay.config.limits import (
    ENV_REPLY_SERIALIZE,
    DEFAULT_REPLY_SERIALIZE,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
)
from voice_relay.config.websocket import (
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_WS_WATCHDOG_TICK_S,
    ENV_WS_MAX_CONNECTION_DURATION_S,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)
from voice_relay.config.recognition import (
    ENV_RECOGNITION_MODEL,
    DEFAULT_RECOGNITION_MODEL,
    ENV_RECOGNITION_LANGUAGE,
    DEFAULT_RECOGNITION_LANGUAGE,
    ENV_RECOGNITION_PUNCTUATION,
    DEFAULT_RECOGNITION_PUNCTUATION,
    ENV_RECOGNITION_CLOSE_TIMEOUT_S,
    ENV_RECOGNITION_INTERIM_RESULTS,
    DEFAULT_RECOGNITION_CLOSE_TIMEOUT_S,
    DEFAULT_RECOGNITION_INTERIM_RESULTS,
    ENV_RECOGNITION_MAX_PENDING_SECONDS,
    DEFAULT_RECOGNITION_MAX_PENDING_SECONDS,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _path_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def _require_env() -> dict[str, str]:
    values = {name: (os.getenv(name) or "").strip() for name in REQUIRED_ENV_VARS}
    missing = tuple(name for name, value in values.items() if not value)
    if missing:
        raise ConfigError("Missing required environment variables", missing=missing)
    return values


def load_server_settings() -> ServerSettings:
    """Settings needed before the app is built (bind address, routes)."""
    ws_path = _str_env(ENV_WS_ENDPOINT_PATH, DEFAULT_WS_ENDPOINT_PATH)
    if not ws_path.startswith("/"):
        ws_path = f"/{ws_path}"
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=_int_env(ENV_PORT, DEFAULT_PORT),
        static_dir=_path_env(ENV_STATIC_DIR, DEFAULT_STATIC_DIR),
        ws_path=ws_path,
    )


def _load_recognition_settings() -> RecognitionSettings:
    max_pending_s = max(0.0, _float_env(ENV_RECOGNITION_MAX_PENDING_SECONDS, DEFAULT_RECOGNITION_MAX_PENDING_SECONDS))
    return RecognitionSettings(
        encoding=INPUT_ENCODING,
        sample_rate_hz=INPUT_SAMPLE_RATE_HZ,
        language_code=_str_env(ENV_RECOGNITION_LANGUAGE, DEFAULT_RECOGNITION_LANGUAGE),
        model=_str_env(ENV_RECOGNITION_MODEL, DEFAULT_RECOGNITION_MODEL),
        enable_automatic_punctuation=_bool_env(ENV_RECOGNITION_PUNCTUATION, DEFAULT_RECOGNITION_PUNCTUATION),
        interim_results=_bool_env(ENV_RECOGNITION_INTERIM_RESULTS, DEFAULT_RECOGNITION_INTERIM_RESULTS),
        close_timeout_s=_float_env(ENV_RECOGNITION_CLOSE_TIMEOUT_S, DEFAULT_RECOGNITION_CLOSE_TIMEOUT_S),
        max_pending_bytes=int(max_pending_s * INPUT_BYTES_PER_SECOND),
    )


def _load_generation_settings(system_prompt: str) -> GenerationSettings:
    return GenerationSettings(
        model_name=_str_env(ENV_GEMINI_MODEL, DEFAULT_GEMINI_MODEL),
        system_prompt=system_prompt,
        timeout_s=_float_env(ENV_GENERATION_TIMEOUT_S, DEFAULT_GENERATION_TIMEOUT_S),
    )


def _load_synthesis_settings() -> SynthesisSettings:
    return SynthesisSettings(
        encoding=OUTPUT_ENCODING,
        language_code=_str_env(ENV_TTS_LANGUAGE, DEFAULT_TTS_LANGUAGE),
        voice_name=_str_env(ENV_TTS_VOICE, DEFAULT_TTS_VOICE),
        sample_rate_hz=_int_env(ENV_TTS_SAMPLE_RATE_HZ, DEFAULT_TTS_SAMPLE_RATE_HZ),
        timeout_s=_float_env(ENV_SYNTHESIS_TIMEOUT_S, DEFAULT_SYNTHESIS_TIMEOUT_S),
    )


def _load_limits_settings() -> LimitsSettings:
    return LimitsSettings(
        max_concurrent_connections=_int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS),
        serialize_replies=_bool_env(ENV_REPLY_SERIALIZE, DEFAULT_REPLY_SERIALIZE),
    )


def _load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings(
        idle_timeout_s=_float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S),
        watchdog_tick_s=_float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S),
        max_connection_duration_s=_float_env(ENV_WS_MAX_CONNECTION_DURATION_S, DEFAULT_WS_MAX_CONNECTION_DURATION_S),
    )


def load_settings() -> AppSettings:
    """Resolve every setting; raises ConfigError when a required value is missing."""
    required = _require_env()
    return AppSettings(
        server=load_server_settings(),
        credentials=CredentialSettings(
            gemini_api_key=required[ENV_GEMINI_API_KEY],
            speech_key_file=_path_env(ENV_GOOGLE_SPEECH_KEY_FILE, DEFAULT_GOOGLE_SPEECH_KEY_FILE),
            tts_key_file=_path_env(ENV_GOOGLE_TTS_KEY_FILE, DEFAULT_GOOGLE_TTS_KEY_FILE),
        ),
        recognition=_load_recognition_settings(),
        generation=_load_generation_settings(required[ENV_SYSTEM_PROMPT]),
        synthesis=_load_synthesis_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
    )


__all__ = ["load_server_settings", "load_settings"]
