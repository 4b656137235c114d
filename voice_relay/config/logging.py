"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = (os.getenv("LOG_FORMAT") or "").strip() or "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_SHOW_CLIENT_LOGS = "SHOW_CLIENT_LOGS"

# Client libraries that log every RPC at INFO.
NOISY_LOGGERS = ("grpc", "google", "google.auth", "urllib3", "httpx")

__all__ = ["ENV_SHOW_CLIENT_LOGS", "LOG_FORMAT", "LOG_LEVEL", "NOISY_LOGGERS"]
