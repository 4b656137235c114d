"""HTTP server configuration (env names and defaults only)."""

from __future__ import annotations

from pathlib import Path

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_STATIC_DIR = "STATIC_DIR"
ENV_WS_ENDPOINT_PATH = "WS_ENDPOINT_PATH"

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8080
DEFAULT_STATIC_DIR = Path("public")
# Browser clients connect to the page origin, so the socket shares the root path.
DEFAULT_WS_ENDPOINT_PATH = "/"

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_STATIC_DIR",
    "DEFAULT_WS_ENDPOINT_PATH",
    "ENV_HOST",
    "ENV_PORT",
    "ENV_STATIC_DIR",
    "ENV_WS_ENDPOINT_PATH",
]
