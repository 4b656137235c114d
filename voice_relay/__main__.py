"""Run the relay with uvicorn: `python -m voice_relay`."""

from __future__ import annotations

import uvicorn

from voice_relay.runtime.settings import load_server_settings


def main() -> None:
    settings = load_server_settings()
    # Logging is configured by the app module; keep uvicorn from replacing it.
    uvicorn.run("voice_relay.server:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
