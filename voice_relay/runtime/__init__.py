"""Runtime package.

Keep this module dependency-light: importing `voice_relay.runtime.*` in unit
tests should not require Google credentials.
"""

__all__: list[str] = []
