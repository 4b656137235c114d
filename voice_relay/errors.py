"""Shared error types for the voice relay server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConfigError(Exception):
    """Raised at startup when required configuration or credential material is missing."""

    message: str
    missing: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.missing:
            return self.message
        return f"{self.message}: {', '.join(self.missing)}"


@dataclass(frozen=True, slots=True)
class StageTimeoutError(Exception):
    """Raised when a reply pipeline stage exceeds its time budget."""

    stage: str
    timeout_s: float

    def __str__(self) -> str:
        return f"{self.stage} timed out after {self.timeout_s:g}s"


__all__ = ["ConfigError", "StageTimeoutError"]
