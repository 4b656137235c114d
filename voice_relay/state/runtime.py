"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from voice_relay.state.settings import AppSettings
    from voice_relay.state.services import RelayServices
    from voice_relay.handlers.connections import ConnectionManager


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    services: RelayServices
    settings: AppSettings
    _resources: AsyncExitStack

    async def shutdown(self) -> None:
        try:
            await self._resources.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
