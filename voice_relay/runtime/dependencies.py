"""Runtime dependency construction (service clients + admission control)."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack

from voice_relay.state import RuntimeDeps
from voice_relay.state.settings import AppSettings
from voice_relay.handlers.connections import ConnectionManager

from .settings import load_settings
from .clients import build_relay_services

logger = logging.getLogger(__name__)


async def build_runtime_deps() -> RuntimeDeps:
    settings: AppSettings = load_settings()

    stack = AsyncExitStack()
    try:
        services = await build_relay_services(settings, stack)
    except BaseException:
        await stack.aclose()
        raise

    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)
    logger.info("runtime: accepting up to %s connections", connections.max_connections)

    return RuntimeDeps(
        connections=connections,
        services=services,
        settings=settings,
        _resources=stack,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
