from __future__ import annotations

import pytest

from voice_relay.handlers.connections import ConnectionManager


@pytest.mark.asyncio
async def test_connection_manager_caps_active_sockets() -> None:
    manager = ConnectionManager(max_connections=2)
    a, b, c = object(), object(), object()

    assert await manager.connect(a)
    assert await manager.connect(b)
    assert not await manager.connect(c)
    assert manager.get_connection_count() == 2

    await manager.disconnect(a)
    assert await manager.connect(c)


@pytest.mark.asyncio
async def test_connection_manager_connect_is_reentrant_per_socket() -> None:
    manager = ConnectionManager(max_connections=1)
    ws = object()

    assert await manager.connect(ws)
    assert await manager.connect(ws)
    assert manager.get_connection_count() == 1

    await manager.disconnect(ws)
    await manager.disconnect(ws)
    assert manager.get_connection_count() == 0
