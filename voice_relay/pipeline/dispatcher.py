"""Admission of reply pipeline runs for one session."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections import deque
from collections.abc import Callable, Awaitable

logger = logging.getLogger(__name__)

RunFn = Callable[[str], Awaitable[Any]]

# Runs left in flight by closed sessions; the loop only holds weak task refs.
_detached_runs: set[asyncio.Task] = set()


def _forget_detached(task: asyncio.Task) -> None:
    _detached_runs.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("reply: detached run failed", exc_info=exc)


class ReplyDispatcher:
    """Schedules reply runs as transcripts arrive.

    Serialized (the default): transcripts queue up and a single worker runs
    them in arrival order, so replies reach the client in the order the user
    spoke. Concurrent: each transcript gets its own task and replies go out in
    completion order.

    Closing never cancels a run that already started; it only stops new ones.
    """

    def __init__(self, run: RunFn, *, serialize: bool = True) -> None:
        self._run = run
        self._serialize = bool(serialize)

        self._pending: deque[str] = deque()
        self._wakeup = asyncio.Event()
        self._worker: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()
        self._inflight: int = 0
        self._closed: bool = False

    @property
    def busy(self) -> bool:
        return self._inflight > 0 or bool(self._pending)

    @property
    def inflight(self) -> int:
        return self._inflight

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, transcript: str) -> None:
        if self._closed:
            logger.debug("reply: session closed, transcript discarded")
            return

        if not self._serialize:
            task = asyncio.create_task(self._run_one(transcript))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            return

        self._pending.append(transcript)
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._worker_loop())
        self._wakeup.set()

    def close(self) -> None:
        """Stop admitting work and drop queued transcripts; started runs finish on their own."""
        if self._closed:
            return
        self._closed = True

        if self._pending:
            logger.info("reply: discarding %s queued transcripts", len(self._pending))
            self._pending.clear()
        self._wakeup.set()

        running = [t for t in (self._worker, *self._tasks) if t is not None and not t.done()]
        for task in running:
            _detached_runs.add(task)
            task.add_done_callback(_forget_detached)
        if self._inflight:
            logger.info("reply: %s runs still in flight after disconnect", self._inflight)

    async def _worker_loop(self) -> None:
        while True:
            await self._wakeup.wait()
            self._wakeup.clear()
            while self._pending:
                await self._run_one(self._pending.popleft())
            if self._closed:
                return

    async def _run_one(self, transcript: str) -> None:
        self._inflight += 1
        try:
            await self._run(transcript)
        except Exception:
            logger.exception("reply: run failed unexpectedly")
        finally:
            self._inflight -= 1


__all__ = ["ReplyDispatcher", "RunFn"]
