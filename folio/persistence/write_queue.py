"""Per-file serial write queue.

A logical lock implemented as a chained continuation: every enqueued operation
runs in its own task, and that task first waits for the previously enqueued
task to settle. Operations therefore run one at a time, in enqueue order,
regardless of how many coroutines enqueue concurrently.

One queue guards one backing file. Stores own their queue (or are handed one),
so serialization scope is explicit and two files never block each other.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SerialWriteQueue:
    """
    Runs async write operations strictly one at a time, FIFO.

    Failure policy:
    - A failing operation's exception is delivered only through the task
      returned to the caller that enqueued it.
    - The queue always advances to the next operation.

    Callers should wait through submit(): it shields the queued task, so a
    cancelled caller stops waiting while its write still runs to completion
    or failure in queue order. Awaiting the task from enqueue() directly
    lets a caller's cancellation reach the queued operation.
    """

    def __init__(self, name: str = "write_queue") -> None:
        self.name = name
        self._tail: asyncio.Task[Any] | None = None
        self._pending = 0

    @property
    def pending(self) -> int:
        """Number of enqueued operations that have not settled yet."""
        return self._pending

    def enqueue(self, operation: Callable[[], Awaitable[T]]) -> asyncio.Task[T]:
        """
        Schedule an operation after everything already enqueued.

        Must be called from inside a running event loop.

        Args:
            operation: Zero-argument callable returning an awaitable (e.g. an async def)

        Returns:
            Task that settles with the operation's result or exception
        """
        previous = self._tail
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._run_after(previous, operation))
        task.add_done_callback(self._on_settled)
        self._tail = task
        self._pending += 1
        logger.debug(f"[{self.name}] Enqueued write ({self._pending} pending)")
        return task

    async def submit(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Enqueue an operation and wait for its result.

        Cancelling the waiting caller does not cancel the queued operation.
        The queue only advances once the operation (including any executor
        work it awaits) has settled.
        """
        return await asyncio.shield(self.enqueue(operation))

    async def drain(self) -> None:
        """Wait until every operation enqueued so far has settled."""
        tail = self._tail
        if tail is not None and not tail.done():
            await asyncio.wait([tail])

    async def _run_after(self, previous: asyncio.Task[Any] | None, operation: Callable[[], Awaitable[T]]) -> T:
        # asyncio.wait never raises the awaited task's exception
        if previous is not None and not previous.done():
            await asyncio.wait([previous])
        return await operation()

    def _on_settled(self, task: asyncio.Task[Any]) -> None:
        self._pending -= 1
        if task.cancelled():
            logger.warning(f"[{self.name}] Queued write was cancelled")
            return
        error = task.exception()
        if error is not None:
            logger.warning(f"[{self.name}] Queued write failed: {error}")
