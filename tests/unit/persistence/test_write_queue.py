"""
Unit tests for folio.persistence.write_queue module.

Tests FIFO ordering, mutual exclusion and failure isolation of SerialWriteQueue.
"""

import asyncio

import pytest

from folio.persistence.write_queue import SerialWriteQueue


class TestSerialWriteQueue:
    """Tests for SerialWriteQueue."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_operations_run_in_enqueue_order(self) -> None:
        """Operations should run one at a time in FIFO order, even when earlier ones are slower."""
        queue = SerialWriteQueue()
        events: list[str] = []

        def make_op(name: str, delay: float):
            async def op() -> str:
                events.append(f"start:{name}")
                await asyncio.sleep(delay)
                events.append(f"end:{name}")
                return name

            return op

        tasks = [
            queue.enqueue(make_op("a", 0.03)),
            queue.enqueue(make_op("b", 0.0)),
            queue.enqueue(make_op("c", 0.01)),
        ]
        results = await asyncio.gather(*tasks)

        assert results == ["a", "b", "c"]
        assert events == ["start:a", "end:a", "start:b", "end:b", "start:c", "end:c"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failure_goes_to_its_caller_and_queue_advances(self) -> None:
        """A failing operation rejects only its own task; later operations still run."""
        queue = SerialWriteQueue()

        async def boom() -> None:
            raise RuntimeError("disk on fire")

        async def fine() -> str:
            return "ok"

        failing = queue.enqueue(boom)
        following = queue.enqueue(fine)

        with pytest.raises(RuntimeError, match="disk on fire"):
            await failing
        assert await following == "ok"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_pending_and_drain(self) -> None:
        """pending counts unsettled operations; drain waits for all of them."""
        queue = SerialWriteQueue()
        gate = asyncio.Event()

        async def blocked() -> None:
            await gate.wait()

        queue.enqueue(blocked)
        queue.enqueue(blocked)
        await asyncio.sleep(0)
        assert queue.pending == 2

        gate.set()
        await queue.drain()
        assert queue.pending == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_drain_on_empty_queue_returns(self) -> None:
        """Draining a queue that never ran anything returns immediately."""
        await SerialWriteQueue().drain()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_submit_returns_operation_result(self) -> None:
        """submit waits for the queued operation and hands back its result."""
        queue = SerialWriteQueue()

        async def op() -> str:
            return "done"

        assert await queue.submit(op) == "done"
        assert queue.pending == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancelled_submitter_leaves_queued_operation_running(self) -> None:
        """Cancelling a submit caller waiting behind another operation still runs its operation."""
        queue = SerialWriteQueue()
        gate = asyncio.Event()
        ran: list[str] = []

        async def blocked() -> None:
            await gate.wait()

        async def record() -> None:
            ran.append("write")

        queue.enqueue(blocked)
        waiter = asyncio.create_task(queue.submit(record))
        await asyncio.sleep(0)
        waiter.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter

        assert queue.pending == 2
        gate.set()
        await queue.drain()

        assert ran == ["write"]
        assert queue.pending == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cancelled_submitter_does_not_let_next_operation_overlap(self) -> None:
        """The next operation starts only after a cancelled caller's operation has finished."""
        queue = SerialWriteQueue()
        events: list[str] = []

        async def slow() -> None:
            events.append("start:slow")
            await asyncio.sleep(0.1)
            events.append("end:slow")

        async def fast() -> None:
            events.append("start:fast")

        waiter = asyncio.create_task(queue.submit(slow))
        await asyncio.sleep(0.02)
        waiter.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter

        await queue.submit(fast)

        assert events == ["start:slow", "end:slow", "start:fast"]
