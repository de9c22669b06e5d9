"""
Unit tests for the request gate.
"""

import asyncio

import pytest

from musicbrainz_cli.api.rate_limiter import RequestGate


class TestRequestGate:
    """Test cases for RequestGate spacing and locking."""

    @pytest.mark.asyncio
    async def test_idle_gate_returns_immediately(self):
        """The first acquisition on an idle gate does not wait."""
        gate = RequestGate(interval=5.0)
        loop = asyncio.get_running_loop()

        start = loop.time()
        await asyncio.wait_for(gate.acquire(), timeout=1.0)

        assert loop.time() - start < 1.0
        assert gate.last_request_at is not None

    @pytest.mark.asyncio
    async def test_sequential_acquisitions_are_spaced(self):
        gate = RequestGate(interval=0.05)
        loop = asyncio.get_running_loop()

        await gate.acquire()
        first = gate.last_request_at
        await gate.acquire()

        assert gate.last_request_at - first >= 0.05
        assert loop.time() - first >= 0.05

    @pytest.mark.asyncio
    async def test_concurrent_acquisitions_are_serialized(self):
        """N concurrent callers span at least (N - 1) intervals."""
        interval = 0.05
        gate = RequestGate(interval=interval)
        loop = asyncio.get_running_loop()
        stamps: list[float] = []

        async def caller():
            await gate.acquire()
            stamps.append(loop.time())

        await asyncio.gather(*(caller() for _ in range(5)))

        stamps.sort()
        assert stamps[-1] - stamps[0] >= 4 * interval
        for earlier, later in zip(stamps, stamps[1:]):
            assert later - earlier >= interval

    @pytest.mark.asyncio
    async def test_no_burst_credit_after_idle(self):
        """Waiting idle does not allow two immediate requests."""
        interval = 0.05
        gate = RequestGate(interval=interval)

        await gate.acquire()
        await asyncio.sleep(interval * 3)
        await gate.acquire()
        after_idle = gate.last_request_at
        await gate.acquire()

        assert gate.last_request_at - after_idle >= interval

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_corrupt_state(self):
        gate = RequestGate(interval=0.2)
        await gate.acquire()
        recorded = gate.last_request_at

        waiter = asyncio.create_task(gate.acquire())
        await asyncio.sleep(0.01)
        waiter.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiter

        assert gate.last_request_at == recorded

        # The lock was released: the next caller still gets through.
        await asyncio.wait_for(gate.acquire(), timeout=1.0)
        assert gate.last_request_at - recorded >= 0.2

    @pytest.mark.asyncio
    async def test_zero_interval_never_waits(self):
        gate = RequestGate(interval=0)
        await asyncio.wait_for(
            asyncio.gather(*(gate.acquire() for _ in range(10))), timeout=1.0
        )

    def test_negative_interval_rejected(self):
        with pytest.raises(ValueError):
            RequestGate(interval=-1)

    def test_default_interval_is_one_second(self):
        assert RequestGate().interval == 1.0
