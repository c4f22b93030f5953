"""
Rate Limiter Tests
------------------
Tests cover:
- Bucket primed with N permits
- Refill cadence of one permit per 1/N seconds
- Capacity never exceeding N
- Disabled limiter (N <= 0)
- Deadline expiry without consuming a permit
- Refill shutdown
"""

import asyncio
import time

import pytest

from eventbrite_v3.api.rate_limiter import RateLimiter
from eventbrite_v3.core.errors import CancellationError


class TestRateLimiterCapacity:
    """Tests for bucket priming and bounds."""

    def test_primed_with_limit(self):
        """Bucket starts full."""
        limiter = RateLimiter(requests_per_second=4)

        assert limiter.enabled
        assert limiter.available == 4
        assert limiter.interval == pytest.approx(0.25)

    @pytest.mark.asyncio
    async def test_up_to_limit_does_not_wait(self):
        """N calls back-to-back proceed immediately."""
        limiter = RateLimiter(requests_per_second=5)

        start = time.monotonic()
        for _ in range(5):
            await limiter.acquire()
        elapsed = time.monotonic() - start

        assert elapsed < 0.1
        limiter.close()

    @pytest.mark.asyncio
    async def test_call_past_limit_waits_for_refill(self):
        """The (N+1)th call waits roughly one refill interval."""
        limiter = RateLimiter(requests_per_second=4)

        for _ in range(4):
            await limiter.acquire()

        start = time.monotonic()
        await limiter.acquire()
        elapsed = time.monotonic() - start

        assert elapsed >= limiter.interval * 0.6
        assert elapsed < limiter.interval * 3
        limiter.close()

    @pytest.mark.asyncio
    async def test_refill_never_exceeds_limit(self):
        """Ticks arriving on a full bucket are dropped."""
        limiter = RateLimiter(requests_per_second=10)

        assert limiter.try_acquire()
        await asyncio.sleep(limiter.interval * 5)

        assert limiter.available == 10
        limiter.close()


class TestRateLimiterDisabled:
    """Tests for N <= 0."""

    @pytest.mark.parametrize("rps", [0, -1])
    @pytest.mark.asyncio
    async def test_never_waits(self, rps):
        """Any number of calls proceed without suspension."""
        limiter = RateLimiter(requests_per_second=rps)

        assert not limiter.enabled
        await asyncio.wait_for(
            asyncio.gather(*(limiter.acquire() for _ in range(200))),
            timeout=1.0,
        )
        assert all(limiter.try_acquire() for _ in range(200))


class TestRateLimiterCancellation:
    """Tests for deadline expiry and teardown."""

    @pytest.mark.asyncio
    async def test_deadline_raises_cancellation(self):
        """Exhausted bucket plus a short deadline fails fast."""
        limiter = RateLimiter(requests_per_second=2)
        assert limiter.try_acquire()
        assert limiter.try_acquire()

        with pytest.raises(CancellationError):
            await limiter.acquire(timeout=0.01)
        limiter.close()

    @pytest.mark.asyncio
    async def test_cancelled_wait_consumes_nothing(self):
        """A permit refilled after the deadline stays in the bucket."""
        limiter = RateLimiter(requests_per_second=10)
        for _ in range(10):
            assert limiter.try_acquire()

        with pytest.raises(CancellationError):
            await limiter.acquire(timeout=0.01)

        await asyncio.sleep(limiter.interval * 1.5)
        assert limiter.available == 1
        limiter.close()

    @pytest.mark.asyncio
    async def test_task_cancellation_propagates(self):
        """Cancelling the waiting task raises CancelledError."""
        limiter = RateLimiter(requests_per_second=1)
        assert limiter.try_acquire()

        waiter = asyncio.create_task(limiter.acquire())
        await asyncio.sleep(0.01)
        waiter.cancel()

        with pytest.raises(asyncio.CancelledError):
            await waiter
        limiter.close()

    @pytest.mark.asyncio
    async def test_close_stops_refill(self):
        """No permits are added after close()."""
        limiter = RateLimiter(requests_per_second=10)
        for _ in range(10):
            assert limiter.try_acquire()

        limiter.close()
        await asyncio.sleep(limiter.interval * 3)

        assert limiter.available == 0

    @pytest.mark.asyncio
    async def test_waiters_each_take_one_permit(self):
        """Concurrent waiters are each satisfied by exactly one refill."""
        limiter = RateLimiter(requests_per_second=20)
        for _ in range(20):
            assert limiter.try_acquire()

        start = time.monotonic()
        await asyncio.gather(*(limiter.acquire() for _ in range(3)))
        elapsed = time.monotonic() - start

        assert elapsed >= limiter.interval * 2
        assert limiter.available == 0
        limiter.close()


class TestRateLimiterEventLoop:
    """An instance is bound to the loop that first waits on it."""

    def test_waiting_on_second_loop_fails(self):
        limiter = RateLimiter(requests_per_second=1)

        async def drain():
            assert limiter.try_acquire()
            await limiter.acquire()

        asyncio.run(drain())

        with pytest.raises(RuntimeError):
            asyncio.run(limiter.acquire(timeout=0.5))
