"""
Rate Limiter
------------
Token bucket rate limiter for API calls.

The bucket holds at most requests_per_second permits and starts full.
A background task adds one permit every 1/requests_per_second seconds;
a tick that finds the bucket full is dropped so a slow consumer never
stalls the refill schedule.
"""

from typing import Optional
import asyncio
import logging

from eventbrite_v3.core.errors import CancellationError


class RateLimiter:
    """
    Token bucket rate limiter.

    Safe for concurrent use by any number of coroutines on one event loop.
    Waiters are served in arrival order (asyncio.Queue is FIFO).
    A limit of zero or less disables limiting entirely.
    An instance belongs to the event loop that first waits on it; do not
    reuse it across separate asyncio.run() calls.
    """

    def __init__(self, requests_per_second: int = 5):
        self.requests_per_second = requests_per_second
        self._logger = logging.getLogger("eventbrite_v3.api.rate_limiter")
        self._permits: Optional[asyncio.Queue] = None
        self._refill_task: Optional[asyncio.Task] = None
        self._closed = False

        if self.enabled:
            self._permits = asyncio.Queue(maxsize=requests_per_second)
            for _ in range(requests_per_second):
                self._permits.put_nowait(1)

    @property
    def enabled(self) -> bool:
        return self.requests_per_second > 0

    @property
    def interval(self) -> float:
        """Seconds between refills."""
        if not self.enabled:
            return 0.0
        return 1.0 / self.requests_per_second

    @property
    def available(self) -> int:
        """Permits currently in the bucket (unbounded limiters report 0)."""
        if self._permits is None:
            return 0
        return self._permits.qsize()

    async def acquire(self, timeout: Optional[float] = None) -> None:
        """
        Take one permit, waiting for a refill if the bucket is empty.

        Raises CancellationError if timeout elapses first. No permit is
        consumed in that case.
        """
        if not self.enabled:
            return

        self._ensure_refill()

        try:
            if timeout is None:
                await self._permits.get()
            else:
                await asyncio.wait_for(self._permits.get(), timeout)
        except asyncio.TimeoutError:
            raise CancellationError(
                f"Deadline exceeded waiting for rate limit permit ({timeout}s)"
            ) from None

    def try_acquire(self) -> bool:
        """Take a permit without waiting. Returns False if none available."""
        if not self.enabled:
            return True

        self._ensure_refill()

        try:
            self._permits.get_nowait()
            return True
        except asyncio.QueueEmpty:
            return False

    def _ensure_refill(self) -> None:
        """Start the refill task on the running loop the first time it's needed."""
        if self._closed:
            return
        if self._refill_task is not None and not self._refill_task.done():
            return
        self._refill_task = asyncio.get_running_loop().create_task(self._refill())

    async def _refill(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self._permits.put_nowait(1)
            except asyncio.QueueFull:
                pass

    def close(self) -> None:
        """Stop the refill task. Permits left in the bucket stay usable."""
        self._closed = True
        if self._refill_task is not None:
            self._refill_task.cancel()
            self._refill_task = None
            self._logger.debug("Rate limiter refill stopped")
