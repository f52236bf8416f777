from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Awaitable, Callable


@dataclass(frozen=True)
class RateLimitConfig:
    min_interval: float = 0.5  # seconds between one release and the next acquire

    def __post_init__(self) -> None:
        if self.min_interval < 0:
            raise ValueError(f"min_interval must be non-negative, got: {self.min_interval}")


class AsyncRateLimiter:
    """Serializes requests and spaces them by a minimum interval.

    The interval is measured from the moment the previous slot was released,
    so a slow response does not eat into the next request's spacing. The
    check-sleep-record sequence runs under one lock, so concurrent callers
    never observe a stale release time.
    """

    def __init__(
        self,
        cfg: RateLimitConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.cfg = cfg or RateLimitConfig()
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_release: float | None = None

    @property
    def last_release(self) -> float | None:
        return self._last_release

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold the limiter for the duration of one request."""
        async with self._lock:
            if self._last_release is not None:
                sleep_needed = self.cfg.min_interval - (self._clock() - self._last_release)
                if sleep_needed > 0:
                    await self._sleep(sleep_needed)
            try:
                yield
            finally:
                self._last_release = self._clock()

    async def acquire(self) -> None:
        """Wait out the interval and record an immediate release."""
        async with self.slot():
            pass
