"""
Rate Limiter Infrastructure

Sliding window rate limiting, one window per client key.
"""

import logging
import time
from collections import deque
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RateLimitExceeded(Exception):
    def __init__(self, message: str, retry_after: float | None = None):
        self.retry_after = retry_after
        super().__init__(message)


class SlidingWindowRateLimiter:
    """At most `max_requests` timestamps inside any `window_seconds` span."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: deque[float] = deque()

    def _evict(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._hits and self._hits[0] <= cutoff:
            self._hits.popleft()

    def record_request(self) -> bool:
        """Count a request; False (and nothing recorded) when the window is full."""
        now = self._clock()
        self._evict(now)
        if len(self._hits) >= self.max_requests:
            return False
        self._hits.append(now)
        return True

    @property
    def is_idle(self) -> bool:
        self._evict(self._clock())
        return not self._hits

    def time_until_reset(self) -> float:
        """Seconds until the oldest counted request leaves the window."""
        now = self._clock()
        self._evict(now)
        if not self._hits:
            return 0.0
        return max(0.0, self._hits[0] + self.window_seconds - now)


class KeyedRateLimiter:
    """
    One sliding window per key (client IP).

    Idle windows are pruned on every `sweep_every` calls so the map does not
    grow with every client ever seen.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float = 60.0,
        sweep_every: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._sweep_every = sweep_every
        self._clock = clock
        self._limiters: dict[str, SlidingWindowRateLimiter] = {}
        self._calls = 0

    def check(self, key: str) -> None:
        """
        Record a request for `key`.

        Raises:
            RateLimitExceeded: If the key is over its limit
        """
        self._calls += 1
        if self._calls % self._sweep_every == 0:
            self._sweep()

        limiter = self._limiters.get(key)
        if limiter is None:
            limiter = SlidingWindowRateLimiter(self.max_requests, self.window_seconds, clock=self._clock)
            self._limiters[key] = limiter

        if not limiter.record_request():
            retry_after = limiter.time_until_reset()
            logger.warning(f"Rate limit exceeded for {key} (retry in {retry_after:.1f}s)")
            raise RateLimitExceeded("Too many requests. Please try again later.", retry_after=retry_after)

    def _sweep(self) -> None:
        idle = [key for key, limiter in self._limiters.items() if limiter.is_idle]
        for key in idle:
            del self._limiters[key]

    @property
    def tracked_keys(self) -> int:
        return len(self._limiters)
