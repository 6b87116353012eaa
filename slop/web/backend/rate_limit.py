"""Per-client request rate limiting.

Built on the ``limits`` moving-window strategy. The in-memory storage only
protects a single process; pass a shared ``limits`` storage (Redis,
Memcached) to ``LimitsRateLimiter`` to share the budget between workers.
"""

import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage, Storage
from limits.strategies import MovingWindowRateLimiter


@dataclass(frozen=True)
class RateLimitInfo:
    """Outcome of one rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    reset_at: float  # epoch seconds
    window_seconds: int
    retry_after_seconds: int = 0


class RateLimitExceeded(Exception):
    """A client went over its request budget."""

    def __init__(self, info: RateLimitInfo):
        super().__init__(
            f"Rate limit exceeded. Try again in {info.retry_after_seconds} seconds."
        )
        self.info = info


class RateLimiter(ABC):
    """Request budget keyed by client identifier."""

    @abstractmethod
    def check(self, key: str) -> RateLimitInfo:
        """Record a request for ``key`` if it is within budget."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Forget every recorded request."""
        pass


class LimitsRateLimiter(RateLimiter):
    """Sliding-window limiter backed by a ``limits`` storage."""

    def __init__(
        self,
        max_requests: int = 60,
        window_seconds: int = 60,
        storage: Storage | None = None,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.storage = storage or MemoryStorage()
        self._item = RateLimitItemPerSecond(max_requests, window_seconds, namespace="slop")
        self._strategy = MovingWindowRateLimiter(self.storage)

    def check(self, key: str) -> RateLimitInfo:
        # hit() checks and records atomically under the storage lock
        allowed = self._strategy.hit(self._item, key)
        stats = self._strategy.get_window_stats(self._item, key)

        retry_after = 0
        if not allowed:
            retry_after = max(1, math.ceil(stats.reset_time - time.time()))

        return RateLimitInfo(
            allowed=allowed,
            limit=self.max_requests,
            remaining=stats.remaining,
            reset_at=stats.reset_time,
            window_seconds=self.window_seconds,
            retry_after_seconds=retry_after,
        )

    def reset(self) -> None:
        self.storage.reset()

