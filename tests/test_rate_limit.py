"""Tests for the rate limiter."""

import threading
import time

from limits.storage import MemoryStorage

from slop.web.backend.rate_limit import LimitsRateLimiter


class TestLimitsRateLimiter:
    """Tests for LimitsRateLimiter."""

    def test_allows_up_to_limit(self) -> None:
        limiter = LimitsRateLimiter(max_requests=3, window_seconds=60)
        results = [limiter.check("client") for _ in range(4)]
        assert [r.allowed for r in results] == [True, True, True, False]
        assert [r.remaining for r in results] == [2, 1, 0, 0]
        assert results[0].limit == 3

    def test_denied_reports_retry_after(self) -> None:
        limiter = LimitsRateLimiter(max_requests=1, window_seconds=60)
        limiter.check("client")
        info = limiter.check("client")
        assert info.allowed is False
        assert 1 <= info.retry_after_seconds <= 60
        assert info.reset_at > time.time()

    def test_window_slides(self) -> None:
        """Test that old requests stop counting after the window."""
        limiter = LimitsRateLimiter(max_requests=1, window_seconds=1)
        assert limiter.check("client").allowed
        assert not limiter.check("client").allowed
        time.sleep(1.1)
        assert limiter.check("client").allowed

    def test_keys_are_independent(self) -> None:
        limiter = LimitsRateLimiter(max_requests=1, window_seconds=60)
        assert limiter.check("a").allowed
        assert limiter.check("b").allowed
        assert not limiter.check("a").allowed

    def test_reset(self) -> None:
        limiter = LimitsRateLimiter(max_requests=1, window_seconds=60)
        limiter.check("a")
        limiter.reset()
        assert limiter.check("a").allowed

    def test_shared_storage_shares_budget(self) -> None:
        """Test that limiters on one storage count the same requests."""
        storage = MemoryStorage()
        first = LimitsRateLimiter(max_requests=1, window_seconds=60, storage=storage)
        second = LimitsRateLimiter(max_requests=1, window_seconds=60, storage=storage)
        assert first.check("client").allowed
        assert not second.check("client").allowed

    def test_concurrent_checks_respect_limit(self) -> None:
        """Test that concurrent callers never exceed the budget."""
        limiter = LimitsRateLimiter(max_requests=10, window_seconds=60)
        results = []
        lock = threading.Lock()

        def worker() -> None:
            info = limiter.check("shared")
            with lock:
                results.append(info.allowed)

        threads = [threading.Thread(target=worker) for _ in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 10
