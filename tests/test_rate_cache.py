"""
Unit tests for the TTL rate cache.
"""

import threading
from datetime import datetime, timezone

from app.domain.entities.quote import RateQuote
from app.infra.cache.rate_cache import RateCache, cache_key


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def _quote(rate: float = 0.92, analysis: str = "analysis") -> RateQuote:
    return RateQuote(rate=rate, analysis=analysis, timestamp=datetime.now(timezone.utc))


class TestRateCache:
    """Test get/put/expiry/stats."""

    def setup_method(self):
        self.clock = FakeClock()
        self.cache = RateCache(ttl_seconds=600, clock=self.clock)

    def test_key_is_ordered_pair(self):
        assert cache_key("USD", "EUR") == "USD_EUR"
        assert cache_key("USD", "EUR") != cache_key("EUR", "USD")

    def test_get_missing_returns_none(self):
        assert self.cache.get("USD", "EUR") is None

    def test_put_then_get(self):
        quote = _quote()
        self.cache.put("USD", "EUR", quote)

        assert self.cache.get("USD", "EUR") is quote

    def test_lookup_is_not_symmetric(self):
        self.cache.put("USD", "EUR", _quote())

        assert self.cache.get("EUR", "USD") is None

    def test_entry_expires_after_ttl(self):
        self.cache.put("USD", "EUR", _quote())

        self.clock.now += 599
        assert self.cache.get("USD", "EUR") is not None

        self.clock.now += 1
        assert self.cache.get("USD", "EUR") is None
        assert self.cache.stats()["keys"] == 0

    def test_put_overwrites_and_restarts_ttl(self):
        self.cache.put("USD", "EUR", _quote(0.92))
        self.clock.now += 500
        self.cache.put("USD", "EUR", _quote(0.95))
        self.clock.now += 500

        assert self.cache.get("USD", "EUR").rate == 0.95

    def test_put_prunes_expired_entries(self):
        self.cache.put("USD", "EUR", _quote())
        self.clock.now += 601
        self.cache.put("GBP", "JPY", _quote(190.0))

        assert self.cache.stats()["keys"] == 1

    def test_stats_counts_hits_and_misses(self):
        self.cache.get("USD", "EUR")
        self.cache.put("USD", "EUR", _quote())
        self.cache.get("USD", "EUR")
        self.cache.get("USD", "EUR")

        assert self.cache.stats() == {"hits": 2, "misses": 1, "keys": 1, "ttl": 600}

    def test_clear(self):
        self.cache.put("USD", "EUR", _quote())
        self.cache.get("USD", "EUR")
        self.cache.clear()

        assert self.cache.stats() == {"hits": 0, "misses": 0, "keys": 0, "ttl": 600}


class TestRateCacheConcurrency:
    """Test that every get/put is counted under concurrent access."""

    def test_parallel_get_put_keeps_counters_consistent(self):
        cache = RateCache(ttl_seconds=600)
        workers, rounds = 8, 500
        pairs = [("USD", "EUR"), ("EUR", "USD"), ("GBP", "JPY")]
        errors = []

        def hammer(worker_id):
            try:
                for i in range(rounds):
                    base, target = pairs[(worker_id + i) % len(pairs)]
                    if i % 2 == 0:
                        cache.put(base, target, _quote(rate=1.0 + worker_id))
                    else:
                        cache.get(base, target)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=hammer, args=(n,)) for n in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        stats = cache.stats()
        assert errors == []
        assert stats["hits"] + stats["misses"] == workers * rounds // 2
        assert stats["keys"] <= len(pairs)
