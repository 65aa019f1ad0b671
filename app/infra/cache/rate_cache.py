# app/infra/cache/rate_cache.py
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from app.domain.entities.quote import RateQuote

KEY_DELIMITER = "_"
DEFAULT_TTL_SECONDS = 600


def cache_key(base: str, target: str) -> str:
    # Par ordenado: USD_EUR != EUR_USD
    return f"{base}{KEY_DELIMITER}{target}"


class RateCache:
    """Cache en memoria de tasa + análisis por par, con TTL y expiración perezosa."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[RateQuote, float]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, base: str, target: str) -> Optional[RateQuote]:
        key = cache_key(base, target)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                quote, expires_at = entry
                if self._clock() < expires_at:
                    self._hits += 1
                    return quote
                del self._entries[key]
            self._misses += 1
            return None

    def put(self, base: str, target: str, quote: RateQuote) -> None:
        key = cache_key(base, target)
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            self._entries[key] = (quote, now + self.ttl_seconds)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict:
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "keys": len(self._entries),
                "ttl": self.ttl_seconds,
            }

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, (_, expires_at) in self._entries.items() if expires_at <= now]
        for k in expired:
            del self._entries[k]
