# content_api/core/cache.py - In-memory TTL cache
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..domain.repositories.cache_repository import MISS, CacheLookup, CacheRepository


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class InMemoryCache(CacheRepository):
    """
    Process-local cache with per-entry TTL and lazy expiry.

    Entries are only removed when they are looked up after expiring, or by
    delete/clear. All access to the store goes through one re-entrant lock
    so request threads can populate the same key concurrently.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._expired = 0

    def has(self, key: str) -> bool:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return False

            if self._clock() > entry.expires_at:
                del self._store[key]
                self._expired += 1
                return False

            return True

    def get(self, key: str) -> CacheLookup:
        with self._lock:
            if not self.has(key):
                self._misses += 1
                return MISS
            self._hits += 1
            return CacheLookup(found=True, value=self._store[key].value)

    def set(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._store[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)
            self._sets += 1

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "backend": "memory",
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "sets": self._sets,
                "expired": self._expired,
                "hit_rate": round(self._hits / lookups, 3) if lookups else 0,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
