"""
CacheRepository Interface

Abstract interface for caching operations following the Repository Pattern.
Implementations can use Redis, Memcached, or in-memory caching.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheLookup:
    """
    Result of a cache read.

    ``found`` tells a miss apart from a cached falsy value (``None``, ``[]``,
    ``{}``), so callers never have to treat ``None`` as "not cached".
    """

    found: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.found


MISS = CacheLookup(found=False)


class CacheRepository(ABC):
    """
    Abstract repository interface for caching operations.

    This interface defines the contract for cache implementations,
    allowing the domain layer to remain independent of specific
    caching technologies (Redis, Memcached, in-memory, etc.).
    TTLs are chosen per call site; implementations carry no default TTL.
    """

    @abstractmethod
    def get(self, key: str) -> CacheLookup:
        """
        Retrieve value from cache.

        Args:
            key: Cache key

        Returns:
            CacheLookup with found=True and the value on a live entry,
            MISS otherwise
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int) -> None:
        """
        Store value in cache, overwriting any previous value and expiry.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if a live entry exists for key.

        Expired entries are removed as a side effect.

        Args:
            key: Cache key

        Returns:
            True if key exists and has not expired
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Delete value from cache. Deleting a missing key is a no-op.

        Args:
            key: Cache key
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cache entries."""
        pass

    @abstractmethod
    def get_stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with statistics (hits, misses, size, etc.)
        """
        pass
