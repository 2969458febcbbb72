# tests/unit/test_cache.py
import threading

import pytest

from content_api.core.cache import InMemoryCache
from content_api.domain.repositories import MISS, CacheRepository


@pytest.mark.unit
class TestInMemoryCache:
    """Unit tests for InMemoryCache"""

    def test_implements_cache_repository(self, cache):
        """Test cache satisfies the repository interface"""
        assert isinstance(cache, CacheRepository)

    def test_cache_set_and_get(self, cache):
        """Test setting and getting cache"""
        value = {"data": "test_value", "number": 123}

        cache.set("test_key", value, ttl=300)
        lookup = cache.get("test_key")

        assert lookup.found is True
        assert lookup.value == value

    def test_cache_miss(self, cache):
        """Test cache miss returns the explicit miss signal"""
        lookup = cache.get("non_existent_key")

        assert lookup is MISS
        assert lookup.found is False
        assert not lookup

    @pytest.mark.parametrize("falsy", [None, [], {}, 0, ""])
    def test_cached_falsy_value_is_a_hit(self, cache, falsy):
        """Test falsy values are distinguishable from a miss"""
        cache.set("falsy", falsy, ttl=60)

        lookup = cache.get("falsy")

        assert lookup.found is True
        assert lookup.value == falsy
        assert cache.has("falsy") is True

    def test_cache_expiration(self, cache, clock):
        """Test entry is live until now passes expires_at"""
        cache.set("expiring_key", "expiring_value", ttl=10)

        clock.advance(10)
        assert cache.has("expiring_key") is True

        clock.advance(0.001)
        assert cache.has("expiring_key") is False
        assert cache.get("expiring_key").found is False

    def test_expired_entry_removed_on_check(self, cache, clock):
        """Test lazy expiry deletes the entry as a side effect of has()"""
        cache.set("key", "value", ttl=1)
        cache.set("other", "value", ttl=100)
        clock.advance(5)

        assert len(cache) == 2
        assert cache.has("key") is False
        assert len(cache) == 1
        assert cache.get_stats()["expired"] == 1

    def test_no_background_sweep(self, cache, clock):
        """Test expired entries stay stored until accessed"""
        cache.set("key", "value", ttl=1)
        clock.advance(100)

        assert len(cache) == 1

    def test_set_overwrites_value_and_expiry(self, cache, clock):
        """Test last write wins, including the TTL"""
        cache.set("key", "first", ttl=5)
        clock.advance(4)
        cache.set("key", "second", ttl=5)
        clock.advance(4)

        assert cache.get("key").value == "second"

    def test_ttl_chosen_per_call(self, cache, clock):
        """Test two keys in one store can use different TTLs"""
        cache.set("short", 1, ttl=60)
        cache.set("long", 2, ttl=300)
        clock.advance(120)

        assert cache.has("short") is False
        assert cache.has("long") is True

    def test_cache_delete(self, cache):
        """Test deleting an entry"""
        cache.set("test_key", "test_value", ttl=300)

        cache.delete("test_key")

        assert cache.get("test_key").found is False

    def test_delete_missing_key_is_noop(self, cache):
        """Test deleting a missing key does not raise"""
        cache.delete("never_set")

        assert len(cache) == 0

    def test_cache_clear(self, cache):
        """Test clearing all cache"""
        cache.set("key1", "value1", ttl=300)
        cache.set("key2", "value2", ttl=300)
        cache.set("key3", "value3", ttl=300)

        cache.clear()

        assert cache.get("key1").found is False
        assert cache.get("key2").found is False
        assert cache.get("key3").found is False
        assert len(cache) == 0

    def test_cache_stats(self, cache):
        """Test cache statistics"""
        cache.set("key1", "value1", ttl=300)
        cache.get("key1")
        cache.get("missing")

        stats = cache.get_stats()

        assert stats["backend"] == "memory"
        assert stats["size"] == 1
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["sets"] == 1
        assert stats["hit_rate"] == 0.5

    def test_stats_empty_cache(self, cache):
        """Test hit rate with no lookups"""
        assert cache.get_stats()["hit_rate"] == 0

    def test_default_clock(self):
        """Test cache works with the real monotonic clock"""
        real = InMemoryCache()
        real.set("key", "value", ttl=60)

        assert real.get("key").value == "value"

    def test_concurrent_population(self, cache):
        """Test threads racing to set the same key leave one valid entry"""

        def populate(n):
            for _ in range(200):
                cache.set("shared", n, ttl=60)
                assert cache.get("shared").found is True

        threads = [threading.Thread(target=populate, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 1
        assert cache.get("shared").value in range(8)
