"""Tests for the TTL cache store."""

from pollencast.cache.store import CacheStore
from pollencast.tests.helpers import FakeClock


class TestCacheStore:
    def test_empty(self, clock: FakeClock):
        store = CacheStore(clock)
        assert store.get("k") is None

    def test_put_get(self, clock: FakeClock):
        store = CacheStore(clock)
        store.put("k", {"a": 1}, ttl_seconds=60)
        entry = store.get("k")
        assert entry is not None
        assert entry.value == {"a": 1}
        assert entry.expires_at == clock.now + 60

    def test_fresh_until_ttl(self, clock: FakeClock):
        store = CacheStore(clock)
        store.put("k", "v", ttl_seconds=60)
        clock.advance(59.9)
        assert store.get("k") is not None

    def test_expired_entry_evicted(self, clock: FakeClock):
        store = CacheStore(clock)
        store.put("k", "v", ttl_seconds=60)
        clock.advance(60)
        assert store.get("k") is None
        clock.advance(-60)
        # Eviction is permanent even if the clock were to read earlier
        assert store.get("k") is None

    def test_put_replaces_whole_entry(self, clock: FakeClock):
        store = CacheStore(clock)
        first = store.put("k", "old", ttl_seconds=60)
        clock.advance(10)
        second = store.put("k", "new", ttl_seconds=60)
        assert store.get("k") is second
        assert first.value == "old"
        assert second.stored_at == first.stored_at + 10

    def test_keys_independent(self, clock: FakeClock):
        store = CacheStore(clock)
        store.put("short", 1, ttl_seconds=10)
        store.put("long", 2, ttl_seconds=100)
        clock.advance(50)
        assert store.get("short") is None
        assert store.get("long").value == 2
