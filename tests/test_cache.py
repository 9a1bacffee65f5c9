"""
Tests for the TTL cache and its cleanup scheduler.

Run with: pytest tests/test_cache.py -v
"""
import pytest

from cryptomate.services.cache import TTLCache
from cryptomate.services.scheduler import CLEANUP_JOB_ID, CacheCleanupScheduler


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLCache(ttl_seconds=60, clock=clock)


class TestTTLCache:
    """Tests for TTLCache."""

    def test_set_and_get(self, cache):
        cache.set('ticker:BTCUSDT', {'price': 1})

        assert cache.get('ticker:BTCUSDT') == {'price': 1}
        assert 'ticker:BTCUSDT' in cache

    def test_miss(self, cache):
        assert cache.get('missing') is None
        assert 'missing' not in cache

    def test_expiry(self, cache, clock):
        """Entries disappear once their TTL has elapsed."""
        cache.set('key', 'value')

        clock.advance(59)
        assert cache.get('key') == 'value'

        clock.advance(1)
        assert cache.get('key') is None
        assert len(cache) == 0

    def test_per_entry_ttl(self, cache, clock):
        cache.set('short', 1, ttl_seconds=5)
        cache.set('long', 2)

        clock.advance(10)

        assert cache.get('short') is None
        assert cache.get('long') == 2

    def test_contains_stored_none(self, cache):
        """A stored None value still counts as present."""
        cache.set('empty', None)

        assert 'empty' in cache

    def test_contains_does_not_evict(self, cache, clock):
        """Membership checks report expiry without removing the entry."""
        cache.set('key', 'value', ttl_seconds=5)
        clock.advance(10)

        assert 'key' not in cache
        assert len(cache) == 1
        assert cache.purge_expired() == 1

    def test_delete_and_clear(self, cache):
        cache.set('a', 1)
        cache.set('b', 2)

        assert cache.delete('a') is True
        assert cache.delete('a') is False

        cache.clear()
        assert len(cache) == 0

    def test_purge_expired(self, cache, clock):
        cache.set('old', 1, ttl_seconds=10)
        cache.set('new', 2)

        clock.advance(30)

        assert cache.purge_expired() == 1
        assert len(cache) == 1
        assert cache.get('new') == 2

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_invalid_ttl(self, ttl):
        with pytest.raises(ValueError):
            TTLCache(ttl_seconds=ttl)

    def test_invalid_entry_ttl(self, cache):
        with pytest.raises(ValueError):
            cache.set('key', 'value', ttl_seconds=0)


class TestCacheCleanupScheduler:
    """Tests for CacheCleanupScheduler."""

    @pytest.mark.asyncio
    async def test_start_registers_job(self, cache):
        scheduler = CacheCleanupScheduler(cache, interval_seconds=30)
        await scheduler.start()
        try:
            assert scheduler.running is True
            job = scheduler.scheduler.get_job(CLEANUP_JOB_ID)
            assert job is not None
            assert job.trigger.interval.total_seconds() == 30
        finally:
            scheduler.shutdown()

    @pytest.mark.asyncio
    async def test_cleanup_purges_cache(self, cache, clock):
        cache.set('old', 1, ttl_seconds=10)
        cache.set('new', 2)
        clock.advance(30)

        scheduler = CacheCleanupScheduler(cache, interval_seconds=30)
        removed = await scheduler._run_cleanup()

        assert removed == 1
        assert len(cache) == 1

    def test_shutdown_when_not_started(self, cache):
        scheduler = CacheCleanupScheduler(cache)
        scheduler.shutdown()

        assert scheduler.running is False

    def test_invalid_interval(self, cache):
        with pytest.raises(ValueError):
            CacheCleanupScheduler(cache, interval_seconds=0)
