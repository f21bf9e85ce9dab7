"""Tests for caching functionality."""

import pytest
import redis.asyncio as redis

from shoreagents.config import settings
from shoreagents.utils import cache
from shoreagents.utils.cache import cache_key, cached


class FakeRedis:
    """Just enough of redis.asyncio.Redis for the cache decorator."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.store: dict[str, str] = {}

    async def get(self, key):
        if self.fail:
            raise redis.ConnectionError("connection refused")
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value


@pytest.fixture
def fake_redis(monkeypatch):
    client = FakeRedis()

    async def get_fake_redis():
        return client

    monkeypatch.setattr(settings, "cache_enabled", True)
    monkeypatch.setattr(cache, "get_redis", get_fake_redis)
    return client


@pytest.mark.unit
class TestCacheKey:

    def test_cache_key_generation(self):
        key1 = cache_key(limit=50, offset=0)
        key2 = cache_key(offset=0, limit=50)
        key3 = cache_key(limit=100, offset=0)

        assert key1 == key2
        assert key1 != key3
        assert cache_key() == "default"


@pytest.mark.unit
@pytest.mark.asyncio
class TestCachedDecorator:

    async def test_cache_hit(self, fake_redis):
        call_count = 0

        @cached(ttl=10, prefix="test")
        async def load_pool(session, *, role: str):
            nonlocal call_count
            call_count += 1
            return [{"role": role}]

        assert await load_pool(object(), role="Accountant") == [{"role": "Accountant"}]
        assert await load_pool(object(), role="Accountant") == [{"role": "Accountant"}]
        assert call_count == 1

        await load_pool(object(), role="Designer")
        assert call_count == 2
        assert len(fake_redis.store) == 2

    async def test_disabled_cache_calls_through(self, monkeypatch):
        monkeypatch.setattr(settings, "cache_enabled", False)
        call_count = 0

        @cached(ttl=10, prefix="test")
        async def load_pool():
            nonlocal call_count
            call_count += 1
            return []

        await load_pool()
        await load_pool()
        assert call_count == 2

    async def test_redis_error_falls_back(self, fake_redis):
        fake_redis.fail = True

        @cached(ttl=10, prefix="test")
        async def load_pool():
            return ["fresh"]

        assert await load_pool() == ["fresh"]
