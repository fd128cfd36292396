"""
Tests for the Redis cache wrapper and its factory.
"""

from datetime import datetime, timezone

import fakeredis
import pytest
from pydantic import SecretStr

import core.cache as cache_module
from core.cache import RedisCache, create_cache
from core.secrets import SecretsManager
from core.storage import PropertyStatus
from conftest import make_settings


@pytest.mark.asyncio
async def test_set_and_get_round_trip(cache):
    """Stored values come back unchanged."""
    await cache.set("client:1", {"email": "jane@example.com", "bedrooms": 3})

    assert await cache.get("client:1") == {"email": "jane@example.com", "bedrooms": 3}
    assert await cache.get("client:missing") is None


@pytest.mark.asyncio
async def test_set_serializes_datetimes_and_enums(cache):
    """Datetimes and enums are stored as JSON strings."""
    when = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)

    await cache.set("property:1", {"created_at": when, "status": PropertyStatus.SOLD})

    assert await cache.get("property:1") == {
        "created_at": "2024-05-01T09:30:00+00:00",
        "status": "sold",
    }


@pytest.mark.asyncio
async def test_default_ttl_is_milliseconds(cache, fake_redis):
    """The default TTL is applied in milliseconds."""
    await cache.set("k", "v")

    pttl = await fake_redis.pttl("crm:k")
    assert 0 < pttl <= 5000


@pytest.mark.asyncio
async def test_explicit_ttl_overrides_default(cache, fake_redis):
    """A per-call TTL replaces the default."""
    await cache.set("k", "v", ttl=60_000)

    pttl = await fake_redis.pttl("crm:k")
    assert 5000 < pttl <= 60_000


@pytest.mark.asyncio
async def test_zero_ttl_never_expires(fake_redis):
    """A TTL of zero stores keys without expiry."""
    cache = RedisCache(fake_redis, ttl=0)

    await cache.set("k", "v")

    assert await fake_redis.pttl("crm:k") == -1


@pytest.mark.asyncio
async def test_delete_and_reset(cache, fake_redis):
    """Delete removes one key; reset clears only prefixed keys."""
    await cache.set("a", 1)
    await cache.set("b", 2)
    await fake_redis.set("other:c", "3")

    await cache.delete("a")
    assert await cache.get("a") is None

    await cache.reset()
    assert await cache.get("b") is None
    assert await fake_redis.get("other:c") == "3"


@pytest.mark.asyncio
async def test_create_cache_uses_settings_and_secret(tmp_path, monkeypatch):
    """The Redis client is built from settings and the secret password."""
    captured = {}
    fake = fakeredis.FakeAsyncRedis(decode_responses=True)

    def fake_client(**kwargs):
        captured.update(kwargs)
        return fake

    monkeypatch.setattr(cache_module.redis, "Redis", fake_client)
    settings = make_settings(
        tmp_path,
        redis_host="redis.internal",
        redis_port=6390,
        redis_username="crm",
        redis_password=SecretStr("pw"),
    )

    cache = await create_cache(settings, SecretsManager(settings))

    assert captured["host"] == "redis.internal"
    assert captured["port"] == 6390
    assert captured["username"] == "crm"
    assert captured["password"] == "pw"
    assert cache.ttl == 5000
    await cache.close()


@pytest.mark.asyncio
async def test_create_cache_fails_when_host_unreachable(tmp_path, monkeypatch):
    """An unreachable Redis fails cache creation."""
    class UnreachableRedis(fakeredis.FakeAsyncRedis):
        async def ping(self, **kwargs):
            raise ConnectionError("connection refused")

    monkeypatch.setattr(
        cache_module.redis,
        "Redis",
        lambda **kwargs: UnreachableRedis(decode_responses=True),
    )
    settings = make_settings(tmp_path)

    with pytest.raises(ConnectionError):
        await create_cache(settings, SecretsManager(settings))
