"""
Redis-backed cache.

A single cache instance is created at startup and shared by every domain
service. Values are stored as JSON; TTLs are expressed in milliseconds.
"""

import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

import redis.asyncio as redis

from core.config import Settings
from core.logging import get_logger
from core.secrets import SecretName, SecretsManager


logger = get_logger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RedisCache:
    """
    Key/value cache on top of an async Redis client.

    A ttl of 0 stores entries without expiry.
    """

    def __init__(
        self,
        client: redis.Redis,
        ttl: int,
        prefix: str = "crm:",
    ):
        """
        Args:
            client: redis.asyncio client (decode_responses=True)
            ttl: Default time-to-live in milliseconds
            prefix: Key prefix for namespacing
        """
        self._client = client
        self.ttl = ttl
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str) -> Optional[Any]:
        """Get a decoded value, or None on a miss."""
        raw = await self._client.get(self._key(key))
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Store a value; ttl (ms) overrides the default."""
        ttl = self.ttl if ttl is None else ttl
        payload = json.dumps(value, default=_json_default)
        if ttl:
            await self._client.set(self._key(key), payload, px=ttl)
        else:
            await self._client.set(self._key(key), payload)

    async def delete(self, key: str) -> None:
        await self._client.delete(self._key(key))

    async def reset(self) -> None:
        """Remove every key under this cache's prefix."""
        keys = [key async for key in self._client.scan_iter(match=f"{self.prefix}*")]
        if keys:
            await self._client.delete(*keys)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Redis cache closed")


async def create_cache(settings: Settings, secrets: SecretsManager) -> RedisCache:
    """
    Build the Redis cache store from settings.

    Awaits a PING so that an unreachable host fails startup.
    """
    password = await secrets.get_secret(SecretName.REDIS_PASSWORD)

    client = redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        username=settings.redis_username,
        password=password,
        decode_responses=True,
    )
    await client.ping()

    logger.info(
        "Redis cache connected",
        host=settings.redis_host,
        port=settings.redis_port,
        ttl_ms=settings.redis_ttl,
    )
    return RedisCache(client, ttl=settings.redis_ttl)
