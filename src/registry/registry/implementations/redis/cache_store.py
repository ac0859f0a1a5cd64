# ABOUTME: Redis implementation of AbstractCacheStore for the cross-process shared tier
# ABOUTME: Stores JSON text with SETEX expiry and wraps client failures in CacheError

import json
from typing import Any

import redis.asyncio as redis_async
from redis.exceptions import RedisError
from loguru import logger

from registry.exceptions import CacheError
from registry.interfaces.cache import AbstractCacheStore


class RedisCacheStore(AbstractCacheStore):
    """
    Shared cache backed by Redis.

    Values are serialized to JSON text, so anything stored must be
    JSON-serializable. Keys are namespaced with ``namespace`` so ``clear`` only
    removes entries written by this store.
    """

    def __init__(self, client: redis_async.Redis, namespace: str = "settings-registry"):
        """
        Args:
            client: A ``redis.asyncio.Redis`` client created with ``decode_responses=True``.
            namespace: Prefix applied to every key written by this store.
        """
        self._client = client
        self.namespace = namespace
        self._closed = False
        self._logger = logger.bind(name=__name__)

    @classmethod
    def from_url(cls, url: str, namespace: str = "settings-registry") -> "RedisCacheStore":
        """Create a store with its own client connected to ``url``."""
        client = redis_async.Redis.from_url(
            url,
            decode_responses=True,
            socket_keepalive=True,
            socket_connect_timeout=5,
            retry_on_timeout=True,
        )
        return cls(client, namespace=namespace)

    def _key(self, key: str) -> str:
        if self._closed:
            raise CacheError("Cache store is closed", code="CACHE_CLOSED")
        if not isinstance(key, str) or not key:
            raise CacheError("Key must be a non-empty string", code="INVALID_KEY")
        return f"{self.namespace}:{key}"

    async def get(self, key: str) -> Any | None:
        full_key = self._key(key)
        try:
            raw = await self._client.get(full_key)
        except RedisError as e:
            raise CacheError(f"Redis GET failed for {key!r}: {e}", code="CACHE_UNAVAILABLE") from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError:
            # Unreadable entries are treated as a miss and dropped
            self._logger.warning(f"Discarding undecodable cache entry {full_key!r}")
            await self.delete(key)
            return None

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        full_key = self._key(key)
        if value is None:
            raise CacheError("Value must not be None", code="INVALID_VALUE")
        if ttl_seconds <= 0:
            raise CacheError("TTL must be positive", code="INVALID_TTL")

        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise CacheError(f"Value for {key!r} is not JSON-serializable", code="INVALID_VALUE") from e

        try:
            await self._client.set(full_key, payload, ex=ttl_seconds)
        except RedisError as e:
            raise CacheError(f"Redis SET failed for {key!r}: {e}", code="CACHE_UNAVAILABLE") from e

    async def delete(self, key: str) -> bool:
        full_key = self._key(key)
        try:
            removed = await self._client.delete(full_key)
        except RedisError as e:
            raise CacheError(f"Redis DEL failed for {key!r}: {e}", code="CACHE_UNAVAILABLE") from e
        return bool(removed)

    async def clear(self) -> None:
        pattern = self._key("*")
        try:
            keys = [key async for key in self._client.scan_iter(match=pattern)]
            if keys:
                await self._client.delete(*keys)
        except RedisError as e:
            raise CacheError(f"Redis clear failed: {e}", code="CACHE_UNAVAILABLE") from e

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._client.aclose()
