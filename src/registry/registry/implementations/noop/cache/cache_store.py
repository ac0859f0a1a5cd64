# ABOUTME: NoOp implementation of AbstractCacheStore that never retains entries
# ABOUTME: Default cache backend when caching is disabled; every read is a miss

from typing import Any

from registry.exceptions import CacheError
from registry.interfaces.cache import AbstractCacheStore


class NoOpCacheStore(AbstractCacheStore):
    """
    No-operation implementation of AbstractCacheStore.

    Accepts writes and deletes without storing anything, so every read misses
    and falls through to the record store. This is the cache backend written
    into the configuration snapshot when no cache type has been configured.

    Use Cases:
    - Deployments without a shared cache
    - Testing environments where the shared tier should be bypassed
    - Fallback when the cache backend is unavailable
    """

    def __init__(self):
        """Initialize the no-operation cache store."""
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise CacheError("Cache store is closed", code="CACHE_CLOSED")

    async def get(self, key: str) -> Any | None:
        """Always a miss."""
        self._check_open()
        return None

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Accepts the entry and discards it."""
        self._check_open()

    async def delete(self, key: str) -> bool:
        """Nothing is ever stored, so nothing is deleted."""
        self._check_open()
        return False

    async def clear(self) -> None:
        self._check_open()

    async def close(self) -> None:
        self._closed = True
