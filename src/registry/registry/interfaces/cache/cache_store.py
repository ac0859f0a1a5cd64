# ABOUTME: Abstract cache store interface for the shared, TTL-based cache tier
# ABOUTME: Defines get/set/delete semantics shared by in-memory, Redis and no-op backends

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any


class AbstractCacheStore(ABC):
    """
    [L0] Abstract interface for a shared cache visible to every process.

    Entries expire after the TTL given at write time and can be removed
    explicitly. A miss is reported as ``None``; callers must not store ``None``.

    Architecture note: This is a [L0] interface; concrete backends live in
    [L1] implementations (memory, redis, noop).
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the cached value for ``key``, or None on a miss or after expiry.

        Raises:
            CacheError: If the backend cannot be reached.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds`` seconds.

        Raises:
            CacheError: If the backend cannot be reached or ``ttl_seconds`` is not positive.
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if an entry was removed.

        Raises:
            CacheError: If the backend cannot be reached.
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry owned by this cache."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the cache and release any underlying resources."""
        pass

    async def __aenter__(self) -> "AbstractCacheStore":
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        await self.close()
