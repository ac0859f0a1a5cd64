# ABOUTME: In-memory implementation of AbstractCacheStore
# ABOUTME: Provides a TTL-expiring key-value cache used as the shared tier in single-host setups

from typing import Any, Dict, List
from datetime import datetime, UTC
import threading
import time

from registry.interfaces.cache import AbstractCacheStore
from registry.exceptions import CacheError


class InMemoryCacheStore(AbstractCacheStore):
    """
    In-memory implementation of AbstractCacheStore.

    Every entry carries an expiration timestamp. Expired entries are dropped
    lazily when they are read and can be purged eagerly with ``force_cleanup``.

    Features:
    - TTL support with expiry checked on every read
    - Thread-safe operations
    - Key limit to bound memory usage
    """

    def __init__(self, max_keys: int = 10000):
        """
        Initialize the in-memory cache store.

        Args:
            max_keys: Maximum number of keys to store (to prevent memory issues)
        """
        self.max_keys = max_keys

        # Main storage: key -> {value, created_at}
        self._data: Dict[str, Dict[str, Any]] = {}

        # TTL storage: key -> expiration_timestamp
        self._ttl: Dict[str, float] = {}

        # Thread safety
        self._lock = threading.RLock()

        self._closed = False

    def _validate_key(self, key: str) -> None:
        if self._closed:
            raise CacheError("Cache store is closed", code="CACHE_CLOSED")

        if not isinstance(key, str) or not key:
            raise CacheError("Key must be a non-empty string", code="INVALID_KEY")

    def _expired(self, key: str, now: float) -> bool:
        expiry_time = self._ttl.get(key)
        return expiry_time is not None and now >= expiry_time

    async def get(self, key: str) -> Any | None:
        """
        Retrieves the value associated with a given key.

        Args:
            key: The key of the entry to retrieve.

        Returns:
            The stored value, or None if the key is not found or has expired.

        Raises:
            CacheError: If the store is closed or the key is invalid.
        """
        self._validate_key(key)

        with self._lock:
            if key not in self._data:
                return None

            if self._expired(key, time.time()):
                # Remove expired entry
                self._data.pop(key, None)
                self._ttl.pop(key, None)
                return None

            return self._data[key]["value"]

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """
        Sets a key-value pair with a Time-To-Live (TTL).

        Args:
            key: The unique key for the entry.
            value: The value to store; must not be None.
            ttl_seconds: The time-to-live for the entry, in seconds.

        Raises:
            CacheError: If the operation fails.
        """
        self._validate_key(key)

        if value is None:
            raise CacheError("Value must not be None", code="INVALID_VALUE")

        if ttl_seconds <= 0:
            raise CacheError("TTL must be positive", code="INVALID_TTL")

        with self._lock:
            # Check storage limits
            if key not in self._data and len(self._data) >= self.max_keys:
                raise CacheError(f"Maximum keys limit ({self.max_keys}) exceeded", code="CACHE_LIMIT_EXCEEDED")

            self._data[key] = {"value": value, "created_at": datetime.now(UTC)}
            self._ttl[key] = time.time() + ttl_seconds

    async def delete(self, key: str) -> bool:
        """
        Deletes a key-value pair from the cache.

        Args:
            key: The key to delete.

        Returns:
            True if the key was found and deleted, False otherwise.
        """
        self._validate_key(key)

        with self._lock:
            existed = key in self._data
            self._data.pop(key, None)
            self._ttl.pop(key, None)
            return existed

    async def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock:
            self._data.clear()
            self._ttl.clear()

    async def close(self) -> None:
        """
        Closes the cache and releases any underlying resources.
        """
        self._closed = True
        await self.clear()

    # Additional helper methods for testing and debugging

    async def list_keys(self) -> List[str]:
        """List all live (non-expired) keys."""
        with self._lock:
            now = time.time()
            return sorted(key for key in self._data if not self._expired(key, now))

    async def get_key_info(self, key: str) -> Dict[str, Any] | None:
        """Get detailed information about a key."""
        with self._lock:
            if key not in self._data:
                return None

            current_time = time.time()
            expiry_time = self._ttl[key]
            return {
                "key": key,
                "created_at": self._data[key]["created_at"].isoformat(),
                "expires_at": datetime.fromtimestamp(expiry_time, UTC).isoformat(),
                "ttl_seconds": max(0, expiry_time - current_time),
                "is_expired": current_time >= expiry_time,
            }

    async def force_cleanup(self) -> int:
        """Force immediate cleanup of expired entries and return count of removed entries."""
        with self._lock:
            now = time.time()
            expired_keys = [key for key in self._ttl if self._expired(key, now)]

            for key in expired_keys:
                self._data.pop(key, None)
                self._ttl.pop(key, None)

        return len(expired_keys)
