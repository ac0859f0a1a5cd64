# ABOUTME: Process-local cache tier holding resolved settings without expiry
# ABOUTME: Entries live until removed explicitly or the cache is flushed on shutdown

import threading
from typing import Any, Dict


class ProcessLocalCache:
    """
    Unbounded in-process cache.

    Entries never expire on their own; they are removed explicitly on writes or
    all at once by ``flush``. Only the owning process sees these entries, so each
    process invalidates its own copy.
    """

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def flush(self) -> int:
        """Drop every entry and return how many were held."""
        with self._lock:
            count = len(self._data)
            self._data.clear()
            return count

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
