# ABOUTME: NoOp cache implementations package
# ABOUTME: Provides the cache store that never retains entries

from .cache_store import NoOpCacheStore

__all__ = [
    "NoOpCacheStore",
]
