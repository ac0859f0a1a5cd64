# ABOUTME: Memory-based cache implementations package
# ABOUTME: Provides the TTL shared-tier cache and the process-local tier

from .cache_store import InMemoryCacheStore
from .local_cache import ProcessLocalCache

__all__ = [
    "InMemoryCacheStore",
    "ProcessLocalCache",
]
