# ABOUTME: NoOp implementations package
# ABOUTME: Contains no-operation implementations for disabled backends and testing

# Cache implementations
from .cache.cache_store import NoOpCacheStore

__all__ = [
    # Cache
    "NoOpCacheStore",
]
