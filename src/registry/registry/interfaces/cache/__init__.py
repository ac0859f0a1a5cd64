# ABOUTME: Cache interfaces package exports
# ABOUTME: Exports the abstract shared cache store

from .cache_store import AbstractCacheStore

__all__ = [
    "AbstractCacheStore",
]
