# ABOUTME: Redis implementations package
# ABOUTME: Provides the Redis-backed shared cache store

from .cache_store import RedisCacheStore

__all__ = [
    "RedisCacheStore",
]
