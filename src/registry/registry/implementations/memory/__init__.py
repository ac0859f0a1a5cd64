# ABOUTME: In-memory implementations package
# ABOUTME: Implementations that keep all state in process memory

from .storage.record_store import InMemoryRecordStore
from .cache.cache_store import InMemoryCacheStore
from .cache.local_cache import ProcessLocalCache
from .artifact.artifact_store import InMemoryArtifactStore

__all__ = [
    "InMemoryRecordStore",
    "InMemoryCacheStore",
    "ProcessLocalCache",
    "InMemoryArtifactStore",
]
