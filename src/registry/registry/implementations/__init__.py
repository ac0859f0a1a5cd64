# ABOUTME: Core implementations package exports
# ABOUTME: Contains concrete implementations of the collaborator interfaces

"""
Registry Implementations

This module contains concrete implementations of the record store, cache
store and artifact store interfaces. The Redis backend lives in
``registry.implementations.redis`` and is imported on demand.
"""

from .memory import InMemoryRecordStore, InMemoryCacheStore, ProcessLocalCache, InMemoryArtifactStore
from .noop import NoOpCacheStore
from .file import JsonFileArtifactStore

__all__ = [
    "InMemoryRecordStore",
    "InMemoryCacheStore",
    "ProcessLocalCache",
    "InMemoryArtifactStore",
    "NoOpCacheStore",
    "JsonFileArtifactStore",
]
