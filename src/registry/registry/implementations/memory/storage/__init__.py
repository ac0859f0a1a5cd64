# ABOUTME: Memory-based storage implementations package
# ABOUTME: Provides the in-memory record store for settings

from .record_store import InMemoryRecordStore

__all__ = [
    "InMemoryRecordStore",
]
