# ABOUTME: Storage interfaces package exports
# ABOUTME: Exports the abstract record store for setting persistence

from .record_store import AbstractRecordStore

__all__ = [
    "AbstractRecordStore",
]
