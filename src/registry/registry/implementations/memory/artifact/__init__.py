# ABOUTME: Memory-based artifact implementations package
# ABOUTME: Provides the in-memory artifact store

from .artifact_store import InMemoryArtifactStore

__all__ = [
    "InMemoryArtifactStore",
]
