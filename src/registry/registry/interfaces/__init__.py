# ABOUTME: Core interfaces package exports
# ABOUTME: Exports abstract collaborator contracts for storage, caching and artifacts

# Storage interfaces
from .storage import AbstractRecordStore

# Cache interfaces
from .cache import AbstractCacheStore

# Artifact interfaces
from .artifact import AbstractArtifactStore

__all__ = [
    # Storage
    "AbstractRecordStore",
    # Cache
    "AbstractCacheStore",
    # Artifact
    "AbstractArtifactStore",
]
