# ABOUTME: Artifact interfaces package exports
# ABOUTME: Exports the abstract store for the derived configuration artifact

from .artifact_store import AbstractArtifactStore

__all__ = [
    "AbstractArtifactStore",
]
