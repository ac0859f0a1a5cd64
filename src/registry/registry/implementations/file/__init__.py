# ABOUTME: File-based implementations package
# ABOUTME: Provides the JSON file artifact store

from .artifact_store import JsonFileArtifactStore

__all__ = [
    "JsonFileArtifactStore",
]
