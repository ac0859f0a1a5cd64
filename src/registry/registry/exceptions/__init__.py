# ABOUTME: Exceptions package exports
# ABOUTME: Exports the structured exception hierarchy of the settings registry

from registry.exceptions.base import (
    RegistryException,
    ValidationException,
    StorageError,
    CacheError,
    ArtifactError,
    ConfigurationException,
)

__all__ = [
    "RegistryException",
    "ValidationException",
    "StorageError",
    "CacheError",
    "ArtifactError",
    "ConfigurationException",
]
