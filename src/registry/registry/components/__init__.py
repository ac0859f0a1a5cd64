# ABOUTME: Components package initialization
# ABOUTME: Exports the settings registry and the collaborators it composes

from .settings import CacheLayer, SettingsRegistry, ConfigSnapshotBuilder, create_registry

__all__ = [
    "CacheLayer",
    "SettingsRegistry",
    "ConfigSnapshotBuilder",
    "create_registry",
]
