# ABOUTME: Settings components package
# ABOUTME: Two-tier cache layer, settings registry, snapshot builder and composition root

from .cache_layer import CacheLayer
from .snapshot_builder import ConfigSnapshotBuilder
from .registry import SettingsRegistry
from .factory import create_registry

__all__ = [
    "CacheLayer",
    "ConfigSnapshotBuilder",
    "SettingsRegistry",
    "create_registry",
]
