# ABOUTME: Main configuration composition for the settings registry.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseRegistrySettings
from .cache import CacheSettings
from .snapshot import SnapshotSettings


class RegistrySettings(BaseRegistrySettings, CacheSettings, SnapshotSettings):
    """Represents the complete, composed configuration for the registry.

    Each configuration module is self-contained; this class unifies them
    through inheritance so the application reads one `RegistrySettings` object.

    The sub-settings classes carry pydantic-settings defaults in their own
    `model_config`, so the `.env` loading rules of `BaseRegistrySettings` are
    restated here to win over them.

    The `get_settings` function provides a singleton instance of this class.
    """

    model_config = BaseRegistrySettings.model_config


@lru_cache
def get_settings() -> RegistrySettings:
    """Provides a singleton instance of the registry settings.

    `lru_cache` ensures the settings are read from the environment only once,
    which keeps configuration consistent across the process.

    Returns:
        A single, cached instance of the RegistrySettings class.
    """
    return RegistrySettings()
