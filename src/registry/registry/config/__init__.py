# ABOUTME: Configuration package initialization
# ABOUTME: Exports the settings classes and the loguru setup driven by them

from registry.config.settings import RegistrySettings, get_settings
from registry.config._base import BaseRegistrySettings
from registry.config.cache import CacheSettings
from registry.config.snapshot import SnapshotSettings
from registry.config.logging import (
    LoggerConfig,
    setup_logging,
    configure_for_environment,
    configure_for_testing,
)

__all__ = [
    "RegistrySettings",
    "get_settings",
    "BaseRegistrySettings",
    "CacheSettings",
    "SnapshotSettings",
    "LoggerConfig",
    "setup_logging",
    "configure_for_environment",
    "configure_for_testing",
]
