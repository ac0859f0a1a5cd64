# ABOUTME: Models package initialization
# ABOUTME: Exports the setting entity, lookup result types and shared type aliases

from .setting import Setting, build_cache_key, MAX_NAME_LENGTH, MAX_VALUE_LENGTH, MAX_MODULE_ID_LENGTH
from .lookup import Found, Missing, SettingLookup
from .types import ConfigData

__all__ = [
    "Setting",
    "build_cache_key",
    "MAX_NAME_LENGTH",
    "MAX_VALUE_LENGTH",
    "MAX_MODULE_ID_LENGTH",
    "Found",
    "Missing",
    "SettingLookup",
    "ConfigData",
]
