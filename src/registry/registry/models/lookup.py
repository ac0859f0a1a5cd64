# ABOUTME: Result type for registry record resolution
# ABOUTME: Distinguishes a stored setting from a lookup that found nothing

from dataclasses import dataclass
from typing import Union

from registry.models.setting import Setting


@dataclass(frozen=True)
class Found:
    """A lookup that resolved to a stored setting."""

    setting: Setting

    @property
    def value(self) -> str:
        return self.setting.value

    @property
    def value_text(self) -> str:
        return self.setting.value_text


@dataclass(frozen=True)
class Missing:
    """A lookup with no stored record. Reads see empty values; nothing is persisted."""

    name: str
    module_id: str = ""

    @property
    def value(self) -> str:
        return ""

    @property
    def value_text(self) -> str:
        return ""


SettingLookup = Union[Found, Missing]
