# ABOUTME: Builds the derived configuration snapshot from registry settings
# ABOUTME: Merges name, cache backend, mail transport and theme into the existing artifact

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Dict

from loguru import logger

from registry.interfaces.artifact import AbstractArtifactStore
from registry.models import ConfigData

if TYPE_CHECKING:
    from registry.components.settings.registry import SettingsRegistry

# Settings whose change forces the snapshot to be rebuilt
TRIGGER_MODULES = frozenset({"mailing", "cache"})
TRIGGER_NAMES = frozenset({"name", "theme"})

# Registry setting name -> transportOptions key
SMTP_OPTIONS = (
    ("hostname", "host"),
    ("username", "username"),
    ("password", "password"),
    ("encryption", "encryption"),
    ("port", "port"),
)


class ConfigSnapshotBuilder:
    """
    Materializes selected registry settings into a statically loadable artifact.

    The rebuilt document keeps every key it does not own, both at the top level
    and inside ``components``, so unrelated configuration survives a rewrite.
    Values are always read back through the registry, which means a rebuild
    reflects current registry state rather than the write that triggered it.
    """

    def __init__(
        self,
        artifact_store: AbstractArtifactStore,
        mail_class: str = "mailer.Mailer",
        mail_view_path: str = "views/mail",
        default_cache_class: str = "registry.implementations.noop.NoOpCacheStore",
    ):
        """
        Args:
            artifact_store: Where the snapshot is loaded from and written to.
            mail_class: Mailer component class written into the mail descriptor.
            mail_view_path: Template location written into the mail descriptor.
            default_cache_class: Cache class used when the ``type`` cache setting is unset.
        """
        self.artifact_store = artifact_store
        self.mail_class = mail_class
        self.mail_view_path = mail_view_path
        self.default_cache_class = default_cache_class
        self._logger = logger.bind(name=__name__)

    @staticmethod
    def should_rebuild(name: str, module_id: str | None) -> bool:
        """Return True if a change to ``(name, module_id)`` affects the snapshot."""
        return module_id in TRIGGER_MODULES or name in TRIGGER_NAMES

    async def build(self, registry: SettingsRegistry, base: ConfigData | None = None) -> ConfigData:
        """
        Merge the current registry state into ``base`` and return the result.

        ``base`` is not modified.
        """
        config: ConfigData = copy.deepcopy(base) if base else {}

        config["name"] = await registry.get("name")

        components = config.get("components")
        if not isinstance(components, dict):
            components = {}
        config["components"] = components

        cache_class = await registry.get("type", "cache")
        components["cache"] = {"class": cache_class or self.default_cache_class}

        components["mail"] = await self._build_mail(registry)

        theme = await registry.get("theme")
        if theme:
            config["theme"] = theme
        else:
            config.pop("theme", None)

        return config

    async def _build_mail(self, registry: SettingsRegistry) -> Dict[str, Any]:
        transport_type = await registry.get("transportType", "mailing")
        mail: Dict[str, Any] = {
            "class": self.mail_class,
            "transportType": transport_type,
            "viewPath": self.mail_view_path,
            "logging": True,
            "dryRun": False,
        }

        if transport_type == "smtp":
            options: Dict[str, str] = {}
            for setting_name, option in SMTP_OPTIONS:
                value = await registry.get(setting_name, "mailing")
                if value:
                    options[option] = value
            mail["transportOptions"] = options

        return mail

    async def rebuild(self, registry: SettingsRegistry) -> ConfigData:
        """
        Rewrite the artifact from the current registry state.

        A missing or malformed artifact is treated as empty.

        Raises:
            ArtifactError: If the artifact exists but cannot be read, or cannot be written.
        """
        base = await self.artifact_store.load()
        if base is None:
            self._logger.debug("No usable configuration artifact found, rebuilding from scratch")

        config = await self.build(registry, base)
        await self.artifact_store.store(config)

        self._logger.info(f"Configuration snapshot rebuilt with {len(config)} top-level keys")
        return config
