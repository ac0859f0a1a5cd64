# ABOUTME: Settings registry combining the record store with the two-tier cache
# ABOUTME: Owns read resolution, invalidation on write and the snapshot rebuild hook

from types import TracebackType

from loguru import logger

from registry.components.settings.cache_layer import CacheLayer
from registry.components.settings.snapshot_builder import ConfigSnapshotBuilder
from registry.exceptions import ArtifactError
from registry.interfaces.storage import AbstractRecordStore
from registry.models import Found, Missing, Setting, SettingLookup, build_cache_key

# The setting holding the shared cache TTL, as (name, module_id)
TTL_SETTING = ("expireTime", "cache")


class SettingsRegistry:
    """
    Named settings scoped by an optional module id.

    Reads go through the cache layer and fall back to the record store; a
    missing setting reads as an empty string and is never created by a read.

    Every write follows the same order:

    1. Build and validate the new record (``ValidationException`` aborts here).
    2. Persist it (a ``StorageError`` aborts here, cache untouched).
    3. Invalidate the record's cache key in both tiers.
    4. Rebuild the configuration snapshot if the setting is in the trigger set.

    Setting an empty value deletes the record instead of storing an empty string.
    """

    def __init__(
        self,
        record_store: AbstractRecordStore,
        cache: CacheLayer,
        snapshot_builder: ConfigSnapshotBuilder | None = None,
        key_prefix: str = "Setting",
        default_ttl: int = 3600,
    ):
        """
        Args:
            record_store: Durable storage of setting records.
            cache: Two-tier cache in front of ``record_store``.
            snapshot_builder: Rebuilds the configuration artifact; None disables rebuilds.
            key_prefix: Prefix of every cache key.
            default_ttl: Shared cache TTL used for the TTL setting itself, for
                cache-module settings and when no valid TTL is configured.
        """
        self.record_store = record_store
        self.cache = cache
        self.snapshot_builder = snapshot_builder
        self.key_prefix = key_prefix
        self.default_ttl = default_ttl
        self._logger = logger.bind(name=__name__)

    def cache_key(self, name: str, module_id: str = "") -> str:
        return build_cache_key(self.key_prefix, name, module_id)

    # Reads

    async def get(self, name: str, module_id: str = "") -> str:
        """Return the scalar value of a setting, or ``""`` if it does not exist."""
        lookup = await self.resolve_record(name, module_id)
        return lookup.value

    async def get_text(self, name: str, module_id: str = "") -> str:
        """Return the text value of a setting, or ``""`` if it does not exist."""
        lookup = await self.resolve_record(name, module_id)
        return lookup.value_text

    async def resolve_record(self, name: str, module_id: str = "") -> SettingLookup:
        """
        Resolve ``(name, module_id)`` through the cache, then the record store.

        Found records are cached with the TTL from :meth:`_ttl_for`. Misses are
        not cached, so a later write is never shadowed by a stale negative entry.
        """
        key = self.cache_key(name, module_id)

        cached = await self.cache.get(key)
        if cached is not None:
            return Found(cached)

        record = await self.record_store.find(name, module_id)
        if record is None:
            return Missing(name, module_id)

        ttl = await self._ttl_for(record)
        await self.cache.set(key, record, ttl)
        return Found(record)

    async def _ttl_for(self, record: Setting) -> int:
        # The TTL setting and everything in its module use the fixed default;
        # reading the TTL for them would resolve the TTL setting recursively.
        if record.name == TTL_SETTING[0] or record.module_id == TTL_SETTING[1]:
            return self.default_ttl

        raw = await self.get(*TTL_SETTING)
        try:
            ttl = int(raw)
        except ValueError:
            ttl = 0

        if ttl <= 0:
            if raw:
                self._logger.warning(f"Ignoring invalid cache expireTime {raw!r}, using {self.default_ttl}s")
            return self.default_ttl
        return ttl

    # Writes

    async def set(self, name: str, value: str, module_id: str = "") -> None:
        """
        Store the scalar value of a setting.

        An empty ``value`` deletes the setting if it exists.

        Raises:
            ValidationException: If the name is empty or a field is too long.
            StorageError: If the record store rejects the write.
            ArtifactError: If the triggered snapshot rebuild fails; the write itself stands.
        """
        lookup = await self._load_for_write(name, module_id)

        if value == "":
            if isinstance(lookup, Found):
                await self._delete(lookup.setting)
            else:
                await self.cache.remove(self.cache_key(name, module_id))
            return

        await self._save(self._prepare(lookup, name, module_id, value=value))

    async def set_text(self, name: str, value: str, module_id: str = "") -> None:
        """
        Store the text value of a setting. Empty text is stored, not deleted.

        Raises:
            ValidationException: If the name is empty or a field is too long.
            StorageError: If the record store rejects the write.
            ArtifactError: If the triggered snapshot rebuild fails; the write itself stands.
        """
        lookup = await self._load_for_write(name, module_id)
        await self._save(self._prepare(lookup, name, module_id, value_text=value))

    async def delete(self, name: str, module_id: str = "") -> bool:
        """Delete a setting. Returns True if a record was removed."""
        lookup = await self._load_for_write(name, module_id)
        if isinstance(lookup, Missing):
            await self.cache.remove(self.cache_key(name, module_id))
            return False
        return await self._delete(lookup.setting)

    async def _load_for_write(self, name: str, module_id: str) -> SettingLookup:
        # Writes start from storage. The local tier never expires and may still
        # hold a record another process has since deleted or replaced.
        record = await self.record_store.find(name, module_id)
        if record is None:
            return Missing(name, module_id)
        return Found(record)

    @staticmethod
    def _prepare(lookup: SettingLookup, name: str, module_id: str, **fields: str) -> Setting:
        if module_id != "":
            fields["module_id"] = module_id

        if isinstance(lookup, Found):
            return lookup.setting.with_changes(name=name, **fields)
        return Setting.create(name=name, **fields)

    async def _save(self, record: Setting) -> Setting:
        saved = await self.record_store.save(record)
        await self.cache.remove(saved.cache_key(self.key_prefix))
        self._logger.debug(f"Setting {saved.name!r} (module {saved.module_id!r}) saved")

        await self._after_write(saved)
        return saved

    async def _delete(self, record: Setting) -> bool:
        deleted = await self.record_store.delete(record)
        await self.cache.remove(record.cache_key(self.key_prefix))

        if deleted:
            self._logger.debug(f"Setting {record.name!r} (module {record.module_id!r}) deleted")
            await self._after_write(record)
        return deleted

    async def _after_write(self, record: Setting) -> None:
        if self.snapshot_builder is None:
            return
        if not self.snapshot_builder.should_rebuild(record.name, record.module_id):
            return

        self._logger.info(f"Setting {record.name!r} (module {record.module_id!r}) changed, rebuilding snapshot")
        try:
            await self.snapshot_builder.rebuild(self)
        except ArtifactError as e:
            self._logger.error(f"Configuration snapshot rebuild failed, artifact is stale: {e.message}")
            raise

    # Lifecycle

    async def close(self) -> None:
        """Flush and close the cache layer, then close the record store."""
        await self.cache.close()
        await self.record_store.close()

    async def __aenter__(self) -> "SettingsRegistry":
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        await self.close()
