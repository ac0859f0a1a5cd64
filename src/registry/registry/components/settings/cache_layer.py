# ABOUTME: Two-tier read cache in front of the record store
# ABOUTME: Checks the process-local tier first, then the shared TTL tier, promoting shared hits

from pydantic import ValidationError
from loguru import logger

from registry.exceptions import CacheError
from registry.implementations.memory.cache.local_cache import ProcessLocalCache
from registry.interfaces.cache import AbstractCacheStore
from registry.models import Setting


class CacheLayer:
    """
    Read cache combining a process-local tier and a shared tier.

    The process-local tier never expires and is consulted first. The shared
    tier holds the JSON form of each setting under a TTL and is visible to
    every process; a shared hit is copied into the local tier so later reads
    in this process skip the round trip.

    Removal always drops the local entry before the shared one. The local tier
    cannot fail, so a shared-tier failure leaves at most the shared entry
    behind and is raised to the writer.
    """

    def __init__(self, local: ProcessLocalCache, shared: AbstractCacheStore):
        """
        Args:
            local: Process-local tier, owned by this process only.
            shared: Shared TTL tier, e.g. Redis.
        """
        self.local = local
        self.shared = shared
        self._logger = logger.bind(name=__name__)

    async def get(self, key: str) -> Setting | None:
        """
        Return the cached setting for ``key`` or None on a miss in both tiers.

        A shared tier that cannot be reached counts as a miss so reads fall
        through to storage.
        """
        setting = self.local.get(key)
        if setting is not None:
            self._logger.debug(f"Local cache hit for {key!r}")
            return setting

        try:
            raw = await self.shared.get(key)
        except CacheError as e:
            self._logger.warning(f"Shared cache read failed for {key!r}, falling through to storage: {e.message}")
            return None

        if raw is None:
            self._logger.debug(f"Cache miss for {key!r}")
            return None

        try:
            setting = Setting.model_validate(raw)
        except ValidationError:
            self._logger.warning(f"Discarding unreadable shared cache entry {key!r}")
            try:
                await self.shared.delete(key)
            except CacheError as e:
                self._logger.warning(f"Shared cache delete failed for {key!r}: {e.message}")
            return None

        self.local.set(key, setting)
        self._logger.debug(f"Shared cache hit for {key!r}, promoted to local tier")
        return setting

    async def set(self, key: str, setting: Setting, ttl_seconds: int) -> None:
        """Store ``setting`` in both tiers; the shared copy expires after ``ttl_seconds``."""
        try:
            await self.shared.set(key, setting.model_dump(mode="json"), ttl_seconds)
        except CacheError as e:
            self._logger.warning(f"Shared cache write failed for {key!r}: {e.message}")
        self.local.set(key, setting)

    async def remove(self, key: str) -> None:
        """
        Remove ``key`` from both tiers, local first.

        Raises:
            CacheError: If the shared tier cannot be updated.
        """
        self.local.remove(key)
        await self.shared.delete(key)
        self._logger.debug(f"Invalidated cache entry {key!r}")

    def flush(self) -> int:
        """Drop every process-local entry and return how many were held."""
        return self.local.flush()

    async def close(self) -> None:
        """Flush the local tier and close the shared tier."""
        count = self.flush()
        self._logger.debug(f"Flushed {count} local cache entries")
        await self.shared.close()
