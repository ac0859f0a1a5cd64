# ABOUTME: Composition root for the settings registry
# ABOUTME: Builds the cache tiers, record store and snapshot builder from RegistrySettings

from loguru import logger

from registry.components.settings.cache_layer import CacheLayer
from registry.components.settings.registry import SettingsRegistry
from registry.components.settings.snapshot_builder import ConfigSnapshotBuilder
from registry.config import RegistrySettings, configure_for_environment, get_settings
from registry.exceptions import ConfigurationException
from registry.implementations.file import JsonFileArtifactStore
from registry.implementations.memory import (
    InMemoryArtifactStore,
    InMemoryCacheStore,
    InMemoryRecordStore,
    ProcessLocalCache,
)
from registry.implementations.noop import NoOpCacheStore
from registry.interfaces.artifact import AbstractArtifactStore
from registry.interfaces.cache import AbstractCacheStore
from registry.interfaces.storage import AbstractRecordStore


def create_shared_cache(settings: RegistrySettings) -> AbstractCacheStore:
    """Create the shared cache tier selected by ``CACHE_BACKEND``."""
    backend = settings.CACHE_BACKEND
    if backend == "memory":
        return InMemoryCacheStore()
    if backend == "noop":
        return NoOpCacheStore()
    if backend == "redis":
        # redis is only imported when it is actually configured
        from registry.implementations.redis import RedisCacheStore

        return RedisCacheStore.from_url(settings.REDIS_URL)

    raise ConfigurationException(f"Unsupported cache backend: {backend}", code="UNSUPPORTED_CACHE_BACKEND")


def create_artifact_store(settings: RegistrySettings) -> AbstractArtifactStore:
    if settings.ARTIFACT_PATH:
        return JsonFileArtifactStore(settings.ARTIFACT_PATH)
    return InMemoryArtifactStore()


def create_registry(
    settings: RegistrySettings | None = None,
    *,
    record_store: AbstractRecordStore | None = None,
    artifact_store: AbstractArtifactStore | None = None,
    configure_logging: bool = True,
) -> SettingsRegistry:
    """
    Build a fully wired SettingsRegistry.

    Args:
        settings: Configuration to build from; defaults to ``get_settings()``.
        record_store: Durable store to use instead of a fresh in-memory one.
        artifact_store: Artifact store to use instead of the one ``ARTIFACT_PATH`` selects.
        configure_logging: Replace the loguru sinks according to ``ENV`` and the
            LOG_* settings. Pass False when the host application owns logging.

    Returns:
        A registry owning its cache tiers. Close it on shutdown to flush the
        process-local tier and release the shared cache connection.
    """
    settings = settings or get_settings()
    if configure_logging:
        configure_for_environment(settings)

    cache = CacheLayer(ProcessLocalCache(), create_shared_cache(settings))
    builder = ConfigSnapshotBuilder(
        artifact_store or create_artifact_store(settings),
        mail_class=settings.MAIL_COMPONENT_CLASS,
        mail_view_path=settings.MAIL_VIEW_PATH,
        default_cache_class=settings.DEFAULT_CACHE_CLASS,
    )

    logger.bind(name=__name__).info(
        f"Creating settings registry {settings.APP_NAME!r} with {settings.CACHE_BACKEND} shared cache "
        f"(prefix {settings.CACHE_KEY_PREFIX!r}, default TTL {settings.CACHE_DEFAULT_TTL}s)"
    )

    return SettingsRegistry(
        record_store or InMemoryRecordStore(),
        cache,
        snapshot_builder=builder,
        key_prefix=settings.CACHE_KEY_PREFIX,
        default_ttl=settings.CACHE_DEFAULT_TTL,
    )
