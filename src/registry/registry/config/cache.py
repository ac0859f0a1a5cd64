# ABOUTME: Cache configuration for the settings registry
# ABOUTME: Selects the shared cache backend and controls key prefix and default TTL

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class CacheSettings(BaseSettings):
    """Settings for the two-tier read cache.

    Attributes:
        CACHE_BACKEND: Shared tier backend: ``memory`` (single host), ``redis`` or ``noop``.
        CACHE_KEY_PREFIX: Prefix of every cache key, ``<prefix>_<name>_<module_id>``.
        CACHE_DEFAULT_TTL: TTL in seconds used when no ``expireTime`` setting applies.
        REDIS_URL: Connection URL for the ``redis`` backend.
    """

    CACHE_BACKEND: Literal["memory", "redis", "noop"] = Field(
        default="memory",
        description="Backend used for the shared cache tier.",
    )
    CACHE_KEY_PREFIX: str = Field(
        default="Setting",
        min_length=1,
        description="Prefix applied to every setting cache key.",
    )
    CACHE_DEFAULT_TTL: int = Field(
        default=3600,
        gt=0,
        description="Shared cache TTL in seconds for the expireTime setting, cache-module settings and fallbacks.",
    )
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL, used when CACHE_BACKEND is 'redis'.",
    )

    @field_validator("CACHE_BACKEND", mode="before")
    @classmethod
    def validate_backend_case_insensitive(cls, v: str) -> str:
        if isinstance(v, str):
            return v.lower().strip()
        return v
