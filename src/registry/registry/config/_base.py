# ABOUTME: Process-level settings shared by every registry deployment
# ABOUTME: Identity, runtime environment and the logging knobs read by LoggerConfig.from_settings

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_ALIASES = {
    "dev": "development",
    "develop": "development",
    "stage": "staging",
    "prod": "production",
}

LOG_FORMAT_ALIASES = {
    "structured": "json",
    "text": "txt",
}


class BaseRegistrySettings(BaseSettings):
    """Settings every registry process needs before any backend is chosen.

    Values come from the environment or a `.env` file. `RegistrySettings`
    composes this class with the cache and snapshot settings.

    Attributes:
        APP_NAME: Tag attached to every log line as ``extra[app]``.
        ENV: Runtime environment; picks the logging profile.
        DEBUG: Forces DEBUG logging with variable values in tracebacks.
        LOG_LEVEL: Minimum level for the console and file sinks.
        LOG_FORMAT: ``json`` serializes log records, ``txt`` keeps them readable.
        LOG_FILE_PATH: Rotating log file; unset keeps logging on the console only.
    """

    APP_NAME: str = Field(default="SettingsRegistry", description="Tag attached to every log line.")

    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Runtime environment. Production adds an error log file and queued sinks.",
    )
    DEBUG: bool = Field(default=False, description="Log at DEBUG with diagnosed tracebacks. Keep off in production.")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level for emitted log records.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(default="txt", description="Log record format.")
    LOG_FILE_PATH: str | None = Field(default=None, description="Rotating log file, e.g. 'logs/registry.log'.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def normalize_env(cls, v):
        """Accept any case and the short forms dev, develop, stage and prod."""
        if isinstance(v, str):
            v = v.lower().strip()
            return ENV_ALIASES.get(v, v)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        if isinstance(v, str):
            v = v.lower().strip()
            return LOG_FORMAT_ALIASES.get(v, v)
        return v
