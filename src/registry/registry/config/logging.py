# ABOUTME: Loguru sink setup for the settings registry
# ABOUTME: Derives console, rotating file and error file sinks from BaseRegistrySettings

import sys
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from registry.config._base import BaseRegistrySettings


class LoggerConfig(BaseModel):
    """Sink options applied by :func:`setup_logging`."""

    app_name: str = "SettingsRegistry"

    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<magenta>{extra[app]}</magenta> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False

    # None disables the sink
    file_path: Path | None = None
    file_level: str = "DEBUG"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[app]} | {name}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_serialize: bool = False
    error_file_path: Path | None = None

    # diagnose prints local variable values, which may include setting values
    diagnose: bool = False
    enqueue: bool = False

    @classmethod
    def from_settings(cls, settings: BaseRegistrySettings) -> "LoggerConfig":
        """
        Translate registry settings into sink options.

        ``DEBUG`` overrides ``LOG_LEVEL``. Production gets plain console output,
        queued sinks and, when ``LOG_FILE_PATH`` is set, an ``-errors`` file
        next to the main log.
        """
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
        production = settings.ENV == "production"
        serialize = settings.LOG_FORMAT == "json"

        file_path = Path(settings.LOG_FILE_PATH) if settings.LOG_FILE_PATH else None
        error_file_path = None
        if file_path is not None and production:
            error_file_path = file_path.with_name(f"{file_path.stem}-errors{file_path.suffix}")

        return cls(
            app_name=settings.APP_NAME,
            console_level=level,
            console_colorize=not (production or serialize),
            console_serialize=serialize,
            file_path=file_path,
            file_level=level,
            file_serialize=serialize,
            error_file_path=error_file_path,
            diagnose=settings.DEBUG,
            enqueue=production,
        )


def setup_logging(config: LoggerConfig) -> None:
    """Replace every loguru sink with the ones described by ``config``."""
    logger.remove()
    logger.configure(extra={"app": config.app_name})

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            backtrace=config.diagnose,
            diagnose=config.diagnose,
            enqueue=config.enqueue,
        )

    for path, level in ((config.file_path, config.file_level), (config.error_file_path, "ERROR")):
        if path is None:
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            level=level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            serialize=config.file_serialize,
            diagnose=config.diagnose,
            enqueue=config.enqueue,
        )


def configure_for_environment(settings: BaseRegistrySettings) -> None:
    """Apply the logging profile for ``settings.ENV`` and the LOG_* settings."""
    config = LoggerConfig.from_settings(settings)
    setup_logging(config)
    logger.bind(name=__name__).debug(
        f"Logging configured for {settings.ENV} at {config.console_level}"
        + (f", file {config.file_path}" if config.file_path else "")
    )


def configure_for_testing() -> None:
    """Log everything to stdout without queueing so pytest captures it in order."""
    logger.remove()
    logger.configure(extra={"app": "tests"})
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        catch=False,
    )
