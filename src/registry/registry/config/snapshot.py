# ABOUTME: Configuration for the derived configuration snapshot
# ABOUTME: Locates the artifact and names the component classes written into it

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class SnapshotSettings(BaseSettings):
    """Settings for the configuration snapshot builder.

    Attributes:
        ARTIFACT_PATH: JSON file the snapshot is written to; unset keeps it in memory.
        MAIL_COMPONENT_CLASS: Mailer component class written into the mail descriptor.
        MAIL_VIEW_PATH: Template location written into the mail descriptor.
        DEFAULT_CACHE_CLASS: Cache backend class used when the ``type`` cache setting is unset.
    """

    ARTIFACT_PATH: Optional[str] = Field(
        default=None,
        description="Path of the JSON configuration artifact. When unset the artifact is held in memory.",
    )
    MAIL_COMPONENT_CLASS: str = Field(
        default="mailer.Mailer",
        description="Mailer component class written into the mail descriptor.",
    )
    MAIL_VIEW_PATH: str = Field(
        default="views/mail",
        description="Mail template location written into the mail descriptor.",
    )
    DEFAULT_CACHE_CLASS: str = Field(
        default="registry.implementations.noop.NoOpCacheStore",
        description="Cache backend class written when no cache type is configured.",
    )
