# ABOUTME: JSON file implementation of AbstractArtifactStore
# ABOUTME: Reads the configuration artifact leniently and replaces it atomically on write

import json
import os
import tempfile
from pathlib import Path
from typing import Union

from loguru import logger

from registry.exceptions import ArtifactError
from registry.interfaces.artifact import AbstractArtifactStore
from registry.models import ConfigData


class JsonFileArtifactStore(AbstractArtifactStore):
    """
    Stores the derived configuration as a JSON document on disk.

    A missing file or a document that is not a JSON object loads as ``None``
    so a rebuild can start from scratch. Writes go to a temporary file in the
    same directory which then replaces the target, so readers never see a
    half-written artifact.
    """

    def __init__(self, path: Union[str, Path], indent: int = 4):
        self.path = Path(path)
        self.indent = indent
        self._logger = logger.bind(name=__name__)

    async def load(self) -> ConfigData | None:
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._logger.debug(f"Configuration artifact {self.path} does not exist yet")
            return None
        except OSError as e:
            raise ArtifactError(
                f"Cannot read configuration artifact {self.path}: {e}",
                code="ARTIFACT_READ_FAILED",
                details={"path": str(self.path)},
            ) from e

        try:
            config = json.loads(content)
        except ValueError:
            self._logger.warning(f"Configuration artifact {self.path} is malformed, ignoring its content")
            return None

        if not isinstance(config, dict):
            self._logger.warning(f"Configuration artifact {self.path} is not a mapping, ignoring its content")
            return None

        return config

    async def store(self, config: ConfigData) -> None:
        try:
            payload = json.dumps(config, indent=self.indent, sort_keys=True)
        except (TypeError, ValueError) as e:
            raise ArtifactError(
                "Configuration is not JSON-serializable", code="ARTIFACT_ENCODE_FAILED", details={"path": str(self.path)}
            ) from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                    handle.write("\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ArtifactError(
                f"Cannot write configuration artifact {self.path}: {e}",
                code="ARTIFACT_WRITE_FAILED",
                details={"path": str(self.path)},
            ) from e

        self._logger.debug(f"Configuration artifact written to {self.path}")
