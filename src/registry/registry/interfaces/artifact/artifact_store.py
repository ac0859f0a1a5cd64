# ABOUTME: Abstract artifact store interface for the derived configuration snapshot
# ABOUTME: Defines whole-document load and store of the statically loadable configuration

from abc import ABC, abstractmethod

from registry.models import ConfigData


class AbstractArtifactStore(ABC):
    """
    [L0] Abstract interface for the store holding the derived configuration artifact.

    The artifact is read and written as a whole; there are no partial updates.
    """

    @abstractmethod
    async def load(self) -> ConfigData | None:
        """Load the current artifact.

        Returns:
            ConfigData | None: The stored configuration, or None when the artifact
            is absent or cannot be parsed as a mapping.

        Raises:
            ArtifactError: If the artifact exists but cannot be read.
        """
        pass

    @abstractmethod
    async def store(self, config: ConfigData) -> None:
        """Overwrite the artifact with ``config``.

        Raises:
            ArtifactError: If the artifact cannot be written.
        """
        pass
