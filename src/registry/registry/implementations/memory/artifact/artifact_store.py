# ABOUTME: In-memory implementation of AbstractArtifactStore
# ABOUTME: Holds the derived configuration as a deep-copied dictionary for tests and embedding

import copy
import threading

from registry.interfaces.artifact import AbstractArtifactStore
from registry.models import ConfigData


class InMemoryArtifactStore(AbstractArtifactStore):
    """Artifact store that keeps the configuration in memory.

    Documents are deep-copied on load and store so the caller never shares
    nested mappings with the stored artifact. ``store_count`` counts successful
    writes.
    """

    def __init__(self, initial: ConfigData | None = None):
        self._config: ConfigData | None = copy.deepcopy(initial)
        self._lock = threading.Lock()
        self.store_count = 0

    async def load(self) -> ConfigData | None:
        with self._lock:
            return copy.deepcopy(self._config)

    async def store(self, config: ConfigData) -> None:
        with self._lock:
            self._config = copy.deepcopy(config)
            self.store_count += 1
