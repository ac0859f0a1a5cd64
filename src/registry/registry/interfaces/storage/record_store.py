# ABOUTME: Abstract record store interface for durable setting persistence
# ABOUTME: Defines the find/save/delete contract keyed by (name, module_id)

from abc import ABC, abstractmethod
from types import TracebackType

from registry.models import Setting


class AbstractRecordStore(ABC):
    """
    [L0] Abstract interface for the persistent store of setting records.

    The record store is a pure persistence boundary: no caching happens here.
    Lookups with ``module_id == ""`` address the global namespace, i.e. records
    whose module scope is ``None``, never records that literally store an empty
    string as their module id.

    Architecture note: This is a [L0] interface that only depends on models
    and provides clean abstractions for [L1] storage implementations.
    """

    @abstractmethod
    async def find(self, name: str, module_id: str = "") -> Setting | None:
        """Find the record stored under ``(name, module_id)``.

        Args:
            name (str): The setting name.
            module_id (str, optional): Module scope, ``""`` for the global namespace.

        Returns:
            Setting | None: The stored record, or None if no record exists.

        Raises:
            StorageError: If the lookup fails due to storage issues.
        """
        pass

    @abstractmethod
    async def save(self, setting: Setting) -> Setting:
        """Insert or update a record.

        New records (``id is None``) are inserted and receive an id; existing
        records are updated in place.

        Args:
            setting (Setting): The record to persist.

        Returns:
            Setting: The persisted record, including its assigned id.

        Raises:
            ValidationException: If field limits or the (name, module_id) uniqueness are violated.
            StorageError: If the record cannot be saved due to storage issues.
        """
        pass

    @abstractmethod
    async def delete(self, setting: Setting) -> bool:
        """Delete a stored record.

        Args:
            setting (Setting): The record to delete.

        Returns:
            bool: True if a record was deleted, False if it did not exist.

        Raises:
            StorageError: If the deletion fails due to storage issues.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the store and release any underlying resources."""
        pass

    async def __aenter__(self) -> "AbstractRecordStore":
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        await self.close()
