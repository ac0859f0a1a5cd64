# ABOUTME: In-memory implementation of AbstractRecordStore
# ABOUTME: Keeps setting records in a dictionary keyed by (name, module_id) with uniqueness checks

import itertools
import threading
from typing import Dict, List, Optional, Tuple

from loguru import logger

from registry.exceptions import StorageError, ValidationException
from registry.interfaces.storage import AbstractRecordStore
from registry.models import Setting

RecordKey = Tuple[str, Optional[str]]


class InMemoryRecordStore(AbstractRecordStore):
    """
    In-memory implementation of AbstractRecordStore.

    Records are indexed by ``(name, module_id)`` where a ``None`` module id is the
    global namespace and is kept apart from a literal ``""`` module id. Records are
    copied on the way in and out so callers never share state with the store.

    Features:
    - Sequential id assignment on insert
    - (name, module_id) uniqueness enforcement
    - Field validation on every save
    - Thread-safe operations
    """

    def __init__(self, max_records: int = 10000):
        """
        Initialize the in-memory record store.

        Args:
            max_records: Maximum number of records to store (to prevent memory issues)
        """
        self.max_records = max_records

        # Main storage: id -> record
        self._records: Dict[int, Setting] = {}

        # Unique index: (name, module_id) -> id
        self._index: Dict[RecordKey, int] = {}

        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._closed = False
        self._logger = logger.bind(name=__name__)

    def _check_open(self) -> None:
        if self._closed:
            raise StorageError("Record store is closed", code="RECORD_STORE_CLOSED")

    async def find(self, name: str, module_id: str = "") -> Setting | None:
        self._check_open()

        # "" addresses the global namespace, stored as None
        key: RecordKey = (name, module_id if module_id != "" else None)
        with self._lock:
            record_id = self._index.get(key)
            if record_id is None:
                return None
            return self._records[record_id].model_copy()

    async def save(self, setting: Setting) -> Setting:
        self._check_open()

        record = setting.with_changes()
        key: RecordKey = (record.name, record.module_id)

        with self._lock:
            owner = self._index.get(key)

            if record.is_new:
                if owner is not None:
                    raise ValidationException(
                        f"Setting '{record.name}' already exists in module scope {record.module_id!r}",
                        code="DUPLICATE_SETTING",
                        details={"name": record.name, "module_id": record.module_id},
                    )
                if len(self._records) >= self.max_records:
                    raise StorageError(
                        f"Maximum records limit ({self.max_records}) exceeded", code="STORAGE_LIMIT_EXCEEDED"
                    )
                record = record.model_copy(update={"id": next(self._ids)})
            else:
                previous = self._records.get(record.id)
                if previous is None:
                    raise StorageError(f"Setting with id {record.id} does not exist", code="RECORD_NOT_FOUND")
                if owner is not None and owner != record.id:
                    raise ValidationException(
                        f"Setting '{record.name}' already exists in module scope {record.module_id!r}",
                        code="DUPLICATE_SETTING",
                        details={"name": record.name, "module_id": record.module_id},
                    )
                self._index.pop((previous.name, previous.module_id), None)

            self._records[record.id] = record
            self._index[key] = record.id

        self._logger.debug(f"Saved setting {record.name!r} (module {record.module_id!r}, id {record.id})")
        return record.model_copy()

    async def delete(self, setting: Setting) -> bool:
        self._check_open()

        if setting.is_new:
            return False

        with self._lock:
            record = self._records.pop(setting.id, None)
            if record is None:
                return False
            self._index.pop((record.name, record.module_id), None)

        self._logger.debug(f"Deleted setting {record.name!r} (module {record.module_id!r}, id {record.id})")
        return True

    async def close(self) -> None:
        self._closed = True
        with self._lock:
            self._records.clear()
            self._index.clear()

    # Additional helper methods for testing and debugging

    async def all_records(self) -> List[Setting]:
        """Return copies of every stored record ordered by id."""
        with self._lock:
            return [self._records[record_id].model_copy() for record_id in sorted(self._records)]

    async def count(self) -> int:
        with self._lock:
            return len(self._records)
