"""Generic in-memory record store."""

import logging
import threading
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Fields assigned by the store; callers can never set or overwrite them.
PROTECTED_FIELDS = frozenset({"id", "created_at"})


class RecordStore(Generic[RecordT]):
    """Ordered, in-memory sequence of records looked up by integer ``id``.

    The store owns its records outright: every record handed back to a caller
    is a copy, so mutating a returned object or list never changes store
    state. Operations are serialized with a re-entrant lock.

    "Not found" is reported as ``None`` (or ``False`` for :meth:`delete`),
    never raised. Identifier shape is not checked here; that is the caller's
    job (see :mod:`gitflow_common.services.validation`).
    """

    record_type: type[RecordT]

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        """Initialize the store.

        Args:
            records: Seed records, copied into the store in order
        """
        self._records: list[RecordT] = [record.model_copy(deep=True) for record in records]
        self._lock = threading.RLock()
        # Highest identifier ever handed out, so ids of deleted records are not reused
        self._last_id = max((record.id for record in self._records), default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _find_index(self, record_id: Any) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    @staticmethod
    def _copy(record: RecordT) -> RecordT:
        return record.model_copy(deep=True)

    def _writable(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Drop protected and unknown keys from caller-supplied fields."""
        known = self.record_type.model_fields
        return {key: value for key, value in fields.items() if key in known and key not in PROTECTED_FIELDS}

    def list_all(self) -> list[RecordT]:
        """Return a snapshot of every record in insertion order."""
        with self._lock:
            return [self._copy(record) for record in self._records]

    def get_by_id(self, record_id: Any) -> RecordT | None:
        """Get a record by ID."""
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return None
            return self._copy(self._records[index])

    def create(self, fields: Mapping[str, Any]) -> RecordT:
        """Create a record from ``fields``.

        Args:
            fields: Record fields; ``id`` and ``created_at`` are ignored

        Returns:
            The stored record with its assigned ``id`` and ``created_at``
        """
        with self._lock:
            record_id = self._last_id + 1
            record = self.record_type.model_validate(
                {**self._writable(fields), "id": record_id, "created_at": datetime.now(UTC)}
            )
            self._records.append(record)
            self._last_id = record_id
            logger.info("Created %s %s", self.record_type.__name__, record_id)
            return self._copy(record)

    def update(self, record_id: Any, fields: Mapping[str, Any]) -> RecordT | None:
        """Merge ``fields`` over an existing record.

        Args:
            record_id: Identifier of the record to update
            fields: Partial fields; unknown keys, ``id`` and ``created_at`` are ignored

        Returns:
            The merged record, or None if no record has ``record_id``
        """
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return None

            merged = self._records[index].model_dump()
            merged.update(self._writable(fields))
            record = self.record_type.model_validate(merged)
            self._records[index] = record
            logger.info("Updated %s %s", self.record_type.__name__, record_id)
            return self._copy(record)

    def delete(self, record_id: Any) -> bool:
        """Delete a record. Returns False if nothing matched."""
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return False
            del self._records[index]
            logger.info("Deleted %s %s", self.record_type.__name__, record_id)
            return True
