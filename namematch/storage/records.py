"""
JSON file storage for name records.

Records are kept in a single JSON array. Deleting a record only clears its
is_active flag; ids are never reused.
"""

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.record import NameRecord
from ..errors import InvalidArgumentError, RecordNotFoundError, RecordStoreError
from ..matching.standardizer import standardize_name

logger = logging.getLogger(__name__)


def read_json_list(path: Path) -> List[Dict[str, Any]]:
    """Read a JSON array from disk; a missing file is an empty list."""
    if not path.exists():
        return []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading {path}: {e}")
        raise RecordStoreError(f"Could not read {path}: {e}") from e

    if not isinstance(data, list):
        raise RecordStoreError(f"Expected a JSON array in {path}")
    return data


def write_json_list(path: Path, data: List[Dict[str, Any]]) -> None:
    """Atomically replace a JSON array on disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
    except OSError as e:
        logger.error(f"Error writing {path}: {e}")
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise RecordStoreError(f"Could not write {path}: {e}") from e


class JsonRecordStore:
    """Name records persisted to a JSON file."""

    def __init__(self, path: str | Path):
        """
        Initialize the store.

        Args:
            path: Path to the records JSON file (created on first write)
        """
        self.path = Path(path)
        self._lock = threading.Lock()

    def get_records(self) -> List[NameRecord]:
        """All records, active and inactive, in stored order."""
        items = read_json_list(self.path)
        try:
            return [NameRecord.from_dict(item) for item in items]
        except (AttributeError, TypeError, ValueError) as e:
            logger.error(f"Malformed record in {self.path}: {e}")
            raise RecordStoreError(f"Malformed record in {self.path}: {e}") from e

    def get_active_records(self) -> List[NameRecord]:
        return [record for record in self.get_records() if record.is_active]

    def get_record(self, record_id: int) -> NameRecord:
        """
        Get an active record by id.

        Raises:
            RecordNotFoundError: If no active record has this id
        """
        for record in self.get_records():
            if record.id == record_id and record.is_active:
                return record
        raise RecordNotFoundError(record_id)

    def add_record(
        self,
        original_name: str,
        person_type: str,
        case_number: Optional[str] = None,
        department: Optional[str] = None,
        created_by: Optional[int] = None,
        created_by_name: Optional[str] = None,
    ) -> NameRecord:
        """
        Create and persist a new active record.

        The standardized name is computed here so that every stored record
        carries one.

        Args:
            original_name: Name as entered
            person_type: Tag such as 'suspect' or 'witness'
            case_number: Optional case reference
            department: Owning department
            created_by: Id of the creating user
            created_by_name: Username of the creating user

        Returns:
            The stored record

        Raises:
            InvalidArgumentError: If the name or person type is missing
        """
        if not original_name or not original_name.strip():
            raise InvalidArgumentError("Original name is required")
        if not person_type or not person_type.strip():
            raise InvalidArgumentError("Person type is required")

        with self._lock:
            data = read_json_list(self.path)
            max_id = max((item.get('id', 0) for item in data), default=0)

            record = NameRecord(
                id=max_id + 1,
                original_name=original_name.strip(),
                standardized_name=standardize_name(original_name),
                person_type=person_type.strip(),
                case_number=case_number or None,
                department=department,
                created_by=created_by,
                created_by_name=created_by_name,
                created_at=datetime.now(timezone.utc).isoformat(),
                is_active=True,
            )
            data.append(record.to_dict())
            write_json_list(self.path, data)

        logger.info(f"Added record {record.id}: {record.original_name!r}")
        return record

    def update_record(self, record_id: int, **changes: Any) -> NameRecord:
        """
        Apply field changes to a record.

        Raises:
            RecordNotFoundError: If the id does not exist
            InvalidArgumentError: For unknown fields, an id change, or an
                attempt to reactivate a deleted record
        """
        if 'id' in changes:
            raise InvalidArgumentError("Record id cannot be changed")

        known = set(NameRecord.__dataclass_fields__)
        unknown = set(changes) - known
        if unknown:
            raise InvalidArgumentError(f"Unknown record fields: {', '.join(sorted(unknown))}")

        with self._lock:
            data = read_json_list(self.path)
            for index, item in enumerate(data):
                if item.get('id') != record_id:
                    continue

                if changes.get('is_active') and not item.get('is_active', True):
                    raise InvalidArgumentError(
                        f"Record {record_id} has been deleted and cannot be reactivated"
                    )

                item = {**item, **changes}
                data[index] = item
                write_json_list(self.path, data)
                return NameRecord.from_dict(item)

        raise RecordNotFoundError(record_id)

    def deactivate_record(self, record_id: int) -> NameRecord:
        """Soft-delete a record. Deleting an already deleted record is a no-op."""
        record = self.update_record(record_id, is_active=False)
        logger.info(f"Deactivated record {record_id}")
        return record
