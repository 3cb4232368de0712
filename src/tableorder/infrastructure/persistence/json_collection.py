"""A JSON file holding one collection as an array of objects.

Every read loads the whole file and every write rewrites it; there is no
locking, so concurrent writers race and the last one wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The backing file exists but cannot be read as a JSON array."""


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StorageError(f"Corrupt data file {self._file_path}: {exc}") from exc
        if not isinstance(raw, list):
            raise StorageError(f"Data file {self._file_path} must hold a JSON array")
        logger.debug("Loaded %d records from %s", len(raw), self._file_path)
        return raw

    def persist(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        logger.debug("Wrote %d records to %s", len(records), self._file_path)

    def upsert(self, record: dict) -> None:
        """Replace the record with the same ``id``, or append it."""
        records = self.load()
        for i, existing in enumerate(records):
            if existing.get("id") == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
