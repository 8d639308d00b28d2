"""Append-only record storage with random access and id lookup."""

import time
from typing import Dict, List, Optional, Sequence

from ..models.record import TranslationRecord


class RecordStore:
    """Holds the accumulated record set in import order."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._records: List[TranslationRecord] = []
        self._positions: Dict[str, int] = {}  # id -> position
        self._stats = {
            "total_records": 0,
            "total_batches": 0,
            "last_updated": None
        }

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, position: int) -> TranslationRecord:
        return self._records[position]

    def append_batch(self, records: Sequence[TranslationRecord]) -> None:
        """
        Append a batch of records after the existing ones.

        Args:
            records: Newly normalized records

        Raises:
            ValueError: If a record id is already present
        """
        seen = set()
        for record in records:
            if record.id in self._positions or record.id in seen:
                raise ValueError(f"Duplicate record id: {record.id}")
            seen.add(record.id)

        for record in records:
            self._positions[record.id] = len(self._records)
            self._records.append(record)

        self._stats["total_records"] = len(self._records)
        self._stats["total_batches"] += 1
        self._stats["last_updated"] = time.time()

    def get(self, record_id: str) -> Optional[TranslationRecord]:
        """Look up a record by id."""
        position = self._positions.get(record_id)
        if position is None:
            return None
        return self._records[position]

    def get_all(self) -> List[TranslationRecord]:
        """Get all records in accumulation order."""
        return list(self._records)

    def slice(self, offset: int, limit: int) -> List[TranslationRecord]:
        """Get a page of records starting at offset."""
        return self._records[offset:offset + limit]

    def group_names(self) -> List[str]:
        """Distinct group names in first-seen order."""
        return list(dict.fromkeys(record.group_name for record in self._records))

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()
        self._positions.clear()
        self._stats = {
            "total_records": 0,
            "total_batches": 0,
            "last_updated": None
        }

    def get_stats(self) -> Dict[str, any]:
        """Get store statistics."""
        return self._stats.copy()
