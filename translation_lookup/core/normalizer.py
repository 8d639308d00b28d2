"""Row normalization for turning spreadsheet rows into translation records."""

import math
import uuid
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..models.record import TranslationRecord

Source = Tuple[str, Sequence[Sequence[Any]]]

HEADER_KEYS = {"key", "id"}
HEADER_SOURCES = {"value", "source"}


def cell_text(value: Any) -> str:
    """
    Stringify a cell value.

    Empty and falsy cells (None, NaN, "", 0, False) become an empty string.
    Integral floats lose their trailing ".0" so numeric ordinals read naturally.
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            value = int(value)
    if not value:
        return ""
    return str(value)


class RecordNormalizer:
    """Converts tabular rows grouped by sheet into translation records."""

    def __init__(self, header_scan_rows: int = 5) -> None:
        """
        Initialize the normalizer.

        Args:
            header_scan_rows: How many leading rows per group may be treated as headers
        """
        self.header_scan_rows = header_scan_rows

    def normalize(self, sources: Iterable[Source]) -> List[TranslationRecord]:
        """
        Normalize rows from every source into records.

        Args:
            sources: (group_name, rows) pairs; each row is a sequence of cell values

        Returns:
            Records in source order, then row order within each group
        """
        records = []
        for group_name, rows in sources:
            for row_index, row in enumerate(rows):
                record = self.normalize_row(group_name, row_index, row)
                if record is not None:
                    records.append(record)
        return records

    def normalize_row(
        self,
        group_name: str,
        row_index: int,
        row: Sequence[Any]
    ) -> Optional[TranslationRecord]:
        """
        Normalize a single row.

        Args:
            group_name: Name of the enclosing group
            row_index: Position of the row within its group
            row: Cell values

        Returns:
            A record, or None if the row is rejected
        """
        if not row or len(row) < 2:
            return None

        key = cell_text(row[1]).strip()
        source_text = cell_text(row[2]).strip() if len(row) > 2 else ""

        if row_index < self.header_scan_rows and self.is_header(key, source_text):
            return None

        if not key and not source_text:
            return None

        return TranslationRecord(
            id=self.generate_id(group_name, row_index),
            group_name=group_name,
            original_ordinal=cell_text(row[0]),
            key=key,
            source_text=source_text,
            notes=self.extract_notes(row),
        )

    @staticmethod
    def is_header(key: str, source_text: str) -> bool:
        """
        Check whether a key/source pair looks like a column header.

        Only "key"/"id" paired with "value"/"source"/"...text..." is recognized.
        """
        source_lower = source_text.lower()
        return key.lower() in HEADER_KEYS and (
            source_lower in HEADER_SOURCES or "text" in source_lower
        )

    @staticmethod
    def extract_notes(row: Sequence[Any]) -> Dict[str, str]:
        """Collect non-empty cells beyond the third column."""
        notes = {}
        for i in range(3, len(row)):
            text = cell_text(row[i])
            if text:
                notes[f"col_{i}"] = text
        return notes

    @staticmethod
    def generate_id(group_name: str, row_index: int) -> str:
        """Generate a record id unique across every import."""
        return f"{group_name}-{row_index}-{uuid.uuid4().hex}"
