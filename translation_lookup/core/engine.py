"""Main search engine implementation."""

import re
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Sequence

from ..models.record import TranslationRecord
from .fuzzy_matcher import FuzzyIndex
from .index import RecordStore

WORD_SEPARATORS = r"[\s._-]"


def whole_word_pattern(query: str) -> Pattern[str]:
    """Compile a case-insensitive pattern for query bounded by separators."""
    return re.compile(
        rf"(^|{WORD_SEPARATORS}){re.escape(query)}({WORD_SEPARATORS}|$)",
        re.IGNORECASE,
    )


@dataclass
class SearchOutcome:
    """Exact and fuzzy partitions for one query."""

    query: str
    exact_matches: List[TranslationRecord] = field(default_factory=list)
    fuzzy_matches: List[TranslationRecord] = field(default_factory=list)
    execution_time_ms: float = 0.0
    browse_mode: bool = False


class SearchEngine:
    """Dual-mode search over the accumulated record set."""

    def __init__(
        self,
        fuzzy_threshold: float = 0.3,
        weights: Optional[Dict[str, float]] = None
    ) -> None:
        """
        Initialize the search engine.

        Args:
            fuzzy_threshold: Normalized edit distance budget for fuzzy matching
            weights: Fuzzy ranking weight per record field
        """
        self.fuzzy_threshold = fuzzy_threshold
        self.weights = weights
        self.store = RecordStore()
        self.fuzzy_index = FuzzyIndex.build([], fuzzy_threshold, weights)

        # Performance tracking
        self._stats = {
            "total_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
        }

    def load_records(self, records: Sequence[TranslationRecord]) -> None:
        """
        Append records and rebuild the fuzzy index.

        Args:
            records: Newly imported records
        """
        self.store.append_batch(records)
        self.rebuild_index()

    def rebuild_index(self) -> None:
        """Rebuild the fuzzy index from the full record set."""
        self.fuzzy_index = FuzzyIndex.build(
            self.store.get_all(), self.fuzzy_threshold, self.weights
        )

    def search(self, query: str) -> SearchOutcome:
        """
        Partition the record set into exact and fuzzy matches.

        An empty query is browse mode: every record is returned as a fuzzy
        match in accumulation order.

        Args:
            query: Search query

        Returns:
            SearchOutcome with both result lists, neither truncated
        """
        start_time = time.time()
        query = (query or "").strip()

        if not len(self.store):
            return SearchOutcome(
                query=query,
                execution_time_ms=(time.time() - start_time) * 1000,
                browse_mode=not query,
            )

        if not query:
            return SearchOutcome(
                query=query,
                fuzzy_matches=self.store.get_all(),
                execution_time_ms=(time.time() - start_time) * 1000,
                browse_mode=True,
            )

        self._stats["total_queries"] += 1

        exact = self._exact_search(query)
        exact_ids = {record.id for record in exact}

        fuzzy = [
            self.store.get(record_id)
            for record_id in self.fuzzy_index.query(query)
            if record_id not in exact_ids
        ]

        execution_time = (time.time() - start_time) * 1000

        # Update statistics based on match type
        if exact:
            self._stats["exact_matches"] += 1
        elif fuzzy:
            self._stats["fuzzy_matches"] += 1
        else:
            self._stats["no_matches"] += 1
        self._stats["total_execution_time"] += execution_time

        return SearchOutcome(
            query=query,
            exact_matches=exact,
            fuzzy_matches=fuzzy,
            execution_time_ms=execution_time,
        )

    def is_exact_match(self, record: TranslationRecord, query: str) -> bool:
        """
        Check whether a record is an exact match for a trimmed query.

        Exact means case-insensitive equality with key or source text, or the
        query appearing in either as a whole word bounded by whitespace,
        '.', '_', '-' or the string ends.
        """
        return self._matches(record, query.lower(), whole_word_pattern(query))

    def _exact_search(self, query: str) -> List[TranslationRecord]:
        """Filter the record set down to exact matches, keeping its order."""
        normalized = query.lower()
        pattern = whole_word_pattern(query)
        return [
            record for record in self.store.get_all()
            if self._matches(record, normalized, pattern)
        ]

    @staticmethod
    def _matches(record: TranslationRecord, normalized: str, pattern: Pattern[str]) -> bool:
        if record.key.lower() == normalized or record.source_text.lower() == normalized:
            return True
        return bool(pattern.search(record.key) or pattern.search(record.source_text))

    def get_stats(self) -> Dict[str, any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["exact_match_rate"] = stats["exact_matches"] / stats["total_queries"]
            stats["fuzzy_match_rate"] = stats["fuzzy_matches"] / stats["total_queries"]
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["exact_match_rate"] = 0.0
            stats["fuzzy_match_rate"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["store_stats"] = self.store.get_stats()
        stats["indexed_records"] = len(self.fuzzy_index)

        return stats

    def clear(self) -> None:
        """Clear all data and reset statistics."""
        self.store.clear()
        self.rebuild_index()
        self._stats = {
            "total_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
        }
