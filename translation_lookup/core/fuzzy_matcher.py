"""Weighted multi-field fuzzy index over translation records."""

from typing import Dict, List, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process, utils

from ..models.record import TranslationRecord

DEFAULT_WEIGHTS = {
    "key": 1.0,
    "source_text": 0.8,
    "group_name": 0.3,
}

# Floor for per-field distance so a perfect hit still scales with its weight
EPSILON = 0.001


def field_similarity(
    query: str,
    field: str,
    *,
    score_cutoff: Optional[float] = None,
    **kwargs
) -> float:
    """
    Similarity (0-100) of a preprocessed query against one field value.

    ``partial_ratio`` aligns the shorter string inside the longer one, so it
    only applies while the query fits inside the field. A query longer than
    the field is compared whole with ``ratio``; a short field merely contained
    in a long query is not a hit.
    """
    if len(query) <= len(field):
        return fuzz.partial_ratio(query, field, score_cutoff=score_cutoff)
    return fuzz.ratio(query, field, score_cutoff=score_cutoff)


class FuzzyIndex:
    """
    Approximate matcher over a fixed record set.

    Each weighted field is compared with ``field_similarity``: the query is
    aligned against the best-matching window of the field, so where the match
    sits inside the field does not matter. A field counts when its
    similarity clears ``(1 - threshold) * 100``. A record's score is the
    weighted product of its matching fields' distances, lower being better.

    The index is immutable; build a new one whenever the record set changes.
    """

    def __init__(
        self,
        ids: List[str],
        choices: Dict[str, List[str]],
        weights: Dict[str, float],
        threshold: float
    ) -> None:
        self._ids = ids
        self._choices = choices
        self._weights = weights
        self.threshold = threshold

    @classmethod
    def build(
        cls,
        records: Sequence[TranslationRecord],
        threshold: float = 0.3,
        weights: Optional[Dict[str, float]] = None
    ) -> "FuzzyIndex":
        """
        Build an index over a record set.

        Args:
            records: Records to index, in accumulation order
            threshold: Normalized edit distance budget (0 = exact, 1 = anything)
            weights: Field name to weight; defaults to key/source_text/group_name

        Returns:
            A new FuzzyIndex
        """
        weights = weights or DEFAULT_WEIGHTS
        total_weight = sum(weights.values()) or 1.0
        normalized_weights = {
            field: weight / total_weight
            for field, weight in weights.items()
            if weight > 0
        }

        choices = {
            field: [utils.default_process(getattr(record, field)) for record in records]
            for field in normalized_weights
        }

        return cls(
            ids=[record.id for record in records],
            choices=choices,
            weights=normalized_weights,
            threshold=threshold,
        )

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def score_cutoff(self) -> float:
        """Minimum partial_ratio (0-100) for a field to count as a hit."""
        return (1.0 - self.threshold) * 100

    def query(self, text: str) -> List[str]:
        """
        Rank record ids by similarity to text.

        Args:
            text: Search text

        Returns:
            Matching ids, best match first; ties keep accumulation order
        """
        return [record_id for record_id, _ in self.query_with_scores(text)]

    def query_with_scores(self, text: str) -> List[Tuple[str, float]]:
        """
        Rank record ids and report their combined scores.

        Args:
            text: Search text

        Returns:
            List of (id, score) with score in [0, 1], lower being better
        """
        processed = utils.default_process(text or "")
        if not processed or not self._ids:
            return []

        scores: Dict[int, float] = {}
        for field, weight in self._weights.items():
            matches = process.extract(
                processed,
                self._choices[field],
                scorer=field_similarity,
                processor=None,
                score_cutoff=self.score_cutoff,
                limit=None,
            )
            for _, similarity, position in matches:
                distance = max(1.0 - similarity / 100.0, EPSILON)
                scores[position] = scores.get(position, 1.0) * distance ** weight

        ranked = sorted(scores.items(), key=lambda item: (item[1], item[0]))
        return [(self._ids[position], score) for position, score in ranked]
