from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

T = TypeVar("T")


@dataclass(frozen=True)
class FieldWeight:
    name: str
    weight: float


@dataclass(frozen=True)
class ScoredMatch(Generic[T]):
    item: T
    score: float
    # index of the item in build order
    position: int


def _field_values(item: Any, name: str) -> Tuple[str, ...]:
    value = getattr(item, name, None)
    if value is None and isinstance(item, dict):
        value = item.get(name)
    if not value:
        return ()
    if isinstance(value, str):
        return (value.casefold(),)
    return tuple(str(v).casefold() for v in value if v)


class FuzzyIndex(Generic[T]):
    """Weighted approximate-match index over a fixed item sequence.

    Each field value is aligned against the query with rapidfuzz's partial
    ratio. A value's error is the edit distance between the query and the
    aligned window, relative to the longer of the two, plus a penalty for how
    far into the text that window starts:

        error = levenshtein(query, window) / max(len) + match_start / distance

    A value shorter than the query is aligned as a whole, so the query
    characters it cannot cover count as edits.

    The value matches when ``error <= threshold``. List fields use their best
    element. An item's score is the weighted sum of ``1 - error`` over its
    matching fields, normalised by the total weight, so it lies in (0, 1].

    Items whose fields are missing or empty are indexed with no text for
    those fields; they can still match on the fields they do have.
    """

    def __init__(
        self,
        fields: Sequence[FieldWeight],
        *,
        threshold: float = 0.6,
        distance: int = 100,
    ):
        if not fields:
            raise ValueError("FuzzyIndex needs at least one field")
        if distance <= 0:
            raise ValueError("distance must be positive")

        self.fields = tuple(fields)
        self.threshold = threshold
        self.distance = distance
        self._total_weight = sum(f.weight for f in self.fields)
        self._items: List[T] = []
        self._texts: List[Tuple[Tuple[str, ...], ...]] = []

    def __len__(self) -> int:
        return len(self._items)

    def index(self, items: Sequence[T]) -> None:
        """Replace the indexed items; build order is kept for tie-breaks."""
        self._items = list(items)
        self._texts = [
            tuple(_field_values(item, f.name) for f in self.fields)
            for item in self._items
        ]

    def query(self, text: str) -> List[ScoredMatch[T]]:
        """Return matching items by descending score, ties in build order."""
        needle = (text or "").strip().casefold()
        if not needle:
            return []

        matches: List[ScoredMatch[T]] = []
        for position, field_texts in enumerate(self._texts):
            score = self._score_item(needle, field_texts)
            if score is not None:
                matches.append(ScoredMatch(self._items[position], score, position))

        # sort is stable, so equal scores stay in build order
        matches.sort(key=lambda m: -m.score)
        return matches

    def _score_item(self, needle: str, field_texts) -> Optional[float]:
        total = 0.0
        matched = False
        for field, values in zip(self.fields, field_texts):
            error = self._best_error(needle, values)
            if error is None:
                continue
            matched = True
            total += field.weight * (1.0 - error)

        if not matched:
            return None
        return total / self._total_weight

    def _best_error(self, needle: str, values: Tuple[str, ...]) -> Optional[float]:
        best: Optional[float] = None
        for value in values:
            alignment = fuzz.partial_ratio_alignment(needle, value)
            if alignment is None:
                continue
            window = value[alignment.dest_start:alignment.dest_end]
            error = (
                Levenshtein.normalized_distance(needle, window)
                + alignment.dest_start / self.distance
            )
            if error <= self.threshold and (best is None or error < best):
                best = error
        return best
