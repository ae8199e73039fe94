"""Unrestricted Damerau-Levenshtein distance.

Adjacent transpositions count as one edit, and unlike optimal string
alignment a transposed pair may be edited again afterwards, so
``("ca", "abc")`` costs 2 (``ca -> ac -> abc``) rather than 3.

The table is the Lowrance-Wagner one: besides the usual three neighbours each
cell looks back to the last row where the current right element appeared in
``left`` and to the last column of the current row that matched. Elements
must therefore be hashable.
"""

from __future__ import annotations

from typing import Any, Optional

from fuzzyseq._utils import validate_threshold
from fuzzyseq.exceptions import InvalidInputTypeError
from fuzzyseq.input import SimilarityInput, as_inputs
from fuzzyseq.protocols import Metric


def _distance(left: SimilarityInput, right: SimilarityInput) -> int:
    n = left.length()
    m = right.length()
    if n == 0:
        return m
    if m == 0:
        return n

    # Row and column 0 hold a sentinel larger than any real cost so the
    # transposition term never reaches past the table edge.
    sentinel = n + m
    table = [[0] * (m + 2) for _ in range(n + 2)]
    table[0][0] = sentinel
    for i in range(n + 1):
        table[i + 1][0] = sentinel
        table[i + 1][1] = i
    for j in range(m + 1):
        table[0][j + 1] = sentinel
        table[1][j + 1] = j

    last_row: dict = {}
    right_items = list(right)
    try:
        for i in range(1, n + 1):
            left_i = left.at(i - 1)
            last_match_col = 0
            row = table[i + 1]
            above = table[i]
            for j in range(1, m + 1):
                right_j = right_items[j - 1]
                k = last_row.get(right_j, 0)
                l = last_match_col
                if left_i == right_j:
                    cost = 0
                    last_match_col = j
                else:
                    cost = 1
                row[j + 1] = min(
                    above[j] + cost,
                    row[j] + 1,
                    above[j + 1] + 1,
                    table[k][l] + (i - k - 1) + 1 + (j - l - 1),
                )
            last_row[left_i] = i
    except TypeError as exc:
        raise InvalidInputTypeError(
            "Damerau-Levenshtein requires hashable sequence elements"
        ) from exc

    return table[n + 1][m + 1]


class DamerauLevenshteinDistance(Metric):
    """Edit distance counting insertions, deletions, substitutions and transpositions.

    With a threshold the distance is still computed over the whole table,
    because a transposition can jump over a row that looked too expensive.
    Only the length difference short-circuits; a final distance above the
    threshold is reported as ``-1``.

    Args:
        threshold: Optional non-negative bound.

    Raises:
        InvalidArgumentError: If ``threshold`` is negative or not an integer.

    Example:
        >>> DamerauLevenshteinDistance().apply("ca", "abc")
        2
        >>> DamerauLevenshteinDistance(threshold=1).apply("ca", "abc")
        -1
    """

    __slots__ = ("_threshold",)

    def __init__(self, threshold: Optional[int] = None):
        self._threshold = validate_threshold(threshold)

    @property
    def threshold(self) -> Optional[int]:
        return self._threshold

    def apply(self, left: Any, right: Any) -> int:
        left, right = as_inputs(left, right)
        threshold = self._threshold
        if threshold is None:
            return _distance(left, right)
        if abs(left.length() - right.length()) > threshold:
            return -1
        distance = _distance(left, right)
        return distance if distance <= threshold else -1

    def __repr__(self) -> str:
        return f"DamerauLevenshteinDistance(threshold={self._threshold!r})"


_DEFAULT = DamerauLevenshteinDistance()


def damerau_levenshtein(left: Any, right: Any, max_distance: Optional[int] = None) -> int:
    """Damerau-Levenshtein distance; ``-1`` when ``max_distance`` is given and exceeded."""
    if max_distance is None:
        return _DEFAULT.apply(left, right)
    return DamerauLevenshteinDistance(max_distance).apply(left, right)


def damerau_levenshtein_similarity(left: Any, right: Any) -> float:
    """``1 - distance / max(len)``; 1.0 for two empty operands."""
    left, right = as_inputs(left, right)
    longest = max(left.length(), right.length())
    if longest == 0:
        return 1.0
    return 1.0 - _distance(left, right) / longest


__all__ = [
    "DamerauLevenshteinDistance",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
]
