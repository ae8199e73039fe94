"""Levenshtein distance: plain, threshold-bounded and detailed.

Both metrics keep two rolling rows sized by the shorter operand and walk the
longer operand in the outer loop, so memory stays O(min(|left|, |right|))
however unequal the inputs are.

With a threshold only a diagonal band of width ``2 * threshold + 1`` is
computed. Cells outside the band are unreachable. The computation stops with
``-1`` as soon as the band leaves the table or no cell of the current row is
within the threshold.
"""

from __future__ import annotations

import sys
from typing import Any, Optional

from fuzzyseq._utils import validate_threshold
from fuzzyseq.input import SimilarityInput, as_inputs
from fuzzyseq.protocols import Metric
from fuzzyseq.results import THRESHOLD_EXCEEDED, LevenshteinResults

_UNREACHABLE = sys.maxsize


def _unlimited_distance(left: SimilarityInput, right: SimilarityInput) -> int:
    n = left.length()
    m = right.length()
    if n == 0:
        return m
    if m == 0:
        return n

    # keep the shorter operand in the inner loop
    if n > m:
        left, right = right, left
        n, m = m, n

    left_at = left.at
    p = list(range(n + 1))
    d = [0] * (n + 1)

    for j in range(1, m + 1):
        right_j = right.at(j - 1)
        d[0] = j
        for i in range(1, n + 1):
            cost = 0 if left_at(i - 1) == right_j else 1
            d[i] = min(d[i - 1] + 1, p[i] + 1, p[i - 1] + cost)
        p, d = d, p

    return p[n]


def _limited_distance(left: SimilarityInput, right: SimilarityInput, threshold: int) -> int:
    n = left.length()
    m = right.length()

    if n == 0:
        return m if m <= threshold else -1
    if m == 0:
        return n if n <= threshold else -1
    if abs(n - m) > threshold:
        return -1

    if n > m:
        left, right = right, left
        n, m = m, n

    left_at = left.at
    p = [_UNREACHABLE] * (n + 1)
    d = [_UNREACHABLE] * (n + 1)

    boundary = min(n, threshold) + 1
    for i in range(boundary):
        p[i] = i

    for j in range(1, m + 1):
        right_j = right.at(j - 1)
        d[0] = j

        # stripe bounds, clamped to the table
        lo = max(1, j - threshold)
        hi = min(n, j + threshold)
        if lo > hi:
            return -1

        # ignore the entry left of the stripe
        if lo > 1:
            d[lo - 1] = _UNREACHABLE

        row_min = d[0] if lo == 1 else _UNREACHABLE
        for i in range(lo, hi + 1):
            if left_at(i - 1) == right_j:
                value = p[i - 1]
            else:
                value = 1 + min(d[i - 1], p[i], p[i - 1])
            d[i] = value
            if value < row_min:
                row_min = value

        # every path crosses this row and costs never decrease along a path
        if row_min > threshold:
            return -1

        p, d = d, p

    return p[n] if p[n] <= threshold else -1


class LevenshteinDistance(Metric):
    """Minimum number of single-element insertions, deletions and substitutions.

    Args:
        threshold: Optional non-negative bound. Distances above it are reported
            as ``-1`` and the computation is restricted to a diagonal band.

    Raises:
        InvalidArgumentError: If ``threshold`` is negative or not an integer.

    Example:
        >>> LevenshteinDistance().apply("kitten", "sitting")
        3
        >>> LevenshteinDistance(threshold=2).apply("kitten", "sitting")
        -1
    """

    __slots__ = ("_threshold",)

    def __init__(self, threshold: Optional[int] = None):
        self._threshold = validate_threshold(threshold)

    @property
    def threshold(self) -> Optional[int]:
        return self._threshold

    def apply(self, left: Any, right: Any) -> int:
        """Return the edit distance, or ``-1`` if it exceeds the threshold.

        Raises:
            InvalidInputError: If either operand is None.
        """
        left, right = as_inputs(left, right)
        if self._threshold is None:
            return _unlimited_distance(left, right)
        return _limited_distance(left, right, self._threshold)

    def __repr__(self) -> str:
        return f"LevenshteinDistance(threshold={self._threshold!r})"


# Each cell holds (cost, inserts, deletes, substitutes) for transforming
# a[:i] into b[:j]; None marks a cell outside the band.
_Cell = tuple
THRESHOLD_EXCEEDED_CELL: _Cell = (-1, 0, 0, 0)


def _choose(sub: Optional[_Cell], ins: Optional[_Cell], dele: Optional[_Cell]) -> Optional[_Cell]:
    """Cheapest candidate, then most substitutions, then substitute > insert > delete."""
    best = sub
    for cell in (ins, dele):
        if cell is None:
            continue
        if best is None or cell[0] < best[0] or (cell[0] == best[0] and cell[3] > best[3]):
            best = cell
    return best


def _detailed(a: SimilarityInput, b: SimilarityInput, threshold: Optional[int]) -> _Cell:
    n = a.length()
    m = b.length()
    if n == 0:
        return (m, m, 0, 0)
    band = max(n, m) if threshold is None else threshold
    a_at = a.at

    p: list = [None] * (n + 1)
    d: list = [None] * (n + 1)
    for i in range(min(n, band) + 1):
        p[i] = (i, 0, i, 0)

    for j in range(1, m + 1):
        b_j = b.at(j - 1)
        d[0] = (j, j, 0, 0) if j <= band else None

        lo = max(1, j - band)
        hi = min(n, j + band)
        if lo > hi:
            return THRESHOLD_EXCEEDED_CELL
        if lo > 1:
            d[lo - 1] = None

        row_min = d[0][0] if d[0] is not None else _UNREACHABLE
        for i in range(lo, hi + 1):
            diag = p[i - 1]
            sub = None
            if diag is not None:
                if a_at(i - 1) == b_j:
                    sub = diag
                else:
                    sub = (diag[0] + 1, diag[1], diag[2], diag[3] + 1)
            above = p[i]
            ins = None if above is None else (above[0] + 1, above[1] + 1, above[2], above[3])
            before = d[i - 1]
            dele = None if before is None else (before[0] + 1, before[1], before[2] + 1, before[3])

            cell = _choose(sub, ins, dele)
            d[i] = cell
            if cell is not None and cell[0] < row_min:
                row_min = cell[0]

        if threshold is not None and row_min > threshold:
            return THRESHOLD_EXCEEDED_CELL

        p, d = d, p

    return p[n]


class LevenshteinDetailedDistance(Metric):
    """Levenshtein distance plus the insert, delete and substitute counts.

    When several edit paths are optimal the one with the most substitutions
    is reported, so ``apply(b, a)`` mirrors ``apply(a, b)`` with insert and
    delete counts swapped and the same substitute count.

    Args:
        threshold: Optional non-negative bound. Results above it come back as
            ``LevenshteinResults(-1, 0, 0, 0)``.

    Example:
        >>> LevenshteinDetailedDistance().apply("elephant", "hippo")
        LevenshteinResults(distance=7, insert_count=0, delete_count=3, substitute_count=4)
    """

    __slots__ = ("_threshold",)

    def __init__(self, threshold: Optional[int] = None):
        self._threshold = validate_threshold(threshold)

    @property
    def threshold(self) -> Optional[int]:
        return self._threshold

    def apply(self, left: Any, right: Any) -> LevenshteinResults:
        left, right = as_inputs(left, right)
        threshold = self._threshold
        n = left.length()
        m = right.length()

        if threshold is not None and abs(n - m) > threshold:
            return THRESHOLD_EXCEEDED

        swapped = n > m
        if swapped:
            left, right = right, left

        cost, inserts, deletes, substitutes = _detailed(left, right, threshold)
        if cost == -1 or (threshold is not None and cost > threshold):
            return THRESHOLD_EXCEEDED
        if swapped:
            inserts, deletes = deletes, inserts
        return LevenshteinResults(cost, inserts, deletes, substitutes)

    def __repr__(self) -> str:
        return f"LevenshteinDetailedDistance(threshold={self._threshold!r})"


_DEFAULT = LevenshteinDistance()
_DEFAULT_DETAILED = LevenshteinDetailedDistance()


def get_default_instance() -> LevenshteinDistance:
    """Shared unbounded :class:`LevenshteinDistance`."""
    return _DEFAULT


def get_default_detailed_instance() -> LevenshteinDetailedDistance:
    """Shared unbounded :class:`LevenshteinDetailedDistance`."""
    return _DEFAULT_DETAILED


def levenshtein(left: Any, right: Any, max_distance: Optional[int] = None) -> int:
    """Levenshtein distance; ``-1`` when ``max_distance`` is given and exceeded."""
    if max_distance is None:
        return _DEFAULT.apply(left, right)
    return LevenshteinDistance(max_distance).apply(left, right)


def levenshtein_detailed(left: Any, right: Any, max_distance: Optional[int] = None) -> LevenshteinResults:
    """Levenshtein distance with operation counts."""
    if max_distance is None:
        return _DEFAULT_DETAILED.apply(left, right)
    return LevenshteinDetailedDistance(max_distance).apply(left, right)


def levenshtein_similarity(left: Any, right: Any) -> float:
    """``1 - distance / max(len)``; 1.0 for two empty operands."""
    left, right = as_inputs(left, right)
    longest = max(left.length(), right.length())
    if longest == 0:
        return 1.0
    return 1.0 - _unlimited_distance(left, right) / longest


__all__ = [
    "LevenshteinDistance",
    "LevenshteinDetailedDistance",
    "get_default_instance",
    "get_default_detailed_instance",
    "levenshtein",
    "levenshtein_detailed",
    "levenshtein_similarity",
]
