"""Immutable result types returned by fuzzyseq metrics.

All result objects are created once by a single metric call and never
mutated. They support equality comparison and hashing for use in sets and as
dict keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fuzzyseq.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class LevenshteinResults:
    """Edit distance plus the operation counts of one optimal edit path.

    Counts describe transforming the left operand into the right one: an
    *insert* adds an element of ``right``, a *delete* drops an element of
    ``left``.

    Attributes:
        distance: Edit distance, or ``-1`` when a threshold was exceeded
        insert_count: Number of insertions on the chosen path
        delete_count: Number of deletions on the chosen path
        substitute_count: Number of substitutions on the chosen path
    """

    distance: int
    insert_count: int = 0
    delete_count: int = 0
    substitute_count: int = 0

    def __post_init__(self) -> None:
        if self.distance < -1:
            raise InvalidArgumentError(f"Invalid distance: {self.distance}")
        if min(self.insert_count, self.delete_count, self.substitute_count) < 0:
            raise InvalidArgumentError("Operation counts must not be negative")
        operations = self.insert_count + self.delete_count + self.substitute_count
        if self.distance == -1:
            if operations:
                raise InvalidArgumentError("A threshold-exceeded result carries no operation counts")
        elif operations != self.distance:
            raise InvalidArgumentError(
                f"Operation counts sum to {operations}, not the distance {self.distance}"
            )

    @property
    def exceeded_threshold(self) -> bool:
        """True when this is the ``-1`` threshold-exceeded sentinel."""
        return self.distance == -1

    def __str__(self) -> str:
        return (
            f"Distance: {self.distance}, Insert: {self.insert_count}, "
            f"Delete: {self.delete_count}, Substitute: {self.substitute_count}"
        )


# Shared sentinel for "exceeds threshold"
THRESHOLD_EXCEEDED = LevenshteinResults(-1, 0, 0, 0)


def _check_sizes(size_a: int, size_b: int, intersection: int) -> None:
    if size_a < 0:
        raise InvalidArgumentError(f"Set size |A| is not positive: {size_a}")
    if size_b < 0:
        raise InvalidArgumentError(f"Set size |B| is not positive: {size_b}")
    if intersection < 0 or intersection > min(size_a, size_b):
        raise InvalidArgumentError(
            f"Invalid intersection of |A| and |B|: {intersection}"
        )


@dataclass(frozen=True)
class IntersectionResult:
    """Sizes of two feature collections and the size of their intersection.

    Every ratio is derived from the three stored fields on access, so repeated
    reads always return the same value.
    """

    size_a: int
    size_b: int
    intersection: int

    def __post_init__(self) -> None:
        _check_sizes(self.size_a, self.size_b, self.intersection)

    @property
    def union(self) -> int:
        return self.size_a + self.size_b - self.intersection

    @property
    def jaccard_index(self) -> float:
        """``|A ∩ B| / |A ∪ B|``, or 0.0 when nothing is shared."""
        return 0.0 if self.intersection == 0 else self.intersection / self.union

    @property
    def sorensen_dice_coefficient(self) -> float:
        """``2|A ∩ B| / (|A| + |B|)``, or 0.0 when nothing is shared."""
        if self.intersection == 0:
            return 0.0
        return 2.0 * self.intersection / (self.size_a + self.size_b)

    @property
    def f1_score(self) -> float:
        """F1 of precision ``|A ∩ B|/|B|`` and recall ``|A ∩ B|/|A|``; equals Sørensen-Dice."""
        return self.sorensen_dice_coefficient

    def __str__(self) -> str:
        return f"Size A: {self.size_a}, Size B: {self.size_b}, Intersection: {self.intersection}"


@dataclass(frozen=True)
class OverlapResult:
    """Result of :class:`~fuzzyseq.intersection.OverlapSimilarity`.

    Structurally identical to :class:`IntersectionResult` but a distinct type,
    so the two never compare equal.
    """

    size_a: int
    size_b: int
    intersection: int

    def __post_init__(self) -> None:
        _check_sizes(self.size_a, self.size_b, self.intersection)

    @property
    def union(self) -> int:
        return self.size_a + self.size_b - self.intersection

    @property
    def jaccard_index(self) -> float:
        return 0.0 if self.intersection == 0 else self.intersection / self.union

    @property
    def sorensen_dice_coefficient(self) -> float:
        if self.intersection == 0:
            return 0.0
        return 2.0 * self.intersection / (self.size_a + self.size_b)

    def __str__(self) -> str:
        return f"Size A: {self.size_a}, Size B: {self.size_b}, Intersection: {self.intersection}"


@dataclass(frozen=True)
class MatchResult:
    """Result from batch search operations.

    Attributes:
        text: The matched candidate
        score: Similarity score (0.0-1.0) or edit distance, depending on the call
        id: Position of the candidate in the input list
    """

    text: str
    score: float
    id: Optional[int] = None


__all__ = [
    "LevenshteinResults",
    "IntersectionResult",
    "OverlapResult",
    "MatchResult",
    "THRESHOLD_EXCEEDED",
]
