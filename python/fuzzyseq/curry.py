"""Bind the left operand of a metric.

Useful when one query is compared against many candidates:

    >>> from fuzzyseq import LevenshteinDistance
    >>> from fuzzyseq.curry import EditDistanceFrom
    >>> from_kitten = EditDistanceFrom(LevenshteinDistance(), "kitten")
    >>> [from_kitten(w) for w in ("sitting", "mitten", "kitten")]
    [3, 1, 0]
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from fuzzyseq.exceptions import InvalidArgumentError
from fuzzyseq.protocols import EditDistance, SimilarityScore

R = TypeVar("R")


class _BoundMetric(Generic[R]):
    __slots__ = ("_metric", "_left")

    def __init__(self, metric: Any, left: Any):
        if metric is None:
            raise InvalidArgumentError("The metric must not be None")
        if not callable(getattr(metric, "apply", None)):
            raise InvalidArgumentError(
                f"{type(metric).__name__} has no apply(left, right) method"
            )
        self._metric = metric
        self._left = left

    @property
    def left(self) -> Any:
        """The bound left operand, as given."""
        return self._left

    def apply(self, right: Any) -> R:
        return self._metric.apply(self._left, right)

    def __call__(self, right: Any) -> R:
        return self._metric.apply(self._left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._metric!r}, {self._left!r})"


class EditDistanceFrom(_BoundMetric[R]):
    """An :class:`~fuzzyseq.protocols.EditDistance` with a fixed left operand.

    Raises:
        InvalidArgumentError: If ``edit_distance`` is None.
    """

    __slots__ = ()

    def __init__(self, edit_distance: EditDistance[R], left: Any):
        super().__init__(edit_distance, left)

    @property
    def edit_distance(self) -> EditDistance[R]:
        return self._metric


class SimilarityScoreFrom(_BoundMetric[R]):
    """A :class:`~fuzzyseq.protocols.SimilarityScore` with a fixed left operand.

    Raises:
        InvalidArgumentError: If ``similarity_score`` is None.
    """

    __slots__ = ()

    def __init__(self, similarity_score: SimilarityScore[R], left: Any):
        super().__init__(similarity_score, left)

    @property
    def similarity_score(self) -> SimilarityScore[R]:
        return self._metric


__all__ = ["EditDistanceFrom", "SimilarityScoreFrom"]
