"""Hamming distance between equal-length sequences."""

from __future__ import annotations

from typing import Any

from fuzzyseq.exceptions import UnequalLengthError
from fuzzyseq.input import as_inputs
from fuzzyseq.protocols import Metric


class HammingDistance(Metric):
    """Number of positions at which two equal-length sequences differ.

    Raises:
        InvalidInputError: If either operand is None.
        UnequalLengthError: If the operands have different lengths.

    Example:
        >>> HammingDistance().apply("karolin", "kathrin")
        3
    """

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> int:
        left, right = as_inputs(left, right)
        if left.length() != right.length():
            raise UnequalLengthError(
                f"Inputs must have the same length: {left.length()} != {right.length()}"
            )
        return sum(1 for a, b in zip(left, right) if a != b)


_DEFAULT = HammingDistance()


def hamming(left: Any, right: Any) -> int:
    """Hamming distance; raises UnequalLengthError on a length mismatch."""
    return _DEFAULT.apply(left, right)


def hamming_similarity(left: Any, right: Any) -> float:
    """``1 - hamming / len``; 1.0 for two empty operands."""
    left, right = as_inputs(left, right)
    distance = _DEFAULT.apply(left, right)
    length = left.length()
    return 1.0 if length == 0 else 1.0 - distance / length


__all__ = ["HammingDistance", "hamming", "hamming_similarity"]
