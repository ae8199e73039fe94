"""Longest common subsequence length, reconstruction and distance."""

from __future__ import annotations

import warnings
from typing import Any, Union

from fuzzyseq.input import CharacterInput, SimilarityInput, as_inputs
from fuzzyseq.protocols import Metric

# Backtracking moves
_DIAGONAL = 0
_UP = 1
_LEFT = 2


def _lcs_length(left: SimilarityInput, right: SimilarityInput) -> int:
    n = left.length()
    m = right.length()
    if n == 0 or m == 0:
        return 0
    if n < m:
        left, right = right, left
        n, m = m, n

    right_items = list(right)
    prev = [0] * (m + 1)
    cur = [0] * (m + 1)
    for i in range(n):
        left_i = left.at(i)
        for j in range(1, m + 1):
            if left_i == right_items[j - 1]:
                cur[j] = prev[j - 1] + 1
            else:
                cur[j] = prev[j] if prev[j] >= cur[j - 1] else cur[j - 1]
        prev, cur = cur, prev
    return prev[m]


def _lcs_elements(left: SimilarityInput, right: SimilarityInput) -> list:
    n = left.length()
    m = right.length()
    if n == 0 or m == 0:
        return []

    width = m + 1
    moves = bytearray(width * (n + 1))
    right_items = list(right)
    prev = [0] * width
    for i in range(1, n + 1):
        cur = [0] * width
        left_i = left.at(i - 1)
        base = i * width
        for j in range(1, width):
            if left_i == right_items[j - 1]:
                cur[j] = prev[j - 1] + 1
                moves[base + j] = _DIAGONAL
            elif prev[j] >= cur[j - 1]:
                cur[j] = prev[j]
                moves[base + j] = _UP
            else:
                cur[j] = cur[j - 1]
                moves[base + j] = _LEFT
        prev = cur

    out = []
    i, j = n, m
    while i > 0 and j > 0:
        move = moves[i * width + j]
        if move == _DIAGONAL:
            out.append(left.at(i - 1))
            i -= 1
            j -= 1
        elif move == _UP:
            i -= 1
        else:
            j -= 1
    out.reverse()
    return out


class LongestCommonSubsequence(Metric):
    """Length of the longest common subsequence as a similarity score.

    A subsequence keeps the order of elements but need not be contiguous.

    Example:
        >>> LongestCommonSubsequence().apply("ABC Corporation", "ABC Corp")
        8
        >>> LongestCommonSubsequence().longest_common_subsequence("frog", "fog")
        'fog'
    """

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> int:
        left, right = as_inputs(left, right)
        return _lcs_length(left, right)

    def longest_common_subsequence(self, left: Any, right: Any) -> Union[str, list]:
        """Return one longest common subsequence.

        Strings give a ``str``; any other sequences give a ``list`` of their
        elements. Uses O(|left| * |right|) bytes for the backtracking table.

        Raises:
            InvalidInputError: If either operand is None.
        """
        left, right = as_inputs(left, right)
        elements = _lcs_elements(left, right)
        if isinstance(left, CharacterInput) and isinstance(right, CharacterInput):
            return "".join(elements)
        return elements

    def logest_common_subsequence(self, left: Any, right: Any) -> Union[str, list]:
        """Deprecated: misspelled alias of :meth:`longest_common_subsequence`."""
        warnings.warn(
            "logest_common_subsequence() is deprecated and will be removed in a "
            "future version. Use longest_common_subsequence() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.longest_common_subsequence(left, right)


class LongestCommonSubsequenceDistance(Metric):
    """``|left| + |right| - 2 * lcs``: the insert/delete-only edit distance.

    Example:
        >>> LongestCommonSubsequenceDistance().apply("frog", "fog")
        1
    """

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> int:
        left, right = as_inputs(left, right)
        return left.length() + right.length() - 2 * _lcs_length(left, right)


_DEFAULT = LongestCommonSubsequence()


def lcs_length(left: Any, right: Any) -> int:
    return _DEFAULT.apply(left, right)


def lcs_string(left: Any, right: Any) -> Union[str, list]:
    """One longest common subsequence of ``left`` and ``right``."""
    return _DEFAULT.longest_common_subsequence(left, right)


def lcs_distance(left: Any, right: Any) -> int:
    left, right = as_inputs(left, right)
    return left.length() + right.length() - 2 * _lcs_length(left, right)


def lcs_similarity(left: Any, right: Any) -> float:
    """LCS length divided by the longer length; 1.0 for two empty operands."""
    left, right = as_inputs(left, right)
    longest = max(left.length(), right.length())
    if longest == 0:
        return 1.0
    return _lcs_length(left, right) / longest


__all__ = [
    "LongestCommonSubsequence",
    "LongestCommonSubsequenceDistance",
    "lcs_length",
    "lcs_string",
    "lcs_distance",
    "lcs_similarity",
]
