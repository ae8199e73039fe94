"""Jaro and Jaro-Winkler similarity.

Matching runs from the shorter operand: each of its elements claims the first
unclaimed equal element of the longer operand inside the match window
``max(longer // 2 - 1, 0)``. Transpositions are counted by comparing the two
ordered lists of matched elements.
"""

from __future__ import annotations

from typing import Any

from fuzzyseq.exceptions import InvalidArgumentError
from fuzzyseq.input import SimilarityInput, as_inputs
from fuzzyseq.protocols import Metric

DEFAULT_SCALING_FACTOR = 0.1
DEFAULT_BOOST_THRESHOLD = 0.7

# Longest common prefix that earns the Winkler boost
MAX_PREFIX = 4


def matches(first: SimilarityInput, second: SimilarityInput) -> tuple[int, int, int]:
    """Return ``(matches, half_transpositions, common_prefix)`` for two inputs."""
    if first.length() > second.length():
        longer, shorter = first, second
    else:
        longer, shorter = second, first
    n_long = longer.length()
    n_short = shorter.length()

    window = max(n_long // 2 - 1, 0)
    claimed = [False] * n_long
    short_matched = [False] * n_short
    count = 0
    for si in range(n_short):
        elem = shorter.at(si)
        for li in range(max(si - window, 0), min(si + window + 1, n_long)):
            if not claimed[li] and elem == longer.at(li):
                claimed[li] = True
                short_matched[si] = True
                count += 1
                break

    short_seq = [shorter.at(i) for i in range(n_short) if short_matched[i]]
    long_seq = [longer.at(i) for i in range(n_long) if claimed[i]]
    half_transpositions = sum(1 for a, b in zip(short_seq, long_seq) if a != b)

    prefix = 0
    for i in range(min(MAX_PREFIX, n_short)):
        if first.at(i) != second.at(i):
            break
        prefix += 1

    return count, half_transpositions, prefix


class JaroWinklerSimilarity(Metric):
    """Jaro similarity with Winkler's common-prefix boost.

    The boost ``scaling_factor * prefix * (1 - jaro)`` is only added when the
    Jaro score reaches ``boost_threshold``. A ``scaling_factor`` of 0 gives
    plain Jaro similarity.

    Args:
        scaling_factor: Weight of each common-prefix element, at most 0.25 so
            the result never exceeds 1.
        boost_threshold: Minimum Jaro score for the prefix boost; 0.0 always
            applies it.

    Raises:
        InvalidArgumentError: If either parameter is outside ``[0, 0.25]`` or
            ``[0, 1]`` respectively.

    Example:
        >>> round(JaroWinklerSimilarity().apply("frog", "fog"), 5)
        0.925
    """

    __slots__ = ("_scaling_factor", "_boost_threshold")

    def __init__(
        self,
        scaling_factor: float = DEFAULT_SCALING_FACTOR,
        boost_threshold: float = DEFAULT_BOOST_THRESHOLD,
    ):
        if not 0.0 <= scaling_factor <= 0.25:
            raise InvalidArgumentError(
                f"scaling_factor must be between 0.0 and 0.25, got {scaling_factor}"
            )
        if not 0.0 <= boost_threshold <= 1.0:
            raise InvalidArgumentError(
                f"boost_threshold must be between 0.0 and 1.0, got {boost_threshold}"
            )
        self._scaling_factor = scaling_factor
        self._boost_threshold = boost_threshold

    @property
    def scaling_factor(self) -> float:
        return self._scaling_factor

    @property
    def boost_threshold(self) -> float:
        return self._boost_threshold

    def apply(self, left: Any, right: Any) -> float:
        left, right = as_inputs(left, right)
        if left == right:
            return 1.0

        m, half_transpositions, prefix = matches(left, right)
        if m == 0:
            return 0.0

        jaro = (m / left.length() + m / right.length() + (m - half_transpositions / 2) / m) / 3
        if jaro < self._boost_threshold:
            return jaro
        return jaro + self._scaling_factor * prefix * (1.0 - jaro)

    def __repr__(self) -> str:
        return (
            f"JaroWinklerSimilarity(scaling_factor={self._scaling_factor!r}, "
            f"boost_threshold={self._boost_threshold!r})"
        )


class JaroWinklerDistance(Metric):
    """``1 - JaroWinklerSimilarity``."""

    __slots__ = ("_similarity",)

    def __init__(
        self,
        scaling_factor: float = DEFAULT_SCALING_FACTOR,
        boost_threshold: float = DEFAULT_BOOST_THRESHOLD,
    ):
        self._similarity = JaroWinklerSimilarity(scaling_factor, boost_threshold)

    def apply(self, left: Any, right: Any) -> float:
        return 1.0 - self._similarity.apply(left, right)


_JARO = JaroWinklerSimilarity(scaling_factor=0.0)
_JARO_WINKLER = JaroWinklerSimilarity()


def jaro_similarity(left: Any, right: Any) -> float:
    """Jaro similarity, without any prefix boost."""
    return _JARO.apply(left, right)


def jaro_winkler_similarity(
    left: Any, right: Any, scaling_factor: float = DEFAULT_SCALING_FACTOR
) -> float:
    """Jaro-Winkler similarity in ``[0, 1]``; 1.0 for equal inputs."""
    if scaling_factor == DEFAULT_SCALING_FACTOR:
        return _JARO_WINKLER.apply(left, right)
    return JaroWinklerSimilarity(scaling_factor).apply(left, right)


def jaro_winkler_distance(left: Any, right: Any) -> float:
    return 1.0 - _JARO_WINKLER.apply(left, right)


__all__ = [
    "JaroWinklerSimilarity",
    "JaroWinklerDistance",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "jaro_winkler_distance",
    "matches",
]
