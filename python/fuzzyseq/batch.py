"""Batch operations API for fuzzyseq.

List-based helpers that run one metric over many candidates. Every function
resolves its metric once and reuses it for the whole batch.

Example usage:
    >>> import fuzzyseq.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "hello")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('hello', 1.0), ('hallo', 0.88), ('world', 0.47)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Closest candidate by edit distance
    >>> batch.closest_match(["sitting", "mitten", "bitter"], "kitten")
    MatchResult(text='mitten', score=1, id=1)

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["abc", "xyz"], ["abc", "xya"], algorithm="levenshtein")
    [1.0, 0.6666666666666667]
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Any, Optional

from fuzzyseq._utils import validate_min_similarity
from fuzzyseq.curry import EditDistanceFrom
from fuzzyseq.exceptions import InvalidArgumentError
from fuzzyseq.levenshtein_distance import LevenshteinDistance
from fuzzyseq.results import MatchResult
from fuzzyseq.scorers import similarity_scorer

if TYPE_CHECKING:
    from fuzzyseq.enums import Algorithm
    from fuzzyseq.protocols import EditDistance

logger = logging.getLogger(__name__)

__all__ = [
    "similarity",
    "best_matches",
    "closest_match",
    "pairwise",
    "similarity_matrix",
    "distance_matrix",  # Deprecated alias for similarity_matrix
]


def similarity(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Results are returned in the same order as the input strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum). Options:
            - "levenshtein": Normalized Levenshtein similarity
            - "damerau_levenshtein": Normalized Damerau-Levenshtein similarity
            - "jaro": Jaro similarity
            - "jaro_winkler": Jaro-Winkler similarity (default)
            - "hamming": Normalized Hamming similarity (equal lengths only)
            - "lcs": Longest common subsequence similarity
            - "cosine": Word-count cosine similarity
            - "jaccard": Jaccard index of the character sets
            - "sorensen_dice": Sørensen-Dice coefficient of the bigram sets
            - "bigram" / "trigram": Sørensen-Dice of the n-gram multisets

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
    """
    scorer = similarity_scorer(algorithm)
    return [
        MatchResult(text, scorer(query, text), idx)
        for idx, text in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Scores all strings against the query, drops those below
    ``min_similarity``, and returns the rest sorted by score descending.
    Equal scores keep their input order.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        algorithm: Similarity algorithm to use; see :func:`similarity`.
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        InvalidArgumentError: If ``limit`` is negative or ``min_similarity``
            is outside ``[0, 1]``.
    """
    if limit < 0:
        raise InvalidArgumentError(f"limit must not be negative, got {limit}")
    validate_min_similarity(min_similarity)
    results = [r for r in similarity(strings, query, algorithm) if r.score >= min_similarity]
    results.sort(key=lambda r: -r.score)
    return results[:limit]


def closest_match(
    strings: list[str],
    query: str,
    edit_distance: Optional[EditDistance[int]] = None,
) -> Optional[MatchResult]:
    """Find the candidate with the smallest edit distance to the query.

    Args:
        strings: Candidates to search.
        query: The query string.
        edit_distance: Metric to minimize (default: unbounded Levenshtein).
            Candidates for which a bounded metric reports ``-1`` are skipped.

    Returns:
        The first candidate with the minimum distance, with the distance as
        its score, or None when no candidate qualifies.
    """
    metric = edit_distance if edit_distance is not None else LevenshteinDistance()
    from_query = EditDistanceFrom(metric, query)
    best: Optional[MatchResult] = None
    for idx, text in enumerate(strings):
        distance = from_query.apply(text)
        if distance < 0:
            continue
        if best is None or distance < best.score:
            best = MatchResult(text, distance, idx)
            if distance == 0:
                break
    return best


def pairwise(
    left: list[Any],
    right: list[Any],
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        algorithm: Similarity algorithm to use; see :func:`similarity`.

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        InvalidArgumentError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise InvalidArgumentError(
            f"left and right must have the same length: {len(left)} != {len(right)}"
        )
    scorer = similarity_scorer(algorithm)
    return [scorer(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[Any],
    choices: list[Any],
    algorithm: str | Algorithm = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Args:
        queries: First list of strings (rows of output matrix).
        choices: Second list of strings (columns of output matrix).
        algorithm: Similarity algorithm to use; see :func:`similarity`.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].
    """
    scorer = similarity_scorer(algorithm)
    logger.debug("Computing %dx%d similarity matrix", len(queries), len(choices))
    return [[scorer(q, c) for c in choices] for q in queries]


def distance_matrix(
    queries: list[Any],
    choices: list[Any],
    algorithm: str | Algorithm = "levenshtein",
) -> list[list[float]]:
    """Deprecated: Use similarity_matrix() instead.

    Despite its name this returns similarity scores (0.0-1.0), not distances.
    """
    warnings.warn(
        "distance_matrix() is deprecated and will be removed in a future version. "
        "Use similarity_matrix() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return similarity_matrix(queries, choices, algorithm)
