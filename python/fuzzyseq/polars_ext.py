"""Polars Series operations for fuzzyseq.

Functions in This Module
------------------------
- ``match_series()``: Match every query against every target above a cutoff
- ``best_match_series()``: Best target for each query
- ``similarity_series()``: Element-wise similarity of two aligned Series

Null values are skipped on either side.

Example Usage
-------------
>>> import polars as pl
>>> from fuzzyseq.polars_ext import best_match_series
>>>
>>> queries = pl.Series(["appel", "banan"])
>>> targets = pl.Series(["apple", "banana", "cherry"])
>>> best = best_match_series(queries, targets, algorithm="levenshtein")
"""

from typing import Union

import polars as pl

from fuzzyseq._utils import validate_min_similarity
from fuzzyseq.enums import Algorithm
from fuzzyseq.exceptions import InvalidArgumentError
from fuzzyseq.scorers import similarity_scorer

_MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "score": pl.Float64,
}


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, keeps every target whose score reaches min_similarity.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        algorithm: Similarity algorithm to use (string or Algorithm enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, min_similarity=0.7)
    """
    validate_min_similarity(min_similarity)
    scorer = similarity_scorer(algorithm)
    targets = [
        (idx, str(target))
        for idx, target in enumerate(target_series.to_list())
        if target is not None
    ]

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        query = str(query)
        for target_idx, target in targets:
            score = scorer(query, target)
            if score >= min_similarity:
                rows.append(
                    {
                        "query_idx": query_idx,
                        "query": query,
                        "target_idx": target_idx,
                        "target": target,
                        "score": float(score),
                    }
                )

    return pl.DataFrame(rows, schema=_MATCH_SCHEMA)


def best_match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Find the best-scoring target for each query.

    The result has one row per query, in query order. Queries that are null,
    or whose best score is below min_similarity, get null ``match`` and
    ``score``. Ties go to the earliest target.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        algorithm: Similarity algorithm to use (string or Algorithm enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        DataFrame with columns: query, match, score
    """
    validate_min_similarity(min_similarity)
    scorer = similarity_scorer(algorithm)
    targets = [str(t) for t in target_series.to_list() if t is not None]

    queries = [None if q is None else str(q) for q in query_series.to_list()]
    best_targets = []
    best_scores = []
    for query in queries:
        best_target = None
        best_score = None
        if query is not None:
            for target in targets:
                score = scorer(query, target)
                if score >= min_similarity and (best_score is None or score > best_score):
                    best_target, best_score = target, float(score)
        best_targets.append(best_target)
        best_scores.append(best_score)

    return pl.DataFrame(
        {
            "query": pl.Series(queries, dtype=pl.Utf8),
            "match": pl.Series(best_targets, dtype=pl.Utf8),
            "score": pl.Series(best_scores, dtype=pl.Float64),
        }
    )


def similarity_series(
    left: "pl.Series",
    right: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
) -> "pl.Series":
    """
    Element-wise similarity of two equal-length Series.

    A null on either side gives a null score.

    Raises:
        InvalidArgumentError: If the Series differ in length.
    """
    if len(left) != len(right):
        raise InvalidArgumentError(
            f"Series must have the same length: {len(left)} != {len(right)}"
        )
    scorer = similarity_scorer(algorithm)
    scores = [
        None if a is None or b is None else float(scorer(str(a), str(b)))
        for a, b in zip(left.to_list(), right.to_list())
    ]
    return pl.Series("similarity", scores, dtype=pl.Float64)


__all__ = ["match_series", "best_match_series", "similarity_series"]
