"""Name-to-metric registry used by the batch and Polars APIs.

Every scorer maps two operands to a similarity in ``[0, 1]`` where 1.0 means
identical. Edit distances are normalized by the longer operand length.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Union

from fuzzyseq._utils import normalize_algorithm
from fuzzyseq.cosine import cosine_similarity
from fuzzyseq.damerau import damerau_levenshtein_similarity
from fuzzyseq.enums import Algorithm
from fuzzyseq.hamming_distance import hamming_similarity
from fuzzyseq.intersection import jaccard_similarity, ngram_similarity, sorensen_dice_similarity
from fuzzyseq.jaro import jaro_similarity, jaro_winkler_similarity
from fuzzyseq.lcs import lcs_similarity
from fuzzyseq.levenshtein_distance import levenshtein_similarity

logger = logging.getLogger(__name__)

Scorer = Callable[[Any, Any], float]


def _bigram(left: Any, right: Any) -> float:
    return ngram_similarity(left, right, 2)


def _trigram(left: Any, right: Any) -> float:
    return ngram_similarity(left, right, 3)


def _cosine(left: Any, right: Any) -> float:
    # The tokenizer rejects blank text; two blank texts are identical and
    # one blank text shares no words.
    left_blank = not str(left).strip()
    right_blank = not str(right).strip()
    if left_blank or right_blank:
        return 1.0 if left_blank and right_blank else 0.0
    return cosine_similarity(left, right)


_SCORERS: dict[str, Scorer] = {
    "levenshtein": levenshtein_similarity,
    "damerau_levenshtein": damerau_levenshtein_similarity,
    "jaro": jaro_similarity,
    "jaro_winkler": jaro_winkler_similarity,
    "hamming": hamming_similarity,
    "lcs": lcs_similarity,
    "cosine": _cosine,
    "jaccard": jaccard_similarity,
    "sorensen_dice": sorensen_dice_similarity,
    "bigram": _bigram,
    "trigram": _trigram,
}


def similarity_scorer(algorithm: Union[str, Algorithm]) -> Scorer:
    """Return the ``[0, 1]`` similarity function registered for ``algorithm``.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> scorer = similarity_scorer("levenshtein")
        >>> round(scorer("kitten", "sitting"), 4)
        0.5714
    """
    name = normalize_algorithm(algorithm)
    logger.debug("Resolved similarity scorer %r", name)
    return _SCORERS[name]


__all__ = ["Scorer", "similarity_scorer"]
