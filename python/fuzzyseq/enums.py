"""Enums for the fuzzyseq API."""

from enum import Enum


class Algorithm(str, Enum):
    """Named similarity metrics usable by the batch and Polars APIs.

    String values are accepted wherever an Algorithm is, so
    ``algorithm="jaro_winkler"`` and ``algorithm=Algorithm.JARO_WINKLER`` are
    interchangeable.

    Example:
        >>> from fuzzyseq import Algorithm, batch
        >>> matches = batch.best_matches(
        ...     ["apple", "apply", "banana"],
        ...     "appel",
        ...     algorithm=Algorithm.LEVENSHTEIN,
        ...     limit=2,
        ... )
    """

    LEVENSHTEIN = "levenshtein"
    """Edit distance (insertions, deletions, substitutions), normalized by the longer length"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including adjacent transpositions ('ca' -> 'ac' is 1 edit)"""

    DAMERAU = "damerau"
    """Alias for DAMERAU_LEVENSHTEIN"""

    JARO = "jaro"
    """Jaro similarity (Jaro-Winkler without the prefix boost)"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, good for names"""

    HAMMING = "hamming"
    """Hamming distance normalized by length (equal-length inputs only)"""

    LCS = "lcs"
    """Longest common subsequence length divided by the longer length"""

    COSINE = "cosine"
    """Cosine similarity of word-count vectors"""

    JACCARD = "jaccard"
    """Jaccard index of the character sets"""

    SORENSEN_DICE = "sorensen_dice"
    """Sørensen-Dice coefficient of the character-bigram sets"""

    BIGRAM = "bigram"
    """Sørensen-Dice coefficient of the bigram multisets"""

    TRIGRAM = "trigram"
    """Sørensen-Dice coefficient of the trigram multisets"""


__all__ = ["Algorithm"]
