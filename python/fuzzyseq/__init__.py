"""
fuzzyseq - Exact sequence similarity and edit-distance metrics

Every metric works on strings and on any indexable sequence (lists, tuples,
bytes, or your own types through ``register_adapter``).

Example usage:
    >>> import fuzzyseq as fs

    # Edit distances
    >>> fs.levenshtein("kitten", "sitting")
    3
    >>> fs.damerau_levenshtein("ca", "abc")
    2
    >>> fs.levenshtein(["a", "b", "c"], ["a", "c"])
    1

    # Bounded distance: -1 once the threshold is exceeded
    >>> fs.LevenshteinDistance(threshold=2)("kitten", "sitting")
    -1

    # Operation counts
    >>> str(fs.levenshtein_detailed("fly", "ant"))
    'Distance: 3, Insert: 0, Delete: 0, Substitute: 3'

    # Similarity scores
    >>> round(fs.jaro_winkler_similarity("frog", "fog"), 3)
    0.925
    >>> fs.IntersectionSimilarity(fs.characters_set)("night", "nacht").sorensen_dice_coefficient
    0.6
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from fuzzyseq import batch, polars_ext
from fuzzyseq._utils import VALID_ALGORITHMS, normalize_algorithm
from fuzzyseq.cosine import (
    CosineDistance,
    CosineSimilarity,
    RegexTokenizer,
    cosine_distance,
    cosine_similarity,
)
from fuzzyseq.curry import EditDistanceFrom, SimilarityScoreFrom
from fuzzyseq.damerau import (
    DamerauLevenshteinDistance,
    damerau_levenshtein,
    damerau_levenshtein_similarity,
)
from fuzzyseq.enums import Algorithm
from fuzzyseq.exceptions import (
    AlgorithmError,
    FuzzySeqError,
    InvalidArgumentError,
    InvalidInputError,
    InvalidInputTypeError,
    UnequalLengthError,
    ValidationError,
)
from fuzzyseq.fuzzy_score import FuzzyScore
from fuzzyseq.hamming_distance import HammingDistance, hamming, hamming_similarity
from fuzzyseq.input import (
    CharacterInput,
    SequenceInput,
    SimilarityInput,
    as_input,
    register_adapter,
)
from fuzzyseq.intersection import (
    IntersectionSimilarity,
    JaccardDistance,
    JaccardSimilarity,
    OverlapSimilarity,
    SorensenDiceSimilarity,
    bigrams_list,
    bigrams_set,
    characters_list,
    characters_set,
    jaccard_distance,
    jaccard_similarity,
    ngram_similarity,
    ngrams,
    sorensen_dice_similarity,
    words,
)
from fuzzyseq.jaro import (
    JaroWinklerDistance,
    JaroWinklerSimilarity,
    jaro_similarity,
    jaro_winkler_distance,
    jaro_winkler_similarity,
)
from fuzzyseq.lcs import (
    LongestCommonSubsequence,
    LongestCommonSubsequenceDistance,
    lcs_distance,
    lcs_length,
    lcs_similarity,
    lcs_string,
)
from fuzzyseq.levenshtein_distance import (
    LevenshteinDetailedDistance,
    LevenshteinDistance,
    levenshtein,
    levenshtein_detailed,
    levenshtein_similarity,
)
from fuzzyseq.protocols import EditDistance, SimilarityScore
from fuzzyseq.results import (
    IntersectionResult,
    LevenshteinResults,
    MatchResult,
    OverlapResult,
)
from fuzzyseq.scorers import similarity_scorer

try:
    __version__ = _get_version("fuzzyseq")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Input adapters
    "SimilarityInput",
    "CharacterInput",
    "SequenceInput",
    "as_input",
    "register_adapter",
    # Protocols
    "EditDistance",
    "SimilarityScore",
    # Edit distances
    "LevenshteinDistance",
    "LevenshteinDetailedDistance",
    "DamerauLevenshteinDistance",
    "HammingDistance",
    "LongestCommonSubsequenceDistance",
    "JaroWinklerDistance",
    "CosineDistance",
    "JaccardDistance",
    # Similarity scores
    "JaroWinklerSimilarity",
    "LongestCommonSubsequence",
    "CosineSimilarity",
    "RegexTokenizer",
    "IntersectionSimilarity",
    "OverlapSimilarity",
    "JaccardSimilarity",
    "SorensenDiceSimilarity",
    "FuzzyScore",
    # Converters
    "characters_set",
    "characters_list",
    "bigrams_set",
    "bigrams_list",
    "ngrams",
    "words",
    # Currying
    "EditDistanceFrom",
    "SimilarityScoreFrom",
    # Result types
    "LevenshteinResults",
    "IntersectionResult",
    "OverlapResult",
    "MatchResult",
    # Functions
    "levenshtein",
    "levenshtein_detailed",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    "hamming",
    "hamming_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "jaro_winkler_distance",
    "lcs_length",
    "lcs_string",
    "lcs_distance",
    "lcs_similarity",
    "cosine_similarity",
    "cosine_distance",
    "jaccard_similarity",
    "jaccard_distance",
    "sorensen_dice_similarity",
    "ngram_similarity",
    # Registry and batch
    "Algorithm",
    "VALID_ALGORITHMS",
    "normalize_algorithm",
    "similarity_scorer",
    "batch",
    "polars_ext",
    # Exceptions
    "FuzzySeqError",
    "ValidationError",
    "InvalidInputError",
    "InvalidInputTypeError",
    "InvalidArgumentError",
    "UnequalLengthError",
    "AlgorithmError",
    "__version__",
]
