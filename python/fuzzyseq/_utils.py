"""Internal utilities for fuzzyseq."""

from typing import Optional, Union

from fuzzyseq.enums import Algorithm
from fuzzyseq.exceptions import AlgorithmError, InvalidArgumentError

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

# Names that resolve to the same metric
_ALIASES = {"damerau": "damerau_levenshtein"}


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert an Algorithm enum to its name, or validate a string name.

    Aliases are resolved, so ``"damerau"`` comes back as
    ``"damerau_levenshtein"``.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase canonical algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        name = algorithm.value
    elif isinstance(algorithm, str):
        name = algorithm.lower()
        if name not in VALID_ALGORITHMS:
            raise AlgorithmError(
                f"Unknown algorithm: '{algorithm}'. "
                f"Valid options: {sorted(VALID_ALGORITHMS)}"
            )
    else:
        raise TypeError(
            f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
        )
    return _ALIASES.get(name, name)


def validate_threshold(threshold: Optional[int]) -> Optional[int]:
    """Return ``threshold`` unchanged if it is None or a non-negative int."""
    if threshold is None:
        return None
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise InvalidArgumentError(
            f"Threshold must be an integer, got {type(threshold).__name__}"
        )
    if threshold < 0:
        raise InvalidArgumentError(f"Threshold must not be negative: {threshold}")
    return threshold


def validate_min_similarity(min_similarity: float) -> float:
    """Check that a similarity cutoff lies in ``[0, 1]``."""
    if not 0.0 <= min_similarity <= 1.0:
        raise InvalidArgumentError(
            f"min_similarity must be between 0.0 and 1.0, got {min_similarity}"
        )
    return min_similarity


__all__ = [
    "normalize_algorithm",
    "validate_threshold",
    "validate_min_similarity",
    "VALID_ALGORITHMS",
]
