"""Cosine similarity of sparse count vectors.

Text is split into tokens, each side becomes a ``Counter`` of token
frequencies, and the two vectors are compared by the cosine of the angle
between them. Only features present on both sides contribute to the dot
product.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Callable, Mapping
from typing import Any, Hashable, Optional

from fuzzyseq.exceptions import InvalidArgumentError, InvalidInputError
from fuzzyseq.protocols import Metric


class RegexTokenizer:
    """Split text into runs of word characters.

    Example:
        >>> RegexTokenizer().tokenize("Hello, hello world")
        ['Hello', 'hello', 'world']
    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str = r"\w+"):
        self._pattern = re.compile(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def tokenize(self, text: Optional[str]) -> list[str]:
        """Return every match of the pattern in ``text``.

        Raises:
            InvalidInputError: If ``text`` is None, empty or only whitespace.
        """
        if text is None or not str(text).strip():
            raise InvalidInputError("Invalid text")
        return self._pattern.findall(str(text))

    __call__ = tokenize

    def __repr__(self) -> str:
        return f"RegexTokenizer({self._pattern.pattern!r})"


class CosineSimilarity(Metric):
    """Cosine similarity between token-count vectors, in ``[0, 1]``.

    Args:
        tokenizer: Callable turning text into a list of tokens. Defaults to
            :class:`RegexTokenizer`.

    Example:
        >>> round(CosineSimilarity().apply("the cat sat", "the cat ran"), 4)
        0.6667
        >>> round(CosineSimilarity().cosine_similarity({"a": 1, "b": 1}, {"a": 1}), 4)
        0.7071
    """

    __slots__ = ("_tokenizer",)

    def __init__(self, tokenizer: Optional[Callable[[str], list]] = None):
        if tokenizer is not None and not callable(tokenizer):
            raise InvalidArgumentError("tokenizer must be callable")
        self._tokenizer = tokenizer if tokenizer is not None else RegexTokenizer()

    @property
    def tokenizer(self) -> Callable[[str], list]:
        return self._tokenizer

    def cosine_similarity(
        self,
        left_vector: Mapping[Hashable, float],
        right_vector: Mapping[Hashable, float],
    ) -> float:
        """Cosine of two sparse vectors given as ``{feature: weight}`` mappings.

        Returns 0.0 when either vector has zero magnitude.

        Raises:
            InvalidInputError: If either vector is None.
        """
        if left_vector is None or right_vector is None:
            raise InvalidInputError("Vectors must not be None")

        if len(left_vector) > len(right_vector):
            left_vector, right_vector = right_vector, left_vector
        dot_product = sum(
            value * right_vector[key]
            for key, value in left_vector.items()
            if key in right_vector
        )
        left_norm = sum(value * value for value in left_vector.values())
        right_norm = sum(value * value for value in right_vector.values())
        if left_norm <= 0.0 or right_norm <= 0.0:
            return 0.0
        return dot_product / (math.sqrt(left_norm) * math.sqrt(right_norm))

    def apply(self, left: Any, right: Any) -> float:
        """Tokenize both texts and compare their token counts.

        Raises:
            InvalidInputError: If either text is None or blank.
        """
        left_vector = Counter(self._tokenizer(left))
        right_vector = Counter(self._tokenizer(right))
        return self.cosine_similarity(left_vector, right_vector)

    def __repr__(self) -> str:
        return f"CosineSimilarity(tokenizer={self._tokenizer!r})"


class CosineDistance(Metric):
    """``1 - CosineSimilarity``."""

    __slots__ = ("_similarity",)

    def __init__(self, tokenizer: Optional[Callable[[str], list]] = None):
        self._similarity = CosineSimilarity(tokenizer)

    def apply(self, left: Any, right: Any) -> float:
        return 1.0 - self._similarity.apply(left, right)


_DEFAULT = CosineSimilarity()


def cosine_similarity(left: str, right: str) -> float:
    """Cosine similarity of the word counts of two texts."""
    return _DEFAULT.apply(left, right)


def cosine_distance(left: str, right: str) -> float:
    return 1.0 - _DEFAULT.apply(left, right)


__all__ = [
    "RegexTokenizer",
    "CosineSimilarity",
    "CosineDistance",
    "cosine_similarity",
    "cosine_distance",
]
