"""Set and multiset intersection similarity.

A converter turns each operand into a collection of features (characters,
bigrams, words, ...). :class:`IntersectionSimilarity` then reports the two
collection sizes and how many features they share. Two ``set`` collections
share each common member once; any other collection is treated as a multiset
and each common value contributes the smaller of its two counts:

    >>> IntersectionSimilarity(characters_set).apply("aaaa", "aa").intersection
    1
    >>> IntersectionSimilarity(characters_list).apply("aaaa", "aa").intersection
    2
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Collection, Set, Sized
from typing import Any

from fuzzyseq.exceptions import InvalidArgumentError, InvalidInputError, InvalidInputTypeError
from fuzzyseq.input import CharacterInput, SimilarityInput, as_input, as_inputs
from fuzzyseq.protocols import Metric
from fuzzyseq.results import IntersectionResult, OverlapResult

Converter = Callable[[Any], Collection]

_WORD = re.compile(r"\w+")


def characters_set(seq: Any) -> set:
    """Distinct elements of ``seq``."""
    return set(as_input(seq))


def characters_list(seq: Any) -> list:
    """Every element of ``seq``, duplicates kept."""
    return list(as_input(seq))


def _grams(view: SimilarityInput, n: int) -> list:
    length = view.length()
    if isinstance(view, CharacterInput):
        text = str(view)
        return [text[i:i + n] for i in range(length - n + 1)]
    items = list(view)
    return [tuple(items[i:i + n]) for i in range(length - n + 1)]


def ngrams(n: int, unique: bool = False) -> Converter:
    """Build a converter producing the contiguous n-grams of a sequence.

    Strings give ``str`` n-grams; other sequences give tuples. Sequences
    shorter than ``n`` have no n-grams.

    Args:
        n: Gram size, at least 1.
        unique: Return a ``set`` instead of a ``list``.

    Raises:
        InvalidArgumentError: If ``n`` is not an integer of at least 1.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"n must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidArgumentError(f"n must be at least 1, got {n}")

    def convert(seq: Any) -> Collection:
        grams = _grams(as_input(seq), n)
        return set(grams) if unique else grams

    convert.__name__ = f"{'unique_' if unique else ''}{n}grams"
    return convert


bigrams_set = ngrams(2, unique=True)
bigrams_list = ngrams(2)


def words(unique: bool = False) -> Converter:
    """Build a converter producing the ``\\w+`` tokens of a text.

    The converter accepts only ``str`` operands and raises
    :class:`~fuzzyseq.exceptions.InvalidInputTypeError` for anything else.
    """

    def convert(text: Any) -> Collection:
        if not isinstance(text, str):
            raise InvalidInputTypeError(
                f"Word tokens need a str operand, got {type(text).__name__}"
            )
        tokens = _WORD.findall(text)
        return set(tokens) if unique else tokens

    return convert


def _count_intersection(objects_a: Collection, objects_b: Collection) -> int:
    try:
        return _count_shared(objects_a, objects_b)
    except TypeError as exc:
        raise InvalidInputTypeError("Intersection requires hashable features") from exc


def _count_shared(objects_a: Collection, objects_b: Collection) -> int:
    if isinstance(objects_a, Set) and isinstance(objects_b, Set):
        if len(objects_a) > len(objects_b):
            objects_a, objects_b = objects_b, objects_a
        return sum(1 for item in objects_a if item in objects_b)

    bag_a = Counter(objects_a)
    bag_b = Counter(objects_b)
    if len(bag_a) > len(bag_b):
        bag_a, bag_b = bag_b, bag_a
    return sum(min(count, bag_b[item]) for item, count in bag_a.items() if item in bag_b)


class IntersectionSimilarity(Metric):
    """Sizes and intersection of the feature collections of two sequences.

    Args:
        converter: Callable turning one operand into a collection of hashable
            features.

    Raises:
        InvalidArgumentError: If ``converter`` is None or not callable.

    Example:
        >>> result = IntersectionSimilarity(characters_set).apply("night", "nacht")
        >>> result.sorensen_dice_coefficient
        0.6
    """

    __slots__ = ("_converter",)

    _result_type = IntersectionResult

    def __init__(self, converter: Converter):
        if converter is None:
            raise InvalidArgumentError("Converter must not be None")
        if not callable(converter):
            raise InvalidArgumentError("Converter must be callable")
        self._converter = converter

    @property
    def converter(self) -> Converter:
        return self._converter

    def _features(self, seq: Any) -> Collection:
        features = self._converter(seq)
        if features is None:
            raise InvalidInputError("Converter returned None")
        if not isinstance(features, Sized):
            raise InvalidInputError(
                f"Converter must return a sized collection, got {type(features).__name__}"
            )
        return features

    def apply(self, left: Any, right: Any) -> IntersectionResult:
        """Convert both operands and count their shared features.

        Raises:
            InvalidInputError: If either operand is None or the converter
                returns None or a collection without a length.
            InvalidInputTypeError: If the features are not hashable.
        """
        if left is None or right is None:
            raise InvalidInputError("Inputs must not be None")
        objects_a = self._features(left)
        objects_b = self._features(right)
        size_a = len(objects_a)
        size_b = len(objects_b)
        if min(size_a, size_b) == 0:
            return self._result_type(size_a, size_b, 0)
        return self._result_type(size_a, size_b, _count_intersection(objects_a, objects_b))

    def __repr__(self) -> str:
        name = getattr(self._converter, "__name__", repr(self._converter))
        return f"{type(self).__name__}({name})"


class OverlapSimilarity(IntersectionSimilarity):
    """Same computation as :class:`IntersectionSimilarity`, reported as an
    :class:`~fuzzyseq.results.OverlapResult`."""

    __slots__ = ()

    _result_type = OverlapResult


class JaccardSimilarity(Metric):
    """Jaccard index of the element sets of two sequences.

    Two empty operands are identical (1.0); one empty operand shares nothing
    (0.0).

    Example:
        >>> JaccardSimilarity().apply("night", "nacht")
        0.42857142857142855
    """

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> float:
        left, right = as_inputs(left, right)
        n = left.length()
        m = right.length()
        if n == 0 and m == 0:
            return 1.0
        if n == 0 or m == 0:
            return 0.0
        left_set = set(left)
        right_set = set(right)
        union = len(left_set | right_set)
        return (len(left_set) + len(right_set) - union) / union


class JaccardDistance(Metric):
    """``1 - JaccardSimilarity``."""

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> float:
        return 1.0 - _JACCARD.apply(left, right)


class SorensenDiceSimilarity(Metric):
    """Sørensen-Dice coefficient of the bigram sets of two sequences.

    Equal operands score 1.0; otherwise an operand shorter than two elements
    has no bigrams and scores 0.0.

    Example:
        >>> SorensenDiceSimilarity().apply("night", "nacht")
        0.25
    """

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> float:
        left, right = as_inputs(left, right)
        if left == right:
            return 1.0
        if left.length() < 2 or right.length() < 2:
            return 0.0
        left_grams = set(_grams(left, 2))
        right_grams = set(_grams(right, 2))
        shared = len(left_grams & right_grams)
        return 2.0 * shared / (len(left_grams) + len(right_grams))


_JACCARD = JaccardSimilarity()
_DICE = SorensenDiceSimilarity()


def jaccard_similarity(left: Any, right: Any) -> float:
    return _JACCARD.apply(left, right)


def jaccard_distance(left: Any, right: Any) -> float:
    return 1.0 - _JACCARD.apply(left, right)


def sorensen_dice_similarity(left: Any, right: Any) -> float:
    return _DICE.apply(left, right)


def ngram_similarity(left: Any, right: Any, n: int = 2) -> float:
    """Sørensen-Dice coefficient of the n-gram multisets; 1.0 for equal inputs."""
    converter = ngrams(n)
    left, right = as_inputs(left, right)
    if left == right:
        return 1.0
    return IntersectionSimilarity(converter).apply(left, right).sorensen_dice_coefficient


__all__ = [
    "IntersectionSimilarity",
    "OverlapSimilarity",
    "JaccardSimilarity",
    "JaccardDistance",
    "SorensenDiceSimilarity",
    "characters_set",
    "characters_list",
    "bigrams_set",
    "bigrams_list",
    "ngrams",
    "words",
    "jaccard_similarity",
    "jaccard_distance",
    "sorensen_dice_similarity",
    "ngram_similarity",
]
