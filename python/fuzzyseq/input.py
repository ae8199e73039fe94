"""Uniform random-access view over the operands of a metric.

Every algorithm in fuzzyseq is written once against :class:`SimilarityInput`
rather than against ``str``, ``bytes`` or ``list``. :func:`as_input` turns
whatever the caller passed into such a view:

    >>> from fuzzyseq.input import as_input, register_adapter
    >>> as_input("abc").at(1)
    'b'
    >>> as_input([3, 1, 4]).length()
    3

User types plug in through :func:`register_adapter`:

    >>> class Word:
    ...     def __init__(self, letters):
    ...         self.letters = letters
    >>> register_adapter(Word, lambda w: w.letters)
"""

from __future__ import annotations

import array
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from functools import singledispatch
from typing import Any, Generic, TypeVar

from fuzzyseq.exceptions import (
    InvalidArgumentError,
    InvalidInputError,
    InvalidInputTypeError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SimilarityInput(Generic[T]):
    """A length plus random-access view over a sequence of elements.

    Instances borrow the caller's sequence for the duration of one comparison
    and never mutate it. Two inputs are equal when they have the same length
    and pairwise-equal elements, whatever their concrete backing type.
    """

    __slots__ = ()

    def length(self) -> int:
        raise NotImplementedError

    def at(self, index: int) -> T:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.length()

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __iter__(self) -> Iterator[T]:
        at = self.at
        for i in range(self.length()):
            yield at(i)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SimilarityInput):
            return NotImplemented
        if self.length() != other.length():
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))


class CharacterInput(SimilarityInput[str]):
    """View over a ``str``; each element is a single code point."""

    __slots__ = ("_text",)

    def __init__(self, text: str):
        if text is None:
            raise InvalidInputError("text must not be None")
        self._text = text

    def length(self) -> int:
        return len(self._text)

    def at(self, index: int) -> str:
        return self._text[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CharacterInput({self._text!r})"


class SequenceInput(SimilarityInput[T]):
    """View over any indexable sequence: lists, tuples, bytes, arrays, user types."""

    __slots__ = ("_seq",)

    def __init__(self, seq: Sequence[T]):
        if seq is None:
            raise InvalidInputError("sequence must not be None")
        self._seq = seq

    def length(self) -> int:
        return len(self._seq)

    def at(self, index: int) -> T:
        return self._seq[index]

    def __repr__(self) -> str:
        return f"SequenceInput({self._seq!r})"


@singledispatch
def as_input(obj: Any) -> SimilarityInput:
    """Adapt ``obj`` to a :class:`SimilarityInput`.

    Raises:
        InvalidInputError: If ``obj`` is None.
        InvalidInputTypeError: If ``obj`` has neither a sequence interface nor a
            registered adapter.
    """
    if obj is None:
        raise InvalidInputError("Input must not be None")
    if isinstance(obj, Sequence):
        return SequenceInput(obj)
    # Duck-typed sequences that never registered with collections.abc
    if (
        not isinstance(obj, Mapping)
        and hasattr(obj, "__len__")
        and hasattr(obj, "__getitem__")
    ):
        return SequenceInput(obj)
    raise InvalidInputTypeError(
        f"Cannot compare object of type {type(obj).__name__}; "
        "register an adapter with fuzzyseq.register_adapter()"
    )


@as_input.register(SimilarityInput)
def _(obj) -> SimilarityInput:
    return obj


@as_input.register(str)
def _(obj) -> SimilarityInput:
    return CharacterInput(obj)


@as_input.register(bytes)
@as_input.register(bytearray)
@as_input.register(memoryview)
@as_input.register(array.array)
def _(obj) -> SimilarityInput:
    return SequenceInput(obj)


def register_adapter(cls: type, adapter: Callable[[Any], Any]) -> None:
    """Teach :func:`as_input` how to view instances of ``cls`` as sequences.

    Args:
        cls: The user type to support.
        adapter: Callable returning either a :class:`SimilarityInput` or any
            object :func:`as_input` already understands.

    Raises:
        InvalidArgumentError: If ``adapter`` is not callable.
    """
    if not callable(adapter):
        raise InvalidArgumentError("adapter must be callable")

    def _adapt(obj):
        converted = adapter(obj)
        if isinstance(converted, cls):
            raise InvalidInputTypeError(
                f"Adapter for {cls.__name__} returned another {cls.__name__}"
            )
        return as_input(converted)

    as_input.register(cls, _adapt)
    logger.debug("Registered similarity adapter for %s", cls.__qualname__)


def as_inputs(left: Any, right: Any) -> tuple[SimilarityInput, SimilarityInput]:
    """Adapt both operands of a comparison, rejecting ``None`` on either side."""
    if left is None or right is None:
        raise InvalidInputError("Inputs must not be None")
    return as_input(left), as_input(right)


__all__ = [
    "SimilarityInput",
    "CharacterInput",
    "SequenceInput",
    "as_input",
    "as_inputs",
    "register_adapter",
]
