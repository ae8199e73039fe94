"""Metric protocols.

Every metric exposes a single capability, ``apply(left, right)``:

- EditDistance: lower is more similar (``int`` or ``float``)
- SimilarityScore: higher is more similar (``float``, ``int`` or a result object)

Both are structural protocols, so any object with a matching ``apply`` works
with the currying adapters and the batch API.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

R = TypeVar("R", covariant=True)


@runtime_checkable
class EditDistance(Protocol[R]):
    """A distance between two sequences."""

    def apply(self, left: Any, right: Any) -> R: ...


@runtime_checkable
class SimilarityScore(Protocol[R]):
    """A similarity score between two sequences."""

    def apply(self, left: Any, right: Any) -> R: ...


class Metric:
    """Mixin making metric instances callable like plain functions."""

    __slots__ = ()

    def apply(self, left: Any, right: Any) -> Any:
        raise NotImplementedError

    def __call__(self, left: Any, right: Any) -> Any:
        return self.apply(left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["EditDistance", "SimilarityScore", "Metric"]
