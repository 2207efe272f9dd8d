"""Vectors of typed scalars and the operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from vecops.scalars import Scalar, ScalarKind
from vecops.status import NotFoundError, UndefinedTypeError


@dataclass(frozen=True)
class Vector:
    """An immutable sequence of scalars."""

    items: tuple[Scalar, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Scalar:
        return self.items[index]


def vector_init(kind: ScalarKind | None, values: Iterable[Any] | None) -> Vector:
    """Build a vector whose elements are all of the given kind."""
    if kind is None or values is None:
        raise NotFoundError("no source data for vector")
    return Vector(tuple(Scalar(kind, v) for v in values))


def _require_pair(vector1: Vector | None, vector2: Vector | None) -> None:
    if vector1 is None or vector2 is None:
        raise NotFoundError("missing vector")
    if len(vector1) != len(vector2):
        raise NotFoundError(
            f"vector sizes differ: {len(vector1)} and {len(vector2)}"
        )


def vector_sum(vector1: Vector | None, vector2: Vector | None) -> Vector:
    """Element-wise sum of two vectors of equal size."""
    _require_pair(vector1, vector2)
    return Vector(tuple(a + b for a, b in zip(vector1, vector2)))


def scalar_product(vector1: Vector | None, vector2: Vector | None) -> Scalar:
    """Dot product of two non-empty vectors of equal size."""
    _require_pair(vector1, vector2)
    if len(vector1) == 0:
        raise NotFoundError("scalar product of empty vectors")
    if not vector1[0].same_type(vector2[0]):
        raise UndefinedTypeError("vectors hold different element types")
    pairs = iter(zip(vector1, vector2))
    first_a, first_b = next(pairs)
    result = first_a * first_b
    for a, b in pairs:
        result = result + a * b
    return result


def compare_vectors(vector1: Vector, vector2: Vector) -> bool:
    """Whether two vectors hold equal elements of equal kinds."""
    if len(vector1) != len(vector2):
        raise UndefinedTypeError("vector sizes differ")
    return all(
        a.same_type(b) and a.value == b.value for a, b in zip(vector1, vector2)
    )


def compare_scalar(item1: Scalar | None, item2: Scalar | None) -> bool:
    """Whether two scalars of the same kind hold equal values."""
    if item1 is None or item2 is None:
        raise NotFoundError("missing scalar")
    if not item1.same_type(item2):
        raise UndefinedTypeError("scalars are of different kinds")
    return item1.value == item2.value