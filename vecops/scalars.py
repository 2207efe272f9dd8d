"""Typed scalar values with arithmetic bound to their kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from vecops.status import NotFoundError, UndefinedTypeError

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)


def _wrap_int(value: int) -> int:
    return (value + _INT_HALF) % _INT_MOD - _INT_HALF


class ScalarKind(Enum):
    """The element types a scalar can hold."""

    INT = "INT"
    DOUBLE = "DOUBLE"

    def coerce(self, number: Any) -> int | float:
        """Convert a number to this kind's native representation."""
        if self is ScalarKind.INT:
            return _wrap_int(int(number))
        return float(number)


@dataclass(frozen=True)
class Scalar:
    """A single value tagged with its kind."""

    kind: ScalarKind
    value: int | float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.kind.coerce(self.value))

    def same_type(self, other: Scalar) -> bool:
        """Whether both scalars share the same kind."""
        return self.kind is other.kind

    def _check(self, other: Any) -> None:
        if other is None:
            raise NotFoundError("missing operand")
        if not self.same_type(other):
            raise UndefinedTypeError(
                f"cannot combine {self.kind.value} with {other.kind.value}"
            )

    def __add__(self, other: Any) -> Scalar:
        if other is not None and not isinstance(other, Scalar):
            return NotImplemented
        self._check(other)
        return Scalar(self.kind, self.value + other.value)

    def __mul__(self, other: Any) -> Scalar:
        if other is not None and not isinstance(other, Scalar):
            return NotImplemented
        self._check(other)
        return Scalar(self.kind, self.value * other.value)


def create_int(number: Any) -> Scalar:
    """Create a 32-bit integer scalar."""
    return Scalar(ScalarKind.INT, number)


def create_double(number: Any) -> Scalar:
    """Create a floating-point scalar."""
    return Scalar(ScalarKind.DOUBLE, number)