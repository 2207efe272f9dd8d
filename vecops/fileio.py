"""Reading and writing vectors and scalars as text, and formatting them."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

from vecops.scalars import Scalar, ScalarKind
from vecops.status import NotFoundError
from vecops.vector import Vector, vector_init

PathLike = Union[str, "os.PathLike[str]"]

_WORD_RE = re.compile(r"\s*(\S+)")
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_DOUBLE_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _format_value(kind: ScalarKind, value: int | float) -> str:
    if kind is ScalarKind.INT:
        return f"{int(value)}"
    return f"{float(value):.6f}"


def read_file(path: PathLike) -> tuple[ScalarKind, list[int | float]]:
    """Parse a vector file into its element kind and values.

    The file holds one or more sections, each a type word (``INT`` or
    ``DOUBLE``) followed by numbers; the last section wins.
    """
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise NotFoundError(f"cannot open {path}") from exc

    result: tuple[ScalarKind, list[int | float]] | None = None
    pos = 0
    while (word_match := _WORD_RE.match(text, pos)) is not None:
        word = word_match.group(1)
        pos = word_match.end()
        try:
            kind = ScalarKind(word)
        except ValueError:
            raise NotFoundError(f"unknown type: {word}") from None

        if kind is ScalarKind.INT:
            pattern, convert = _INT_RE, int
        else:
            pattern, convert = _DOUBLE_RE, float

        values: list[int | float] = []
        while (number := pattern.match(text, pos)) is not None:
            values.append(convert(number.group(1)))
            pos = number.end()
        result = (kind, values)

    if result is None:
        raise NotFoundError(f"no vector data in {path}")
    return result


def read_vector(path: PathLike) -> Vector:
    """Read a vector file and build the vector it describes."""
    kind, values = read_file(path)
    return vector_init(kind, values)


def write_vector(path: PathLike, vector: Vector) -> None:
    """Write a vector in the same format that :func:`read_file` reads."""
    if len(vector) == 0:
        raise NotFoundError("cannot write an empty vector")
    kind = vector[0].kind
    body = " ".join(_format_value(kind, item.value) for item in vector)
    Path(path).write_text(f"{kind.value}\n{body}\n")


def write_scalar(path: PathLike, scalar: Scalar) -> None:
    """Write a single scalar with its type word."""
    Path(path).write_text(
        f"{scalar.kind.value}\n{_format_value(scalar.kind, scalar.value)}\n"
    )


def format_vector(vector: Vector | None, name: str) -> str:
    """Render a vector as ``name: [a, b, c]``."""
    if vector is None:
        return f"{name}: NULL vector"
    body = ", ".join(_format_value(item.kind, item.value) for item in vector)
    return f"{name}: [{body}]"


def format_scalar(scalar: Scalar | None, name: str) -> str:
    """Render a scalar as ``name: value``."""
    if scalar is None:
        return f"{name}: NULL scalar"
    return f"{name}: {_format_value(scalar.kind, scalar.value)}"