# vecops

Vectors whose elements all share one numeric kind: `INT` (32-bit integers
that wrap around on overflow) or `DOUBLE`. vecops adds two vectors element by
element, computes their scalar (dot) product, compares vectors and scalars,
and reads and writes them in a small plain-text format.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from vecops.scalars import ScalarKind, create_int, create_double
from vecops.vector import (
    vector_init,
    vector_sum,
    scalar_product,
    compare_vectors,
    compare_scalar,
)

a = vector_init(ScalarKind.INT, [1, 2, 3])
b = vector_init(ScalarKind.INT, [4, 5, 6])

total = vector_sum(a, b)          # elements 5, 7, 9
dot = scalar_product(a, b)        # a Scalar holding 32
compare_vectors(a, a)             # True
create_int(2) + create_int(3)     # a Scalar holding 5
compare_scalar(create_double(1.5), create_double(1.5))  # True
```

A `Vector` is immutable; it supports `len()`, iteration and indexing, and
its elements are `Scalar` values, each with a `kind` (`ScalarKind`) and a
`value`. Scalars of the same kind can be added with `+` and multiplied with
`*`; `Scalar.same_type` tells whether two scalars share a kind.

## Errors

Errors come from `vecops.status`. Both error classes derive from
`VectorError`, and each carries a `status` attribute holding a `Status` code.

- `NotFoundError` (`Status.NOT_FOUND`): an input is missing (`None`), the
  vectors given to `vector_sum` or `scalar_product` differ in length, a
  scalar product is asked of empty vectors, or a file cannot be read.
- `UndefinedTypeError` (`Status.UNDEFINED_TYPE`): scalars of different kinds
  are combined or compared, or `compare_vectors` is given vectors of
  different lengths.

`compare_vectors` returns `False` when two elements differ in value or kind.

## File format

A vector file holds a type word, `INT` or `DOUBLE`, followed by the values,
separated by whitespace:

```
INT
1 2 3
```

```
DOUBLE
1.500000 2.500000 3.500000
```

If a file holds several such sections, the last one is used. An unknown type
word, a missing file or a file with no type word raises `NotFoundError`.

`vecops.fileio` provides:

- `read_file(path)` — returns the element kind and the list of values.
- `read_vector(path)` — reads a file and returns a `Vector`.
- `write_vector(path, vector)` — writes a non-empty vector in the format
  above; doubles are written with six decimals.
- `write_scalar(path, scalar)` — writes the type word and a single value.
- `format_vector(vector, name)` and `format_scalar(scalar, name)` — render
  values for display, as `name: [1, 2, 3]` and `name: 32`.

## Command line

```
vecops [--input-dir DIR] [--output-dir DIR]
```

The command first runs a built-in self-check and prints `PASS` or `FAIL` for
each case, followed by a summary.

It then reads `vector1.txt` and `vector2.txt` from the input directory
(default `input`) and prints both vectors, their sum and their scalar
product. It writes the following files to the output directory (default
`output`), which must already exist:

- `vector1.txt`
- `vector2.txt`
- `vector_sum.txt`
- `vector_product.txt`

A file that cannot be read or written is reported and skipped. The exit
status is 0 when every self-check passed and 1 otherwise.