"""Command that runs the built-in checks and processes two input vectors."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from vecops.fileio import (
    format_scalar,
    format_vector,
    read_vector,
    write_scalar,
    write_vector,
)
from vecops.scalars import Scalar, ScalarKind
from vecops.status import NotFoundError, Status, VectorError
from vecops.vector import (
    Vector,
    compare_vectors,
    scalar_product,
    vector_init,
    vector_sum,
)

_TOLERANCE = 0.001


@dataclass
class TestResults:
    """Tally of self-check outcomes."""

    __test__ = False

    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0

    def record(self, name: str, passed: bool) -> bool:
        """Count one check and print its outcome."""
        self.total_tests += 1
        if passed:
            self.passed_tests += 1
            print(f"PASS: {name}")
        else:
            self.failed_tests += 1
            print(f"FAIL: {name}")
        return passed

    def summary(self) -> str:
        """Three-line summary of the tally."""
        return (
            f"Total tests: {self.total_tests}\n"
            f"Passed: {self.passed_tests}\n"
            f"Failed: {self.failed_tests}"
        )


def _close(scalar: Scalar, expected: float) -> bool:
    return math.isclose(scalar.value, expected, abs_tol=_TOLERANCE)


def _check(check: Callable[[], bool]) -> bool:
    try:
        return check()
    except VectorError:
        return False


def _raises(action: Callable[[], object], status: Status) -> bool:
    try:
        action()
    except VectorError as exc:
        return exc.status is status
    return False


def _check_creation(results: TestResults) -> None:
    print("\nTest vector creation")
    results.record(
        "Create int vector",
        _check(lambda: len(vector_init(ScalarKind.INT, [1, 2, 3])) == 3),
    )
    results.record(
        "Create double vector",
        _check(lambda: len(vector_init(ScalarKind.DOUBLE, [1.5, 2.5, 3.5])) == 3),
    )
    results.record(
        "Got NULL input",
        _raises(lambda: vector_init(None, None), Status.NOT_FOUND),
    )


def _check_sum(results: TestResults) -> None:
    print("\nTest vector sum")

    def int_sum() -> bool:
        total = vector_sum(
            vector_init(ScalarKind.INT, [1, 2, 3]),
            vector_init(ScalarKind.INT, [4, 5, 6]),
        )
        return [item.value for item in total] == [5, 7, 9]

    def double_sum() -> bool:
        total = vector_sum(
            vector_init(ScalarKind.DOUBLE, [1.1, 2.2, 3.3]),
            vector_init(ScalarKind.DOUBLE, [0.9, 0.8, 0.7]),
        )
        return all(_close(item, want) for item, want in zip(total, [2.0, 3.0, 4.0]))

    results.record("[1,2,3] + [4,5,6] = [5,7,9]", _check(int_sum))
    results.record("[1.1,2.2,3.3] + [0.9,0.8,0.7] = [2.0,3.0,4.0]", _check(double_sum))
    results.record(
        "Got size mismatch",
        _raises(
            lambda: vector_sum(
                vector_init(ScalarKind.INT, [1, 2]),
                vector_init(ScalarKind.INT, [1, 2, 3, 4]),
            ),
            Status.NOT_FOUND,
        ),
    )


def _check_product(results: TestResults) -> None:
    print("\nTest scalar product")
    results.record(
        "[1,2,3] * [4,5,6] = 32",
        _check(
            lambda: scalar_product(
                vector_init(ScalarKind.INT, [1, 2, 3]),
                vector_init(ScalarKind.INT, [4, 5, 6]),
            ).value
            == 32
        ),
    )
    results.record(
        "[1.0,2.0,3.0] * [0.5,1.5,2.5] = 11",
        _check(
            lambda: _close(
                scalar_product(
                    vector_init(ScalarKind.DOUBLE, [1.0, 2.0, 3.0]),
                    vector_init(ScalarKind.DOUBLE, [0.5, 1.5, 2.5]),
                ),
                11.0,
            )
        ),
    )


def _check_comparison(results: TestResults) -> None:
    print("\nTest vector comparison")
    results.record(
        "Compare equal vectors",
        _check(
            lambda: compare_vectors(
                vector_init(ScalarKind.INT, [1, 2, 3]),
                vector_init(ScalarKind.INT, [1, 2, 3]),
            )
        ),
    )
    results.record(
        "Compare different vectors",
        _check(
            lambda: not compare_vectors(
                vector_init(ScalarKind.INT, [1, 2, 3]),
                vector_init(ScalarKind.INT, [1, 2, 4]),
            )
        ),
    )


def run_self_tests(results: TestResults) -> TestResults:
    """Run the built-in checks, recording each outcome in ``results``."""
    _check_creation(results)
    _check_sum(results)
    _check_product(results)
    _check_comparison(results)
    return results


def _load(path: Path, label: str, name: str) -> Vector | None:
    print(f"Reading {path.name}")
    try:
        vec = read_vector(path)
    except VectorError as exc:
        print(f"Cant read {path.name} (Status: {exc.status.value})")
        return None
    print(format_vector(vec, label))
    return vec


def _save(write: Callable[[Path, object], None], path: Path, value: object, message: str) -> None:
    try:
        write(path, value)
    except (OSError, NotFoundError):
        print(f"Cant create file {path}")
        return
    print(message.format(path=path))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the self checks, then add and multiply the two input vectors."""
    parser = argparse.ArgumentParser(
        prog="vecops",
        description="Check vector operations and apply them to two input files.",
    )
    parser.add_argument("--input-dir", default="input", type=Path)
    parser.add_argument("--output-dir", default="output", type=Path)
    args = parser.parse_args(argv)

    results = run_self_tests(TestResults())
    print(results.summary())

    print("\n\nWorking with input:")
    vec1 = _load(args.input_dir / "vector1.txt", "vector1", "Vector 1")
    if vec1 is not None:
        pass
    vec2 = _load(args.input_dir / "vector2.txt", "vector2", "Vector 2")

    if vec1 is not None and vec2 is not None:
        total: Vector | None = None
        product: Scalar | None = None
        try:
            total = vector_sum(vec1, vec2)
            print(format_vector(total, "Sum"))
        except VectorError as exc:
            print(f"Cant compute vector sum (Status: {exc.status.value})")
        try:
            product = scalar_product(vec1, vec2)
            print(format_scalar(product, "Scalar Product"))
        except VectorError as exc:
            print(f"Cant compute scalar product (Status: {exc.status.value})")

        print("\nWriting results to output directory")
        out = args.output_dir
        _save(write_vector, out / "vector1.txt", vec1, "Copied vector1 to {path}")
        _save(write_vector, out / "vector2.txt", vec2, "Copied vector2 to {path}")
        if total is not None:
            _save(write_vector, out / "vector_sum.txt", total, "Saved vector sum to {path}")
        if product is not None:
            _save(
                write_scalar,
                out / "vector_product.txt",
                product,
                "Saved scalar product to {path}",
            )
    else:
        print("Cant perform operations cz missing input vectors.")

    print("\nPROGRAM COMPLETED")
    print(
        f"Test results: {results.passed_tests} passed, "
        f"{results.failed_tests} failed out of {results.total_tests} total"
    )
    return 0 if results.failed_tests == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())