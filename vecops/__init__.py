"""Typed numeric vectors: element-wise sums, scalar products and file I/O."""

__version__ = "0.1.0"

__all__ = ["status", "scalars", "vector", "fileio", "cli"]