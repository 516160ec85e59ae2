"""Iteration bounds for lexicographically ordered byte-string keys."""

__version__ = "0.1.0"
__all__ = ["iter_range"]