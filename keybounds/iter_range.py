"""Key ranges usable as iteration bounds over lexicographically sorted keys.

A range is converted into a ``(lower, upper)`` pair of optional byte
strings: the lower bound is inclusive, the upper bound exclusive, and
``None`` means the range is unbounded on that side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, Union, runtime_checkable

Key = Union[bytes, bytearray, memoryview, str]
Bounds = Tuple[Optional[bytes], Optional[bytes]]

__all__ = [
    "Bounds",
    "IterateBounds",
    "Key",
    "KeyRange",
    "PrefixRange",
    "into_bounds",
    "next_prefix",
]


def _to_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"key must be bytes-like or str, not {type(key).__name__}")


def _optional_bytes(key: Optional[Key]) -> Optional[bytes]:
    return None if key is None else _to_bytes(key)


@runtime_checkable
class IterateBounds(Protocol):
    """Anything that can be turned into a lower and upper bound pair."""

    def into_bounds(self) -> Bounds:
        ...


@dataclass(frozen=True)
class KeyRange:
    """A right-open range ``[start, end)``; either end may be left open."""

    start: Optional[bytes] = None
    end: Optional[bytes] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _optional_bytes(self.start))
        object.__setattr__(self, "end", _optional_bytes(self.end))

    def into_bounds(self) -> Bounds:
        """Return the ``(start, end)`` pair."""
        return self.start, self.end


@dataclass(frozen=True)
class PrefixRange:
    """All keys starting with ``prefix``.

    Ordering is assumed to be lexicographic on unsigned bytes, so
    ``PrefixRange(b"a")`` covers the same keys as ``KeyRange(b"a", b"b")``.
    """

    prefix: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix", _to_bytes(self.prefix))

    def into_bounds(self) -> Bounds:
        """Return the bounds; an empty prefix is the full range."""
        if not self.prefix:
            return None, None
        return self.prefix, next_prefix(self.prefix)


def next_prefix(prefix: Key) -> Optional[bytes]:
    """Return the lowest key following every key that starts with ``prefix``.

    For ``b"foo"`` this is ``b"fop"``.  Returns ``None`` when no such key
    exists, i.e. when the prefix is empty or consists only of ``0xff`` bytes.
    """
    stem = _to_bytes(prefix).rstrip(b"\xff")
    if not stem:
        return None
    return stem[:-1] + bytes([stem[-1] + 1])


def into_bounds(bounds: object) -> Bounds:
    """Convert a range description into a ``(lower, upper)`` pair.

    Accepted forms are objects with an ``into_bounds`` method (such as
    :class:`KeyRange` and :class:`PrefixRange`), ``...`` or ``None`` for the
    full range, a ``slice`` without a step, and a ``(lower, upper)`` tuple.
    """
    if bounds is None or bounds is Ellipsis:
        return None, None
    if isinstance(bounds, IterateBounds):
        return bounds.into_bounds()
    if isinstance(bounds, slice):
        if bounds.step is not None:
            raise ValueError("key range slices cannot have a step")
        return _optional_bytes(bounds.start), _optional_bytes(bounds.stop)
    if isinstance(bounds, tuple):
        if len(bounds) != 2:
            raise ValueError("bounds tuple must have exactly two elements")
        lower, upper = bounds
        return _optional_bytes(lower), _optional_bytes(upper)
    raise TypeError(f"cannot use {type(bounds).__name__} as iterate bounds")