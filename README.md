# keybounds

Compute lower and upper iteration bounds for scans over byte-string keys
kept in lexicographic order (unsigned byte comparison), as used by ordered
key-value stores.

Every bound pair is a tuple `(lower, upper)` where each element is either
`bytes` or `None` (unbounded). The lower bound is inclusive and the upper
bound exclusive.

Everything lives in the module `keybounds.iter_range`. Keys may be given as
`bytes`, `bytearray`, `memoryview` or `str` (encoded as UTF-8); they are
always returned as `bytes`. Any other key type raises `TypeError`.

## Installation

```
pip install keybounds
```

## Usage

### Explicit ranges

`KeyRange` is a frozen dataclass describing the right-open range
`[start, end)`; either end may be left as `None`.

```python
from keybounds.iter_range import KeyRange

KeyRange(b"a1", b"b1").into_bounds()   # (b"a1", b"b1")
KeyRange(start=b"b1").into_bounds()    # (b"b1", None)
KeyRange(end="b1").into_bounds()       # (None, b"b1")
KeyRange().into_bounds()               # (None, None)
```

### Prefix ranges

`PrefixRange` is a frozen dataclass covering every key that starts with
its `prefix`:

```python
from keybounds.iter_range import PrefixRange

PrefixRange(b"a").into_bounds()              # (b"a", b"b")
PrefixRange(b"a\xff\xff\xff").into_bounds()  # (b"a\xff\xff\xff", b"b")
PrefixRange(b"\xff").into_bounds()           # (b"\xff", None)
PrefixRange(b"").into_bounds()               # (None, None)
```

### Prefix successor

`next_prefix` returns the lowest key that follows every key with the given
prefix, or `None` when there is none (an empty prefix, or one made only of
`0xff` bytes):

```python
from keybounds.iter_range import next_prefix

next_prefix(b"foo")       # b"fop"
next_prefix(b"a\xff")     # b"b"
next_prefix(b"\xff\xff")  # None
```

### Generic conversion

`into_bounds` turns any supported range description into a bound pair:

- `None` or `...` — the full range, `(None, None)`;
- any object with an `into_bounds()` method, such as `KeyRange` and
  `PrefixRange` (the `IterateBounds` protocol);
- a `slice` without a step, e.g. `slice(b"a1", b"b1")` or
  `slice(None, b"b1")`;
- a two-element `(lower, upper)` tuple.

```python
from keybounds.iter_range import PrefixRange, into_bounds

into_bounds(slice(b"a1", None))    # (b"a1", None)
into_bounds((None, "b1"))          # (None, b"b1")
into_bounds(PrefixRange(b"a1"))    # (b"a1", b"a2")
into_bounds(...)                   # (None, None)
```

A slice with a step or a tuple of the wrong length raises `ValueError`;
any other type raises `TypeError`.

The module also exports the type aliases `Key` (accepted key types) and
`Bounds` (the returned pair).

## What this package does not do

It only computes bounds. It does not store keys, open databases or iterate
over data; pass the resulting bounds to whatever ordered store you use.

## Running the tests

```
pip install -e ".[test]"
pytest
```