import pytest
from hypothesis import given
from hypothesis import strategies as st

from keybounds.iter_range import KeyRange, PrefixRange, into_bounds, next_prefix


@pytest.mark.parametrize(
    "start, end",
    [
        (b"\xff", None),
        (b"\xff\xff\xff\xff", None),
        (b"a", b"b"),
        (b"a\xff\xff\xff", b"b"),
    ],
)
def test_prefix_range(start, end):
    assert PrefixRange(start).into_bounds() == (start, end)


def test_empty_prefix_is_full_range():
    assert PrefixRange(b"").into_bounds() == (None, None)


def test_next_prefix_example():
    assert next_prefix(b"foo") == b"fop"


def test_next_prefix_empty():
    assert next_prefix(b"") is None


def test_prefix_range_accepts_str():
    assert PrefixRange("a1").into_bounds() == (b"a1", b"a2")


def test_key_range_bounds():
    assert KeyRange(b"a1", b"b1").into_bounds() == (b"a1", b"b1")
    assert KeyRange(start=b"b1").into_bounds() == (b"b1", None)
    assert KeyRange(end=b"b1").into_bounds() == (None, b"b1")
    assert KeyRange().into_bounds() == (None, None)


def test_key_range_rejects_non_key():
    with pytest.raises(TypeError):
        KeyRange(start=5)


@pytest.mark.parametrize(
    "bounds, expected",
    [
        (..., (None, None)),
        (None, (None, None)),
        (slice(None), (None, None)),
        (slice(b"b1", None), (b"b1", None)),
        (slice(None, b"b1"), (None, b"b1")),
        (slice("a1", "b1"), (b"a1", b"b1")),
        ((b"a", None), (b"a", None)),
        (PrefixRange(b"a\xff"), (b"a\xff", b"b")),
        (KeyRange(b"x", b"y"), (b"x", b"y")),
    ],
)
def test_into_bounds_forms(bounds, expected):
    assert into_bounds(bounds) == expected


def test_into_bounds_rejects_step():
    with pytest.raises(ValueError):
        into_bounds(slice(b"a", b"b", 2))


def test_into_bounds_rejects_bad_tuple():
    with pytest.raises(ValueError):
        into_bounds((b"a", b"b", b"c"))


def test_into_bounds_rejects_unknown_type():
    with pytest.raises(TypeError):
        into_bounds(42)


@given(st.binary(min_size=1), st.binary())
def test_prefixed_keys_fall_inside_bounds(prefix, suffix):
    lower, upper = PrefixRange(prefix).into_bounds()
    key = prefix + suffix
    assert lower <= key
    assert upper is None or key < upper


@given(st.binary(min_size=1), st.binary(min_size=1))
def test_non_prefixed_keys_fall_outside_bounds(prefix, key):
    lower, upper = PrefixRange(prefix).into_bounds()
    inside = lower <= key and (upper is None or key < upper)
    assert inside == key.startswith(prefix)


@given(st.binary())
def test_next_prefix_is_none_only_for_all_ff(prefix):
    result = next_prefix(prefix)
    assert (result is None) == all(b == 0xFF for b in prefix)
    if result is not None:
        assert result > prefix
        assert len(result) <= len(prefix)