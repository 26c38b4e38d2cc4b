"""Tests for column_statistics."""

import math

import pytest

from byte_explorer.column_statistics import (
    compute_byte_stats, compute_group_stats, compute_stats, constant_columns,
)
from byte_explorer.errors import EmptyColumnError
from byte_explorer.hex_decoder import decode_hex


def test_population_statistics():
    st = compute_stats([1, 3, 5])
    assert st.min == 1
    assert st.max == 5
    assert st.mean == pytest.approx(3.0)
    assert st.std_dev == pytest.approx(math.sqrt(8 / 3))
    assert not st.is_constant


def test_single_value():
    st = compute_stats([42])
    assert st.min == st.max == 42
    assert st.mean == 42
    assert st.std_dev == 0
    assert st.is_constant


def test_single_record_matrix():
    stats = compute_byte_stats(decode_hex("10FF"))
    for st in stats.values():
        assert st.min == st.max == st.mean
        assert st.std_dev == 0


def test_empty_column_is_invariant_violation():
    with pytest.raises(EmptyColumnError):
        compute_stats([])
    with pytest.raises(AssertionError):
        compute_stats([])


def test_constant_columns():
    stats = compute_byte_stats(decode_hex("AA01\nAA02\nAA03"))
    assert constant_columns(stats) == [0]
    assert stats[0].range_text == "170-170"


def test_wide_group_extrema_stay_exact():
    big = 2 ** 80 + 1
    stats = compute_group_stats({0: (big, big + 2)})
    assert stats[0].min == big
    assert stats[0].max == big + 2
    assert isinstance(stats[0].max, int)


def test_wide_values_differing_in_low_bits_are_not_constant():
    st = compute_stats([2 ** 60, 2 ** 60 + 1])
    assert st.std_dev == pytest.approx(0.5)
    assert not st.is_constant
    assert st.mean == pytest.approx(2 ** 60 + 0.5)


def test_variance_is_exact_for_large_offsets():
    base = 2 ** 100
    st = compute_stats([base + 1, base + 3, base + 5])
    assert st.std_dev == pytest.approx(math.sqrt(8 / 3))


def test_group_wider_than_a_float():
    lo = int.from_bytes(b'\x01' * 130, 'big')
    hi = int.from_bytes(b'\xff' * 130, 'big')
    st = compute_stats([hi, lo])
    assert (st.min, st.max) == (lo, hi)
    assert not st.is_constant
    assert st.mean == (lo + hi) // 2
    assert st.std_dev == (hi - lo) // 2
