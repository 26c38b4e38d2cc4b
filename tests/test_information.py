"""Tests for information (entropy and correlation)."""

import math

import numpy as np
import pytest

from byte_explorer.data_model import ColumnRef
from byte_explorer.hex_decoder import decode_hex
from byte_explorer.information import (
    analyze_entropy, correlate, correlation_matrix, correlation_pairs,
    entropy, joint_entropy, significant_edges,
)


def test_entropy_of_constant_column_is_zero():
    assert entropy([7, 7, 7, 7]) == 0


def test_entropy_of_distinct_values_is_log2_n():
    assert entropy(range(10)) == pytest.approx(math.log2(10))


def test_entropy_of_fair_coin():
    assert entropy([0, 1, 0, 1]) == pytest.approx(1.0)


def test_entropy_of_empty_column():
    assert entropy([]) == 0


def test_joint_entropy_of_tuples():
    a = [0, 0, 1, 1]
    b = [0, 1, 0, 1]
    assert joint_entropy([a, b]) == pytest.approx(2.0)
    # Identical columns add no information
    assert joint_entropy([a, a]) == pytest.approx(1.0)


def test_joint_entropy_needs_two_columns():
    with pytest.raises(ValueError):
        joint_entropy([[1, 2, 3]])


def test_joint_entropy_length_mismatch():
    with pytest.raises(ValueError):
        joint_entropy([[1, 2], [1]])


def test_self_correlation_is_one():
    col = [3, 9, 1, 200, 45]
    assert correlate(col, list(col)) == pytest.approx(1.0)


def test_constant_column_correlation_is_zero():
    assert correlate([1, 2, 3], [5, 5, 5]) == 0.0


def test_negative_correlation():
    assert correlate([1, 2, 3], [30, 20, 10]) == pytest.approx(-1.0)


def test_correlate_matches_numpy():
    rng = np.random.default_rng(0)
    a = rng.integers(0, 256, 50)
    b = (a // 2 + rng.integers(0, 20, 50))
    assert correlate(a.tolist(), b.tolist()) == pytest.approx(np.corrcoef(a, b)[0, 1])


def test_correlation_pairs_are_unordered_and_sorted():
    matrix = decode_hex("010203\n020406\n030609")
    edges = correlation_pairs(matrix, [2, 0, 1])
    assert [(e.column_a.index, e.column_b.index) for e in edges] == [(0, 1), (0, 2), (1, 2)]
    assert all(e.coefficient == pytest.approx(1.0) for e in edges)


def test_correlation_pairs_need_two_columns():
    matrix = decode_hex("0102\n0304")
    assert correlation_pairs(matrix, [0]) == []


def test_significance_filter_is_strict():
    matrix = decode_hex("0102\n0304")
    edges = correlation_pairs(matrix, [0, 1])
    assert significant_edges(edges, threshold=0.7) == edges
    edge = edges[0]
    at_threshold = type(edge)(edge.column_a, edge.column_b, 0.7)
    below = type(edge)(edge.column_a, edge.column_b, -0.5)
    strong_negative = type(edge)(edge.column_a, edge.column_b, -0.9)
    assert significant_edges([at_threshold, below, strong_negative]) == [strong_negative]


def test_correlation_matrix():
    matrix = decode_hex("0110AA\n0220AA\n0330AA")
    coeffs = correlation_matrix(matrix, [0, 1, 2])
    assert coeffs.shape == (3, 3)
    assert coeffs[0, 1] == pytest.approx(1.0)
    assert coeffs[1, 0] == pytest.approx(1.0)
    assert coeffs[2, 2] == 0.0
    assert coeffs[0, 2] == 0.0


def test_analyze_entropy():
    matrix = decode_hex("0100\n0200\n0300\n0400")
    result = analyze_entropy(matrix, [1, 0], {5: (1, 1, 2, 2)})
    assert result.per_column[ColumnRef.byte(0)] == pytest.approx(2.0)
    assert result.per_column[ColumnRef.byte(1)] == 0
    assert result.per_column[ColumnRef.group(5)] == pytest.approx(1.0)
    assert result.joint_entropy == pytest.approx(2.0)


def test_analyze_entropy_single_selection_has_no_joint():
    matrix = decode_hex("0100\n0200")
    assert analyze_entropy(matrix, [0]).joint_entropy is None
