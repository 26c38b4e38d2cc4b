"""Tests for group_composer."""

import pytest

from byte_explorer.data_model import ByteGroup
from byte_explorer.errors import InvalidColumnReferenceError
from byte_explorer.group_composer import (
    apply_group, compose_value, create_group, recompute_groups, validate_byte_indices,
)
from byte_explorer.hex_decoder import decode_hex


@pytest.fixture
def matrix():
    return decode_hex("1234\nABCD")


def test_big_endian_composition(matrix):
    group = create_group(matrix, [0, 1])
    assert apply_group(group, matrix) == (0x1234, 0xABCD)
    assert apply_group(group, matrix)[0] == 4660


def test_order_matters(matrix):
    group = create_group(matrix, [1, 0])
    assert apply_group(group, matrix)[0] == 0x3412 == 13330


def test_duplicates_allowed(matrix):
    group = create_group(matrix, [0, 0, 1])
    assert apply_group(group, matrix)[0] == 0x121234


def test_wide_groups_do_not_truncate():
    matrix = decode_hex("FF" * 12)
    group = create_group(matrix, list(range(12)))
    assert apply_group(group, matrix)[0] == 2 ** 96 - 1


def test_compose_value_single_byte():
    assert compose_value((7, 9), [1]) == 9


@pytest.mark.parametrize("indices", [[], [2], [-1], [0, 5]])
def test_invalid_indices(matrix, indices):
    with pytest.raises(InvalidColumnReferenceError):
        create_group(matrix, indices)


def test_non_integer_index_rejected():
    with pytest.raises(InvalidColumnReferenceError):
        validate_byte_indices([0, "1"], 2)
    with pytest.raises(InvalidColumnReferenceError):
        validate_byte_indices([True], 2)


def test_default_ids_and_names(matrix):
    first = create_group(matrix, [0])
    assert first.id == 0
    assert first.name == "Group 1"
    second = create_group(matrix, [1], [first])
    assert second.id == 1
    assert second.name == "Group 2"


def test_explicit_id_and_name(matrix):
    group = create_group(matrix, [1, 0], next_id=7, name="length")
    assert group.id == 7
    assert group.name == "length"
    assert group.label == "length [1, 0]"


def test_recompute_groups_against_new_matrix(matrix):
    group = create_group(matrix, [0, 1])
    new_matrix = decode_hex("0001\n0002\n0003")
    assert recompute_groups([group], new_matrix) == {0: (1, 2, 3)}


def test_recompute_fails_for_narrower_matrix():
    group = ByteGroup(id=3, byte_indices=(0, 2), name="Group 4")
    with pytest.raises(InvalidColumnReferenceError) as excinfo:
        recompute_groups([group], decode_hex("0102"))
    assert excinfo.value.byte_index == 2
    assert excinfo.value.width == 2
