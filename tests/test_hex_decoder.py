"""Tests for hex_decoder."""

import pytest

from byte_explorer.errors import EmptyInputError, MalformedInputError
from byte_explorer.example_data import generate_example_text
from byte_explorer.hex_decoder import decode_hex, split_hex_lines


def test_decodes_basic_matrix():
    matrix = decode_hex("0102\n0304\n0506\n")
    assert matrix.n_records == 3
    assert matrix.width == 2
    assert matrix.column(0) == (1, 3, 5)
    assert matrix.column(1) == (2, 4, 6)
    assert [rec.index for rec in matrix.records] == [0, 1, 2]


def test_every_record_has_width_values_in_byte_range():
    matrix = decode_hex(generate_example_text(40))
    for rec in matrix.records:
        assert len(rec.values) == matrix.width
        assert all(0 <= v <= 255 for v in rec.values)


def test_decode_is_pure():
    text = generate_example_text(20)
    assert decode_hex(text) == decode_hex(text)


def test_case_insensitive_hex():
    assert decode_hex("aBfF").records[0].values == (0xAB, 0xFF)


def test_whitespace_and_crlf_are_trimmed():
    matrix = decode_hex("\n\n  0A0B \r\n0C0D\r\n\n")
    assert matrix.n_records == 2
    assert matrix.records[1].values == (0x0C, 0x0D)


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_empty_input(text):
    with pytest.raises(EmptyInputError):
        decode_hex(text)


def test_single_non_hex_character_anywhere_fails():
    good = "A1B2C3\nD4E5F6\n071829"
    decode_hex(good)
    for pos, ch in enumerate(good):
        if ch == '\n':
            continue
        bad = good[:pos] + 'G' + good[pos + 1:]
        with pytest.raises(MalformedInputError):
            decode_hex(bad)


def test_mismatched_line_lengths():
    with pytest.raises(MalformedInputError) as excinfo:
        decode_hex("AABB\nAA")
    assert excinfo.value.line_number == 2


def test_blank_line_in_middle_is_malformed():
    with pytest.raises(MalformedInputError):
        decode_hex("AABB\n\nCCDD")


def test_odd_length_lines_are_rejected():
    with pytest.raises(MalformedInputError, match="odd"):
        decode_hex("ABC\nDEF")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode_hex("zz")


def test_split_hex_lines():
    assert split_hex_lines("  ab\n cd \n") == ["ab", "cd"]
    assert split_hex_lines("   ") == []
