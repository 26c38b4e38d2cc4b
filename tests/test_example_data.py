"""Tests for example_data."""

import pytest

from byte_explorer.example_data import (
    EXAMPLE_WIDTH, SYNC_WORD, generate_example_records, generate_example_text,
)
from byte_explorer.hex_decoder import decode_hex


def test_records_are_fixed_width_with_sync_word():
    records = generate_example_records(10)
    assert len(records) == 10
    for rec in records:
        assert len(rec) == EXAMPLE_WIDTH
        assert tuple(rec[:2]) == SYNC_WORD


def test_checksum_byte():
    for rec in generate_example_records(20):
        checksum = 0
        for b in rec[2:8]:
            checksum ^= b
        assert rec[8] == checksum


def test_reproducible():
    assert generate_example_text(16, seed=1) == generate_example_text(16, seed=1)
    assert generate_example_text(16, seed=1) != generate_example_text(16, seed=2)


def test_text_decodes():
    matrix = decode_hex(generate_example_text(12))
    assert matrix.n_records == 12
    assert matrix.column(2) == tuple(range(12))


def test_rejects_empty_request():
    with pytest.raises(ValueError):
        generate_example_records(0)
