"""Tests for the command-line entry point (no Qt needed)."""

import pytest

from byte_explorer import APP_VERSION
from byte_explorer.__main__ import build_parser, main


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--version'])
    assert exc.value.code == 0
    assert APP_VERSION in capsys.readouterr().out


def test_threshold_defaults_and_bounds():
    assert build_parser().parse_args([]).threshold == 0.7
    assert build_parser().parse_args(['--threshold', '0.5']).threshold == 0.5
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--threshold', '1.5'])


def test_summary_of_capture_file(tmp_path, capsys):
    capture = tmp_path / "capture.hex"
    capture.write_text("0102\n0304\n0506\n")
    assert main([str(capture), '--summary']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "3 records x 2 bytes"
    assert lines[1].startswith("Byte   0")
    assert "mean    3.00" in lines[1]
    assert lines[-1] == "Byte 0 ↔ Byte 1: 1.000"


def test_summary_reports_decode_errors(tmp_path, capsys):
    capture = tmp_path / "bad.hex"
    capture.write_text("AABB\nAA\n")
    assert main([str(capture), '--summary']) == 1
    assert "Line 2" in capsys.readouterr().err


def test_summary_of_example_marks_constant_bytes(capsys):
    assert main(['--example', '--summary']) == 0
    out = capsys.readouterr().out
    assert out.startswith("64 records x 9 bytes")
    assert "constant" in out


def test_summary_needs_input():
    with pytest.raises(SystemExit) as exc:
        main(['--summary'])
    assert exc.value.code == 2


def test_unreadable_capture_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.hex"), '--summary'])
    assert exc.value.code == 2
