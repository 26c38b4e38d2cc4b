"""Smoke tests for the matplotlib renderers (no Qt needed)."""

import matplotlib
matplotlib.use('Agg')
from matplotlib.figure import Figure

from byte_explorer.chart_correlation import render_correlation_matrix
from byte_explorer.chart_timeseries import render_time_series
from byte_explorer.session import AnalysisSession


def _texts(fig):
    return [t.get_text() for ax in fig.get_axes() for t in ax.texts]


def test_time_series_without_data():
    fig = Figure()
    render_time_series(fig, AnalysisSession().snapshot)
    assert "No Data Available" in _texts(fig)


def test_time_series_without_selection():
    s = AnalysisSession()
    fig = Figure()
    render_time_series(fig, s.decode("0102\n0304"))
    assert "No Bytes Selected" in _texts(fig)


def test_time_series_one_line_per_series():
    s = AnalysisSession()
    s.decode("0102\n0304\n0506")
    s.toggle_byte(0)
    s.add_group([0, 1])
    fig = Figure()
    render_time_series(fig, s.snapshot)
    ax = fig.get_axes()[0]
    assert len(ax.lines) == 2
    labels = [line.get_label() for line in ax.lines]
    assert labels == ["Byte 0", "Group 1 [0, 1]"]
    assert list(ax.lines[1].get_ydata()) == [0x0102, 0x0304, 0x0506]


def test_correlation_matrix_needs_two_bytes():
    s = AnalysisSession()
    s.decode("0102\n0304")
    fig = Figure()
    render_correlation_matrix(fig, s.toggle_byte(0))
    assert any("at least two" in t for t in _texts(fig))


def test_correlation_matrix_annotates_cells():
    s = AnalysisSession()
    s.decode("010203\n020406\n030609")
    for idx in range(3):
        s.toggle_byte(idx)
    fig = Figure()
    render_correlation_matrix(fig, s.snapshot)
    texts = _texts(fig)
    assert len(texts) == 9
    assert texts.count("1.00") == 9


def test_time_series_skips_groups_wider_than_a_float():
    s = AnalysisSession()
    s.decode("FF01\n0102")
    s.toggle_byte(1)
    s.add_group([0] * 130)
    fig = Figure()
    render_time_series(fig, s.snapshot)
    ax = fig.get_axes()[0]
    assert [line.get_label() for line in ax.lines] == ["Byte 1"]
