"""
Results area for Byte Explorer.

Two chart tabs (value over time, correlation heatmap), each a
matplotlib FigureCanvas with a navigation toolbar, and a text panel
with per-column statistics, entropy, and significant correlations.
"""

from html import escape as _html_esc

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTabWidget, QTextEdit, QGroupBox,
)

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .constants import DARK_COLORS, PLOT_STYLE_DARK, line_color
from .data_model import AnalysisSnapshot
from .theme import apply_plot_style
from .chart_timeseries import render_time_series
from .chart_correlation import render_correlation_matrix


class _ChartTab(QWidget):
    """Single chart tab with figure canvas and toolbar."""

    def __init__(self, figsize=(6, 4), parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._fig = Figure(figsize=figsize)
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        layout.addWidget(NavigationToolbar(self._canvas, self))
        layout.addWidget(self._canvas, 1)

    @property
    def fig(self) -> Figure:
        return self._fig

    def refresh(self):
        self._canvas.draw_idle()


class ResultsPanel(QWidget):
    """Charts on the left, textual analysis on the right."""

    def __init__(self, parent=None):
        super().__init__(parent)
        apply_plot_style(PLOT_STYLE_DARK)
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._tabs = QTabWidget()
        self._tab_series = _ChartTab()
        self._tab_corr = _ChartTab(figsize=(5, 4))
        self._tabs.addTab(self._tab_series, "Value Over Time")
        self._tabs.addTab(self._tab_corr, "Correlation Matrix")
        layout.addWidget(self._tabs, 2)

        grp = QGroupBox("Analysis")
        grp_layout = QVBoxLayout(grp)
        self._text = QTextEdit()
        self._text.setReadOnly(True)
        grp_layout.addWidget(self._text)
        layout.addWidget(grp, 1)

    def update_snapshot(self, snapshot: AnalysisSnapshot):
        render_time_series(self._tab_series.fig, snapshot)
        self._tab_series.refresh()
        render_correlation_matrix(self._tab_corr.fig, snapshot)
        self._tab_corr.refresh()
        self._text.setHtml(_analysis_html(snapshot))


def _analysis_html(snapshot: AnalysisSnapshot) -> str:
    dim = DARK_COLORS['fg_dim']
    table = snapshot.chart_table
    if snapshot.matrix is None or table is None or table.is_empty:
        return (f'<p style="color:{dim}">Statistical analysis will appear here.<br>'
                f'Select bytes to view entropy and correlation data.</p>')

    parts = ['<h4>Statistics</h4>']
    for series_idx, ref in enumerate(table.columns):
        st = snapshot.stats_for(ref)
        parts.append(
            f'<p><b style="color:{line_color(series_idx)}">{_html_esc(table.labels[ref])}</b><br>'
            f'Range: {st.min} - {st.max}<br>'
            f'Mean: {_fmt_moment(st.mean)}<br>StdDev: {_fmt_moment(st.std_dev)}</p>'
        )

    if snapshot.entropy is not None:
        parts.append('<h4>Entropy Analysis</h4>')
        for ref, bits in snapshot.entropy.per_column.items():
            parts.append(f'<tt>{_html_esc(table.labels.get(ref, str(ref)))} Entropy: {bits:.3f} bits</tt><br>')
        if snapshot.entropy.joint_entropy is not None:
            parts.append(f'<p><tt><b>Joint Entropy: '
                         f'{snapshot.entropy.joint_entropy:.3f} bits</b></tt></p>')

    if snapshot.correlations:
        threshold = snapshot.correlation_threshold
        parts.append(f'<h4>Strong Byte Correlations (|r| &gt; {threshold:g})</h4>')
        if snapshot.significant_correlations:
            for edge in snapshot.significant_correlations:
                parts.append(f'<tt>{edge}</tt><br>')
        else:
            parts.append(f'<p style="color:{dim}"><i>No significant correlations found '
                         f'(threshold: ±{threshold:g})</i></p>')
    return ''.join(parts)


def _fmt_moment(value) -> str:
    # Exact ints are kept for groups too wide for a float
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)
