"""
Value-over-time chart for Byte Explorer.

One line per selected byte and per group, plotted against record
index.  Groups are drawn thicker so composed values stand out from
single bytes.
"""

from matplotlib.figure import Figure

from .constants import line_color
from .data_model import AnalysisSnapshot


def render_time_series(
    fig: Figure,
    snapshot: AnalysisSnapshot,
    *,
    title: str = "Value Changes Over Time",
) -> None:
    """Render the snapshot's chart table on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    snapshot : AnalysisSnapshot
        Latest session snapshot.
    title : str
        Axes title.
    """
    fig.clf()
    ax = fig.add_subplot(111)

    table = snapshot.chart_table
    if snapshot.matrix is None or table is None:
        _placeholder(ax, "No Data Available",
                     "Paste your hex data to begin analysis")
        return
    if table.is_empty:
        _placeholder(ax, "No Bytes Selected",
                     "Select bytes to begin analysis")
        return

    x = list(table.index)
    for series_idx, (ref, values) in enumerate(table.columns.items()):
        try:
            y = [float(v) for v in values]
        except OverflowError:
            # Groups wider than a float cannot be drawn
            continue
        ax.plot(
            x, y,
            color=line_color(series_idx),
            linewidth=2.0 if ref.is_group else 1.2,
            label=table.labels[ref],
            zorder=3,
        )

    ax.set_xlabel("Sample Number", fontsize=8)
    ax.set_ylabel("Value", fontsize=8)
    ax.set_title(title, fontsize=10, fontweight='bold')
    ax.grid(linewidth=0.4, alpha=0.5, linestyle='--')
    if len(x) > 1:
        ax.set_xlim(x[0], x[-1])

    ax.legend(
        loc='upper left',
        bbox_to_anchor=(1.01, 1.0),
        fontsize=6,
        framealpha=0.9,
    )
    fig.tight_layout(pad=1.5)


def _placeholder(ax, headline: str, detail: str) -> None:
    ax.set_axis_off()
    ax.text(0.5, 0.55, headline, transform=ax.transAxes,
            ha='center', va='center', fontsize=11, fontweight='bold')
    ax.text(0.5, 0.42, detail, transform=ax.transAxes,
            ha='center', va='center', fontsize=8)
