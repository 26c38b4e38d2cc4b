"""
Pairwise correlation heatmap for Byte Explorer.

Selected byte × selected byte grid coloured by Pearson coefficient
on a blue-white-red scale:
  - Red:  strong positive (r → +1)
  - Blue: strong negative (r → -1)
Cells whose ``|r|`` exceeds the session threshold are annotated in
bold.
"""

from matplotlib.figure import Figure

from .data_model import AnalysisSnapshot
from .information import correlation_matrix


def render_correlation_matrix(
    fig: Figure,
    snapshot: AnalysisSnapshot,
) -> None:
    """Render the correlation heatmap of the selected bytes on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    snapshot : AnalysisSnapshot
        Latest session snapshot.
    """
    fig.clf()
    ax = fig.add_subplot(111)

    selected = list(snapshot.selected_bytes)
    if snapshot.matrix is None or len(selected) < 2:
        ax.set_axis_off()
        ax.text(0.5, 0.5, 'Select at least two bytes to see correlations',
                transform=ax.transAxes, ha='center', va='center', fontsize=9)
        return

    coeffs = correlation_matrix(snapshot.matrix, selected)
    threshold = snapshot.correlation_threshold
    n = len(selected)

    im = ax.imshow(coeffs, cmap='bwr', vmin=-1.0, vmax=1.0,
                   aspect='equal', origin='upper')

    # ── Cell annotations ─────────────────────────────────────────────
    for i in range(n):
        for j in range(n):
            r = coeffs[i, j]
            strong = i != j and abs(r) > threshold
            ax.text(
                j, i, f"{r:.2f}",
                ha='center', va='center',
                fontsize=6, color='#1a1a2e',
                fontweight='bold' if strong else 'normal',
            )

    # ── Axis labels ──────────────────────────────────────────────────
    labels = [f"B{b}" for b in selected]
    ax.set_xticks(range(n))
    ax.set_xticklabels(labels, fontsize=6, rotation=45, ha='right')
    ax.set_yticks(range(n))
    ax.set_yticklabels(labels, fontsize=6)
    ax.set_title(
        f"Byte Correlations (bold: |r| > {threshold:g})",
        fontsize=10, fontweight='bold',
    )

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.ax.tick_params(labelsize=6)
    cbar.set_label("Pearson r", fontsize=7)

    fig.tight_layout(pad=1.5)
