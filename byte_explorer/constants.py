"""
Constants for Byte Explorer.

Centralises analysis defaults, the series colour cycle, font
families, and the dark GUI / matplotlib palettes.
"""

# ── Analysis defaults ────────────────────────────────────────────────────
# Pairs with |r| strictly above this are reported as significant
DEFAULT_CORRELATION_THRESHOLD = 0.7

# ── Byte selector layout ─────────────────────────────────────────────────
SELECTOR_COLUMNS = 8

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]
MONO_FONT_FAMILIES = [
    "Consolas", "DejaVu Sans Mono", "Liberation Mono", "Menlo",
    "Courier New", "monospace",
]

# ── Dark Catppuccin-inspired GUI colour palette ──────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'fg_bright':    '#ffffff',
    'accent':       '#89b4fa',
    'green':        '#a6e3a1',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'overlay0':     '#6c7086',
    'selection':    '#45475a',
}

# ── Selector highlight colours ───────────────────────────────────────────
SELECTED_BG = '#1e3a8a'    # byte in the ad-hoc selection (blue)
DRAFT_BG = '#14532d'       # byte in the group being assembled (green)

# ── Series colour cycle (selected bytes first, then groups) ──────────────
LINE_COLORS = [
    '#2563eb', '#16a34a', '#dc2626', '#9333ea',
    '#ea580c', '#0891b2', '#4f46e5', '#be185d',
]


def line_color(index: int) -> str:
    """Colour of the *index*-th chart series (wraps around)."""
    if index < 0:
        raise ValueError(f"line_color requires non-negative index, got {index}")
    return LINE_COLORS[index % len(LINE_COLORS)]


# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_widget'],
    'axes.edgecolor':    DARK_COLORS['border'],
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg_dim'],
    'ytick.color':       DARK_COLORS['fg_dim'],
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'legend.fontsize':   6.5,
    'grid.color':        DARK_COLORS['border'],
    'legend.facecolor':  DARK_COLORS['bg_widget'],
    'legend.edgecolor':  DARK_COLORS['border'],
}
