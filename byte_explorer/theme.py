"""
Theme and stylesheet for Byte Explorer.

Dark Catppuccin Qt stylesheet for the main window, per-button styles
for the byte selector grid, and a helper that pushes a matplotlib
style dict into ``rcParams``.
"""

from .constants import DARK_COLORS, DRAFT_BG, SELECTED_BG


def get_dark_stylesheet() -> str:
    """Generate the dark mode stylesheet."""
    c = DARK_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QGroupBox {{
        border: 1px solid {c['border']};
        border-radius: 6px;
        margin-top: 12px;
        padding-top: 16px;
        font-weight: bold;
        color: {c['accent']};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 12px;
        padding: 0 6px;
    }}
    QPushButton {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 6px 16px;
        min-height: 24px;
    }}
    QPushButton:hover {{
        background-color: {c['selection']};
        border-color: {c['accent']};
    }}
    QPushButton:checked {{
        background-color: {c['accent']};
        color: {c['bg']};
    }}
    QPushButton:disabled {{
        color: {c['fg_dim']};
        background-color: {c['bg']};
    }}
    QTextEdit, QPlainTextEdit, QListWidget {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
    }}
    QTabWidget::pane {{
        border: 1px solid {c['border']};
    }}
    QTabBar::tab {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
        padding: 6px 14px;
        border: 1px solid {c['border']};
        border-bottom: none;
    }}
    QTabBar::tab:selected {{
        background-color: {c['bg_widget']};
        color: {c['accent']};
    }}
    QStatusBar, QMenuBar {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
    }}
    QMenu {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
    }}
    QMenu::item:selected {{
        background-color: {c['selection']};
    }}
    QSplitter::handle {{
        background-color: {c['border']};
    }}
    """


def byte_button_style(*, selected: bool, in_draft: bool, constant: bool) -> str:
    """Stylesheet for one byte-selector button.

    Draft membership wins over selection; constant columns are dimmed.
    """
    c = DARK_COLORS
    if in_draft:
        bg, border = DRAFT_BG, c['green']
    elif selected:
        bg, border = SELECTED_BG, c['accent']
    else:
        bg, border = c['bg_widget'], c['border']
    fg = c['overlay0'] if constant else c['fg_bright']
    weight = 'normal' if constant else 'bold'
    return (f"background-color: {bg}; border: 1px solid {border}; "
            f"color: {fg}; font-weight: {weight}; padding: 2px 4px;")


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        Normally ``PLOT_STYLE_DARK``.
    """
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value
