"""
Data input panel for Byte Explorer.

Paste box, Analyze / Load Example buttons, decode error label, and a
hex preview that highlights selected bytes (blue) and bytes in the
group being assembled (green).
"""

from html import escape as _html_esc

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel,
    QPushButton, QPlainTextEdit, QTextEdit,
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Signal

from .constants import DARK_COLORS, DRAFT_BG, MONO_FONT_FAMILIES, SELECTED_BG
from .data_model import AnalysisSnapshot
from .example_data import generate_example_text
from .hex_decoder import split_hex_lines

# Rendering thousands of preview lines as HTML stalls the GUI
_PREVIEW_MAX_LINES = 500


class InputPanel(QWidget):
    """Raw hex input with a highlighted preview."""

    analyze_requested = Signal(str)  # emits the raw text

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        mono = QFont()
        mono.setFamilies(MONO_FONT_FAMILIES)
        mono.setPointSize(9)

        grp_input = QGroupBox("Data Input")
        input_layout = QVBoxLayout(grp_input)

        self._edit = QPlainTextEdit()
        self._edit.setFont(mono)
        self._edit.setPlaceholderText("Paste hex data here (one line per sample)")
        self._edit.setMinimumHeight(120)
        input_layout.addWidget(self._edit)

        row = QHBoxLayout()
        self.analyze_button = QPushButton("Analyze Data")
        self.example_button = QPushButton("Load Example")
        row.addWidget(self.analyze_button)
        row.addWidget(self.example_button)
        row.addStretch()
        input_layout.addLayout(row)

        self._lbl_error = QLabel("")
        self._lbl_error.setWordWrap(True)
        self._lbl_error.setStyleSheet(f"color: {DARK_COLORS['red']};")
        input_layout.addWidget(self._lbl_error)

        layout.addWidget(grp_input)

        grp_preview = QGroupBox("Data Preview")
        preview_layout = QVBoxLayout(grp_preview)
        self._preview = QTextEdit()
        self._preview.setReadOnly(True)
        self._preview.setFont(mono)
        self._preview.setLineWrapMode(QTextEdit.LineWrapMode.NoWrap)
        preview_layout.addWidget(self._preview)
        layout.addWidget(grp_preview, 1)

    def _connect_signals(self):
        self.analyze_button.clicked.connect(
            lambda *_: self.analyze_requested.emit(self._edit.toPlainText())
        )
        self.example_button.clicked.connect(lambda *_: self.load_example())

    # ── Public API ───────────────────────────────────────────────────

    def load_text(self, text: str):
        """Fill the box with *text* and analyse it."""
        self._edit.setPlainText(text)
        self.analyze_requested.emit(self._edit.toPlainText())

    def load_example(self):
        self.load_text(generate_example_text())

    def show_error(self, message: str):
        self._lbl_error.setText(message)

    def update_snapshot(self, snapshot: AnalysisSnapshot):
        """Re-render the preview with the snapshot's highlighting."""
        lines = split_hex_lines(self._edit.toPlainText())
        selected = set(snapshot.selected_bytes)
        draft = set(snapshot.grouping_draft)
        dim = DARK_COLORS['fg_dim']

        html_lines = []
        for line_idx, line in enumerate(lines[:_PREVIEW_MAX_LINES]):
            cells = []
            for byte_idx in range((len(line) + 1) // 2):
                pair = _html_esc(line[byte_idx * 2:byte_idx * 2 + 2])
                if byte_idx in draft:
                    cells.append(f'<span style="background:{DRAFT_BG}">{pair}</span>')
                elif byte_idx in selected:
                    cells.append(f'<span style="background:{SELECTED_BG}">{pair}</span>')
                else:
                    cells.append(pair)
            html_lines.append(
                f'<span style="color:{dim}">{line_idx:04d}:</span> ' + ' '.join(cells)
            )
        if len(lines) > _PREVIEW_MAX_LINES:
            html_lines.append(
                f'<span style="color:{dim}">... {len(lines) - _PREVIEW_MAX_LINES} '
                f'more lines</span>'
            )
        self._preview.setHtml('<pre>' + '<br>'.join(html_lines) + '</pre>')
