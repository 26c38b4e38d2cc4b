"""
Main window for Byte Explorer.

Results (charts + analysis) on top; input panel and byte selector
side by side below.  The window owns the ``AnalysisSession`` and is
the only place that calls its commands: each panel signal maps to one
command, and the resulting snapshot is pushed to every panel.
"""

import warnings

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_NAME, APP_VERSION
from .constants import DEFAULT_CORRELATION_THRESHOLD
from .data_model import AnalysisSnapshot
from .errors import ByteExplorerError
from .gui_input import InputPanel
from .gui_results import ResultsPanel
from .gui_selector import ByteSelectorPanel
from .session import AnalysisSession


class ExplorerMainWindow(QMainWindow):
    """Main window for Byte Explorer."""

    def __init__(self, correlation_threshold: float = DEFAULT_CORRELATION_THRESHOLD):
        super().__init__()
        self._session = AnalysisSession(correlation_threshold=correlation_threshold)

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1200, 800)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._publish(self._session.snapshot)

        self.statusBar().showMessage("Ready: paste hex data to begin")

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)

        vertical = QSplitter(Qt.Orientation.Vertical)
        self._results = ResultsPanel()
        vertical.addWidget(self._results)

        bottom = QSplitter(Qt.Orientation.Horizontal)
        self._input = InputPanel()
        self._selector = ByteSelectorPanel()
        scroll = QScrollArea()
        scroll.setWidget(self._selector)
        scroll.setWidgetResizable(True)
        bottom.addWidget(self._input)
        bottom.addWidget(scroll)
        bottom.setSizes([600, 600])
        vertical.addWidget(bottom)
        vertical.setSizes([450, 350])

        main_layout.addWidget(vertical)

    def _setup_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        examples_menu = menubar.addMenu("Examples")
        act_load_example = QAction("Load Example Capture", self)
        act_load_example.triggered.connect(lambda *_: self._input.load_example())
        examples_menu.addAction(act_load_example)

        help_menu = menubar.addMenu("Help")
        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        self._input.analyze_requested.connect(self._on_analyze)
        self._selector.byte_toggled.connect(
            lambda idx: self._run(self._session.toggle_byte, idx)
        )
        self._selector.grouping_toggled.connect(
            lambda: self._run(self._session.toggle_grouping_mode)
        )
        self._selector.save_group_requested.connect(self._on_save_group)
        self._selector.remove_group_requested.connect(
            lambda gid: self._run(self._session.remove_group, gid)
        )

    # ── Public API ───────────────────────────────────────────────────

    def load_text(self, text: str):
        """Paste *text* into the input box and decode it."""
        self._input.load_text(text)

    # ── Slots ────────────────────────────────────────────────────────

    def _on_analyze(self, text: str):
        """Slot: Analyze Data clicked (or example loaded)."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                snapshot = self._session.decode(text)
            except ByteExplorerError as exc:
                self._input.show_error(str(exc))
                self.statusBar().showMessage("Decode failed, previous data kept")
                return
        self._input.show_error("")
        self._publish(snapshot)
        matrix = snapshot.matrix
        msg = f"Decoded {matrix.n_records} records × {matrix.width} bytes"
        if caught:
            msg += f" ({caught[-1].message})"
        self.statusBar().showMessage(msg)

    def _on_save_group(self):
        group = self._session.commit_group()
        if group is not None:
            self.statusBar().showMessage(f"Created {group.label}", 5000)
        self._publish(self._session.snapshot)

    def _run(self, command, *args):
        try:
            command(*args)
        except (ByteExplorerError, KeyError) as exc:
            QMessageBox.warning(self, "Selection Error", str(exc))
        self._publish(self._session.snapshot)

    def _publish(self, snapshot: AnalysisSnapshot):
        self._results.update_snapshot(snapshot)
        self._selector.update_snapshot(snapshot)
        self._input.update_snapshot(snapshot)

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Structure discovery for binary protocol captures.</p>"
            f"<p>Paste one hex record per line, select byte positions, "
            f"compose multi-byte groups, and inspect statistics, entropy, "
            f"and pairwise correlations.</p>",
        )
