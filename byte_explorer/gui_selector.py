"""
Byte position selector for Byte Explorer.

A grid of one button per byte column (label: position and min-max
range; constant columns dimmed), the Create Group / Cancel Grouping /
Save Group controls, and the list of defined groups with Remove
buttons.  The panel only emits intents; the main window routes them
through the ``AnalysisSession`` and pushes the new snapshot back.
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox,
    QLabel, QPushButton,
)
from PySide6.QtCore import Signal

from .constants import DARK_COLORS, SELECTOR_COLUMNS
from .data_model import AnalysisSnapshot
from .theme import byte_button_style


class ByteSelectorPanel(QWidget):
    """Byte buttons, grouping controls, and the group list."""

    byte_toggled = Signal(int)
    grouping_toggled = Signal()
    save_group_requested = Signal()
    remove_group_requested = Signal(int)  # group id

    def __init__(self, parent=None):
        super().__init__(parent)
        self._byte_buttons = []
        self._setup_ui()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)

        grp = QGroupBox("Byte Position Selector")
        grp_layout = QVBoxLayout(grp)

        controls = QHBoxLayout()
        self._btn_grouping = QPushButton("Create Group")
        self._btn_grouping.setCheckable(True)
        self._btn_grouping.clicked.connect(lambda *_: self.grouping_toggled.emit())
        self._btn_save = QPushButton("Save Group")
        self._btn_save.setVisible(False)
        self._btn_save.clicked.connect(lambda *_: self.save_group_requested.emit())
        self._lbl_draft = QLabel("")
        self._lbl_draft.setStyleSheet(f"color: {DARK_COLORS['green']};")
        controls.addWidget(self._btn_grouping)
        controls.addWidget(self._btn_save)
        controls.addWidget(self._lbl_draft, 1)
        grp_layout.addLayout(controls)

        self._grid_host = QWidget()
        self._grid = QGridLayout(self._grid_host)
        self._grid.setSpacing(4)
        grp_layout.addWidget(self._grid_host)

        self._groups_box = QGroupBox("Byte Groups")
        self._groups_layout = QVBoxLayout(self._groups_box)
        self._groups_box.setVisible(False)
        grp_layout.addWidget(self._groups_box)

        layout.addWidget(grp)
        layout.addStretch()

    # ── Snapshot rendering ───────────────────────────────────────────

    def update_snapshot(self, snapshot: AnalysisSnapshot):
        self._sync_buttons(snapshot.width)

        selected = set(snapshot.selected_bytes)
        draft = set(snapshot.grouping_draft)
        for idx, btn in enumerate(self._byte_buttons):
            stats = snapshot.byte_stats.get(idx)
            range_text = stats.range_text if stats is not None else 'n/a'
            btn.setText(f"{idx:02d}\n{range_text}")
            btn.setStyleSheet(byte_button_style(
                selected=idx in selected,
                in_draft=idx in draft,
                constant=stats is not None and stats.is_constant,
            ))

        self._btn_grouping.setEnabled(snapshot.matrix is not None)
        self._btn_grouping.setChecked(snapshot.grouping_mode)
        self._btn_grouping.setText(
            "Cancel Grouping" if snapshot.grouping_mode else "Create Group"
        )
        self._btn_save.setVisible(snapshot.grouping_mode and bool(snapshot.grouping_draft))
        self._lbl_draft.setText(
            f"Draft: [{', '.join(str(b) for b in snapshot.grouping_draft)}]"
            if snapshot.grouping_mode else ""
        )

        self._rebuild_group_list(snapshot)

    def _sync_buttons(self, width: int):
        if len(self._byte_buttons) == width:
            return
        for btn in self._byte_buttons:
            self._grid.removeWidget(btn)
            btn.deleteLater()
        self._byte_buttons = []
        for idx in range(width):
            btn = QPushButton()
            btn.setMinimumHeight(40)
            btn.clicked.connect(lambda *_, i=idx: self.byte_toggled.emit(i))
            self._grid.addWidget(btn, idx // SELECTOR_COLUMNS, idx % SELECTOR_COLUMNS)
            self._byte_buttons.append(btn)

    def _rebuild_group_list(self, snapshot: AnalysisSnapshot):
        while self._groups_layout.count():
            item = self._groups_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        for group in snapshot.groups:
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)
            stats = snapshot.group_stats.get(group.id)
            text = group.label
            if stats is not None:
                text += f"   Range: {stats.range_text}"
            row_layout.addWidget(QLabel(text), 1)
            btn = QPushButton("Remove")
            btn.setStyleSheet(f"color: {DARK_COLORS['red']};")
            btn.clicked.connect(lambda *_, gid=group.id: self.remove_group_requested.emit(gid))
            row_layout.addWidget(btn)
            self._groups_layout.addWidget(row)

        self._groups_box.setVisible(bool(snapshot.groups))
