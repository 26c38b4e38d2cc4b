"""
Analysis session: the state machine behind the Byte Explorer window.

Holds the current matrix, the ad-hoc byte selection, the grouping
draft, and the defined groups.  Every command mutates only this
object's private fields and then calls ``recompute()``, which derives
all statistics from scratch and publishes a new immutable
``AnalysisSnapshot``.  Readers hold on to snapshots, never to the
session's internals.

Re-decode policy
----------------
- Groups that reference a byte beyond the new width reject the decode
  (``InvalidColumnReferenceError``); nothing changes.
- Selected / draft bytes beyond the new width are dropped with a
  warning.
"""

import numbers
import warnings
from typing import Dict, List, Optional, Sequence, Tuple

from .column_statistics import compute_byte_stats, compute_group_stats
from .constants import DEFAULT_CORRELATION_THRESHOLD
from .data_model import (
    AnalysisSnapshot, ByteGroup, ByteMatrix, ChartTable, ColumnRef, SessionState,
)
from .errors import ByteExplorerError, InvalidColumnReferenceError
from .group_composer import apply_group, create_group, recompute_groups
from .hex_decoder import decode_hex
from .information import analyze_entropy, correlation_pairs, significant_edges


class AnalysisSession:
    """Long-lived, externally driven analysis state.

    Parameters
    ----------
    correlation_threshold : float
        ``|r|`` above which a byte pair is reported as significant.
    """

    def __init__(self, correlation_threshold: float = DEFAULT_CORRELATION_THRESHOLD):
        _check_threshold(correlation_threshold)
        self._threshold = float(correlation_threshold)
        self._matrix: Optional[ByteMatrix] = None
        self._groups: List[ByteGroup] = []
        self._group_values: Dict[int, Tuple[int, ...]] = {}
        self._selected: set = set()
        self._grouping_mode = False
        self._draft: List[int] = []
        self._next_group_id = 0
        self._version = 0
        self.last_error: str = ''
        self._snapshot = AnalysisSnapshot(
            version=0, state=SessionState.EMPTY,
            correlation_threshold=self._threshold,
        )

    # ── Read-only views ──────────────────────────────────────────────

    @property
    def snapshot(self) -> AnalysisSnapshot:
        return self._snapshot

    @property
    def matrix(self) -> Optional[ByteMatrix]:
        return self._matrix

    @property
    def groups(self) -> Tuple[ByteGroup, ...]:
        return tuple(self._groups)

    @property
    def selected_bytes(self) -> Tuple[int, ...]:
        return tuple(sorted(self._selected))

    @property
    def grouping_mode(self) -> bool:
        return self._grouping_mode

    @property
    def grouping_draft(self) -> Tuple[int, ...]:
        return tuple(self._draft)

    @property
    def correlation_threshold(self) -> float:
        return self._threshold

    @property
    def state(self) -> SessionState:
        if self._matrix is None:
            return SessionState.EMPTY
        if self._selected or self._groups:
            return SessionState.ANALYZING
        return SessionState.DECODED

    # ── Data commands ────────────────────────────────────────────────

    def decode(self, text: str) -> AnalysisSnapshot:
        """Decode *text* and replace the current matrix.

        On any error the previous matrix, groups, selection, and
        snapshot stay as they were, ``last_error`` holds the message,
        and the exception propagates.
        """
        try:
            matrix = decode_hex(text)
            group_values = recompute_groups(self._groups, matrix)
        except ByteExplorerError as exc:
            self.last_error = str(exc)
            raise

        stale = sorted(i for i in self._selected if i >= matrix.width)
        stale_draft = [i for i in self._draft if i >= matrix.width]
        if stale or stale_draft:
            warnings.warn(
                f"Decoded records are {matrix.width} bytes wide; dropping "
                f"selected bytes {stale} and draft bytes {stale_draft}.",
                stacklevel=2,
            )
            self._selected.difference_update(stale)
            self._draft = [i for i in self._draft if i < matrix.width]

        self._matrix = matrix
        self._group_values = group_values
        self.last_error = ''
        return self.recompute()

    def set_correlation_threshold(self, value: float) -> AnalysisSnapshot:
        _check_threshold(value)
        self._threshold = float(value)
        return self.recompute()

    # ── Selection commands ───────────────────────────────────────────

    def toggle_byte(self, byte_index: int) -> AnalysisSnapshot:
        """Toggle *byte_index* in the draft (grouping mode) or the selection."""
        if self._grouping_mode:
            return self.toggle_draft_byte(byte_index)
        byte_index = self._check_byte(byte_index)
        if byte_index in self._selected:
            self._selected.discard(byte_index)
        else:
            self._selected.add(byte_index)
        return self.recompute()

    def select_byte(self, byte_index: int) -> AnalysisSnapshot:
        byte_index = self._check_byte(byte_index)
        self._selected.add(byte_index)
        return self.recompute()

    def deselect_byte(self, byte_index: int) -> AnalysisSnapshot:
        self._selected.discard(byte_index)
        return self.recompute()

    def clear_selection(self) -> AnalysisSnapshot:
        self._selected.clear()
        return self.recompute()

    # ── Grouping commands ────────────────────────────────────────────

    def enter_grouping_mode(self) -> AnalysisSnapshot:
        self._grouping_mode = True
        return self.recompute()

    def exit_grouping_mode(self) -> AnalysisSnapshot:
        """Leave grouping mode, discarding the draft."""
        self._grouping_mode = False
        self._draft = []
        return self.recompute()

    def toggle_grouping_mode(self) -> AnalysisSnapshot:
        if self._grouping_mode:
            return self.exit_grouping_mode()
        return self.enter_grouping_mode()

    def toggle_draft_byte(self, byte_index: int) -> AnalysisSnapshot:
        """Add *byte_index* to the end of the draft, or remove it."""
        byte_index = self._check_byte(byte_index)
        if byte_index in self._draft:
            self._draft.remove(byte_index)
        else:
            self._draft.append(byte_index)
        return self.recompute()

    def commit_group(self, name: Optional[str] = None) -> Optional[ByteGroup]:
        """Turn the draft into a group and leave grouping mode.

        Returns ``None`` (and changes nothing) when the draft is empty.
        """
        if not self._draft:
            return None
        group = self._add_group(self._draft, name=name)
        self._draft = []
        self._grouping_mode = False
        self.recompute()
        return group

    def add_group(self, byte_indices: Sequence[int], name: Optional[str] = None) -> ByteGroup:
        """Create a group directly from *byte_indices* (duplicates allowed)."""
        group = self._add_group(byte_indices, name=name)
        self.recompute()
        return group

    def _add_group(self, byte_indices: Sequence[int], name: Optional[str]) -> ByteGroup:
        if self._matrix is None:
            raise InvalidColumnReferenceError("No data decoded yet.", width=0)
        group = create_group(
            self._matrix, byte_indices, self._groups,
            name=name, next_id=self._next_group_id,
        )
        self._next_group_id = group.id + 1
        self._groups.append(group)
        self._group_values[group.id] = apply_group(group, self._matrix)
        return group

    def remove_group(self, group_id: int) -> AnalysisSnapshot:
        """Delete a group and its derived column.  Ids are not reused."""
        for pos, group in enumerate(self._groups):
            if group.id == group_id:
                del self._groups[pos]
                self._group_values.pop(group_id, None)
                return self.recompute()
        raise KeyError(f"No group with id {group_id}")

    # ── Derivation ───────────────────────────────────────────────────

    def recompute(self) -> AnalysisSnapshot:
        """Re-derive statistics, entropy, and correlations into a new snapshot."""
        self._version += 1
        matrix = self._matrix
        if matrix is None:
            self._snapshot = AnalysisSnapshot(
                version=self._version,
                state=SessionState.EMPTY,
                grouping_mode=self._grouping_mode,
                grouping_draft=tuple(self._draft),
                correlation_threshold=self._threshold,
            )
            return self._snapshot

        selected = self.selected_bytes
        group_values = {g.id: self._group_values[g.id] for g in self._groups}
        edges = correlation_pairs(matrix, selected)

        self._snapshot = AnalysisSnapshot(
            version=self._version,
            state=self.state,
            matrix=matrix,
            groups=tuple(self._groups),
            group_values=group_values,
            byte_stats=compute_byte_stats(matrix),
            group_stats=compute_group_stats(group_values),
            selected_bytes=selected,
            grouping_mode=self._grouping_mode,
            grouping_draft=tuple(self._draft),
            entropy=analyze_entropy(matrix, selected, group_values),
            correlations=edges,
            significant_correlations=significant_edges(edges, self._threshold),
            correlation_threshold=self._threshold,
            chart_table=_build_chart_table(matrix, selected, self._groups, group_values),
        )
        return self._snapshot

    def _check_byte(self, byte_index: int) -> int:
        width = self._matrix.width if self._matrix is not None else 0
        if isinstance(byte_index, bool) or not isinstance(byte_index, numbers.Integral) \
                or not 0 <= byte_index < width:
            raise InvalidColumnReferenceError(
                f"Byte index {byte_index!r} is outside 0-{width - 1}."
                if width else "No data decoded yet.",
                byte_index=byte_index, width=width,
            )
        return int(byte_index)


def _check_threshold(value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Correlation threshold must be in [0, 1], got {value}")


def _build_chart_table(
    matrix: ByteMatrix,
    selected: Sequence[int],
    groups: Sequence[ByteGroup],
    group_values: Dict[int, Tuple[int, ...]],
) -> ChartTable:
    columns = {}
    labels = {}
    for idx in selected:
        ref = ColumnRef.byte(idx)
        columns[ref] = matrix.column(idx)
        labels[ref] = f"Byte {idx}"
    for group in groups:
        columns[group.ref] = group_values[group.id]
        labels[group.ref] = group.label
    return ChartTable(
        index=tuple(rec.index for rec in matrix.records),
        columns=columns,
        labels=labels,
    )
