"""
Data model for Byte Explorer.

Immutable dataclasses representing a decoded hex capture and every
result derived from it.  A ``ByteMatrix`` is built once by
``hex_decoder`` and never mutated; the session replaces it wholesale
on each successful decode and publishes derived state as a fresh
``AnalysisSnapshot`` so that readers never see a half-updated view.

Byte columns and group columns share one key type, ``ColumnRef``, so
statistics, entropy, and chart data can be looked up uniformly.
"""

import enum
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .constants import DEFAULT_CORRELATION_THRESHOLD


BYTE = "byte"
GROUP = "group"


class SessionState(enum.Enum):
    """Coarse state of an ``AnalysisSession``."""
    EMPTY = "empty"          # no matrix decoded yet
    DECODED = "decoded"      # matrix present, nothing selected
    ANALYZING = "analyzing"  # >= 1 byte selected or >= 1 group defined


@dataclass(frozen=True, order=True)
class ColumnRef:
    """Key for a raw byte column or a derived group column.

    Parameters
    ----------
    kind : str
        ``"byte"`` or ``"group"``.
    index : int
        Byte position (``0 <= index < W``) or group id.
    """
    kind: str
    index: int

    def __post_init__(self):
        if self.kind not in (BYTE, GROUP):
            raise ValueError(f"Unknown column kind {self.kind!r}")

    @classmethod
    def byte(cls, index: int) -> "ColumnRef":
        return cls(BYTE, index)

    @classmethod
    def group(cls, group_id: int) -> "ColumnRef":
        return cls(GROUP, group_id)

    @property
    def is_byte(self) -> bool:
        return self.kind == BYTE

    @property
    def is_group(self) -> bool:
        return self.kind == GROUP

    @property
    def key(self) -> str:
        """Chart-table key, e.g. ``"byte3"`` or ``"group0"``."""
        return f"{self.kind}{self.index}"

    def __str__(self) -> str:
        return f"{self.kind}:{self.index}"


@dataclass(frozen=True)
class Record:
    """One decoded line of the capture.

    Parameters
    ----------
    index : int
        0-based line position, stable for the matrix's lifetime.
    values : tuple of int
        Byte values, each in ``[0, 255]``.
    """
    index: int
    values: Tuple[int, ...]


@dataclass(frozen=True)
class ByteMatrix:
    """Rectangular batch of decoded records.

    Every record has exactly ``width`` values; ``width > 0`` and at
    least one record is present (both guaranteed by ``decode_hex``).
    """
    records: Tuple[Record, ...]
    width: int

    @property
    def n_records(self) -> int:
        return len(self.records)

    def column(self, byte_index: int) -> Tuple[int, ...]:
        """All values of byte column *byte_index*, in record order."""
        return tuple(rec.values[byte_index] for rec in self.records)


@dataclass(frozen=True)
class ByteGroup:
    """An ordered, named combination of byte columns.

    The derived value per record is the big-endian composition of the
    referenced bytes: ``byte_indices[0]`` is the most significant.
    Duplicates are allowed and order is significant.
    """
    id: int
    byte_indices: Tuple[int, ...]
    name: str

    @property
    def ref(self) -> ColumnRef:
        return ColumnRef.group(self.id)

    @property
    def label(self) -> str:
        return f"{self.name} [{', '.join(str(b) for b in self.byte_indices)}]"


@dataclass(frozen=True)
class ColumnStatistics:
    """Population statistics of one column.

    ``min``/``max`` keep the column's own type (exact ``int`` even for
    group values wider than 64 bits).  ``mean`` and ``std_dev`` are
    floats, or rounded ints for groups too wide for a float.
    ``std_dev`` divides by N, not N-1.
    """
    min: int
    max: int
    mean: Union[float, int]
    std_dev: Union[float, int]

    @property
    def is_constant(self) -> bool:
        """``True`` when every record holds the same value."""
        return self.min == self.max

    @property
    def range_text(self) -> str:
        return f"{self.min}-{self.max}"


@dataclass(frozen=True)
class EntropyResult:
    """Shannon entropies (bits) for the analysed columns.

    ``joint_entropy`` is ``None`` when fewer than two bytes are
    selected.
    """
    per_column: Dict[ColumnRef, float]
    joint_entropy: Optional[float] = None


@dataclass(frozen=True)
class CorrelationEdge:
    """Pearson coefficient for one unordered pair of byte columns."""
    column_a: ColumnRef
    column_b: ColumnRef
    coefficient: float

    @property
    def abs_coefficient(self) -> float:
        return abs(self.coefficient)

    def __str__(self) -> str:
        return (f"Byte {self.column_a.index} ↔ Byte {self.column_b.index}: "
                f"{self.coefficient:.3f}")


@dataclass(frozen=True)
class ChartTable:
    """Time-series shaped data: one row per record, one column per series.

    ``columns`` holds the selected bytes (ascending) followed by every
    active group (by id).
    """
    index: Tuple[int, ...]
    columns: Dict[ColumnRef, Tuple[int, ...]]
    labels: Dict[ColumnRef, str]

    @property
    def is_empty(self) -> bool:
        return not self.columns

    def rows(self) -> Iterator[dict]:
        """Yield ``{"index": i, "byte0": v, "group1": v, ...}`` per record."""
        for pos, rec_index in enumerate(self.index):
            row = {'index': rec_index}
            for ref, values in self.columns.items():
                row[ref.key] = values[pos]
            yield row


@dataclass(frozen=True)
class AnalysisSnapshot:
    """Immutable view of an ``AnalysisSession`` after ``recompute()``.

    Parameters
    ----------
    version : int
        Monotonic counter, bumped on every recompute.
    state : SessionState
    matrix : ByteMatrix or None
    groups : tuple of ByteGroup
        Active groups in creation order.
    group_values : dict
        ``{group_id: per-record derived values}``.
    byte_stats, group_stats : dict
        ``{byte_index: ColumnStatistics}`` / ``{group_id: ColumnStatistics}``.
    selected_bytes : tuple of int
        Ascending.
    grouping_mode : bool
    grouping_draft : tuple of int
        Byte indices of the group being assembled, in click order.
    entropy : EntropyResult or None
    correlations : list of CorrelationEdge
        Every pair of selected bytes.
    significant_correlations : list of CorrelationEdge
        Pairs with ``|r| > correlation_threshold``.
    chart_table : ChartTable or None
    """
    version: int
    state: SessionState
    matrix: Optional[ByteMatrix] = None
    groups: Tuple[ByteGroup, ...] = ()
    group_values: Dict[int, Tuple[int, ...]] = field(default_factory=dict)
    byte_stats: Dict[int, ColumnStatistics] = field(default_factory=dict)
    group_stats: Dict[int, ColumnStatistics] = field(default_factory=dict)
    selected_bytes: Tuple[int, ...] = ()
    grouping_mode: bool = False
    grouping_draft: Tuple[int, ...] = ()
    entropy: Optional[EntropyResult] = None
    correlations: List[CorrelationEdge] = field(default_factory=list)
    significant_correlations: List[CorrelationEdge] = field(default_factory=list)
    correlation_threshold: float = DEFAULT_CORRELATION_THRESHOLD
    chart_table: Optional[ChartTable] = None

    @property
    def width(self) -> int:
        return self.matrix.width if self.matrix is not None else 0

    @property
    def constant_bytes(self) -> List[int]:
        return [i for i, st in self.byte_stats.items() if st.is_constant]

    def stats_for(self, ref: ColumnRef) -> ColumnStatistics:
        if ref.is_byte:
            return self.byte_stats[ref.index]
        return self.group_stats[ref.index]

