"""
Information-theoretic and correlation analysis for Byte Explorer.

- Shannon entropy of one column (bits, empirical distribution)
- Joint entropy of several columns (each record's tuple is one symbol)
- Pearson correlation for every pair of selected byte columns, with a
  significance filter on ``|r|``

Correlation is only computed over raw byte columns; group columns get
entropy but are left out of the pairwise analysis.

Everything is recomputed from scratch on each call.  Captures are
small (what a user pastes), so the O(k²·N) pair loop is fine.
"""

import math
from collections import Counter
from itertools import combinations
from typing import Hashable, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from .constants import DEFAULT_CORRELATION_THRESHOLD
from .data_model import ByteMatrix, ColumnRef, CorrelationEdge, EntropyResult


def entropy(values: Iterable[Hashable]) -> float:
    """Shannon entropy of *values* in bits.

    0 for a single distinct value, ``log2(N)`` when all N values are
    distinct.  An empty column has entropy 0.
    """
    counts = Counter(values)
    total = sum(counts.values())
    if total == 0:
        return 0.0
    h = 0.0
    for count in counts.values():
        p = count / total
        h -= p * math.log2(p)
    # -0.0 for a single symbol
    return h if h > 0 else 0.0


def joint_entropy(columns: Sequence[Sequence[Hashable]]) -> float:
    """Entropy of the per-record tuples across *columns*.

    Parameters
    ----------
    columns : sequence of sequences
        At least two equal-length columns.
    """
    if len(columns) < 2:
        raise ValueError(
            f"Joint entropy needs at least two columns, got {len(columns)}"
        )
    lengths = {len(col) for col in columns}
    if len(lengths) != 1:
        raise ValueError(f"Columns differ in length: {sorted(lengths)}")
    return entropy(zip(*columns))


def correlate(a: Sequence[float], b: Sequence[float]) -> float:
    """Pearson product-moment correlation of *a* and *b*.

    Returns exactly ``0.0`` when either column is constant (zero sum
    of squared deviations).
    """
    if len(a) != len(b):
        raise ValueError(f"Columns differ in length: {len(a)} vs {len(b)}")
    if len(a) == 0:
        return 0.0
    x = np.asarray([float(v) for v in a], dtype=np.float64)
    y = np.asarray([float(v) for v in b], dtype=np.float64)
    dev_x = x - x.mean()
    dev_y = y - y.mean()
    ss_x = float(np.dot(dev_x, dev_x))
    ss_y = float(np.dot(dev_y, dev_y))
    denom = math.sqrt(ss_x * ss_y)
    if denom == 0:
        return 0.0
    r = float(np.dot(dev_x, dev_y)) / denom
    # Rounding can push |r| a hair past 1 for identical columns
    return max(-1.0, min(1.0, r))


def correlation_pairs(matrix: ByteMatrix, byte_indices: Iterable[int]) -> List[CorrelationEdge]:
    """``CorrelationEdge`` for every unordered pair of *byte_indices*.

    Pairs are emitted in ascending ``(a, b)`` order with ``a < b``.
    """
    indices = sorted(set(byte_indices))
    columns = {i: matrix.column(i) for i in indices}
    return [
        CorrelationEdge(
            column_a=ColumnRef.byte(i),
            column_b=ColumnRef.byte(j),
            coefficient=correlate(columns[i], columns[j]),
        )
        for i, j in combinations(indices, 2)
    ]


def significant_edges(
    edges: Iterable[CorrelationEdge],
    threshold: float = DEFAULT_CORRELATION_THRESHOLD,
) -> List[CorrelationEdge]:
    """Keep only edges with ``|r|`` strictly above *threshold*."""
    return [edge for edge in edges if edge.abs_coefficient > threshold]


def correlation_matrix(matrix: ByteMatrix, byte_indices: Sequence[int]) -> np.ndarray:
    """Symmetric ``k × k`` coefficient matrix for *byte_indices*.

    The diagonal is 1 for varying columns and 0 for constant ones,
    matching ``correlate`` of a column with itself.
    """
    k = len(byte_indices)
    result = np.zeros((k, k), dtype=np.float64)
    columns = [matrix.column(i) for i in byte_indices]
    for i in range(k):
        result[i, i] = correlate(columns[i], columns[i])
        for j in range(i + 1, k):
            r = correlate(columns[i], columns[j])
            result[i, j] = r
            result[j, i] = r
    return result


def analyze_entropy(
    matrix: ByteMatrix,
    selected_bytes: Iterable[int],
    group_values: Optional[Mapping[int, Sequence[int]]] = None,
) -> EntropyResult:
    """Entropy of each selected byte and each group, plus joint entropy.

    Joint entropy covers the selected bytes only and is ``None`` when
    fewer than two are selected.
    """
    selected = sorted(set(selected_bytes))
    per_column = {}
    byte_columns = []
    for idx in selected:
        col = matrix.column(idx)
        byte_columns.append(col)
        per_column[ColumnRef.byte(idx)] = entropy(col)
    for gid, values in (group_values or {}).items():
        per_column[ColumnRef.group(gid)] = entropy(values)

    joint = joint_entropy(byte_columns) if len(byte_columns) > 1 else None
    return EntropyResult(per_column=per_column, joint_entropy=joint)
