"""
Per-column descriptive statistics.

Population statistics (divide by N) over one column's values.  Byte
columns and group columns go through the same function; every column
is independent, so nothing here depends on evaluation order.

Group values are arbitrary-precision ints, so the moments are summed
exactly over offsets from the column minimum and converted to float
only at the end.  A group too wide for a float keeps its mean and
standard deviation as rounded ints.
"""

import math
from fractions import Fraction
from typing import Dict, List, Mapping, Sequence, Union

from .data_model import ByteMatrix, ColumnStatistics
from .errors import EmptyColumnError


def compute_stats(values: Sequence[int]) -> ColumnStatistics:
    """Min, max, mean, and population standard deviation of *values*.

    Raises
    ------
    EmptyColumnError
        If *values* is empty (cannot happen for a decoded matrix).
    """
    n = len(values)
    if n == 0:
        raise EmptyColumnError("Cannot compute statistics of an empty column")

    lo = min(values)
    hi = max(values)
    offsets = [v - lo for v in values]
    total = sum(offsets)
    total_sq = sum(o * o for o in offsets)
    # n^2 * variance, exact
    spread = n * total_sq - total * total

    return ColumnStatistics(
        min=lo,
        max=hi,
        mean=_as_float(Fraction(lo * n + total, n)),
        std_dev=_exact_sqrt_ratio(spread, n),
    )


def _as_float(value: Fraction) -> Union[float, int]:
    try:
        return float(value)
    except OverflowError:
        return round(value)


def _exact_sqrt_ratio(numerator: int, denominator: int) -> Union[float, int]:
    """``sqrt(numerator) / denominator`` as a float, or a rounded int if too wide."""
    if numerator == 0:
        return 0.0
    try:
        return math.sqrt(numerator) / denominator
    except OverflowError:
        root = math.isqrt(numerator)
        try:
            return root / denominator
        except OverflowError:
            return (root + denominator // 2) // denominator


def compute_byte_stats(matrix: ByteMatrix) -> Dict[int, ColumnStatistics]:
    """``{byte_index: ColumnStatistics}`` for every byte column."""
    return {i: compute_stats(matrix.column(i)) for i in range(matrix.width)}


def compute_group_stats(group_values: Mapping[int, Sequence[int]]) -> Dict[int, ColumnStatistics]:
    """``{group_id: ColumnStatistics}`` for every active group."""
    return {gid: compute_stats(vals) for gid, vals in group_values.items()}


def constant_columns(stats: Mapping[int, ColumnStatistics]) -> List[int]:
    """Keys of columns whose values never change."""
    return [key for key, st in stats.items() if st.is_constant]
