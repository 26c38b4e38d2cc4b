"""
Byte-group composition for Byte Explorer.

A group combines an ordered list of byte columns into one wide
unsigned integer per record, big-endian (first listed byte is the
most significant).  Values are plain Python ints, so groups wider
than eight bytes never truncate.
"""

import numbers
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .data_model import ByteGroup, ByteMatrix
from .errors import InvalidColumnReferenceError


def validate_byte_indices(byte_indices: Sequence[int], width: int) -> Tuple[int, ...]:
    """Check that *byte_indices* is non-empty and within ``[0, width)``.

    Returns the indices as a tuple.  Raises
    ``InvalidColumnReferenceError`` on the first bad entry.
    """
    indices = tuple(byte_indices)
    if not indices:
        raise InvalidColumnReferenceError(
            "A group needs at least one byte.", width=width,
        )
    for idx in indices:
        # bool is an int subclass but never a meaningful column index
        if isinstance(idx, bool) or not isinstance(idx, numbers.Integral):
            raise InvalidColumnReferenceError(
                f"Byte index {idx!r} is not an integer.",
                byte_index=idx, width=width,
            )
        if not 0 <= idx < width:
            raise InvalidColumnReferenceError(
                f"Byte index {idx} is outside 0-{width - 1} "
                f"(records are {width} bytes wide).",
                byte_index=idx, width=width,
            )
    return tuple(int(i) for i in indices)


def compose_value(values: Sequence[int], byte_indices: Sequence[int]) -> int:
    """Big-endian composition of ``values[i]`` for *byte_indices*."""
    result = 0
    for idx in byte_indices:
        result = (result << 8) | values[idx]
    return result


def apply_group(group: ByteGroup, matrix: ByteMatrix) -> Tuple[int, ...]:
    """Derived value of *group* for every record of *matrix*."""
    return tuple(compose_value(rec.values, group.byte_indices) for rec in matrix.records)


def create_group(
    matrix: ByteMatrix,
    byte_indices: Sequence[int],
    existing_groups: Iterable[ByteGroup] = (),
    *,
    name: Optional[str] = None,
    next_id: Optional[int] = None,
) -> ByteGroup:
    """Validate *byte_indices* against *matrix* and build a ``ByteGroup``.

    Parameters
    ----------
    matrix : ByteMatrix
    byte_indices : sequence of int
        Ordered, duplicates allowed.
    existing_groups : iterable of ByteGroup
        Used to pick an id above every live one when *next_id* is not
        given.
    name : str, optional
        Display name; defaults to ``"Group <id + 1>"``.
    next_id : int, optional
        Id to assign.  The session passes its own counter so that ids
        of removed groups are never handed out again.
    """
    indices = validate_byte_indices(byte_indices, matrix.width)
    if next_id is None:
        next_id = max((g.id for g in existing_groups), default=-1) + 1
    if not name:
        name = f"Group {next_id + 1}"
    return ByteGroup(id=next_id, byte_indices=indices, name=name)


def recompute_groups(
    groups: Iterable[ByteGroup],
    matrix: ByteMatrix,
) -> Dict[int, Tuple[int, ...]]:
    """Re-derive every group's column against a (new) matrix.

    Each group's indices are re-validated against ``matrix.width``;
    one stale group fails the whole recompute with
    ``InvalidColumnReferenceError`` naming that group.
    """
    derived: Dict[int, Tuple[int, ...]] = {}
    for group in groups:
        try:
            validate_byte_indices(group.byte_indices, matrix.width)
        except InvalidColumnReferenceError as exc:
            raise InvalidColumnReferenceError(
                f"{group.label} no longer fits the decoded data: {exc}",
                byte_index=exc.byte_index, width=matrix.width,
            ) from exc
        derived[group.id] = apply_group(group, matrix)
    return derived
