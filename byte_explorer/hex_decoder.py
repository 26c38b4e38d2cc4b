"""
Hex decoder for Byte Explorer.

Turns pasted capture text (one record per line, every line the same
number of hex digits) into a validated ``ByteMatrix``.  Handles:

- Leading/trailing whitespace around the whole input and each line
- ``\\n``, ``\\r\\n`` and ``\\r`` line breaks
- Upper- and lower-case hex digits

Validation is all-or-nothing: the first bad line raises and no
partial matrix is returned.  Odd-length lines are rejected because a
trailing single nibble cannot be told apart from a truncated byte.
"""

import re
from typing import List

from .data_model import ByteMatrix, Record
from .errors import EmptyInputError, MalformedInputError


_HEX_LINE = re.compile(r'[0-9A-Fa-f]+')

# Show at most this many characters of an offending line in messages
_PREVIEW_CHARS = 24


def _preview(line: str) -> str:
    if len(line) <= _PREVIEW_CHARS:
        return repr(line)
    return repr(line[:_PREVIEW_CHARS] + '...')


def split_hex_lines(text: str) -> List[str]:
    """Split *text* into trimmed lines.

    The whole input is trimmed first, so leading and trailing blank
    lines vanish; blank lines in the middle are kept (and rejected by
    ``decode_hex``).
    """
    stripped = text.strip()
    if not stripped:
        return []
    return [line.strip() for line in stripped.splitlines()]


def decode_hex(text: str) -> ByteMatrix:
    """Decode hex capture text into a ``ByteMatrix``.

    Parameters
    ----------
    text : str
        Raw pasted text, one record per line.

    Returns
    -------
    ByteMatrix
        ``n_records`` = number of lines, ``width`` = bytes per line.

    Raises
    ------
    EmptyInputError
        If there are no lines after trimming.
    MalformedInputError
        If any line contains a non-hex character, differs in length
        from the first line, or has an odd number of digits.
    """
    lines = split_hex_lines(text)
    if not lines:
        raise EmptyInputError("No data provided.")

    expected_len = len(lines[0])

    for line_no, line in enumerate(lines, start=1):
        if len(line) != expected_len:
            raise MalformedInputError(
                f"Line {line_no} has {len(line)} hex digits but line 1 has "
                f"{expected_len}. All lines must be hex strings of the "
                f"same length.",
                line_number=line_no,
            )
        if not _HEX_LINE.fullmatch(line):
            bad = next((ch for ch in line if ch not in '0123456789abcdefABCDEF'), '')
            detail = f"non-hex character {bad!r}" if bad else "no hex digits"
            raise MalformedInputError(
                f"Line {line_no} ({_preview(line)}) contains {detail}. "
                f"Only 0-9 and A-F are allowed.",
                line_number=line_no,
            )

    # Lengths are uniform past this point, so one check covers every line
    if expected_len % 2:
        raise MalformedInputError(
            f"Lines have an odd number of hex digits ({expected_len}); "
            f"each byte needs exactly two digits.",
            line_number=1,
        )

    records = tuple(
        Record(index=idx, values=tuple(bytes.fromhex(line)))
        for idx, line in enumerate(lines)
    )
    return ByteMatrix(records=records, width=expected_len // 2)
