"""
Example capture generator for Byte Explorer.

Produces a synthetic sensor-telemetry capture with structure worth
discovering:

======  ===========================================================
Byte    Content
======  ===========================================================
0-1     Constant sync word ``0xA55A``
2       Sequence counter (wraps at 256)
3       Message type, one of four values
4-5     16-bit big-endian temperature reading, slowly drifting
6       Half of byte 5 plus small noise
7       Random noise
8       XOR checksum of bytes 2-7
======  ===========================================================

Bytes 4-5 are meant to be grouped; bytes 5 and 6 correlate strongly.
"""

import math
import random
from typing import List

EXAMPLE_WIDTH = 9
SYNC_WORD = (0xA5, 0x5A)
MESSAGE_TYPES = (0x01, 0x02, 0x10, 0x20)


def generate_example_records(n_records: int = 64, seed: int = 42) -> List[bytes]:
    """Generate *n_records* synthetic records of ``EXAMPLE_WIDTH`` bytes."""
    if n_records < 1:
        raise ValueError(f"n_records must be at least 1, got {n_records}")

    # Reproducible randomness
    rng = random.Random(seed)
    records = []
    for i in range(n_records):
        counter = i % 256
        msg_type = rng.choice(MESSAGE_TYPES)
        # Temperature in centi-degrees around 21.5 C with a slow sine drift
        temp = int(2150 + 40 * math.sin(i / 8.0) + rng.randint(-3, 3))
        temp_hi, temp_lo = (temp >> 8) & 0xFF, temp & 0xFF
        follower = min(255, max(0, temp_lo // 2 + rng.randint(-2, 2)))
        noise = rng.randrange(256)

        body = [counter, msg_type, temp_hi, temp_lo, follower, noise]
        checksum = 0
        for b in body:
            checksum ^= b
        records.append(bytes([*SYNC_WORD, *body, checksum]))
    return records


def generate_example_text(n_records: int = 64, seed: int = 42) -> str:
    """Example capture as upper-case hex text, one record per line."""
    return '\n'.join(rec.hex().upper() for rec in generate_example_records(n_records, seed)) + '\n'
