"""
Byte Explorer v1.0.0

Structure-discovery tool for binary protocol captures.  Decodes a
batch of fixed-width hex records (one per line) into byte columns,
composes multi-byte groups, and reports per-column statistics,
Shannon entropy, joint entropy, and pairwise Pearson correlation
("does byte 4 vary with byte 7?").

The analysis engine (``hex_decoder``, ``group_composer``,
``column_statistics``, ``information``, ``session``) has no GUI
dependencies; the PySide6 window and matplotlib charts sit on top.
"""

APP_NAME = "Byte Explorer"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-18"
__version__ = APP_VERSION
