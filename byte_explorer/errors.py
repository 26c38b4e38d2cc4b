"""
Error kinds for the Byte Explorer engine.

Data problems raise ``ValueError`` subclasses with a message that is
shown verbatim in the GUI.  ``EmptyColumnError`` is an invariant
violation (a decoded matrix always has at least one record) and
derives from ``AssertionError`` instead.
"""


class ByteExplorerError(ValueError):
    """Base class for user-facing decode / column-reference errors."""


class EmptyInputError(ByteExplorerError):
    """The pasted text holds no lines after trimming."""


class MalformedInputError(ByteExplorerError):
    """A line is not hex, or its length differs from the first line."""

    def __init__(self, message: str, line_number: int = None):
        super().__init__(message)
        self.line_number = line_number


class InvalidColumnReferenceError(ByteExplorerError):
    """A group or selection refers to a byte outside ``[0, W)``."""

    def __init__(self, message: str, byte_index=None, width: int = None):
        super().__init__(message)
        self.byte_index = byte_index
        self.width = width


class EmptyColumnError(AssertionError):
    """Statistics were requested for a column with no values."""
