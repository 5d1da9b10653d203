"""Exceptions raised by the lug library."""


class LugError(Exception):
    """Base exception for the lug library."""
    pass


class IndexOutOfRange(LugError, IndexError):
    """Raised when a positional component index is not valid."""
    pass


class InvalidArgument(LugError, ValueError):
    """Raised for arguments that cannot be used to build a value."""
    pass
