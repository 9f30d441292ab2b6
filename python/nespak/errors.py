"""
NESPAK Exceptions
"""

from typing import Optional


class NespakError(Exception):
    """Base class for NESPAK errors."""


class MalformedStreamError(NespakError, ValueError):
    """
    Raised when a packed stream cannot be decoded.

    Attributes:
        offset: Byte offset of the token that could not be read
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class UnsupportedAlgorithmError(NespakError, NotImplementedError):
    """Raised for algorithms that are declared but not implemented."""
