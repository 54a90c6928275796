"""Exception hierarchy for datafmt.

Every failure raised by the public API derives from ``DataFormatError`` so
callers can catch the whole family at once. Each concrete error also derives
from the closest builtin (``ValueError``, ``OSError``, ``FileNotFoundError``)
so code that already handles those keeps working.

Hierarchy::

    DataFormatError
    ├── UnsupportedFormatError   name or extension not recognised
    ├── DecodeError              malformed input for the format
    ├── EncodeError              value not representable in the format
    └── DataIOError              read/write failure
        └── DataFileNotFoundError
"""

from __future__ import annotations

from os import PathLike

__all__ = [
    "DataFileNotFoundError",
    "DataFormatError",
    "DataIOError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormatError",
]


class DataFormatError(Exception):
    """Base class for every error raised by datafmt."""


class UnsupportedFormatError(DataFormatError, ValueError):
    """A format name or file extension does not map to a supported format."""


class DecodeError(DataFormatError, ValueError):
    """Input could not be decoded in the requested format.

    Attributes:
        fmt: Name of the format being decoded (e.g. ``"json"``), or ``None``
            when the failure happened before a format was known.
    """

    def __init__(self, message: str, fmt: str | None = None) -> None:
        super().__init__(message)
        self.fmt = fmt


class EncodeError(DataFormatError, ValueError):
    """A value cannot be represented in the requested format.

    Attributes:
        fmt: Name of the target format, or ``None``.
    """

    def __init__(self, message: str, fmt: str | None = None) -> None:
        super().__init__(message)
        self.fmt = fmt


class DataIOError(DataFormatError, OSError):
    """Reading or writing a data file failed.

    Attributes:
        path: The file path involved in the failure.
    """

    def __init__(self, message: str, path: str | PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path


class DataFileNotFoundError(DataIOError, FileNotFoundError):
    """The file to load does not exist."""
