"""
Custom exceptions for sheet-records.

Provides type-safe, descriptive exceptions for error handling throughout
the package.
"""

from sheetrecords.exceptions.record_exceptions import (
    InvalidArgumentError,
    ReadError,
    SheetNotFoundError,
    SheetRecordsError,
    UnsupportedFormatError,
    WriteError,
)

__all__ = [
    "SheetRecordsError",
    "InvalidArgumentError",
    "UnsupportedFormatError",
    "SheetNotFoundError",
    "ReadError",
    "WriteError",
]
