"""
Cell value codec.

Translates engine cell values into record values and back.
"""

from sheetrecords.codec.cell_codec import CellCodec

__all__ = [
    "CellCodec",
]
