"""
Adapters for spreadsheet engines.

Implements the adapter pattern for the different Excel engines:
- OpenpyxlAdapter: .xlsx reading with formulas and error cells preserved
- CalamineAdapter: legacy .xls reading using python-calamine (Rust-based)
- XlsxWriterAdapter: in-memory .xlsx writing using XlsxWriter
"""

from sheetrecords.adapters.calamine_adapter import CalamineAdapter
from sheetrecords.adapters.openpyxl_adapter import OpenpyxlAdapter
from sheetrecords.adapters.xlsxwriter_adapter import XlsxWriterAdapter

__all__ = [
    "CalamineAdapter",
    "OpenpyxlAdapter",
    "XlsxWriterAdapter",
]
