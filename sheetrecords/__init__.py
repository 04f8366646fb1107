"""
sheet-records: spreadsheet rows as header-keyed records.

This package reads .xlsx and .xls workbooks into lists of dictionaries keyed
by the header row, and writes lists of dictionaries back out as styled .xlsx
workbooks.

Architecture:
    - Service Layer: RecordService is the single entry point
    - openpyxl for .xlsx reading (keeps formulas and error cells)
    - python-calamine for legacy .xls reading (Rust-based)
    - XlsxWriter for in-memory workbook generation
"""

__version__ = "0.1.0"
