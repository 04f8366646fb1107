"""
Cell value codec.

Converts between the cell representations of the spreadsheet engines and the
generic values carried in records.

Decoding (cell -> value):
    - numeric, date-formatted -> datetime
    - numeric -> float
    - string -> str
    - boolean -> bool
    - error -> CellError
    - formula -> str, the formula text starting with "="
    - blank -> None
    - anything else -> the configured "unrecognized" sentinel

Encoding (value -> cell):
    - None -> blank cell
    - bool -> boolean cell
    - number -> number cell (as float)
    - datetime/date -> text cell in the configured timestamp format
    - anything else -> text cell

Dates are deliberately not symmetric: they decode to datetime but encode
to formatted text.

Example:
    codec = CellCodec()
    value = codec.decode_openpyxl_cell(worksheet["B2"])
    codec.write_cell(worksheet, 1, 1, value, cell_format)
"""

import numbers
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any

from openpyxl.cell.cell import Cell
from openpyxl.worksheet.formula import ArrayFormula
from xlsxwriter.format import Format
from xlsxwriter.worksheet import Worksheet

from sheetrecords.config import Settings, settings as default_settings
from sheetrecords.models.record_models import CellError, CellValue


class CellCodec:
    """
    Translates cell values for the openpyxl, python-calamine and XlsxWriter
    engines.

    Attributes:
        EXCEL_EPOCH: Excel's date epoch (1899-12-30).
        settings: Settings providing the timestamp format and the sentinel
            returned for unrecognized cells.
    """

    # Excel's date system epoch. Excel incorrectly treats 1900 as a leap year
    # for compatibility with Lotus 1-2-3, so the epoch is December 30, 1899.
    EXCEL_EPOCH = datetime(1899, 12, 30)

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the CellCodec.

        Args:
            settings: Optional settings. If None, the package defaults are used.
        """
        self.settings = settings or default_settings

    def _to_timestamp(self, value: datetime | date | time | timedelta) -> datetime:
        """
        Widen any date-like engine value to a datetime.

        Time-only values and durations are placed relative to the Excel epoch.

        Args:
            value: Date-like value produced by an engine.

        Returns:
            Python datetime object.
        """
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time())
        if isinstance(value, time):
            return datetime.combine(self.EXCEL_EPOCH.date(), value)
        return self.EXCEL_EPOCH + value

    # ==================== DECODE ====================

    def decode_openpyxl_cell(self, cell: Cell) -> CellValue:
        """
        Decode an openpyxl cell by its data type.

        The workbook must be loaded with data_only=False so that formula
        cells keep their formula text.

        Args:
            cell: Cell object from openpyxl.

        Returns:
            Decoded value.
        """
        value = cell.value

        if value is None:
            return None

        data_type = cell.data_type

        if data_type == "f":
            if isinstance(value, ArrayFormula):
                value = value.text
            if isinstance(value, str):
                return value if value.startswith("=") else f"={value}"
            return self.settings.unrecognized_value

        if data_type == "e":
            error = CellError.from_code(str(value))
            if error is None:
                return self.settings.unrecognized_value
            return error

        if data_type == "b":
            return bool(value)

        # openpyxl converts date-formatted numbers while loading
        if isinstance(value, (datetime, date, time, timedelta)):
            return self._to_timestamp(value)

        if data_type == "n" and isinstance(value, (int, float)):
            return float(value)

        if data_type == "s":
            return str(value)

        return self.settings.unrecognized_value

    def decode_calamine_value(self, value: Any) -> CellValue:
        """
        Decode a value produced by python-calamine.

        Calamine reports blanks as empty strings, already applies date
        formats, and returns cached results for formula cells.

        Args:
            value: Raw cell value from calamine.

        Returns:
            Decoded value.
        """
        if value is None:
            return None

        if isinstance(value, bool):
            return value

        if isinstance(value, (int, float)):
            return float(value)

        if isinstance(value, str):
            return value if value != "" else None

        if isinstance(value, (datetime, date, time, timedelta)):
            return self._to_timestamp(value)

        return self.settings.unrecognized_value

    # ==================== ENCODE ====================

    def write_cell(
        self,
        worksheet: Worksheet,
        row: int,
        col: int,
        value: Any,
        cell_format: Format | None = None,
    ) -> int:
        """
        Write a value to an XlsxWriter cell with the codec's type handling.

        Text is always written with write_string, so a value starting with
        "=" stays literal text and is not turned into a formula.

        Args:
            worksheet: The worksheet to write to.
            row: Row index (0-based).
            col: Column index (0-based).
            value: Value to write.
            cell_format: Optional format to apply.

        Returns:
            The XlsxWriter status: 0 on success, -1 when the cell is out of
            the sheet's range, -2 when a string was truncated.
        """
        if value is None:
            return worksheet.write_blank(row, col, None, cell_format)
        elif isinstance(value, bool):
            return worksheet.write_boolean(row, col, value, cell_format)
        elif isinstance(value, CellError):
            return worksheet.write_string(row, col, value.value, cell_format)
        elif isinstance(value, (numbers.Real, Decimal)):
            return worksheet.write_number(row, col, float(value), cell_format)
        elif isinstance(value, (datetime, date)):
            return worksheet.write_string(
                row,
                col,
                value.strftime(self.settings.timestamp_format),
                cell_format,
            )
        else:
            return worksheet.write_string(row, col, str(value), cell_format)
