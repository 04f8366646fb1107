"""
Openpyxl adapter for .xlsx reading.

This module provides the OpenpyxlAdapter class that wraps openpyxl for
reading modern package-format workbooks. The workbook is loaded with
formulas preserved, so formula cells keep their text and error cells keep
their error kind.

Supported formats:
    - .xlsx (Excel 2007+)

Example:
    adapter = OpenpyxlAdapter()
    data = adapter.read_sheet("/path/to/file.xlsx", sheet_name="Users")
    header, *rows = data.rows
"""

import logging
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.cell.cell import Cell
from openpyxl.workbook.workbook import Workbook

from sheetrecords.codec.cell_codec import CellCodec
from sheetrecords.exceptions.record_exceptions import (
    ReadError,
    SheetNotFoundError,
    UnsupportedFormatError,
)
from sheetrecords.models.record_models import SheetData
from sheetrecords.resources import release

logger = logging.getLogger(__name__)


def _is_stored_row(row: tuple[Cell, ...]) -> bool:
    # iter_rows fills gaps with fresh unstyled cells; stored cells carry a value or a style
    return any(cell.value is not None or cell.has_style for cell in row)


class OpenpyxlAdapter:
    """
    Adapter for openpyxl read operations.

    Every cell is decoded through the CellCodec while the workbook is open;
    the file handle and workbook are released before returning.

    Attributes:
        SUPPORTED_EXTENSIONS: Tuple of supported file extensions.
        codec: CellCodec used to decode cells.

    Example:
        adapter = OpenpyxlAdapter()
        data = adapter.read_sheet("/path/to/file.xlsx", sheet_index=1)
    """

    SUPPORTED_EXTENSIONS = (".xlsx",)

    def __init__(self, codec: CellCodec | None = None) -> None:
        """
        Initialize the OpenpyxlAdapter.

        Args:
            codec: Optional CellCodec instance. If None, creates a new instance.
        """
        self.codec = codec or CellCodec()

    def _validate_file_path(self, file_path: str) -> Path:
        """
        Validate that the file has a supported extension.

        Existence is not checked here; opening the file reports that.

        Args:
            file_path: Path to the Excel file.

        Returns:
            Path object for the validated file.

        Raises:
            UnsupportedFormatError: If the file extension is not supported.
        """
        path = Path(file_path)

        if path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError(
                file_path=file_path,
                expected_formats=list(self.SUPPORTED_EXTENSIONS),
            )

        return path

    def _load_workbook(self, file_path: str, file_handle: Any) -> Workbook:
        """
        Parse an open file handle into an openpyxl workbook.

        Args:
            file_path: Path of the file, for error reporting.
            file_handle: Binary file handle positioned at the start.

        Returns:
            Workbook instance with formulas preserved.

        Raises:
            ReadError: If openpyxl cannot parse the file.
        """
        try:
            return load_workbook(file_handle, data_only=False)
        except OSError:
            raise
        except Exception as e:
            raise ReadError(
                file_path=file_path,
                operation="open",
                reason=str(e),
            ) from e

    def _resolve_sheet_name(
        self,
        available_sheets: list[str],
        sheet_name: str | None,
        sheet_index: int | None,
    ) -> str:
        """
        Pick the target sheet name.

        Args:
            available_sheets: Sheet names in workbook order.
            sheet_name: Requested name, takes precedence.
            sheet_index: Requested 0-based index.

        Returns:
            Name of the sheet to read.

        Raises:
            SheetNotFoundError: If the sheet does not exist.
        """
        if sheet_name is not None:
            if sheet_name not in available_sheets:
                raise SheetNotFoundError(sheet_name, available_sheets)
            return sheet_name

        index = 0 if sheet_index is None else sheet_index
        if index < 0 or index >= len(available_sheets):
            raise SheetNotFoundError(index, available_sheets)
        return available_sheets[index]

    def read_sheet(
        self,
        file_path: str,
        sheet_name: str | None = None,
        sheet_index: int | None = None,
    ) -> SheetData:
        """
        Read and decode every row of a sheet.

        Rows run from the first sheet row to the sheet's last row. A row with
        no stored cell is returned as None; a row whose cells exist but are
        blank, such as styled empty cells, is a list of None values.

        Args:
            file_path: Path to the Excel file.
            sheet_name: Name of the sheet to read. If None and sheet_index is None,
                       reads the first sheet.
            sheet_index: Index of the sheet to read (0-based). Used if sheet_name is None.

        Returns:
            SheetData containing the decoded sheet contents.

        Raises:
            UnsupportedFormatError: If the file format is not supported.
            ReadError: If the workbook cannot be parsed.
            SheetNotFoundError: If the specified sheet does not exist.
        """
        path = self._validate_file_path(file_path)

        file_handle = None
        workbook = None
        try:
            file_handle = open(path, "rb")
            workbook = self._load_workbook(file_path, file_handle)

            target_sheet_name = self._resolve_sheet_name(
                workbook.sheetnames,
                sheet_name,
                sheet_index,
            )
            worksheet = workbook[target_sheet_name]

            rows: list[list[Any] | None] = [
                [self.codec.decode_openpyxl_cell(cell) for cell in row]
                if _is_stored_row(row)
                else None
                for row in worksheet.iter_rows(min_row=1, max_row=worksheet.max_row)
            ]
        finally:
            release(workbook, file_handle)

        logger.debug(
            "Read %d rows from sheet %r of %s",
            len(rows),
            target_sheet_name,
            file_path,
        )

        return SheetData(sheet_name=target_sheet_name, rows=rows)
