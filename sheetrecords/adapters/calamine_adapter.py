"""
Calamine adapter for legacy .xls reading.

This module provides the CalamineAdapter class that wraps python-calamine
for reading Excel files. python-calamine is a Rust-based library; the record
service uses it for the legacy binary format, which openpyxl cannot read.

Calamine reports values, not cell kinds: formula cells come back as their
cached results and error cells come back empty.

Supported formats:
    - .xls (Excel 97-2003)

Example:
    adapter = CalamineAdapter()
    data = adapter.read_sheet("/path/to/file.xls", sheet_name="Sheet1")
"""

import logging
from pathlib import Path
from typing import Any

from python_calamine import CalamineWorkbook

from sheetrecords.codec.cell_codec import CellCodec
from sheetrecords.exceptions.record_exceptions import (
    ReadError,
    SheetNotFoundError,
    UnsupportedFormatError,
)
from sheetrecords.models.record_models import SheetData
from sheetrecords.resources import release

logger = logging.getLogger(__name__)


class CalamineAdapter:
    """
    Adapter for python-calamine read operations.

    Attributes:
        SUPPORTED_EXTENSIONS: Tuple of supported file extensions.
        codec: CellCodec used to decode values.

    Example:
        adapter = CalamineAdapter()
        data = adapter.read_sheet("/path/to/file.xls", sheet_index=0)
    """

    SUPPORTED_EXTENSIONS = (".xls",)

    def __init__(self, codec: CellCodec | None = None) -> None:
        """
        Initialize the CalamineAdapter.

        Args:
            codec: Optional CellCodec instance. If None, creates a new instance.
        """
        self.codec = codec or CellCodec()

    def _validate_file_path(self, file_path: str) -> Path:
        """
        Validate that the file has a supported extension.

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

    def _open_workbook(self, file_path: str, file_handle: Any) -> CalamineWorkbook:
        """
        Parse an open file handle with calamine.

        Args:
            file_path: Path of the file, for error reporting.
            file_handle: Binary file handle positioned at the start.

        Returns:
            CalamineWorkbook instance.

        Raises:
            ReadError: If calamine cannot parse the file.
        """
        try:
            return CalamineWorkbook.from_filelike(file_handle)
        except OSError:
            raise
        except Exception as e:
            raise ReadError(
                file_path=file_path,
                operation="open",
                reason=str(e),
            ) from e

    def read_sheet(
        self,
        file_path: str,
        sheet_name: str | None = None,
        sheet_index: int | None = None,
    ) -> SheetData:
        """
        Read and decode every row of a sheet.

        The sheet is read from cell A1 so that row positions match the sheet,
        even when the first rows are empty. Rows with no populated cell are
        returned as None.

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
            workbook = self._open_workbook(file_path, file_handle)
            available_sheets = list(workbook.sheet_names)

            if sheet_name is not None:
                if sheet_name not in available_sheets:
                    raise SheetNotFoundError(sheet_name, available_sheets)
                target_sheet_name = sheet_name
            else:
                index = 0 if sheet_index is None else sheet_index
                if index < 0 or index >= len(available_sheets):
                    raise SheetNotFoundError(index, available_sheets)
                target_sheet_name = available_sheets[index]

            try:
                sheet = workbook.get_sheet_by_name(target_sheet_name)
                raw_data = sheet.to_python(skip_empty_area=False)
            except Exception as e:
                raise ReadError(
                    file_path=file_path,
                    operation="read sheet",
                    reason=str(e),
                ) from e
        finally:
            release(workbook, file_handle)

        rows: list[list[Any] | None] = []
        for raw_row in raw_data:
            row = [self.codec.decode_calamine_value(value) for value in raw_row]
            # calamine pads missing rows with empty cells, so a row of blanks
            # is the closest available signal for an absent row
            rows.append(None if all(value is None for value in row) else row)

        logger.debug(
            "Read %d rows from sheet %r of %s",
            len(rows),
            target_sheet_name,
            file_path,
        )

        return SheetData(sheet_name=target_sheet_name, rows=rows)
