"""
Core record service layer.

This module provides the RecordService class, the single entry point for
reading spreadsheet rows as records and writing records back out. It picks
the engine adapter for a file from its extension and applies the record
rules on top of the decoded rows:

    - the first sheet row is the header; without it there are no records
    - rows the sheet does not store are skipped, later rows are still read
    - a column whose header cell is blank is left out of every record
    - a sheet requested by name that does not exist yields no records

Example:
    service = RecordService()

    records = service.read_excel("/path/to/file.xlsx", sheet_name="Users")

    service.write_excel(
        "/path/to/output.xlsx",
        header_map={"name": "Name", "age": "Age"},
        records=[{"name": "Alice", "age": 30}],
    )
"""

import logging
import os
import time
from pathlib import Path
from typing import Any

from sheetrecords.adapters.calamine_adapter import CalamineAdapter
from sheetrecords.adapters.openpyxl_adapter import OpenpyxlAdapter
from sheetrecords.adapters.xlsxwriter_adapter import XlsxWriterAdapter
from sheetrecords.codec.cell_codec import CellCodec
from sheetrecords.config import Settings, settings as default_settings
from sheetrecords.exceptions.record_exceptions import (
    InvalidArgumentError,
    SheetNotFoundError,
    UnsupportedFormatError,
)
from sheetrecords.models.record_models import (
    CellError,
    ReadRecordsRequest,
    ReadRecordsResponse,
    Record,
    SheetFormat,
    WriteRecordsRequest,
    WriteRecordsResponse,
)

logger = logging.getLogger(__name__)


def _is_blank(value: str | os.PathLike | None) -> bool:
    return value is None or os.fspath(value) == ""


def _header_text(value: Any) -> str:
    if isinstance(value, CellError):
        return value.value
    return str(value)


def rows_to_records(rows: list[list[Any] | None]) -> list[Record]:
    """
    Turn decoded sheet rows into header-keyed records.

    An absent row (None) is skipped. A stored row whose cells are all blank
    still yields a record, with None for every column.

    Args:
        rows: Decoded rows, starting with the sheet's first row.

    Returns:
        One record per stored data row, in sheet order.
    """
    if not rows or rows[0] is None or all(value is None for value in rows[0]):
        return []

    header = [None if value is None else _header_text(value) for value in rows[0]]

    records: list[Record] = []
    for row in rows[1:]:
        if row is None:
            continue

        record: Record = {}
        for col_idx, value in enumerate(row):
            if col_idx >= len(header) or header[col_idx] is None:
                continue
            record[header[col_idx]] = value
        records.append(record)

    return records


class RecordService:
    """
    Core service layer for record operations.

    The service uses:
        - OpenpyxlAdapter: for .xlsx reading
        - CalamineAdapter: for legacy .xls reading
        - XlsxWriterAdapter: for writing, always as .xlsx

    Attributes:
        settings: Settings shared with the codec.
        xlsx_adapter: OpenpyxlAdapter instance for .xlsx reads.
        xls_adapter: CalamineAdapter instance for .xls reads.
        write_adapter: XlsxWriterAdapter instance for writes.

    Example:
        service = RecordService()

        for record in service.read_excel("/path/to/file.xls", sheet_index=1):
            print(record)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        xlsx_adapter: OpenpyxlAdapter | None = None,
        xls_adapter: CalamineAdapter | None = None,
        write_adapter: XlsxWriterAdapter | None = None,
    ) -> None:
        """
        Initialize the RecordService.

        Args:
            settings: Optional settings. If None, the package defaults are used.
            xlsx_adapter: Optional OpenpyxlAdapter instance.
                         If None, creates a new instance.
            xls_adapter: Optional CalamineAdapter instance.
                        If None, creates a new instance.
            write_adapter: Optional XlsxWriterAdapter instance.
                          If None, creates a new instance.
        """
        self.settings = settings or default_settings
        codec = CellCodec(self.settings)
        self.xlsx_adapter = xlsx_adapter or OpenpyxlAdapter(codec)
        self.xls_adapter = xls_adapter or CalamineAdapter(codec)
        self.write_adapter = write_adapter or XlsxWriterAdapter(codec)

    def _resolve_format(self, file_path: str) -> SheetFormat:
        suffix = Path(file_path).suffix.lower()
        for sheet_format in SheetFormat:
            if suffix == sheet_format.value:
                return sheet_format
        raise UnsupportedFormatError(
            file_path=file_path,
            expected_formats=[sheet_format.value for sheet_format in SheetFormat],
        )

    def read_excel(
        self,
        file_path: str | os.PathLike,
        sheet_name: str | None = None,
        sheet_index: int | None = None,
    ) -> list[Record]:
        """
        Read a sheet as a list of records.

        The first sheet is read unless a sheet is selected. A sheet_name
        takes precedence over sheet_index.

        Args:
            file_path: Path to a .xlsx or .xls file.
            sheet_name: Name of the sheet to read. An unknown name gives [].
            sheet_index: 0-based index of the sheet to read.

        Returns:
            One record per stored data row, keyed by header text.

        Raises:
            InvalidArgumentError: If file_path is empty, or sheet_name is "".
            UnsupportedFormatError: If the extension is neither .xlsx nor .xls.
            SheetNotFoundError: If sheet_index is out of range.
            ReadError: If the workbook cannot be parsed.
            OSError: If the file cannot be opened.
        """
        if _is_blank(file_path):
            raise InvalidArgumentError("file_path")
        if sheet_name == "":
            raise InvalidArgumentError("sheet_name")

        file_path = os.fspath(file_path)
        sheet_format = self._resolve_format(file_path)
        adapter = self.xls_adapter if sheet_format is SheetFormat.XLS else self.xlsx_adapter

        try:
            sheet_data = adapter.read_sheet(
                file_path=file_path,
                sheet_name=sheet_name,
                sheet_index=sheet_index,
            )
        except SheetNotFoundError:
            if sheet_name is None:
                raise
            logger.debug("Sheet %r not found in %s, returning no records", sheet_name, file_path)
            return []

        return rows_to_records(sheet_data.rows)

    def write_excel(
        self,
        file_path: str | os.PathLike,
        header_map: dict[str, str],
        records: list[dict[str, Any]],
        sheet_name: str | None = None,
    ) -> WriteRecordsResponse:
        """
        Write records to a single-sheet .xlsx file.

        The file is written in the .xlsx format whatever its extension, and
        replaces any existing file.

        Args:
            file_path: Destination path.
            header_map: Ordered mapping of record key to column label. Its
                order is the column order.
            records: Records to write, one row each.
            sheet_name: Sheet name. Empty or None uses the configured default.

        Returns:
            WriteRecordsResponse describing the written file.

        Raises:
            InvalidArgumentError: If file_path or header_map is empty.
            WriteError: If XlsxWriter rejects the content.
            OSError: If the destination cannot be written.
        """
        start_time = time.time()

        if _is_blank(file_path):
            raise InvalidArgumentError("file_path")
        if not header_map:
            raise InvalidArgumentError("header_map")
        if not sheet_name:
            sheet_name = self.settings.default_sheet_name

        file_path = os.fspath(file_path)
        result = self.write_adapter.write_records(
            file_path=file_path,
            header_map=header_map,
            records=records or [],
            sheet_name=sheet_name,
        )

        processing_time = (time.time() - start_time) * 1000

        return WriteRecordsResponse(
            file_path=result["file_path"],
            sheet_name=sheet_name,
            rows_written=result["rows_written"],
            column_count=result["column_count"],
            file_size_bytes=result["file_size_bytes"],
            processing_time_ms=round(processing_time, 2),
        )

    def read(self, request: ReadRecordsRequest) -> ReadRecordsResponse:
        """
        Read records described by a request model.

        Args:
            request: ReadRecordsRequest containing the read parameters.

        Returns:
            ReadRecordsResponse containing the records.
        """
        start_time = time.time()

        records = self.read_excel(
            request.file_path,
            sheet_name=request.sheet_name,
            sheet_index=request.sheet_index,
        )

        processing_time = (time.time() - start_time) * 1000

        return ReadRecordsResponse(
            sheet_name=request.sheet_name,
            records=records,
            record_count=len(records),
            processing_time_ms=round(processing_time, 2),
        )

    def write(self, request: WriteRecordsRequest) -> WriteRecordsResponse:
        """
        Write records described by a request model.

        Args:
            request: WriteRecordsRequest containing the write parameters.

        Returns:
            WriteRecordsResponse describing the written file.
        """
        return self.write_excel(
            request.file_path,
            header_map=request.header_map,
            records=request.records,
            sheet_name=request.sheet_name,
        )
