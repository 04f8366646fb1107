"""
XlsxWriter adapter for record writing.

This module provides the XlsxWriterAdapter class that wraps XlsxWriter
for writing records as a single styled sheet. The workbook is always
produced in the .xlsx package format, whatever the destination extension.

The whole workbook is first built in memory; the destination file is only
opened once the workbook bytes exist, so a failed build never leaves a
partial file on disk.

Example:
    adapter = XlsxWriterAdapter()
    adapter.write_records(
        "/path/to/output.xlsx",
        header_map={"name": "Name", "age": "Age"},
        records=[{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}],
        sheet_name="Users",
    )
"""

import io
import logging
from pathlib import Path
from typing import Any

import xlsxwriter
from xlsxwriter.exceptions import XlsxWriterException

from sheetrecords.codec.cell_codec import CellCodec
from sheetrecords.exceptions.record_exceptions import WriteError
from sheetrecords.resources import release

logger = logging.getLogger(__name__)


class XlsxWriterAdapter:
    """
    Adapter for XlsxWriter write operations.

    Attributes:
        WORKBOOK_OPTIONS: Options passed to every XlsxWriter workbook.
        STATUS_REASONS: Messages for negative write_* return codes.
        codec: CellCodec used to encode values.
    """

    WORKBOOK_OPTIONS = {
        "in_memory": True,
        # NaN/inf become #NUM!/#DIV/0! instead of raising
        "nan_inf_to_errors": True,
    }

    STATUS_REASONS = {
        -1: "outside the worksheet limits",
        -2: "string longer than 32767 characters",
    }

    def __init__(self, codec: CellCodec | None = None) -> None:
        """
        Initialize the XlsxWriterAdapter.

        Args:
            codec: Optional CellCodec instance. If None, creates a new instance.
        """
        self.codec = codec or CellCodec()

    def _check_status(self, file_path: str, status: int, row: int, col: int) -> None:
        """
        Raise WriteError for a negative XlsxWriter write status.

        XlsxWriter reports a dropped or truncated cell through the return
        value of its write_* calls instead of raising.
        """
        if status < 0:
            reason = self.STATUS_REASONS.get(status, f"status {status}")
            raise WriteError(
                file_path=file_path,
                reason=f"cell at row {row}, column {col}: {reason}",
            )

    def _build_workbook(
        self,
        file_path: str,
        sheet_name: str,
        header_map: dict[str, str],
        records: list[dict[str, Any]],
    ) -> bytes:
        """
        Build the workbook in memory and return its bytes.

        Args:
            file_path: Destination path, for error reporting.
            sheet_name: Name of the single sheet.
            header_map: Ordered mapping of record key to column label.
            records: Records to write.

        Returns:
            The serialized .xlsx workbook.

        Raises:
            WriteError: If XlsxWriter rejects the content.
        """
        buffer = io.BytesIO()
        workbook = xlsxwriter.Workbook(buffer, dict(self.WORKBOOK_OPTIONS))
        try:
            worksheet = workbook.add_worksheet(sheet_name)
            cell_format = workbook.add_format(
                self.codec.settings.cell_style.to_format_properties()
            )

            for col_idx, label in enumerate(header_map.values()):
                status = worksheet.write_string(0, col_idx, label, cell_format)
                self._check_status(file_path, status, 0, col_idx)

            keys = list(header_map.keys())
            for row_offset, record in enumerate(records):
                for col_idx, key in enumerate(keys):
                    status = self.codec.write_cell(
                        worksheet,
                        row_offset + 1,
                        col_idx,
                        record.get(key),
                        cell_format,
                    )
                    self._check_status(file_path, status, row_offset + 1, col_idx)

            workbook.close()
            workbook = None

            return buffer.getvalue()

        except XlsxWriterException as e:
            raise WriteError(file_path=file_path, reason=str(e)) from e
        finally:
            release(workbook, buffer)

    def write_records(
        self,
        file_path: str,
        header_map: dict[str, str],
        records: list[dict[str, Any]],
        sheet_name: str,
    ) -> dict[str, Any]:
        """
        Write records to an .xlsx file, overwriting any existing file.

        The header row holds the labels of header_map in its iteration order.
        Each record fills the next row, one column per header key; keys the
        record lacks produce blank cells. Every cell gets the configured style.

        Args:
            file_path: Path where the file will be written.
            header_map: Ordered mapping of record key to column label.
            records: Records to write.
            sheet_name: Name of the sheet.

        Returns:
            Dictionary containing:
                - file_path: Absolute path to the written file
                - rows_written: Number of data rows written
                - column_count: Number of columns written
                - file_size_bytes: Size of the file in bytes

        Raises:
            WriteError: If XlsxWriter rejects the content.
            OSError: If the destination cannot be written.
        """
        content = self._build_workbook(file_path, sheet_name, header_map, records)

        path = Path(file_path)
        file_handle = None
        try:
            file_handle = open(path, "wb")
            file_handle.write(content)
        finally:
            release(file_handle)

        logger.debug(
            "Wrote %d records to sheet %r of %s",
            len(records),
            sheet_name,
            file_path,
        )

        return {
            "file_path": str(path.absolute()),
            "rows_written": len(records),
            "column_count": len(header_map),
            "file_size_bytes": len(content),
        }
