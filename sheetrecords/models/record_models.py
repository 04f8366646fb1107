"""
Data models for record reading and writing.

Contains the value types produced by the cell codec and the Pydantic models
used for request/response validation and serialization.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


class CellError(str, Enum):
    """
    Spreadsheet error values.

    Error cells decode to one of these members instead of an engine-specific
    numeric code.
    """

    NULL = "#NULL!"
    DIV_ZERO = "#DIV/0!"
    VALUE = "#VALUE!"
    REF = "#REF!"
    NAME = "#NAME?"
    NUM = "#NUM!"
    NA = "#N/A"
    GETTING_DATA = "#GETTING_DATA"

    @classmethod
    def from_code(cls, code: str) -> "CellError | None":
        """Return the member for an error literal, or None if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None


class SheetFormat(str, Enum):
    """Workbook formats, keyed by file extension."""

    XLSX = ".xlsx"
    XLS = ".xls"


CellValue = Union[None, float, str, bool, datetime, CellError]
Record = dict[str, CellValue]
HeaderMapping = dict[str, str]


class SheetData(BaseModel):
    """
    Decoded rows from a single worksheet.

    Row 0 is the sheet's first row; no header handling is applied. A row
    the sheet does not store is None.

    Attributes:
        sheet_name: Name of the sheet.
        rows: Decoded cell values, one list per sheet row.
    """

    sheet_name: str = Field(description="Name of the sheet")
    rows: list[list[Any] | None] = Field(
        default_factory=list,
        description="Decoded cell values, one list per sheet row; None for absent rows",
    )


class ReadRecordsRequest(BaseModel):
    """
    Request model for reading records.

    When neither sheet_name nor sheet_index is given the first sheet is read.
    sheet_name takes precedence over sheet_index.

    Attributes:
        file_path: Path to the .xlsx or .xls file.
        sheet_name: Name of the sheet to read.
        sheet_index: 0-based index of the sheet to read.
    """

    file_path: str = Field(description="Path to the .xlsx or .xls file")
    sheet_name: str | None = Field(
        default=None,
        description="Name of the sheet to read",
    )
    sheet_index: int | None = Field(
        default=None,
        description="0-based index of the sheet to read",
    )


class ReadRecordsResponse(BaseModel):
    """
    Response model for record reads.

    Attributes:
        sheet_name: The sheet name that was requested, if any.
        records: One dictionary per data row, keyed by header text.
        record_count: Number of records.
        processing_time_ms: Time taken to process the request in milliseconds.
    """

    sheet_name: str | None = Field(
        default=None,
        description="The sheet name that was requested, if any",
    )
    records: list[dict[str, Any]] = Field(
        default_factory=list,
        description="One dictionary per data row, keyed by header text",
    )
    record_count: int = Field(default=0, ge=0, description="Number of records")
    processing_time_ms: float | None = Field(
        default=None,
        ge=0,
        description="Time taken to process the request in milliseconds",
    )


class WriteRecordsRequest(BaseModel):
    """
    Request model for writing records.

    Attributes:
        file_path: Destination path. The file is always written as .xlsx.
        sheet_name: Sheet name; the configured default is used when empty.
        header_map: Ordered mapping of record key to column label.
        records: Records to write, one row each.
    """

    file_path: str = Field(description="Destination path, always written as .xlsx")
    sheet_name: str | None = Field(
        default=None,
        description="Sheet name; the configured default is used when empty",
    )
    header_map: dict[str, str] = Field(
        description="Ordered mapping of record key to column label",
    )
    records: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Records to write, one row each",
    )


class WriteRecordsResponse(BaseModel):
    """
    Response model for record writes.

    Attributes:
        file_path: Absolute path of the written file.
        sheet_name: Name of the written sheet.
        rows_written: Number of data rows written, excluding the header.
        column_count: Number of columns written.
        file_size_bytes: Size of the written file in bytes.
        processing_time_ms: Time taken to process the request in milliseconds.
    """

    file_path: str = Field(description="Absolute path of the written file")
    sheet_name: str = Field(description="Name of the written sheet")
    rows_written: int = Field(ge=0, description="Number of data rows written")
    column_count: int = Field(ge=0, description="Number of columns written")
    file_size_bytes: int | None = Field(
        default=None,
        ge=0,
        description="Size of the written file in bytes",
    )
    processing_time_ms: float | None = Field(
        default=None,
        ge=0,
        description="Time taken to process the request in milliseconds",
    )
