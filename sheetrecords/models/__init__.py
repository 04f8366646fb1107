"""
Data models for sheet-records.

Contains the codec value types and the Pydantic request/response models.
"""

from sheetrecords.models.record_models import (
    CellError,
    CellValue,
    HeaderMapping,
    ReadRecordsRequest,
    ReadRecordsResponse,
    Record,
    SheetData,
    SheetFormat,
    WriteRecordsRequest,
    WriteRecordsResponse,
)

__all__ = [
    "CellError",
    "CellValue",
    "HeaderMapping",
    "Record",
    "SheetData",
    "SheetFormat",
    "ReadRecordsRequest",
    "ReadRecordsResponse",
    "WriteRecordsRequest",
    "WriteRecordsResponse",
]
