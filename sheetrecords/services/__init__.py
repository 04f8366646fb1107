"""
Service layer for record operations.

Contains the record rules for reading and writing spreadsheets, decoupled
from the engine adapters.
"""

from sheetrecords.services.record_service import RecordService, rows_to_records

__all__ = [
    "RecordService",
    "rows_to_records",
]
