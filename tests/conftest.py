"""
Test fixtures and utilities for the sheet-records tests.

This module provides shared fixtures including temporary files,
workbook builders, and service instances.
"""

import tempfile
from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from sheetrecords.adapters.calamine_adapter import CalamineAdapter
from sheetrecords.adapters.openpyxl_adapter import OpenpyxlAdapter
from sheetrecords.adapters.xlsxwriter_adapter import XlsxWriterAdapter
from sheetrecords.codec.cell_codec import CellCodec
from sheetrecords.services.record_service import RecordService

WorkbookBuilder = Callable[[str, dict[str, list[list[Any] | None]]], Path]


@pytest.fixture
def record_service() -> RecordService:
    """
    Create a RecordService instance for testing.

    Returns:
        RecordService instance.
    """
    return RecordService()


@pytest.fixture
def cell_codec() -> CellCodec:
    """Create a CellCodec with default settings."""
    return CellCodec()


@pytest.fixture
def openpyxl_adapter() -> OpenpyxlAdapter:
    """Create an OpenpyxlAdapter instance for testing."""
    return OpenpyxlAdapter()


@pytest.fixture
def calamine_adapter() -> CalamineAdapter:
    """Create a CalamineAdapter instance for testing."""
    return CalamineAdapter()


@pytest.fixture
def xlsxwriter_adapter() -> XlsxWriterAdapter:
    """Create an XlsxWriterAdapter instance for testing."""
    return XlsxWriterAdapter()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def build_workbook(temp_dir: Path) -> WorkbookBuilder:
    """
    Return a function that writes a workbook with openpyxl.

    The content is always the .xlsx package format, whatever the file name.

    The function takes a file name and a mapping of sheet name to rows.
    A row of None leaves the whole sheet row empty; a None inside a row
    leaves that cell empty. Sheets are created in mapping order.
    """

    def _build(file_name: str, sheets: dict[str, list[list[Any] | None]]) -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)

        for sheet_name, rows in sheets.items():
            worksheet = workbook.create_sheet(sheet_name)
            for row_idx, row in enumerate(rows, start=1):
                if row is None:
                    continue
                for col_idx, value in enumerate(row, start=1):
                    if value is not None:
                        worksheet.cell(row=row_idx, column=col_idx, value=value)

        file_path = temp_dir / file_name
        workbook.save(str(file_path))
        return file_path

    return _build


@pytest.fixture
def sample_excel_file(build_workbook: WorkbookBuilder) -> Path:
    """
    Create a two-sheet workbook covering every cell kind.

    Returns:
        Path to the sample Excel file.
    """
    return build_workbook(
        "sample.xlsx",
        {
            "Users": [
                ["Name", "Age", "Joined", "Active", "Score", "Check"],
                ["Alice", 30, datetime(2024, 1, 15, 9, 30), True, "=SUM(1,2)", "#DIV/0!"],
                ["Bob", 25.5, datetime(2023, 6, 1), False, "=B3*2", "#N/A"],
            ],
            "Products": [
                ["Name", "Price"],
                ["Widget", 10.99],
                ["Gadget", 24.99],
            ],
        },
    )


@pytest.fixture
def header_map() -> dict[str, str]:
    """Return an ordered header mapping for write tests."""
    return {
        "name": "Name",
        "age": "Age",
        "department": "Department",
    }


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """
    Return sample records for write tests.

    Returns:
        List of records keyed by internal field name.
    """
    return [
        {"name": "Alice", "age": 30, "department": "Engineering"},
        {"name": "Bob", "age": 25, "department": "Marketing"},
        {"name": "Charlie", "age": 35.5, "department": "Sales"},
    ]
