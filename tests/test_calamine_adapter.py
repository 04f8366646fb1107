"""
Tests for the CalamineAdapter.

Tests reading with python-calamine. The fixtures are written by openpyxl
under a .xls name; calamine detects the workbook format from the content,
so the legacy read path is exercised without binary fixtures.
"""

from datetime import datetime
from pathlib import Path

import pytest

from sheetrecords.adapters.calamine_adapter import CalamineAdapter
from sheetrecords.exceptions.record_exceptions import (
    ReadError,
    SheetNotFoundError,
    UnsupportedFormatError,
)


@pytest.fixture
def plain_excel_file(build_workbook) -> Path:
    """Create a workbook without formulas or error cells."""
    return build_workbook(
        "plain.xls",
        {
            "Users": [
                ["Name", "Age", "Joined", "Active"],
                ["Alice", 30, datetime(2024, 1, 15, 9, 30), True],
                None,
                ["Bob", 25.5, datetime(2023, 6, 1, 18, 0), False],
            ],
            "Empty": [],
        },
    )


class TestCalamineAdapterFileValidation:
    """Tests for file validation in CalamineAdapter."""

    def test_file_not_found_propagates(
        self,
        calamine_adapter: CalamineAdapter,
        temp_dir: Path,
    ) -> None:
        """Test that a missing file raises the built-in FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            calamine_adapter.read_sheet(str(temp_dir / "missing.xls"))

    @pytest.mark.parametrize("file_name", ["test.txt", "test.xlsx"])
    def test_invalid_extension_raises_error(
        self,
        calamine_adapter: CalamineAdapter,
        temp_dir: Path,
        file_name: str,
    ) -> None:
        """Test that only .xls paths are accepted."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            calamine_adapter.read_sheet(str(temp_dir / file_name))

        assert exc_info.value.error_code == "UNSUPPORTED_FORMAT"
        assert exc_info.value.expected_formats == [".xls"]

    def test_corrupt_file_raises_read_error(
        self,
        calamine_adapter: CalamineAdapter,
        temp_dir: Path,
    ) -> None:
        """Test that an unparseable file raises ReadError."""
        corrupt_file = temp_dir / "corrupt.xls"
        corrupt_file.write_bytes(b"not a workbook at all")

        with pytest.raises(ReadError) as exc_info:
            calamine_adapter.read_sheet(str(corrupt_file))

        assert exc_info.value.operation == "open"


class TestCalamineAdapterSheetOperations:
    """Tests for sheet selection in CalamineAdapter."""

    def test_read_first_sheet_by_default(
        self,
        calamine_adapter: CalamineAdapter,
        plain_excel_file: Path,
    ) -> None:
        """Test that first sheet is read when no sheet is specified."""
        data = calamine_adapter.read_sheet(str(plain_excel_file))

        assert data.sheet_name == "Users"
        assert data.rows[0] == ["Name", "Age", "Joined", "Active"]

    def test_read_sheet_by_index(
        self,
        calamine_adapter: CalamineAdapter,
        plain_excel_file: Path,
    ) -> None:
        """Test reading the second sheet by index."""
        data = calamine_adapter.read_sheet(str(plain_excel_file), sheet_index=1)

        assert data.sheet_name == "Empty"

    def test_sheet_not_found_raises_error(
        self,
        calamine_adapter: CalamineAdapter,
        plain_excel_file: Path,
    ) -> None:
        """Test that reading a non-existent sheet raises SheetNotFoundError."""
        with pytest.raises(SheetNotFoundError) as exc_info:
            calamine_adapter.read_sheet(str(plain_excel_file), sheet_name="NonExistent")

        assert "NonExistent" in exc_info.value.message
        assert exc_info.value.available_sheets == ["Users", "Empty"]

    def test_sheet_index_out_of_range(
        self,
        calamine_adapter: CalamineAdapter,
        plain_excel_file: Path,
    ) -> None:
        """Test that an out-of-range index raises SheetNotFoundError."""
        with pytest.raises(SheetNotFoundError) as exc_info:
            calamine_adapter.read_sheet(str(plain_excel_file), sheet_index=5)

        assert exc_info.value.sheet == 5


class TestCalamineAdapterReadOperations:
    """Tests for decoded values in CalamineAdapter."""

    def test_decoded_values(
        self,
        calamine_adapter: CalamineAdapter,
        plain_excel_file: Path,
    ) -> None:
        """Test that values decode to floats, booleans and datetimes."""
        data = calamine_adapter.read_sheet(str(plain_excel_file))

        assert data.rows[1] == ["Alice", 30.0, datetime(2024, 1, 15, 9, 30), True]
        assert data.rows[3] == ["Bob", 25.5, datetime(2023, 6, 1, 18, 0), False]

    def test_empty_row_is_absent(
        self,
        calamine_adapter: CalamineAdapter,
        plain_excel_file: Path,
    ) -> None:
        """Test that a row of empty cells is reported as an absent row."""
        data = calamine_adapter.read_sheet(str(plain_excel_file))

        assert data.rows[2] is None

    def test_leading_empty_row_is_kept(
        self,
        calamine_adapter: CalamineAdapter,
        build_workbook,
    ) -> None:
        """Test that reading starts at A1 even when the first row is empty."""
        file_path = build_workbook(
            "late_header.xls",
            {"Data": [None, ["A", "B"], ["x", "y"]]},
        )

        data = calamine_adapter.read_sheet(str(file_path))

        assert data.rows[0] is None
        assert data.rows[1] == ["A", "B"]
