"""
Custom exceptions for spreadsheet record operations.

This module defines a hierarchy of exceptions for the failure modes of
reading and writing records. All exceptions inherit from SheetRecordsError
for consistent error handling. Operating system errors (missing files,
permissions) are not wrapped and reach the caller unchanged.

Example:
    try:
        service.read_excel("report.csv")
    except UnsupportedFormatError as e:
        logger.error(f"Format error: {e.file_path}")
    except SheetRecordsError as e:
        logger.error(f"General error: {e}")
"""


class SheetRecordsError(Exception):
    """
    Base exception for all sheet-records errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Optional additional context about the error.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "SHEET_RECORDS_ERROR",
        details: dict | None = None,
    ) -> None:
        """
        Initialize the SheetRecordsError.

        Args:
            message: Human-readable error description.
            error_code: Machine-readable error code.
            details: Optional additional context about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict:
        """
        Convert exception to a dictionary.

        Returns:
            Dictionary containing error_code, message, and details.
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(SheetRecordsError, ValueError):
    """
    Raised when a required argument is missing or empty.

    Always raised before any file is opened.

    Attributes:
        argument: Name of the offending argument.
    """

    def __init__(self, argument: str, reason: str = "is None/empty") -> None:
        self.argument = argument
        super().__init__(
            message=f"{argument} {reason}",
            error_code="INVALID_ARGUMENT",
            details={"argument": argument},
        )


class UnsupportedFormatError(SheetRecordsError):
    """
    Raised when a file's extension matches no supported workbook format.

    The check looks at the extension only; the file is never opened.

    Attributes:
        file_path: Path that was rejected.
        expected_formats: List of accepted extensions.
    """

    def __init__(
        self,
        file_path: str,
        expected_formats: list[str] | None = None,
    ) -> None:
        self.file_path = file_path
        self.expected_formats = expected_formats or [".xlsx", ".xls"]

        super().__init__(
            message=(
                f"Unsupported workbook format: {file_path}. "
                f"Expected one of: {', '.join(self.expected_formats)}"
            ),
            error_code="UNSUPPORTED_FORMAT",
            details={
                "file_path": file_path,
                "expected_formats": self.expected_formats,
            },
        )




class SheetNotFoundError(SheetRecordsError):
    """
    Raised when a sheet index is out of range or a sheet name is unknown.

    RecordService only lets the index case reach callers.

    Attributes:
        sheet: Requested sheet name, or 0-based sheet index.
        available_sheets: Sheet names in workbook order.
    """

    def __init__(self, sheet: str | int, available_sheets: list[str]) -> None:
        self.sheet = sheet
        self.available_sheets = available_sheets

        target = f"at index {sheet}" if isinstance(sheet, int) else f"named {sheet!r}"
        super().__init__(
            message=f"No sheet {target}; workbook has {len(available_sheets)} sheet(s)",
            error_code="SHEET_NOT_FOUND",
            details={"sheet": sheet, "available_sheets": available_sheets},
        )


class ReadError(SheetRecordsError):
    """
    Raised when openpyxl or calamine cannot parse a workbook.

    The engine exception is chained as __cause__.
    """

    def __init__(self, file_path: str, operation: str, reason: str) -> None:
        self.file_path = file_path
        self.operation = operation

        super().__init__(
            message=f"Cannot {operation} {file_path}: {reason}",
            error_code="READ_ERROR",
            details={"file_path": file_path, "operation": operation},
        )


class WriteError(SheetRecordsError):
    """
    Raised when XlsxWriter rejects a workbook or one of its cells.

    Nothing is written to the destination when this is raised.
    """

    def __init__(self, file_path: str, reason: str) -> None:
        self.file_path = file_path

        super().__init__(
            message=f"Cannot write {file_path}: {reason}",
            error_code="WRITE_ERROR",
            details={"file_path": file_path},
        )
