# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
#
# Selection problems (wrong column, non-numeric y-axis, ...) are NOT
# exceptions. They come back from lib/charting.py as a ValidationOutcome.
# InvalidSelectionError only wraps one when a caller insists on saving an
# invalid chart.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class PlotReadyException(Exception):
    """
    Base exception for PlotReady.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PLOTREADY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Import Exceptions
# =============================================================================

class UnsupportedFormatError(PlotReadyException):
    """Raised when a file extension has no matching format adapter."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Unsupported file type: {filename}",
            code="UNSUPPORTED_FORMAT",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(PlotReadyException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class FileReadError(PlotReadyException):
    """Raised when a file cannot be decoded or a workbook cannot be parsed."""

    def __init__(self, filename: str, error: str):
        super().__init__(
            message=f"Failed to read file: {error}",
            code="FILE_READ_ERROR",
            status_code=400,
            suggestion="Check that the file is a valid CSV (UTF-8 or Windows-1252) or Excel workbook",
            details={"filename": filename, "error": error}
        )


# =============================================================================
# Lookup Exceptions
# =============================================================================

class SheetNotFoundError(PlotReadyException):
    """Raised when a sheet ID doesn't exist."""

    def __init__(self, sheet_id: str):
        super().__init__(
            message=f"Sheet not found: {sheet_id}",
            code="SHEET_NOT_FOUND",
            status_code=404,
            suggestion="Check that the sheet_id is correct and the sheet hasn't been deleted",
            details={"sheet_id": sheet_id}
        )


class ChartNotFoundError(PlotReadyException):
    """Raised when a chart ID doesn't exist for the given sheet."""

    def __init__(self, sheet_id: str, chart_id: str):
        super().__init__(
            message=f"Chart not found: {chart_id}",
            code="CHART_NOT_FOUND",
            status_code=404,
            suggestion="List the sheet's charts with GET /sheets/{id}/charts",
            details={"sheet_id": sheet_id, "chart_id": chart_id}
        )


# =============================================================================
# Chart Exceptions
# =============================================================================

class InvalidSelectionError(PlotReadyException):
    """Raised when saving a chart whose column selection does not validate."""

    def __init__(self, reason: str, message: str, x_column: int, y_column: int):
        super().__init__(
            message=message,
            code="INVALID_SELECTION",
            status_code=400,
            suggestion="Pick a numeric Y-axis column and a different X-axis column "
                       "(see GET /sheets/{id}/columns)",
            details={"reason": reason, "x_column": x_column, "y_column": y_column}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def plotready_exception_handler(
    request: Request,
    exc: PlotReadyException
) -> JSONResponse:
    """
    Convert PlotReadyException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
