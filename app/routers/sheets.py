# =============================================================================
# app/routers/sheets.py - Sheet Import and Column Endpoints
# =============================================================================
# Upload a CSV/Excel file, inspect its columns, validate an axis selection
# and fetch the resulting points.
# =============================================================================

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, File, Path, Query, UploadFile
from pydantic import BaseModel, Field

from app.dependencies import SheetStoreDep
from core.models import (
    ChartDataPoint,
    ColumnInfo,
    SheetFile,
    SheetSummary,
    ValidationReason,
)
from core.services.chart_service import ChartService
from core.services.import_service import ImportService
from lib.profiler import preview_column

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class SelectionRequest(BaseModel):
    """An (x, y) column pair. Indices are not range-checked here."""
    x_column: int = Field(..., examples=[0], description="Zero-based x-axis column")
    y_column: int = Field(..., examples=[1], description="Zero-based y-axis column")


class SelectionResponse(BaseModel):
    """Validation outcome for a selection."""
    valid: bool
    reason: ValidationReason | None = None
    message: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"valid": True, "reason": None, "message": None},
                {
                    "valid": False,
                    "reason": "y_axis_not_numeric",
                    "message": "Y-axis must contain numeric data",
                },
            ]
        }
    }


class ColumnsResponse(BaseModel):
    sheet_id: UUID
    columns: list[ColumnInfo]


class PreviewResponse(BaseModel):
    column_index: int
    values: list[str]


class PointsResponse(BaseModel):
    x_column: int
    y_column: int
    count: int
    points: list[ChartDataPoint]


# =============================================================================
# Endpoints
# =============================================================================

@router.post("", response_model=SheetSummary, status_code=201)
async def upload_sheet(
    file: Annotated[UploadFile, File(description="CSV or Excel file to import")],
    store: SheetStoreDep,
):
    """
    Import a file as a new sheet.

    This endpoint:
    1. Checks the extension (.csv, .xlsx, .xls) and size
    2. Parses the file into rows of text cells
    3. Stores the sheet

    Returns the sheet summary (no cell data).
    """
    filename = file.filename or "data.csv"
    content = await file.read()

    sheet = ImportService.import_file(content, filename)
    store.save_sheet(sheet)

    return sheet.to_summary()


@router.get("", response_model=list[SheetSummary])
async def list_sheets(store: SheetStoreDep):
    """List imported sheets, newest first."""
    return [sheet.to_summary() for sheet in store.list_sheets()]


@router.get("/{sheet_id}", response_model=SheetFile)
async def get_sheet(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    store: SheetStoreDep,
):
    """Get a sheet including all of its rows."""
    return store.get_sheet(sheet_id)


@router.delete("/{sheet_id}", status_code=204)
async def delete_sheet(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    store: SheetStoreDep,
):
    """Delete a sheet and all of its charts."""
    store.delete_sheet(sheet_id)


@router.get("/{sheet_id}/columns", response_model=ColumnsResponse)
async def get_columns(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    store: SheetStoreDep,
    max_items: Annotated[int | None, Query(ge=1, le=100)] = None,
):
    """
    Describe every column for an axis picker.

    Includes the inferred type, whether it can be a y-axis, and a short
    preview of its values.
    """
    sheet = store.get_sheet(sheet_id)
    return ColumnsResponse(
        sheet_id=sheet.id,
        columns=ChartService.describe_columns(sheet, max_items),
    )


@router.get("/{sheet_id}/columns/{column_index}/preview", response_model=PreviewResponse)
async def get_column_preview(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    column_index: Annotated[int, Path(description="Zero-based column index")],
    store: SheetStoreDep,
    max_items: Annotated[int, Query(ge=1, le=100)] = 5,
):
    """First non-empty values of one column. Empty for an unknown column."""
    sheet = store.get_sheet(sheet_id)
    return PreviewResponse(
        column_index=column_index,
        values=preview_column(sheet.data, column_index, max_items),
    )


@router.post("/{sheet_id}/validate", response_model=SelectionResponse)
async def validate_sheet_selection(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    selection: SelectionRequest,
    store: SheetStoreDep,
):
    """
    Check whether an (x, y) selection can produce a chart.

    An invalid selection is a normal answer (200), not an error.
    """
    sheet = store.get_sheet(sheet_id)
    outcome = ChartService.check_selection(sheet, selection.x_column, selection.y_column)
    return SelectionResponse(
        valid=outcome.is_valid,
        reason=outcome.reason,
        message=outcome.message,
    )


@router.get("/{sheet_id}/points", response_model=PointsResponse)
async def get_points(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    store: SheetStoreDep,
    x: Annotated[int, Query(description="Zero-based x-axis column")] = 0,
    y: Annotated[int, Query(description="Zero-based y-axis column")] = 1,
):
    """Extract plottable points for a column pair (rows that can't be plotted are skipped)."""
    sheet = store.get_sheet(sheet_id)
    points = ChartService.get_points(sheet, x, y)
    return PointsResponse(x_column=x, y_column=y, count=len(points), points=points)
