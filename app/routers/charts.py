# =============================================================================
# app/routers/charts.py - Chart Configuration Endpoints
# =============================================================================
# Save, edit and render charts drawn from an imported sheet.
# A chart can only be saved when its column selection validates.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import SheetStoreDep
from core.models import (
    ChartConfiguration,
    ChartConfigurationCreate,
    ChartConfigurationUpdate,
    ChartView,
)
from core.services.chart_service import ChartService

router = APIRouter()


@router.post("/{sheet_id}/charts", response_model=ChartConfiguration, status_code=201)
async def create_chart(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    request: ChartConfigurationCreate,
    store: SheetStoreDep,
):
    """
    Save a new chart configuration.

    Returns 400 INVALID_SELECTION (with the reason) if the x/y columns
    cannot produce a chart.
    """
    return ChartService.create_chart(store, sheet_id, request)


@router.get("/{sheet_id}/charts", response_model=list[ChartConfiguration])
async def list_charts(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    store: SheetStoreDep,
):
    """List a sheet's charts, oldest first."""
    return store.list_charts(sheet_id)


@router.get("/{sheet_id}/charts/{chart_id}", response_model=ChartConfiguration)
async def get_chart(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    chart_id: Annotated[UUID, Path(description="Chart UUID")],
    store: SheetStoreDep,
):
    return store.get_chart(sheet_id, chart_id)


@router.put("/{sheet_id}/charts/{chart_id}", response_model=ChartConfiguration)
async def update_chart(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    chart_id: Annotated[UUID, Path(description="Chart UUID")],
    update: ChartConfigurationUpdate,
    store: SheetStoreDep,
):
    """Update a chart. Changing the columns re-validates the selection."""
    return ChartService.update_chart(store, sheet_id, chart_id, update)


@router.delete("/{sheet_id}/charts/{chart_id}", status_code=204)
async def delete_chart(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    chart_id: Annotated[UUID, Path(description="Chart UUID")],
    store: SheetStoreDep,
):
    store.delete_chart(sheet_id, chart_id)


@router.get("/{sheet_id}/charts/{chart_id}/data", response_model=ChartView)
async def get_chart_data(
    sheet_id: Annotated[UUID, Path(description="Sheet UUID")],
    chart_id: Annotated[UUID, Path(description="Chart UUID")],
    store: SheetStoreDep,
):
    """
    Everything needed to draw a chart: its configuration, resolved axis
    labels and the extracted points.
    """
    return ChartService.build_view(store, sheet_id, chart_id)
