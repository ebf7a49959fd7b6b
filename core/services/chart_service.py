# =============================================================================
# core/services/chart_service.py - Chart Business Logic
# =============================================================================
# Connects stored sheets to the pure pipeline in lib/:
#   inference -> column picker info
#   validation -> gate for saving chart configurations
#   extraction -> points for rendering
#
# Inference is recomputed from the grid on every call; nothing derived is
# cached on the stored records.
# =============================================================================

import logging
from uuid import UUID

from app.config import settings
from app.exceptions import InvalidSelectionError
from core.models import (
    ChartConfiguration,
    ChartConfigurationCreate,
    ChartConfigurationUpdate,
    ChartDataPoint,
    ChartView,
    ColumnInfo,
    SheetFile,
    ValidationOutcome,
    default_chart_name,
)
from core.services.storage_service import SheetStore
from lib.charting import extract_points, validate_selection
from lib.profiler import (
    column_type_description,
    infer_column_types,
    is_column_valid_for_y_axis,
    preview_column,
)

logger = logging.getLogger(__name__)

CLEARABLE_FIELDS = {"x_axis_label", "y_axis_label"}


class ChartService:
    """
    Service for column analysis and chart configuration management.

    Takes the SheetStore explicitly so callers decide where records live.
    """

    # -------------------------------------------------------------------------
    # Pipeline wrappers
    # -------------------------------------------------------------------------

    @staticmethod
    def describe_columns(sheet: SheetFile, max_items: int | None = None) -> list[ColumnInfo]:
        """Names, inferred types and previews for every header column."""
        max_items = max_items or settings.PREVIEW_MAX_ITEMS
        inference = infer_column_types(sheet.data)

        return [
            ColumnInfo(
                index=index,
                name=name,
                column_type=inference.column_types[index],
                type_description=column_type_description(inference.column_types, index),
                valid_for_y_axis=is_column_valid_for_y_axis(inference.column_types, index),
                preview=preview_column(sheet.data, index, max_items),
            )
            for index, name in enumerate(inference.column_names)
        ]

    @staticmethod
    def check_selection(sheet: SheetFile, x_column: int, y_column: int) -> ValidationOutcome:
        """Validate an (x, y) selection against a sheet."""
        inference = infer_column_types(sheet.data)
        return validate_selection(
            sheet.data,
            inference.column_names,
            inference.column_types,
            x_column,
            y_column,
        )

    @staticmethod
    def get_points(sheet: SheetFile, x_column: int, y_column: int) -> list[ChartDataPoint]:
        return extract_points(sheet.data, x_column, y_column)

    @staticmethod
    def _require_valid(sheet: SheetFile, x_column: int, y_column: int) -> None:
        outcome = ChartService.check_selection(sheet, x_column, y_column)
        if not outcome.is_valid:
            logger.info(
                f"Rejected selection x={x_column}, y={y_column} on sheet {sheet.id}: "
                f"{outcome.reason.value}"
            )
            raise InvalidSelectionError(outcome.reason.value, outcome.message, x_column, y_column)

    # -------------------------------------------------------------------------
    # Chart configurations
    # -------------------------------------------------------------------------

    @staticmethod
    def create_chart(
        store: SheetStore,
        sheet_id: str | UUID,
        request: ChartConfigurationCreate,
    ) -> ChartConfiguration:
        """
        Save a new chart if its selection validates.

        Raises:
            SheetNotFoundError: If the sheet is not stored
            InvalidSelectionError: If the selection cannot produce a chart
        """
        sheet = store.get_sheet(sheet_id)
        ChartService._require_valid(sheet, request.x_column, request.y_column)

        name = (request.name or "").strip() or default_chart_name(request.chart_type)
        chart = ChartConfiguration(
            sheet_id=sheet.id,
            name=name,
            **request.model_dump(exclude={"name"}),
        )
        store.save_chart(chart)

        logger.info(f"Created chart {chart.id} ({chart.chart_type.value}) on sheet {sheet.id}")
        return chart

    @staticmethod
    def update_chart(
        store: SheetStore,
        sheet_id: str | UUID,
        chart_id: str | UUID,
        update: ChartConfigurationUpdate,
    ) -> ChartConfiguration:
        """
        Apply a partial update. The resulting selection must still validate.

        Raises:
            SheetNotFoundError, ChartNotFoundError, InvalidSelectionError
        """
        sheet = store.get_sheet(sheet_id)
        existing = store.get_chart(sheet_id, chart_id)

        # Only the axis labels can be cleared with an explicit null
        changes = {
            field: value
            for field, value in update.model_dump(exclude_unset=True).items()
            if value is not None or field in CLEARABLE_FIELDS
        }
        merged = ChartConfiguration.model_validate({**existing.model_dump(), **changes})

        if merged.x_column != existing.x_column or merged.y_column != existing.y_column:
            ChartService._require_valid(sheet, merged.x_column, merged.y_column)

        store.save_chart(merged)
        logger.info(f"Updated chart {merged.id}: {sorted(changes)}")
        return merged

    @staticmethod
    def build_view(
        store: SheetStore,
        sheet_id: str | UUID,
        chart_id: str | UUID,
    ) -> ChartView:
        """Chart configuration plus its extracted points and resolved axis labels."""
        sheet = store.get_sheet(sheet_id)
        chart = store.get_chart(sheet_id, chart_id)

        outcome = ChartService.check_selection(sheet, chart.x_column, chart.y_column)
        points = ChartService.get_points(sheet, chart.x_column, chart.y_column) if outcome.is_valid else []

        names = sheet.column_names
        x_name = names[chart.x_column] if chart.x_column < len(names) else ""
        y_name = names[chart.y_column] if chart.y_column < len(names) else ""

        return ChartView(
            chart=chart,
            outcome=outcome,
            x_axis_label=chart.x_axis_label or x_name,
            y_axis_label=chart.y_axis_label or y_name,
            points=points,
        )
