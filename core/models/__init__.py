# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - grid.py: Grid shape, column types, validation outcomes, chart points
# - sheet.py: Imported sheet record (produced by the import pipeline)
# - chart.py: Chart configuration record, colour encoding, picker views
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Grid Models - Pipeline values
# -----------------------------------------------------------------------------
from .grid import (
    ChartDataPoint,
    ColumnType,
    Grid,
    InferenceResult,
    ValidationOutcome,
    ValidationReason,
    deserialize_grid,
    serialize_grid,
)

# -----------------------------------------------------------------------------
# Sheet Models - Imported files
# -----------------------------------------------------------------------------
from .sheet import (
    TITLE_MAX_LENGTH,
    SheetFile,
    SheetSummary,
)

# -----------------------------------------------------------------------------
# Chart Models - Saved chart configurations
# -----------------------------------------------------------------------------
from .chart import (
    DEFAULT_CHART_COLOR,
    ChartConfiguration,
    ChartConfigurationCreate,
    ChartConfigurationUpdate,
    ChartType,
    ChartView,
    ColumnInfo,
    RGBColor,
    default_chart_name,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Grid
    "ChartDataPoint",
    "ColumnType",
    "Grid",
    "InferenceResult",
    "ValidationOutcome",
    "ValidationReason",
    "deserialize_grid",
    "serialize_grid",
    # Sheet
    "SheetFile",
    "SheetSummary",
    "TITLE_MAX_LENGTH",
    # Chart
    "DEFAULT_CHART_COLOR",
    "ChartConfiguration",
    "ChartConfigurationCreate",
    "ChartConfigurationUpdate",
    "ChartType",
    "ChartView",
    "ColumnInfo",
    "RGBColor",
    "default_chart_name",
]
