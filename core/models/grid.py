# =============================================================================
# core/models/grid.py - Grid, Column Type and Chart Point Schemas
# =============================================================================
# The shared data shapes for the ingestion -> inference -> validation ->
# extraction pipeline:
#
#   - Grid: rows of string cells, row 0 is the header (may be ragged)
#   - ColumnType / InferenceResult: output of lib/profiler.py
#   - ValidationReason / ValidationOutcome: output of lib/charting.py
#   - ChartDataPoint: one plottable (label, value) pair
#
# All of these are derived values. Nothing here holds a reference back into
# the Grid except the row index a point was read from.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field, TypeAdapter, model_validator


# A Grid is plain nested lists so it can be persisted as a JSON
# array-of-arrays and decoded back without any conversion step.
Grid = list[list[str]]

_grid_adapter = TypeAdapter(Grid)


def serialize_grid(grid: Grid) -> str:
    """Encode a Grid as a JSON array-of-arrays."""
    return _grid_adapter.dump_json(grid).decode("utf-8")


def deserialize_grid(payload: str | bytes) -> Grid:
    """
    Decode a JSON array-of-arrays back into a Grid.

    Raises:
        pydantic.ValidationError: If the payload is not a list of lists of strings
    """
    return _grid_adapter.validate_json(payload)


# =============================================================================
# Column Types
# =============================================================================

class ColumnType(str, Enum):
    """Inferred semantic category of a column's values."""
    NUMERIC = "numeric"            # >= 80% parse as numbers
    CATEGORICAL = "categorical"    # < 20% parse as numbers
    DATE = "date"                  # >= 80% look like dates
    UNKNOWN = "unknown"            # Empty or mixed

    @property
    def description(self) -> str:
        """User-facing label for the type."""
        return _TYPE_DESCRIPTIONS[self]


_TYPE_DESCRIPTIONS = {
    ColumnType.NUMERIC: "Numeric",
    ColumnType.CATEGORICAL: "Text",
    ColumnType.DATE: "Date",
    ColumnType.UNKNOWN: "Mixed/Unknown",
}


class InferenceResult(BaseModel):
    """
    Column names from the header row paired with their inferred types.

    Example:
        {
            "column_names": ["Month", "Sales"],
            "column_types": ["categorical", "numeric"]
        }
    """

    column_names: list[str] = Field(
        default_factory=list,
        description="Header row values, in column order"
    )

    column_types: list[ColumnType] = Field(
        default_factory=list,
        description="Inferred type for each header column"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_parallel(self) -> "InferenceResult":
        if len(self.column_names) != len(self.column_types):
            raise ValueError(
                f"column_names ({len(self.column_names)}) and column_types "
                f"({len(self.column_types)}) must have the same length"
            )
        return self

    @property
    def column_count(self) -> int:
        return len(self.column_names)


# =============================================================================
# Selection Validation
# =============================================================================

class ValidationReason(str, Enum):
    """Why a column selection cannot produce a chart."""
    EMPTY_DATA = "empty_data"
    INSUFFICIENT_ROWS = "insufficient_rows"
    INVALID_X_COLUMN = "invalid_x_column"
    INVALID_Y_COLUMN = "invalid_y_column"
    DUPLICATE_COLUMNS = "duplicate_columns"
    Y_AXIS_NOT_NUMERIC = "y_axis_not_numeric"
    NO_VALID_POINTS = "no_valid_points"
    INSUFFICIENT_POINTS = "insufficient_points"

    @property
    def message(self) -> str:
        """Human-readable explanation shown next to the selection controls."""
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    ValidationReason.EMPTY_DATA: "No data available",
    ValidationReason.INSUFFICIENT_ROWS: "Need at least one data row (plus header)",
    ValidationReason.INVALID_X_COLUMN: "Invalid X-axis column selection",
    ValidationReason.INVALID_Y_COLUMN: "Invalid Y-axis column selection",
    ValidationReason.DUPLICATE_COLUMNS: "X and Y axes must use different columns",
    ValidationReason.Y_AXIS_NOT_NUMERIC: "Y-axis must contain numeric data",
    ValidationReason.NO_VALID_POINTS: "No valid data points found",
    ValidationReason.INSUFFICIENT_POINTS: "Need at least 2 data points to create a chart",
}


class ValidationOutcome(BaseModel):
    """
    Result of validating an (x, y) column selection.

    Either valid (reason is None) or invalid with exactly one reason.
    Use the `valid()` / `invalid()` constructors rather than building
    the fields by hand.
    """

    reason: ValidationReason | None = Field(
        default=None,
        description="Why the selection is invalid (None when valid)"
    )

    model_config = {"frozen": True}

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def invalid(cls, reason: ValidationReason) -> "ValidationOutcome":
        return cls(reason=reason)

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str | None:
        return self.reason.message if self.reason else None


# =============================================================================
# Chart Data Points
# =============================================================================

class ChartDataPoint(BaseModel):
    """
    One plottable observation.

    Example:
        {"x_label": "Jan", "y_value": 100.0, "source_row_index": 1}
    """

    x_label: str = Field(..., description="Trimmed x-axis cell value")

    y_value: float = Field(
        ...,
        allow_inf_nan=False,
        description="Parsed y-axis value (always finite)"
    )

    source_row_index: int = Field(
        ...,
        ge=1,
        description="Grid row the point was read from (header is row 0)"
    )

    model_config = {"frozen": True}
