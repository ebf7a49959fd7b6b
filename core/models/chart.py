# =============================================================================
# core/models/chart.py - Chart Configuration Schemas
# =============================================================================
# These models define the chart configuration record handed to the
# presentation layer:
# - ChartType: bar / line / scatter / area
# - RGBColor: structured colour <-> "#RRGGBB" string
# - ChartConfiguration: a saved chart over one sheet
# - ChartConfigurationCreate / ChartConfigurationUpdate: API inputs
# - ColumnInfo / ChartView: what axis pickers and renderers consume
#
# Only x_column / y_column are interpreted by the pipeline. Everything
# else is display customisation stored as-is.
# =============================================================================

import re
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from .grid import ChartDataPoint, ColumnType, ValidationOutcome


DEFAULT_CHART_COLOR = "#007AFF"

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")
_NON_ALNUM = re.compile(r"[^0-9A-Za-z]")


class ChartType(str, Enum):
    """Kinds of chart the presentation layer knows how to draw."""
    BAR = "bar"
    LINE = "line"
    SCATTER = "scatter"
    AREA = "area"

    @property
    def display_name(self) -> str:
        return _CHART_TITLES[self]

    @property
    def description(self) -> str:
        return _CHART_DESCRIPTIONS[self]


_CHART_TITLES = {
    ChartType.BAR: "Bar Chart",
    ChartType.LINE: "Line Chart",
    ChartType.SCATTER: "Scatter Plot",
    ChartType.AREA: "Area Chart",
}

_CHART_DESCRIPTIONS = {
    ChartType.BAR: "Compare values across categories",
    ChartType.LINE: "Show trends over time or sequence",
    ChartType.SCATTER: "Display relationship between two variables",
    ChartType.AREA: "Emphasize magnitude of change over time",
}


def default_chart_name(chart_type: ChartType, when: datetime | None = None) -> str:
    """
    Build the name used when a chart is saved without one.

    Example:
        default_chart_name(ChartType.BAR)  # "Bar Chart - Jan 15, 2024"
    """
    when = when or datetime.now(timezone.utc)
    return f"{chart_type.display_name} - {when.strftime('%b')} {when.day}, {when.year}"


# =============================================================================
# Colour Encoding
# =============================================================================

class RGBColor(BaseModel):
    """An sRGB colour with 0-255 channels."""

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)

    model_config = {"frozen": True}

    def to_hex(self) -> str:
        """Encode as an upper-case "#RRGGBB" string."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    @classmethod
    def from_hex(cls, value: str) -> "RGBColor":
        """
        Decode a hex colour string.

        Non-alphanumeric characters (such as the leading '#') are ignored.
        Anything that is not exactly six hex digits decodes to pure blue.
        """
        digits = _NON_ALNUM.sub("", value)
        if len(digits) != 6:
            return cls(red=0, green=0, blue=255)
        try:
            packed = int(digits, 16)
        except ValueError:
            return cls(red=0, green=0, blue=255)
        return cls(
            red=(packed >> 16) & 0xFF,
            green=(packed >> 8) & 0xFF,
            blue=packed & 0xFF,
        )


def _normalize_hex(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError("chart_color must be a '#RRGGBB' hex string")
    return value.upper()


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


# =============================================================================
# Chart Configuration
# =============================================================================

class ChartConfiguration(BaseModel):
    """
    A saved chart over one imported sheet.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "sheet_id": "660e8400-e29b-41d4-a716-446655440001",
            "name": "Monthly sales",
            "chart_type": "bar",
            "x_column": 0,
            "y_column": 1,
            "created_at": "2024-01-15T10:30:00Z",
            "chart_color": "#007AFF",
            "show_legend": true,
            "show_grid_lines": true,
            "x_axis_label": null,
            "y_axis_label": "Revenue"
        }
    """

    id: UUID = Field(default_factory=uuid4, description="Unique chart identifier")

    sheet_id: UUID = Field(..., description="Sheet this chart is drawn from")

    name: str = Field(..., min_length=1, max_length=255, description="Display name")

    chart_type: ChartType = Field(default=ChartType.BAR, description="Kind of chart")

    x_column: int = Field(..., ge=0, description="Column index for the x-axis")

    y_column: int = Field(..., ge=0, description="Column index for the y-axis")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the chart was created"
    )

    # Display customisation
    chart_color: str = Field(default=DEFAULT_CHART_COLOR, description="Series colour as #RRGGBB")
    show_legend: bool = Field(default=True)
    show_grid_lines: bool = Field(default=True)
    x_axis_label: str | None = Field(default=None, description="Custom x-axis label")
    y_axis_label: str | None = Field(default=None, description="Custom y-axis label")

    @field_validator("chart_color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        return _normalize_hex(value)

    @field_validator("x_axis_label", "y_axis_label")
    @classmethod
    def _validate_label(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @property
    def color(self) -> RGBColor:
        return RGBColor.from_hex(self.chart_color)


class ChartConfigurationCreate(BaseModel):
    """Input for creating a chart. `name` defaults to '<Chart title> - <date>'."""

    name: str | None = Field(default=None, max_length=255)
    chart_type: ChartType = Field(default=ChartType.BAR)
    x_column: int = Field(default=0, ge=0)
    y_column: int = Field(default=1, ge=0)
    chart_color: str = Field(default=DEFAULT_CHART_COLOR)
    show_legend: bool = Field(default=True)
    show_grid_lines: bool = Field(default=True)
    x_axis_label: str | None = Field(default=None)
    y_axis_label: str | None = Field(default=None)

    @field_validator("chart_color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        return _normalize_hex(value)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Monthly sales",
                "chart_type": "line",
                "x_column": 0,
                "y_column": 1,
                "chart_color": "#FF9500",
            }
        }
    }


class ChartConfigurationUpdate(BaseModel):
    """Partial update for a chart. Only fields that are set are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    chart_type: ChartType | None = None
    x_column: int | None = Field(default=None, ge=0)
    y_column: int | None = Field(default=None, ge=0)
    chart_color: str | None = None
    show_legend: bool | None = None
    show_grid_lines: bool | None = None
    x_axis_label: str | None = None
    y_axis_label: str | None = None

    @field_validator("chart_color")
    @classmethod
    def _validate_color(cls, value: str | None) -> str | None:
        return _normalize_hex(value) if value is not None else None


# =============================================================================
# Selection / Rendering Views
# =============================================================================

class ColumnInfo(BaseModel):
    """
    One column as shown in an axis picker.

    Example:
        {
            "index": 1,
            "name": "Sales",
            "column_type": "numeric",
            "type_description": "Numeric",
            "valid_for_y_axis": true,
            "preview": ["100", "abc", "300"]
        }
    """

    index: int = Field(..., ge=0)
    name: str
    column_type: ColumnType
    type_description: str
    valid_for_y_axis: bool
    preview: list[str] = Field(default_factory=list, description="First non-empty values")


class ChartView(BaseModel):
    """Everything the presentation layer needs to draw one saved chart."""

    chart: ChartConfiguration
    outcome: ValidationOutcome
    x_axis_label: str = Field(..., description="Custom label or the x column name")
    y_axis_label: str = Field(..., description="Custom label or the y column name")
    points: list[ChartDataPoint] = Field(default_factory=list)
