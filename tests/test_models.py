# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the Pydantic models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Grids and sheets round-trip through their stored JSON form
# - Colour encoding behaves like the presentation layer expects
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import json
from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from core.models import (
    ChartConfiguration,
    ChartConfigurationCreate,
    ChartConfigurationUpdate,
    ChartDataPoint,
    ChartType,
    ColumnType,
    InferenceResult,
    RGBColor,
    SheetFile,
    ValidationOutcome,
    ValidationReason,
    default_chart_name,
    deserialize_grid,
    serialize_grid,
)


# =============================================================================
# Grid Model Tests
# =============================================================================

class TestGridSerialization:
    """Tests for serialize_grid() / deserialize_grid()."""

    def test_round_trip(self, ragged_grid):
        payload = serialize_grid(ragged_grid)

        assert deserialize_grid(payload) == ragged_grid

    def test_array_of_arrays(self, scenario_a_grid):
        assert json.loads(serialize_grid(scenario_a_grid)) == scenario_a_grid

    def test_unicode_and_quotes(self):
        grid = [["Stadt", "Notiz"], ["München", 'said "hi", twice'], ["", "line\nbreak"]]

        assert deserialize_grid(serialize_grid(grid)) == grid

    def test_empty(self):
        assert deserialize_grid(serialize_grid([])) == []

    def test_rejects_non_string_cells(self):
        with pytest.raises(ValidationError):
            deserialize_grid('[["A"], [1]]')

    def test_rejects_flat_list(self):
        with pytest.raises(ValidationError):
            deserialize_grid('["A", "B"]')


class TestInferenceResult:
    """Tests for InferenceResult."""

    def test_parallel_lists(self):
        result = InferenceResult(column_names=["A"], column_types=[ColumnType.NUMERIC])

        assert result.column_count == 1

    def test_length_mismatch_rejected(self):
        with pytest.raises(ValidationError):
            InferenceResult(column_names=["A", "B"], column_types=[ColumnType.NUMERIC])

    def test_frozen(self):
        result = InferenceResult(column_names=[], column_types=[])

        with pytest.raises(ValidationError):
            result.column_names = ["A"]

    def test_type_descriptions(self):
        assert ColumnType.CATEGORICAL.description == "Text"
        assert ColumnType.UNKNOWN.description == "Mixed/Unknown"


class TestValidationOutcome:
    """Tests for ValidationOutcome."""

    def test_valid(self):
        outcome = ValidationOutcome.valid()

        assert outcome.is_valid
        assert outcome.message is None

    def test_invalid(self):
        outcome = ValidationOutcome.invalid(ValidationReason.DUPLICATE_COLUMNS)

        assert not outcome.is_valid
        assert outcome.message == "X and Y axes must use different columns"
        assert outcome.model_dump(mode="json") == {"reason": "duplicate_columns"}


class TestChartDataPoint:
    """Tests for ChartDataPoint."""

    def test_valid_point(self):
        point = ChartDataPoint(x_label="Jan", y_value=100, source_row_index=1)

        assert point.y_value == 100.0

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError):
            ChartDataPoint(x_label="Jan", y_value=value, source_row_index=1)

    def test_header_row_index_rejected(self):
        with pytest.raises(ValidationError):
            ChartDataPoint(x_label="Jan", y_value=1.0, source_row_index=0)


# =============================================================================
# Sheet Model Tests
# =============================================================================

class TestSheetFile:
    """Tests for SheetFile."""

    def test_defaults(self, sales_grid):
        sheet = SheetFile(title="sales.csv", file_extension=".CSV", data=sales_grid)

        assert sheet.file_extension == "csv"
        assert sheet.row_count == 3
        assert sheet.column_names == ["Month", "Sales", "Expenses"]
        assert isinstance(sheet.imported_at, datetime)

    def test_empty_sheet(self):
        sheet = SheetFile(title="empty.csv", file_extension="csv")

        assert sheet.row_count == 0
        assert sheet.column_names == []

    def test_storage_round_trip(self, ragged_grid):
        sheet = SheetFile(title="ragged.csv", file_extension="csv", data=ragged_grid)

        restored = SheetFile.from_storage_json(sheet.to_storage_json())

        assert restored == sheet
        assert restored.data == ragged_grid

    def test_stored_data_is_nested_arrays(self, scenario_a_grid):
        sheet = SheetFile(title="a.csv", file_extension="csv", data=scenario_a_grid)

        stored = json.loads(sheet.to_storage_json())

        assert stored["data"] == scenario_a_grid
        assert stored["file_extension"] == "csv"

    def test_grid_json_round_trip(self, scenario_a_grid):
        sheet = SheetFile(title="a.csv", file_extension="csv", data=scenario_a_grid)

        restored = SheetFile.from_grid_json(sheet.grid_json(), title="a.csv", file_extension="csv")

        assert restored.data == sheet.data

    def test_summary(self, sales_grid):
        sheet = SheetFile(title="sales.csv", file_extension="csv", data=sales_grid)

        summary = sheet.to_summary()

        assert summary.id == sheet.id
        assert summary.row_count == 3
        assert summary.column_names == ["Month", "Sales", "Expenses"]

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            SheetFile(title="", file_extension="csv")


# =============================================================================
# Chart Model Tests
# =============================================================================

class TestRGBColor:
    """Tests for RGBColor hex encoding."""

    def test_to_hex(self):
        assert RGBColor(red=0, green=122, blue=255).to_hex() == "#007AFF"

    def test_from_hex(self):
        assert RGBColor.from_hex("#FF9500") == RGBColor(red=255, green=149, blue=0)

    def test_from_hex_without_hash_and_lower_case(self):
        assert RGBColor.from_hex("ff9500") == RGBColor(red=255, green=149, blue=0)

    def test_round_trip(self):
        color = RGBColor(red=12, green=34, blue=56)

        assert RGBColor.from_hex(color.to_hex()) == color

    @pytest.mark.parametrize("value", ["", "#FFF", "#FFFFFFFF", "#GGGGGG", "blue"])
    def test_invalid_falls_back_to_blue(self, value):
        assert RGBColor.from_hex(value) == RGBColor(red=0, green=0, blue=255)

    def test_channel_range(self):
        with pytest.raises(ValidationError):
            RGBColor(red=256, green=0, blue=0)


class TestChartConfiguration:
    """Tests for ChartConfiguration and its inputs."""

    def test_defaults(self):
        chart = ChartConfiguration(sheet_id=uuid4(), name="Sales", x_column=0, y_column=1)

        assert chart.chart_type == ChartType.BAR
        assert chart.chart_color == "#007AFF"
        assert chart.show_legend is True
        assert chart.show_grid_lines is True
        assert chart.x_axis_label is None
        assert chart.color == RGBColor(red=0, green=122, blue=255)

    def test_color_normalized(self):
        chart = ChartConfiguration(
            sheet_id=uuid4(), name="Sales", x_column=0, y_column=1, chart_color="#ff9500"
        )

        assert chart.chart_color == "#FF9500"

    def test_bad_color_rejected(self):
        with pytest.raises(ValidationError):
            ChartConfiguration(sheet_id=uuid4(), name="S", x_column=0, y_column=1, chart_color="red")

    def test_blank_labels_become_none(self):
        chart = ChartConfiguration(
            sheet_id=uuid4(), name="S", x_column=0, y_column=1,
            x_axis_label="   ", y_axis_label=" Revenue ",
        )

        assert chart.x_axis_label is None
        assert chart.y_axis_label == "Revenue"

    def test_negative_column_rejected(self):
        with pytest.raises(ValidationError):
            ChartConfigurationCreate(x_column=-1, y_column=1)

    def test_create_defaults(self):
        request = ChartConfigurationCreate()

        assert (request.x_column, request.y_column) == (0, 1)
        assert request.name is None

    def test_update_only_set_fields(self):
        update = ChartConfigurationUpdate(chart_type="line")

        assert update.model_dump(exclude_unset=True) == {"chart_type": ChartType.LINE}

    def test_chart_type_metadata(self):
        assert ChartType.SCATTER.display_name == "Scatter Plot"
        assert ChartType.AREA.description == "Emphasize magnitude of change over time"

    def test_default_chart_name(self):
        name = default_chart_name(ChartType.LINE, datetime(2024, 1, 5))

        assert name == "Line Chart - Jan 5, 2024"
