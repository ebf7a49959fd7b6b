# =============================================================================
# tests/test_profiler.py - Column Type Inference Tests
# =============================================================================
# Tests for lib/profiler.py.
# Covers:
#   - Value checks (decimal numbers, date layouts)
#   - Threshold classification (80% / 20% boundaries)
#   - Whole-grid inference (empty, header-only, ragged)
#   - Column previews and y-axis helpers
#
# Run with: pytest tests/test_profiler.py -v
# =============================================================================

import pytest

from core.models import ColumnType, InferenceResult
from lib.profiler import (
    classify_counts,
    column_type_description,
    detect_column_type,
    infer_column_types,
    is_column_valid_for_y_axis,
    is_likely_date,
    is_numeric_value,
    list_column_names,
    preview_column,
)
from lib.readers import read_delimited


def column_grid(*values: str) -> list[list[str]]:
    """One-column grid with a header and the given data cells."""
    return [["Col"]] + [[value] for value in values]


# =============================================================================
# Value Check Tests
# =============================================================================

class TestValueChecks:
    """Tests for is_numeric_value() and is_likely_date()."""

    @pytest.mark.parametrize("value", ["0", "42", "-3.5", "+7", ".5", "1.", "1e3", "2.5E-4"])
    def test_numeric(self, value):
        assert is_numeric_value(value)

    @pytest.mark.parametrize("value", [
        "", "abc", "1,000", "$5", "12%", "inf", "NaN", "1_000", "0x1F", "1e999",
        "١٢٣", "１２", "3.٥",
    ])
    def test_not_numeric(self, value):
        assert not is_numeric_value(value)

    @pytest.mark.parametrize("value", ["2024-01-15", "01/15/2024", "01-15-2024", "2024/01/15", "2024-01-15 09:30"])
    def test_date_layouts(self, value):
        assert is_likely_date(value)

    @pytest.mark.parametrize("value", ["Jan 15 2024", "15.01.2024", "1/5/24", "2024"])
    def test_not_dates(self, value):
        assert not is_likely_date(value)


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassification:
    """Tests for the percentage thresholds."""

    def test_no_values_is_unknown(self):
        assert classify_counts(0, 0, 0) == ColumnType.UNKNOWN

    def test_all_numeric(self):
        assert detect_column_type(column_grid("1", "2", "3"), 0) == ColumnType.NUMERIC

    def test_exactly_80_percent_numeric(self):
        """One stray value among five still counts as numeric."""
        grid = column_grid("1", "2", "3", "4", "x")

        assert detect_column_type(grid, 0) == ColumnType.NUMERIC

    def test_75_percent_numeric_is_mixed(self):
        grid = column_grid("1", "2", "3", "x")

        assert detect_column_type(grid, 0) == ColumnType.UNKNOWN

    def test_20_percent_numeric_is_mixed(self):
        grid = column_grid("1", "a", "b", "c", "d")

        assert detect_column_type(grid, 0) == ColumnType.UNKNOWN

    def test_under_20_percent_numeric_is_categorical(self):
        grid = column_grid("1", "a", "b", "c", "d", "e")

        assert detect_column_type(grid, 0) == ColumnType.CATEGORICAL

    def test_all_text_is_categorical(self):
        assert detect_column_type(column_grid("red", "green", "blue"), 0) == ColumnType.CATEGORICAL

    def test_dates(self):
        grid = column_grid("2024-01-15", "2024-02-20", "03/10/2024", "2024/04/01")

        assert detect_column_type(grid, 0) == ColumnType.DATE

    def test_numeric_checked_before_date(self):
        """A cell can count as both; numeric wins at the same threshold."""
        assert classify_counts(5, 4, 5) == ColumnType.NUMERIC

    def test_blank_cells_ignored(self):
        grid = column_grid("1", "", "   ", "2", "\t")

        assert detect_column_type(grid, 0) == ColumnType.NUMERIC

    def test_non_ascii_digits_are_text(self):
        grid = column_grid("١٢٣", "١٠", "１２", "３４")

        assert detect_column_type(grid, 0) == ColumnType.CATEGORICAL

    def test_values_trimmed(self):
        assert detect_column_type(column_grid(" 1 ", "\t2\t", " 3"), 0) == ColumnType.NUMERIC

    def test_only_blank_cells_is_unknown(self):
        assert detect_column_type(column_grid("", "  "), 0) == ColumnType.UNKNOWN

    def test_header_not_counted(self):
        grid = [["1"], ["a"], ["b"]]

        assert detect_column_type(grid, 0) == ColumnType.CATEGORICAL


# =============================================================================
# Grid Inference Tests
# =============================================================================

class TestInferColumnTypes:
    """Tests for infer_column_types()."""

    def test_empty_grid(self):
        result = infer_column_types([])

        assert isinstance(result, InferenceResult)
        assert result.column_names == []
        assert result.column_types == []

    def test_header_only(self):
        result = infer_column_types([["A", "B"]])

        assert result.column_names == ["A", "B"]
        assert result.column_types == [ColumnType.UNKNOWN, ColumnType.UNKNOWN]

    def test_one_type_per_header_column(self, sales_grid, ragged_grid):
        for grid in (sales_grid, ragged_grid, [["A"], ["1", "2", "3"]]):
            result = infer_column_types(grid)
            assert len(result.column_types) == len(grid[0])

    def test_sales_grid(self, sales_grid):
        result = infer_column_types(sales_grid)

        assert result.column_names == ["Month", "Sales", "Expenses"]
        assert result.column_types == [
            ColumnType.CATEGORICAL,
            ColumnType.NUMERIC,
            ColumnType.NUMERIC,
        ]

    def test_ragged_grid(self, ragged_grid):
        result = infer_column_types(ragged_grid)

        assert result.column_types == [
            ColumnType.CATEGORICAL,
            ColumnType.NUMERIC,
            ColumnType.CATEGORICAL,
        ]

    def test_messy_fixture(self, fixture_path):
        grid = read_delimited(fixture_path("messy.csv").read_text(encoding="utf-8"))

        result = infer_column_types(grid)

        assert result.column_types == [
            ColumnType.DATE,          # all ISO dates
            ColumnType.CATEGORICAL,   # product names
            ColumnType.UNKNOWN,       # 3 of 4 numeric
            ColumnType.CATEGORICAL,   # notes
        ]

    def test_is_deterministic(self, ragged_grid):
        assert infer_column_types(ragged_grid) == infer_column_types(ragged_grid)

    def test_does_not_mutate_grid(self, ragged_grid):
        snapshot = [list(row) for row in ragged_grid]

        infer_column_types(ragged_grid)

        assert ragged_grid == snapshot

    def test_list_column_names(self, sales_grid):
        assert list_column_names(sales_grid) == ["Month", "Sales", "Expenses"]
        assert list_column_names([]) == []


# =============================================================================
# Column Helper Tests
# =============================================================================

class TestPreviewColumn:
    """Tests for preview_column()."""

    def test_preview_trims_and_skips_blanks(self, ragged_grid):
        assert preview_column(ragged_grid, 0) == ["a", "b", "c", "d", "e"]

    def test_preview_limit(self, ragged_grid):
        assert preview_column(ragged_grid, 0, max_items=2) == ["a", "b"]

    def test_preview_looks_past_blank_rows(self):
        grid = column_grid("", "", "", "", "", "", "late")

        assert preview_column(grid, 0) == ["late"]

    def test_preview_short_rows_skipped(self, ragged_grid):
        assert preview_column(ragged_grid, 2) == ["extra"]

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_preview_out_of_range(self, ragged_grid, index):
        assert preview_column(ragged_grid, index) == []

    def test_preview_empty_grid(self):
        assert preview_column([], 0) == []

    def test_preview_zero_items(self, sales_grid):
        assert preview_column(sales_grid, 0, max_items=0) == []


class TestColumnHelpers:
    """Tests for y-axis eligibility and type descriptions."""

    TYPES = [ColumnType.CATEGORICAL, ColumnType.NUMERIC, ColumnType.DATE, ColumnType.UNKNOWN]

    def test_valid_for_y_axis(self):
        assert is_column_valid_for_y_axis(self.TYPES, 1)
        assert not is_column_valid_for_y_axis(self.TYPES, 0)
        assert not is_column_valid_for_y_axis(self.TYPES, 2)
        assert not is_column_valid_for_y_axis(self.TYPES, 4)
        assert not is_column_valid_for_y_axis(self.TYPES, -1)

    def test_descriptions(self):
        assert [column_type_description(self.TYPES, i) for i in range(4)] == [
            "Text",
            "Numeric",
            "Date",
            "Mixed/Unknown",
        ]

    def test_description_out_of_range(self):
        assert column_type_description(self.TYPES, 10) == "Unknown"
