# =============================================================================
# lib/charting.py - Selection Validation and Chart Data Extraction
# =============================================================================
# Given a Grid and a chosen (x, y) column pair:
#
#   - validate_selection() decides whether the pair can produce a chart and
#     returns a ValidationOutcome. Invalid selections are an ordinary state
#     of an interactive picker, so they are returned, never raised.
#   - extract_points() produces the (label, value) series in row order,
#     silently skipping short rows, blank cells and non-numeric y-values.
#
# Both are pure: same inputs, same output, no shared state.
# =============================================================================

import logging

from core.models import (
    ChartDataPoint,
    ColumnType,
    Grid,
    ValidationOutcome,
    ValidationReason,
)
from lib.utils import parse_decimal

# Set up logging for this module
logger = logging.getLogger(__name__)

MIN_CHART_POINTS = 2


# =============================================================================
# Extraction
# =============================================================================

def extract_points(grid: Grid, x_column: int, y_column: int) -> list[ChartDataPoint]:
    """
    Extract the plottable points for an (x, y) column pair.

    For each data row in order: skip it if it lacks either cell, if either
    trimmed cell is empty, or if the y-cell is not a decimal number.
    Repeated x-labels are kept as separate points.

    Returns:
        Points in original row order (empty for a header-only grid)
    """
    if len(grid) <= 1 or x_column < 0 or y_column < 0:
        return []

    points: list[ChartDataPoint] = []
    skipped = 0

    for row_index in range(1, len(grid)):
        row = grid[row_index]
        if x_column >= len(row) or y_column >= len(row):
            skipped += 1
            continue

        x_value = row[x_column].strip()
        y_text = row[y_column].strip()
        if not x_value or not y_text:
            skipped += 1
            continue

        y_value = parse_decimal(y_text)
        if y_value is None:
            skipped += 1
            continue

        points.append(ChartDataPoint(
            x_label=x_value,
            y_value=y_value,
            source_row_index=row_index,
        ))

    if skipped:
        logger.debug(f"Extracted {len(points)} points, skipped {skipped} rows")

    return points


# =============================================================================
# Validation
# =============================================================================

def validate_selection(
    grid: Grid,
    column_names: list[str],
    column_types: list[ColumnType],
    x_column: int,
    y_column: int,
) -> ValidationOutcome:
    """
    Check whether an (x, y) selection yields a renderable chart.

    Checks run in order and stop at the first failure. Index bounds are
    checked before the y-column type is looked up, and every structural
    check runs before the extraction pass.

    Args:
        grid: Imported rows, header first
        column_names: Header names from infer_column_types()
        column_types: Types parallel to column_names
        x_column: Label axis column (any type)
        y_column: Value axis column (must be numeric)

    Returns:
        ValidationOutcome.valid() or ValidationOutcome.invalid(reason)
    """
    if not grid:
        return ValidationOutcome.invalid(ValidationReason.EMPTY_DATA)

    if len(grid) < 2:
        return ValidationOutcome.invalid(ValidationReason.INSUFFICIENT_ROWS)

    column_count = len(column_names)

    if not 0 <= x_column < column_count:
        return ValidationOutcome.invalid(ValidationReason.INVALID_X_COLUMN)

    if not 0 <= y_column < column_count:
        return ValidationOutcome.invalid(ValidationReason.INVALID_Y_COLUMN)

    if x_column == y_column:
        return ValidationOutcome.invalid(ValidationReason.DUPLICATE_COLUMNS)

    if y_column >= len(column_types) or column_types[y_column] != ColumnType.NUMERIC:
        return ValidationOutcome.invalid(ValidationReason.Y_AXIS_NOT_NUMERIC)

    point_count = len(extract_points(grid, x_column, y_column))

    if point_count < 1:
        return ValidationOutcome.invalid(ValidationReason.NO_VALID_POINTS)

    if point_count < MIN_CHART_POINTS:
        return ValidationOutcome.invalid(ValidationReason.INSUFFICIENT_POINTS)

    return ValidationOutcome.valid()
