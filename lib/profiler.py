# =============================================================================
# lib/profiler.py - Column Type Inference
# =============================================================================
# Classifies every header column of a Grid as numeric, date, categorical or
# unknown from the share of its non-empty data cells that look like numbers
# or dates:
#
#   numeric >= 80%          -> numeric
#   else date >= 80%        -> date
#   else numeric < 20%      -> categorical
#   else                    -> unknown (mixed)
#
# The thresholds tolerate a few stray entries in an otherwise clean column.
# Numeric and date matches are counted independently per cell.
#
# Also provides the small column helpers used by selection UIs: names,
# previews, type descriptions and y-axis eligibility.
# =============================================================================

import logging
import re

from core.models import ColumnType, Grid, InferenceResult
from lib.utils import parse_decimal

# Set up logging for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

NUMERIC_THRESHOLD = 0.8
DATE_THRESHOLD = 0.8
CATEGORICAL_NUMERIC_CEILING = 0.2
DEFAULT_PREVIEW_ITEMS = 5

# Matched anywhere in the value, so "2024-01-15 09:30" counts as a date too
DATE_PATTERNS = {
    "YYYY-MM-DD": re.compile(r'\d{4}-\d{2}-\d{2}'),
    "MM/DD/YYYY": re.compile(r'\d{2}/\d{2}/\d{4}'),
    "MM-DD-YYYY": re.compile(r'\d{2}-\d{2}-\d{4}'),
    "YYYY/MM/DD": re.compile(r'\d{4}/\d{2}/\d{2}'),
}


# =============================================================================
# Value Checks
# =============================================================================

def is_numeric_value(value: str) -> bool:
    """True if the trimmed value parses as a decimal number."""
    return parse_decimal(value) is not None


def is_likely_date(value: str) -> bool:
    """True if the value contains one of the supported date layouts."""
    return any(pattern.search(value) for pattern in DATE_PATTERNS.values())


# =============================================================================
# Inference
# =============================================================================

def list_column_names(grid: Grid) -> list[str]:
    """Header row values (empty for an empty grid)."""
    return list(grid[0]) if grid else []


def classify_counts(total: int, numeric_count: int, date_count: int) -> ColumnType:
    """
    Apply the percentage thresholds to a column's counts.

    Example:
        classify_counts(4, 3, 0)  # 75% numeric -> ColumnType.UNKNOWN
    """
    if total == 0:
        return ColumnType.UNKNOWN

    numeric_pct = numeric_count / total
    date_pct = date_count / total

    if numeric_pct >= NUMERIC_THRESHOLD:
        return ColumnType.NUMERIC
    if date_pct >= DATE_THRESHOLD:
        return ColumnType.DATE
    if numeric_pct < CATEGORICAL_NUMERIC_CEILING:
        return ColumnType.CATEGORICAL
    return ColumnType.UNKNOWN


def detect_column_type(grid: Grid, column_index: int) -> ColumnType:
    """
    Infer the type of one column from its data rows.

    Rows too short to have the column and blank cells are ignored.
    """
    total = numeric_count = date_count = 0

    for row in grid[1:]:
        if column_index >= len(row):
            continue

        value = row[column_index].strip()
        if not value:
            continue

        total += 1
        if is_numeric_value(value):
            numeric_count += 1
        if is_likely_date(value):
            date_count += 1

    return classify_counts(total, numeric_count, date_count)


def infer_column_types(grid: Grid) -> InferenceResult:
    """
    Infer a type for every column in the header row.

    Pure function of the grid: an empty grid yields zero columns, a
    header-only grid yields all-unknown columns.
    """
    column_names = list_column_names(grid)
    column_types = [detect_column_type(grid, index) for index in range(len(column_names))]

    logger.debug(
        f"Inferred {len(column_types)} column types over {max(len(grid) - 1, 0)} data rows"
    )
    return InferenceResult(column_names=column_names, column_types=column_types)


# =============================================================================
# Column Helpers
# =============================================================================

def preview_column(
    grid: Grid,
    column_index: int,
    max_items: int = DEFAULT_PREVIEW_ITEMS,
) -> list[str]:
    """
    Return up to max_items trimmed, non-empty values of a column.

    Values come from data rows in row order. Out-of-range columns (judged
    against the header row) give an empty list.
    """
    header_width = len(grid[0]) if grid else 0
    if not 0 <= column_index < header_width or max_items <= 0:
        return []

    preview: list[str] = []
    for row in grid[1:]:
        if column_index >= len(row):
            continue
        value = row[column_index].strip()
        if value:
            preview.append(value)
            if len(preview) >= max_items:
                break

    return preview


def is_column_valid_for_y_axis(column_types: list[ColumnType], column_index: int) -> bool:
    """Only numeric columns can be plotted on the y-axis."""
    if not 0 <= column_index < len(column_types):
        return False
    return column_types[column_index] == ColumnType.NUMERIC


def column_type_description(column_types: list[ColumnType], column_index: int) -> str:
    """User-facing label for a column's type ("Unknown" when out of range)."""
    if not 0 <= column_index < len(column_types):
        return "Unknown"
    return column_types[column_index].description
