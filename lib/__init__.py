# =============================================================================
# lib/ - Standalone Pipeline Modules
# =============================================================================
# This package contains the pure, synchronous pipeline:
# - readers.py: Format adapters (CSV, Excel workbooks) -> Grid
# - profiler.py: Column type inference and column previews
# - charting.py: Selection validation and chart point extraction
# - utils.py: Shared utilities (decimal parsing, UUID normalization)
#
# Everything except the readers is a pure function of an in-memory Grid and
# can be called from any thread without coordination.
# =============================================================================

from lib.charting import extract_points, validate_selection
from lib.profiler import (
    column_type_description,
    infer_column_types,
    is_column_valid_for_y_axis,
    list_column_names,
    preview_column,
)
from lib.readers import load_grid, read_delimited, read_workbook, read_workbook_sheets
from lib.utils import normalize_uuid, parse_decimal

__all__ = [
    # Readers
    "load_grid",
    "read_delimited",
    "read_workbook",
    "read_workbook_sheets",
    # Inference
    "column_type_description",
    "infer_column_types",
    "is_column_valid_for_y_axis",
    "list_column_names",
    "preview_column",
    # Charting
    "extract_points",
    "validate_selection",
    # Utils
    "normalize_uuid",
    "parse_decimal",
]
