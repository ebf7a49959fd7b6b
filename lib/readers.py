# =============================================================================
# lib/readers.py - Format Adapters
# =============================================================================
# Turns an uploaded file into a Grid (rows of string cells, row 0 = header).
#
#   - Delimited text (.csv): split into lines, drop empty lines, split cells
#     on ','. Quoted fields are honoured unless quote_aware=False.
#   - Workbooks (.xlsx, .xls): every worksheet, every non-blank row, flattened into one
#     Grid in sheet order. Cells are stringified the way Excel displays them.
#
# Adapters are registered by extension. Anything without an adapter is
# rejected with UnsupportedFormatError before any parsing happens.
# Adapters never raise for "no data"; they return an empty Grid.
# =============================================================================

import csv
import io
import logging
import math
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, BinaryIO, Callable, Union

import pandas as pd

from app.config import settings
from app.exceptions import FileReadError, UnsupportedFormatError
from core.models import Grid

# Set up logging for this module
logger = logging.getLogger(__name__)

# Type alias for file inputs
FileInput = Union[bytes, bytearray, BinaryIO, io.BytesIO]

# Adapter signature: (raw bytes, filename) -> Grid
FormatAdapter = Callable[[bytes, str], Grid]


# =============================================================================
# Constants
# =============================================================================

DELIMITER = ","

WORKBOOK_ENGINES = {
    ".xlsx": "openpyxl",
    ".xls": "xlrd",
}


# =============================================================================
# Adapter Registry
# =============================================================================

# Global registry: extension (with dot, lower-case) -> adapter
FORMAT_ADAPTERS: dict[str, FormatAdapter] = {}


def register_adapter(*extensions: str) -> Callable[[FormatAdapter], FormatAdapter]:
    """
    Decorator to register a format adapter for one or more extensions.

    Usage:
        @register_adapter(".csv")
        def load_delimited(content: bytes, filename: str) -> Grid:
            ...
    """
    def decorator(func: FormatAdapter) -> FormatAdapter:
        for ext in extensions:
            ext = ext.lower()
            if ext in FORMAT_ADAPTERS:
                raise ValueError(f"Adapter for '{ext}' is already registered")
            FORMAT_ADAPTERS[ext] = func
        return func
    return decorator


def get_adapter(extension: str) -> FormatAdapter | None:
    """Get the adapter registered for an extension (e.g. '.csv')."""
    return FORMAT_ADAPTERS.get(extension.lower())


def supported_extensions() -> list[str]:
    """Extensions that have an adapter and are allowed by configuration."""
    allowed = settings.allowed_extensions_list
    return [ext for ext in FORMAT_ADAPTERS if ext in allowed]


def file_extension(filename: str) -> str:
    """
    Lower-cased extension including the dot.

    Example:
        file_extension("Sales.XLSX")  # ".xlsx"
        file_extension("README")      # ""
    """
    return Path(filename).suffix.lower()


# =============================================================================
# Delimited Text
# =============================================================================

def decode_text(
    content: bytes,
    filename: str = "data.csv",
    encodings: list[str] | None = None,
) -> str:
    """
    Decode raw bytes by trying each configured encoding in order.

    Raises:
        FileReadError: If no encoding can decode the content
    """
    encodings = encodings or settings.csv_encodings_list
    for encoding in encodings:
        try:
            text = content.decode(encoding)
            logger.debug(f"Decoded {filename} as {encoding}")
            return text
        except (UnicodeDecodeError, UnicodeError):
            continue
        except LookupError:
            logger.warning(f"Unknown encoding in CSV_ENCODINGS: {encoding}")
            continue

    logger.error(f"Could not decode {filename} with any of {encodings}")
    raise FileReadError(
        filename,
        f"Could not decode file as text (tried: {', '.join(encodings)})",
    )


def read_delimited(
    text: str,
    quote_aware: bool = True,
    delimiter: str = DELIMITER,
    filename: str = "data.csv",
) -> Grid:
    """
    Split decoded text into a Grid.

    Empty lines are dropped entirely rather than becoming a row with one
    empty cell. Rows keep whatever number of cells they have.

    Args:
        text: Decoded file content
        quote_aware: Honour "..." fields that contain the delimiter, doubled
            quotes or line breaks. With False, every delimiter splits.
        delimiter: Cell separator
        filename: Used in error messages only

    Raises:
        FileReadError: If the text cannot be tokenised (e.g. a quote is never closed)
    """
    if not quote_aware:
        return [line.split(delimiter) for line in text.splitlines() if line != ""]

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    try:
        # csv.reader yields [] for a blank line
        return [row for row in reader if row]
    except csv.Error as e:
        logger.error(f"Failed to parse {filename}: {e}")
        raise FileReadError(filename, f"Malformed delimited text at line {reader.line_num}: {e}") from e


@register_adapter(".csv")
def load_delimited(content: bytes, filename: str) -> Grid:
    """Delimited-text adapter: bytes -> decoded text -> Grid."""
    text = decode_text(content, filename)
    grid = read_delimited(text, quote_aware=settings.CSV_QUOTE_AWARE, filename=filename)
    logger.debug(f"Parsed {filename}: {len(grid)} rows")
    return grid


# =============================================================================
# Workbooks
# =============================================================================

def _cell_to_text(value: Any) -> str:
    """
    Stringify a workbook cell the way a spreadsheet displays it.

    Whole-number floats lose the trailing '.0', dates without a time part
    become YYYY-MM-DD, blanks become "".
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, datetime):  # includes pd.Timestamp
        if pd.isna(value):
            return ""
        if value.time() == time(0, 0):
            return value.strftime("%Y-%m-%d")
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if pd.isna(value):
        return ""
    return str(value)


def _frame_to_grid(frame: pd.DataFrame) -> Grid:
    """Stringify every row, dropping rows with no visible content (blank spacer rows)."""
    grid: Grid = []
    for row in frame.itertuples(index=False, name=None):
        cells = [_cell_to_text(value) for value in row]
        if any(cell.strip() for cell in cells):
            grid.append(cells)
    return grid


def read_workbook_sheets(content: bytes, filename: str = "workbook.xlsx") -> dict[str, Grid]:
    """
    Read every worksheet into its own Grid.

    Returns:
        Sheet name -> Grid, in workbook order

    Raises:
        FileReadError: If the workbook cannot be opened or a sheet cannot be parsed
    """
    engine = WORKBOOK_ENGINES.get(file_extension(filename), "openpyxl")

    try:
        frames = pd.read_excel(
            io.BytesIO(content),
            sheet_name=None,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_filter=False,
            engine=engine,
        )
    except Exception as e:
        logger.error(f"Failed to read workbook {filename}: {e}")
        raise FileReadError(filename, f"Could not open workbook: {e}") from e

    sheets: dict[str, Grid] = {}
    for sheet_name, frame in frames.items():
        sheets[str(sheet_name)] = _frame_to_grid(frame)
        logger.debug(f"Worksheet '{sheet_name}': {len(frame)} rows")

    return sheets


def read_workbook(
    content: bytes,
    filename: str = "workbook.xlsx",
    merge_sheets: bool = True,
) -> Grid:
    """
    Read a workbook into a single Grid.

    With merge_sheets=True every worksheet's rows are appended in sheet
    order, so row 0 is the first sheet's first row and later sheets'
    header rows appear as ordinary data rows. With merge_sheets=False only
    the first worksheet is read.
    """
    sheets = read_workbook_sheets(content, filename)
    if not sheets:
        return []

    if not merge_sheets:
        return next(iter(sheets.values()))

    grid: Grid = []
    for rows in sheets.values():
        grid.extend(rows)
    return grid


@register_adapter(".xlsx", ".xls")
def load_workbook(content: bytes, filename: str) -> Grid:
    """Spreadsheet adapter."""
    return read_workbook(content, filename, merge_sheets=settings.MERGE_WORKSHEETS)


# =============================================================================
# Entry Point
# =============================================================================

def load_grid(source: FileInput, filename: str) -> Grid:
    """
    Pick the adapter from the filename's extension and build a Grid.

    Args:
        source: Raw bytes or a binary file-like object
        filename: Original filename (the extension selects the adapter)

    Raises:
        UnsupportedFormatError: If no adapter handles the extension
        FileReadError: If the adapter cannot read the content
    """
    ext = file_extension(filename)
    adapter = get_adapter(ext) if ext in settings.allowed_extensions_list else None
    if adapter is None:
        raise UnsupportedFormatError(filename, supported_extensions())

    if hasattr(source, "read"):
        if hasattr(source, "seek"):
            source.seek(0)
        content = source.read()
    else:
        content = bytes(source)

    grid = adapter(content, filename)
    logger.info(f"Loaded {filename}: {len(grid)} rows")
    return grid
