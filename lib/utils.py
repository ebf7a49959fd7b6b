# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import math
import re
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        sheet_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        sheet_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Number Parsing
# =============================================================================

# Plain decimal notation only: "42", "-3.5", ".5", "1.", "1e3", "+2.5E-4".
# float() alone would also accept "inf", "nan", "1_000" and surrounding
# whitespace, none of which count as numbers in a cell.
DECIMAL_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def parse_decimal(value: str) -> float | None:
    """
    Parse a cell value written in standard decimal notation.

    The value must already be trimmed. Returns None when the value is not
    a decimal number or overflows to infinity ("1e999").

    Example:
        parse_decimal("100")    # 100.0
        parse_decimal("1,000")  # None
    """
    if not DECIMAL_PATTERN.fullmatch(value):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number
