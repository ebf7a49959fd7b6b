# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets environment variables before any imports
# - Provides sample grids, fixture file paths and an in-memory workbook builder
# =============================================================================

import io
import os
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from openpyxl import Workbook


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# Grids
# =============================================================================

@pytest.fixture
def sales_grid():
    """Clean grid: one text column, two numeric columns."""
    return [
        ["Month", "Sales", "Expenses"],
        ["January", "1000", "500"],
        ["February", "1500", "600"],
        ["March", "1200", "550"],
    ]


@pytest.fixture
def scenario_a_grid():
    """Month/Sales grid with one non-numeric sales value."""
    return [
        ["Month", "Sales"],
        ["Jan", "100"],
        ["Feb", "abc"],
        ["Mar", "300"],
    ]


@pytest.fixture
def ragged_grid():
    """Rows of differing widths, blanks and padding."""
    return [
        ["Label", "Value", "Comment"],
        ["  a  ", " 1.5 "],
        ["b"],
        ["", "2"],
        ["c", "   "],
        ["d", "4", "extra", "cells"],
        [],
        ["e", "-3e2"],
    ]


# =============================================================================
# Files
# =============================================================================

@pytest.fixture
def fixture_path():
    """Resolve a file under tests/fixtures/."""
    def resolve(name: str) -> Path:
        return FIXTURES_DIR / name
    return resolve


@pytest.fixture
def build_workbook():
    """
    Build an .xlsx file in memory.

    Usage:
        content = build_workbook({"Sheet1": [["A", "B"], ["x", 1]]})
    """
    def build(sheets: dict[str, list[list]]) -> bytes:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for name, rows in sheets.items():
            worksheet = workbook.create_sheet(title=name)
            for row in rows:
                worksheet.append(row)
        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()
    return build
