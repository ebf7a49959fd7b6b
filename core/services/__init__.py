# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .chart_service import ChartService
from .import_service import ImportService
from .storage_service import SheetStore

__all__ = [
    "ChartService",
    "ImportService",
    "SheetStore",
]
