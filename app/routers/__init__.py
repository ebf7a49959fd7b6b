# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - sheets.py: File import, column inspection, selection validation, points
# - charts.py: Chart configuration CRUD and render data
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import sheets
from . import charts

__all__ = [
    "health",
    "sheets",
    "charts",
]
