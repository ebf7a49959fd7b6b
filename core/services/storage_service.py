# =============================================================================
# core/services/storage_service.py - Sheet and Chart Storage
# =============================================================================
# In-memory store for imported sheets and their chart configurations.
# One instance is created per application and injected where needed
# (see app/dependencies.py); nothing reaches for it globally.
#
# Stored records are replaced wholesale, never mutated in place, so a grid
# handed to the pipeline cannot change underneath it.
# =============================================================================

import logging
import threading
from uuid import UUID

from app.exceptions import ChartNotFoundError, SheetNotFoundError
from core.models import ChartConfiguration, SheetFile
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


class SheetStore:
    """
    Thread-safe store for sheets and chart configurations.

    Charts are keyed by their sheet; deleting a sheet deletes its charts.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sheets: dict[str, SheetFile] = {}
        self._charts: dict[str, dict[str, ChartConfiguration]] = {}

    # -------------------------------------------------------------------------
    # Sheets
    # -------------------------------------------------------------------------

    def save_sheet(self, sheet: SheetFile) -> SheetFile:
        """Insert or replace a sheet."""
        sheet_id = normalize_uuid(sheet.id)
        with self._lock:
            self._sheets[sheet_id] = sheet
            self._charts.setdefault(sheet_id, {})
        logger.info(f"Stored sheet {sheet_id} ({sheet.title})")
        return sheet

    def get_sheet(self, sheet_id: str | UUID) -> SheetFile:
        """
        Raises:
            SheetNotFoundError: If no sheet has this ID
        """
        key = normalize_uuid(sheet_id)
        with self._lock:
            sheet = self._sheets.get(key)
        if sheet is None:
            raise SheetNotFoundError(key)
        return sheet

    def list_sheets(self) -> list[SheetFile]:
        """All sheets, most recently imported first."""
        with self._lock:
            sheets = list(self._sheets.values())
        return sorted(sheets, key=lambda s: s.imported_at, reverse=True)

    def delete_sheet(self, sheet_id: str | UUID) -> None:
        """
        Delete a sheet and every chart drawn from it.

        Raises:
            SheetNotFoundError: If no sheet has this ID
        """
        key = normalize_uuid(sheet_id)
        with self._lock:
            if key not in self._sheets:
                raise SheetNotFoundError(key)
            del self._sheets[key]
            charts = self._charts.pop(key, {})
        logger.info(f"Deleted sheet {key} and {len(charts)} charts")

    # -------------------------------------------------------------------------
    # Charts
    # -------------------------------------------------------------------------

    def save_chart(self, chart: ChartConfiguration) -> ChartConfiguration:
        """
        Insert or replace a chart configuration.

        Raises:
            SheetNotFoundError: If the chart's sheet is not stored
        """
        sheet_key = normalize_uuid(chart.sheet_id)
        with self._lock:
            if sheet_key not in self._sheets:
                raise SheetNotFoundError(sheet_key)
            self._charts[sheet_key][normalize_uuid(chart.id)] = chart
        logger.debug(f"Stored chart {chart.id} for sheet {sheet_key}")
        return chart

    def get_chart(self, sheet_id: str | UUID, chart_id: str | UUID) -> ChartConfiguration:
        """
        Raises:
            SheetNotFoundError: If the sheet is not stored
            ChartNotFoundError: If the sheet has no chart with this ID
        """
        sheet_key = normalize_uuid(sheet_id)
        chart_key = normalize_uuid(chart_id)
        with self._lock:
            if sheet_key not in self._sheets:
                raise SheetNotFoundError(sheet_key)
            chart = self._charts[sheet_key].get(chart_key)
        if chart is None:
            raise ChartNotFoundError(sheet_key, chart_key)
        return chart

    def list_charts(self, sheet_id: str | UUID) -> list[ChartConfiguration]:
        """A sheet's charts, oldest first."""
        sheet_key = normalize_uuid(sheet_id)
        with self._lock:
            if sheet_key not in self._sheets:
                raise SheetNotFoundError(sheet_key)
            charts = list(self._charts[sheet_key].values())
        return sorted(charts, key=lambda c: c.created_at)

    def delete_chart(self, sheet_id: str | UUID, chart_id: str | UUID) -> None:
        sheet_key = normalize_uuid(sheet_id)
        chart_key = normalize_uuid(chart_id)
        with self._lock:
            if sheet_key not in self._sheets:
                raise SheetNotFoundError(sheet_key)
            if self._charts[sheet_key].pop(chart_key, None) is None:
                raise ChartNotFoundError(sheet_key, chart_key)
        logger.info(f"Deleted chart {chart_key} from sheet {sheet_key}")
