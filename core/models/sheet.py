# =============================================================================
# core/models/sheet.py - Imported Sheet Schemas
# =============================================================================
# These models define the record produced by the import pipeline:
# - SheetFile: the imported Grid plus its identity and origin
# - SheetSummary: list view without the grid payload
#
# The import pipeline only *produces* a SheetFile. Storing it is a separate,
# explicit step (see core/services/storage_service.py).
# =============================================================================

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from .grid import Grid, deserialize_grid, serialize_grid


TITLE_MAX_LENGTH = 255


class SheetFile(BaseModel):
    """
    An imported table.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "title": "sales.csv",
            "imported_at": "2024-01-15T10:30:00Z",
            "file_extension": "csv",
            "data": [["Month", "Sales"], ["Jan", "100"]]
        }
    """

    id: UUID = Field(default_factory=uuid4, description="Unique sheet identifier")

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Display title (the original filename)"
    )

    imported_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the file was imported"
    )

    file_extension: str = Field(
        ...,
        description="Originating file extension, lower-case without the dot"
    )

    data: Grid = Field(
        default_factory=list,
        description="Imported rows; row 0 is the header"
    )

    @field_validator("file_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        return value.strip().lstrip(".").lower()

    @property
    def row_count(self) -> int:
        """Number of data rows (header excluded)."""
        return max(len(self.data) - 1, 0)

    @property
    def column_names(self) -> list[str]:
        return list(self.data[0]) if self.data else []

    def to_storage_json(self) -> str:
        """Serialize for storage. The grid is nested as a JSON array-of-arrays."""
        return self.model_dump_json()

    @classmethod
    def from_storage_json(cls, payload: str | bytes) -> "SheetFile":
        return cls.model_validate_json(payload)

    def grid_json(self) -> str:
        return serialize_grid(self.data)

    @classmethod
    def from_grid_json(
        cls,
        payload: str | bytes,
        title: str,
        file_extension: str,
    ) -> "SheetFile":
        return cls(title=title, file_extension=file_extension, data=deserialize_grid(payload))

    def to_summary(self) -> "SheetSummary":
        return SheetSummary(
            id=self.id,
            title=self.title,
            imported_at=self.imported_at,
            file_extension=self.file_extension,
            row_count=self.row_count,
            column_names=self.column_names,
        )


class SheetSummary(BaseModel):
    """Sheet metadata returned by list endpoints (no grid payload)."""

    id: UUID
    title: str
    imported_at: datetime
    file_extension: str
    row_count: int = Field(default=0, ge=0, description="Data rows, header excluded")
    column_names: list[str] = Field(default_factory=list)
