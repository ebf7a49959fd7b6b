# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from core.services.storage_service import SheetStore


@lru_cache
def get_sheet_store() -> SheetStore:
    """
    Get the application's SheetStore.

    Tests swap it out with app.dependency_overrides[get_sheet_store].
    """
    return SheetStore()


# Type alias for dependency injection
SheetStoreDep = Annotated[SheetStore, Depends(get_sheet_store)]
