# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the PlotReady API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main          (uses API_HOST / API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    PlotReadyException,
    plotready_exception_handler,
    validation_exception_handler,
)
from app.routers import charts, health, sheets
from app.routers.health import API_VERSION

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration and shutdown.
    """
    logger.info(f"Starting PlotReady API in {settings.ENVIRONMENT} mode")
    logger.info(f"Accepting file types: {settings.allowed_extensions_list}")

    yield

    logger.info("Shutting down PlotReady API")


# Create FastAPI application
app = FastAPI(
    title="PlotReady API",
    description="""
## Spreadsheet-to-Chart Data API

PlotReady imports CSV and Excel files, works out what each column contains,
and prepares validated (x, y) series for charting.

### How It Works

1. **Import a file** - Upload a `.csv`, `.xlsx` or `.xls` file
2. **Inspect columns** - See each column's inferred type (numeric, date, text, mixed)
3. **Validate a selection** - Check an x/y column pair before charting
4. **Save a chart** - Store a chart configuration (type, colour, labels)
5. **Render** - Fetch the chart's points in source row order

### Quick Start

```bash
# 1. Import a file
curl -X POST http://localhost:8000/api/v1/sheets -F "file=@sales.csv"

# 2. Inspect columns
curl http://localhost:8000/api/v1/sheets/{id}/columns

# 3. Save a chart
curl -X POST http://localhost:8000/api/v1/sheets/{id}/charts \\
  -H "Content-Type: application/json" \\
  -d '{"chart_type": "line", "x_column": 0, "y_column": 1}'
```
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Sheets",
            "description": "Import files and inspect their columns",
        },
        {
            "name": "Charts",
            "description": "Save chart configurations and fetch render data",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PlotReadyException)
async def handle_plotready_exception(request: Request, exc: PlotReadyException):
    """Handle custom PlotReady exceptions."""
    return await plotready_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Sheet import and column endpoints
app.include_router(
    sheets.router,
    prefix="/api/v1/sheets",
    tags=["Sheets"]
)

# Chart configuration endpoints
app.include_router(
    charts.router,
    prefix="/api/v1/sheets",
    tags=["Charts"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "PlotReady API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting PlotReady API on {settings.API_HOST}:{settings.API_PORT}")

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
        log_level="debug" if settings.DEBUG else "info",
    )
