# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the PlotReady API:
# - test_readers.py: Format adapters (CSV, workbooks, dispatch)
# - test_profiler.py: Column type inference and previews
# - test_charting.py: Selection validation and point extraction
# - test_models.py: Unit tests for Pydantic model validation
# - test_services.py: Import, storage and chart services
# - test_api.py: HTTP endpoints through TestClient
# - test_config.py: Settings defaults and parsing
#
# Run tests with: pytest
# =============================================================================
