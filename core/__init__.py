# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the records and services around the pipeline:
# - models/: Pydantic schemas (grid values, sheets, chart configurations)
# - services/: import pipeline, sheet/chart store, chart management
#
# The pure ingestion/inference/validation functions live in lib/.
# =============================================================================
