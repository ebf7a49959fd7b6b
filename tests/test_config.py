# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================
# Tests for app/config.py: defaults, comma-separated list parsing and the
# values the `python -m app.main` launcher reads.
#
# Run with: pytest tests/test_config.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_server_defaults(self):
        config = Settings()

        assert config.API_HOST == "0.0.0.0"
        assert config.API_PORT == 8000

    def test_server_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_HOST", "127.0.0.1")
        monkeypatch.setenv("API_PORT", "9001")

        config = Settings()

        assert (config.API_HOST, config.API_PORT) == ("127.0.0.1", 9001)

    def test_port_range(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "70000")

        with pytest.raises(ValidationError):
            Settings()

    def test_environment_flags(self):
        assert Settings(ENVIRONMENT="development").is_development
        assert not Settings(ENVIRONMENT="production").is_development
        assert Settings(ENVIRONMENT="production").is_production

    def test_list_parsing(self):
        config = Settings(
            ALLOWED_EXTENSIONS=" .CSV, .xlsx ,",
            CSV_ENCODINGS="utf-8, latin-1",
        )

        assert config.allowed_extensions_list == [".csv", ".xlsx"]
        assert config.csv_encodings_list == ["utf-8", "latin-1"]
        assert config.max_upload_size_bytes == 50 * 1024 * 1024
