"""
Unit tests for Settings.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings, load_settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FTP_HOST", "ftp.supplier.test")
        monkeypatch.setenv("FTP_USER", "u")
        monkeypatch.setenv("FTP_PASS", "p")
        monkeypatch.setenv("BIGCOMMERCE_API_URL", "https://api.test/products/")
        monkeypatch.setenv("BIGCOMMERCE_TOKEN", "tok")

        settings = load_settings(_env_file=None)

        assert settings.ftp_host == "ftp.supplier.test"
        assert settings.ftp_configured
        assert settings.bigcommerce_api_url == "https://api.test/products"
        assert settings.bigcommerce_token == "tok"

    def test_defaults(self):
        settings = Settings(
            _env_file=None,
            bigcommerce_api_url="https://api.test/products",
            bigcommerce_token="tok",
        )

        assert settings.ftp_file_path == "/Stock.txt"
        assert settings.local_feed_path.name == "stock.txt"
        assert settings.catalog_timeout_seconds is None
        assert settings.sync_create_missing_variants is False
        assert not settings.is_production

    def test_missing_api_credentials_rejected(self, monkeypatch):
        monkeypatch.delenv("BIGCOMMERCE_API_URL", raising=False)
        monkeypatch.delenv("BIGCOMMERCE_TOKEN", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(
                _env_file=None,
                bigcommerce_api_url="https://api.test/products",
                bigcommerce_token="tok",
                log_level="LOUD",
            )
