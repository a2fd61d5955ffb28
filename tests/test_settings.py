"""
==============================================================================
Settings Tests
==============================================================================
"""

import logging

from hwinventory.config import Settings, get_settings


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self, fresh_settings):
        """Test default values."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "Hardware Component Inventory"
        assert settings.app_env == "development"
        assert settings.lookup_part_number == "CPU001"
        assert settings.log_level == logging.INFO

    def test_env_override(self, fresh_settings, monkeypatch):
        """Test HWINV_ environment variables override defaults."""
        monkeypatch.setenv("HWINV_LOOKUP_PART_NUMBER", "HDD001")
        monkeypatch.setenv("HWINV_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.lookup_part_number == "HDD001"
        assert settings.log_level == logging.DEBUG

    def test_unknown_env_falls_back(self, fresh_settings, monkeypatch):
        """Test unknown environments fall back to development."""
        monkeypatch.setenv("HWINV_APP_ENV", "qa")

        settings = Settings(_env_file=None)

        assert settings.app_env == "development"
        assert not settings.is_production

    def test_env_normalized(self, fresh_settings, monkeypatch):
        """Test environment names are normalized."""
        monkeypatch.setenv("HWINV_APP_ENV", " Production ")

        assert Settings(_env_file=None).is_production

    def test_get_settings_is_cached(self, fresh_settings):
        """Test get_settings() returns a single instance."""
        assert get_settings() is get_settings()
