"""Tests for metagen.config."""

import pytest

from metagen.config import PLACEHOLDER_API_KEY, Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("GEMINI_API_KEY", "ENVIRONMENT", "PORT", "FETCH_TIMEOUT_SECONDS"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings(_env_file=None)
        assert settings.gemini_api_key == PLACEHOLDER_API_KEY
        assert settings.environment == "development"
        assert settings.port == 3000
        assert settings.fetch_timeout_seconds == 10.0

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("PORT", "8080")
        settings = Settings(_env_file=None)
        assert settings.gemini_api_key == "env-key"
        assert settings.environment == "production"
        assert settings.port == 8080

    @pytest.mark.parametrize("key", ["", "   ", PLACEHOLDER_API_KEY])
    def test_ai_disabled_for_missing_or_placeholder_key(self, key):
        assert Settings(_env_file=None, gemini_api_key=key).ai_enabled is False

    def test_ai_enabled_for_real_key(self):
        assert Settings(_env_file=None, gemini_api_key="AIza-real").ai_enabled is True

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
