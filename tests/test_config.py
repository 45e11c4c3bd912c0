"""
Tests for configuration module.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from earningsfeed.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    Settings,
    clear_settings_cache,
    get_settings,
)


class TestSettings:
    """Tests for Settings loading and validation."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.api_key is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_ms == DEFAULT_TIMEOUT_MS
        assert settings.LOG_LEVEL == "WARNING"

    def test_loads_from_env(self, mock_env_vars: dict[str, str]) -> None:
        """Test that EARNINGSFEED_* variables are read."""
        settings = get_settings()

        assert settings.api_key == "ef_test_key_1234567890"
        assert settings.base_url == "https://staging.earningsfeed.test"
        assert settings.timeout_ms == 5000
        assert settings.LOG_LEVEL == "DEBUG"

    def test_timeout_must_be_positive(self) -> None:
        with patch.dict(os.environ, {"EARNINGSFEED_TIMEOUT_MS": "0"}, clear=False):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_base_url_must_be_http(self) -> None:
        with patch.dict(os.environ, {"EARNINGSFEED_BASE_URL": "ftp://example.com"}, clear=False):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

        assert "BASE_URL" in str(exc_info.value)

    def test_settings_are_frozen(self) -> None:
        settings = Settings(_env_file=None, API_KEY="k")

        with pytest.raises(ValidationError):
            settings.API_KEY = "other"  # type: ignore[misc]

    def test_redacted_display(self) -> None:
        settings = Settings(_env_file=None, API_KEY="ef_live_abcdefghijklmnop")

        display = settings.redacted_display()

        assert display["API_KEY"] == "ef_live_...mnop"
        assert "abcdefghijkl" not in str(display)

    def test_redacted_display_short_key(self) -> None:
        settings = Settings(_env_file=None, API_KEY="short")
        assert settings.redacted_display()["API_KEY"] == "***"


class TestSettingsCache:
    """Tests for the cached settings accessor."""

    def test_cached(self, mock_env_vars: dict[str, str]) -> None:
        assert get_settings() is get_settings()

    def test_clear_cache(self, mock_env_vars: dict[str, str]) -> None:
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first
