"""Tests for configuration and logging setup"""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from voice_quote.config.logging import setup_logging
from voice_quote.config.settings import Settings, settings as loaded_settings


class TestSettings:
    """Test Settings defaults and environment overrides"""

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_CALL_DURATION", "DEFAULT_TOTAL_MINUTES", "DEFAULT_MARGIN", "LOG_LEVEL"):
            monkeypatch.delenv(f"VOICE_QUOTE_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_call_duration == 5
        assert settings.default_total_minutes == 1000
        assert settings.default_margin == 20
        assert settings.currency_symbol == "$"
        assert settings.per_minute_decimals == 4
        assert settings.total_decimals == 2
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("VOICE_QUOTE_DEFAULT_MARGIN", "35")
        monkeypatch.setenv("VOICE_QUOTE_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.default_margin == 35
        assert settings.log_level == "DEBUG"

    def test_margin_default_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_margin=120)


class TestSetupLogging:
    """Test logging configuration"""

    def test_uses_settings_level(self):
        with patch("voice_quote.config.logging.logging.basicConfig") as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs["level"] == loaded_settings.log_level

    def test_explicit_level(self):
        with patch("voice_quote.config.logging.logging.basicConfig") as basic_config:
            setup_logging(logging.DEBUG)

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
