"""
Unit Tests for Settings and Logging
===================================

Tests for environment-driven settings and logging configuration.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from web2pdf.config import settings as settings_module
from web2pdf.config.logging import get_logger, get_logging_config, setup_logging
from web2pdf.config.settings import Web2PdfSettings, get_settings, reload_settings


class TestWeb2PdfSettings:
    """Test settings loading and validation."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WEB2PDF_API_ID", "env-id")
        monkeypatch.setenv("WEB2PDF_SECRET_KEY", "env-secret")
        monkeypatch.setenv("WEB2PDF_REQUEST_TIMEOUT", "15")

        settings = Web2PdfSettings()

        assert settings.api_id == "env-id"
        assert settings.secret_key == "env-secret"
        assert settings.request_timeout == 15.0
        assert settings.base_url == "https://web2pdf.dev"

    def test_log_level_normalized(self):
        assert Web2PdfSettings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "field,value",
        [("environment", "staging"), ("log_level", "LOUD"), ("request_timeout", 0)],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Web2PdfSettings(**{field: value})

    def test_get_settings_cached(self, monkeypatch):
        monkeypatch.setattr(settings_module, "settings", None)
        assert get_settings() is get_settings()

    def test_reload_settings(self, monkeypatch):
        monkeypatch.setattr(settings_module, "settings", None)
        first = get_settings()
        monkeypatch.setenv("WEB2PDF_BASE_URL", "https://reloaded.test")

        reloaded = reload_settings()

        assert reloaded is not first
        assert reloaded.base_url == "https://reloaded.test"


class TestLogging:
    """Test logging configuration."""

    def test_console_formatter_per_environment(self):
        dev = get_logging_config(Web2PdfSettings(environment="development"))
        prod = get_logging_config(Web2PdfSettings(environment="production"))

        assert dev["handlers"]["console"]["formatter"] == "standard"
        assert prod["handlers"]["console"]["formatter"] == "json"

    def test_level_applied_to_package_logger(self):
        config = get_logging_config(Web2PdfSettings(log_level="WARNING"))
        assert config["loggers"]["web2pdf"]["level"] == "WARNING"

    def test_setup_logging(self):
        setup_logging(Web2PdfSettings(environment="testing", log_level="DEBUG"))
        try:
            assert logging.getLogger("web2pdf").level == logging.DEBUG
            assert get_logger("web2pdf.test") is not None
        finally:
            package_logger = logging.getLogger("web2pdf")
            package_logger.handlers[:] = [logging.NullHandler()]
            package_logger.setLevel(logging.NOTSET)
            package_logger.propagate = True
            structlog.reset_defaults()

    def test_package_logger_silent_by_default(self):
        """Test the package logger carries a NullHandler until configured."""
        handlers = logging.getLogger("web2pdf").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_logger_wraps_stdlib_logger(self):
        logger = get_logger("web2pdf.core.client").bind(component="test")
        assert logger._logger is logging.getLogger("web2pdf.core.client")
