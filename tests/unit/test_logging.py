"""Unit tests for logging setup."""

import logging
from pathlib import Path

import pytest

from solarsite.config import LoggingConfig
from solarsite.exceptions import ConfigurationError
from solarsite.utils.logging import configure_from_settings, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Leave logging at the default level after each test."""
    yield
    configure_logging(level="WARNING")


def test_configure_console():
    """Reconfiguring replaces the previous handler and level."""
    configure_logging(level="DEBUG")
    handlers_before = len(logging.getLogger().handlers)
    configure_logging(level="INFO")

    assert logging.getLogger().level == logging.INFO
    assert len(logging.getLogger().handlers) == handlers_before


def test_configure_json_with_file(tmp_path: Path):
    """JSON logging writes to the configured file."""
    log_file = tmp_path / "logs" / "solarsite.log"
    configure_logging(level="INFO", format_type="json", log_file=log_file)

    get_logger("solarsite.test").info("Site evaluated", total_score=7.5)
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "Site evaluated" in content
    assert "7.5" in content


def test_configure_from_settings_verbose():
    """verbose forces DEBUG."""
    configure_from_settings(LoggingConfig(level="ERROR"), verbose=True)
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level():
    """Unknown levels are rejected."""
    with pytest.raises(ConfigurationError, match="Unknown log level"):
        configure_logging(level="LOUD")


def test_unknown_format():
    """Unknown formats are rejected."""
    with pytest.raises(ConfigurationError, match="Unknown log format"):
        configure_logging(format_type="xml")
