"""Unit tests for structured logging setup."""

import logging

import pytest

from component_i18n.core.logging import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        """_is_test_environment returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True

    def test_configure_logging_in_test_environment(self):
        """configure_logging suppresses logs in test environment."""
        configure_logging()
        assert logging.root.level == logging.CRITICAL + 1

    def test_configure_logging_accepts_overrides(self):
        """configure_logging accepts a log level and production flag."""
        assert hasattr(configure_logging(log_level="DEBUG"), "bind")
        assert hasattr(configure_logging(is_production=True), "bind")


@pytest.mark.unit
class TestGetModuleLogger:
    """Tests for get_module_logger()."""

    def test_returns_bindable_logger(self):
        """get_module_logger returns a logger usable with keyword fields."""
        logger = get_module_logger()
        assert hasattr(logger, "info")
        logger.info("module_logger_test", component_id="app")
