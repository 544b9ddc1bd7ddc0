"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_with_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production overrides."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        assert configure_logging(settings=mock_settings) is not None
        assert configure_logging(settings=mock_settings) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_get_module_logger_returns_bound_logger(self, mock_settings):
        """get_module_logger returns a BoundLogger with expected methods."""
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_module_loggers_can_log(self):
        """Module loggers in the i18n package accept structured events."""
        from infrastructure.i18n import tree

        tree.logger.info("translations_merged", root_id="shop", lookup_size=0)
