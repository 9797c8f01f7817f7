"""Unit tests for logging configuration."""

import logging
from unittest.mock import patch

import pytest
import structlog

from core.config import Settings
from core.logging import _is_test_environment, configure_logging, get_module_logger


@pytest.fixture
def restore_logging():
    """Put the silenced test configuration back after a test reconfigures it."""
    yield
    configure_logging()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_is_test_environment_detects_pytest(self):
        assert _is_test_environment() is True

    def test_returns_bound_logger(self):
        logger = configure_logging()

        assert hasattr(logger, "bind")

    def test_silenced_under_pytest(self):
        configure_logging()

        assert logging.root.level == logging.CRITICAL + 1

    def test_level_comes_from_settings(self, restore_logging):
        dev = Settings(PREFIX="dev-", LOG_LEVEL="debug", _env_file=None)

        with patch("core.logging._is_test_environment", return_value=False), patch(
            "core.logging.settings", dev
        ), patch("core.logging.logging.basicConfig") as basic_config:
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        dev = Settings(PREFIX="dev-", LOG_LEVEL="loud", _env_file=None)

        with patch("core.logging._is_test_environment", return_value=False), patch(
            "core.logging.settings", dev
        ), patch("core.logging.logging.basicConfig") as basic_config:
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.INFO

    @pytest.mark.parametrize(
        "prefix,renderer",
        [
            ("", structlog.processors.JSONRenderer),
            ("dev-", structlog.dev.ConsoleRenderer),
        ],
    )
    def test_renderer_follows_production_flag(self, restore_logging, prefix, renderer):
        configured = Settings(PREFIX=prefix, _env_file=None)

        with patch("core.logging._is_test_environment", return_value=False), patch(
            "core.logging.settings", configured
        ), patch("core.logging.logging.basicConfig"), patch(
            "core.logging.structlog.configure"
        ) as configure:
            configure_logging()

        processors = configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], renderer)


class TestGetModuleLogger:
    """Tests for get_module_logger."""

    def test_binds_calling_module(self):
        logger = get_module_logger()

        assert hasattr(logger, "bind")
