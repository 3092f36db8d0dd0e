"""Unit tests for infrastructure.logging.setup module."""

import pytest
import structlog

from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.logging.setup import _is_test_environment


@pytest.mark.unit
class TestLoggingSetup:
    """Test suite for logger configuration."""

    def test_detects_test_environment(self):
        assert _is_test_environment() is True

    def test_configure_logging_returns_logger(self):
        logger = configure_logging()
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_module_logger_binds_component(self):
        """get_module_logger binds the calling module's name."""
        logger = get_module_logger()
        context = structlog.get_context(logger)

        assert context["component"] == __name__.split(".")[-1]
        assert context["module_path"] == __name__

    def test_logging_is_silent_under_pytest(self, capsys):
        get_module_logger().warning("should_not_print", value=1)
        captured = capsys.readouterr()

        assert "should_not_print" not in captured.out
        assert "should_not_print" not in captured.err
