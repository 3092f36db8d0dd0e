"""Shared fixtures for the whole test suite."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def clear_log_context():
    """Keep structlog context vars from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
