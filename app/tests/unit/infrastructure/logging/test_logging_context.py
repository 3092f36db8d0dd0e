"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_invocation_context() context manager
- get_correlation_id()
- Context isolation and cleanup
"""

import uuid

import pytest
import structlog

from infrastructure.logging import bind_invocation_context, get_correlation_id


@pytest.mark.unit
class TestBindInvocationContext:
    """Test suite for bind_invocation_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_invocation_context(tenant_id="acme"):
            correlation_id = get_correlation_id()
            assert correlation_id is not None
            uuid.UUID(correlation_id)

    def test_uses_provided_correlation_id(self):
        with bind_invocation_context(correlation_id="msg-1"):
            assert get_correlation_id() == "msg-1"

    def test_binds_scope(self):
        """Tenant, environment and session are bound to context."""
        with bind_invocation_context(tenant_id="acme", env_id="dev", session_id="s-1"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["tenant_id"] == "acme"
            assert ctx["env_id"] == "dev"
            assert ctx["session_id"] == "s-1"

    def test_omits_unset_fields(self):
        with bind_invocation_context(correlation_id="msg-1"):
            ctx = structlog.contextvars.get_contextvars()
            assert "tenant_id" not in ctx
            assert "session_id" not in ctx

    def test_binds_extra_context(self):
        with bind_invocation_context(locale="fr"):
            assert structlog.contextvars.get_contextvars()["locale"] == "fr"

    def test_unbinds_on_exit(self):
        """Nothing leaks into the next invocation."""
        with bind_invocation_context(correlation_id="msg-1", tenant_id="acme"):
            pass

        assert get_correlation_id() is None
        assert "tenant_id" not in structlog.contextvars.get_contextvars()

    def test_unbinds_on_exception(self):
        with pytest.raises(RuntimeError):
            with bind_invocation_context(correlation_id="msg-1"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None

    def test_sequential_invocations_isolated(self):
        with bind_invocation_context(correlation_id="a", tenant_id="t-a"):
            first = structlog.contextvars.get_contextvars()["tenant_id"]
        with bind_invocation_context(correlation_id="b", tenant_id="t-b"):
            second = structlog.contextvars.get_contextvars()["tenant_id"]

        assert (first, second) == ("t-a", "t-b")
