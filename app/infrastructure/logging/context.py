"""Invocation context binding for structured logging.

Binds the scope of one invocation (tenant, environment, session and the
message id used as correlation id) to structlog's context variables so that
every log entry emitted while handling the invocation carries it.

Usage:
    from infrastructure.logging import bind_invocation_context

    with bind_invocation_context(correlation_id=msg.id, tenant_id="acme"):
        logger.info("rendering_template")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_invocation_context(
    correlation_id: Optional[str] = None,
    tenant_id: Optional[str] = None,
    env_id: Optional[str] = None,
    session_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind invocation-scoped context to all logs within the block.

    Args:
        correlation_id: Identifier tying log lines to one invocation.
            Auto-generated if not provided.
        tenant_id: Tenant the invocation runs for.
        env_id: Environment the invocation runs in.
        session_id: Conversation session of the message.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars and removed on exit.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if tenant_id is not None:
        context["tenant_id"] = tenant_id
    if env_id is not None:
        context["env_id"] = env_id
    if session_id is not None:
        context["session_id"] = session_id

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    return structlog.contextvars.get_contextvars().get("correlation_id")
