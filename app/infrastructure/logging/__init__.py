"""Structured logging infrastructure.

Centralized structlog configuration for the component.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_module_logger(): Get a logger for the calling module
    - bind_invocation_context(): Context manager for invocation-scoped logging
    - get_correlation_id(): Get current correlation ID from context
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_invocation_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_invocation_context",
    "get_correlation_id",
]
