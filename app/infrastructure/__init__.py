"""Infrastructure modules for the templates component.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings, TemplatesFeatureSettings)
- logging: Structured logging (get_module_logger, bind_invocation_context)
- i18n: Catalog store, locale resolution and translation lookup
- operations: Result envelope and error taxonomy (ComponentResult, ErrorKind)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import bind_invocation_context, get_module_logger

# Operations
from infrastructure.operations import ComponentError, ComponentResult, ErrorKind

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    "bind_invocation_context",
    # Operations
    "ComponentError",
    "ComponentResult",
    "ErrorKind",
]
