"""Result envelope and error taxonomy.

Standardized result types shared by the success and failure paths of every
invocation.
"""

from infrastructure.operations.result import ComponentError, ComponentResult
from infrastructure.operations.status import ErrorKind

__all__ = [
    "ComponentError",
    "ComponentResult",
    "ErrorKind",
]
