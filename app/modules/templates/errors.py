"""Invocation failures.

Each failure has a fixed ErrorKind and converts itself into a localized
ComponentError. ``str(failure)`` is the English message.
"""

from typing import Any, Dict, List, Optional, Tuple

from infrastructure.i18n import DEFAULT_LOCALE, tf
from infrastructure.operations import ComponentError, ErrorKind


class InvokeFailure(Exception):
    """Base exception for every invocation failure.

    Example:
        try:
            invoke_template("text", raw)
        except InvokeFailure as e:
            error = e.to_component_error(locale)
    """

    kind: ErrorKind

    def message_args(self) -> List[Tuple[str, str]]:
        """Named arguments interpolated into the localized message."""
        return []

    def details(self) -> Optional[Dict[str, Any]]:
        return None

    def localized_message(self, locale: str) -> str:
        return tf(locale, self.kind.msg_key, self.message_args())

    def to_component_error(self, locale: str) -> ComponentError:
        """Build the localized error for the result envelope.

        Args:
            locale: Locale the message is resolved in.

        Returns:
            ComponentError with kind, msg_key, message and details.
        """
        return ComponentError(
            kind=self.kind,
            msg_key=self.kind.msg_key,
            message=self.localized_message(locale),
            details=self.details(),
        )

    def __str__(self) -> str:
        return self.localized_message(DEFAULT_LOCALE)


class InvalidInputError(InvokeFailure):
    """Raised when the input document cannot be decoded or validated.

    Attributes:
        raw: Parser or validator message.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, raw: str):
        super().__init__(raw)
        self.raw = raw

    def details(self) -> Optional[Dict[str, Any]]:
        return {"error": self.raw}

    def __str__(self) -> str:
        return f"{self.localized_message(DEFAULT_LOCALE)} ({self.raw})"


class InvalidScopeError(InvokeFailure):
    """Raised when the message lacks tenant, environment or session identity."""

    kind = ErrorKind.INVALID_SCOPE


class UnsupportedOperationError(InvokeFailure):
    """Raised when the requested operation id is not the supported one.

    Attributes:
        operation: Requested operation id.
        supported: The only supported operation id.
    """

    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, operation: str, supported: str):
        super().__init__(operation, supported)
        self.operation = operation
        self.supported = supported

    def message_args(self) -> List[Tuple[str, str]]:
        return [("operation", self.operation), ("supported", self.supported)]


class TemplateRenderError(InvokeFailure):
    """Raised when the template engine rejects a template.

    Attributes:
        error: Engine message.
        line: 1-based line of the problem, when the engine reports it.
        column: 1-based column of the problem, when the engine reports it.
    """

    kind = ErrorKind.TEMPLATE_ERROR

    def __init__(
        self, error: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        super().__init__(error)
        self.error = error
        self.line = line
        self.column = column

    def details(self) -> Optional[Dict[str, Any]]:
        details: Dict[str, Any] = {"error": self.error}
        if self.line is not None:
            details["line"] = self.line
        if self.column is not None:
            details["column"] = self.column
        return details
