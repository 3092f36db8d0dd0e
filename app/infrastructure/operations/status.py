"""Error kind enumeration.

The closed set of failure outcomes an invocation can produce.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds surfaced in ``ComponentError.kind``.

    Attributes:
        INVALID_INPUT: Input document could not be decoded or validated
        INVALID_SCOPE: Message lacks tenant, environment or session identity
        UNSUPPORTED_OPERATION: Requested operation id is not supported
        TEMPLATE_ERROR: Template could not be rendered
    """

    INVALID_INPUT = "InvalidInput"
    INVALID_SCOPE = "InvalidScope"
    UNSUPPORTED_OPERATION = "UnsupportedOperation"
    TEMPLATE_ERROR = "TemplateError"

    @property
    def msg_key(self) -> str:
        """Translation key of the localized message for this kind."""
        return _MSG_KEYS[self]


_MSG_KEYS = {
    ErrorKind.INVALID_INPUT: "errors.invalid_input",
    ErrorKind.INVALID_SCOPE: "errors.missing_scope",
    ErrorKind.UNSUPPORTED_OPERATION: "errors.unsupported_operation",
    ErrorKind.TEMPLATE_ERROR: "errors.template_render",
}
