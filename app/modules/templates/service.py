"""Template invocation handling.

Decodes an invocation, selects its locale, enforces scope, renders the
configured template and assembles the result envelope. ``run_component`` is
the single exit point that turns every outcome into a result document.
"""

import json
from typing import Any, Dict, Union

from pydantic import ValidationError

from infrastructure.i18n import DEFAULT_LOCALE, TranslationService
from infrastructure.logging import bind_invocation_context, get_module_logger
from infrastructure.operations import ComponentResult
from modules.templates.errors import (
    InvalidInputError,
    InvalidScopeError,
    InvokeFailure,
    TemplateRenderError,
    UnsupportedOperationError,
)
from modules.templates.renderer import (
    build_context,
    build_control,
    build_payload,
    render_template,
)
from modules.templates.schemas import Invocation, MessageEnvelope, TemplateConfig

logger = get_module_logger()

SUPPORTED_OPERATION = "text"

RawInvocation = Union[str, bytes, bytearray, Dict[str, Any]]


def decode_invocation(raw: RawInvocation) -> Invocation:
    """Decode an invocation from JSON text/bytes or an already parsed mapping.

    Raises:
        InvalidInputError: If the input is not valid JSON or fails validation.
    """
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return Invocation.model_validate_json(raw)
        return Invocation.model_validate(raw)
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e


def select_locale(invocation: Invocation) -> str:
    """Locale the invocation's messages are rendered in."""
    return TranslationService().select_locale(invocation.config, invocation.msg.metadata)


def ensure_scope(msg: MessageEnvelope) -> None:
    """Fail closed unless tenant, environment and session ids are all set.

    Raises:
        InvalidScopeError: If any identifier is empty.
    """
    if not msg.tenant.tenant or not msg.tenant.env or not msg.session_id:
        raise InvalidScopeError()


def invoke_template_from_invocation(
    invocation: Invocation, locale: str
) -> ComponentResult:
    """Render a decoded invocation.

    Template failures are returned inside the result; scope and configuration
    failures are raised.

    Raises:
        InvalidScopeError: If the message scope is incomplete.
        InvalidInputError: If the configuration does not match TemplateConfig.
    """
    ensure_scope(invocation.msg)

    try:
        config = TemplateConfig.model_validate(invocation.config)
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e

    context = build_context(invocation)
    try:
        rendered = render_template(config.templates, context)
    except TemplateRenderError as e:
        logger.warning(
            "template_render_failed",
            kind=e.kind.value,
            error=e.error,
            line=e.line,
            column=e.column,
        )
        return ComponentResult.failure(e.to_component_error(locale))

    logger.info("template_rendered", locale=locale, wrap=config.templates.wrap)
    return ComponentResult.success(
        payload=build_payload(rendered, config.templates),
        control=build_control(config.templates),
    )


def _scoped(invocation: Invocation) -> Any:
    msg = invocation.msg
    return bind_invocation_context(
        correlation_id=msg.id,
        tenant_id=msg.tenant.tenant,
        env_id=msg.tenant.env,
        session_id=msg.session_id,
    )


def invoke_template(operation: str, input_json: Union[str, bytes]) -> str:
    """Entry point returning the result as JSON text.

    Args:
        operation: Requested operation id.
        input_json: Invocation document as JSON.

    Returns:
        Result envelope serialized as JSON.

    Raises:
        UnsupportedOperationError: If operation is not "text" (input is not decoded).
        InvalidInputError: If the invocation cannot be decoded.
        InvalidScopeError: If the message scope is incomplete.
    """
    if operation != SUPPORTED_OPERATION:
        raise UnsupportedOperationError(operation, SUPPORTED_OPERATION)

    invocation = decode_invocation(input_json)
    locale = select_locale(invocation)
    with _scoped(invocation):
        result = invoke_template_from_invocation(invocation, locale)
    return json.dumps(result.to_dict(), ensure_ascii=False)


def run_component(
    raw: RawInvocation, operation: str = SUPPORTED_OPERATION
) -> Dict[str, Any]:
    """Entry point that never raises.

    Unsupported operations and decoding failures are localized in the default
    locale; every other failure in the locale selected from the invocation.

    Args:
        raw: Invocation as JSON text/bytes or a mapping.
        operation: Requested operation id.

    Returns:
        Result envelope document.
    """
    if operation != SUPPORTED_OPERATION:
        failure: InvokeFailure = UnsupportedOperationError(operation, SUPPORTED_OPERATION)
        logger.warning("invocation_rejected", kind=failure.kind.value, operation=operation)
        return ComponentResult.failure(failure.to_component_error(DEFAULT_LOCALE)).to_dict()

    try:
        invocation = decode_invocation(raw)
    except InvalidInputError as e:
        logger.warning("invocation_rejected", kind=e.kind.value, error=e.raw)
        return ComponentResult.failure(e.to_component_error(DEFAULT_LOCALE)).to_dict()

    locale = select_locale(invocation)
    with _scoped(invocation):
        try:
            result = invoke_template_from_invocation(invocation, locale)
        except InvokeFailure as e:
            logger.warning("invocation_rejected", kind=e.kind.value, locale=locale)
            result = ComponentResult.failure(e.to_component_error(locale))
    return result.to_dict()
