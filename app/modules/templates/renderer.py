"""Template rendering pipeline.

normalize_template -> render (pybars, non-strict) -> build_payload/build_control.

Missing context fields render as empty strings. Structurally invalid
templates (unclosed tags, unbalanced blocks) and templates the engine
rejects fail with TemplateRenderError.
"""

import json
import re
from collections.abc import Sequence
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pybars import Compiler, PybarsError

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from modules.templates.errors import TemplateRenderError
from modules.templates.schemas import Invocation, TemplatesConfig

logger = get_module_logger()

# Exact rewrites of the raw payload reference onto its serialized form.
# Applied once, in order; triple-stash forms first so they are not split.
PAYLOAD_REWRITES = (
    ("{{{ payload }}}", "{{{payload_json}}}"),
    ("{{{payload}}}", "{{{payload_json}}}"),
    ("{{ payload }}", "{{payload_json}}"),
    ("{{payload}}", "{{payload_json}}"),
)

_LOCATION_RE = re.compile(r"character (?P<column>\d+) of line (?P<line>\d+)")

# Built-in block helpers that take exactly one argument.
ARGUMENT_HELPERS = ("if", "unless", "each", "with")


def normalize_template(raw: str) -> str:
    """Rewrite ambiguous ``payload`` references to ``payload_json``.

    Args:
        raw: Template source as configured.

    Returns:
        Template source handed to the engine.

    Examples:
        >>> normalize_template("payload={{payload}}")
        'payload={{payload_json}}'
    """
    normalized = raw
    for source, target in PAYLOAD_REWRITES:
        normalized = normalized.replace(source, target)
    return normalized


def build_context(invocation: Invocation) -> Dict[str, Any]:
    """Assemble the document templates are rendered against.

    Returns:
        ``{"msg": ..., "payload": ..., "payload_json": <compact JSON>}``
    """
    return {
        "msg": invocation.msg.to_document(),
        "payload": invocation.payload,
        "payload_json": json.dumps(
            invocation.payload, separators=(",", ":"), ensure_ascii=False, default=str
        ),
    }


def render_template(config: TemplatesConfig, context: Dict[str, Any]) -> str:
    """Render the configured template against a context.

    Args:
        config: Templates configuration.
        context: Render context from build_context.

    Returns:
        Rendered text.

    Raises:
        TemplateRenderError: If the template is malformed or the engine rejects it.
    """
    source = normalize_template(config.text)
    validate_template(source)
    try:
        template = Compiler().compile(source)
        return str(template(_engine_value(context)))
    except PybarsError as e:
        raise _render_error(str(e)) from e
    except TypeError as e:
        # Built-in helpers called with the wrong number of arguments.
        logger.debug("template_helper_error", error=str(e))
        raise _render_error(str(e)) from e


class PathList(Sequence):
    """Array exposed to templates.

    The engine indexes plain lists with int(segment), which fails on a field
    name. PathList answers path lookups instead: numeric segments index it,
    ``length`` is its size, and any other segment is missing. Rendered
    directly it joins its items with commas.
    """

    def __init__(self, items: Iterable[Any]):
        self._items = list(items)

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathList):
            return self._items == other._items
        return self._items == other

    def __str__(self) -> str:
        return ",".join("" if item is None else str(item) for item in self._items)

    def get(self, key: Any, default: Any = None) -> Any:
        if key == "length":
            return len(self._items)
        try:
            index = int(key)
        except (TypeError, ValueError):
            return default
        if 0 <= index < len(self._items):
            return self._items[index]
        return default


def _engine_value(value: Any) -> Any:
    """Copy of a context value with every list replaced by a PathList."""
    if isinstance(value, dict):
        return {key: _engine_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return PathList(_engine_value(item) for item in value)
    return value


def _location(source: str, offset: int) -> Tuple[int, int]:
    """1-based line and column of offset."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _structure_error(source: str, offset: int, message: str) -> TemplateRenderError:
    line, column = _location(source, offset)
    return TemplateRenderError(
        f"{message} at line {line}, column {column}", line=line, column=column
    )


def validate_template(source: str) -> None:
    """Reject templates the engine would silently truncate.

    Checks that every tag is closed, that block tags are balanced and that
    the built-in block helpers get an argument.

    Args:
        source: Normalized template source.

    Raises:
        TemplateRenderError: With the line and column of the offending tag.

    """
    blocks: List[Tuple[str, int]] = []
    position = 0
    while True:
        start = source.find("{{", position)
        if start < 0:
            break

        if source.startswith("{{!--", start):
            end = source.find("--}}", start + 5)
            if end < 0:
                raise _structure_error(source, start, "unclosed comment")
            position = end + 4
            continue

        triple = source.startswith("{{{", start)
        closing = "}}}" if triple else "}}"
        end = source.find(closing, start + len(closing))
        if end < 0:
            raise _structure_error(source, start, "unclosed tag")
        position = end + len(closing)

        body = source[start + len(closing) : end].strip().strip("~").strip()
        if triple or not body or body[0] not in "#^/":
            continue

        sigil, words = body[0], body[1:].split()
        if not words:
            if sigil == "^":
                continue  # {{^}} is an else
            raise _structure_error(source, start, f"block tag '{body}' has no name")

        name = words[0]
        if sigil == "/":
            if not blocks:
                raise _structure_error(source, start, f"unexpected closing tag '{{{{/{name}}}}}'")
            opened, _ = blocks.pop()
            if opened != name:
                raise _structure_error(
                    source, start, f"closing tag '{{{{/{name}}}}}' does not match '{{{{#{opened}}}}}'"
                )
            continue

        if sigil == "#" and name in ARGUMENT_HELPERS and len(words) < 2:
            raise _structure_error(source, start, f"'{{{{#{name}}}}}' requires an argument")
        blocks.append((name, start))

    if blocks:
        name, start = blocks[-1]
        raise _structure_error(source, start, f"unterminated block '{{{{#{name}}}}}'")


def _render_error(message: str) -> TemplateRenderError:
    match = _LOCATION_RE.search(message)
    if match is None:
        return TemplateRenderError(message)
    return TemplateRenderError(
        message,
        line=int(match.group("line")),
        column=int(match.group("column")),
    )


def nest_payload(path: str, rendered: str) -> Any:
    """Nest text under a dotted path, innermost segment first.

    Empty segments are dropped; a path with no segments yields the bare text.

    Examples:
        >>> nest_payload("a.b", "X")
        {'a': {'b': 'X'}}
    """
    value: Any = rendered
    for segment in reversed([s for s in path.split(".") if s]):
        value = {segment: value}
    return value


def build_payload(rendered: str, config: TemplatesConfig) -> Any:
    """Shape the rendered text into the output payload.

    Args:
        rendered: Rendered text.
        config: Templates configuration (``wrap``, ``output_path``).

    Returns:
        The bare text when ``wrap`` is false, otherwise the nested object.
    """
    if not config.wrap:
        return rendered
    path = config.output_path or settings.templates.default_output_path
    return nest_payload(path, rendered)


def build_control(config: TemplatesConfig) -> Dict[str, str]:
    """Routing side channel emitted with every successful render."""
    routing: Optional[str] = config.routing
    if routing is None or not routing.strip():
        routing = settings.templates.default_routing
    return {"routing": routing}
