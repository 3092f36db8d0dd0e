"""Configuration answer merging and normalization.

Configuration documents reach the component in several shapes (flat dotted
keys, nested objects, bare answers). Everything here works on untyped
documents and always returns a document whose ``templates`` section holds a
non-blank ``text``. ``to_template_config`` is the hand-off to the typed model.
"""

import copy
from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n import DEFAULT_LOCALE, t
from infrastructure.logging import get_module_logger
from modules.templates.schemas import TemplateConfig

logger = get_module_logger()

TEMPLATES_KEY = "templates"

# Fields accepted as top-level ``templates.<field>`` keys.
MIGRATED_FIELDS = ("output_path", "wrap", "routing", "text")

DEFAULT_TEXT_KEY = "qa.text.default"


def default_template_text() -> str:
    """Default template, always resolved in the default locale."""
    return t(DEFAULT_LOCALE, DEFAULT_TEXT_KEY)


def _non_blank(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def merge_answers(current_config: Any, answers: Any) -> Dict[str, Any]:
    """Pick the merge base for submitted answers.

    An answers object is preferred wholesale; otherwise the current
    configuration is kept; otherwise an empty document is used.

    Args:
        current_config: Existing configuration document.
        answers: Submitted answers document.

    Returns:
        A copy of the chosen document.
    """
    if isinstance(answers, Mapping):
        return copy.deepcopy(dict(answers))
    if isinstance(current_config, Mapping):
        return copy.deepcopy(dict(current_config))
    return {}


def normalize_config_for_schema(value: Any) -> Dict[str, Any]:
    """Make a configuration document satisfy the configuration schema.

    - ``templates`` is an object (created when absent or not an object)
    - top-level ``templates.<field>`` keys move into ``templates`` without
      overwriting a value already nested there
    - a missing or blank ``templates.text`` is replaced by the default template

    Args:
        value: Untyped configuration document.

    Returns:
        Normalized copy of the document.

    Examples:
        >>> normalize_config_for_schema({"templates.text": "Hi"})
        {'templates': {'text': 'Hi'}}
    """
    root = copy.deepcopy(dict(value)) if isinstance(value, Mapping) else {}

    templates = root.pop(TEMPLATES_KEY, None)
    templates = dict(templates) if isinstance(templates, Mapping) else {}

    for field in MIGRATED_FIELDS:
        dotted = f"{TEMPLATES_KEY}.{field}"
        if dotted in root:
            templates.setdefault(field, root.pop(dotted))

    if _non_blank(templates.get("text")) is None:
        logger.debug("default_template_injected")
        templates["text"] = default_template_text()

    root[TEMPLATES_KEY] = templates
    return root


def _answer_text(answers: Any) -> Optional[str]:
    if isinstance(answers, str):
        return _non_blank(answers)
    if not isinstance(answers, Mapping):
        return None

    for key in ("text", "template", f"{TEMPLATES_KEY}.text"):
        text = _non_blank(answers.get(key))
        if text is not None:
            return text

    nested = answers.get(TEMPLATES_KEY)
    if isinstance(nested, Mapping):
        return _non_blank(nested.get("text"))
    return None


def extract_template_text_answer(current_config: Any, answers: Any) -> Dict[str, Any]:
    """Apply a template-text answer to the current configuration.

    The answer may be a bare string or an object exposing ``text``,
    ``template``, ``templates.text`` (dotted) or nested ``templates.text``,
    checked in that order. Only ``templates.text`` is changed; blank answers
    leave the configuration untouched.

    Args:
        current_config: Existing configuration document.
        answers: Submitted answer.

    Returns:
        Updated copy of the configuration.
    """
    config = copy.deepcopy(dict(current_config)) if isinstance(current_config, Mapping) else {}
    text = _answer_text(answers)
    if text is None:
        return config

    templates = config.get(TEMPLATES_KEY)
    templates = dict(templates) if isinstance(templates, Mapping) else {}
    templates["text"] = text
    config[TEMPLATES_KEY] = templates
    return config


def _answered(value: Any) -> bool:
    if value is None:
        return False
    return not isinstance(value, str) or bool(value.strip())


def overlay_answers(current_config: Any, answers: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply an answers object on top of the current configuration.

    Fields left unanswered (absent, null or blank) keep their current value.
    Template fields may be answered dotted (``templates.wrap``) or nested
    under ``templates``; the dotted form wins when both are given.

    Args:
        current_config: Existing configuration document.
        answers: Submitted answers object.

    Returns:
        Updated copy of the configuration.

    Examples:
        >>> overlay_answers({"templates": {"text": "Hi", "routing": "next"}}, {"templates.wrap": False})
        {'templates': {'text': 'Hi', 'routing': 'next', 'wrap': False}}
    """
    config = extract_template_text_answer(current_config, answers)
    templates = config.get(TEMPLATES_KEY)
    templates = dict(templates) if isinstance(templates, Mapping) else {}

    nested = answers.get(TEMPLATES_KEY)
    nested = nested if isinstance(nested, Mapping) else {}
    for field in MIGRATED_FIELDS:
        if field == "text":
            continue
        dotted = answers.get(f"{TEMPLATES_KEY}.{field}")
        value = dotted if _answered(dotted) else nested.get(field)
        if _answered(value):
            templates[field] = copy.deepcopy(value)
    config[TEMPLATES_KEY] = templates

    consumed = {TEMPLATES_KEY, "text", "template"}
    consumed.update(f"{TEMPLATES_KEY}.{field}" for field in MIGRATED_FIELDS)
    for key, value in answers.items():
        if key not in consumed and _answered(value):
            config[key] = copy.deepcopy(value)
    return config


def to_template_config(document: Any) -> TemplateConfig:
    """Normalize an untyped document and convert it to TemplateConfig.

    Raises:
        pydantic.ValidationError: If a field has the wrong type (e.g. ``wrap``).
    """
    return TemplateConfig.model_validate(normalize_config_for_schema(document))
