"""Templates module - localized, template-rendered replies.

Public API:
    - run_component(): render an invocation into a result document (never raises)
    - invoke_template(): JSON in, JSON out; raises InvokeFailure
    - qa_spec() / apply_answers(): interactive setup flow
    - i18n_keys(): every translation key the component may show
"""

from modules.templates.errors import (
    InvalidInputError,
    InvalidScopeError,
    InvokeFailure,
    TemplateRenderError,
    UnsupportedOperationError,
)
from modules.templates.normalizer import (
    extract_template_text_answer,
    merge_answers,
    normalize_config_for_schema,
    overlay_answers,
    to_template_config,
)
from modules.templates.qa import QaMode, QaSpec, Question, apply_answers, i18n_keys, qa_spec
from modules.templates.service import (
    SUPPORTED_OPERATION,
    invoke_template,
    run_component,
)

__all__ = [
    "SUPPORTED_OPERATION",
    "run_component",
    "invoke_template",
    "InvokeFailure",
    "InvalidInputError",
    "InvalidScopeError",
    "UnsupportedOperationError",
    "TemplateRenderError",
    "merge_answers",
    "normalize_config_for_schema",
    "extract_template_text_answer",
    "overlay_answers",
    "to_template_config",
    "QaMode",
    "QaSpec",
    "Question",
    "qa_spec",
    "apply_answers",
    "i18n_keys",
]
