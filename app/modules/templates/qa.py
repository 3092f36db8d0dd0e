"""Setup questions and answer application.

The host asks these questions when the component is added, updated or
removed, then hands the answers back through ``apply_answers``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from infrastructure.configuration import settings
from infrastructure.i18n import DEFAULT_LOCALE, TranslationService, t
from infrastructure.logging import get_module_logger
from modules.templates.normalizer import (
    default_template_text,
    extract_template_text_answer,
    merge_answers,
    normalize_config_for_schema,
    overlay_answers,
)

logger = get_module_logger()

# Keys referenced by the component descriptor rather than by questions.
DESCRIPTOR_KEYS = ("component.display_name", "component.operation.text")


class QaMode(str, Enum):
    """Setup flow modes."""

    DEFAULT = "default"
    SETUP = "setup"
    UPDATE = "update"
    REMOVE = "remove"


class QuestionKind(str, Enum):
    TEXT = "text"
    BOOL = "bool"


@dataclass(frozen=True)
class I18nText:
    """Reference to a translated string, resolved by the host or on demand."""

    key: str

    def resolve(self, locale: str = DEFAULT_LOCALE) -> str:
        return t(locale, self.key)

    def to_dict(self, locale: Optional[str] = None) -> Dict[str, str]:
        data = {"key": self.key}
        if locale is not None:
            data["text"] = self.resolve(locale)
        return data


@dataclass(frozen=True)
class Question:
    """One setup question.

    Attributes:
        id: Dotted configuration field the answer is stored under.
        label: Question label.
        kind: Answer type.
        required: Whether an answer must be given.
        help: Optional help text.
        default: Suggested answer.
    """

    id: str
    label: I18nText
    kind: QuestionKind = QuestionKind.TEXT
    required: bool = False
    help: Optional[I18nText] = None
    default: Any = None

    def i18n_keys(self) -> List[str]:
        keys = [self.label.key]
        if self.help is not None:
            keys.append(self.help.key)
        return keys

    def to_dict(self, locale: Optional[str] = None) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label.to_dict(locale),
            "help": self.help.to_dict(locale) if self.help is not None else None,
            "kind": self.kind.value,
            "required": self.required,
            "default": self.default,
        }


@dataclass(frozen=True)
class QaSpec:
    """Questions asked for one mode."""

    mode: QaMode
    title: I18nText
    questions: Tuple[Question, ...] = field(default_factory=tuple)
    description: Optional[I18nText] = None

    def i18n_keys(self) -> List[str]:
        keys = [self.title.key]
        if self.description is not None:
            keys.append(self.description.key)
        for question in self.questions:
            keys.extend(question.i18n_keys())
        return keys

    def to_dict(self, locale: Optional[str] = None) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "title": self.title.to_dict(locale),
            "description": (
                self.description.to_dict(locale) if self.description is not None else None
            ),
            "questions": [question.to_dict(locale) for question in self.questions],
        }


def _questions(required: bool) -> Tuple[Question, ...]:
    return (
        Question(
            id="templates.text",
            label=I18nText("qa.text.label"),
            help=I18nText("qa.text.help"),
            kind=QuestionKind.TEXT,
            required=required,
            default=default_template_text(),
        ),
        Question(
            id="templates.output_path",
            label=I18nText("qa.output_path.label"),
            help=I18nText("qa.output_path.help"),
            kind=QuestionKind.TEXT,
            default=settings.templates.default_output_path,
        ),
        Question(
            id="templates.wrap",
            label=I18nText("qa.wrap.label"),
            help=I18nText("qa.wrap.help"),
            kind=QuestionKind.BOOL,
            default=True,
        ),
        Question(
            id="templates.routing",
            label=I18nText("qa.routing.label"),
            help=I18nText("qa.routing.help"),
            kind=QuestionKind.TEXT,
            default=settings.templates.default_routing,
        ),
    )


def qa_spec(mode: Union[QaMode, str] = QaMode.DEFAULT) -> QaSpec:
    """Build the question list for a mode.

    default/setup ask for the template text (required) and the optional
    output settings; update asks the same questions with nothing required;
    remove asks nothing.

    Args:
        mode: QaMode or its string value.

    Returns:
        QaSpec for the mode.

    Raises:
        ValueError: If mode is not a known QaMode value.
    """
    mode = QaMode(mode)
    title = I18nText("qa.title")
    if mode is QaMode.REMOVE:
        return QaSpec(mode=mode, title=title, description=I18nText("qa.remove.description"))
    if mode is QaMode.UPDATE:
        return QaSpec(
            mode=mode,
            title=title,
            description=I18nText("qa.update.description"),
            questions=_questions(required=False),
        )
    return QaSpec(
        mode=mode,
        title=title,
        description=I18nText("qa.setup.description"),
        questions=_questions(required=True),
    )


def apply_answers(
    mode: Union[QaMode, str], current_config: Any, answers: Any
) -> Dict[str, Any]:
    """Merge answers into the configuration and normalize the result.

    A bare string answer is taken as the template text. An answers object
    is laid over the current configuration, so unanswered fields keep their
    current value. Anything else keeps the current configuration. The mode
    does not change the algorithm.

    Args:
        mode: QaMode the answers were collected in.
        current_config: Existing configuration document.
        answers: Submitted answers.

    Returns:
        Configuration document satisfying the configuration schema.
    """
    mode = QaMode(mode)
    if isinstance(answers, str):
        merged = extract_template_text_answer(current_config, answers)
    elif isinstance(answers, Mapping):
        merged = overlay_answers(current_config, answers)
    else:
        merged = merge_answers(current_config, answers)
    normalized = normalize_config_for_schema(merged)
    logger.info("answers_applied", mode=mode.value)
    return normalized


def i18n_keys() -> List[str]:
    """Every translation key the component may show, sorted.

    Union of the default-locale catalog and every key referenced by any
    mode's questions or by the component descriptor.
    """
    keys = set(TranslationService().all_keys(DEFAULT_LOCALE))
    keys.update(DESCRIPTOR_KEYS)
    for mode in QaMode:
        keys.update(qa_spec(mode).i18n_keys())
    return sorted(keys)
