"""Tests for modules.templates.qa module."""

import pytest

from infrastructure.i18n import t
from modules.templates import QaMode, apply_answers, i18n_keys, qa_spec
from modules.templates.qa import I18nText, QuestionKind

QUESTION_IDS = [
    "templates.text",
    "templates.output_path",
    "templates.wrap",
    "templates.routing",
]


@pytest.mark.unit
class TestQaSpec:
    """Tests for qa_spec()."""

    @pytest.mark.parametrize("mode", [QaMode.DEFAULT, QaMode.SETUP, "setup"])
    def test_setup_modes(self, mode):
        spec = qa_spec(mode)

        assert [question.id for question in spec.questions] == QUESTION_IDS
        text = spec.questions[0]
        assert text.required is True
        assert text.kind is QuestionKind.TEXT
        assert text.default == t("en", "qa.text.default")
        assert all(not question.required for question in spec.questions[1:])

    def test_optional_question_defaults(self):
        defaults = {question.id: question.default for question in qa_spec("default").questions}

        assert defaults["templates.output_path"] == "text"
        assert defaults["templates.wrap"] is True
        assert defaults["templates.routing"] == "out"

    def test_wrap_is_bool_question(self):
        kinds = {question.id: question.kind for question in qa_spec("default").questions}
        assert kinds["templates.wrap"] is QuestionKind.BOOL

    def test_update_mode_nothing_required(self):
        spec = qa_spec(QaMode.UPDATE)

        assert [question.id for question in spec.questions] == QUESTION_IDS
        assert all(not question.required for question in spec.questions)

    def test_remove_mode_asks_nothing(self):
        spec = qa_spec(QaMode.REMOVE)

        assert spec.questions == ()
        assert spec.title.key == "qa.title"
        assert spec.description is not None

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            qa_spec("explode")

    def test_i18n_keys(self):
        keys = qa_spec("setup").i18n_keys()

        assert keys[0] == "qa.title"
        assert "qa.text.label" in keys
        assert "qa.text.help" in keys
        assert "qa.routing.help" in keys

    def test_to_dict_localized(self):
        document = qa_spec("default").to_dict("fr")

        assert document["mode"] == "default"
        assert document["title"] == {"key": "qa.title", "text": t("fr", "qa.title")}
        assert document["questions"][0]["label"]["key"] == "qa.text.label"
        assert document["questions"][2]["kind"] == "bool"

    def test_to_dict_keys_only(self):
        document = qa_spec("remove").to_dict()
        assert document["title"] == {"key": "qa.title"}
        assert document["questions"] == []


@pytest.mark.unit
class TestApplyAnswers:
    """Tests for apply_answers()."""

    def test_answers_object_normalized(self):
        config = apply_answers(
            "setup",
            {},
            {"templates.text": "Hi {{payload.name}}", "templates.wrap": False},
        )
        assert config == {"templates": {"text": "Hi {{payload.name}}", "wrap": False}}

    def test_bare_string_sets_text_only(self):
        current = {"templates": {"text": "old", "routing": "next"}}
        config = apply_answers(QaMode.UPDATE, current, "new")
        assert config == {"templates": {"text": "new", "routing": "next"}}

    def test_missing_answers_keep_current(self):
        current = {"templates": {"text": "old"}}
        assert apply_answers("update", current, None) == current

    def test_empty_everything_gets_default_text(self):
        config = apply_answers("default", None, None)
        assert config == {"templates": {"text": t("en", "qa.text.default")}}

    def test_mode_does_not_change_result(self):
        answers = {"templates": {"text": "Hi"}, "templates.routing": "x"}
        results = [apply_answers(mode, {}, answers) for mode in QaMode]
        assert all(result == results[0] for result in results)

    def test_update_with_empty_answers_keeps_current(self):
        current = {"templates": {"text": "Custom", "routing": "next"}}

        assert apply_answers("update", current, {}) == current

    def test_update_with_partial_answers_keeps_other_fields(self):
        current = {"templates": {"text": "Custom", "routing": "next"}}

        config = apply_answers(QaMode.UPDATE, current, {"templates.wrap": False})

        assert config == {"templates": {"text": "Custom", "routing": "next", "wrap": False}}

    def test_update_with_blank_fields_keeps_current(self):
        current = {"templates": {"text": "Custom", "output_path": "reply", "routing": "next"}}
        answers = {"templates.text": "  ", "templates.output_path": "", "templates.routing": None}

        assert apply_answers("update", current, answers) == current

    def test_update_replaces_answered_fields(self):
        current = {"templates": {"text": "Custom", "routing": "next", "wrap": True}}
        answers = {"templates": {"routing": "escalate"}, "templates.text": "New"}

        config = apply_answers("update", current, answers)

        assert config == {"templates": {"text": "New", "routing": "escalate", "wrap": True}}

    def test_does_not_mutate_current(self):
        current = {"templates": {"text": "Custom"}}
        apply_answers("update", current, {"templates.routing": "x"})
        assert current == {"templates": {"text": "Custom"}}


@pytest.mark.unit
class TestI18nKeys:
    """Tests for i18n_keys()."""

    def test_sorted_and_unique(self):
        keys = i18n_keys()
        assert keys == sorted(set(keys))

    def test_includes_question_and_error_keys(self):
        keys = i18n_keys()
        for key in [
            "qa.title",
            "qa.text.label",
            "qa.remove.description",
            "errors.invalid_input",
            "errors.missing_scope",
            "errors.unsupported_operation",
            "errors.template_render",
        ]:
            assert key in keys

    def test_i18n_text_resolves(self):
        assert I18nText("qa.title").resolve("ja") == t("ja", "qa.title")
