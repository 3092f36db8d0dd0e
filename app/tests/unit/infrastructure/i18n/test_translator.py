"""Tests for infrastructure.i18n.translator module."""

import pytest


@pytest.mark.unit
class TestTranslate:
    """Tests for Translator.translate()."""

    def test_exact_locale(self, translator):
        assert translator.translate("en-GB", "qa.title") == "Template settings (UK)"

    def test_falls_back_to_base_language(self, translator):
        """A region-only miss is served by the base language."""
        assert translator.translate("fr-FR", "greeting") == "Bonjour {name}"

    def test_falls_back_to_english(self, translator):
        """A key absent from a non-English catalog returns the English value."""
        assert translator.translate("ja", "errors.invalid_input") == "Invalid input"
        assert translator.translate("en-GB", "greeting") == "Hello {name}"

    def test_unknown_locale_uses_english(self, translator):
        assert translator.translate("zz-ZZ", "qa.title") == "Template settings"

    def test_missing_key_returns_key(self, translator):
        """A key no catalog has is echoed back, never blank."""
        assert translator.translate("en", "missing.key") == "missing.key"
        assert translator.translate("fr", "missing.key") == "missing.key"

    def test_has_message_is_exact(self, translator):
        assert translator.has_message("en", "greeting") is True
        assert translator.has_message("ja", "greeting") is False


@pytest.mark.unit
class TestTranslateWithArgs:
    """Tests for Translator.translate_with_args()."""

    def test_replaces_placeholders(self, translator):
        text = translator.translate_with_args(
            "en",
            "errors.unsupported_operation",
            [("operation", "html"), ("supported", "text")],
        )
        assert text == "Unsupported operation 'html', expected 'text'"

    def test_accepts_mapping(self, translator):
        assert translator.translate_with_args("fr", "greeting", {"name": "Ada"}) == "Bonjour Ada"

    def test_replaces_every_occurrence(self, translator):
        text = translator.translate_with_args("missing", "{x}-{x}", [("x", "1")])
        assert text == "1-1"

    def test_unknown_placeholder_left_untouched(self, translator):
        assert translator.translate_with_args("en", "greeting", [("other", "x")]) == "Hello {name}"

    def test_value_with_placeholder_shape_is_expanded_by_later_pair(self, translator):
        """Values are not escaped: a later pair can expand text an earlier one inserted."""
        text = translator.translate_with_args(
            "en",
            "errors.unsupported_operation",
            [("operation", "{supported}"), ("supported", "text")],
        )
        assert text == "Unsupported operation 'text', expected 'text'"

    def test_earlier_pair_is_not_reapplied(self, translator):
        """Text inserted by a later pair is not revisited by earlier ones."""
        text = translator.translate_with_args(
            "en",
            "errors.unsupported_operation",
            [("operation", "x"), ("supported", "{operation}")],
        )
        assert text == "Unsupported operation 'x', expected '{operation}'"
