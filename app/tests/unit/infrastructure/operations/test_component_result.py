"""Tests for infrastructure.operations result envelope and error kinds."""

import pytest

from infrastructure.operations import ComponentError, ComponentResult, ErrorKind


@pytest.mark.unit
class TestErrorKind:
    """Tests for ErrorKind."""

    def test_values(self):
        assert [kind.value for kind in ErrorKind] == [
            "InvalidInput",
            "InvalidScope",
            "UnsupportedOperation",
            "TemplateError",
        ]

    @pytest.mark.parametrize(
        "kind,key",
        [
            (ErrorKind.INVALID_INPUT, "errors.invalid_input"),
            (ErrorKind.INVALID_SCOPE, "errors.missing_scope"),
            (ErrorKind.UNSUPPORTED_OPERATION, "errors.unsupported_operation"),
            (ErrorKind.TEMPLATE_ERROR, "errors.template_render"),
        ],
    )
    def test_msg_key(self, kind, key):
        assert kind.msg_key == key

    def test_is_string_enum(self):
        assert ErrorKind("InvalidScope") is ErrorKind.INVALID_SCOPE
        assert ErrorKind.INVALID_SCOPE == "InvalidScope"


@pytest.mark.unit
class TestComponentError:
    """Tests for ComponentError."""

    def test_to_dict_full(self):
        error = ComponentError(
            kind=ErrorKind.TEMPLATE_ERROR,
            message="boom",
            msg_key="errors.template_render",
            details={"error": "x", "line": 1},
        )
        assert error.to_dict() == {
            "kind": "TemplateError",
            "msg_key": "errors.template_render",
            "message": "boom",
            "details": {"error": "x", "line": 1},
        }

    def test_to_dict_omits_unset_optionals(self):
        error = ComponentError(kind=ErrorKind.INVALID_SCOPE, message="no scope")
        assert error.to_dict() == {"kind": "InvalidScope", "message": "no scope"}


@pytest.mark.unit
class TestComponentResult:
    """Tests for ComponentResult."""

    def test_success(self):
        result = ComponentResult.success({"text": "hi"}, control={"routing": "out"})

        assert result.is_success is True
        assert result.to_dict() == {
            "payload": {"text": "hi"},
            "state_updates": {},
            "control": {"routing": "out"},
            "error": None,
        }

    def test_success_with_bare_string_payload(self):
        assert ComponentResult.success("hi").to_dict()["payload"] == "hi"

    def test_failure_has_no_payload_or_control(self):
        error = ComponentError(kind=ErrorKind.INVALID_INPUT, message="bad")
        result = ComponentResult.failure(error)

        assert result.is_success is False
        assert result.to_dict() == {
            "payload": None,
            "state_updates": {},
            "control": None,
            "error": {"kind": "InvalidInput", "message": "bad"},
        }

    def test_payload_and_error_together_rejected(self):
        error = ComponentError(kind=ErrorKind.INVALID_INPUT, message="bad")
        with pytest.raises(ValueError):
            ComponentResult(payload={"text": "hi"}, error=error)

    def test_state_updates_not_shared(self):
        first = ComponentResult.success("a")
        first.state_updates["k"] = "v"
        assert ComponentResult.success("b").state_updates == {}
