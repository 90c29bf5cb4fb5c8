"""
tests.test_error_capture

Error-likeness heuristic and safe serialization.
"""

from __future__ import annotations

import pytest

from vision.utils.error_capture import create_error_entry, is_error_like, serialize_error


class PaymentError(Exception):
    def __init__(self, message: str, *, amount: int) -> None:
        super().__init__(message)
        self.amount = amount

    @property
    def retryable(self) -> bool:
        return False

    @property
    def broken(self) -> str:
        raise RuntimeError("getter failed")


def _raised(exc: BaseException) -> BaseException:
    try:
        raise exc
    except BaseException as caught:
        return caught


def test_serializes_standard_exceptions() -> None:
    info = serialize_error(_raised(ValueError("boom")))
    assert info["message"] == "boom"
    assert info["name"] == "ValueError"
    assert info["errorType"] == "ValueError"
    assert "ValueError: boom" in info["stack"]


def test_serializes_subclass_props_and_skips_throwing_getters() -> None:
    info = serialize_error(PaymentError("declined", amount=42))
    assert info["name"] == "PaymentError"
    assert info["amount"] == 42
    assert info["retryable"] is False
    assert "broken" not in info
    assert "stack" not in info


def test_serializes_cause_recursively() -> None:
    try:
        try:
            raise KeyError("missing")
        except KeyError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as outer:
        info = serialize_error(outer)

    assert info["message"] == "outer"
    assert info["cause"]["name"] == "KeyError"
    assert info["cause"]["errorType"] == "KeyError"


def test_builtin_name_attributes_do_not_override_exception_name() -> None:
    try:
        object().missing_attr  # type: ignore[attr-defined]
    except AttributeError as err:
        attr_info = serialize_error(err)
    try:
        import not_a_real_module_xyz  # type: ignore[import-not-found]  # noqa: F401
    except ModuleNotFoundError as err:
        import_info = serialize_error(err)

    assert attr_info["name"] == "AttributeError"
    assert attr_info["errorType"] == "AttributeError"
    assert import_info["name"] == "ModuleNotFoundError"
    assert import_info["errorType"] == "ModuleNotFoundError"


def test_user_defined_name_attribute_is_honored() -> None:
    class GatewayError(Exception):
        def __init__(self, message: str) -> None:
            super().__init__(message)
            self.name = "GatewayTimeout"

    assert serialize_error(GatewayError("slow"))["name"] == "GatewayTimeout"


def test_serializes_strings_and_none() -> None:
    assert serialize_error("oops") == {
        "message": "oops",
        "name": "StringError",
        "originalValue": "oops",
    }
    assert serialize_error(None) == {"message": "None", "name": "NullError", "originalValue": None}


def test_serializes_error_shaped_mappings() -> None:
    info = serialize_error({"message": "timeout", "code": "ETIMEDOUT", "retry": 3})
    assert info == {"message": "timeout", "name": "ETIMEDOUT", "code": "ETIMEDOUT", "retry": 3}

    named = serialize_error({"error": "denied", "name": "AuthError"})
    assert named["name"] == "AuthError"
    assert named["message"] == '{"error": "denied", "name": "AuthError"}'


def test_falsy_code_is_used_as_name() -> None:
    info = serialize_error({"code": 0, "message": "x"})
    assert info["name"] == "0"
    assert info["code"] == 0


def test_serializes_plain_mappings() -> None:
    info = serialize_error({"foo": "bar"})
    assert info == {"message": '{"foo": "bar"}', "name": "ObjectError", "foo": "bar"}


def test_self_referencing_mapping_drops_circular_property() -> None:
    obj: dict = {"foo": "bar"}
    obj["self"] = obj

    info = serialize_error(obj)
    assert info["name"] == "ObjectError"
    assert info["foo"] == "bar"
    assert "self" not in info
    assert info["message"] == '{"foo": "bar"}'


@pytest.mark.parametrize(
    ("value", "name"),
    [(404, "intError"), (1.5, "floatError"), (False, "boolError")],
)
def test_serializes_primitives(value: object, name: str) -> None:
    info = serialize_error(value)
    assert info["message"] == str(value)
    assert info["name"] == name
    assert info["originalValue"] == value


def test_serializes_callables_as_strings() -> None:
    info = serialize_error(len)
    assert info["name"] == "functionError"
    assert info["originalValue"] == str(len)


def test_detects_error_like_values() -> None:
    assert is_error_like(ValueError("x"))
    assert is_error_like({"message": "x"})
    assert is_error_like({"errno": 2})
    assert is_error_like({"cause": None})
    assert is_error_like({"name": "ValidationError"})
    assert is_error_like({"type": "network_error"})


@pytest.mark.parametrize("value", ["text", 42, None, True, [1, 2], {"foo": "bar"}, {"name": "bob"}])
def test_rejects_non_error_values(value: object) -> None:
    assert not is_error_like(value)


def test_create_error_entry_only_includes_given_flags() -> None:
    entry = create_error_entry("failed")
    assert set(entry) == {"error", "error.timestamp"}
    assert entry["error"]["name"] == "StringError"


# --- Module Notes -----------------------------------------------------------
# `serialize_error` must never raise; every branch above returns a dict.
