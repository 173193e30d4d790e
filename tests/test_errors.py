import pytest

from tixcron.constants import HttpMessage, RpcCode
from tixcron.errors import (
    ErrorStd,
    FieldError,
    ValidationErrors,
    http_error_response,
    rpc_error_details,
)


def test_error_code_joins_http_and_rpc():
    err = ErrorStd(500, RpcCode.INTERNAL, HttpMessage.INTERNAL_SERVER_ERROR)
    assert err.error_code() == "50013"


def test_error_str_is_message():
    err = ErrorStd(404, RpcCode.NOT_FOUND, "Missing Thing")
    assert str(err) == "Missing Thing"
    assert err.rpc_status_code == RpcCode.NOT_FOUND.value


def test_error_std_can_be_raised_and_caught():
    err = ErrorStd(409, RpcCode.ALREADY_EXISTS, "dup")
    with pytest.raises(ErrorStd) as info:
        raise err
    assert rpc_error_details(info.value) == (409, "06", "dup")
    status, body = http_error_response(info.value)
    assert status == 409
    assert body == {"status_code": "40906", "message": "dup"}


def test_http_response_for_required_field():
    err = ValidationErrors([FieldError("Email", "required")])
    status, body = http_error_response(err)
    assert status == 400
    assert body == {"status_code": RpcCode.INVALID_ARGUMENT.value, "message": "email is required"}


def test_http_response_for_error_std_lowercases_message():
    err = ErrorStd(401, RpcCode.PERMISSION_DENIED, "Access DENIED")
    status, body = http_error_response(err)
    assert status == 401
    assert body["status_code"] == err.error_code()
    assert body["message"] == "access denied"


def test_http_response_finds_wrapped_error_std():
    inner = ErrorStd(503, RpcCode.UNAVAILABLE, "down")
    try:
        try:
            raise inner
        except ErrorStd as exc:
            raise RuntimeError("wrapper") from exc
    except RuntimeError as outer:
        status, body = http_error_response(outer)
    assert status == 503
    assert body["status_code"] == inner.error_code()


def test_http_response_unhandled_returns_none():
    assert http_error_response(ValueError("x")) is None
    assert http_error_response(ValidationErrors([FieldError("age", "min", "18")])) is None


def test_rpc_details_required():
    err = ValidationErrors([FieldError("Name", "REQUIRED")])
    assert rpc_error_details(err) == (400, "15", "name is required")


def test_rpc_details_min():
    err = ValidationErrors([FieldError("Age", "min", "18")])
    assert rpc_error_details(err) == (400, "15", "age minimum value is 18")


def test_rpc_details_first_matching_rule_wins():
    err = ValidationErrors([FieldError("x", "email"), FieldError("Y", "required")])
    assert rpc_error_details(err) == (400, "15", "y is required")


def test_rpc_details_error_std_keeps_message_case():
    err = ErrorStd(500, RpcCode.INTERNAL, "Boom")
    assert rpc_error_details(err) == (500, RpcCode.INTERNAL.value, "Boom")


def test_rpc_details_unhandled_is_zero():
    assert rpc_error_details(KeyError("k")) == (0, "", "")


def test_validation_errors_iterates_fields():
    fields = [FieldError("a", "required"), FieldError("b", "min", "1")]
    err = ValidationErrors(fields)
    assert list(err) == fields
    assert len(err) == 2