import pytest

from gogox import errorx
from gogox.errorx import Details, Error


@pytest.mark.parametrize(
    ("factory", "code"),
    [
        (errorx.err_internal, errorx.CODE_INTERNAL),
        (errorx.err_not_found, errorx.CODE_NOT_FOUND),
        (errorx.err_unauthorized, errorx.CODE_UNAUTHORIZED),
        (errorx.err_invalid_parameter, errorx.CODE_INVALID_PARAMETER),
    ],
)
def test_common_errors(factory, code):
    err = factory("some error")
    assert str(err) == "some error"
    assert err.code == code


def test_new():
    e = errorx.new("some_code", "some_string")
    assert e.code == "some_code"
    assert str(e) == "some_string"
    assert e.log_error() == f"[{e.code}] {e}"


def test_newf():
    e = errorx.newf("some_code", "%d %d", 1, 2)
    assert e.code == "some_code"
    assert str(e) == "1 2"
    assert e.log_error() == f"[{e.code}] {e}"


def test_new_with_log():
    e = errorx.new_with_log(
        errorx.CODE_INTERNAL, "some_string", "some custom log message with more information"
    )
    assert e.code == errorx.CODE_INTERNAL
    assert e.log_error() == "some custom log message with more information"


def test_newf_with_log():
    e = errorx.newf_with_log(
        errorx.CODE_INTERNAL, "%d %d", "some custom log message with more information", 1, 2
    )
    assert e.code == errorx.CODE_INTERNAL
    assert str(e) == "1 2"
    assert e.log_error() == "some custom log message with more information"


def test_parse():
    assert errorx.parse(ValueError("some error")) is None

    standard = errorx.new(errorx.CODE_INTERNAL, "unauthorized")
    parsed = errorx.parse(standard)
    assert parsed is standard
    assert parsed.code == errorx.CODE_INTERNAL
    assert str(parsed) == "unauthorized"


def test_wrapf():
    cause = ValueError("original error")
    err = errorx.wrapf(cause, "upper error", "upper error message %d", 1)
    assert err.log_error() == "[upper error] upper error message 1: original error"


def test_wrapf_with_log():
    cause = ValueError("original error")
    err = errorx.wrapf_with_log(cause, "upper error", "upper error message %d", "some log", 1)
    assert str(err) == "upper error message 1"
    assert err.log_error() == "some log: original error"


def test_log_error_without_cause():
    err = errorx.new("some_code", "some_string")
    assert err.log_error() == "[some_code] some_string"


def test_log_error_with_plain_cause():
    err = errorx.wrap(ValueError("original error"), "upper error", "upper error message")
    assert err.log_error() == "[upper error] upper error message: original error"
    assert err.__cause__ is err.cause


def test_log_error_with_error_cause():
    cause = errorx.new("some_code", "some_string")
    err = errorx.wrap(cause, "upper error", "upper error message")
    assert err.log_error() == "[upper error] upper error message: [some_code] some_string"


def test_log_error_wrap_with_log():
    cause = errorx.new("some_code", "some_string")
    err = errorx.wrap_with_log(cause, "upper error", "upper error message", "some_log_message")
    assert err.log_error() == "some_log_message: [some_code] some_string"


def test_add_details():
    err = errorx.new(errorx.CODE_INTERNAL, "some error")
    err.add_details(Details(field="name", message="Name is empty"))
    assert err.details == [Details(field="name", message="Name is empty")]


def test_print_stack_trace_names_caller():
    trace = errorx.new("some_code", "some_string").print_stack_trace()
    first = trace.splitlines()[0]
    assert first == "test_print_stack_trace_names_caller"
    assert __file__ in trace


def test_direct_error_has_empty_stack():
    assert errorx.err_internal("x").print_stack_trace() == ""


def test_parse_and_wrap_plain_error():
    g_err = errorx.parse_and_wrap(ValueError("some error"), "This is some default error message")
    assert g_err.code == errorx.CODE_INTERNAL
    assert g_err.message == "This is some default error message"
    assert (
        g_err.log_error()
        == "[common.internal] This is some default error message: some error"
    )


def test_parse_and_wrap_returns_original():
    err = errorx.new("some.code", "some error message")
    g_err = errorx.parse_and_wrap(err, "This is some default error message")
    assert g_err.code == "some.code"
    assert g_err.message == "some error message"
    assert g_err.log_error() == err.log_error()


def test_error_is_raisable():
    err = errorx.new(errorx.CODE_NOT_FOUND, "missing")
    with pytest.raises(Error) as info:
        raise err
    assert info.value is err
    assert err.code == errorx.CODE_NOT_FOUND


def test_unauthorized_error_matches_code_map():
    err = errorx.err_unauthorized("no access")
    assert err.code == errorx.DEFAULT_CODE_MAP[errorx.StatusCode.UNAUTHENTICATED]
    assert errorx.StatusCode.OK not in errorx.DEFAULT_CODE_MAP


def test_as_dict():
    err = errorx.new("c", "m")
    err.add_details(Details("f", "bad"))
    assert err.as_dict() == {
        "code": "c",
        "message": "m",
        "details": [{"field": "f", "message": "bad"}],
    }