import pytest
from pydantic import ValidationError

from argkit.errors import (
    EXIT_FAILURE,
    EXIT_INTERNAL,
    EXIT_SUCCESS,
    EXIT_USAGE,
    ErrorGroup,
    ExitCodeError,
    QuietExit,
    UsageError,
    classify,
    error_code,
    find_usage_error,
    help_request,
    is_help_request,
    is_usage_error,
    usage_error,
    with_code,
)
from argkit.exceptions import MissingArgumentError
from argkit.settings import UsageSettings


class CustomCodeError(Exception):
    exit_code = 9


def test_success():
    assert classify(None) == ("", EXIT_SUCCESS)


def test_quiet_exit_zero_is_distinct_from_success():
    error = QuietExit(0)
    assert classify(error) == ("", 0)
    assert classify(None) == ("", 0)
    assert isinstance(error, QuietExit)
    assert error is not None


def test_quiet_exit_code():
    assert classify(QuietExit(3)) == ("", 3)
    assert classify(QuietExit()) == ("", EXIT_FAILURE)


def test_with_code():
    error = with_code(3, ValueError("boom"))
    assert isinstance(error, ExitCodeError)
    assert classify(error) == ("boom", 3)


def test_with_code_replaces_code():
    inner = ValueError("boom")
    error = with_code(5, with_code(3, inner))
    assert error.error is inner
    assert classify(error) == ("boom", 5)


def test_help_request():
    error = help_request().attach_usage("Usage: tool [options]\n")
    assert classify(error) == ("Usage: tool [options]", EXIT_SUCCESS)
    assert is_help_request(error)
    assert is_usage_error(error)


def test_usage_error_with_usage():
    error = usage_error("bad target").attach_usage("Usage: tool <target>\n")
    assert classify(error) == ("Usage: tool <target>\n\nerror: bad target", EXIT_USAGE)
    assert not is_help_request(error)


def test_usage_error_without_usage():
    assert classify(usage_error("bad target")) == ("error: bad target", EXIT_USAGE)


def test_usage_error_wrapping_parse_error():
    cause = MissingArgumentError("target", 1)
    error = usage_error(cause)
    assert error.error is cause
    assert error.__cause__ is cause
    assert str(error) == "missing arg <target> at position 1"


def test_bare_usage_error():
    error = UsageError().attach_usage("Usage: tool")
    assert classify(error) == ("Usage: tool", EXIT_USAGE)


def test_attach_usage_writes_once():
    error = usage_error("x")
    error.attach_usage("first")
    error.attach_usage("second")
    assert error.usage == "first"


def test_error_group():
    group = ErrorGroup([ValueError("a"), RuntimeError("b")])
    assert classify(group) == ("- a\n- b", EXIT_FAILURE)
    assert len(group) == 2


def test_error_group_code():
    group = ErrorGroup([ValueError("a")], exit_code=7)
    assert classify(group) == ("- a", 7)


def test_exception_group():
    group = ExceptionGroup("several", [ValueError("a"), ValueError("b")])
    assert classify(group) == ("- a\n- b", EXIT_FAILURE)


def test_error_with_exit_code_attribute():
    assert classify(CustomCodeError("custom")) == ("custom", 9)


def test_plain_error():
    assert classify(RuntimeError("plain")) == ("plain", EXIT_FAILURE)


def test_validation_error_is_not_a_group():
    with pytest.raises(ValidationError) as excinfo:
        UsageSettings(width=5)
    message, code = classify(excinfo.value)
    assert code == EXIT_FAILURE
    assert "width" in message


@pytest.mark.parametrize("value", ["oops", 42, ["x"]])
def test_non_error_value(value):
    assert classify(value) == (str(value), EXIT_INTERNAL)


def test_detection_through_wrappers():
    wrapped = with_code(2, help_request())
    assert is_help_request(wrapped)
    assert find_usage_error(wrapped) is wrapped.error

    try:
        try:
            raise usage_error("inner")
        except UsageError as error:
            raise RuntimeError("outer") from error
    except RuntimeError as outer:
        assert is_usage_error(outer)
        assert not is_help_request(outer)

    assert not is_usage_error(ValueError("x"))
    assert not is_usage_error(None)


@pytest.mark.parametrize(
    "error, expected",
    [
        (None, EXIT_SUCCESS),
        (QuietExit(4), 4),
        (usage_error("x"), EXIT_USAGE),
        (help_request(), EXIT_SUCCESS),
        (with_code(6, ValueError()), 6),
        (ValueError(), EXIT_INTERNAL),
    ],
)
def test_error_code(error, expected):
    assert error_code(error) == expected
