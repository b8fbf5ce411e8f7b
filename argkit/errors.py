# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Error shapes that decide what a command-line program prints and how it exits.

The runner hands any error that reaches the top level to `format_error()`, which
returns the text to show and the process exit status.

Shapes:
- QuietExit: Exit with a status and print nothing.
- ExitCodeError: Any error tagged with an explicit status (see `with_code`).
- UsageError: Print the command usage, then the wrapped error if any. A help
  request is a usage error with status 0.
- ErrorGroup: Several independent failures, printed as a list.
- Anything else: Its message, with status `EXIT_FAILURE`.

Exit codes:
- EXIT_SUCCESS (0), EXIT_FAILURE (1), EXIT_USAGE (64, as in sysexits.h) and
  EXIT_INTERNAL (255) for values that are not errors at all.

`UsageError.usage` is the one mutable field: it is filled in once by the code
that knows the full command context (`attach_usage`) and only read afterwards.
"""
from __future__ import annotations

from typing import Any, Iterator, Sequence

from argkit.exceptions import ArgkitError
from argkit.protocols import HasExitCode

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 64
EXIT_INTERNAL = 255


class QuietExit(ArgkitError):
    """
    Exit with `exit_code` without printing a message.

    A code of 0 is honoured: `QuietExit(0)` is an intentional exit, which callers
    can tell apart from "no error" by type.
    """

    def __init__(self, exit_code: int = EXIT_FAILURE):
        super().__init__(f"exit code {exit_code}")
        self.exit_code = exit_code


class ExitCodeError(ArgkitError):
    """An arbitrary error tagged with the exit status to use for it."""

    def __init__(self, error: BaseException, exit_code: int):
        super().__init__(str(error))
        self.error = error
        self.exit_code = exit_code
        self.__cause__ = error

    def __str__(self) -> str:
        return str(self.error)


class UsageError(ArgkitError):
    """
    An error that shows the full command usage above its message.

    Attributes:
        error (BaseException | None): The wrapped error, if any.
        help_request (bool): True if the user asked for help (exit status 0).
        usage (str): Usage text, attached by the runner before display.
    """

    def __init__(self, error: BaseException | None = None, help_request: bool = False):
        super().__init__()
        self.error = error
        self.help_request = help_request
        self.usage = ""
        if error is not None:
            self.__cause__ = error

    @property
    def exit_code(self) -> int:
        return EXIT_SUCCESS if self.help_request else EXIT_USAGE

    def attach_usage(self, usage: str) -> UsageError:
        """Set the usage text unless it was already attached."""
        if not self.usage:
            self.usage = usage
        return self

    def __str__(self) -> str:
        if self.help_request:
            return "help requested"
        if self.error is None:
            return "usage error"
        return str(self.error)


class ErrorGroup(ArgkitError):
    """
    Several independent errors reported together.

    Attributes:
        errors (list[BaseException]): Member errors, in report order.
        exit_code (int | None): Status for the group; `EXIT_FAILURE` when None.
    """

    def __init__(self, errors: Sequence[BaseException], exit_code: int | None = None):
        self.errors = list(errors)
        self.exit_code = exit_code
        super().__init__(_bullets(self.errors))

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


def _bullets(errors: Sequence[BaseException]) -> str:
    return "\n".join(f"- {error}" for error in errors)


def _group_members(error: BaseException) -> list[BaseException] | None:
    if isinstance(error, BaseExceptionGroup):
        return list(error.exceptions)
    errors = getattr(error, "errors", None)
    if isinstance(errors, (list, tuple)):
        return list(errors)
    return None


def with_code(exit_code: int, error: BaseException) -> ExitCodeError:
    """
    Tag `error` with an exit status.

    Tagging an already tagged error replaces its code instead of nesting.
    """
    if isinstance(error, ExitCodeError):
        error.exit_code = exit_code
        return error
    return ExitCodeError(error, exit_code)


def help_request() -> UsageError:
    """Return an error that prints the full command help and exits with 0."""
    return UsageError(help_request=True)


def usage_error(error: BaseException | str) -> UsageError:
    """Wrap an error, or a message, so the command usage is printed above it."""
    if isinstance(error, str):
        error = ArgkitError(error)
    return UsageError(error)


def _error_chain(error: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        wrapped = getattr(current, "error", None)
        current = wrapped if isinstance(wrapped, BaseException) else current.__cause__


def find_usage_error(error: BaseException | None) -> UsageError | None:
    """Return the first usage error in the chain of errors `error` wraps."""
    if error is None:
        return None
    return next(
        (link for link in _error_chain(error) if isinstance(link, UsageError)), None
    )


def is_usage_error(error: BaseException | None) -> bool:
    """Return True if `error`, or an error it wraps, is a usage error (help included)."""
    return find_usage_error(error) is not None


def is_help_request(error: BaseException | None) -> bool:
    """Return True if `error`, or an error it wraps, is a help request."""
    found = find_usage_error(error)
    return found is not None and found.help_request


def error_code(error: Any) -> int:
    """
    Return the exit status carried by `error`.

    `None` means success. Errors without an explicit status map to
    `EXIT_INTERNAL`; use `format_error` to apply the full classification.
    """
    if error is None:
        return EXIT_SUCCESS
    code = getattr(error, "exit_code", None)
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    return EXIT_INTERNAL


def format_error(error: Any) -> tuple[str, int]:
    """
    Build the message to print and the exit status for an error.

    Args:
        error (Any): The error that reached the top level, or None.

    Returns:
        tuple[str, int]: (message, exit code). The message is empty for
        success and for `QuietExit`.
    """
    if error is None:
        return "", EXIT_SUCCESS

    if not isinstance(error, BaseException):
        return str(error), EXIT_INTERNAL

    if isinstance(error, QuietExit):
        return "", error.exit_code

    if isinstance(error, UsageError):
        message = error.usage.strip()
        if error.error is not None:
            if message:
                message += "\n\n"
            message += f"error: {error.error}"
        return message, error.exit_code

    members = _group_members(error)
    if members is not None:
        code = getattr(error, "exit_code", None)
        if not isinstance(code, int) or isinstance(code, bool):
            code = EXIT_FAILURE
        return _bullets(members), code

    if isinstance(error, HasExitCode) and isinstance(error.exit_code, int):
        return str(error), error.exit_code

    return str(error), EXIT_FAILURE


classify = format_error
