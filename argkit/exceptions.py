# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception classes raised while declaring and parsing arguments.

Declaration mistakes are reported as soon as they are made. Parse failures
carry the offending declaration and token so callers can report them, and the
error taxonomy in `argkit.errors` resolves them into exit codes.

Exception Hierarchy:
- ArgkitError
    ├── ArgumentConfigError
    └── ParseError
        ├── FormatError
        │   └── UnknownOptionError
        ├── MissingArgumentError
        └── TooManyArgumentsError
"""
from __future__ import annotations


class ArgkitError(Exception):
    """Base exception for argkit."""


class ArgumentConfigError(ArgkitError):
    """Exception raised when an option or argument is declared incorrectly."""


class ParseError(ArgkitError):
    """Base exception for failures while parsing a token sequence."""


class FormatError(ParseError):
    """Exception raised when a token has bad syntax or an unparseable value."""

    def __init__(self, message: str, name: str = "", token: str | None = None):
        super().__init__(message)
        self.name = name
        self.token = token


class UnknownOptionError(FormatError):
    """Exception raised when an option token names no declared option."""

    def __init__(self, name: str, token: str | None = None):
        token = token if token is not None else f"-{name}"
        super().__init__(f"unknown option: {token}", name=name, token=token)


class MissingArgumentError(ParseError):
    """Exception raised when a positional slot receives no token."""

    def __init__(self, name: str, position: int, detail: str = ""):
        message = f"missing arg <{name}> at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.name = name
        self.position = position


class TooManyArgumentsError(ParseError):
    """Exception raised when positional tokens are left over."""

    def __init__(self, tokens: list[str], name: str = "", maximum: int | None = None):
        count = len(tokens)
        plural = "s" if count != 1 else ""
        if name:
            message = (
                f"too many arguments for <{name}>: expected at most {maximum}, "
                f"found {count} additional arg{plural}"
            )
        else:
            message = f"too many arguments: found {count} additional arg{plural}"
        super().__init__(message)
        self.tokens = tokens
        self.count = count
        self.name = name
