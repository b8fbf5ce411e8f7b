"""
Argkit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import configure, parse, usage
from .errors import (
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
    format_error,
    help_request,
    is_help_request,
    is_usage_error,
    usage_error,
    with_code,
)
from .exceptions import (
    ArgkitError,
    ArgumentConfigError,
    FormatError,
    MissingArgumentError,
    ParseError,
    TooManyArgumentsError,
    UnknownOptionError,
)
from .parser import ArgumentSet, Arity, OptionSet, Value
from .protocols import Command
from .runner import CommandContext, Runner
from .settings import UsageSettings

logger = logging.getLogger("argkit")


__all__ = [
    "ArgkitError",
    "ArgumentConfigError",
    "ArgumentSet",
    "Arity",
    "Command",
    "CommandContext",
    "EXIT_FAILURE",
    "EXIT_INTERNAL",
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "ErrorGroup",
    "ExitCodeError",
    "FormatError",
    "MissingArgumentError",
    "OptionSet",
    "ParseError",
    "QuietExit",
    "Runner",
    "TooManyArgumentsError",
    "UnknownOptionError",
    "UsageError",
    "UsageSettings",
    "Value",
    "classify",
    "configure",
    "error_code",
    "format_error",
    "help_request",
    "is_help_request",
    "is_usage_error",
    "parse",
    "usage",
    "usage_error",
    "with_code",
]
