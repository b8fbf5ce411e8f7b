"""
Argkit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Arity, Option, Positional, PositionalKind
from .argument_set import ArgumentSet
from .option_set import OptionSet
from .usage import render_usage, synopsis_line
from .values import (
    BoolValue,
    DurationValue,
    FloatValue,
    IntValue,
    ListValue,
    StringValue,
    Value,
)

__all__ = [
    "ArgumentSet",
    "Arity",
    "BoolValue",
    "DurationValue",
    "FloatValue",
    "IntValue",
    "ListValue",
    "Option",
    "OptionSet",
    "Positional",
    "PositionalKind",
    "StringValue",
    "Value",
    "render_usage",
    "synopsis_line",
]
