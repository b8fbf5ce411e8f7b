# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionSet`, the declaration and parsing engine for named,
dash-prefixed options.

Options are declared once, before any parse, and each declaration returns the
`Value` slot that parsing writes into. `parse()` consumes option tokens from the
front of a token sequence and returns the unconsumed remainder for positional
parsing.

Option syntax:
- `-name`, `-name=value`, or `-name value` for kinds that take a value.
- `-flag` alone sets a boolean option to true; `-flag=false` clears it.
- With `double_dash=True`, names of two or more characters may also be given as
  `--name` / `--name=value`. One-character names stay single-dash only.
- `--` ends option parsing and is consumed.
- The first token that is not option syntax (including a lone `-`) ends option
  parsing and is left in the remainder.

Example Usage:
    options = OptionSet(double_dash=True)
    verbose = options.add_bool("verbose", False, "Log more.")
    retries = options.add_int("retries", 3, "How many times to retry.")

    rest = options.parse(["--verbose", "-retries=5", "deploy", "prod"])

    # verbose.value is True, retries.value == 5, rest == ["deploy", "prod"]

Declarations must not be added during or after a parse, and a single set must
not be parsed from several threads at once.
"""
from __future__ import annotations

from datetime import timedelta
from typing import Iterator, Sequence

from argkit.exceptions import ArgumentConfigError, FormatError, UnknownOptionError
from argkit.logger import logger
from argkit.parser.argument import Option
from argkit.parser.usage import option_entry, render_entries
from argkit.parser.values import (
    BoolValue,
    DurationValue,
    FloatValue,
    IntValue,
    StringValue,
    Value,
)
from argkit.settings import DEFAULT_SETTINGS, UsageSettings


class OptionSet:
    """
    A mapping of option names to bound value slots.

    Features:
    - Built-in bool, int, float, string and duration kinds.
    - Custom kinds through any `Value` subclass.
    - Optional `--name` aliases for multi-character names.
    - Deterministic usage text sorted by option name.
    """

    def __init__(
        self,
        double_dash: bool = False,
        settings: UsageSettings | None = None,
    ) -> None:
        self.double_dash: bool = double_dash
        self.settings: UsageSettings = settings or DEFAULT_SETTINGS
        self._options: dict[str, Option] = {}
        self._seen: set[str] = set()

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str):
            raise ArgumentConfigError(f"Option name {name!r} must be a string")
        if not name:
            raise ArgumentConfigError("Option name must not be empty")
        if name.startswith("-"):
            raise ArgumentConfigError(
                f"Option name '{name}' must not start with '-': declare it without dashes"
            )
        if "=" in name or any(char.isspace() for char in name):
            raise ArgumentConfigError(
                f"Option name '{name}' must not contain '=' or whitespace"
            )
        if name in self._options:
            raise ArgumentConfigError(f"Option '-{name}' is already defined")

    def add_value(self, name: str, value: Value, usage: str = "") -> Value:
        """
        Declare an option bound to any `Value`.

        The value's current contents become the option's default.

        Args:
            name (str): Option name without dashes.
            value (Value): Destination slot, built-in or custom.
            usage (str): Help text.

        Returns:
            Value: The same `value`, for reading after parse.
        """
        self._validate_name(name)
        if not isinstance(value, Value):
            raise ArgumentConfigError(
                f"Option '-{name}' must be bound to a Value, got {type(value).__name__}"
            )
        self._options[name] = Option(name=name, value=value, usage=usage)
        logger.debug("Declared option '-%s' (%s)", name, type(value).__name__)
        return value

    def add_bool(self, name: str, default: bool = False, usage: str = "") -> BoolValue:
        return self.add_value(name, BoolValue(default), usage)  # type: ignore[return-value]

    def add_int(self, name: str, default: int = 0, usage: str = "") -> IntValue:
        return self.add_value(name, IntValue(default), usage)  # type: ignore[return-value]

    def add_float(self, name: str, default: float = 0.0, usage: str = "") -> FloatValue:
        return self.add_value(name, FloatValue(default), usage)  # type: ignore[return-value]

    def add_string(self, name: str, default: str = "", usage: str = "") -> StringValue:
        return self.add_value(name, StringValue(default), usage)  # type: ignore[return-value]

    def add_duration(
        self, name: str, default: timedelta = timedelta(0), usage: str = ""
    ) -> DurationValue:
        return self.add_value(name, DurationValue(default), usage)  # type: ignore[return-value]

    def get_option(self, name: str) -> Option | None:
        """Return the declared option for `name`, if any."""
        return self._options.get(name)

    def sorted_options(self) -> list[Option]:
        return [self._options[name] for name in sorted(self._options)]

    def was_set(self, name: str) -> bool:
        """Return True if the last parse assigned the option explicitly."""
        return name in self._seen

    def _split_token(self, token: str) -> tuple[str, str | None]:
        """Return (name, inline value) for an option token."""
        body = token[1:]
        dashes = 1
        if body.startswith("-"):
            body = body[1:]
            dashes = 2
        if not body or body[0] in "-=":
            raise FormatError(f"bad option syntax: {token}", token=token)

        name, separator, text = body.partition("=")
        if dashes == 2:
            if not self.double_dash:
                raise FormatError(
                    f"bad option syntax: {token} (options take a single dash: -{name})",
                    name=name,
                    token=token,
                )
            if len(name) == 1:
                raise UnknownOptionError(name, token=f"--{name}")
        return name, (text if separator else None)

    def parse(self, tokens: Sequence[str]) -> list[str]:
        """
        Parse leading option tokens and return the unconsumed remainder.

        Args:
            tokens (Sequence[str]): Raw command-line tokens.

        Returns:
            list[str]: Tokens left after option parsing stopped.

        Raises:
            UnknownOptionError: If an option token names no declared option.
            FormatError: If a token is malformed, lacks its value, or its value
                cannot be coerced.
        """
        tokens = list(tokens)
        self._seen = set()
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token == "--":
                index += 1
                break
            if len(token) < 2 or not token.startswith("-"):
                break

            name, text = self._split_token(token)
            option = self._options.get(name)
            if option is None:
                raise UnknownOptionError(name, token=token.partition("=")[0])
            index += 1

            if text is None:
                if option.value.is_bool_flag:
                    text = "true"
                elif index < len(tokens) and tokens[index] != "--":
                    text = tokens[index]
                    index += 1
                else:
                    raise FormatError(
                        f"option needs an argument: -{name}", name=name, token=token
                    )

            try:
                option.value.set(text)
            except ValueError as error:
                raise FormatError(
                    f"invalid value {text!r} for option -{name}: {error}",
                    name=name,
                    token=text,
                ) from error
            self._seen.add(name)
            logger.debug("Parsed option '-%s' = %r", name, option.value.value)

        return tokens[index:]

    def usage(self) -> str:
        """Render the option block of the usage text."""
        return render_entries(
            (option_entry(option, self.double_dash) for option in self.sorted_options()),
            self.settings,
        )

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(self.sorted_options())

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return f"OptionSet(options={len(self._options)}, double_dash={self.double_dash})"

    def __repr__(self) -> str:
        return str(self)
