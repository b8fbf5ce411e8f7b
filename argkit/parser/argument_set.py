# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentSet`, the ordered set of positional argument
declarations consumed after option parsing.

Declarations come in three kinds:
- required: must receive exactly one token.
- optional: receives zero or one token and falls back to its default.
- remaining: the last declaration only; collects every leftover token within
  an `Arity` bound.

Tokens are assigned strictly in declaration order. An optional argument is only
skipped by running out of tokens; there is no sentinel that requests its default
while tokens are still available.

Example Usage:
    arguments = ArgumentSet()
    source = arguments.add_string("source", "File to copy.")
    mode = arguments.add_optional_string("mode", "0644", "Permission bits.")
    targets = arguments.add_remaining("target", str, Arity.at_least(1), "Destinations.")

    arguments.parse(["a.txt", "0600", "/srv/a", "/srv/b"])

    # source.value == "a.txt", mode.value == "0600", targets.value == ["/srv/a", "/srv/b"]
"""
from __future__ import annotations

from typing import Iterator, Sequence

from argkit.exceptions import (
    ArgumentConfigError,
    FormatError,
    MissingArgumentError,
    TooManyArgumentsError,
)
from argkit.logger import logger
from argkit.parser.argument import Arity, Positional, PositionalKind
from argkit.parser.usage import positional_entry, render_entries
from argkit.parser.values import IntValue, ListValue, StringValue, Value, resolve_kind
from argkit.settings import DEFAULT_SETTINGS, UsageSettings


class ArgumentSet:
    """
    An ordered sequence of positional argument declarations.

    Features:
    - Required, optional-with-default and remaining declarations.
    - Min/max arity on the trailing remaining declaration.
    - Custom kinds through any `Value` subclass.
    - Usage text in declaration order.
    """

    def __init__(self, settings: UsageSettings | None = None) -> None:
        self.settings: UsageSettings = settings or DEFAULT_SETTINGS
        self._positionals: list[Positional] = []
        self._remaining: Positional | None = None

    @property
    def positionals(self) -> list[Positional]:
        """Declarations in declaration (and consumption) order."""
        return list(self._positionals)

    def _register(self, positional: Positional) -> None:
        name = positional.name
        if not isinstance(name, str) or not name:
            raise ArgumentConfigError("Argument name must be a non-empty string")
        if any(existing.name == name for existing in self._positionals):
            raise ArgumentConfigError(f"Argument <{name}> is already defined")
        if not isinstance(positional.value, Value):
            raise ArgumentConfigError(
                f"Argument <{name}> must be bound to a Value, "
                f"got {type(positional.value).__name__}"
            )
        if self._remaining is not None:
            raise ArgumentConfigError(
                f"Argument <{name}> cannot follow remaining argument "
                f"<{self._remaining.name}>: remaining must be declared last"
            )
        if positional.kind is PositionalKind.REQUIRED and any(
            existing.kind is PositionalKind.OPTIONAL for existing in self._positionals
        ):
            logger.warning(
                "Required argument <%s> follows an optional argument; "
                "it is only filled when every earlier argument is given.",
                name,
            )

        positional.position = len(self._positionals) + 1
        self._positionals.append(positional)
        if positional.kind is PositionalKind.REMAINING:
            self._remaining = positional
        logger.debug(
            "Declared %s argument <%s> at position %d",
            positional.kind,
            name,
            positional.position,
        )

    def add_required(self, name: str, value: Value, usage: str = "") -> Value:
        """
        Declare a positional that must receive exactly one token.

        Args:
            name (str): Display name, rendered as `<name>`.
            value (Value): Destination slot, built-in or custom.
            usage (str): Help text.

        Returns:
            Value: The same `value`, for reading after parse.
        """
        self._register(Positional(name=name, value=value, usage=usage))
        return value

    def add_optional(self, name: str, value: Value, usage: str = "") -> Value:
        """
        Declare a positional that may be omitted.

        The value's current contents are the default restored whenever no token
        is left for it.
        """
        self._register(
            Positional(name=name, value=value, kind=PositionalKind.OPTIONAL, usage=usage)
        )
        return value

    def add_remaining(
        self,
        name: str,
        item_kind: type = str,
        arity: Arity | None = None,
        usage: str = "",
    ) -> ListValue:
        """
        Declare the trailing positional that collects all leftover tokens.

        Args:
            name (str): Display name.
            item_kind (type): Element type (`str`, `int`, `float`, `bool`,
                `timedelta`) or a `Value` subclass.
            arity (Arity | None): Count bound; any number of tokens when None.
            usage (str): Help text.

        Returns:
            ListValue: Slot whose `.value` is the collected list.
        """
        try:
            value = ListValue(resolve_kind(item_kind))
        except TypeError as error:
            raise ArgumentConfigError(str(error)) from error
        self._register(
            Positional(
                name=name,
                value=value,
                kind=PositionalKind.REMAINING,
                usage=usage,
                arity=arity or Arity.any(),
            )
        )
        return value

    def add_string(self, name: str, usage: str = "") -> StringValue:
        return self.add_required(name, StringValue(), usage)  # type: ignore[return-value]

    def add_int(self, name: str, usage: str = "") -> IntValue:
        return self.add_required(name, IntValue(), usage)  # type: ignore[return-value]

    def add_optional_string(self, name: str, default: str = "", usage: str = "") -> StringValue:
        return self.add_optional(name, StringValue(default), usage)  # type: ignore[return-value]

    def add_optional_int(self, name: str, default: int = 0, usage: str = "") -> IntValue:
        return self.add_optional(name, IntValue(default), usage)  # type: ignore[return-value]

    def _set(self, positional: Positional, token: str) -> None:
        try:
            positional.value.set(token)
        except ValueError as error:
            raise FormatError(
                f"invalid value {token!r} for arg <{positional.name}> "
                f"at position {positional.position}: {error}",
                name=positional.name,
                token=token,
            ) from error

    def parse(self, tokens: Sequence[str]) -> None:
        """
        Assign tokens to declarations in order.

        Args:
            tokens (Sequence[str]): Tokens left after option parsing.

        Raises:
            MissingArgumentError: If a required slot, or the remaining minimum,
                is left unfilled.
            TooManyArgumentsError: If tokens are left over, or the remaining
                maximum is exceeded.
            FormatError: If a token cannot be coerced.
        """
        tokens = list(tokens)
        fixed = [
            positional
            for positional in self._positionals
            if positional.kind is not PositionalKind.REMAINING
        ]

        for index, positional in enumerate(fixed):
            if index < len(tokens):
                self._set(positional, tokens[index])
            elif positional.kind is PositionalKind.OPTIONAL:
                positional.restore_default()
            else:
                raise MissingArgumentError(positional.name, positional.position)

        leftover = tokens[len(fixed) :]
        remaining = self._remaining
        if remaining is None:
            if leftover:
                raise TooManyArgumentsError(leftover)
            return

        if not isinstance(remaining.value, ListValue):
            raise ArgumentConfigError(
                f"Remaining argument <{remaining.name}> must collect into a ListValue"
            )
        remaining.value.reset()
        arity = remaining.arity or Arity.any()
        if len(leftover) < arity.minimum:
            plural = "s" if arity.minimum != 1 else ""
            raise MissingArgumentError(
                remaining.name,
                remaining.position + len(leftover),
                detail=f"expected at least {arity.minimum} value{plural}, found {len(leftover)}",
            )
        if arity.maximum is not None and len(leftover) > arity.maximum:
            raise TooManyArgumentsError(
                leftover[arity.maximum :], name=remaining.name, maximum=arity.maximum
            )
        for token in leftover:
            self._set(remaining, token)
        logger.debug("Collected %d value(s) for <%s>", len(leftover), remaining.name)

    def usage(self) -> str:
        """Render the positional block of the usage text."""
        return render_entries(
            (positional_entry(positional) for positional in self._positionals),
            self.settings,
        )

    def __iter__(self) -> Iterator[Positional]:
        return iter(self._positionals)

    def __len__(self) -> int:
        return len(self._positionals)

    def __str__(self) -> str:
        counts = {kind: 0 for kind in PositionalKind}
        for positional in self._positionals:
            counts[positional.kind] += 1
        return (
            f"ArgumentSet(args={len(self._positionals)}, "
            f"required={counts[PositionalKind.REQUIRED]}, "
            f"optional={counts[PositionalKind.OPTIONAL]}, "
            f"remaining={counts[PositionalKind.REMAINING]})"
        )

    def __repr__(self) -> str:
        return str(self)
