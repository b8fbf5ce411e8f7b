# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Value`, the capability set every option and positional argument binds to,
along with the built-in value kinds.

A `Value` is the destination slot of a declaration: parsing writes into
`value.value`, and the usage renderer reads `render()`, `render_default()` and
`hint()` from it. Built-in kinds (bool, int, float, string, duration) are plain
subclasses; option and argument sets never special-case them beyond
`is_bool_flag`.

Custom kinds subclass `Value` and implement `parse()`:

    class Level(Value):
        kind = "level"
        hint_text = "one of: debug, info, warn"

        def parse(self, text: str) -> str:
            if text not in ("debug", "info", "warn"):
                raise ValueError(f"unknown level {text!r}")
            return text
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any

from argkit.parser.utils import (
    DURATION_FORMATS,
    coerce_bool,
    coerce_float,
    coerce_int,
    format_duration,
    parse_duration,
)


class Value(ABC):
    """
    A typed slot that parsed tokens are written into.

    Attributes:
        kind (str): Short type tag shown in usage text (e.g. "int").
        hint_text (str): Free-form hint shown next to the signature.
        zero (Any): The zero value of the kind, or None when it has none.
        is_bool_flag (bool): True if an option of this kind may omit its value.
    """

    kind: str = ""
    hint_text: str = ""
    zero: Any = None
    is_bool_flag: bool = False

    def __init__(self, default: Any = None) -> None:
        self.value: Any = self.zero if default is None else default

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Coerce a single token, raising ValueError on bad input."""

    def set(self, text: str) -> None:
        """Parse `text` and store the result."""
        self.value = self.parse(text)

    def render(self) -> str:
        """Render the current value so that `parse()` reproduces it."""
        if self.value is None:
            return ""
        return str(self.value)

    def render_default(self) -> str:
        """Render the current value for a `(default: ...)` annotation."""
        return self.render()

    def hint(self) -> tuple[str, str]:
        """Return the (type tag, hint text) pair used by usage rendering."""
        return self.kind, self.hint_text

    def is_zero(self) -> bool:
        if self.value is None:
            return True
        if self.zero is not None:
            return self.value == self.zero
        return not self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class BoolValue(Value):
    kind = "bool"
    zero = False
    is_bool_flag = True

    def parse(self, text: str) -> bool:
        return coerce_bool(text)

    def render(self) -> str:
        return "true" if self.value else "false"


class IntValue(Value):
    kind = "int"
    zero = 0

    def parse(self, text: str) -> int:
        return coerce_int(text)


class FloatValue(Value):
    kind = "float"
    zero = 0.0

    def parse(self, text: str) -> float:
        return coerce_float(text)

    def render(self) -> str:
        return repr(float(self.value))


class StringValue(Value):
    kind = "string"
    zero = ""

    def parse(self, text: str) -> str:
        return text

    def render_default(self) -> str:
        return json.dumps(self.render(), ensure_ascii=False)


class DurationValue(Value):
    """A `timedelta` slot using the '1h2m3.5s' duration grammar."""

    kind = "duration"
    hint_text = f"({DURATION_FORMATS})"
    zero = timedelta(0)

    def parse(self, text: str) -> timedelta:
        return parse_duration(text)

    def render(self) -> str:
        return format_duration(self.value)


class ListValue(Value):
    """
    Collects many tokens of one element kind into a list.

    Each token is coerced by a fresh instance of `item_kind`, so custom kinds can be
    collected as well as built-in ones.
    """

    def __init__(self, item_kind: type[Value] = StringValue, default: list | None = None):
        super().__init__(list(default) if default else [])
        self.item_kind = item_kind

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.item_kind.kind

    @property
    def hint_text(self) -> str:  # type: ignore[override]
        return self.item_kind.hint_text

    def parse(self, text: str) -> Any:
        item = self.item_kind()
        item.set(text)
        return item.value

    def set(self, text: str) -> None:
        self.value.append(self.parse(text))

    def reset(self) -> None:
        self.value = []

    def render(self) -> str:
        rendered = []
        for element in self.value:
            item = self.item_kind()
            item.value = element
            rendered.append(item.render())
        return ",".join(rendered)

    def is_zero(self) -> bool:
        return not self.value


BUILTIN_KINDS: dict[type, type[Value]] = {
    bool: BoolValue,
    int: IntValue,
    float: FloatValue,
    str: StringValue,
    timedelta: DurationValue,
}


def resolve_kind(kind: type) -> type[Value]:
    """
    Map a Python type (`int`, `str`, `timedelta`, ...) or a `Value` subclass to the
    `Value` subclass that coerces it.

    Raises:
        TypeError: If no built-in value kind handles `kind`.
    """
    if isinstance(kind, type) and issubclass(kind, Value):
        return kind
    try:
        return BUILTIN_KINDS[kind]
    except (KeyError, TypeError):
        raise TypeError(
            f"No value kind for {kind!r}: pass a Value subclass for custom types"
        ) from None
