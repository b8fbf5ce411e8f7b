# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the declaration records kept by `OptionSet` and `ArgumentSet`.

Each declaration pairs a name and usage text with the `Value` it writes into.
The default shown in usage text is captured when the declaration is made, so
help output does not change after a parse.

Contents:
- `Option`: A named, dash-prefixed input.
- `PositionalKind`: Whether a positional is required, optional or remaining.
- `Arity`: Minimum/maximum count bound on a remaining positional.
- `Positional`: A positional input consumed by declaration order.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from argkit.exceptions import ArgumentConfigError
from argkit.parser.values import Value


class PositionalKind(Enum):
    """
    Defines how many tokens a positional declaration consumes.

    Members:
        REQUIRED: Exactly one token.
        OPTIONAL: Zero or one token, falling back to its default.
        REMAINING: Every leftover token, bounded by an `Arity`.
    """

    REQUIRED = "required"
    OPTIONAL = "optional"
    REMAINING = "remaining"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Arity:
    """
    Count bound for a remaining positional.

    `maximum=None` means no upper bound. Bounds compose with `&`:

        Arity.at_least(1) & Arity.at_most(3) == Arity(minimum=1, maximum=3)
    """

    minimum: int = 0
    maximum: int | None = None

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ArgumentConfigError(f"Arity minimum must be >= 0, got {self.minimum}")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ArgumentConfigError(
                f"Arity maximum {self.maximum} is below its minimum {self.minimum}"
            )

    @classmethod
    def any(cls) -> Arity:
        return cls()

    @classmethod
    def at_least(cls, minimum: int) -> Arity:
        return cls(minimum=minimum)

    @classmethod
    def at_most(cls, maximum: int) -> Arity:
        return cls(maximum=maximum)

    def __and__(self, other: Arity) -> Arity:
        if not isinstance(other, Arity):
            return NotImplemented
        maximums = [bound for bound in (self.maximum, other.maximum) if bound is not None]
        return Arity(
            minimum=max(self.minimum, other.minimum),
            maximum=min(maximums) if maximums else None,
        )

    def __str__(self) -> str:
        if self.maximum is None:
            return f"at least {self.minimum}" if self.minimum else "any number"
        if self.minimum == self.maximum:
            return f"exactly {self.minimum}"
        return f"{self.minimum} to {self.maximum}"


@dataclass
class Option:
    """
    Represents a declared option.

    Attributes:
        name (str): Option name without dashes.
        value (Value): Destination slot written on each occurrence.
        usage (str): Help text for the option.
        default_text (str): Rendered default captured at declaration time.
        show_default (bool): True if the default differs from the kind's zero value.
    """

    name: str
    value: Value
    usage: str = ""
    default_text: str = field(init=False)
    show_default: bool = field(init=False)

    def __post_init__(self) -> None:
        self.default_text = self.value.render_default()
        self.show_default = not self.value.is_zero()


@dataclass
class Positional:
    """
    Represents a declared positional argument.

    Attributes:
        name (str): Display name, rendered as `<name>`.
        value (Value): Destination slot.
        kind (PositionalKind): Required, optional or remaining.
        usage (str): Help text for the argument.
        position (int): 1-based position in declaration order.
        arity (Arity | None): Count bound; only set for remaining declarations.
        default (Any): Copy of the value restored when an optional is omitted.
    """

    name: str
    value: Value
    kind: PositionalKind = PositionalKind.REQUIRED
    usage: str = ""
    position: int = 0
    arity: Arity | None = None
    default: Any = field(init=False)
    default_text: str = field(init=False)
    show_default: bool = field(init=False)

    def __post_init__(self) -> None:
        self.default = deepcopy(self.value.value)
        self.default_text = self.value.render_default()
        self.show_default = (
            self.kind is not PositionalKind.REMAINING and not self.value.is_zero()
        )

    def restore_default(self) -> None:
        self.value.value = deepcopy(self.default)

    def get_synopsis_text(self) -> str:
        """Get the synopsis fragment for the argument."""
        if self.kind is PositionalKind.REQUIRED:
            return f"<{self.name}>"
        if self.kind is PositionalKind.OPTIONAL:
            return f"[<{self.name}>]"
        if self.arity is not None and self.arity.minimum:
            return f"<{self.name}>..."
        return f"[<{self.name}>...]"
