# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains the string coercion helpers behind the built-in value kinds.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_int: Convert a string to an integer, honouring base prefixes.
- parse_duration: Convert a duration string such as '1h2s' to a timedelta.
- format_duration: Render a timedelta back into the same duration grammar.

Every helper raises `ValueError` with a message naming the expected syntax.
"""
from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from fractions import Fraction

DURATION_FORMATS = "formats: '1h2s', '-3.4ms', units: h, m, s, ms, us, ns"

_TRUE_VALUES = {"true", "t", "1", "yes", "y", "on"}
_FALSE_VALUES = {"false", "f", "0", "no", "n", "off"}

_DURATION_PART = re.compile(r"([0-9]*(?:\.[0-9]*)?)([a-zµμ]+)")

_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
}

_MICROS_PER_SECOND = 1_000_000


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    elif normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean {value!r}: expected true or false")


def coerce_int(value: str) -> int:
    """
    Convert a string to an integer.

    Base prefixes (`0x`, `0o`, `0b`) are honoured; a plain string of digits with
    leading zeros is read as decimal.
    """
    text = value.strip()
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return int(text, 10)
    except ValueError:
        raise ValueError(
            f"invalid integer {value!r}: expected a number such as 42 or 0x2a"
        ) from None


def coerce_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(
            f"invalid number {value!r}: expected a decimal such as 1.5 or 2e-3"
        ) from None


def parse_duration(value: str) -> timedelta:
    """
    Convert a duration string to a `timedelta`.

    The grammar is a sequence of decimal numbers, each with a unit suffix, with an
    optional leading sign: '300ms', '-1.5h', '2h45m'. A bare '0' is accepted.
    Sub-microsecond remainders are rounded to the nearest microsecond.

    Args:
        value (str): The duration string.

    Returns:
        timedelta: The parsed duration.

    Raises:
        ValueError: If the string does not follow the duration grammar.
    """
    error = ValueError(f"invalid duration {value!r} ({DURATION_FORMATS})")
    text = value
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise error

    total = Fraction(0)
    position = 0
    while position < len(text):
        match = _DURATION_PART.match(text, position)
        if not match:
            raise error
        number, unit = match.groups()
        if number in ("", ".") or unit not in _NANOSECONDS:
            raise error
        try:
            total += Fraction(Decimal(number)) * _NANOSECONDS[unit]
        except InvalidOperation:
            raise error from None
        position = match.end()

    try:
        return timedelta(microseconds=round(sign * total / 1000))
    except OverflowError:
        raise error from None


def _decimal_text(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(fraction).zfill(digits).rstrip('0')}"


def format_duration(value: timedelta) -> str:
    """
    Render a `timedelta` in the duration grammar accepted by `parse_duration`.

    Examples: '0s', '250us', '1.5ms', '1s', '2m3.5s', '1h0m0s', '-3.4ms'.
    """
    micros = (value.days * 86_400 + value.seconds) * _MICROS_PER_SECOND + value.microseconds
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}us"
    if micros < _MICROS_PER_SECOND:
        return f"{sign}{_decimal_text(micros, 1_000)}ms"

    seconds, fraction = divmod(micros, _MICROS_PER_SECOND)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    seconds_text = _decimal_text(seconds * _MICROS_PER_SECOND + fraction, _MICROS_PER_SECOND)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}s"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{seconds_text}s"
