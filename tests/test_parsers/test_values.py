from datetime import timedelta

import pytest

from argkit.parser.values import (
    BoolValue,
    DurationValue,
    FloatValue,
    IntValue,
    ListValue,
    StringValue,
    Value,
    resolve_kind,
)


class Level(Value):
    kind = "level"
    hint_text = "one of: debug, info, warn"

    def parse(self, text: str) -> str:
        if text not in ("debug", "info", "warn"):
            raise ValueError(f"unknown level {text!r}")
        return text


def test_builtin_defaults_fall_back_to_zero():
    assert BoolValue().value is False
    assert IntValue().value == 0
    assert FloatValue().value == 0.0
    assert StringValue().value == ""
    assert DurationValue().value == timedelta(0)


@pytest.mark.parametrize(
    "value, expected_render, expected_default",
    [
        (BoolValue(True), "true", "true"),
        (BoolValue(False), "false", "false"),
        (IntValue(2), "2", "2"),
        (FloatValue(1.5), "1.5", "1.5"),
        (StringValue("yep"), "yep", '"yep"'),
        (DurationValue(timedelta(seconds=1)), "1s", "1s"),
    ],
)
def test_render(value, expected_render, expected_default):
    assert value.render() == expected_render
    assert value.render_default() == expected_default


@pytest.mark.parametrize(
    "value, expected",
    [
        (BoolValue(False), True),
        (BoolValue(True), False),
        (IntValue(0), True),
        (IntValue(3), False),
        (StringValue(""), True),
        (StringValue("x"), False),
        (DurationValue(timedelta(0)), True),
        (DurationValue(timedelta(seconds=1)), False),
        (Level(), True),
        (Level("info"), False),
    ],
)
def test_is_zero(value, expected):
    assert value.is_zero() is expected


def test_set_parses_and_stores():
    value = IntValue()
    value.set("0x10")
    assert value.value == 16

    duration = DurationValue()
    duration.set("1m30s")
    assert duration.value == timedelta(seconds=90)


def test_set_keeps_old_value_on_error():
    value = BoolValue(True)
    with pytest.raises(ValueError):
        value.set("maybe")
    assert value.value is True


def test_only_bool_is_a_flag():
    assert BoolValue.is_bool_flag
    assert not IntValue.is_bool_flag
    assert not StringValue.is_bool_flag


def test_custom_value_hint():
    level = Level()
    assert level.hint() == ("level", "one of: debug, info, warn")
    level.set("warn")
    assert level.value == "warn"
    with pytest.raises(ValueError):
        level.set("trace")


def test_duration_hint():
    kind, hint_text = DurationValue().hint()
    assert kind == "duration"
    assert hint_text == "(formats: '1h2s', '-3.4ms', units: h, m, s, ms, us, ns)"


def test_list_value_collects_items():
    numbers = ListValue(IntValue)
    assert numbers.is_zero()
    numbers.set("1")
    numbers.set("0x2")
    assert numbers.value == [1, 2]
    assert numbers.render() == "1,2"
    assert numbers.hint() == ("int", "")
    numbers.reset()
    assert numbers.value == []


def test_list_value_of_custom_kind():
    levels = ListValue(Level)
    levels.set("debug")
    assert levels.value == ["debug"]
    assert levels.kind == "level"
    with pytest.raises(ValueError):
        levels.set("nope")


def test_list_value_default_is_copied():
    default = ["a"]
    values = ListValue(StringValue, default)
    values.set("b")
    assert default == ["a"]
    assert values.value == ["a", "b"]


@pytest.mark.parametrize(
    "kind, expected",
    [
        (bool, BoolValue),
        (int, IntValue),
        (float, FloatValue),
        (str, StringValue),
        (timedelta, DurationValue),
        (Level, Level),
    ],
)
def test_resolve_kind(kind, expected):
    assert resolve_kind(kind) is expected


def test_resolve_kind_unknown():
    with pytest.raises(TypeError) as excinfo:
        resolve_kind(dict)
    assert "Value subclass" in str(excinfo.value)


def test_value_requires_parse():
    with pytest.raises(TypeError):
        Value()  # type: ignore[abstract]


def test_list_value_renders_kinds_with_own_constructor():
    class Tagged(Value):
        kind = "tagged"

        def __init__(self, tag: str = "item"):
            super().__init__()
            self.tag = tag

        def parse(self, text: str) -> str:
            return text.upper()

    tagged = ListValue(Tagged)
    tagged.set("a")
    tagged.set("b")
    assert tagged.value == ["A", "B"]
    assert tagged.render() == "A,B"
