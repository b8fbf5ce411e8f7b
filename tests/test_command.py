import pytest

from argkit.command import configure, parse, usage
from argkit.exceptions import TooManyArgumentsError, UnknownOptionError
from argkit.parser import ArgumentSet, OptionSet


class Copy:
    synopsis = "Copy files."
    help_text = "Longer help."

    def __init__(self):
        self.calls = 0

    def configure(self, options, arguments):
        self.calls += 1
        self.force = options.add_bool("force", False, "Overwrite.")
        self.source = arguments.add_string("src", "Source.")

    def run(self, context):
        pass


def build():
    options = OptionSet()
    verbose = options.add_bool("v", False, "Verbose.")
    arguments = ArgumentSet()
    source = arguments.add_string("src", "Source.")
    return options, arguments, verbose, source


def test_parse_options_then_arguments():
    options, arguments, verbose, source = build()
    parse(options, arguments, ["-v", "a.txt"])
    assert verbose.value is True
    assert source.value == "a.txt"


def test_parse_propagates_first_error():
    options, arguments, _, _ = build()
    with pytest.raises(UnknownOptionError):
        parse(options, arguments, ["-nope", "a.txt"])


def test_parse_without_options():
    _, arguments, _, source = build()
    parse(None, arguments, ["-v"])
    assert source.value == "-v"


def test_parse_without_arguments():
    options, _, verbose, _ = build()
    parse(options, None, ["-v"])
    assert verbose.value is True
    with pytest.raises(TooManyArgumentsError):
        parse(options, None, ["-v", "extra"])


def test_usage_page():
    options, arguments, _, _ = build()
    assert usage(
        options, arguments, program="cp", synopsis="Copy files.", help_text="Longer help."
    ) == (
        "Copy files.\n"
        "\n"
        "Usage: cp [options] <src>\n"
        "\n"
        "Longer help.\n"
        "\n"
        "  -v    Verbose.\n"
        "  <src> (string)\n"
        "        Source."
    )


def test_usage_page_skips_empty_sections():
    assert usage(program="cp") == "Usage: cp"


def test_configure_builds_fresh_sets():
    command = Copy()
    options, arguments = configure(command, double_dash=True)
    assert command.calls == 1
    assert options.double_dash is True
    assert "force" in options
    assert len(arguments) == 1
    parse(options, arguments, ["--force", "x"])
    assert command.force.value is True
    assert command.source.value == "x"
