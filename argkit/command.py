# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The interfaces a command dispatcher uses to drive argkit.

Functions:
- configure: Build fresh option and argument sets and let a command declare into them.
- parse: Parse options, then positionals, from raw tokens.
- usage: Compose a full help page for a command.
- classify: Resolve an error into (message, exit code); see `argkit.errors`.

The `Command` protocol a runnable command implements is re-exported from
`argkit.protocols`.
"""
from __future__ import annotations

from typing import Sequence

from argkit.errors import classify
from argkit.exceptions import TooManyArgumentsError
from argkit.logger import logger
from argkit.parser.argument_set import ArgumentSet
from argkit.parser.option_set import OptionSet
from argkit.parser.usage import render_usage, synopsis_line
from argkit.protocols import Command
from argkit.settings import UsageSettings


def configure(
    command: Command,
    double_dash: bool = False,
    settings: UsageSettings | None = None,
    options: OptionSet | None = None,
    arguments: ArgumentSet | None = None,
) -> tuple[OptionSet, ArgumentSet]:
    """
    Invoke `command.configure()` once on option and argument sets.

    Fresh sets are created unless they are passed in (e.g. with built-in options
    already declared).

    Returns:
        tuple[OptionSet, ArgumentSet]: The configured sets.
    """
    if options is None:
        options = OptionSet(double_dash=double_dash, settings=settings)
    if arguments is None:
        arguments = ArgumentSet(settings=settings)
    command.configure(options, arguments)
    logger.debug(
        "Configured %s with %d option(s) and %d argument(s)",
        type(command).__name__,
        len(options),
        len(arguments),
    )
    return options, arguments


def parse(
    options: OptionSet | None,
    arguments: ArgumentSet | None,
    tokens: Sequence[str],
) -> None:
    """
    Parse `tokens`: leading options first, the remainder as positionals.

    Either set may be None. With no argument set, any token left after option
    parsing is an error.

    Raises:
        ParseError: The first failure encountered.
    """
    remainder = options.parse(tokens) if options is not None else list(tokens)
    if arguments is not None:
        arguments.parse(remainder)
    elif remainder:
        raise TooManyArgumentsError(remainder)


def usage(
    options: OptionSet | None = None,
    arguments: ArgumentSet | None = None,
    program: str = "",
    synopsis: str = "",
    help_text: str = "",
) -> str:
    """
    Compose a full help page.

    Layout, with blank lines between sections that are present:

        <synopsis>

        Usage: <program> [options] <args...>

        <help text>

        <option and positional block>
    """
    sections = []
    if synopsis.strip():
        sections.append(synopsis.strip())
    sections.append(f"Usage: {synopsis_line(program, options, arguments)}".rstrip())
    if help_text.strip():
        sections.append(help_text.strip())
    block = render_usage(options, arguments)
    if block:
        sections.append(block.rstrip("\n"))
    return "\n\n".join(sections)


__all__ = ["Command", "classify", "configure", "parse", "usage"]
