# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Runs a single command from raw command-line tokens and turns its outcome into
printed output and a process exit status.

`Runner.run()` never raises for ordinary failures: it returns the error (or None)
so callers can inspect or test it. `Runner.fatal()` is the one place that prints
and exits.

Run sequence:
1. Fresh option and argument sets are built and `-help` is declared.
2. `command.configure()` declares the command's options and arguments.
3. Tokens are parsed; `-help` short-circuits into a help request.
4. Parse errors become usage errors so the usage is shown above them.
5. `command.run()` receives a `CommandContext`; any usage error it raises gets
   the command usage attached.

Example Usage:
    class Greet:
        synopsis = "Print a greeting."
        help_text = ""

        def configure(self, options, arguments):
            self.loud = options.add_bool("loud", False, "Shout.")
            self.name = arguments.add_optional_string("name", "world", "Who to greet.")

        def run(self, context):
            text = f"hello {self.name.value}"
            context.console.print(text.upper() if self.loud.value else text)

    Runner("greet").main(Greet())
"""
from __future__ import annotations

import sys
from typing import NoReturn, Sequence

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from argkit.command import configure, parse, usage
from argkit.console import console as default_console
from argkit.console import error_console as default_error_console
from argkit.errors import classify, find_usage_error, help_request, usage_error
from argkit.exceptions import ParseError
from argkit.logger import logger
from argkit.parser.argument_set import ArgumentSet
from argkit.parser.option_set import OptionSet
from argkit.protocols import Command
from argkit.settings import DEFAULT_SETTINGS, UsageSettings
from argkit.utils import get_program_name

HELP_OPTION = "help"


class CommandContext(BaseModel):
    """
    What a command sees while it runs.

    Attributes:
        program (str): Program name used in usage text.
        argv (list[str]): Tokens the command was invoked with.
        options (OptionSet): The parsed option set.
        arguments (ArgumentSet): The parsed argument set.
        usage (str): Full usage text for the command.
        console (Console): Console for regular output.
        error_console (Console): Console for diagnostics.
    """

    program: str
    argv: list[str] = Field(default_factory=list)
    options: OptionSet
    arguments: ArgumentSet
    usage: str = ""
    console: Console = Field(default_factory=lambda: default_console)
    error_console: Console = Field(default_factory=lambda: default_error_console)

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Runner:
    """
    Drives one `Command` through configure, parse and run.

    Args:
        program (str | None): Program name; derived from `sys.argv[0]` when None.
        stdout (Console | None): Console for help and success output.
        stderr (Console | None): Console for error output.
        double_dash (bool): Accept `--name` aliases for multi-character options.
        settings (UsageSettings | None): Usage layout.
    """

    def __init__(
        self,
        program: str | None = None,
        stdout: Console | None = None,
        stderr: Console | None = None,
        double_dash: bool = False,
        settings: UsageSettings | None = None,
    ) -> None:
        self.program: str = program or get_program_name()
        self.stdout: Console = stdout or default_console
        self.stderr: Console = stderr or default_error_console
        self.double_dash: bool = double_dash
        self.settings: UsageSettings = settings or DEFAULT_SETTINGS

    def usage(
        self, command: Command, options: OptionSet, arguments: ArgumentSet
    ) -> str:
        return usage(
            options,
            arguments,
            program=self.program,
            synopsis=getattr(command, "synopsis", ""),
            help_text=getattr(command, "help_text", ""),
        )

    def run(self, command: Command, argv: Sequence[str]) -> BaseException | None:
        """
        Configure, parse and run `command`.

        Returns:
            BaseException | None: The error to report, or None on success.
        """
        argv = list(argv)
        try:
            options = OptionSet(double_dash=self.double_dash, settings=self.settings)
            show_help = options.add_bool(HELP_OPTION, False, "Show this help text.")
            options, arguments = configure(
                command, settings=self.settings, options=options
            )
        except Exception as error:
            logger.error("Failed to configure %s: %s", type(command).__name__, error)
            return error

        command_usage = self.usage(command, options, arguments)
        try:
            parse(options, arguments, argv)
        except ParseError as error:
            if options.was_set(HELP_OPTION) and show_help.value:
                return help_request().attach_usage(command_usage)
            logger.debug("Parse failed for %s: %s", self.program, error)
            return usage_error(error).attach_usage(command_usage)

        if show_help.value:
            return help_request().attach_usage(command_usage)

        context = CommandContext(
            program=self.program,
            argv=argv,
            options=options,
            arguments=arguments,
            usage=command_usage,
            console=self.stdout,
            error_console=self.stderr,
        )
        try:
            command.run(context)
        except Exception as error:
            found = find_usage_error(error)
            if found is not None:
                found.attach_usage(command_usage)
            logger.debug("Command %s failed: %r", self.program, error)
            return error
        return None

    def fatal(self, error: BaseException | None) -> NoReturn:
        """
        Print the classified message for `error` and exit with its status.

        Output goes to stdout for status 0 (help requests) and to stderr otherwise.
        Nothing is printed for an empty message.
        """
        message, code = classify(error)
        if message:
            target = self.stdout if code == 0 else self.stderr
            target.print(
                message, soft_wrap=True, markup=False, highlight=False, emoji=False
            )
        sys.exit(code)

    def main(self, command: Command, argv: Sequence[str] | None = None) -> NoReturn:
        """Run `command` with `argv` (default `sys.argv[1:]`) and exit."""
        if argv is None:
            argv = sys.argv[1:]
        self.fatal(self.run(command, argv))
