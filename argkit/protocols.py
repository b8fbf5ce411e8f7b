# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols shared by the error taxonomy and the runner.

These runtime-checkable `Protocol` classes let user code take part without
inheriting from argkit base classes:
- HasExitCode: An error carrying an explicit process exit status.
- Command: A runnable command that declares its own options and arguments.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from argkit.parser.argument_set import ArgumentSet
    from argkit.parser.option_set import OptionSet
    from argkit.runner import CommandContext


@runtime_checkable
class HasExitCode(Protocol):
    exit_code: int


@runtime_checkable
class Command(Protocol):
    """
    A command run by `argkit.runner.Runner`.

    `configure()` is called once on fresh sets before parsing; `run()` receives a
    `CommandContext` and may raise any error, including the shapes in
    `argkit.errors`.
    """

    synopsis: str
    help_text: str

    def configure(self, options: OptionSet, arguments: ArgumentSet) -> None: ...

    def run(self, context: CommandContext) -> None: ...
