# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders deterministic, column-aligned usage text for options and positionals.

Each declaration becomes one entry: a signature column (`-name=<int>`,
`<path> (kind) hint`) and a usage-text column wrapped to a fixed width and
indented under a fixed column. Options are sorted by name and listed before
positionals; positionals keep declaration order because it is their
consumption order.

Layout rules:
- Usage text gets a `(default: ...)` annotation when the declared default is
  not the zero value of its kind.
- An entry with no usage text, no annotation and no hint text is compact: a
  signature line only.
- One blank line separates an annotated entry from a following compact entry.
- A short signature without hint text carries the first line of usage text.

The output is plain text so callers may diff it; it never depends on terminal
width.
"""
from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from argkit.parser.argument import Option, Positional
from argkit.settings import DEFAULT_SETTINGS, UsageSettings

if TYPE_CHECKING:
    from argkit.parser.argument_set import ArgumentSet
    from argkit.parser.option_set import OptionSet


@dataclass(frozen=True)
class UsageEntry:
    """One rendered declaration: signature, usage text and whether a hint was shown."""

    signature: str
    text: str = ""
    hinted: bool = False

    @property
    def compact(self) -> bool:
        return not self.text and not self.hinted


def _with_default(usage: str, show_default: bool, default_text: str) -> str:
    text = usage.strip()
    if show_default:
        annotation = f"(default: {default_text})"
        text = f"{text} {annotation}" if text else annotation
    return text


def option_entry(option: Option, double_dash: bool = False) -> UsageEntry:
    """Build the usage entry for an option."""
    kind, hint_text = option.value.hint()
    signature = f"-{option.name}"
    if double_dash and len(option.name) > 1:
        signature = f"{signature}, --{option.name}"
    if not option.value.is_bool_flag:
        signature = f"{signature}=<{kind or 'value'}>"
    if hint_text:
        signature = f"{signature} {hint_text}"
    return UsageEntry(
        signature=signature,
        text=_with_default(option.usage, option.show_default, option.default_text),
        hinted=bool(hint_text),
    )


def positional_entry(positional: Positional) -> UsageEntry:
    """Build the usage entry for a positional argument."""
    kind, hint_text = positional.value.hint()
    signature = f"<{positional.name}>"
    if kind:
        signature = f"{signature} ({kind})"
    if hint_text:
        signature = f"{signature} {hint_text}"
    return UsageEntry(
        signature=signature,
        text=_with_default(
            positional.usage, positional.show_default, positional.default_text
        ),
        hinted=bool(hint_text),
    )


def render_entries(
    entries: Iterable[UsageEntry], settings: UsageSettings = DEFAULT_SETTINGS
) -> str:
    """
    Lay out usage entries as text.

    Args:
        entries (Iterable[UsageEntry]): Entries in display order.
        settings (UsageSettings): Column layout.

    Returns:
        str: The rendered block, newline-terminated, or "" when there are no entries.
    """
    indent = " " * settings.indent
    body = " " * settings.text_indent
    lines: list[str] = []
    previous_annotated = False

    for entry in entries:
        head = f"{indent}{entry.signature}"
        if entry.compact:
            if previous_annotated:
                lines.append("")
            lines.append(head)
            previous_annotated = False
            continue

        wrapped = textwrap.wrap(
            entry.text,
            width=settings.width,
            break_long_words=False,
            break_on_hyphens=False,
        )
        if wrapped and not entry.hinted and len(head) + 4 <= settings.text_indent:
            lines.append(head.ljust(settings.text_indent) + wrapped.pop(0))
        else:
            lines.append(head)
        lines.extend(f"{body}{line}" for line in wrapped)
        previous_annotated = True

    return "".join(f"{line}\n" for line in lines)


def usage_entries(
    options: OptionSet | None = None, arguments: ArgumentSet | None = None
) -> list[UsageEntry]:
    """Collect entries for a combined listing: sorted options, then positionals."""
    entries: list[UsageEntry] = []
    if options is not None:
        entries.extend(
            option_entry(option, options.double_dash) for option in options.sorted_options()
        )
    if arguments is not None:
        entries.extend(positional_entry(positional) for positional in arguments.positionals)
    return entries


def render_usage(
    options: OptionSet | None = None,
    arguments: ArgumentSet | None = None,
    settings: UsageSettings | None = None,
) -> str:
    """Render the combined option and positional usage block."""
    if settings is None:
        settings = _settings_of(options, arguments)
    return render_entries(usage_entries(options, arguments), settings)


def synopsis_line(
    program: str = "",
    options: OptionSet | None = None,
    arguments: ArgumentSet | None = None,
) -> str:
    """
    Render a one-line invocation summary.

    Example:
        "deploy [options] <target> [<region>] [<hosts>...]"
    """
    parts = [program] if program else []
    if options is not None and len(options):
        parts.append("[options]")
    if arguments is not None:
        parts.extend(positional.get_synopsis_text() for positional in arguments.positionals)
    return " ".join(parts)


def _settings_of(
    options: OptionSet | None, arguments: ArgumentSet | None
) -> UsageSettings:
    for declared in (options, arguments):
        if declared is not None:
            return declared.settings
    return DEFAULT_SETTINGS
