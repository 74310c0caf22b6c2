# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage text for a `Schema`.

`format_usage` returns plain text meant to be shown as-is:

    Count lines in files
        /lines[+|-]                         short form /l - Count lines
        /mode:{fast|slow}                   short form /m
        @<file>                             Read response file for more options
        <files>                             Files to read

Annotations start at column 40, with a gap of at least four spaces after long
option syntax. `render_usage` prints the same content through Rich.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from slashargs.console import console as default_console
from slashargs.parser.argument import Argument
from slashargs.parser.schema import Schema

ANNOTATION_COLUMN = 40
MIN_GAP = 4
RESPONSE_FILE_SYNTAX = "@<file>"
RESPONSE_FILE_HELP = "Read response file for more options"


def indent_length(line_length: int) -> int:
    return max(MIN_GAP, ANNOTATION_COLUMN - line_length)


def has_short_form(schema: Schema, arg: Argument) -> bool:
    """True if the argument's short name is distinct and still resolves to it."""
    return arg.short_name != arg.long_name and schema.names.resolves_to(
        arg.short_name, arg
    )


def _argument_lines(schema: Schema) -> list[tuple[str, str, str]]:
    """Return (syntax, annotation, description) for every usage line."""
    lines = []
    for arg in schema.arguments:
        syntax = f"    /{arg.long_name}{arg.get_value_syntax()}"
        annotation = f"short form /{arg.short_name}" if has_short_form(schema, arg) else ""
        description = f" - {arg.description}" if arg.description else ""
        lines.append((syntax, annotation, description))
    lines.append((f"    {RESPONSE_FILE_SYNTAX}", RESPONSE_FILE_HELP, ""))
    if schema.default_argument is not None:
        default = schema.default_argument
        lines.append((f"    <{default.long_name}>", default.description, ""))
    return lines


def format_usage(schema: Schema) -> str:
    """
    Render the usage text of a schema.

    Returns:
        str: Newline separated usage lines, ending with a newline.
    """
    output = []
    if schema.description:
        output.append(schema.description)
    for syntax, annotation, description in _argument_lines(schema):
        line = syntax
        if annotation:
            line += " " * indent_length(len(syntax)) + annotation
        output.append(line + description)
    return "\n".join(output) + "\n"


def render_usage(schema: Schema, console: Console | None = None) -> None:
    """Print the usage text of a schema using Rich output."""
    console = console or default_console
    if schema.description:
        console.print(f"[bold]{escape(schema.description)}[/bold]")
    for syntax, annotation, description in _argument_lines(schema):
        line = f"[bold]{escape(syntax)}[/bold]"
        if annotation:
            padding = " " * indent_length(len(syntax))
            line += f"{padding}[dim]{escape(annotation)}[/dim]"
        console.print(line + escape(description), highlight=False)
