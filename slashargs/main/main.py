# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command line entry point: parse tokens against a schema loaded from a YAML or
TOML file and show the parsed values.

    slashargs schema.yaml /verbose /count:3 file1 file2 @more.rsp

Exit status is 0 on success, 1 when the tokens fail to parse and 2 when the
schema file cannot be loaded.
"""
import logging
import os
import sys
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from slashargs.config import load_schema
from slashargs.console import console, error_console
from slashargs.exceptions import ConfigError
from slashargs.logger import logger
from slashargs.parser import CommandLineParser, Schema, render_usage
from slashargs.reporter import ConsoleReporter
from slashargs.utils import get_program_invocation, setup_logging

HELP_TOKENS = {"-h", "--help", "/?", "/help"}


def print_program_usage() -> None:
    program = get_program_invocation()
    error_console.print(
        f"[bold]usage: {escape(program)} <schema.yaml|schema.toml> [arguments ...][/bold]"
    )


def values_table(schema: Schema, values: dict) -> Table:
    table = Table(title=schema.description or None, show_lines=False)
    table.add_column("Argument", style="bold")
    table.add_column("Kind")
    table.add_column("Value")
    for arg in schema:
        value = values.get(arg.dest)
        table.add_row(arg.display_name, str(arg.kind), escape(repr(value)))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    log_level = os.getenv("SLASHARGS_LOG_LEVEL", "WARNING").upper()
    setup_logging(console_log_level=getattr(logging, log_level, logging.WARNING))

    if not argv or argv[0] in HELP_TOKENS:
        print_program_usage()
        return 0 if argv else 2

    try:
        schema = load_schema(argv[0])
    except ConfigError as error:
        logger.debug("Schema load failed", exc_info=True)
        error_console.print(f"[bold red]{escape(str(error))}[/bold red]")
        return 2

    result = CommandLineParser(schema, ConsoleReporter()).parse(argv[1:])
    if not result:
        error_console.print()
        render_usage(schema, error_console)
        return 1

    console.print(values_table(schema, result.values))
    return 0


if __name__ == "__main__":
    sys.exit(main())
