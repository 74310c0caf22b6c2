# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Convenience entry points for parsing a program's command line in one call.

Key Components:
- `parse_command_line()`: Parse tokens into a dataclass instance or a schema's
  mapping destination, reporting problems to the console by default.
- `command_line_usage()`: Usage text for a dataclass or a schema.
- `get_schema()`: Build (and cache) the schema of a dataclass.

Example:
    @dataclass
    class Options:
        lines: bool = False
        files: list[str] = argument(is_default=True, default_factory=list)

    options = Options()
    if not parse_command_line(sys.argv[1:], options):
        print(command_line_usage(Options), file=sys.stderr)
"""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence

from slashargs.exceptions import ArgumentParseError
from slashargs.parser.command_line_parser import CommandLineParser
from slashargs.parser.parser_types import ParseResult
from slashargs.parser.schema import Schema
from slashargs.parser.usage import format_usage
from slashargs.reporter import ErrorReporter

_schema_cache: dict[type, Schema] = {}


def get_schema(target: Schema | type | Any) -> Schema:
    """
    Return the schema for a schema, a dataclass type or a dataclass instance.

    Dataclass schemas are built once per class and reused.
    """
    if isinstance(target, Schema):
        return target
    datacls = target if isinstance(target, type) else type(target)
    if not dataclasses.is_dataclass(datacls):
        raise TypeError(
            f"Expected a Schema or a dataclass, got {type(target).__name__}"
        )
    schema = _schema_cache.get(datacls)
    if schema is None:
        schema = Schema.from_dataclass(datacls)
        _schema_cache[datacls] = schema
    return schema


def parse_command_line(
    args: Sequence[str] | None,
    target: Schema | Any,
    reporter: ErrorReporter | None = None,
    raise_on_error: bool = False,
) -> ParseResult:
    """
    Parse a command line.

    Args:
        args (Sequence[str] | None): Tokens, without the program name.
        target (Schema | Any): A schema (values land in a new dict), a dataclass
            type (values land in a new instance) or a dataclass instance (values
            land in that instance).
        reporter (ErrorReporter | None): Error sink. Defaults to a console reporter.
        raise_on_error (bool): Raise `ArgumentParseError` instead of returning a
            failed result.

    Returns:
        ParseResult: Truthy when the command line parsed without errors.
    """
    schema = get_schema(target)
    destination = None
    if not isinstance(target, (Schema, type)):
        destination = target
    result = CommandLineParser(schema, reporter).parse(args, destination)
    if raise_on_error and not result.success:
        raise ArgumentParseError(result)
    return result


def command_line_usage(target: Schema | Any) -> str:
    """Return the usage text for a schema, a dataclass type or instance."""
    return format_usage(get_schema(target))
