"""
Slashargs CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgumentParseError, ConfigError, SchemaError, SlashargsError
from .parser import (
    Argument,
    ArgumentDeclaration,
    ArgumentType,
    CommandLineParser,
    ErrorKind,
    ParseResult,
    Schema,
    ValueKind,
    argument,
    command_line_usage,
    format_usage,
    parse_command_line,
    render_usage,
)
from .reporter import CollectingReporter, ConsoleReporter, ErrorReporter

logger = logging.getLogger("slashargs")


__all__ = [
    "Argument",
    "ArgumentDeclaration",
    "ArgumentParseError",
    "ArgumentType",
    "CollectingReporter",
    "CommandLineParser",
    "ConfigError",
    "ConsoleReporter",
    "ErrorKind",
    "ErrorReporter",
    "ParseResult",
    "Schema",
    "SchemaError",
    "SlashargsError",
    "ValueKind",
    "argument",
    "command_line_usage",
    "format_usage",
    "parse_command_line",
    "render_usage",
]
