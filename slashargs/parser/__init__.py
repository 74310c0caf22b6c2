"""
Slashargs CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument, ArgumentDeclaration
from .argument_type import ArgumentType
from .command_line_parser import CommandLineParser
from .parser_types import (
    Converted,
    ErrorKind,
    InvalidValue,
    ParseIssue,
    ParseResult,
    ValueKind,
)
from .parsers import command_line_usage, get_schema, parse_command_line
from .response_file import LexResult, lex_response_file
from .schema import Schema, argument
from .usage import format_usage, render_usage
from .utils import convert_value

__all__ = [
    "Argument",
    "ArgumentDeclaration",
    "ArgumentType",
    "CommandLineParser",
    "Converted",
    "ErrorKind",
    "InvalidValue",
    "LexResult",
    "ParseIssue",
    "ParseResult",
    "Schema",
    "ValueKind",
    "argument",
    "command_line_usage",
    "convert_value",
    "format_usage",
    "get_schema",
    "lex_response_file",
    "parse_command_line",
    "render_usage",
]
