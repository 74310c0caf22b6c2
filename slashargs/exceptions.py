# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by slashargs.

Parse problems caused by the user's command line (unknown options, bad values,
missing required arguments, unreadable response files) are never raised. They are
reported through the error reporter and collected on the `ParseResult`.
The exceptions below are reserved for programmer and configuration mistakes.

Exception Hierarchy:
- SlashargsError
    ├── SchemaError
    ├── ConfigError
    └── ArgumentParseError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slashargs.parser.parser_types import ParseResult


class SlashargsError(Exception):
    """Base exception for slashargs."""


class SchemaError(SlashargsError):
    """Exception raised when argument declarations cannot form a valid schema."""


class ConfigError(SlashargsError):
    """Exception raised when a schema configuration file cannot be loaded."""


class ArgumentParseError(SlashargsError):
    """Exception raised on request when a command line failed to parse."""

    def __init__(self, result: ParseResult):
        self.result = result
        messages = "; ".join(issue.message for issue in result.errors)
        super().__init__(messages or "Command line failed to parse.")
