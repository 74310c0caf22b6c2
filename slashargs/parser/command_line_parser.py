# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, which walks a command line token
vector against a `Schema` and writes converted values into a destination.

Token Grammar:
- `/name` or `-name`: named option with no value (a Bool flag set to true)
- `/name:value`: named option with an explicit value
- `/name+` / `/name-`: Bool option set to true / false
- `@path`: include the tokens of a response file, parsed in place
- anything else: a value for the default (positional) argument

Problems are reported through the error reporter and collected on the
`ParseResult`. They never stop the scan, so one run surfaces as many problems as
possible. Once every token (including nested response files) is consumed,
collection values are flushed to the destination and required arguments are
checked.

Example Usage:
    schema = Schema.from_declarations(
        [
            ArgumentDeclaration("lines", kind="bool"),
            ArgumentDeclaration("files", collection=True, is_default=True),
        ]
    )
    parser = CommandLineParser(schema, reporter=CollectingReporter())
    result = parser.parse(["/lines", "foo", "bar"])

    # result.values == {"lines": True, "files": ["foo", "bar"]}
"""
from __future__ import annotations

from typing import Any, Iterable

from slashargs.logger import logger
from slashargs.parser.argument import Argument
from slashargs.parser.parser_types import (
    ArgumentState,
    ErrorKind,
    InvalidValue,
    ParseIssue,
    ParseResult,
)
from slashargs.parser.response_file import lex_response_file, read_response_file
from slashargs.parser.schema import Schema
from slashargs.parser.utils import convert_value
from slashargs.reporter import ConsoleReporter, ErrorReporter

OPTION_PREFIXES = "-/"
OPTION_TERMINATORS = ":+-"
RESPONSE_FILE_PREFIX = "@"


def split_option(token: str) -> tuple[str, str | None]:
    """
    Split a named option token into its name and inline value.

    The name runs from after the prefix up to the first ':', '+' or '-'.
    The value is None for a bare `/name`, the text after the colon for
    `/name:value`, and the trailing text otherwise (`/name+` gives "+").
    """
    end = -1
    for index in range(1, len(token)):
        if token[index] in OPTION_TERMINATORS:
            end = index
            break
    name = token[1:] if end == -1 else token[1:end]
    if len(name) + 1 == len(token):
        return name, None
    if token[len(name) + 1] == ":":
        return name, token[len(name) + 2 :]
    return name, token[len(name) + 1 :]


class CommandLineParser:
    """
    Parser for command line token vectors.

    A parser is bound to one immutable `Schema` and one error reporter. Each
    `parse` call keeps its own argument state, so a parser may be reused for
    several command lines, one at a time.
    """

    def __init__(self, schema: Schema, reporter: ErrorReporter | None = None) -> None:
        self.schema: Schema = schema
        self.reporter: ErrorReporter = (
            reporter if reporter is not None else ConsoleReporter()
        )
        self._states: dict[int, ArgumentState] = {}
        self._issues: list[ParseIssue] = []

    def parse(self, args: Iterable[str] | None, destination: Any = None) -> ParseResult:
        """
        Parse a token vector into a destination.

        Args:
            args (Iterable[str] | None): Command line tokens, without the program name.
            destination (Any): Mapping or object receiving the values. A fresh
                destination is created from the schema when omitted.

        Returns:
            ParseResult: The destination and every reported problem.
        """
        if destination is None:
            destination = self.schema.new_destination()
        self._states = {id(arg): ArgumentState(arg) for arg in self.schema}
        self._issues = []
        try:
            self._parse_argument_list(list(args or []), destination)
            self._finish(destination)
            result = ParseResult(values=destination, errors=list(self._issues))
        finally:
            self._states = {}
            self._issues = []
        logger.debug(
            "Parsed command line: %s (%d errors)",
            "success" if result.success else "failure",
            len(result.errors),
        )
        return result

    def _report(self, kind: ErrorKind, message: str) -> None:
        logger.debug("Reporting %s: %s", kind, message)
        self._issues.append(ParseIssue(kind, message))
        self.reporter(message)

    def _report_unrecognized(self, token: str) -> None:
        self._report(
            ErrorKind.UNRECOGNIZED_ARGUMENT,
            f"Unrecognized command line argument '{token}'",
        )

    def _parse_argument_list(self, args: list[str], destination: Any) -> None:
        for token in args:
            if not token:
                continue
            prefix = token[0]
            if prefix in OPTION_PREFIXES:
                name, value = split_option(token)
                arg = self.schema.lookup(name)
                if arg is None:
                    self._report_unrecognized(token)
                else:
                    self._set_value(arg, value, destination)
            elif prefix == RESPONSE_FILE_PREFIX:
                self._parse_response_file(token[1:], destination)
            elif self.schema.default_argument is not None:
                self._set_value(self.schema.default_argument, token, destination)
            else:
                self._report_unrecognized(token)

    def _parse_response_file(self, path: str, destination: Any) -> None:
        try:
            text = read_response_file(path)
        except (OSError, UnicodeDecodeError) as error:
            reason = getattr(error, "strerror", None) or str(error)
            self._report(
                ErrorKind.FILE_ACCESS_ERROR,
                f"Error: Can't open command line argument file '{path}' : '{reason}'",
            )
            return

        lexed = lex_response_file(text)
        if lexed.unbalanced:
            self._report(
                ErrorKind.UNBALANCED_QUOTE,
                f"Error: Unbalanced '\"' in command line argument file '{path}'",
            )
        logger.debug("Expanding response file '%s' into %d tokens", path, len(lexed.tokens))
        self._parse_argument_list(lexed.tokens, destination)

    def _set_value(self, arg: Argument, value: str | None, destination: Any) -> bool:
        state = self._states[id(arg)]
        if state.seen and not arg.allow_multiple:
            self._report(
                ErrorKind.DUPLICATE_ARGUMENT, f"Duplicate '{arg.long_name}' argument"
            )
            return False

        conversion = convert_value(arg.kind, value, arg.choices)
        if isinstance(conversion, InvalidValue):
            shown = "" if value is None else value
            reason = f": {conversion.reason}" if conversion.reason else ""
            self._report(
                ErrorKind.INVALID_VALUE,
                f"'{shown}' is not a valid value for the '{arg.long_name}' "
                f"command line option{reason}",
            )
            return False

        state.seen = True
        if arg.is_collection:
            if arg.unique and conversion.value in state.values:
                self._report(
                    ErrorKind.DUPLICATE_ARGUMENT,
                    f"Duplicate '{arg.long_name}' argument '{value}'",
                )
                return False
            state.values.append(conversion.value)
        else:
            arg.store(destination, conversion.value)
        return True

    def _finish(self, destination: Any) -> None:
        for arg in self.schema:
            state = self._states[id(arg)]
            if arg.is_collection:
                arg.store(destination, list(state.values))
            if arg.required and not state.seen:
                self._report(
                    ErrorKind.MISSING_REQUIRED_ARGUMENT,
                    f"Missing required argument '{arg.display_name}'.",
                )

    def __str__(self) -> str:
        return f"CommandLineParser(schema={self.schema})"

    def __repr__(self) -> str:
        return str(self)
