# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value kinds, conversion results and parse state models for the slashargs parser.

Contents:
- `ValueKind`: The scalar kinds an argument can hold.
- `Converted` / `InvalidValue`: The two outcomes of converting one raw token.
- `ErrorKind`: Categories of problems reported while parsing a command line.
- `ParseIssue`: One reported problem, kept on the `ParseResult`.
- `ArgumentState`: Tracks whether an `Argument` has been seen during a parse and
  collects the values of collection arguments.
- `ParseResult`: Outcome of one parse call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from slashargs.parser.argument import Argument


class ValueKind(Enum):
    """
    Scalar kinds supported for argument values.

    Aliases:
        - "str" → "string"
        - "int" / "integer" → "int"
        - "unsigned" → "uint"
        - "boolean" / "flag" → "bool"
        - "choice" → "enum"
    """

    STRING = "string"
    INT = "int"
    UINT = "uint"
    SHORT = "short"
    BOOL = "bool"
    ENUM = "enum"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "integer": "int",
            "unsigned": "uint",
            "boolean": "bool",
            "flag": "bool",
            "choice": "enum",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Converted:
    """A successfully converted token."""

    value: Any


@dataclass(frozen=True)
class InvalidValue:
    """A token that could not be converted."""

    raw: str | None
    reason: str = ""


Conversion = Union[Converted, InvalidValue]


class ErrorKind(Enum):
    """Categories of problems reported while parsing a command line."""

    UNRECOGNIZED_ARGUMENT = "unrecognized_argument"
    DUPLICATE_ARGUMENT = "duplicate_argument"
    INVALID_VALUE = "invalid_value"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    UNBALANCED_QUOTE = "unbalanced_quote"
    FILE_ACCESS_ERROR = "file_access_error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseIssue:
    """One problem reported during a parse."""

    kind: ErrorKind
    message: str


@dataclass
class ArgumentState:
    """Tracks an argument, whether it has been seen and its collected values."""

    arg: Argument
    seen: bool = False
    values: list[Any] = field(default_factory=list)


@dataclass
class ParseResult:
    """
    Outcome of parsing one command line.

    Attributes:
        values (Any): The destination the parsed values were written into.
        errors (list[ParseIssue]): Every problem reported, in report order.
    """

    values: Any
    errors: list[ParseIssue] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def errors_of(self, kind: ErrorKind) -> list[ParseIssue]:
        """Return the reported problems of one kind."""
        return [issue for issue in self.errors if issue.kind == kind]

    def __bool__(self) -> bool:
        return self.success
