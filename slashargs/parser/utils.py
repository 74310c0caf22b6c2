# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion utilities for the slashargs parser.

Every function here converts one raw command line token for one `ValueKind`.
Invalid input is an ordinary outcome, so conversions return a `Converted` or an
`InvalidValue` rather than raising.

Functions:
- convert_bool: "+" or a bare flag is True, "-" is False.
- convert_integer: Base-10 integer parsing with a fixed width range.
- convert_enum: Case-insensitive match against declared variant names.
- convert_value: Dispatch on `ValueKind`, applying the null/empty token rules.
- variant_names: The declared variant names of an enum argument.
"""
from __future__ import annotations

import re
from enum import Enum, EnumMeta
from typing import Any, Iterable

from slashargs.parser.parser_types import Conversion, Converted, InvalidValue, ValueKind

INTEGER_RANGES: dict[ValueKind, tuple[int, int]] = {
    ValueKind.INT: (-(2**31), 2**31 - 1),
    ValueKind.UINT: (0, 2**32 - 1),
    ValueKind.SHORT: (-(2**15), 2**15 - 1),
}

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def variant_names(choices: EnumMeta | Iterable[str] | None) -> list[str]:
    """Return the variant names of an enum argument in declaration order."""
    if choices is None:
        return []
    if isinstance(choices, EnumMeta):
        return list(choices.__members__)
    return [str(choice) for choice in choices]


def convert_bool(value: str | None) -> Conversion:
    if value is None or value == "+":
        return Converted(True)
    if value == "-":
        return Converted(False)
    return InvalidValue(value, "expected '+' or '-'")


def convert_integer(value: str, kind: ValueKind) -> Conversion:
    low, high = INTEGER_RANGES[kind]
    if not _INTEGER_PATTERN.fullmatch(value):
        return InvalidValue(value, f"not a base-10 {kind} value")
    number = int(value)
    if not low <= number <= high:
        return InvalidValue(value, f"out of range for {kind} ({low}..{high})")
    return Converted(number)


def convert_enum(value: str, choices: EnumMeta | Iterable[str] | None) -> Conversion:
    """
    Match a token against the declared variants, ignoring case.

    Returns the Enum member when the variants come from an Enum class, otherwise
    the variant name as declared.
    """
    folded = value.casefold()
    if isinstance(choices, EnumMeta):
        for name, member in choices.__members__.items():
            if name.casefold() == folded:
                return Converted(member)
    else:
        for name in variant_names(choices):
            if name.casefold() == folded:
                return Converted(name)
    names = "|".join(variant_names(choices))
    return InvalidValue(value, f"should be one of {{{names}}}")


def convert_value(
    kind: ValueKind,
    value: str | None,
    choices: EnumMeta | Iterable[str] | None = None,
) -> Conversion:
    """
    Convert a raw token to a value of the given kind.

    A missing value (`None`) is only valid for BOOL, where it means the flag was
    given without an explicit value. An empty string is never valid.

    Args:
        kind (ValueKind): The target kind.
        value (str | None): The raw token, or None when no value followed the name.
        choices (EnumMeta | Iterable[str] | None): Variants for ENUM arguments.

    Returns:
        Converted | InvalidValue: The outcome of the conversion.
    """
    if value is None:
        if kind is ValueKind.BOOL:
            return Converted(True)
        return InvalidValue(None, "a value is required")
    if value == "":
        return InvalidValue(value, "empty values are not allowed")

    if kind is ValueKind.STRING:
        return Converted(value)
    if kind is ValueKind.BOOL:
        return convert_bool(value)
    if kind in INTEGER_RANGES:
        return convert_integer(value, kind)
    if kind is ValueKind.ENUM:
        return convert_enum(value, choices)
    raise ValueError(f"Unsupported value kind: {kind!r}")


def value_kind_for(annotation: Any) -> tuple[ValueKind, EnumMeta | None] | None:
    """Map a python annotation to a value kind, or None if it has no mapping."""
    if annotation is bool:
        return ValueKind.BOOL, None
    if annotation is int:
        return ValueKind.INT, None
    if annotation is str:
        return ValueKind.STRING, None
    if isinstance(annotation, EnumMeta) and issubclass(annotation, Enum):
        return ValueKind.ENUM, annotation
    return None
