# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentType`, the flag set controlling how often an argument may occur
on a command line and how duplicate values are treated.

Supports alias coercion for config-friendly string values, so argument
declarations loaded from YAML or TOML can spell the flags out by name.

Exports:
    - ArgumentType: IntFlag of multiplicity rules for command line arguments.

Example:
    ArgumentType("required")                   → ArgumentType.REQUIRED
    ArgumentType("multiple_unique")            → ArgumentType.MULTIPLE_UNIQUE
    ArgumentType("required | last_occurrence") → REQUIRED | MULTIPLE
"""
from __future__ import annotations

from enum import IntFlag


class ArgumentType(IntFlag):
    """
    Multiplicity rules for a command line argument.

    Members:
        REQUIRED: An error is reported if the argument never appears.
        UNIQUE: Duplicate values of a collection argument are reported as errors.
            Only valid for collection arguments.
        MULTIPLE: The argument may appear more than once. Required for
            collection arguments.

    Combinations:
        AT_MOST_ONCE: Default for scalar arguments. Repeating it is an error.
        LAST_OCCURRENCE_WINS: A repeated scalar keeps the last value given.
        MULTIPLE_UNIQUE: Default for collection arguments. Repeating a value is
            an error.

    Aliases:
        - "last_occurrence" → "last_occurrence_wins"
        - "once" → "at_most_once"
        - "collection" → "multiple_unique"
    """

    AT_MOST_ONCE = 0x00
    REQUIRED = 0x01
    UNIQUE = 0x02
    MULTIPLE = 0x04
    LAST_OCCURRENCE_WINS = MULTIPLE
    MULTIPLE_UNIQUE = MULTIPLE | UNIQUE

    @property
    def required(self) -> bool:
        return bool(self & ArgumentType.REQUIRED)

    @property
    def unique(self) -> bool:
        return bool(self & ArgumentType.UNIQUE)

    @property
    def multiple(self) -> bool:
        return bool(self & ArgumentType.MULTIPLE)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "last_occurrence": "last_occurrence_wins",
            "once": "at_most_once",
            "collection": "multiple_unique",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentType:
        if not isinstance(value, str):
            return super()._missing_(value)
        result = cls.AT_MOST_ONCE
        for part in value.split("|"):
            normalized = part.strip().lower().replace("-", "_").replace(" ", "_")
            if not normalized:
                continue
            alias = cls._get_alias(normalized)
            try:
                result |= cls[alias.upper()]
            except KeyError:
                valid = ", ".join(
                    name.lower() for name in cls.__members__ if name != "AT_MOST_ONCE"
                )
                raise ValueError(
                    f"Invalid {cls.__name__}: '{value}'. Must be one of: "
                    f"at_most_once, {valid}"
                ) from None
        return result

    def __str__(self) -> str:
        """Return the flag names joined with '|'."""
        if not self:
            return "at_most_once"
        names = [
            member.name.lower()
            for member in (ArgumentType.REQUIRED, ArgumentType.UNIQUE, ArgumentType.MULTIPLE)
            if self & member
        ]
        return "|".join(names)
