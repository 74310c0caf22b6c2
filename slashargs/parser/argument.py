# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass used by `CommandLineParser` to represent one
declared command line argument slot, and `ArgumentDeclaration`, the
caller-facing description an `Argument` is compiled from.

Each `Argument` knows its resolved names, its value kind, its multiplicity
flags, its help text and the setter that writes a converted value into the
parse destination. The setter is chosen once, when the schema is built.

Key Attributes:
- `long_name`: Name used with a `/` or `-` prefix (e.g. `/verbose`)
- `short_name`: Short form (e.g. `/v`), inferred from `long_name` when not given
- `kind`: `ValueKind` of a single value
- `flags`: `ArgumentType` multiplicity rules
- `is_collection`: Whether the argument gathers an ordered list of values
- `is_default`: Whether bare tokens are routed to this argument

Used By:
- `Schema`
- `CommandLineParser`
- Usage text rendering
- Prompt Toolkit completion
"""
from __future__ import annotations

import operator
from copy import deepcopy
from dataclasses import dataclass, field
from enum import EnumMeta
from typing import Any, Callable, Iterable

from slashargs.parser.argument_type import ArgumentType
from slashargs.parser.parser_types import ValueKind
from slashargs.parser.utils import variant_names

Setter = Callable[[Any, Any], None]


def item_setter(dest: str) -> Setter:
    """Return a setter storing values under `dest` in a mapping destination."""

    def store(destination: Any, value: Any) -> None:
        operator.setitem(destination, dest, value)

    return store


def attribute_setter(dest: str) -> Setter:
    """Return a setter storing values on attribute `dest` of an object destination."""

    def store(destination: Any, value: Any) -> None:
        setattr(destination, dest, value)

    return store


@dataclass
class ArgumentDeclaration:
    """
    Caller-facing description of one argument, before names are resolved.

    Attributes:
        dest (str): Destination key or attribute name. Also the default long name.
        kind (ValueKind | str): The kind of a single value.
        flags (ArgumentType | str | None): Multiplicity rules. Defaults to
            MULTIPLE_UNIQUE for collections and AT_MOST_ONCE otherwise.
        collection (bool): Whether the argument gathers a list of values.
        is_default (bool): Whether bare tokens are routed to this argument.
        long_name (str | None): Explicit long name.
        short_name (str | None): Explicit short name.
        choices (EnumMeta | Iterable[str] | None): Variants for ENUM arguments.
        help (str): Description shown in usage text.
        initial (Any): Value placed in a fresh mapping destination before parsing.
    """

    dest: str
    kind: ValueKind | str = ValueKind.STRING
    flags: ArgumentType | str | None = None
    collection: bool = False
    is_default: bool = False
    long_name: str | None = None
    short_name: str | None = None
    choices: EnumMeta | Iterable[str] | None = None
    help: str = ""
    initial: Any = None


@dataclass
class Argument:
    """
    Represents one compiled command line argument.

    Attributes:
        long_name (str): Unique long name.
        short_name (str | None): Short name, or None if it was dropped.
        explicit_short_name (bool): True if the caller supplied the short name.
        kind (ValueKind): The kind of a single value.
        flags (ArgumentType): Multiplicity rules.
        is_collection (bool): True if the argument gathers an ordered list.
        is_default (bool): True if bare tokens are routed to this argument.
        description (str): Help text.
        dest (str): Destination key or attribute name.
        choices (EnumMeta | tuple[str, ...] | None): Variants for ENUM arguments.
        initial (Any): Value placed in a fresh mapping destination before parsing.
        setter (Setter): Writes a converted value into the destination.
    """

    long_name: str
    dest: str
    kind: ValueKind = ValueKind.STRING
    flags: ArgumentType = ArgumentType.AT_MOST_ONCE
    short_name: str | None = None
    explicit_short_name: bool = False
    is_collection: bool = False
    is_default: bool = False
    description: str = ""
    choices: EnumMeta | tuple[str, ...] | None = None
    initial: Any = None
    setter: Setter = field(default=None, repr=False, compare=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.setter is None:
            self.setter = item_setter(self.dest)

    @property
    def required(self) -> bool:
        return self.flags.required

    @property
    def unique(self) -> bool:
        return self.flags.unique

    @property
    def allow_multiple(self) -> bool:
        return self.flags.multiple

    @property
    def display_name(self) -> str:
        """Name as shown in messages: `/name`, or `<name>` for the default argument."""
        if self.is_default:
            return f"<{self.long_name}>"
        return f"/{self.long_name}"

    def get_variant_names(self) -> list[str]:
        return variant_names(self.choices)

    def get_value_syntax(self) -> str:
        """Get the value syntax shown after the option name in usage text."""
        if self.kind is ValueKind.BOOL:
            return "[+|-]"
        if self.kind is ValueKind.ENUM:
            return f":{{{'|'.join(self.get_variant_names())}}}"
        return f":<{self.kind.value}>"

    def store(self, destination: Any, value: Any) -> None:
        self.setter(destination, value)

    def empty_value(self) -> Any:
        """Initial destination value before any token is seen."""
        if self.initial is not None:
            return deepcopy(self.initial)
        if self.is_collection:
            return []
        if self.kind is ValueKind.BOOL:
            return False
        return None
