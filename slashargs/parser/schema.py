# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Schema`, the compiled and immutable description of every
argument a program accepts.

A schema is built once per program run from explicit declarations:

- a list of `ArgumentDeclaration` objects (`Schema.from_declarations`),
- the fields of a dataclass tagged with `argument(...)` (`Schema.from_dataclass`),
- or a YAML / TOML file (see `slashargs.config`).

Building a schema validates each declaration, compiles it to an `Argument`,
resolves long and short names through a `NameTable` and picks the setter used to
store parsed values. Invalid declarations raise `SchemaError`; they are
programmer errors, not command line errors.

Example Usage:
    schema = Schema.from_declarations(
        [
            ArgumentDeclaration("verbose", kind="bool"),
            ArgumentDeclaration("count", kind="int", flags="required"),
            ArgumentDeclaration("files", collection=True, is_default=True),
        ],
        description="Count things in files",
    )
"""
from __future__ import annotations

import dataclasses
import typing
from enum import EnumMeta
from typing import Any, Callable, Iterable, Iterator, get_args, get_origin

from slashargs.exceptions import SchemaError
from slashargs.logger import logger
from slashargs.parser.argument import (
    Argument,
    ArgumentDeclaration,
    Setter,
    attribute_setter,
    item_setter,
)
from slashargs.parser.argument_type import ArgumentType
from slashargs.parser.names import NameTable, build_name_table
from slashargs.parser.parser_types import ValueKind
from slashargs.parser.utils import value_kind_for, variant_names

METADATA_KEY = "slashargs"


def argument(
    kind: ValueKind | str | None = None,
    flags: ArgumentType | str | None = None,
    *,
    long_name: str | None = None,
    short_name: str | None = None,
    is_default: bool = False,
    choices: EnumMeta | Iterable[str] | None = None,
    help: str = "",
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """
    Declare a dataclass field as a command line argument.

    The field type selects the value kind (`bool`, `int`, `str`, an `Enum` class,
    or `list[...]` of those for a collection). Pass `kind` to pick `uint` or
    `short`, or to override the inferred kind.

    Example:
        @dataclass
        class Options:
            verbose: bool = argument(help="Print more output", default=False)
            width: int = argument("uint", short_name="w", default=90)
            files: list[str] = argument(is_default=True, default_factory=list)
    """
    metadata = {
        METADATA_KEY: {
            "kind": kind,
            "flags": flags,
            "long_name": long_name,
            "short_name": short_name,
            "is_default": is_default,
            "choices": choices,
            "help": help,
        }
    }
    return dataclasses.field(
        default=default, default_factory=default_factory, metadata=metadata
    )


class Schema:
    """
    Immutable set of compiled arguments with a name lookup table.

    Attributes:
        description (str): One line program description shown first in usage text.
        arguments (tuple[Argument, ...]): Named arguments in declaration order.
        default_argument (Argument | None): The positional argument, if any.
        names (NameTable): Lookup of every registered long and short name.
    """

    def __init__(
        self,
        arguments: Iterable[Argument],
        description: str = "",
        destination_factory: Callable[[], Any] | None = None,
    ) -> None:
        named: list[Argument] = []
        default_argument: Argument | None = None
        long_names: set[str] = set()
        for arg in arguments:
            self._validate_argument(arg)
            if arg.long_name in long_names:
                raise SchemaError(f"Long name '{arg.long_name}' is already defined")
            long_names.add(arg.long_name)
            if arg.is_default:
                if default_argument is not None:
                    raise SchemaError(
                        f"Only one default argument is allowed: '{default_argument.long_name}' "
                        f"and '{arg.long_name}' are both marked as default"
                    )
                default_argument = arg
            else:
                named.append(arg)

        self.description: str = description or ""
        self._arguments: tuple[Argument, ...] = tuple(named)
        self._default_argument: Argument | None = default_argument
        self._names: NameTable = build_name_table(self._arguments)
        self._destination_factory = destination_factory
        logger.debug("Built %s", self)

    @staticmethod
    def _validate_argument(arg: Argument) -> None:
        if not arg.long_name:
            raise SchemaError(f"Argument '{arg.dest}' must have a non-empty long name")
        if any(char in arg.long_name for char in ":+-") or arg.long_name[0] in "/@":
            raise SchemaError(
                f"Long name '{arg.long_name}' cannot contain ':', '+' or '-' "
                "or start with '/' or '@'"
            )
        if arg.short_name is not None and any(char in arg.short_name for char in ":+-"):
            raise SchemaError(
                f"Short name '{arg.short_name}' cannot contain ':', '+' or '-'"
            )
        if arg.is_collection and not arg.allow_multiple:
            raise SchemaError(
                f"Collection argument '{arg.long_name}' must allow multiple values"
            )
        if arg.unique and not arg.is_collection:
            raise SchemaError(
                f"Argument '{arg.long_name}' is unique but is not a collection"
            )
        if arg.kind is ValueKind.ENUM and not arg.get_variant_names():
            raise SchemaError(f"Enum argument '{arg.long_name}' must declare choices")
        if arg.kind is not ValueKind.ENUM and arg.choices is not None:
            raise SchemaError(
                f"choices can only be specified for enum arguments, not '{arg.long_name}'"
            )

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return self._arguments

    @property
    def default_argument(self) -> Argument | None:
        return self._default_argument

    @property
    def names(self) -> NameTable:
        return self._names

    def lookup(self, name: str) -> Argument | None:
        """Return the named argument registered under a long or short name."""
        return self._names.get(name)

    def get_argument(self, dest: str) -> Argument | None:
        return next((arg for arg in self if arg.dest == dest), None)

    def new_destination(self) -> Any:
        """Create a fresh destination holding the initial value of every argument."""
        if self._destination_factory is not None:
            try:
                return self._destination_factory()
            except TypeError as error:
                raise SchemaError(
                    f"Cannot create a destination for this schema: {error}. "
                    "Give every field a default or pass a destination explicitly."
                ) from error
        return {arg.dest: arg.empty_value() for arg in self}

    def __iter__(self) -> Iterator[Argument]:
        """Iterate named arguments, then the default argument."""
        yield from self._arguments
        if self._default_argument is not None:
            yield self._default_argument

    def __len__(self) -> int:
        return len(self._arguments) + (self._default_argument is not None)

    def __str__(self) -> str:
        required = sum(arg.required for arg in self)
        return (
            f"Schema(args={len(self)}, names={len(self._names)}, "
            f"default={self._default_argument is not None}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_declarations(
        cls,
        declarations: Iterable[ArgumentDeclaration],
        description: str = "",
    ) -> Schema:
        """Build a schema whose parse destination is a `dict` keyed by `dest`."""
        arguments = [
            compile_declaration(declaration, item_setter(declaration.dest))
            for declaration in declarations
        ]
        return cls(arguments, description=description)

    @classmethod
    def from_dataclass(cls, datacls: type, description: str = "") -> Schema:
        """
        Build a schema from the fields of a dataclass.

        Every field not starting with an underscore is an argument. Fields may
        carry `argument(...)` metadata; untagged fields use defaults inferred from
        their type. The parse destination is a fresh instance of the dataclass.
        """
        if not dataclasses.is_dataclass(datacls) or not isinstance(datacls, type):
            raise SchemaError(f"{datacls!r} is not a dataclass type")
        try:
            hints = typing.get_type_hints(datacls)
        except NameError as error:
            raise SchemaError(
                f"Cannot resolve field types of {datacls.__name__}: {error}"
            ) from error
        arguments = []
        for dc_field in dataclasses.fields(datacls):
            if dc_field.name.startswith("_"):
                continue
            declaration = declaration_from_field(dc_field, hints.get(dc_field.name))
            arguments.append(
                compile_declaration(declaration, attribute_setter(dc_field.name))
            )
        return cls(arguments, description=description, destination_factory=datacls)


def declaration_from_field(
    dc_field: dataclasses.Field, annotation: Any
) -> ArgumentDeclaration:
    """Translate a dataclass field and its metadata into an `ArgumentDeclaration`."""
    options = dict(dc_field.metadata.get(METADATA_KEY, {}))
    collection = False
    element = annotation
    if get_origin(annotation) in (list, tuple):
        collection = True
        element_args = get_args(annotation)
        element = element_args[0] if element_args else str

    inferred = value_kind_for(element)
    kind = options.pop("kind", None)
    choices = options.pop("choices", None)
    if kind is None:
        if inferred is None:
            raise SchemaError(
                f"Field '{dc_field.name}' has unsupported type {annotation!r}; "
                "use bool, int, str, an Enum or a list of those"
            )
        kind, enum_choices = inferred
        choices = choices if choices is not None else enum_choices
    elif choices is None and inferred is not None:
        choices = inferred[1]

    return ArgumentDeclaration(
        dest=dc_field.name,
        kind=kind,
        collection=collection,
        choices=choices,
        **{key: value for key, value in options.items() if value is not None},
    )


def compile_declaration(declaration: ArgumentDeclaration, setter: Setter) -> Argument:
    """Compile one declaration into an `Argument`, applying name and flag defaults."""
    try:
        kind = ValueKind(declaration.kind)
    except ValueError as error:
        raise SchemaError(f"Argument '{declaration.dest}': {error}") from error

    flags = declaration.flags
    if flags is None:
        flags = (
            ArgumentType.MULTIPLE_UNIQUE
            if declaration.collection
            else ArgumentType.AT_MOST_ONCE
        )
    elif not isinstance(flags, ArgumentType):
        try:
            flags = ArgumentType(flags)
        except ValueError as error:
            raise SchemaError(f"Argument '{declaration.dest}': {error}") from error

    long_name = (
        declaration.long_name if declaration.long_name is not None else declaration.dest
    )
    explicit_short_name = declaration.short_name is not None
    if declaration.is_default:
        short_name = None
    elif explicit_short_name:
        short_name = declaration.short_name
    else:
        short_name = long_name[:1] or None

    choices = declaration.choices
    if choices is not None and not isinstance(choices, EnumMeta):
        choices = tuple(variant_names(choices))

    return Argument(
        long_name=long_name,
        dest=declaration.dest,
        kind=kind,
        flags=flags,
        short_name=short_name,
        explicit_short_name=explicit_short_name,
        is_collection=declaration.collection,
        is_default=declaration.is_default,
        description=declaration.help,
        choices=choices,
        initial=declaration.initial,
        setter=setter,
    )
