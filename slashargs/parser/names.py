# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name table mapping option names to arguments.

Names are registered in two passes when a schema is built:

1. Every long name and every explicitly requested short name. A conflict is a
   programmer error and raises `SchemaError`.
2. Every inferred short name, only where the name is still free. Inferred short
   names that collide are dropped and that argument has no short form.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from slashargs.exceptions import SchemaError
from slashargs.logger import logger
from slashargs.parser.argument import Argument


class NameTable:
    """
    Lookup from long and short option names to their `Argument`.

    Only `build_name_table` fills a table. Once built it is read-only.
    """

    def __init__(self) -> None:
        self._names: dict[str, Argument] = {}

    def _register(self, name: str, argument: Argument) -> None:
        """Register a name, raising `SchemaError` if it is already used."""
        existing = self._names.get(name)
        if existing is not None and existing is not argument:
            raise SchemaError(
                f"Name '{name}' of argument '{argument.dest}' is already used by "
                f"argument '{existing.dest}'"
            )
        self._names[name] = argument

    def _register_if_free(self, name: str, argument: Argument) -> bool:
        """Register a name unless it is taken. Returns whether it was registered."""
        existing = self._names.get(name)
        if existing is None:
            self._names[name] = argument
            return True
        if existing is argument:
            return True
        logger.debug(
            "Dropping inferred short name '%s' of '%s': used by '%s'",
            name,
            argument.long_name,
            existing.long_name,
        )
        return False

    def get(self, name: str) -> Argument | None:
        return self._names.get(name)

    def resolves_to(self, name: str | None, argument: Argument) -> bool:
        """Return True if `name` is registered for exactly this argument."""
        if not name:
            return False
        return self._names.get(name) is argument

    def names_for(self, argument: Argument) -> list[str]:
        return [name for name, arg in self._names.items() if arg is argument]

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


def build_name_table(arguments: Iterable[Argument]) -> NameTable:
    """
    Populate a `NameTable` for the named (non-default) arguments.

    Inferred short names that could not be registered are cleared on the
    argument so it reports no short form.
    """
    table = NameTable()
    arguments = list(arguments)
    for argument in arguments:
        table._register(argument.long_name, argument)
        if argument.explicit_short_name and argument.short_name:
            table._register(argument.short_name, argument)

    for argument in arguments:
        if argument.explicit_short_name or not argument.short_name:
            continue
        if not table._register_if_free(argument.short_name, argument):
            argument.short_name = None
    return table
