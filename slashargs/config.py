# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads argument schemas from YAML or TOML configuration files.

Example YAML:
    description: Load headshots to the database
    arguments:
      - name: imageFolder
        type: string
        flags: required
        help: Folder to store the downloaded image files in
      - name: download
        type: bool
        short: l
      - name: files
        collection: true
        default: true

TOML files use the same keys with `[[arguments]]` tables.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from slashargs.exceptions import ConfigError, SchemaError
from slashargs.logger import logger
from slashargs.parser.argument import ArgumentDeclaration
from slashargs.parser.argument_type import ArgumentType
from slashargs.parser.parser_types import ValueKind
from slashargs.parser.schema import Schema


class RawArgument(BaseModel):
    """Raw argument model for slashargs schema configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    type: ValueKind = ValueKind.STRING
    flags: str | int | None = None
    collection: bool = False
    default: bool = False
    long: str | None = None
    short: str | None = None
    choices: list[str] | None = None
    help: str = ""
    initial: Any = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ValueKind:
        return ValueKind(value)

    @field_validator("flags", mode="before")
    @classmethod
    def validate_flags(cls, value: Any) -> str | int | None:
        if value is None:
            return None
        if isinstance(value, list):
            value = "|".join(str(part) for part in value)
        ArgumentType(value)
        return value

    def to_declaration(self) -> ArgumentDeclaration:
        return ArgumentDeclaration(
            dest=self.name,
            kind=self.type,
            flags=self.flags,
            collection=self.collection,
            is_default=self.default,
            long_name=self.long,
            short_name=self.short,
            choices=self.choices,
            help=self.help,
            initial=self.initial,
        )


class RawSchema(BaseModel):
    """Raw schema model: a description and the argument list."""

    model_config = ConfigDict(extra="forbid")

    description: str = ""
    arguments: list[RawArgument] = Field(default_factory=list)


def schema_from_config(config: dict[str, Any]) -> Schema:
    """
    Build a schema from an already parsed configuration mapping.

    Raises:
        ConfigError: If the mapping does not describe a valid schema.
    """
    if not isinstance(config, dict):
        raise ConfigError(
            f"Schema configuration must be a mapping, got {type(config).__name__}"
        )
    try:
        raw = RawSchema.model_validate(config)
    except ValidationError as error:
        raise ConfigError(f"Invalid schema configuration:\n{error}") from error
    try:
        return Schema.from_declarations(
            [argument.to_declaration() for argument in raw.arguments],
            description=raw.description,
        )
    except SchemaError as error:
        raise ConfigError(f"Invalid schema configuration: {error}") from error


def load_schema(path: str | Path) -> Schema:
    """
    Load a schema from a `.yaml`, `.yml` or `.toml` file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".toml"}:
        raise ConfigError(f"Unsupported schema file format: '{suffix}'")
    try:
        with path.open("r", encoding="UTF-8") as file:
            if suffix in {".yaml", ".yml"}:
                config = yaml.safe_load(file)
            else:
                config = toml.load(file)
    except OSError as error:
        raise ConfigError(f"Cannot read schema file '{path}': {error}") from error
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Cannot parse schema file '{path}': {error}") from error

    logger.debug("Loaded schema configuration from '%s'", path)
    return schema_from_config(config or {})
