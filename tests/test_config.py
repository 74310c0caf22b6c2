import pytest

from slashargs.config import load_schema, schema_from_config
from slashargs.exceptions import ConfigError
from slashargs.parser import ArgumentType, CommandLineParser, ValueKind
from slashargs.reporter import CollectingReporter

YAML_SCHEMA = """\
description: Load headshots to the database
arguments:
  - name: imageFolder
    flags: required
    help: Folder to store the downloaded image files in
  - name: download
    type: bool
    short: l
  - name: mode
    type: enum
    choices: [fast, slow]
  - name: tags
    collection: true
    flags: [required, multiple]
  - name: files
    collection: true
    default: true
"""

TOML_SCHEMA = """\
description = "Count lines"

[[arguments]]
name = "lines"
type = "flag"
help = "Count lines"

[[arguments]]
name = "limit"
type = "uint"
initial = 100

[[arguments]]
name = "files"
collection = true
default = true
"""


def test_load_yaml_schema(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(YAML_SCHEMA, encoding="utf-8")
    schema = load_schema(path)

    assert schema.description == "Load headshots to the database"
    assert schema.default_argument.long_name == "files"
    assert schema.get_argument("download").short_name == "l"
    assert schema.get_argument("mode").get_variant_names() == ["fast", "slow"]
    assert schema.get_argument("tags").flags == ArgumentType.REQUIRED | ArgumentType.MULTIPLE
    assert schema.get_argument("imageFolder").required

    result = CommandLineParser(schema, CollectingReporter()).parse(
        ["/imageFolder:out", "/l", "/tags:a", "/tags:a", "/mode:SLOW", "x.jpg"]
    )
    assert result.success
    assert result.values == {
        "imageFolder": "out",
        "download": True,
        "mode": "slow",
        "tags": ["a", "a"],
        "files": ["x.jpg"],
    }


def test_load_toml_schema(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text(TOML_SCHEMA, encoding="utf-8")
    schema = load_schema(str(path))

    assert schema.get_argument("lines").kind is ValueKind.BOOL
    assert schema.get_argument("limit").kind is ValueKind.UINT
    result = CommandLineParser(schema, CollectingReporter()).parse(["a"])
    assert result.values == {"lines": False, "limit": 100, "files": ["a"]}


def test_empty_yaml_gives_empty_schema(tmp_path):
    path = tmp_path / "schema.yml"
    path.write_text("", encoding="utf-8")
    assert len(load_schema(path)) == 0


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ConfigError, match="Unsupported schema file format"):
        load_schema(tmp_path / "schema.json")


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read schema file"):
        load_schema(tmp_path / "missing.yaml")


def test_malformed_yaml(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text("arguments: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError, match="Cannot parse schema file"):
        load_schema(path)


def test_malformed_toml(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text('description = "x"\nimageFolder\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="Cannot parse schema file"):
        load_schema(path)


@pytest.mark.parametrize(
    "config",
    [
        ["not", "a", "mapping"],
        {"arguments": [{"name": "x", "type": "float"}]},
        {"arguments": [{"name": "x", "flags": "sometimes"}]},
        {"arguments": [{"name": "x", "colour": "red"}]},
        {"arguments": [{"name": " "}]},
        {"arguments": [{"name": "x"}, {"name": "x"}]},
        {"arguments": [{"name": "mode", "type": "enum"}]},
        {"arguments": [{"name": "a", "default": True}, {"name": "b", "default": True}]},
    ],
)
def test_invalid_configuration(config):
    with pytest.raises(ConfigError):
        schema_from_config(config)
