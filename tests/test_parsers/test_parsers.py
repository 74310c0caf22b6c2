from dataclasses import dataclass, field

import pytest

from slashargs.exceptions import ArgumentParseError
from slashargs.parser import (
    ArgumentDeclaration,
    Schema,
    argument,
    command_line_usage,
    get_schema,
    parse_command_line,
)
from slashargs.reporter import CollectingReporter


@dataclass
class Options:
    lines: bool = argument(help="Count lines", default=False)
    limit: int = 10
    files: list[str] = argument(is_default=True, default_factory=list)


def test_get_schema_is_cached():
    assert get_schema(Options) is get_schema(Options())
    schema = Schema.from_declarations([])
    assert get_schema(schema) is schema


def test_get_schema_rejects_other_types():
    with pytest.raises(TypeError):
        get_schema(42)


def test_parse_into_instance():
    options = Options()
    reporter = CollectingReporter()
    result = parse_command_line(["/lines", "/limit:3", "a", "b"], options, reporter)
    assert result
    assert options == Options(lines=True, limit=3, files=["a", "b"])


def test_parse_into_new_instance():
    result = parse_command_line(["x"], Options, CollectingReporter())
    assert result.values == Options(files=["x"])


def test_parse_with_schema_returns_mapping():
    schema = Schema.from_declarations([ArgumentDeclaration("name")])
    result = parse_command_line(["/name:a"], schema, CollectingReporter())
    assert result.values == {"name": "a"}


def test_parse_failure_returns_falsy_result():
    reporter = CollectingReporter()
    result = parse_command_line(["/limit:many"], Options, reporter)
    assert not result
    assert len(reporter) == 1


def test_raise_on_error():
    with pytest.raises(ArgumentParseError) as excinfo:
        parse_command_line(
            ["/bogus", "/limit:x"], Options, CollectingReporter(), raise_on_error=True
        )
    assert len(excinfo.value.result.errors) == 2
    assert "Unrecognized command line argument '/bogus'" in str(excinfo.value)


def test_command_line_usage():
    usage = command_line_usage(Options)
    assert "/lines[+|-]" in usage
    assert "/limit:<int>" in usage
    assert "<files>" in usage
    assert usage.endswith("\n")


@dataclass
class Private:
    name: str = ""
    _cache: dict = field(default_factory=dict)


def test_private_fields_are_skipped():
    assert [arg.dest for arg in get_schema(Private)] == ["name"]


def test_empty_collecting_reporter_receives_messages():
    reporter = CollectingReporter()
    result = parse_command_line(["/bogus"], Options, reporter)
    assert reporter.messages == ["Unrecognized command line argument '/bogus'"]
    assert [issue.message for issue in result.errors] == reporter.messages
