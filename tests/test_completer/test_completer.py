import pytest
from prompt_toolkit.document import Document

from slashargs.completer import SchemaCompleter
from slashargs.parser import ArgumentDeclaration, Schema


@pytest.fixture
def completer():
    schema = Schema.from_declarations(
        [
            ArgumentDeclaration("verbose", kind="bool"),
            ArgumentDeclaration("mode", kind="enum", choices=["fast", "slow"]),
            ArgumentDeclaration("name"),
            ArgumentDeclaration("tags", collection=True),
            ArgumentDeclaration("files", collection=True, is_default=True),
        ]
    )
    return SchemaCompleter(schema)


def completions(completer, text):
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_option_name_completion(completer):
    assert completions(completer, "/ver") == ["/verbose"]
    assert completions(completer, "-ver") == ["-verbose"]


def test_option_name_completion_ignores_case(completer):
    assert completions(completer, "/VER") == ["/verbose"]


def test_bool_suffixes(completer):
    assert completions(completer, "/verbose") == ["/verbose+", "/verbose-"]


def test_value_option_gets_colon(completer):
    assert completions(completer, "/name") == ["/name:"]


def test_enum_variants(completer):
    assert completions(completer, "/mode:f") == ["/mode:fast"]
    assert completions(completer, "/mode:") == ["/mode:fast", "/mode:slow"]
    assert completions(completer, "/name:f") == []


def test_used_scalar_options_are_skipped(completer):
    assert completions(completer, "/mode:fast /mo") == []
    assert completions(completer, "/tags:a /ta") == ["/tags"]


def test_empty_stub_lists_names(completer):
    results = completions(completer, "files ")
    assert "/verbose" in results
    assert "/m" in results
    assert "/files" not in results


def test_response_file_and_positional(completer):
    assert completions(completer, "@res") == []
    assert completions(completer, "foo") == []


def test_enum_default_argument():
    schema = Schema.from_declarations(
        [ArgumentDeclaration("color", kind="enum", choices=["red", "green"], is_default=True)]
    )
    completer = SchemaCompleter(schema)
    assert completions(completer, "re") == ["red"]
    assert completions(completer, "") == ["red", "green"]


def test_lcp_completions(completer):
    results = list(completer._yield_lcp_completions(["/alpha", "/alpine"], "/a"))
    assert [c.text for c in results] == ["/alp", "/alpha", "/alpine"]


def test_lcp_completions_space(completer):
    suggestions = ["London", "New York", "San Francisco"]
    results = list(completer._yield_lcp_completions(suggestions, "N"))
    assert [c.text for c in results] == ['"New York"']
