from rich.console import Console

from slashargs.parser import ArgumentDeclaration, Schema, format_usage, render_usage
from slashargs.parser.usage import indent_length


def pad(syntax):
    return syntax.ljust(40)


def test_indent_length():
    assert indent_length(0) == 40
    assert indent_length(30) == 10
    assert indent_length(36) == 4
    assert indent_length(50) == 4


def test_usage_layout():
    schema = Schema.from_declarations(
        [
            ArgumentDeclaration("lines", kind="bool", help="Count lines"),
            ArgumentDeclaration("mode", kind="enum", choices=["fast", "slow"]),
            ArgumentDeclaration("files", collection=True, is_default=True, help="Files to read"),
        ],
        description="Count lines in files",
    )
    assert format_usage(schema) == "\n".join(
        [
            "Count lines in files",
            pad("    /lines[+|-]") + "short form /l - Count lines",
            pad("    /mode:{fast|slow}") + "short form /m",
            pad("    @<file>") + "Read response file for more options",
            pad("    <files>") + "Files to read",
            "",
        ]
    )


def test_value_syntax_per_kind():
    schema = Schema.from_declarations(
        [
            ArgumentDeclaration("count", kind="int", short_name="count"),
            ArgumentDeclaration("size", kind="uint", short_name="size"),
            ArgumentDeclaration("port", kind="short", short_name="port"),
            ArgumentDeclaration("name", short_name="name"),
        ]
    )
    lines = format_usage(schema).splitlines()
    assert lines[:4] == [
        "    /count:<int>",
        "    /size:<uint>",
        "    /port:<short>",
        "    /name:<string>",
    ]


def test_dropped_short_name_is_not_shown():
    schema = Schema.from_declarations(
        [ArgumentDeclaration("verbose", kind="bool"), ArgumentDeclaration("version")]
    )
    lines = format_usage(schema).splitlines()
    assert lines[0] == pad("    /verbose[+|-]") + "short form /v"
    assert lines[1] == "    /version:<string>"


def test_description_without_short_form():
    schema = Schema.from_declarations(
        [ArgumentDeclaration("x", kind="bool", help="Single letter")]
    )
    assert format_usage(schema).splitlines()[0] == "    /x[+|-] - Single letter"


def test_long_option_keeps_minimum_gap():
    long_name = "a" * 40
    schema = Schema.from_declarations([ArgumentDeclaration(long_name, kind="bool")])
    line = format_usage(schema).splitlines()[0]
    assert line == f"    /{long_name}[+|-]" + " " * 4 + "short form /a"


def test_usage_without_default_or_description():
    schema = Schema.from_declarations([])
    assert format_usage(schema) == pad("    @<file>") + "Read response file for more options\n"


def test_render_usage_prints_same_content():
    schema = Schema.from_declarations(
        [ArgumentDeclaration("lines", kind="bool", help="Count lines")],
        description="Count [lines]",
    )
    console = Console(record=True, width=120, color_system=None)
    render_usage(schema, console)
    assert console.export_text() == format_usage(schema)
