"""Interactive prompt with option completion for the headshots schema."""
from prompt_toolkit import PromptSession
from prompt_toolkit.shortcuts import CompleteStyle

from slashargs.completer import SchemaCompleter
from slashargs.config import load_schema
from slashargs.parser import CommandLineParser, render_usage

schema = load_schema("headshots.yaml")
session = PromptSession(
    completer=SchemaCompleter(schema),
    complete_style=CompleteStyle.MULTI_COLUMN,
)

if __name__ == "__main__":
    while True:
        try:
            line = session.prompt("headshots> ")
        except (EOFError, KeyboardInterrupt):
            break
        result = CommandLineParser(schema).parse(line.split())
        if result:
            print(result.values)
        else:
            render_usage(schema)
