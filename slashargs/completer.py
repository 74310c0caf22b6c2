# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `SchemaCompleter`, a Prompt Toolkit completer for command lines parsed
with a slashargs `Schema`.

This completer supports:
- Option name completion for long and short names (e.g. `/ver` → `/verbose`)
- Bool suffixes once a Bool option name is complete (`/verbose+`, `/verbose-`)
- Enum variants after the colon (e.g. `/mode:f` → `/mode:fast`)
- Enum variants for a default argument of enum kind
- Skipping scalar options that were already given and may not repeat
"""
from __future__ import annotations

import os
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from slashargs.parser.command_line_parser import OPTION_PREFIXES, split_option
from slashargs.parser.parser_types import ValueKind
from slashargs.parser.schema import Schema


class SchemaCompleter(Completer):
    """
    Prompt Toolkit completer for slashargs command lines.

    Args:
        schema (Schema): The schema whose names and variants are suggested.
    """

    def __init__(self, schema: Schema):
        self.schema = schema

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Compute completions for the current input.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event, not used here.

        Yields:
            Completion: Completions matching the token under the cursor.
        """
        text = document.text_before_cursor
        tokens = text.split()
        cursor_at_end_of_token = not text or text[-1].isspace()
        stub = "" if cursor_at_end_of_token else tokens[-1]
        previous = tokens if cursor_at_end_of_token else tokens[:-1]
        suggestions = self.suggest(stub, previous)
        yield from self._yield_lcp_completions(suggestions, stub)

    def suggest(self, stub: str, previous: list[str]) -> list[str]:
        """Return the full-token suggestions for a partially typed token."""
        if stub and stub[0] in OPTION_PREFIXES:
            prefix = stub[0]
            if ":" in stub:
                name, _ = split_option(stub)
                arg = self.schema.lookup(name)
                if arg is None or arg.kind is not ValueKind.ENUM:
                    return []
                return [f"{prefix}{name}:{variant}" for variant in arg.get_variant_names()]
            return self._suggest_names(prefix, stub, previous)
        if stub.startswith("@"):
            return []
        default = self.schema.default_argument
        if default is not None and default.kind is ValueKind.ENUM:
            return default.get_variant_names()
        if not stub:
            return self._suggest_names("/", stub, previous)
        return []

    def _suggest_names(self, prefix: str, stub: str, previous: list[str]) -> list[str]:
        used = set()
        for token in previous:
            if token and token[0] in OPTION_PREFIXES:
                arg = self.schema.lookup(split_option(token)[0])
                if arg is not None and not arg.allow_multiple:
                    used.add(id(arg))

        suggestions = []
        for name in self.schema.names:
            arg = self.schema.lookup(name)
            if arg is None or id(arg) in used:
                continue
            option = f"{prefix}{name}"
            if option == stub and arg.kind is ValueKind.BOOL:
                suggestions.extend([f"{option}+", f"{option}-"])
            elif option == stub and arg.kind is not ValueKind.BOOL:
                suggestions.append(f"{option}:")
            else:
                suggestions.append(option)
        return sorted(set(suggestions))

    def _ensure_quote(self, text: str) -> str:
        """Quote suggestions containing whitespace so they stay one token."""
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.
        """
        folded = stub.casefold()
        matches = [s for s in suggestions if s.casefold().startswith(folded)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
