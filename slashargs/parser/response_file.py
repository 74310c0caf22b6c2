# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexer for response files, the text files included on a command line with an
`@path` token.

Tokens are separated by whitespace. A `#` at the start of a token begins a
comment that runs to the end of the line. Double quotes group text containing
whitespace and are removed from the token.

The option prefix characters double as escape characters in front of a quote.
A run of k identical `/` or `-` characters directly followed by `"` produces
k // 2 copies of that character. If k is odd the quote is kept as a literal
character, otherwise it toggles quoting:

    --"x   → quoting toggled, token continues with -x
    -"x    → "x
    ---"x  → -"x
    /a:"b c"  → /a:b c
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from slashargs.logger import logger

ESCAPE_CHARS = "/-"
QUOTE = '"'
COMMENT = "#"


@dataclass
class LexResult:
    """Tokens lexed from one response file."""

    tokens: list[str] = field(default_factory=list)
    unbalanced: bool = False


def lex_response_file(text: str) -> LexResult:
    """
    Split the content of a response file into argument tokens.

    Args:
        text (str): Full text content of the file.

    Returns:
        LexResult: The tokens in order. `unbalanced` is set when the text ends
        inside a quoted section, in which case the unfinished token is dropped.
    """
    result = LexResult()
    current: list[str] = []
    quoted = False
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        if char.isspace():
            index += 1
            continue
        if char == COMMENT:
            newline = text.find("\n", index)
            index = length if newline == -1 else newline
            continue

        while index < length:
            char = text[index]
            if char in ESCAPE_CHARS:
                run_end = index
                while run_end < length and text[run_end] == char:
                    run_end += 1
                count = run_end - index
                index = run_end
                if index < length and text[index] == QUOTE:
                    current.append(char * (count // 2))
                    if count % 2:
                        current.append(QUOTE)
                    else:
                        quoted = not quoted
                    index += 1
                else:
                    current.append(char * count)
            elif char == QUOTE:
                quoted = not quoted
                index += 1
            elif char.isspace() and not quoted:
                index += 1
                break
            else:
                current.append(char)
                index += 1
        else:
            break

        result.tokens.append("".join(current))
        current = []

    if quoted:
        result.unbalanced = True
    elif current:
        token = "".join(current)
        if token:
            result.tokens.append(token)
    return result


def read_response_file(path: str | Path) -> str:
    """
    Read the text of a response file.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    text = Path(path).read_text(encoding="utf-8-sig")
    logger.debug("Read response file '%s' (%d characters)", path, len(text))
    return text
