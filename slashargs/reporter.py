# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Error reporters receive one formatted message per problem found while parsing
a command line.

A reporter is any callable accepting a single string. It never influences
control flow: parsing continues after every call.

Reporters:
- ErrorReporter: Protocol every reporter satisfies.
- CollectingReporter: Keeps messages in a list, mainly for tests.
- ConsoleReporter: Prints messages to the Rich error console and logs them.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape

from slashargs.console import error_console
from slashargs.logger import logger


@runtime_checkable
class ErrorReporter(Protocol):
    def __call__(self, message: str) -> None: ...


class CollectingReporter:
    """Reporter that stores every message it receives."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)


class ConsoleReporter:
    """Reporter printing messages to a Rich console."""

    def __init__(self, console: Console | None = None, style: str = "bold red") -> None:
        self.console: Console = console or error_console
        self.style: str = style

    def __call__(self, message: str) -> None:
        logger.info("Command line error: %s", message)
        self.console.print(f"[{self.style}]{escape(message)}[/{self.style}]")
