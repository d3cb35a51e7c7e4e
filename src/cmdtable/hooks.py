"""Output hooks used by the dispatcher for help text and errors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import click


@runtime_checkable
class OutputHooks(Protocol):
    """Capability set a dispatcher reports through."""

    def emit(self, message: str) -> None:
        """Write one message (help line, error, handler output)."""
        ...

    def report_unknown(self, line: str, token: str) -> None:
        """Called when no table entry matches ``token``."""
        ...


class ConsoleHooks:
    """Default hooks: write to stdout, optionally prefixing every line."""

    def __init__(self, prefix: str = "", err: bool = False) -> None:
        self.prefix = prefix
        self.err = err

    def emit(self, message: str) -> None:
        """Write ``message`` followed by a newline unless it already ends with one.

        Only ``\\n`` starts a new prefixed line. Carriage returns and other
        characters are written as given.
        """
        if not self.prefix:
            click.echo(message, nl=not message.endswith("\n"), err=self.err)
            return
        lines = message.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        for text in lines:
            click.echo(f"{self.prefix}{text}", err=self.err)

    def report_unknown(self, line: str, token: str) -> None:
        self.emit(f"Unknown command: {token}")
