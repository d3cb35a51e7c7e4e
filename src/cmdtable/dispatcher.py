"""Table-driven command dispatch."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from cmdtable.config import get_settings, validate_settings
from cmdtable.cursor import DEFAULT_SEPARATORS, Cursor
from cmdtable.errors import ArgumentError
from cmdtable.hooks import ConsoleHooks, OutputHooks
from cmdtable.table import Command, CommandTable, as_table

logger = logging.getLogger(__name__)

TableLike = CommandTable[Any] | Iterable[Command[Any]]


class Dispatcher:
    """Routes one line at a time to the first matching command in a table.

    The dispatcher owns a single cursor. It is reset at the start of every
    dispatch and stays valid while the handler runs, so handlers read their
    arguments from ``dispatcher.cursor``. A handler may dispatch again, but
    that discards whatever arguments it had not consumed yet.
    """

    def __init__(
        self,
        hooks: OutputHooks | None = None,
        separators: str = DEFAULT_SEPARATORS,
    ) -> None:
        self.hooks: OutputHooks = hooks if hooks is not None else ConsoleHooks()
        self.cursor = Cursor(separators=separators)

    def dispatch(self, table: TableLike, line: str) -> Command[Any] | None:
        """Run the handler whose name matches the first token of ``line``.

        Returns the matched command, or None when the line was empty or the
        command was unknown (both are reported through the hooks).
        """
        commands = as_table(table)
        cursor = self.cursor
        cursor.reset(line)

        name, found = cursor.token()
        if not found:
            logger.debug("empty command line: %r", line)
            self.hooks.emit(f"Unknown error: {line}")
            return None

        command = commands.find(name)
        if command is None:
            logger.debug("unknown command: %r", name)
            self.hooks.report_unknown(line, name)
            return None

        cursor.skip_separators()
        rest = cursor.remainder()
        logger.debug("dispatch %r -> id=%d rest=%r", name, command.command_id, rest)
        try:
            command.handler(command.command_id, command.arg, rest)
        except ArgumentError as exc:
            logger.debug("command %r rejected %s token %r", name, exc.kind, exc.token)
            self.hooks.emit(f"{name}: {exc}")
        return command

    def help(self, table: TableLike) -> None:
        """Emit one ``name  documentation`` line per command, in table order."""
        commands = as_table(table)
        width = max((len(command.name) for command in commands), default=0)
        for command in commands:
            self.hooks.emit(f"{command.name:<{width}} {command.doc}".rstrip())


@lru_cache(maxsize=1)
def get_dispatcher() -> Dispatcher:
    """Process-wide dispatcher configured from settings.

    Raises ``ConfigError`` when the settings are invalid.
    """
    settings = get_settings()
    validate_settings(settings)
    return Dispatcher(
        hooks=ConsoleHooks(prefix=settings.output_prefix),
        separators=settings.separators,
    )


def dispatch(table: TableLike, line: str) -> Command[Any] | None:
    return get_dispatcher().dispatch(table, line)


def help(table: TableLike) -> None:  # noqa: A001
    get_dispatcher().help(table)


def current_cursor() -> Cursor:
    """The cursor shared by ``dispatch`` and the handlers it runs."""
    return get_dispatcher().cursor
