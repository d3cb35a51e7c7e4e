"""Table-driven command-line dispatch with a shared token cursor."""

from cmdtable.cursor import DEFAULT_SEPARATORS, Cursor, parse_float, parse_int
from cmdtable.dispatcher import Dispatcher, current_cursor, dispatch, get_dispatcher, help
from cmdtable.errors import ArgumentError, CmdTableError, ConfigError, TableError
from cmdtable.hooks import ConsoleHooks, OutputHooks
from cmdtable.table import Command, CommandTable, Handler

__all__ = [
    "ArgumentError",
    "CmdTableError",
    "Command",
    "CommandTable",
    "ConfigError",
    "ConsoleHooks",
    "Cursor",
    "DEFAULT_SEPARATORS",
    "Dispatcher",
    "Handler",
    "OutputHooks",
    "TableError",
    "current_cursor",
    "dispatch",
    "get_dispatcher",
    "help",
    "parse_float",
    "parse_int",
]
