"""Command descriptors and the table that holds them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from cmdtable.errors import TableError

T = TypeVar("T")

Handler = Callable[[int, T, str], None]


@dataclass(frozen=True, slots=True)
class Command(Generic[T]):
    command_id: int
    name: str
    doc: str
    handler: Handler[T] | None
    arg: T | None = None

    @property
    def is_sentinel(self) -> bool:
        return not self.name


def _check(command: Command[Any]) -> None:
    if isinstance(command.command_id, bool) or not isinstance(command.command_id, int):
        raise TableError(f"command {command.name!r}: id must be an int")
    if command.command_id < 0:
        raise TableError(f"command {command.name!r}: id must be >= 0")
    if not callable(command.handler):
        raise TableError(f"command {command.name!r}: handler is not callable")


class CommandTable(Sequence[Command[T]], Generic[T]):
    """Ordered, explicitly sized table of commands.

    Lookups scan in order and the first exact name match wins, so a later
    entry with a duplicate name is unreachable. When built from an iterable,
    an entry with an empty name ends the table; it and anything after it are
    dropped.
    """

    def __init__(self, commands: Iterable[Command[T]] = ()) -> None:
        self._commands: list[Command[T]] = []
        for command in commands:
            if command.is_sentinel:
                break
            self.add(command)

    def add(self, command: Command[T]) -> None:
        if command.is_sentinel:
            raise TableError("command name must not be empty")
        _check(command)
        self._commands.append(command)

    def register(
        self,
        command_id: int,
        name: str,
        doc: str,
        handler: Handler[T],
        arg: T | None = None,
    ) -> Command[T]:
        command = Command(command_id=command_id, name=name, doc=doc, handler=handler, arg=arg)
        self.add(command)
        return command

    def find(self, name: str) -> Command[T] | None:
        for command in self._commands:
            if command.name == name:
                return command
        return None

    def names(self) -> list[str]:
        return [command.name for command in self._commands]

    @overload
    def __getitem__(self, index: int) -> Command[T]: ...

    @overload
    def __getitem__(self, index: slice) -> list[Command[T]]: ...

    def __getitem__(self, index: int | slice) -> Command[T] | list[Command[T]]:
        return self._commands[index]

    def __iter__(self) -> Iterator[Command[T]]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandTable({self.names()!r})"


def as_table(table: CommandTable[T] | Iterable[Command[T]]) -> CommandTable[T]:
    if isinstance(table, CommandTable):
        return table
    return CommandTable(table)
