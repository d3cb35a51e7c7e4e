"""Demo command table for the interactive shell."""

from __future__ import annotations

from dataclasses import dataclass

from cmdtable.config import Settings
from cmdtable.dispatcher import Dispatcher
from cmdtable.hooks import ConsoleHooks, OutputHooks
from cmdtable.table import Command, CommandTable


@dataclass(slots=True)
class Register:
    """A named float the ``A``/``B`` commands view and set."""

    name: str
    value: float = 0.0


class DemoShell:
    """Holds the demo table, its dispatcher and the state the handlers touch."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self.dispatcher = dispatcher
        self.running = True
        self.registers = {"A": Register("A"), "B": Register("B")}
        self.listed = [0.0, 0.0]

        table: CommandTable[object] = CommandTable()
        table.register(1, "help", "Get help", self.cmd_help)
        table.register(2, "list", "Dummy list", self.cmd_list)
        table.register(3, "exit", "Quit the program", self.cmd_exit)
        table.register(4, "A", "View/set valueA", self.cmd_value, self.registers["A"])
        table.register(5, "B", "View/set valueB", self.cmd_value, self.registers["B"])
        table.register(6, "testhelp", "Test direct help function", self.cmd_table_help, table)
        self.table = table

    def emit(self, message: str) -> None:
        self.dispatcher.hooks.emit(message)

    def run_line(self, line: str) -> Command[object] | None:
        return self.dispatcher.dispatch(self.table, line)

    def cmd_help(self, command_id: int, arg: object, rest: str) -> None:
        topic, found = self.dispatcher.cursor.token()
        if found:
            self.emit(f"No help for {topic}")
        self.dispatcher.help(self.table)

    def cmd_list(self, command_id: int, arg: object, rest: str) -> None:
        # list, list 1.2, list 1.2 77.5
        cursor = self.dispatcher.cursor
        for slot in range(len(self.listed)):
            value, found = cursor.float_value()
            if not found:
                break
            self.listed[slot] = value
        self.emit(" ".join(f"{value:f}" for value in self.listed))

    def cmd_exit(self, command_id: int, arg: object, rest: str) -> None:
        self.running = False

    def cmd_value(self, command_id: int, register: Register, rest: str) -> None:
        value, found = self.dispatcher.cursor.float_value()
        if found:
            register.value = value
        self.emit(f"{register.value:f}")

    def cmd_table_help(self, command_id: int, table: CommandTable[object], rest: str) -> None:
        self.dispatcher.help(table)


def build_shell(settings: Settings, hooks: OutputHooks | None = None) -> DemoShell:
    if hooks is None:
        hooks = ConsoleHooks(prefix=settings.output_prefix)
    return DemoShell(Dispatcher(hooks=hooks, separators=settings.separators))
