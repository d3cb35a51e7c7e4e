"""Click CLI group: repl, run and commands."""

from __future__ import annotations

import logging

import click

from cmdtable.cli.demo import DemoShell, build_shell
from cmdtable.config import get_settings, validate_settings
from cmdtable.errors import ConfigError
from cmdtable.logging import bind_context, clear_context, configure_logging

logger = logging.getLogger(__name__)


def _shell() -> DemoShell:
    return build_shell(get_settings())


@click.group()
@click.option("--log-level", type=str, default=None, help="Override LOG_LEVEL for this run.")
def cli(log_level: str | None) -> None:
    """Demo command processor built on a static command table."""
    settings = get_settings()
    try:
        validate_settings(settings)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(log_level or settings.log_level)


@cli.command()
def repl() -> None:
    """Read lines from the terminal and dispatch them until `exit` or EOF."""
    settings = get_settings()
    shell = _shell()
    bind_context(session="repl")
    try:
        while shell.running:
            try:
                line = click.prompt(
                    settings.prompt, default="", show_default=False, prompt_suffix=""
                )
            except (click.Abort, EOFError):
                click.echo()
                break
            if len(line) > settings.max_line_length:
                logger.info("line truncated to %d characters", settings.max_line_length)
                line = line[: settings.max_line_length]
            shell.run_line(line)
    finally:
        clear_context()


@cli.command()
@click.argument("lines", nargs=-1, required=True)
def run(lines: tuple[str, ...]) -> None:
    """Dispatch each LINE against the demo table, in order."""
    shell = _shell()
    bind_context(session="run")
    try:
        for line in lines:
            shell.run_line(line)
            if not shell.running:
                break
    finally:
        clear_context()


@cli.command()
def commands() -> None:
    """Print the demo table's help."""
    shell = _shell()
    shell.dispatcher.help(shell.table)


if __name__ == "__main__":
    cli()
