"""CLI for cronexpand - show the values each field of a cron expression matches."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cronexpand import __version__
from cronexpand.cron_parse import COMMAND_LABEL, ParsedExpression, format_expression, parse_expression
from cronexpand.exceptions import CronParseError, FieldExpansionError, UsageError
from cronexpand.logging_config import setup_logging

EXAMPLE = '*/15 0 1,15 * 1-5 /usr/bin/find'

app = typer.Typer(name="cronexpand", help="Expand a cron expression into the values it matches.", add_completion=False)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cronexpand {__version__}")
        raise typer.Exit()


def _render_table(parsed: ParsedExpression) -> None:
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Values")

    for field, values in parsed.fields:
        table.add_row(field.name, " ".join(str(v) for v in values) or "[dim]-[/dim]")
    table.add_row(COMMAND_LABEL, escape(parsed.command))

    console.print(table)


def _report(e: CronParseError) -> None:
    if isinstance(e, UsageError):
        err_console.print('Usage: cronexpand "<cron expression>"', highlight=False, soft_wrap=True)
        err_console.print(f'Example: cronexpand "{EXAMPLE}"', highlight=False, soft_wrap=True)
    elif isinstance(e, FieldExpansionError):
        err_console.print(f"[red]Error parsing cron expression:[/red] {escape(e.message)}", soft_wrap=True)
    else:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}", soft_wrap=True)


@app.command(context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True})
def main(
    expression: Annotated[Optional[list[str]], typer.Argument(help="Cron expression: 5 time fields and a command")] = None,
    table: Annotated[bool, typer.Option("--table", help="Render the result as a table")] = False,
    log_level: Annotated[str, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")] = "WARNING",
    verbose: Annotated[bool, typer.Option("--verbose", help="Shortcut for --log-level DEBUG")] = False,
    version: Annotated[Optional[bool], typer.Option("--version", "-v", callback=_version_callback, is_eager=True)] = None,
) -> None:
    """Expand a cron expression such as "*/15 0 1,15 * 1-5 /usr/bin/find"."""
    logger = setup_logging("DEBUG" if verbose else log_level, console=err_console)

    raw = " ".join(expression or []).strip()
    logger.debug("Raw expression: %r", raw)

    try:
        parsed = parse_expression(raw)
    except CronParseError as e:
        logger.debug("Parse failed with %s", type(e).__name__)
        _report(e)
        raise typer.Exit(e.exit_code)

    if table:
        _render_table(parsed)
    else:
        typer.echo(format_expression(parsed))


if __name__ == "__main__":
    app()
