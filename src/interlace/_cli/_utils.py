import functools
import json
from io import StringIO
from typing import Any, Callable, Dict, List

import click
from rich.console import Console
from rich.table import Table

from ..models.errors import InterlaceError


def echo_json(value: Any) -> None:
    click.echo(json.dumps(value, indent=2))


def format_table(rows: List[Dict[str, Any]], no_color: bool = False) -> str:
    """Render a list of flat dicts as a table, one column per key of the first row."""
    if not rows:
        return "No results"

    columns = list(rows[0].keys())
    table = Table(show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*[_cell(row.get(col)) for col in columns])

    buffer = StringIO()
    Console(file=buffer, force_terminal=not no_color).print(table)
    return buffer.getvalue()


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def handle_cli_errors(function: Callable) -> Callable:
    """Print SDK errors and abort with a non-zero exit code."""

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except (InterlaceError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            raise click.Abort() from e

    return wrapper
