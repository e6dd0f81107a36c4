from typing import Optional

import click

from .._interlace import Interlace
from ._utils import echo_json, format_table, handle_cli_errors


@click.group()
def accounts() -> None:
    r"""Manage Interlace accounts.

    \b
    Examples:
        interlace accounts list
        interlace accounts list --status ACTIVE --limit 50
        interlace accounts list --format table
    """
    pass


@accounts.command(name="list")
@click.option("--status", help="Filter by account status, e.g. ACTIVE")
@click.option(
    "--limit",
    type=click.IntRange(min=1, max=100),
    default=10,
    help="Page size (default: 10, max: 100)",
)
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"]),
    default="json",
    help="Output format (default: json)",
)
@click.option("--no-color", is_flag=True, help="Disable colored table output")
@click.option("--access-token", help="Access token (defaults to INTERLACE_ACCESS_TOKEN)")
@handle_cli_errors
def list_accounts(
    status: Optional[str],
    limit: int,
    page: int,
    fmt: str,
    no_color: bool,
    access_token: Optional[str],
) -> None:
    """List one page of accounts."""
    with Interlace(access_token=access_token) as client:
        result = client.accounts.list(status=status, limit=limit, page=page)

    if fmt == "table":
        rows = [
            account.model_dump(
                mode="json",
                by_alias=True,
                include={"id", "display_id", "type", "status", "verified_name"},
            )
            for account in result.items
        ]
        click.echo(format_table(rows, no_color=no_color))
        click.echo(f"Total: {result.total}")
    else:
        echo_json(result.model_dump(mode="json", by_alias=True))
