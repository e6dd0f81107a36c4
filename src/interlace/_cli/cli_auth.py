from typing import Optional

import click

from .._interlace import Interlace
from ._utils import echo_json, handle_cli_errors


@click.command()
@click.option("--client-id", help="OAuth client id (defaults to INTERLACE_CLIENT_ID)")
@click.option("--base-url", help="API base URL (defaults to the sandbox)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@handle_cli_errors
def auth(client_id: Optional[str], base_url: Optional[str], verbose: bool) -> None:
    """Run the OAuth flow and print the issued tokens."""
    with Interlace(base_url=base_url, client_id=client_id, debug=verbose) as client:
        token_data = client.authenticate(client_id)
    echo_json(token_data.model_dump(by_alias=True))
