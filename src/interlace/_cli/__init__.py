import click

from .cli_accounts import accounts
from .cli_auth import auth
from .cli_webhook import webhook


@click.group()
@click.version_option(package_name="interlace")
def cli() -> None:
    """Command line access to the Interlace API."""
    pass


cli.add_command(auth)
cli.add_command(accounts)
cli.add_command(webhook)
