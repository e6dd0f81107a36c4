import click

from ..webhooks import sign, verify


@click.group()
def webhook() -> None:
    """Sign and verify webhook payloads."""
    pass


@webhook.command(name="sign")
@click.option("--secret", required=True, envvar="INTERLACE_WEBHOOK_SECRET")
@click.argument("payload", type=click.File("rb"))
def sign_payload(secret: str, payload) -> None:
    """Print the signature of PAYLOAD ('-' reads stdin)."""
    click.echo(sign(payload.read(), secret))


@webhook.command(name="verify")
@click.option("--secret", required=True, envvar="INTERLACE_WEBHOOK_SECRET")
@click.option("--signature", required=True)
@click.argument("payload", type=click.File("rb"))
def verify_payload(secret: str, signature: str, payload) -> None:
    """Check SIGNATURE against PAYLOAD. Exits with 1 when it does not match."""
    if not verify(payload.read(), secret, signature):
        click.echo("invalid signature", err=True)
        raise SystemExit(1)
    click.echo("valid signature")
