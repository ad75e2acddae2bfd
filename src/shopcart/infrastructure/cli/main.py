from __future__ import annotations

import click

from shopcart.infrastructure.bootstrap import configure
from shopcart.infrastructure.cli.cart_commands import cart_quote, cart_session
from shopcart.infrastructure.logging_config import LEVELS


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SHOPCART_LOG_LEVEL",
    help="Logging level.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    envvar="SHOPCART_LOG_FILE",
    help="Also write log lines to this file.",
)
def cli(log_level: str, log_file: str | None) -> None:
    """shopcart — in-memory shopping cart"""
    configure(log_level=log_level, log_file=log_file)


# Register subcommands
cli.add_command(cart_quote)
cli.add_command(cart_session)


if __name__ == "__main__":
    cli()
