import click

from pos.infrastructure.cli.catalog_commands import catalog_list
from pos.infrastructure.cli.checkout_commands import checkout, demo
from pos.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="POS_LOG_LEVEL",
    help="Diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """POS: point-of-sale checkout"""
    configure_logging(log_level.upper())


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(demo)
