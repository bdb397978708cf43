import click

from ims.infrastructure.bootstrap import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
    configure_logging,
    inventory,
)
from ims.infrastructure.cli.menu import InventoryMenu


@click.command()
@click.option(
    "--log-level",
    envvar="IMS_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Minimum level of log lines written to stderr.",
)
@click.option(
    "--first-id",
    envvar="IMS_FIRST_ID",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Id given to the first item added.",
)
def cli(log_level: str, first_id: int) -> None:
    """IMS: in-memory inventory tracker"""
    configure_logging(log_level)
    InventoryMenu(inventory(first_id)).run()
