"""
Main entry point for the hotel reservation manager.
"""
from __future__ import annotations

import logging
from typing import Optional

import click

from hotelres import __version__
from hotelres.adapters import create_adapter
from hotelres.channels import run_shell
from hotelres.config import DEFAULT_LOG_LEVEL, LOG_LEVELS, get_config
from hotelres.dispatcher import CommandDispatcher
from hotelres.exceptions import HotelResError
from hotelres.store import HotelStore

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option("--db", "db_url", default=None, help="Snapshot location: json:///path, sqlite:///path or a file path.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Overrides HOTELRES_LOG_LEVEL.",
)
def main(db_url: Optional[str], log_level: Optional[str]) -> None:
    """Hotel reservation manager - interactive menu."""
    config = get_config()
    level = (log_level or config.get_log_level()).upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
        level = DEFAULT_LOG_LEVEL
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=level)
    logging.getLogger("hotelres").setLevel(level)

    try:
        adapter = create_adapter(db_url) if db_url else config.create_adapter()
        payment = config.create_payment_decider()
    except HotelResError as e:
        raise click.ClickException(str(e)) from e

    store = HotelStore(adapter, payment=payment)
    hotel = store.load_or_create()
    run_shell(CommandDispatcher(hotel, store))
    click.echo("Goodbye!")


if __name__ == "__main__":
    main()
