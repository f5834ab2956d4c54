"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=SelectorKitConfig.log_level,
    show_default=True,
    help="Logging level for library messages",
)
def cli(log_level: str) -> None:
    """selectorkit - build CSS selectors and encode simple values as JSON."""
    logging.basicConfig(level=log_level.upper())


# Import and register subcommands
from selectorkit.cli.render import render  # noqa: E402
from selectorkit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(render)
cli.add_command(rectangle)
