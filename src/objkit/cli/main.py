"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import LOG_LEVELS, ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--strict/--no-strict",
    default=False,
    envvar="OBJKIT_STRICT",
    help="Reject any selector part that follows a later-order part.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="OBJKIT_LOG_LEVEL",
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, strict: bool, log_level: str) -> None:
    """objkit - rectangles, JSON records and CSS selector building."""
    config = ObjkitConfig(strict_selectors=strict, log_level=log_level)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objkit.cli.area import area  # noqa: E402
from objkit.cli.reencode import reencode  # noqa: E402
from objkit.cli.selector import selector_command  # noqa: E402

cli.add_command(area)
cli.add_command(reencode)
cli.add_command(selector_command)
