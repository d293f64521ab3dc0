"""selectorkit CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig

_DEFAULTS = SelectorkitConfig()


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=_DEFAULTS.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--indent",
    type=int,
    default=_DEFAULTS.json_indent,
    help="Default indent for JSON output",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None) -> None:
    """selectorkit - build CSS selectors from their parts."""
    config = SelectorkitConfig(log_level=log_level.upper(), json_indent=indent)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("selectorkit").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.shapes import area, rectangle_json  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(rectangle_json)
