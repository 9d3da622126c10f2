"""Pagetree CLI entry point: Click group with subcommands."""

import click

from pagetree import __version__


@click.group()
@click.version_option(version=__version__, prog_name="pagetree")
def cli() -> None:
    """Pagetree - convert FunnelWind page markup into ClickFunnels pagetree JSON."""


# Import and register subcommands
from pagetree.cli.parse import parse  # noqa: E402
from pagetree.cli.validate import validate  # noqa: E402
from pagetree.cli.inspect import inspect  # noqa: E402

cli.add_command(parse)
cli.add_command(validate)
cli.add_command(inspect)
