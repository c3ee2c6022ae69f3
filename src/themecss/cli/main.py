"""themecss CLI entry point: Click group with subcommands."""

import logging

import click

from themecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="themecss")
@click.option("-v", "--verbose", is_flag=True, help="Log selector rewrites and role resolution")
def cli(verbose: bool) -> None:
    """themecss - theme custom properties and :host selector fixes for CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from themecss.cli.fix_host import fix_host  # noqa: E402
from themecss.cli.palette import palette  # noqa: E402
from themecss.cli.prop import prop  # noqa: E402

cli.add_command(fix_host)
cli.add_command(prop)
cli.add_command(palette)
