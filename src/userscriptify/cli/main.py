"""userscriptify CLI entry point: Click group with subcommands."""

import logging

import click

from userscriptify import __version__


@click.group()
@click.version_option(version=__version__, prog_name="userscriptify")
@click.option("-v", "--verbose", is_flag=True, help="Show progress messages")
def cli(verbose: bool) -> None:
    """userscriptify - add userscript metadata and CSS to a script."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# Import and register subcommands
from userscriptify.cli.build import build  # noqa: E402
from userscriptify.cli.header import header  # noqa: E402
from userscriptify.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(header)
cli.add_command(inspect)
