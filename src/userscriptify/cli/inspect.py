"""CLI command: userscriptify inspect -- list the directives of a built script."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from userscriptify.metadata import parse_metadata


@click.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
def inspect(script: str) -> None:
    """Print the metadata directives found in SCRIPT."""
    directives = parse_metadata(Path(script).read_text(encoding="utf-8"))
    if not directives:
        click.echo(f"No userscript metadata block found in {script}", err=True)
        sys.exit(1)

    width = max(len(key) for key, _ in directives)
    for key, value in directives:
        click.echo(f"{key.ljust(width)}  {value}".rstrip())
    click.echo(f"\n{len(directives)} directive(s)")
