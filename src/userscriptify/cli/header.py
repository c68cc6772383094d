"""CLI command: userscriptify header -- print only the metadata block."""

from __future__ import annotations

import click

from userscriptify import sources
from userscriptify.cli.common import BUILD_ERRORS, fail, project_options, read_project
from userscriptify.config import DEFAULT_CONFIG, resolve
from userscriptify.metadata import render_metadata


@click.command()
@project_options
@click.option("--meta", default=None, help="Metadata JSON file")
def header(project_path: str, no_project: bool, meta: str | None) -> None:
    """Print the metadata block that build would prepend."""
    descriptor = read_project(project_path, no_project)
    if descriptor is None:
        config = resolve(DEFAULT_CONFIG, None, {"meta": meta})
    else:
        config = resolve(
            DEFAULT_CONFIG, descriptor.options, {"meta": meta}, version=descriptor.version
        )

    try:
        record = config.meta
        if isinstance(record, str):
            record = sources.read_json(record)
        click.echo(render_metadata("", record, config.version), nl=False)
    except BUILD_ERRORS as exc:
        fail(exc)
