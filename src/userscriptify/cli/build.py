"""CLI command: userscriptify build -- turn a script into a userscript."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from userscriptify.cli.common import BUILD_ERRORS, fail, project_options, read_project
from userscriptify.pipeline import transform


@click.command()
@click.argument("script", required=False, type=click.Path(dir_okay=False))
@project_options
@click.option("--meta", default=None, help="Metadata JSON file")
@click.option("--style", default=None, help="CSS, SASS or SCSS file to inject")
@click.option("--replace", default=None, help="Placeholder token for the CSS")
@click.option("--indent", type=int, default=None, help="Spaces before each CSS line")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write here instead of overwriting SCRIPT",
)
def build(
    script: str | None,
    project_path: str,
    no_project: bool,
    meta: str | None,
    style: str | None,
    replace: str | None,
    indent: int | None,
    output: str | None,
) -> None:
    """Add the metadata block and CSS to SCRIPT.

    SCRIPT defaults to the "main" entry of the project descriptor. Options
    given here override the descriptor's userscriptify options.
    """
    descriptor = read_project(project_path, no_project)

    if script is None:
        script = descriptor.main if descriptor else None
        if not script:
            click.echo(
                "Error: no SCRIPT given and the project descriptor has no 'main' entry",
                err=True,
            )
            sys.exit(1)

    options = {"meta": meta, "style": style, "replace": replace, "indent": indent}
    target = Path(output or script)
    try:
        content = Path(script).read_text(encoding="utf-8")
        result = transform(
            content,
            {k: v for k, v in options.items() if v is not None},
            project=descriptor,
        )
        target.write_text(result, encoding="utf-8")
    except BUILD_ERRORS as exc:
        fail(exc)

    click.echo(f"Built {target}")
