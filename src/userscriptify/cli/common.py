"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys

import click
import sass

from userscriptify.config import ProjectDescriptor, load_project
from userscriptify.errors import UserscriptifyError

# Failures reported as "Error: ..." with exit code 1.  JSON and TOML decode
# errors are ValueErrors.
BUILD_ERRORS = (UserscriptifyError, OSError, ValueError, sass.CompileError)


def fail(exc: Exception) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def project_options(func):
    """Add the --project/--no-project options to a command."""
    func = click.option(
        "--no-project",
        is_flag=True,
        help="Ignore the project descriptor; use only defaults and options",
    )(func)
    func = click.option(
        "--project",
        "project_path",
        default="package.json",
        show_default=True,
        help="Project descriptor (package.json or pyproject.toml)",
    )(func)
    return func


def read_project(project_path: str, no_project: bool) -> ProjectDescriptor | None:
    if no_project:
        return None
    try:
        return load_project(project_path)
    except BUILD_ERRORS as exc:
        fail(exc)
