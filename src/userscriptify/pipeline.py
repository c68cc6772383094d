"""Public entry points: turn a script body into a finished userscript.

Both variants run the same stages in the same order:

1. Resolve the config from defaults, the project descriptor and *options*.
2. Inject CSS into the original body.
3. Prefix the metadata block.

``transform_async`` only differs in running the file and compiler
collaborators through ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Mapping

from userscriptify import sources
from userscriptify.config import (
    DEFAULT_CONFIG,
    ProjectDescriptor,
    UserscriptConfig,
    load_project,
    resolve,
)
from userscriptify.metadata import render_metadata
from userscriptify.styles import has_style, inject_css, load_style

__all__ = ["DEFAULT_PROJECT", "transform", "transform_async"]

DEFAULT_PROJECT = "package.json"

ProjectArg = str | Path | ProjectDescriptor | None


def _configure(
    descriptor: ProjectDescriptor | None, options: Mapping[str, Any] | None
) -> UserscriptConfig:
    if descriptor is None:
        return resolve(DEFAULT_CONFIG, None, options)
    return resolve(DEFAULT_CONFIG, descriptor.options, options, version=descriptor.version)


def _needs_style(body: str, config: UserscriptConfig) -> bool:
    return has_style(config) and config.replace in body


def transform(
    content: str,
    options: Mapping[str, Any] | None = None,
    *,
    project: ProjectArg = DEFAULT_PROJECT,
) -> str:
    """Build a userscript from *content*.

    Args:
        content: The script body.
        options: Per-call options; override the project descriptor's.
        project: Path to the project descriptor, an already loaded
            ``ProjectDescriptor``, or ``None`` to use only defaults and
            *options*.
    """
    if isinstance(project, (str, Path)):
        project = load_project(project)
    config = _configure(project, options)

    content = inject_css(content, config)

    record = config.meta
    if isinstance(record, str):
        record = sources.read_json(record)
    return render_metadata(content, record, config.version)


async def transform_async(
    content: str,
    options: Mapping[str, Any] | None = None,
    *,
    project: ProjectArg = DEFAULT_PROJECT,
) -> str:
    """Awaitable variant of ``transform`` with identical output."""
    if isinstance(project, (str, Path)):
        project = await asyncio.to_thread(load_project, project)
    config = _configure(project, options)

    style_text = None
    if _needs_style(content, config):
        style_text = await asyncio.to_thread(load_style, config)
    content = inject_css(content, config, style_text)

    record = config.meta
    if isinstance(record, str):
        record = await asyncio.to_thread(sources.read_json, record)
    return render_metadata(content, record, config.version)
