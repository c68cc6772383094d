"""Configuration: built-in defaults, project descriptor options, call options.

Three layers are merged field by field with ``resolve``. A higher layer only
overrides a lower one when its value is *present* (see ``is_present``): an
explicit ``""``, ``0``, ``False`` or ``None`` leaves the lower value in place.
"""

from __future__ import annotations

import json
import math
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Union

MetadataRecord = Mapping[str, Any]
MetadataSource = Union[str, MetadataRecord]

# Key used for userscriptify options inside package.json.
PACKAGE_OPTIONS_KEY = "userscriptify"

# Descriptor/option spellings mapped to UserscriptConfig field names.
_OPTION_ALIASES: dict[str, str] = {
    "meta": "meta",
    "replace": "replace",
    "indent": "indent",
    "style": "style",
    "styleRaw": "style_raw",
    "style_raw": "style_raw",
}


@dataclass(frozen=True)
class UserscriptConfig:
    """Effective settings for one build.

    Attributes:
        meta: Path to a metadata JSON file, or the metadata record itself.
        replace: Placeholder token replaced by the injected CSS.
        indent: Number of spaces prefixed to every injected CSS line.
        style: Path to a CSS, SASS or SCSS file.
        style_raw: Literal CSS text; takes precedence over ``style``.
        version: Version used when the metadata does not declare one.
    """

    meta: MetadataSource = "meta.json"
    replace: str = "__<INSERTCSS>__"
    indent: int = 2
    style: str | None = None
    style_raw: str | None = None
    version: str = "1.0.0"


DEFAULT_CONFIG = UserscriptConfig()

# Fields that may be set through options (version comes from the project).
OPTION_FIELDS: tuple[str, ...] = tuple(
    f.name for f in fields(UserscriptConfig) if f.name != "version"
)


def is_present(value: Any) -> bool:
    """Return True if *value* counts as set when merging option layers.

    ``None``, ``False``, the empty string, numeric zero and NaN are absent.
    Everything else is present, including empty lists and mappings.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    return True


def normalize_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Map option keys onto config field names, dropping unknown keys."""
    if not options:
        return {}
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        name = _OPTION_ALIASES.get(key)
        if name is None:
            continue
        # Both spellings given: keep whichever is present.
        if name in normalized and not is_present(value):
            continue
        normalized[name] = value
    return normalized


def resolve(
    defaults: UserscriptConfig,
    project_options: Mapping[str, Any] | None = None,
    call_options: Mapping[str, Any] | None = None,
    *,
    version: str | None = None,
) -> UserscriptConfig:
    """Merge the three option layers into a new config.

    Precedence per field is call option > project option > default.
    """
    project = normalize_options(project_options)
    call = normalize_options(call_options)

    updates: dict[str, Any] = {}
    for name in OPTION_FIELDS:
        value = getattr(defaults, name)
        if is_present(project.get(name)):
            value = project[name]
        if is_present(call.get(name)):
            value = call[name]
        updates[name] = value
    updates["version"] = version if version is not None else defaults.version
    return replace(defaults, **updates)


# ---------------------------------------------------------------------------
# Project descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectDescriptor:
    """The parts of a project file the build cares about."""

    version: str | None = None
    options: dict[str, Any] = field(default_factory=dict)
    main: str | None = None


def load_project(path: str | Path) -> ProjectDescriptor:
    """Read a ``package.json`` or ``pyproject.toml`` project descriptor.

    For JSON, options live under the ``"userscriptify"`` key. For TOML, the
    version is ``[project].version`` and options live in
    ``[tool.userscriptify]``. Read and parse errors propagate.
    """
    path = Path(path)
    if path.suffix.lower() == ".toml":
        with path.open("rb") as fh:
            data = tomllib.load(fh)
        options = dict(data.get("tool", {}).get(PACKAGE_OPTIONS_KEY, {}))
        return ProjectDescriptor(
            version=data.get("project", {}).get("version"),
            options=options,
            main=options.get("main"),
        )

    data = json.loads(path.read_text(encoding="utf-8"))
    options = data.get(PACKAGE_OPTIONS_KEY) or {}
    return ProjectDescriptor(
        version=data.get("version"),
        options=dict(options),
        main=data.get("main"),
    )
