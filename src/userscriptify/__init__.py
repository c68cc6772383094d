"""userscriptify: build userscripts from plain scripts, metadata and styles."""

__version__ = "0.1.0"

from userscriptify.config import (  # noqa: E402
    DEFAULT_CONFIG,
    ProjectDescriptor,
    UserscriptConfig,
    is_present,
    load_project,
    resolve,
)
from userscriptify.errors import MissingRequiredFieldError, UserscriptifyError  # noqa: E402
from userscriptify.metadata import parse_metadata, render_metadata  # noqa: E402
from userscriptify.pipeline import transform, transform_async  # noqa: E402
from userscriptify.styles import inject_css  # noqa: E402

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "MissingRequiredFieldError",
    "ProjectDescriptor",
    "UserscriptConfig",
    "UserscriptifyError",
    "inject_css",
    "is_present",
    "load_project",
    "parse_metadata",
    "render_metadata",
    "resolve",
    "transform",
    "transform_async",
]
