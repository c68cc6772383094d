"""File, JSON and SASS collaborators used by the pipeline.

Every failure here (missing file, bad JSON, SASS syntax error) propagates to
the caller unchanged.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import sass

logger = logging.getLogger(__name__)

_SASS_RE = re.compile(r"\.s[ac]ss$", re.IGNORECASE)


def read_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def read_json(path: str | Path) -> Any:
    """Read and parse a JSON file; object key order is preserved."""
    return json.loads(read_text(str(path).strip()))


def is_sass(path: str | Path) -> bool:
    return bool(_SASS_RE.search(str(path)))


def compile_sass(path: str | Path) -> str:
    """Compile a .sass/.scss file to CSS text."""
    logger.info("Compiling SASS/SCSS: %s", path)
    css = sass.compile(filename=str(path), output_style="expanded")
    logger.info("Compiled %s (%d bytes)", path, len(css))
    return css
