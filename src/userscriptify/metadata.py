"""Userscript metadata block rendering.

A metadata record such as::

    {"name": "Example", "match": ["https://a.example/*", "https://b.example/*"]}

renders as::

    // ==UserScript==
    // @name       Example
    // @version    1.2.0
    // @namespace  http://tampermonkey.net
    // @match      https://a.example/*
    // @match      https://b.example/*
    // @grant      none
    // ==/UserScript==

``@version``, ``@namespace`` and ``@grant`` are filled in only when the record
does not declare them itself.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from userscriptify.config import is_present
from userscriptify.errors import MissingRequiredFieldError

__all__ = [
    "OPEN_MARKER",
    "CLOSE_MARKER",
    "MetadataBlock",
    "build_block",
    "declares",
    "format_key",
    "parse_metadata",
    "render_metadata",
]

logger = logging.getLogger(__name__)

OPEN_MARKER = "// ==UserScript=="
CLOSE_MARKER = "// ==/UserScript=="
SCHEMA_KEY = "$schema"
DEFAULT_NAMESPACE = "http://tampermonkey.net"
DEFAULT_GRANT = "none"
MIN_KEY_WIDTH = 10
GUTTER = 2

_DIRECTIVE_RE = re.compile(r"^//\s+(?P<key>@\S+)(?:[ \t]+(?P<value>.*?))?\s*$")


def format_key(key: str) -> str:
    """Return *key* with a leading ``@``."""
    return key if key.startswith("@") else "@" + key


def declares(record: Mapping[str, Any], directive: str) -> bool:
    """Return True if *record* has a key for *directive*, in either form."""
    return directive in record or "@" + directive in record


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class MetadataBlock:
    """Accumulates the lines of a metadata block between its markers.

    Synthetic directives are spliced at fixed positions relative to the
    emitted lines: the version goes after the open marker and the first
    directive line, the namespace right after it. Positions past the end are
    clamped to the end.
    """

    VERSION_INDEX = 2
    NAMESPACE_INDEX = 3

    def __init__(self, width: int) -> None:
        self.width = width
        self._lines: list[str] = [OPEN_MARKER]

    def format_line(self, key: str, value: Any) -> str:
        return f"// {format_key(key).ljust(self.width)}{_format_value(value)}"

    def add(self, key: str, value: Any) -> None:
        self._lines.append(self.format_line(key, value))

    def _insert(self, index: int, key: str, value: Any) -> None:
        self._lines.insert(min(index, len(self._lines)), self.format_line(key, value))

    def insert_after_first_directive(self, key: str, value: Any) -> None:
        self._insert(self.VERSION_INDEX, key, value)

    def insert_after_version(self, key: str, value: Any) -> None:
        self._insert(self.NAMESPACE_INDEX, key, value)

    def lines(self) -> list[str]:
        return [*self._lines, CLOSE_MARKER]


def _column_width(record: Mapping[str, Any]) -> int:
    longest = max(
        (len(format_key(key)) for key in record if key != SCHEMA_KEY),
        default=0,
    )
    return max(longest, MIN_KEY_WIDTH) + GUTTER


def build_block(record: Mapping[str, Any], version: str) -> list[str]:
    """Return the metadata block for *record* as a list of lines.

    Raises:
        MissingRequiredFieldError: if *record* declares no ``name``.
    """
    if not declares(record, "name"):
        raise MissingRequiredFieldError("name")

    block = MetadataBlock(_column_width(record))
    for key, value in record.items():
        if key == SCHEMA_KEY or not is_present(value):
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                block.add(key, item)
        else:
            block.add(key, value)

    # An explicit version wins over the project version.
    if not declares(record, "version"):
        block.insert_after_first_directive("@version", version)
    if not declares(record, "namespace"):
        block.insert_after_version("@namespace", DEFAULT_NAMESPACE)
    if not declares(record, "grant"):
        block.add("@grant", DEFAULT_GRANT)
    return block.lines()


def render_metadata(body: str, record: Mapping[str, Any], version: str) -> str:
    """Prefix *body* with the metadata block for *record*."""
    lines = build_block(record, version)
    logger.debug("Rendered metadata block with %d directive lines", len(lines) - 2)
    return "\n".join(lines) + "\n\n" + body


def parse_metadata(text: str) -> list[tuple[str, str]]:
    """Read the directive lines of the first metadata block in *text*.

    Returns ``(key, value)`` pairs in order, keys including their ``@``.
    Returns an empty list when *text* has no complete block.
    """
    directives: list[tuple[str, str]] = []
    inside = False
    for line in text.splitlines():
        stripped = line.strip()
        if not inside:
            inside = stripped == OPEN_MARKER
            continue
        if stripped == CLOSE_MARKER:
            return directives
        match = _DIRECTIVE_RE.match(stripped)
        if match:
            directives.append((match.group("key"), match.group("value") or ""))
    return []
