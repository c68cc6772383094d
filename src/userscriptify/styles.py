"""CSS injection: splice style text into the script at the placeholder token."""

from __future__ import annotations

import logging

from userscriptify import sources
from userscriptify.config import UserscriptConfig, is_present

__all__ = ["has_style", "indent_css", "inject_css", "load_style"]

logger = logging.getLogger(__name__)


def has_style(config: UserscriptConfig) -> bool:
    return is_present(config.style) or is_present(config.style_raw)


def indent_css(text: str, indent: int) -> str:
    """Indent every non-empty line of *text*, each starting on a new line.

    The source indentation is kept as is; *indent* spaces are prepended.
    """
    spacing = " " * indent
    return "".join("\n" + spacing + line for line in text.split("\n") if line)


def load_style(config: UserscriptConfig) -> str | None:
    """Return the configured style text, or None if no style is configured.

    ``style_raw`` is used verbatim when set. Otherwise ``style`` is compiled
    when it is a SASS/SCSS file and read as plain CSS when it is not.
    """
    if is_present(config.style_raw):
        return config.style_raw
    if not is_present(config.style):
        return None
    if sources.is_sass(config.style):
        return sources.compile_sass(config.style)
    return sources.read_text(config.style)


def _placeholder_missing(body: str, config: UserscriptConfig) -> bool:
    if config.replace in body:
        return False
    logger.warning(
        "Style information is provided, but '%s' was not found", config.replace
    )
    return True


def inject_css(
    body: str, config: UserscriptConfig, style_text: str | None = None
) -> str:
    """Replace the first placeholder in *body* with the configured style.

    *style_text* may be passed when the style was already loaded; otherwise
    it is loaded from *config*. The body is returned unchanged when no style
    is configured or the placeholder does not occur.
    """
    if not has_style(config) or _placeholder_missing(body, config):
        return body
    if style_text is None:
        style_text = load_style(config) or ""
    return body.replace(config.replace, indent_css(style_text, config.indent), 1)
