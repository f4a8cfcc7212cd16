"""Content-pane line derivation.

Raw text from the gateway becomes display lines here: control characters are
neutralized, text is optionally colorized with Pygments, and file contents are
wrapped to the pane width. Diff text is never wrapped.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import PurePosixPath

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import DiffLexer, TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .ansi import wrap_ansi_line

DEFAULT_STYLE = "monokai"
TAB_SIZE = 4
HIGHLIGHT_MAX_CHARS = 400_000

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def sanitize_terminal_text(text: str) -> str:
    """Replace control bytes (escape included) so file text cannot drive the terminal."""
    return _CONTROL_RE.sub("?", text.replace("\r\n", "\n"))


def split_content_lines(text: str) -> list[str]:
    """Split fetched text into lines; blank or whitespace-only text has none."""
    if not text.strip():
        return []
    return text.split("\n")


def wrap_lines(lines: list[str], width: int) -> list[str]:
    if width < 1 or not lines:
        return list(lines)
    wrapped: list[str] = []
    for line in lines:
        wrapped.extend(wrap_ansi_line(line, width))
    return wrapped


@lru_cache(maxsize=32)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = DEFAULT_STYLE
    return Terminal256Formatter(style=style)


def _lexer_for_path(path: str, text: str) -> Lexer:
    options = {"stripnl": False, "ensurenl": False}
    try:
        return get_lexer_for_filename(PurePosixPath(path).name, text, **options)
    except ClassNotFound:
        return TextLexer(**options)


def _highlight_lines(lines: list[str], lexer: Lexer, style: str) -> list[str]:
    """Colorize ``lines``; falls back to the plain lines if line count drifts."""
    if not lines or sum(len(line) for line in lines) > HIGHLIGHT_MAX_CHARS:
        return lines
    rendered = highlight("\n".join(lines), lexer, _formatter_for_style(style))
    rendered_lines = rendered.split("\n")
    if rendered_lines and rendered_lines[-1] == "" and len(rendered_lines) == len(lines) + 1:
        rendered_lines.pop()
    if len(rendered_lines) != len(lines):
        return lines
    return rendered_lines


@lru_cache(maxsize=8)
def _derive_cached(
    raw_text: str,
    is_diff: bool,
    width: int,
    path: str,
    style: str,
    colorize: bool,
) -> tuple[str, ...]:
    lines = split_content_lines(sanitize_terminal_text(raw_text).expandtabs(TAB_SIZE))
    if colorize and lines:
        lexer = DiffLexer(stripnl=False, ensurenl=False) if is_diff else _lexer_for_path(path, raw_text)
        lines = _highlight_lines(lines, lexer, style)
    if not is_diff:
        lines = wrap_lines(lines, width)
    return tuple(lines)


def derive_content_lines(
    raw_text: str,
    *,
    is_diff: bool,
    width: int,
    path: str = "",
    style: str = DEFAULT_STYLE,
    colorize: bool = False,
) -> list[str]:
    """Display lines for ``raw_text``; wrapped to ``width`` unless ``is_diff``."""
    return list(_derive_cached(raw_text, is_diff, width, path, style, colorize))


__all__ = [
    "DEFAULT_STYLE",
    "derive_content_lines",
    "sanitize_terminal_text",
    "split_content_lines",
    "wrap_lines",
]
