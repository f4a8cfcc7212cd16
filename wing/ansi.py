"""Display-width aware helpers for strings that may carry ANSI SGR codes.

Escape sequences never count toward width. Wide East Asian characters take
two columns and combining marks take none.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"
_RESET_SEQUENCES = {"\x1b[0m", "\x1b[m"}


def char_display_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def iter_segments(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, piece)`` where pieces are escapes or single characters."""
    index = 0
    length = len(text)
    while index < length:
        if text[index] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, index)
            if match:
                yield True, match.group(0)
                index = match.end()
                continue
        yield False, text[index]
        index += 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    return sum(char_display_width(piece) for is_escape, piece in iter_segments(text) if not is_escape)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` after ``max_cols`` visible columns, keeping escapes intact."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for is_escape, piece in iter_segments(text):
        if is_escape:
            out.append(piece)
            continue
        width = char_display_width(piece)
        if col + width > max_cols:
            break
        out.append(piece)
        col += width
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip or right-pad ``text`` to exactly ``width`` columns, then reset style."""
    clipped = clip_ansi_line(text, width)
    padding = max(0, width - display_width(clipped))
    suffix = RESET if "\x1b" in clipped else ""
    return f"{clipped}{suffix}{' ' * padding}"


def wrap_ansi_line(text: str, width: int) -> list[str]:
    """Break ``text`` into chunks of at most ``width`` columns.

    The style active at a break is re-emitted at the start of the next chunk so
    continuation rows keep their color.
    """
    if width <= 0 or not text:
        return [text]

    chunks: list[str] = []
    current: list[str] = []
    col = 0
    active_sgr = ""
    for is_escape, piece in iter_segments(text):
        if is_escape:
            current.append(piece)
            if piece.endswith("m"):
                active_sgr = "" if piece in _RESET_SEQUENCES else piece
            continue
        piece_width = char_display_width(piece)
        if col + piece_width > width and col > 0:
            chunks.append("".join(current))
            current = [active_sgr] if active_sgr else []
            col = 0
        current.append(piece)
        col += piece_width
    chunks.append("".join(current))
    return chunks


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "fit_ansi_line",
    "iter_segments",
    "strip_ansi",
    "wrap_ansi_line",
]
