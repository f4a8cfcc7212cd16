"""Scroll-window arithmetic shared by the file list and content panes.

All helpers are pure and idempotent: identical inputs always give identical
offsets, so callers can re-run them after every state change.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def clamp_offset(offset: int, total: int, visible: int) -> int:
    """Bound ``offset`` to ``[0, total - visible]``; 0 when everything fits."""
    if total <= visible:
        return 0
    max_offset = total - visible
    return max(0, min(offset, max_offset))


def ensure_visible(selected: int, offset: int, visible: int, total: int) -> int:
    """Return the smallest offset change that keeps ``selected`` on screen."""
    if visible <= 0:
        return 0
    if selected < offset:
        offset = selected
    elif selected >= offset + visible:
        offset = selected - visible + 1
    return clamp_offset(offset, total, visible)


def scroll_by(offset: int, delta: int, total: int, visible: int) -> int:
    """Move ``offset`` by ``delta`` rows and clamp the result."""
    if visible <= 0:
        return 0
    return clamp_offset(offset + delta, total, visible)


def slice_window(items: Sequence[T], offset: int, visible: int) -> list[T]:
    """Return the ``visible`` items starting at ``offset``.

    ``offset`` is pulled back into ``[0, len(items) - 1]`` so a stale offset
    still shows the tail of a shrunken list instead of nothing.
    """
    if visible <= 0 or not items:
        return []
    start = max(0, min(offset, len(items) - 1))
    end = min(start + visible, len(items))
    return list(items[start:end])


__all__ = ["clamp_offset", "ensure_visible", "scroll_by", "slice_window"]
