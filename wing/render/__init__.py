"""Frame composition for the two-pane dashboard.

``render_frame`` turns ``ExplorerState`` into one full-screen ANSI string
without touching state; ``write_frame`` sends it to the terminal.
"""

from __future__ import annotations

import os

from ..ansi import RESET, display_width, fit_ansi_line, strip_ansi
from ..controller.state import ExplorerState, Focus, Modal, Mode
from ..file_tree.rows import Row
from ..git.summary import BRANCH_PLACEHOLDER
from ..git.types import FileStatusEntry
from ..layout import PaneLayout
from ..ui_theme import UITheme, status_color
from ..viewport import slice_window
from .help import MODAL_TITLES, modal_body_lines

CLEAR_SCREEN = "\033[H\033[J"
MODAL_MAX_WIDTH = 64
STATUS_COLUMN_WIDTH = 2

EMPTY_FILES = {Mode.EXPLORER: "No files found.", Mode.DIFF: "No changes detected."}
NO_SELECTION = {
    Mode.EXPLORER: "Select a file to view its contents.",
    Mode.DIFF: "Select a file to view its diff.",
}
NO_CONTENT = {Mode.EXPLORER: "No file content to display.", Mode.DIFF: "No diff for selected file."}
CONTENT_TITLES = {Mode.EXPLORER: "File", Mode.DIFF: "Diff"}


def _box(
    title: str,
    body: list[str],
    width: int,
    height: int,
    *,
    focused: bool,
    theme: UITheme,
    chrome: tuple[str, str] | None = None,
) -> list[str]:
    """Bordered pane: border, title, spacer, body, padding, border.

    ``chrome`` overrides the (border, title) styles picked from ``focused``.
    """
    if width < 2 or height < 1:
        return [" " * max(0, width)] * max(0, height)
    if chrome is not None:
        border, title_style = chrome
    else:
        border = theme.border_focused if focused else theme.border
        title_style = theme.title_focused if focused else theme.title
    inner = width - 4

    def framed(text: str) -> str:
        return f"{border}│{theme.reset} {fit_ansi_line(text, inner)} {border}│{theme.reset}"

    rows = [f"{border}┌{'─' * (width - 2)}┐{theme.reset}"]
    rows.append(framed(f"{title_style}{title}{theme.reset}"))
    rows.append(framed(""))
    body_rows = max(0, height - 6)
    for index in range(body_rows):
        rows.append(framed(body[index] if index < len(body) else ""))
    rows.append(framed(""))
    rows.append(f"{border}└{'─' * (width - 2)}┘{theme.reset}")
    return rows[:height] + [" " * width] * max(0, height - len(rows))


def _status_badge(status: str, theme: UITheme) -> str:
    code = status.strip()[:STATUS_COLUMN_WIDTH].ljust(STATUS_COLUMN_WIDTH)
    color = status_color(theme, status)
    return f"{color}{code}{theme.reset}" if color else code


def _highlight(text: str, width: int, *, selected: bool, focused: bool, theme: UITheme) -> str:
    if not selected:
        return text
    style = theme.selected if focused else theme.selected_unfocused
    reset = theme.reset or RESET
    return f"{style}{fit_ansi_line(strip_ansi(text), width)}{reset}"


def _flat_file_line(entry: FileStatusEntry, theme: UITheme) -> str:
    name = f"{theme.tree_ignored}{entry.path}{theme.reset}" if entry.ignored else entry.path
    return f"{_status_badge(entry.status, theme)} {name}"


def _tree_row_line(row: Row, theme: UITheme) -> str:
    indent = "  " * row.depth
    if row.is_dir:
        marker = "▸" if row.collapsed else "▾"
        style = theme.tree_ignored if row.ignored else theme.tree_dir
        return f"   {indent}{marker} {style}{row.name}/{theme.reset}"
    status = row.entry.status if row.entry is not None else ""
    name = f"{theme.tree_ignored}{row.name}{theme.reset}" if row.ignored else row.name
    return f"{_status_badge(status, theme)} {indent}  {name}"


def files_pane_body(state: ExplorerState, theme: UITheme, layout: PaneLayout) -> list[str]:
    inner = max(0, layout.left_width - 4)
    focused = state.focus is Focus.FILES
    if state.tree_view:
        if not state.rows:
            return [EMPTY_FILES[state.mode]]
        window = slice_window(state.rows, state.file_scroll, layout.visible_rows)
        lines = [_tree_row_line(row, theme) for row in window]
    else:
        if not state.files:
            return [EMPTY_FILES[state.mode]]
        window = slice_window(state.files, state.file_scroll, layout.visible_rows)
        lines = [_flat_file_line(entry, theme) for entry in window]
    start = min(state.file_scroll, max(0, state.file_list_length - 1))
    return [
        _highlight(line, inner, selected=start + offset == state.file_cursor, focused=focused, theme=theme)
        for offset, line in enumerate(lines)
    ]


def content_pane_body(state: ExplorerState, theme: UITheme, layout: PaneLayout) -> list[str]:
    if state.last_error is not None:
        return [f"{theme.error}Error: {state.last_error.message}{theme.reset}"]
    if state.selected_entry is None:
        return [f"{theme.hint}{NO_SELECTION[state.mode]}{theme.reset}"]
    if not state.content_lines:
        return [f"{theme.hint}{NO_CONTENT[state.mode]}{theme.reset}"]
    return slice_window(state.content_lines, state.content_scroll, layout.visible_rows)


def status_bar_text(state: ExplorerState) -> str:
    summary = state.git_summary or f"git: {BRANCH_PLACEHOLDER}"
    return f" Mode: {state.mode.label}  |  {summary}  |  h for help"


def _modal_overlay(lines: list[str], state: ExplorerState, theme: UITheme, width: int) -> list[str]:
    body = modal_body_lines(state, theme)
    box_width = min(MODAL_MAX_WIDTH, width - 4, max(display_width(line) for line in body) + 4)
    box_width = max(box_width, min(width, 24))
    box_height = min(len(lines), len(body) + 6)
    box = _box(
        MODAL_TITLES[state.modal],
        body,
        box_width,
        box_height,
        focused=True,
        theme=theme,
        chrome=(theme.modal_border, theme.modal_title),
    )
    top = max(0, (len(lines) - box_height) // 2)
    left_pad = " " * max(0, (width - box_width) // 2)
    overlaid = list(lines)
    for offset, row in enumerate(box):
        overlaid[top + offset] = fit_ansi_line(left_pad + row, width)
    return overlaid


def render_frame(state: ExplorerState, theme: UITheme) -> str:
    """Compose the full screen for ``state``; one string, cursor-home first."""
    layout = state.layout
    width = max(0, state.width)
    if width == 0 or state.height == 0:
        return CLEAR_SCREEN

    left = _box(
        "Files" if not state.tree_view else "Files (tree)",
        files_pane_body(state, theme, layout),
        layout.left_width,
        layout.pane_height,
        focused=state.focus is Focus.FILES,
        theme=theme,
    )
    title = CONTENT_TITLES[state.mode]
    if state.content_path:
        title = f"{title}: {state.content_path}"
    right = _box(
        title,
        content_pane_body(state, theme, layout),
        layout.right_width,
        layout.pane_height,
        focused=state.focus is Focus.CONTENT,
        theme=theme,
    )
    lines = [fit_ansi_line(f"{lhs} {rhs}", width) for lhs, rhs in zip(left, right)]
    lines.append(f"{theme.status_bar}{fit_ansi_line(status_bar_text(state), width)}{theme.reset}")
    if state.modal is not Modal.NONE:
        lines = _modal_overlay(lines, state, theme, width)
    return CLEAR_SCREEN + "\r\n".join(lines)


def write_frame(fd: int, frame: str) -> None:
    os.write(fd, frame.encode("utf-8", errors="replace"))


__all__ = [
    "content_pane_body",
    "files_pane_body",
    "render_frame",
    "status_bar_text",
    "write_frame",
]
