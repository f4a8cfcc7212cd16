"""Top-level reducer for the explorer view.

``ExplorerController.update`` folds one message into ``ExplorerState`` and
returns the commands to run next. It never blocks and never talks to git
itself; all slow work is described as commands for the dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..content import derive_content_lines
from ..file_tree.rows import ancestor_dirs, build_rows, is_expanded, row_index_for_path
from ..input.key_registry import KeyComboBinding, KeyComboRegistry
from ..viewport import clamp_offset, ensure_visible, scroll_by
from .commands import Command, FetchContent, Refresh, ScheduleTick
from .messages import (
    CommitResult,
    ContentResult,
    KeyPressed,
    Message,
    PushResult,
    RefreshResult,
    Resized,
    Tick,
)
from .modal import ModalController
from .state import ExplorerState, Focus, Mode

logger = logging.getLogger(__name__)

FOCUS_KEYS = ("TAB", "SHIFT_TAB")
MODE_KEYS = ("m",)
UP_KEYS = ("UP", "k")
DOWN_KEYS = ("DOWN", "j")
PAGE_UP_KEYS = ("PAGE_UP",)
PAGE_DOWN_KEYS = ("PAGE_DOWN",)
COMMIT_KEYS = ("ENTER",)
HELP_KEYS = ("h", "?")
QUIT_KEYS = ("q", "ESC", "CTRL_C")
REFRESH_KEYS = ("r",)
TREE_VIEW_KEYS = ("t",)
TOGGLE_DIR_KEYS = (" ",)


class ExplorerController:
    """Owns ``ExplorerState`` and turns messages into state changes plus commands."""

    def __init__(
        self,
        state: ExplorerState,
        on_tree_view_changed: Callable[[bool], None] | None = None,
    ) -> None:
        self.state = state
        self._on_tree_view_changed = on_tree_view_changed
        self.modal = ModalController(state, request_refresh=self.request_refresh)
        self._keys: KeyComboRegistry[list[Command]] = KeyComboRegistry()
        self._keys.register(
            KeyComboBinding(FOCUS_KEYS, self._toggle_focus_action),
            KeyComboBinding(MODE_KEYS, self._toggle_mode_action),
            KeyComboBinding(UP_KEYS, lambda: self.move(-1)),
            KeyComboBinding(DOWN_KEYS, lambda: self.move(1)),
            KeyComboBinding(PAGE_UP_KEYS, lambda: self.move(-self.state.visible_rows)),
            KeyComboBinding(PAGE_DOWN_KEYS, lambda: self.move(self.state.visible_rows)),
            KeyComboBinding(COMMIT_KEYS, self._open_commit_action),
            KeyComboBinding(HELP_KEYS, self._open_help_action),
            KeyComboBinding(QUIT_KEYS, self._quit_action),
            KeyComboBinding(REFRESH_KEYS, lambda: [self.request_refresh()]),
            KeyComboBinding(TREE_VIEW_KEYS, self._toggle_tree_view_action),
            KeyComboBinding(TOGGLE_DIR_KEYS, self._toggle_directory_action),
        )

    def init(self) -> list[Command]:
        """Commands for startup: the first refresh and the refresh timer."""
        commands: list[Command] = [self.request_refresh()]
        tick = self._schedule_tick()
        if tick is not None:
            commands.append(tick)
        return commands

    def update(self, message: Message) -> list[Command]:
        if isinstance(message, KeyPressed):
            if self.modal.active:
                return self.modal.handle_key(message.key)
            return self._keys.dispatch(message.key) or []
        if isinstance(message, Tick):
            # The timer never stacks refreshes; it rides on the one in flight.
            commands: list[Command] = [] if self.state.refresh_pending else [self.request_refresh()]
            tick = self._schedule_tick()
            if tick is not None:
                commands.append(tick)
            return commands
        if isinstance(message, Resized):
            self.resize(message.width, message.height)
            return []
        if isinstance(message, RefreshResult):
            return self.apply_refresh(message)
        if isinstance(message, ContentResult):
            self.apply_content(message)
            return []
        if isinstance(message, CommitResult):
            return self.modal.on_commit_result(message)
        if isinstance(message, PushResult):
            return self.modal.on_push_result(message)
        raise TypeError(f"unsupported message: {message!r}")

    # Command factories

    def _schedule_tick(self) -> ScheduleTick | None:
        if self.state.refresh_seconds <= 0:
            return None
        return ScheduleTick(delay_seconds=self.state.refresh_seconds)

    def request_refresh(self) -> Refresh:
        """Issue a refresh; it also claims the content slot for the current selection."""
        state = self.state
        state.refresh_generation += 1
        state.content_generation += 1
        return Refresh(
            generation=state.refresh_generation,
            content_generation=state.content_generation,
            mode=state.mode,
            keep_path=state.selected_path,
        )

    def request_content(self) -> list[Command]:
        state = self.state
        entry = state.selected_entry
        if entry is None:
            return []
        state.content_generation += 1
        return [
            FetchContent(
                generation=state.content_generation,
                path=entry.path,
                status=entry.status,
                mode=state.mode,
            )
        ]

    # Key actions

    def _toggle_focus_action(self) -> list[Command]:
        self.toggle_focus()
        return []

    def _toggle_mode_action(self) -> list[Command]:
        self.toggle_mode()
        return [self.request_refresh()]

    def _open_commit_action(self) -> list[Command]:
        self.modal.open_commit()
        return []

    def _open_help_action(self) -> list[Command]:
        self.modal.open_help()
        return []

    def _quit_action(self) -> list[Command]:
        self.state.should_quit = True
        return []

    def _toggle_tree_view_action(self) -> list[Command]:
        self.toggle_tree_view()
        return []

    def _toggle_directory_action(self) -> list[Command]:
        self.toggle_directory()
        return []

    def toggle_focus(self) -> None:
        state = self.state
        state.focus = Focus.CONTENT if state.focus is Focus.FILES else Focus.FILES
        state.dirty = True

    def toggle_mode(self) -> None:
        """Flip Explorer/Diff; the old content belongs to the other mode, so drop it."""
        state = self.state
        state.mode = Mode.DIFF if state.mode is Mode.EXPLORER else Mode.EXPLORER
        self._set_content("", "", reset_scroll=True)
        state.dirty = True

    def toggle_tree_view(self) -> None:
        state = self.state
        state.tree_view = not state.tree_view
        self._sync_row_cursor(state.selected_path)
        self._reveal_cursor()
        state.dirty = True
        if self._on_tree_view_changed is not None:
            self._on_tree_view_changed(state.tree_view)

    def toggle_directory(self) -> None:
        """Expand or collapse the directory under the tree cursor."""
        state = self.state
        row = state.cursor_row
        if not state.tree_view or row is None or not row.is_dir:
            return
        state.collapse[row.path] = is_expanded(state.collapse, row.path)
        self._rebuild_rows()
        self._sync_row_cursor(row.path)
        self._reveal_cursor()
        state.dirty = True

    def move(self, delta: int) -> list[Command]:
        """Arrow/page movement for whichever pane has focus."""
        state = self.state
        if state.focus is Focus.CONTENT:
            self.scroll_content(delta)
            return []
        if state.tree_view:
            return self._move_row_cursor(delta)
        return self._move_selection(delta)

    def _move_selection(self, delta: int) -> list[Command]:
        state = self.state
        state.dirty = True
        if not state.files:
            state.selected_idx = 0
            state.file_scroll = 0
            return []
        state.selected_idx = max(0, min(state.selected_idx + delta, len(state.files) - 1))
        self._reveal_cursor()
        return self.request_content()

    def _move_row_cursor(self, delta: int) -> list[Command]:
        state = self.state
        state.dirty = True
        if not state.rows:
            state.row_cursor = 0
            state.file_scroll = 0
            return []
        state.row_cursor = max(0, min(state.row_cursor + delta, len(state.rows) - 1))
        self._reveal_cursor()
        row = state.rows[state.row_cursor]
        if row.is_dir:
            return []
        index = self._file_index(row.path)
        if index is None:
            return []
        state.selected_idx = index
        return self.request_content()

    def scroll_content(self, delta: int) -> None:
        state = self.state
        state.content_scroll = scroll_by(
            state.content_scroll,
            delta,
            len(state.content_lines),
            state.visible_rows,
        )
        state.dirty = True

    def resize(self, width: int, height: int) -> None:
        state = self.state
        state.width = max(0, width)
        state.height = max(0, height)
        self._rederive_content(reset_scroll=False)
        self._reveal_cursor()
        state.dirty = True

    # Result folding

    def apply_refresh(self, result: RefreshResult) -> list[Command]:
        state = self.state
        if result.generation <= state.applied_refresh_generation or result.mode is not state.mode:
            logger.debug(
                "dropping stale refresh result %d (applied %d)",
                result.generation,
                state.applied_refresh_generation,
            )
            return []
        state.applied_refresh_generation = result.generation
        state.dirty = True
        if result.files is None:
            state.last_error = result.error
            return []

        current_path = state.selected_path
        cursor_row = state.cursor_row if state.tree_view else None
        cursor_path = cursor_row.path if cursor_row is not None else ""
        state.files = list(result.files)
        state.git_summary = result.git_summary
        self._rebuild_rows()

        index = self._file_index(current_path)
        if index is None:
            index = self._file_index(result.selected_path)
        state.selected_idx = index if index is not None else 0
        self._sync_row_cursor(cursor_path or state.selected_path)
        self._reveal_cursor()

        selected_path = state.selected_path
        if not selected_path:
            state.last_error = result.error
            self._set_content("", "", reset_scroll=True)
            return []
        if result.content_generation != state.content_generation:
            # A newer content fetch owns the content pane and its error.
            return []
        if result.selected_path != selected_path:
            state.last_error = None
            return self.request_content()

        state.last_error = result.error
        self._set_content(
            result.content if result.error is None else "",
            selected_path,
            reset_scroll=selected_path != state.content_path,
        )
        return []

    def apply_content(self, result: ContentResult) -> None:
        state = self.state
        if result.generation != state.content_generation or result.mode is not state.mode:
            logger.debug("dropping stale content result for %s", result.path)
            return
        state.last_error = result.error
        self._set_content(result.content if result.error is None else "", result.path, reset_scroll=True)
        state.dirty = True

    # Derived-state helpers

    def _file_index(self, path: str) -> int | None:
        if not path:
            return None
        for index, entry in enumerate(self.state.files):
            if entry.path == path:
                return index
        return None

    def _rebuild_rows(self) -> None:
        self.state.rows = build_rows(self.state.files, self.state.collapse)

    def _sync_row_cursor(self, path: str) -> None:
        """Put the tree cursor on ``path`` or its nearest visible ancestor."""
        state = self.state
        rows = state.rows
        if not rows:
            state.row_cursor = 0
            return
        for candidate in [path, *reversed(ancestor_dirs(path))] if path else []:
            index = row_index_for_path(rows, candidate)
            if index is not None:
                state.row_cursor = index
                return
        state.row_cursor = max(0, min(state.row_cursor, len(rows) - 1))

    def _reveal_cursor(self) -> None:
        state = self.state
        total = state.file_list_length
        visible = state.visible_rows
        state.file_scroll = clamp_offset(state.file_scroll, total, visible)
        state.file_scroll = ensure_visible(state.file_cursor, state.file_scroll, visible, total)

    def _set_content(self, text: str, path: str, *, reset_scroll: bool) -> None:
        state = self.state
        state.content_text = text
        state.content_path = path
        self._rederive_content(reset_scroll=reset_scroll)

    def _rederive_content(self, *, reset_scroll: bool) -> None:
        state = self.state
        state.content_lines = derive_content_lines(
            state.content_text,
            is_diff=state.mode is Mode.DIFF,
            width=state.layout.content_width,
            path=state.content_path,
            style=state.style,
            colorize=state.colorize,
        )
        offset = 0 if reset_scroll else state.content_scroll
        state.content_scroll = clamp_offset(offset, len(state.content_lines), state.visible_rows)


__all__ = ["ExplorerController"]
