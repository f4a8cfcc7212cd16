"""Explorer state: the single source of truth for the interactive view.

Only ``ExplorerController`` and ``ModalController`` mutate this object.
``rows`` and ``content_lines`` are derived values and are recomputed, never
edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..errors import GatewayError, NotFoundError, ValidationError
from ..file_tree.rows import Row
from ..git.types import FileStatusEntry
from ..layout import PaneLayout
from .text_input import TextInput


class Focus(Enum):
    FILES = "files"
    CONTENT = "content"


class Mode(Enum):
    EXPLORER = "explorer"
    DIFF = "diff"

    @property
    def label(self) -> str:
        return "Explorer" if self is Mode.EXPLORER else "Diff"


class Modal(Enum):
    NONE = "none"
    COMMIT = "commit"
    PUSH = "push"
    HELP = "help"


@dataclass(frozen=True)
class ErrorInfo:
    kind: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        if isinstance(exc, NotFoundError):
            kind = "not_found"
        elif isinstance(exc, GatewayError):
            kind = "gateway"
        elif isinstance(exc, ValidationError):
            kind = "validation"
        else:
            kind = "internal"
        return cls(kind=kind, message=str(exc) or type(exc).__name__)


@dataclass
class ExplorerState:
    repo_path: Path
    refresh_seconds: float = 2.0
    focus: Focus = Focus.FILES
    mode: Mode = Mode.EXPLORER
    modal: Modal = Modal.NONE
    files: list[FileStatusEntry] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    collapse: dict[str, bool] = field(default_factory=dict)
    tree_view: bool = False
    selected_idx: int = 0
    row_cursor: int = 0
    file_scroll: int = 0
    content_text: str = ""
    content_path: str = ""
    content_lines: list[str] = field(default_factory=list)
    content_scroll: int = 0
    git_summary: str = ""
    last_error: ErrorInfo | None = None
    commit_input: TextInput = field(default_factory=TextInput)
    modal_error: str = ""
    modal_pending: bool = False
    width: int = 0
    height: int = 0
    style: str = "monokai"
    colorize: bool = True
    refresh_generation: int = 0
    applied_refresh_generation: int = 0
    content_generation: int = 0
    modal_session: int = 0
    should_quit: bool = False
    dirty: bool = True

    @property
    def refresh_pending(self) -> bool:
        return self.applied_refresh_generation < self.refresh_generation

    @property
    def layout(self) -> PaneLayout:
        return PaneLayout.from_terminal(self.width, self.height)

    @property
    def visible_rows(self) -> int:
        return self.layout.visible_rows

    @property
    def selected_entry(self) -> FileStatusEntry | None:
        if not self.files or not 0 <= self.selected_idx < len(self.files):
            return None
        return self.files[self.selected_idx]

    @property
    def selected_path(self) -> str:
        entry = self.selected_entry
        return entry.path if entry is not None else ""

    @property
    def cursor_row(self) -> Row | None:
        if not self.rows or not 0 <= self.row_cursor < len(self.rows):
            return None
        return self.rows[self.row_cursor]

    @property
    def file_list_length(self) -> int:
        """Length of whichever list the files pane shows."""
        return len(self.rows) if self.tree_view else len(self.files)

    @property
    def file_cursor(self) -> int:
        return self.row_cursor if self.tree_view else self.selected_idx


__all__ = ["ErrorInfo", "ExplorerState", "Focus", "Modal", "Mode"]
