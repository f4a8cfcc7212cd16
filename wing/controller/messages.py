"""Messages consumed by ``ExplorerController.update``.

Keyboard, timer, and resize messages come from the runtime loop; the
``*Result`` messages are posted by the command dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..git.types import FileStatusEntry
from .state import ErrorInfo, Mode


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of a ``Refresh``.

    ``files`` is ``None`` when listing failed; ``error`` then describes why.
    Otherwise ``error`` reports a failed fetch of ``content`` for
    ``selected_path``.
    """

    generation: int
    content_generation: int
    mode: Mode
    files: tuple[FileStatusEntry, ...] | None
    git_summary: str = ""
    selected_path: str = ""
    content: str = ""
    error: ErrorInfo | None = None


@dataclass(frozen=True)
class ContentResult:
    generation: int
    path: str
    mode: Mode
    content: str = ""
    error: ErrorInfo | None = None


@dataclass(frozen=True)
class CommitResult:
    session: int
    error: ErrorInfo | None = None


@dataclass(frozen=True)
class PushResult:
    session: int
    error: ErrorInfo | None = None


Message = Union[KeyPressed, Tick, Resized, RefreshResult, ContentResult, CommitResult, PushResult]

__all__ = [
    "CommitResult",
    "ContentResult",
    "KeyPressed",
    "Message",
    "PushResult",
    "RefreshResult",
    "Resized",
    "Tick",
]
