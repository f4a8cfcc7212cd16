"""Value types exchanged between the git gateway and the controller."""

from __future__ import annotations

from dataclasses import dataclass

UNTRACKED_STATUS = "??"
IGNORED_STATUS = "!!"


@dataclass(frozen=True)
class FileStatusEntry:
    """One repository-relative path and its short-format status code.

    ``status`` is ``""`` for a clean tracked file, ``"??"`` for untracked,
    ``"!!"`` for ignored, otherwise the two-letter porcelain code with
    surrounding spaces trimmed.
    """

    path: str
    status: str = ""
    ignored: bool = False

    @property
    def is_untracked(self) -> bool:
        return self.status.startswith(UNTRACKED_STATUS)

    @property
    def has_changes(self) -> bool:
        return bool(self.status.strip())
