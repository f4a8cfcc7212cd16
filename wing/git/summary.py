"""Status-bar summary: branch name plus per-bucket change counts."""

from __future__ import annotations

from collections.abc import Iterable

from .types import UNTRACKED_STATUS, FileStatusEntry

BRANCH_PLACEHOLDER = "-"
SUMMARY_BUCKETS: tuple[str, ...] = ("M", "A", "D", "?")


def apply_statuses(
    files: list[FileStatusEntry],
    statuses: Iterable[FileStatusEntry],
) -> list[FileStatusEntry]:
    """Overlay status codes from ``statuses`` onto matching ``files`` paths."""
    status_by_path = {entry.path: entry.status for entry in statuses if entry.path}
    if not files or not status_by_path:
        return list(files)
    merged: list[FileStatusEntry] = []
    for entry in files:
        status = status_by_path.get(entry.path)
        if status is None:
            merged.append(entry)
        else:
            merged.append(FileStatusEntry(path=entry.path, status=status, ignored=entry.ignored))
    return merged


def count_status_buckets(statuses: Iterable[FileStatusEntry]) -> dict[str, int]:
    """Count entries per bucket.

    An entry lands in every bucket whose letter appears in its code, so ``"AM"``
    counts once as added and once as modified. Untracked entries only count as
    ``"?"``.
    """
    counts = {bucket: 0 for bucket in SUMMARY_BUCKETS}
    for entry in statuses:
        status = entry.status.strip()
        if not status:
            continue
        if status.startswith(UNTRACKED_STATUS):
            counts["?"] += 1
            continue
        for bucket in ("M", "A", "D"):
            if bucket in status:
                counts[bucket] += 1
    return counts


def build_git_summary(branch: str | None, statuses: Iterable[FileStatusEntry]) -> str:
    """Render ``git: <branch> clean`` or ``git: <branch> M2 ?1`` style text."""
    counts = count_status_buckets(statuses)
    parts = [f"git: {branch or BRANCH_PLACEHOLDER}"]
    if not any(counts.values()):
        parts.append("clean")
    else:
        parts.extend(f"{bucket}{counts[bucket]}" for bucket in SUMMARY_BUCKETS if counts[bucket] > 0)
    return " ".join(parts)


__all__ = [
    "BRANCH_PLACEHOLDER",
    "SUMMARY_BUCKETS",
    "apply_statuses",
    "build_git_summary",
    "count_status_buckets",
]
