"""Parsers for git's machine-readable output.

Turns ``status --porcelain -z`` and ``ls-files -z`` output into
``FileStatusEntry`` lists. Untracked directories are expanded into leaf files.
"""

from __future__ import annotations

import os
from pathlib import Path

from .types import UNTRACKED_STATUS, FileStatusEntry


def split_null_paths(output: str) -> list[str]:
    """Split NUL-terminated path output, dropping the trailing terminator."""
    trimmed = output.rstrip("\0")
    if not trimmed:
        return []
    return trimmed.split("\0")


def iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    """Return ``(status, path)`` pairs from ``status --porcelain=v1 -z`` output.

    Renamed and copied records are followed by an extra token holding the
    source path; only the destination path is reported.
    """
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        if "R" in status or "C" in status:
            index += 1

    return records


def expand_untracked_dir(repo_root: Path, rel_path: str) -> list[FileStatusEntry]:
    """List every file below an untracked directory as its own ``??`` entry."""
    base = repo_root / rel_path
    entries: list[FileStatusEntry] = []
    for dirpath, _dirnames, filenames in os.walk(base):
        for name in filenames:
            full = Path(dirpath) / name
            try:
                rel = full.relative_to(repo_root)
            except ValueError:
                continue
            entries.append(FileStatusEntry(path=rel.as_posix(), status=UNTRACKED_STATUS))
    return entries


def parse_status_output(repo_root: Path, output: str) -> list[FileStatusEntry]:
    """Build sorted status entries from porcelain output.

    Status codes are trimmed (``" M"`` becomes ``"M"``). Untracked paths that
    are directories on disk are replaced by the files they contain.
    """
    entries: list[FileStatusEntry] = []
    for raw_status, raw_path in iter_porcelain_records(output):
        status = raw_status.strip()
        path = raw_path.rstrip("/")
        if not path:
            continue
        if status == UNTRACKED_STATUS and (repo_root / path).is_dir():
            entries.extend(expand_untracked_dir(repo_root, path))
            continue
        entries.append(FileStatusEntry(path=path, status=status))
    return sort_and_dedupe(entries)


def sort_and_dedupe(entries: list[FileStatusEntry]) -> list[FileStatusEntry]:
    """Keep the first entry per path and order the result by path."""
    seen: set[str] = set()
    unique: list[FileStatusEntry] = []
    for entry in entries:
        if entry.path in seen:
            continue
        seen.add(entry.path)
        unique.append(entry)
    unique.sort(key=lambda entry: entry.path)
    return unique


__all__ = [
    "expand_untracked_dir",
    "iter_porcelain_records",
    "parse_status_output",
    "sort_and_dedupe",
    "split_null_paths",
]
