"""Projection of a flat status list into collapsible tree rows.

``build_rows`` is a pure function of the entries and the collapse overrides;
rows are rebuilt from scratch on every refresh or toggle.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..git.types import FileStatusEntry

CollapseState = Mapping[str, bool]


@dataclass(frozen=True)
class Row:
    path: str
    is_dir: bool
    depth: int
    collapsed: bool = False
    ignored: bool = False
    entry: FileStatusEntry | None = None

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


@dataclass
class _Node:
    path: str
    is_dir: bool
    entry: FileStatusEntry | None = None
    children: dict[tuple[str, bool], _Node] = field(default_factory=dict)


def is_expanded(collapse: CollapseState, path: str) -> bool:
    """Directories are collapsed unless explicitly mapped to ``False``."""
    return collapse.get(path, True) is False


def _insert(root: _Node, entry: FileStatusEntry) -> None:
    parts = entry.path.split("/")
    node = root
    for depth, part in enumerate(parts[:-1]):
        key = (part, True)
        child = node.children.get(key)
        if child is None:
            child = _Node(path="/".join(parts[: depth + 1]), is_dir=True)
            node.children[key] = child
        node = child
    node.children[(parts[-1], False)] = _Node(path=entry.path, is_dir=False, entry=entry)


def _all_ignored(node: _Node, cache: dict[str, bool]) -> bool:
    if not node.is_dir:
        return bool(node.entry is not None and node.entry.ignored)
    cached = cache.get(node.path)
    if cached is not None:
        return cached
    result = bool(node.children) and all(_all_ignored(child, cache) for child in node.children.values())
    cache[node.path] = result
    return result


def build_rows(entries: Iterable[FileStatusEntry], collapse: CollapseState) -> list[Row]:
    """Return depth-first rows for ``entries`` honoring ``collapse`` overrides.

    Siblings are ordered by full path with no files-first/dirs-first split.
    A directory is ignored only when every file beneath it is ignored.
    """
    root = _Node(path="", is_dir=True)
    for entry in entries:
        if not entry.path:
            raise ValueError("status entry path must not be empty")
        _insert(root, entry)

    ignored_cache: dict[str, bool] = {}
    rows: list[Row] = []

    def walk(node: _Node, depth: int) -> None:
        children = sorted(node.children.values(), key=lambda child: (child.path, child.is_dir))
        for child in children:
            if not child.is_dir:
                rows.append(
                    Row(
                        path=child.path,
                        is_dir=False,
                        depth=depth,
                        ignored=bool(child.entry is not None and child.entry.ignored),
                        entry=child.entry,
                    )
                )
                continue
            expanded = is_expanded(collapse, child.path)
            rows.append(
                Row(
                    path=child.path,
                    is_dir=True,
                    depth=depth,
                    collapsed=not expanded,
                    ignored=_all_ignored(child, ignored_cache),
                )
            )
            if expanded:
                walk(child, depth + 1)

    walk(root, 0)
    return rows


def row_index_for_path(rows: list[Row], path: str) -> int | None:
    for index, row in enumerate(rows):
        if row.path == path:
            return index
    return None


def ancestor_dirs(path: str) -> list[str]:
    """``"a/b/c.txt"`` -> ``["a", "a/b"]``."""
    parts = path.split("/")
    return ["/".join(parts[:depth]) for depth in range(1, len(parts))]


__all__ = [
    "CollapseState",
    "Row",
    "ancestor_dirs",
    "build_rows",
    "is_expanded",
    "row_index_for_path",
]
