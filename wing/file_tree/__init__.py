"""Tree projection of status entries for the files pane."""

from .rows import CollapseState, Row, ancestor_dirs, build_rows, is_expanded, row_index_for_path

__all__ = [
    "CollapseState",
    "Row",
    "ancestor_dirs",
    "build_rows",
    "is_expanded",
    "row_index_for_path",
]
