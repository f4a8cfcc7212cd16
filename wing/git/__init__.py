"""Version-control gateway: entry types, porcelain parsing, and git subprocess calls."""

from .gateway import GitGateway, StatusGateway
from .summary import apply_statuses, build_git_summary, count_status_buckets
from .types import IGNORED_STATUS, UNTRACKED_STATUS, FileStatusEntry

__all__ = [
    "FileStatusEntry",
    "GitGateway",
    "StatusGateway",
    "IGNORED_STATUS",
    "UNTRACKED_STATUS",
    "apply_statuses",
    "build_git_summary",
    "count_status_buckets",
]
