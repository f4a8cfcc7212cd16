"""Subprocess-backed git gateway.

``StatusGateway`` is the contract the command dispatcher consumes;
``GitGateway`` fulfils it by shelling out to the ``git`` executable.
Every failing call raises ``GatewayError`` (or a subclass).
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from ..errors import GatewayError, NotFoundError, ValidationError
from .porcelain import parse_status_output, sort_and_dedupe, split_null_paths
from .types import IGNORED_STATUS, UNTRACKED_STATUS, FileStatusEntry

logger = logging.getLogger(__name__)

_TEXT_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


class StatusGateway(Protocol):
    def list_files(self, repo_path: Path, include_ignored: bool = False) -> list[FileStatusEntry]: ...

    def status(self, repo_path: Path) -> list[FileStatusEntry]: ...

    def diff(self, repo_path: Path, path: str, status: str) -> str: ...

    def file_contents(self, repo_path: Path, path: str) -> str: ...

    def commit(self, repo_path: Path, message: str) -> None: ...

    def push(self, repo_path: Path) -> None: ...

    def branch_name(self, repo_path: Path) -> str: ...


def trim_trailing_newline(text: str) -> str:
    """Drop exactly one trailing line terminator."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def decode_text(data: bytes) -> str:
    for encoding in _TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def run_git(repo_path: Path, args: list[str], *, diff_exit_ok: bool = False) -> str:
    """Run ``git -C repo_path *args`` and return stdout.

    With ``diff_exit_ok``, exit status 1 with output on stdout counts as
    success, since diff commands use it to report that differences exist.
    """
    label = " ".join(["git", *args])
    try:
        proc = subprocess.run(
            ["git", "-C", str(repo_path), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.warning("%s could not start: %s", label, exc)
        raise GatewayError(label, str(exc)) from exc

    if proc.returncode == 0:
        return proc.stdout
    if diff_exit_ok and proc.returncode == 1 and proc.stdout:
        return proc.stdout
    logger.warning("%s exited with %d: %s", label, proc.returncode, proc.stderr.strip())
    raise GatewayError(label, proc.stderr or f"exit status {proc.returncode}")


class GitGateway:
    """Stateless ``StatusGateway`` implementation over the git CLI."""

    def list_files(self, repo_path: Path, include_ignored: bool = False) -> list[FileStatusEntry]:
        """Tracked plus untracked (non-ignored unless requested) files, sorted by path."""
        tracked = run_git(repo_path, ["ls-files", "-z"])
        untracked = run_git(repo_path, ["ls-files", "--others", "--exclude-standard", "-z"])

        entries = [FileStatusEntry(path=path) for path in split_null_paths(tracked)]
        entries.extend(
            FileStatusEntry(path=path, status=UNTRACKED_STATUS) for path in split_null_paths(untracked)
        )
        if include_ignored:
            ignored = run_git(
                repo_path,
                ["ls-files", "--others", "--ignored", "--exclude-standard", "-z"],
            )
            entries.extend(
                FileStatusEntry(path=path, status=IGNORED_STATUS, ignored=True)
                for path in split_null_paths(ignored)
            )
        return sort_and_dedupe([entry for entry in entries if entry.path])

    def status(self, repo_path: Path) -> list[FileStatusEntry]:
        """Entries with pending changes, untracked directories expanded."""
        output = run_git(repo_path, ["status", "--porcelain=v1", "-z"])
        return parse_status_output(Path(repo_path).resolve(), output)

    def diff(self, repo_path: Path, path: str, status: str) -> str:
        """Unified diff for ``path``; untracked files diff against an empty file."""
        if not path:
            return ""
        if status == UNTRACKED_STATUS:
            target = (Path(repo_path) / path).resolve()
            if not target.exists():
                raise NotFoundError(path)
            output = run_git(
                repo_path,
                ["diff", "--no-color", "--no-index", "--", "/dev/null", str(target)],
                diff_exit_ok=True,
            )
            return trim_trailing_newline(output)

        try:
            output = run_git(repo_path, ["diff", "--no-color", "HEAD", "--", path])
        except GatewayError:
            # No HEAD yet: show staged changes, then unstaged ones.
            output = run_git(repo_path, ["diff", "--cached", "--no-color", "--", path])
            if not output:
                output = run_git(repo_path, ["diff", "--no-color", "--", path])
        return trim_trailing_newline(output)

    def file_contents(self, repo_path: Path, path: str) -> str:
        """Working-tree file text with one trailing newline removed."""
        if not path:
            return ""
        target = Path(repo_path) / path
        try:
            data = target.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc
        except OSError as exc:
            raise GatewayError(f"read {path}", exc.strerror or str(exc)) from exc
        return trim_trailing_newline(decode_text(data))

    def commit(self, repo_path: Path, message: str) -> None:
        """Stage every change and commit it with ``message``."""
        if not message.strip():
            raise ValidationError("commit message is required")
        run_git(repo_path, ["add", "-A"])
        run_git(repo_path, ["commit", "-m", message])

    def push(self, repo_path: Path) -> None:
        run_git(repo_path, ["push"])

    def branch_name(self, repo_path: Path) -> str:
        return run_git(repo_path, ["rev-parse", "--abbrev-ref", "HEAD"]).strip()


__all__ = [
    "GitGateway",
    "StatusGateway",
    "decode_text",
    "run_git",
    "trim_trailing_newline",
]
