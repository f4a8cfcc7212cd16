"""Background execution of controller commands.

Commands run on a small thread pool; each posts exactly one result message to
an internal queue that the main loop drains between key reads. Ticks are
posted by daemon timers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from queue import Empty, Queue

from ..controller.commands import Command, Commit, FetchContent, Push, Refresh, ScheduleTick
from ..controller.messages import (
    CommitResult,
    ContentResult,
    Message,
    PushResult,
    RefreshResult,
    Tick,
)
from ..controller.state import ErrorInfo, Mode
from ..errors import GatewayError, WingError
from ..git.gateway import StatusGateway
from ..git.summary import BRANCH_PLACEHOLDER, apply_statuses, build_git_summary
from ..git.types import FileStatusEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


def _error_info(exc: Exception, command: Command) -> ErrorInfo:
    if not isinstance(exc, WingError):
        logger.exception("unexpected failure running %s", type(command).__name__)
    return ErrorInfo.from_exception(exc)


def fetch_content(gateway: StatusGateway, repo_path: Path, entry: FileStatusEntry, mode: Mode) -> str:
    """File text in Explorer mode, the entry's diff in Diff mode."""
    if mode is Mode.DIFF:
        return gateway.diff(repo_path, entry.path, entry.status)
    return gateway.file_contents(repo_path, entry.path)


def list_mode_files(gateway: StatusGateway, repo_path: Path, mode: Mode) -> tuple[list[FileStatusEntry], list[FileStatusEntry]]:
    """Return ``(files, statuses)`` for ``mode``.

    Diff mode lists exactly the changed entries. Explorer mode lists every
    tracked and untracked file and overlays status codes; a failed status
    query there leaves the codes blank instead of failing the listing.
    """
    if mode is Mode.DIFF:
        changed = [entry for entry in gateway.status(repo_path) if entry.has_changes]
        return changed, list(changed)
    files = gateway.list_files(repo_path)
    try:
        statuses = gateway.status(repo_path)
    except GatewayError as exc:
        logger.warning("status overlay unavailable: %s", exc)
        return files, []
    return apply_statuses(files, statuses), statuses


def summarize(gateway: StatusGateway, repo_path: Path, statuses: list[FileStatusEntry]) -> str:
    try:
        branch = gateway.branch_name(repo_path)
    except GatewayError as exc:
        logger.info("branch name unavailable: %s", exc)
        branch = BRANCH_PLACEHOLDER
    return build_git_summary(branch, statuses)


def run_refresh(command: Refresh, gateway: StatusGateway, repo_path: Path) -> RefreshResult:
    try:
        files, statuses = list_mode_files(gateway, repo_path, command.mode)
    except Exception as exc:
        return RefreshResult(
            generation=command.generation,
            content_generation=command.content_generation,
            mode=command.mode,
            files=None,
            error=_error_info(exc, command),
        )

    git_summary = summarize(gateway, repo_path, statuses)
    selected = next((entry for entry in files if entry.path == command.keep_path), None)
    if selected is None and files:
        selected = files[0]
    content = ""
    error = None
    if selected is not None:
        try:
            content = fetch_content(gateway, repo_path, selected, command.mode)
        except Exception as exc:
            error = _error_info(exc, command)
    return RefreshResult(
        generation=command.generation,
        content_generation=command.content_generation,
        mode=command.mode,
        files=tuple(files),
        git_summary=git_summary,
        selected_path=selected.path if selected is not None else "",
        content=content,
        error=error,
    )


def run_command(command: Command, gateway: StatusGateway, repo_path: Path) -> Message:
    """Execute ``command`` synchronously and return its single result message."""
    if isinstance(command, Refresh):
        return run_refresh(command, gateway, repo_path)
    if isinstance(command, FetchContent):
        entry = FileStatusEntry(path=command.path, status=command.status)
        try:
            content = fetch_content(gateway, repo_path, entry, command.mode)
        except Exception as exc:
            return ContentResult(
                generation=command.generation,
                path=command.path,
                mode=command.mode,
                error=_error_info(exc, command),
            )
        return ContentResult(
            generation=command.generation,
            path=command.path,
            mode=command.mode,
            content=content,
        )
    if isinstance(command, Commit):
        try:
            gateway.commit(repo_path, command.message)
        except Exception as exc:
            return CommitResult(session=command.session, error=_error_info(exc, command))
        logger.info("committed working tree changes")
        return CommitResult(session=command.session)
    if isinstance(command, Push):
        try:
            gateway.push(repo_path)
        except Exception as exc:
            return PushResult(session=command.session, error=_error_info(exc, command))
        logger.info("pushed current branch")
        return PushResult(session=command.session)
    raise TypeError(f"command has no synchronous result: {command!r}")


class CommandDispatcher:
    """Runs commands off the update path and queues their result messages."""

    def __init__(
        self,
        gateway: StatusGateway,
        repo_path: Path,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._gateway = gateway
        self._repo_path = repo_path
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="wing-cmd")
        self._results: Queue[Message] = Queue()
        self._timers: list[threading.Timer] = []
        self._lock = threading.Lock()
        self._closed = False

    def dispatch(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.submit(command)

    def submit(self, command: Command) -> None:
        with self._lock:
            if self._closed:
                return
            if isinstance(command, ScheduleTick):
                self._schedule_tick(command.delay_seconds)
                return
            logger.debug("dispatching %s", command)
            self._executor.submit(self._run, command)

    def _run(self, command: Command) -> None:
        self._results.put(run_command(command, self._gateway, self._repo_path))

    def _schedule_tick(self, delay_seconds: float) -> None:
        timer = threading.Timer(delay_seconds, self._results.put, args=(Tick(),))
        timer.daemon = True
        self._timers = [pending for pending in self._timers if pending.is_alive()]
        self._timers.append(timer)
        timer.start()

    def drain(self) -> list[Message]:
        """Return every result delivered so far, in arrival order."""
        messages: list[Message] = []
        while True:
            try:
                messages.append(self._results.get_nowait())
            except Empty:
                return messages

    def wait(self, timeout: float | None = None) -> Message | None:
        """Block for the next result; ``None`` on timeout."""
        try:
            return self._results.get(timeout=timeout)
        except Empty:
            return None

    def shutdown(self) -> None:
        with self._lock:
            self._closed = True
            for timer in self._timers:
                timer.cancel()
            self._timers.clear()
        self._executor.shutdown(wait=False, cancel_futures=True)


__all__ = [
    "CommandDispatcher",
    "fetch_content",
    "list_mode_files",
    "run_command",
    "run_refresh",
    "summarize",
]
