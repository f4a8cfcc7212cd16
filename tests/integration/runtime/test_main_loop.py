"""End-to-end loop tests: keys in, frames out, commands through the dispatcher."""

from __future__ import annotations

import contextlib
import os
import tempfile
import unittest
from pathlib import Path

from wing.controller import ExplorerController, ExplorerState, KeyPressed, Mode, RefreshResult
from wing.git.types import FileStatusEntry
from wing.runtime.dispatcher import CommandDispatcher
from wing.runtime.loop import deliver, run_main_loop, sync_terminal_size
from wing.ui_theme import PLAIN_THEME


class MemoryGateway:
    def __init__(self) -> None:
        self.files = [FileStatusEntry(path="a.txt"), FileStatusEntry(path="b.txt")]

    def list_files(self, repo_path, include_ignored=False):
        return list(self.files)

    def status(self, repo_path):
        return [FileStatusEntry(path="b.txt", status="M")]

    def diff(self, repo_path, path, status):
        return f"diff of {path}"

    def file_contents(self, repo_path, path):
        return f"contents of {path}"

    def commit(self, repo_path, message):
        return None

    def push(self, repo_path):
        return None

    def branch_name(self, repo_path):
        return "main"


class FakeTerminal:
    def __init__(self, stdin_fd: int, stdout_fd: int, size: tuple[int, int] = (80, 24)) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._size = size
        self.entered = 0
        self.exited = 0

    def size(self) -> tuple[int, int]:
        return self._size

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


def _controller(refresh_seconds: float = 0) -> ExplorerController:
    return ExplorerController(
        ExplorerState(repo_path=Path("/repo"), refresh_seconds=refresh_seconds, colorize=False)
    )


class DeliverTests(unittest.TestCase):
    def test_refresh_round_trip_populates_state(self) -> None:
        controller = _controller()
        dispatcher = CommandDispatcher(MemoryGateway(), Path("/repo"))
        terminal = FakeTerminal(stdin_fd=-1, stdout_fd=-1)
        try:
            sync_terminal_size(controller, dispatcher, terminal)
            dispatcher.dispatch(controller.init())
            result = dispatcher.wait(timeout=5.0)
            self.assertIsInstance(result, RefreshResult)
            deliver(controller, dispatcher, [result])
        finally:
            dispatcher.shutdown()

        state = controller.state
        self.assertEqual((state.width, state.height), (80, 24))
        self.assertEqual([entry.status for entry in state.files], ["", "M"])
        self.assertEqual(state.git_summary, "git: main M1")
        self.assertEqual(state.content_lines, ["contents of a.txt"])

    def test_mode_toggle_round_trip_shows_diff(self) -> None:
        controller = _controller()
        dispatcher = CommandDispatcher(MemoryGateway(), Path("/repo"))
        try:
            dispatcher.dispatch(controller.init())
            deliver(controller, dispatcher, [dispatcher.wait(timeout=5.0)])
            deliver(controller, dispatcher, [KeyPressed("m")])
            deliver(controller, dispatcher, [dispatcher.wait(timeout=5.0)])
        finally:
            dispatcher.shutdown()

        state = controller.state
        self.assertIs(state.mode, Mode.DIFF)
        self.assertEqual([entry.path for entry in state.files], ["b.txt"])
        self.assertEqual(state.content_lines, ["diff of b.txt"])


class RunMainLoopTests(unittest.TestCase):
    def test_quit_key_ends_loop_after_rendering(self) -> None:
        read_fd, write_fd = os.pipe()
        with tempfile.TemporaryFile() as out:
            terminal = FakeTerminal(stdin_fd=read_fd, stdout_fd=out.fileno())
            controller = _controller()
            dispatcher = CommandDispatcher(MemoryGateway(), Path("/repo"))
            try:
                os.write(write_fd, b"q")
                run_main_loop(controller, dispatcher, terminal, PLAIN_THEME, key_poll_ms=10)
            finally:
                dispatcher.shutdown()
                os.close(read_fd)
                os.close(write_fd)

            out.seek(0)
            frame = out.read().decode("utf-8")

        self.assertTrue(controller.state.should_quit)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertIn("Mode: Explorer", frame)


if __name__ == "__main__":
    unittest.main()
