"""Commit / push / help modal workflow tests.

Drives the modal through ``ExplorerController.update`` the way the runtime
loop does, and checks which commands come back.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from wing.controller import (
    Commit,
    CommitResult,
    ErrorInfo,
    ExplorerController,
    ExplorerState,
    KeyPressed,
    Modal,
    Push,
    PushResult,
    Refresh,
)
from wing.controller.modal import EMPTY_MESSAGE_ERROR


def _controller() -> ExplorerController:
    return ExplorerController(ExplorerState(repo_path=Path("."), width=80, height=24, colorize=False))


def _press(controller: ExplorerController, *keys: str) -> list:
    commands: list = []
    for key in keys:
        commands.extend(controller.update(KeyPressed(key)))
    return commands


class CommitModalTests(unittest.TestCase):
    def test_whitespace_message_keeps_modal_open_without_commands(self) -> None:
        controller = _controller()
        _press(controller, "ENTER")
        commands = _press(controller, " ", " ", "ENTER")

        self.assertEqual(commands, [])
        self.assertIs(controller.state.modal, Modal.COMMIT)
        self.assertEqual(controller.state.modal_error, EMPTY_MESSAGE_ERROR)
        self.assertFalse(controller.state.modal_pending)

    def test_confirm_issues_commit_once_with_trimmed_message(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", " ", "f", "i", "x")
        commands = _press(controller, "ENTER")

        self.assertEqual(commands, [Commit(session=controller.state.modal_session, message="fix")])
        self.assertTrue(controller.state.modal_pending)
        self.assertEqual(_press(controller, "ENTER"), [])

    def test_keys_edit_the_message_instead_of_navigating(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "q", "j", "m")

        self.assertFalse(controller.state.should_quit)
        self.assertEqual(controller.state.commit_input.value(), "qjm")

    def test_commit_success_moves_to_push_and_push_success_refreshes(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "x")
        (commit,) = _press(controller, "ENTER")

        self.assertEqual(controller.update(CommitResult(session=commit.session)), [])
        self.assertIs(controller.state.modal, Modal.PUSH)
        self.assertEqual(controller.state.modal_error, "")

        (push,) = _press(controller, "ENTER")
        self.assertIsInstance(push, Push)

        commands = controller.update(PushResult(session=push.session))
        self.assertIs(controller.state.modal, Modal.NONE)
        self.assertEqual(len(commands), 1)
        self.assertIsInstance(commands[0], Refresh)

    def test_commit_failure_stays_open_with_detail(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "x")
        (commit,) = _press(controller, "ENTER")

        error = ErrorInfo(kind="gateway", message="git commit: nothing to commit")
        self.assertEqual(controller.update(CommitResult(session=commit.session, error=error)), [])
        self.assertIs(controller.state.modal, Modal.COMMIT)
        self.assertEqual(controller.state.modal_error, error.message)
        self.assertFalse(controller.state.modal_pending)

    def test_push_failure_is_retryable(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "x")
        (commit,) = _press(controller, "ENTER")
        controller.update(CommitResult(session=commit.session))
        (push,) = _press(controller, "ENTER")

        controller.update(PushResult(session=push.session, error=ErrorInfo("gateway", "git push: rejected")))
        self.assertIs(controller.state.modal, Modal.PUSH)
        self.assertEqual(controller.state.modal_error, "git push: rejected")
        (retry,) = _press(controller, "ENTER")
        self.assertIsInstance(retry, Push)

    def test_cancel_clears_error_and_closes(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "ENTER")
        self.assertTrue(controller.state.modal_error)

        _press(controller, "ESC")
        self.assertIs(controller.state.modal, Modal.NONE)
        self.assertEqual(controller.state.modal_error, "")
        self.assertFalse(controller.state.should_quit)


class LateModalResultTests(unittest.TestCase):
    def test_late_commit_failure_after_cancel_only_records_error(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "x")
        (commit,) = _press(controller, "ENTER")
        _press(controller, "ESC")

        error = ErrorInfo(kind="gateway", message="git commit: boom")
        self.assertEqual(controller.update(CommitResult(session=commit.session, error=error)), [])
        self.assertIs(controller.state.modal, Modal.NONE)
        self.assertEqual(controller.state.modal_error, "")
        self.assertEqual(controller.state.last_error, error)

    def test_late_commit_success_does_not_reopen_but_refreshes(self) -> None:
        controller = _controller()
        _press(controller, "ENTER", "x")
        (commit,) = _press(controller, "ENTER")
        _press(controller, "ESC", "ENTER")

        commands = controller.update(CommitResult(session=commit.session))
        self.assertIs(controller.state.modal, Modal.COMMIT)
        self.assertEqual(len(commands), 1)
        self.assertIsInstance(commands[0], Refresh)


class HelpModalTests(unittest.TestCase):
    def test_help_opens_and_closes_without_side_effects(self) -> None:
        for close_key in ("ENTER", "ESC"):
            controller = _controller()
            self.assertEqual(_press(controller, "h"), [])
            self.assertIs(controller.state.modal, Modal.HELP)
            self.assertEqual(_press(controller, "DOWN", close_key), [])
            self.assertIs(controller.state.modal, Modal.NONE)
            self.assertEqual(controller.state.selected_idx, 0)


if __name__ == "__main__":
    unittest.main()
