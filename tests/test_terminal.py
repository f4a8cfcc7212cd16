from __future__ import annotations

import termios
import unittest
from unittest import mock

from wing.errors import StartupError
from wing.runtime.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_use_alternate_screen(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("wing.runtime.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "wing.runtime.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("wing.runtime.terminal.os.write") as write_mock, mock.patch(
            "wing.runtime.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h\x1b[?1049l"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("wing.runtime.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_non_tty_raises_startup_error(self) -> None:
        with mock.patch(
            "wing.runtime.terminal.termios.tcgetattr",
            side_effect=termios.error(25, "Inappropriate ioctl for device"),
        ):
            with self.assertRaises(StartupError):
                TerminalController(stdin_fd=0, stdout_fd=1)


if __name__ == "__main__":
    unittest.main()
