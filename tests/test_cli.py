"""CLI argument handling for ``wing.cli.main``."""

from __future__ import annotations

import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from wing import __version__, cli
from wing.errors import StartupError


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        for patcher in (
            mock.patch("wing.cli.configure_logging"),
            mock.patch("wing.runtime.config.CONFIG_PATH", self.root / "config.json"),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_version_prints_and_exits_zero(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            cli.main(["--version"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, out.getvalue())

    def test_defaults_to_current_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            with mock.patch("wing.cli.run_dashboard") as run_dashboard:
                cli.main([])
        finally:
            os.chdir(previous_cwd)

        (app_config,) = run_dashboard.call_args.args
        self.assertEqual(app_config.repo_path, self.root)
        self.assertEqual(app_config.refresh_seconds, 2.0)
        self.assertFalse(app_config.no_color)

    def test_flags_reach_config(self) -> None:
        with mock.patch("wing.cli.run_dashboard") as run_dashboard:
            cli.main(["--repo", str(self.root), "--refresh", "0", "--theme", "ocean", "--style", "vim", "--no-color"])

        (app_config,) = run_dashboard.call_args.args
        self.assertEqual(app_config.refresh_seconds, 0.0)
        self.assertEqual(app_config.theme, "ocean")
        self.assertEqual(app_config.style, "vim")
        self.assertTrue(app_config.no_color)

    def test_missing_repo_exits_with_error(self) -> None:
        with mock.patch("wing.cli.run_dashboard") as run_dashboard, self.assertRaises(SystemExit) as ctx:
            cli.main(["--repo", str(self.root / "missing")])

        run_dashboard.assert_not_called()
        self.assertNotEqual(ctx.exception.code, 0)
        self.assertIn("not found", str(ctx.exception.code))

    def test_startup_error_exits_nonzero(self) -> None:
        with mock.patch("wing.cli.run_dashboard", side_effect=StartupError("no tty")), self.assertRaises(
            SystemExit
        ) as ctx:
            cli.main(["--repo", str(self.root)])

        self.assertIn("no tty", str(ctx.exception.code))

    def test_negative_refresh_is_rejected(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main(["--refresh", "-1"])
        self.assertEqual(ctx.exception.code, 2)

    def test_unknown_log_level_is_rejected(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main(["--log-level", "chatty"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
