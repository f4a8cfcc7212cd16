from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from wing.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "wing" / "config.json"
        patcher = mock.patch("wing.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_missing_file_gives_defaults(self) -> None:
        resolved = config.resolve_app_config(Path("/repo"))

        self.assertEqual(resolved.refresh_seconds, config.DEFAULT_REFRESH_SECONDS)
        self.assertEqual(resolved.theme, "default")
        self.assertEqual(resolved.style, "monokai")
        self.assertFalse(resolved.tree_view)

    def test_file_values_apply_and_cli_values_win(self) -> None:
        config.save_config({"refresh_seconds": 5, "theme": "ocean", "style": "native", "tree_view": True})

        from_file = config.resolve_app_config(Path("/repo"))
        self.assertEqual((from_file.refresh_seconds, from_file.theme, from_file.style), (5.0, "ocean", "native"))
        self.assertTrue(from_file.tree_view)

        from_cli = config.resolve_app_config(Path("/repo"), refresh_seconds=0.0, theme="default", style="vim")
        self.assertEqual((from_cli.refresh_seconds, from_cli.theme, from_cli.style), (0.0, "default", "vim"))

    def test_invalid_values_are_ignored(self) -> None:
        config.save_config({"refresh_seconds": "soon", "theme": "  ", "tree_view": "yes"})
        resolved = config.resolve_app_config(Path("/repo"))

        self.assertEqual(resolved.refresh_seconds, config.DEFAULT_REFRESH_SECONDS)
        self.assertEqual(resolved.theme, config.DEFAULT_THEME)
        self.assertFalse(resolved.tree_view)

    def test_malformed_json_loads_as_empty(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_save_tree_view_keeps_other_keys(self) -> None:
        config.save_config({"theme": "ocean"})
        config.save_tree_view(True)

        saved = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"theme": "ocean", "tree_view": True})
        self.assertTrue(config.resolve_app_config(Path(".")).tree_view)


if __name__ == "__main__":
    unittest.main()
