from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from wing.git.porcelain import (
    iter_porcelain_records,
    parse_status_output,
    sort_and_dedupe,
    split_null_paths,
)
from wing.git.types import FileStatusEntry


class PorcelainParsingTests(unittest.TestCase):
    def test_split_null_paths_drops_terminator(self) -> None:
        self.assertEqual(split_null_paths("a.txt\0b/c.txt\0"), ["a.txt", "b/c.txt"])
        self.assertEqual(split_null_paths(""), [])

    def test_rename_records_report_destination_only(self) -> None:
        output = " M src/app.py\0R  new.py\0old.py\0?? notes.txt\0"
        self.assertEqual(
            iter_porcelain_records(output),
            [(" M", "src/app.py"), ("R ", "new.py"), ("??", "notes.txt")],
        )

    def test_parse_status_trims_codes_and_sorts(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            entries = parse_status_output(Path(tmp), " M z.py\0A  a.py\0MM m.py\0")

        self.assertEqual(
            entries,
            [
                FileStatusEntry(path="a.py", status="A"),
                FileStatusEntry(path="m.py", status="MM"),
                FileStatusEntry(path="z.py", status="M"),
            ],
        )

    def test_untracked_directory_expands_into_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "new" / "deep").mkdir(parents=True)
            (root / "new" / "one.txt").write_text("1", encoding="utf-8")
            (root / "new" / "deep" / "two.txt").write_text("2", encoding="utf-8")

            entries = parse_status_output(root, "?? new/\0")

        self.assertEqual(
            entries,
            [
                FileStatusEntry(path="new/deep/two.txt", status="??"),
                FileStatusEntry(path="new/one.txt", status="??"),
            ],
        )
        self.assertTrue(all(entry.is_untracked for entry in entries))

    def test_sort_and_dedupe_keeps_first_entry(self) -> None:
        entries = [
            FileStatusEntry(path="b", status="M"),
            FileStatusEntry(path="a"),
            FileStatusEntry(path="b", status="??"),
        ]
        self.assertEqual(
            sort_and_dedupe(entries),
            [FileStatusEntry(path="a"), FileStatusEntry(path="b", status="M")],
        )


if __name__ == "__main__":
    unittest.main()
