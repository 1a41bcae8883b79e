"""Metadata probe and formatting tests."""

from __future__ import annotations

import os
import pwd
import tempfile
import time
import unittest
from pathlib import Path

from lazyfm.file_model.probe import format_mtime, format_size, probe
from lazyfm.file_model.types import Metadata, ProbeFailure


class FormatSizeTests(unittest.TestCase):
    def test_thresholds(self) -> None:
        cases = {
            0: "0B",
            1023: "1023B",
            1024: "1.0KB",
            1536: "1.5KB",
            1024 * 1024: "1.0MB",
            5 * 1024 * 1024 + 512 * 1024: "5.5MB",
            1 << 30: "1.0GB",
            (5 << 30) // 2: "2.5GB",
        }
        for num_bytes, expected in cases.items():
            with self.subTest(num_bytes=num_bytes):
                self.assertEqual(format_size(num_bytes), expected)

    def test_fraction_is_truncated_not_rounded(self) -> None:
        cases = {
            1024 * 1024 - 1: "1023.9KB",
            2047: "1.9KB",
            (1 << 30) - 1: "1023.9MB",
            (2 << 30) - 1: "1.9GB",
        }
        for num_bytes, expected in cases.items():
            with self.subTest(num_bytes=num_bytes):
                self.assertEqual(format_size(num_bytes), expected)

    def test_non_numeric_or_missing_renders_zero(self) -> None:
        for value in (None, "12", True, -1, 3.5):
            with self.subTest(value=value):
                self.assertEqual(format_size(value), "0B")


class FormatMtimeTests(unittest.TestCase):
    def test_missing_or_zero_timestamp_is_unknown(self) -> None:
        self.assertEqual(format_mtime(None), "unknown")
        self.assertEqual(format_mtime(0), "unknown")

    def test_renders_local_calendar_date(self) -> None:
        stamp = 1_700_000_000.0
        self.assertEqual(format_mtime(stamp), time.strftime("%Y-%m-%d", time.localtime(stamp)))


class ProbeTests(unittest.TestCase):
    def test_probe_collects_all_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "hello.txt"
            target.write_text("hello", encoding="utf-8")
            os.chmod(target, 0o640)

            result = probe(target)

            self.assertIsInstance(result, Metadata)
            assert isinstance(result, Metadata)
            self.assertEqual(result.size, "5B")
            self.assertEqual(result.size_bytes, 5)
            self.assertEqual(result.permissions, "-rw-r-----")
            self.assertEqual(result.modified, time.strftime("%Y-%m-%d", time.localtime(target.stat().st_mtime)))
            try:
                expected_owner = pwd.getpwuid(os.getuid()).pw_name
            except KeyError:
                expected_owner = str(os.getuid())
            self.assertEqual(result.owner, expected_owner)
            self.assertTrue(result.group)

    def test_probe_does_not_follow_symlinks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            link = Path(tmp) / "link"
            link.symlink_to(Path(tmp) / "missing")

            result = probe(link)

            self.assertIsInstance(result, Metadata)
            assert isinstance(result, Metadata)
            self.assertTrue(result.permissions.startswith("l"))

    def test_probe_failure_for_vanished_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"

            result = probe(missing)

            self.assertIsInstance(result, ProbeFailure)
            self.assertEqual(result.path, missing)


if __name__ == "__main__":
    unittest.main()
