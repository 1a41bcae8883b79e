"""Directory lister tests: ordering, parent row, lazy probing, failures."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm.file_model.classify import classify
from lazyfm.file_model.fs import list_directory
from lazyfm.file_model.probe import probe
from lazyfm.file_model.types import Metadata, TypeTag
from lazyfm.pagination import PageState


def _no_oracle(path: Path) -> TypeTag:
    return classify(path, oracle=lambda _path: None)


class ListDirectoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _populate(self, count: int) -> None:
        for index in range(count):
            (self.root / f"file{index:03d}.txt").write_text("x\n", encoding="utf-8")

    def test_parent_row_first_then_sorted_children(self) -> None:
        (self.root / "b.txt").write_text("b\n", encoding="utf-8")
        (self.root / "a.py").write_text("a\n", encoding="utf-8")
        (self.root / "sub").mkdir()
        (self.root / ".hidden").write_text("h\n", encoding="utf-8")

        listing = list_directory(self.root, PageState(page_size=10), classifier=_no_oracle)

        self.assertTrue(listing.ok)
        self.assertEqual([entry.display_name for entry in listing.entries], ["..", "a.py", "b.txt", "sub"])
        self.assertEqual(
            [entry.type_tag for entry in listing.entries],
            [TypeTag.PARENT, TypeTag.PYTHON, TypeTag.TEXT, TypeTag.DIR],
        )
        self.assertEqual([entry.number for entry in listing.entries], [1, 2, 3, 4])
        self.assertIsNone(listing.entries[0].path)
        self.assertIsNone(listing.entries[0].metadata)

    def test_show_hidden_includes_dot_entries(self) -> None:
        (self.root / ".hidden").write_text("h\n", encoding="utf-8")

        listing = list_directory(self.root, PageState(page_size=10), show_hidden=True, classifier=_no_oracle)

        self.assertIn(".hidden", [entry.display_name for entry in listing.entries])

    def test_only_visible_window_is_classified_and_probed(self) -> None:
        self._populate(44)
        classifier = mock.Mock(side_effect=_no_oracle)
        prober = mock.Mock(side_effect=probe)

        listing = list_directory(
            self.root,
            PageState(page_size=20, current_page=2),
            classifier=classifier,
            prober=prober,
        )

        self.assertEqual(listing.entry_count, 45)
        self.assertEqual(listing.page_state.total_pages, 3)
        self.assertEqual(classifier.call_count, 20)
        self.assertEqual(prober.call_count, 20)
        self.assertEqual(listing.entries[0].number, 21)
        self.assertEqual(listing.entries[0].display_name, "file019.txt")
        self.assertTrue(all(isinstance(entry.metadata, Metadata) for entry in listing.entries))

    def test_overshooting_page_is_clamped(self) -> None:
        self._populate(44)

        listing = list_directory(self.root, PageState(page_size=20, current_page=4), classifier=_no_oracle)

        self.assertEqual(listing.page_state.current_page, 3)
        self.assertEqual([entry.number for entry in listing.entries], [41, 42, 43, 44, 45])

    def test_empty_directory_has_single_page(self) -> None:
        listing = list_directory(self.root, PageState(page_size=20, current_page=3), classifier=_no_oracle)

        self.assertEqual(listing.page_state.total_pages, 1)
        self.assertEqual(listing.page_state.current_page, 1)
        self.assertEqual([entry.type_tag for entry in listing.entries], [TypeTag.PARENT])

    def test_filesystem_root_has_no_parent_row(self) -> None:
        listing = list_directory(Path("/"), PageState(page_size=1), classifier=_no_oracle)

        self.assertTrue(listing.ok)
        self.assertTrue(all(entry.type_tag is not TypeTag.PARENT for entry in listing.entries))

    def test_unreadable_directory_reports_error(self) -> None:
        listing = list_directory(self.root / "missing", PageState(page_size=20, current_page=2))

        self.assertFalse(listing.ok)
        self.assertIsInstance(listing.error, FileNotFoundError)
        self.assertEqual(listing.entries, ())
        self.assertEqual(listing.page_state, PageState(page_size=20, current_page=1, total_pages=1))

    def test_listing_twice_without_changes_is_identical(self) -> None:
        self._populate(5)
        state = PageState(page_size=3, current_page=2)

        first = list_directory(self.root, state, classifier=_no_oracle)
        second = list_directory(self.root, state, classifier=_no_oracle)

        self.assertEqual(first, second)

    def test_entry_for_number(self) -> None:
        self._populate(5)

        listing = list_directory(self.root, PageState(page_size=3, current_page=2), classifier=_no_oracle)

        self.assertEqual(listing.number_range, range(4, 7))
        self.assertEqual(listing.entry_for_number(4).display_name, "file002.txt")
        self.assertIsNone(listing.entry_for_number(1))


if __name__ == "__main__":
    unittest.main()
