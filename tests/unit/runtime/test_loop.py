"""Scripted sessions through the interactive browser loop."""

from __future__ import annotations

import io
import tempfile
import unittest
from collections.abc import Iterable
from pathlib import Path
from unittest import mock

from lazyfm.runtime.config import Settings
from lazyfm.runtime.loop import BrowserSession, Collaborators
from lazyfm.runtime.navigation import NavigationController


class ScriptedInput:
    """Feed canned answers to prompts; EOF once exhausted."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


class BrowserSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        # 1 "..", 2 "a.txt", 3 "b.py", 4 "sub"
        (self.root / "a.txt").write_text("# note\nhello\n", encoding="utf-8")
        (self.root / "b.py").write_text("print('b')\n", encoding="utf-8")
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.md").write_text("inner\n", encoding="utf-8")
        self.settings = Settings(page_size=10, editor=("myeditor",), color=False)
        self.edit = mock.Mock(return_value=None)
        self.elevated_edit = mock.Mock(return_value=None)
        self.view = mock.Mock(return_value=["01 # note", "02 hello"])

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, answers: Iterable[str], page_size: int = 10) -> tuple[int, str, BrowserSession, ScriptedInput]:
        scripted = ScriptedInput(answers)
        output = io.StringIO()
        controller = NavigationController(self.root, page_size=page_size)
        collaborators = Collaborators(edit=self.edit, elevated_edit=self.elevated_edit, view=self.view)
        session = BrowserSession(
            controller,
            self.settings,
            input_fn=scripted,
            output=output,
            collaborators=collaborators,
            clear_screen=False,
        )
        status = session.run()
        return status, output.getvalue(), session, scripted

    def test_quit_exits_with_zero(self) -> None:
        status, out, _session, _scripted = self._run(["0"])
        self.assertEqual(status, 0)
        self.assertIn("a.txt", out)
        self.assertIn("Exiting", out)

    def test_end_of_input_exits_with_zero(self) -> None:
        status, _out, _session, _scripted = self._run([])
        self.assertEqual(status, 0)

    def test_invalid_selection_reprompts_without_state_change(self) -> None:
        _status, out, session, _scripted = self._run(["9", "abc", "", "0"])
        self.assertIn("invalid number 9", out)
        self.assertIn("invalid input 'abc'", out)
        self.assertEqual(session.controller.directory, self.root)

    def test_page_boundaries_are_reported(self) -> None:
        _status, out, session, _scripted = self._run(["n", "p", "0"])
        self.assertIn("already at the last page", out)
        self.assertIn("already at the first page", out)
        self.assertEqual(session.controller.page_state.current_page, 1)

    def test_resize_then_page_forward(self) -> None:
        _status, out, session, _scripted = self._run(["s", "2", "n", "0"])
        self.assertEqual(session.controller.page_state.page_size, 2)
        self.assertEqual(session.controller.page_state.current_page, 2)
        self.assertIn("page 2/2", out)

    def test_resize_rejects_out_of_range(self) -> None:
        _status, out, session, _scripted = self._run(["s", "101", "0"])
        self.assertIn("page size must be between 1 and 100", out)
        self.assertEqual(session.controller.page_state.page_size, 10)

    def test_enter_directory_and_go_up(self) -> None:
        _status, out, session, _scripted = self._run(["4", "1", "0"])
        self.assertEqual(session.controller.directory, self.root / "sub")
        self.assertIn("inner.md", out)

        _status, _out, session, _scripted = self._run(["4", "1", "u", "0"])
        self.assertEqual(session.controller.directory, self.root)

    def test_directory_menu_offers_only_enter(self) -> None:
        _status, out, _session, _scripted = self._run(["4", "2", "c", "0"])
        self.assertIn("invalid choice", out)
        self.assertNotIn("[3] Delete file", out)

    def test_view_file(self) -> None:
        _status, out, _session, scripted = self._run(["2", "1", "", "0"])
        self.view.assert_called_once()
        self.assertEqual(self.view.call_args.args[0], self.root / "a.txt")
        self.assertIn("02 hello", out)
        self.assertTrue(any("Press Enter" in prompt for prompt in scripted.prompts))

    def test_edit_file_directly(self) -> None:
        _status, out, _session, _scripted = self._run(["3", "2", "0"])
        self.edit.assert_called_once_with(self.root / "b.py", ("myeditor",))
        self.assertIn("Edited b.py", out)

    def test_edit_failure_is_reported(self) -> None:
        self.edit.return_value = "Editor exited with status 3."
        _status, out, session, _scripted = self._run(["3", "2", "0"])
        self.assertIn("Editor exited with status 3.", out)
        self.assertEqual(session.controller.directory, self.root)

    def test_read_only_file_uses_elevated_edit_after_confirmation(self) -> None:
        self.settings = Settings(page_size=10, editor=("myeditor",), elevate_command=("sudo",), color=False)
        with mock.patch("lazyfm.runtime.actions.os.access", return_value=False):
            self._run(["3", "2", "y", "0"])
        self.edit.assert_not_called()
        self.elevated_edit.assert_called_once_with(self.root / "b.py", ("myeditor",), ("sudo",))

    def test_read_only_file_without_elevation_is_rejected(self) -> None:
        with mock.patch("lazyfm.runtime.actions.os.access", return_value=False):
            _status, out, _session, _scripted = self._run(["3", "2", "0"])
        self.edit.assert_not_called()
        self.assertIn("without write permission", out)

    def test_delete_requires_affirmative_confirmation(self) -> None:
        target = self.root / "a.txt"
        for answer in ("n", "", "x", "yes"):
            with self.subTest(answer=answer):
                _status, out, _session, _scripted = self._run(["2", "3", answer, "0"])
                self.assertTrue(target.exists())
                self.assertIn("Delete cancelled", out)

        _status, out, _session, _scripted = self._run(["2", "3", "Y", "0"])
        self.assertFalse(target.exists())
        self.assertIn("Deleted a.txt", out)

    def test_vanished_file_is_reported_and_relisted(self) -> None:
        scripted_answers = ["2"]

        def remove_then_choose(prompt: str) -> str:
            if scripted_answers:
                return scripted_answers.pop(0)
            if "Menu" in prompt and (self.root / "a.txt").exists():
                (self.root / "a.txt").unlink()
                return "1"
            if "Number" in prompt:
                return "0"
            raise EOFError

        output = io.StringIO()
        session = BrowserSession(
            NavigationController(self.root, page_size=10),
            self.settings,
            input_fn=remove_then_choose,
            output=output,
            collaborators=Collaborators(view=self.view),
            clear_screen=False,
        )
        self.assertEqual(session.run(), 0)
        self.view.assert_not_called()
        self.assertIn("file no longer exists", output.getvalue())

    def test_menu_quit_ends_session(self) -> None:
        status, _out, _session, scripted = self._run(["2", "0"])
        self.assertEqual(status, 0)
        self.assertFalse(any("Number" in prompt for prompt in scripted.prompts[1:]))


if __name__ == "__main__":
    unittest.main()
