"""Line-oriented interactive loop.

Each pass renders one page of the current directory and then reads prompt
commands until one of them changes what should be shown. Errors raised by the
controller or collaborators are caught here and shown as notices; only the
quit command ends the loop.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..editor import launch_editor, launch_elevated_editor
from ..errors import InvalidInputError, LazyFmError, NotFoundError, PermissionDeniedError
from ..file_model.types import Entry
from ..file_ops import is_confirmed, remove_path
from ..pagination import parse_page_size
from ..render.listing import (
    ACTION_KEYS,
    render_action_menu,
    render_commands,
    render_listing,
    render_notice,
)
from ..render.theme import UITheme, theme_for
from ..viewer import render_file_lines
from .actions import (
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_ENTER,
    EDIT_DIRECT,
    EDIT_ELEVATED,
    ActionSet,
    can_view,
    resolve_actions,
    resolve_edit_mode,
)
from .commands import CommandBinding, CommandRegistry
from .config import Settings
from .navigation import NavigationController

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"


@dataclass(frozen=True)
class Collaborators:
    """External operations the loop delegates to; swapped out in tests."""

    edit: Callable[[Path, tuple[str, ...]], str | None] = launch_editor
    elevated_edit: Callable[[Path, tuple[str, ...], tuple[str, ...]], str | None] = launch_elevated_editor
    remove: Callable[[Path], str | None] = remove_path
    view: Callable[..., list[str]] = render_file_lines


class BrowserSession:
    def __init__(
        self,
        controller: NavigationController,
        settings: Settings,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
        collaborators: Collaborators | None = None,
        clear_screen: bool | None = None,
    ) -> None:
        self.controller = controller
        self.settings = settings
        self.theme: UITheme = theme_for(settings.color)
        self._input = input_fn
        self._out = output if output is not None else sys.stdout
        self._collaborators = collaborators if collaborators is not None else Collaborators()
        if clear_screen is None:
            clear_screen = self._out.isatty()
        self._clear_screen = clear_screen
        self._running = True
        self._relisted = False
        self._notices: list[str] = []
        self._commands = CommandRegistry().register_bindings(
            CommandBinding(("0",), self._quit),
            CommandBinding(("c",), self._refresh),
            CommandBinding(("n",), self._next_page),
            CommandBinding(("p",), self._previous_page),
            CommandBinding(("s",), self._resize),
            CommandBinding(("u",), self._go_up),
        )

    def _write(self, line: str = "") -> None:
        self._out.write(line + "\n")
        self._out.flush()

    def _prompt(self, label: str) -> str:
        return self._input(f"{self.theme.prompt}{label} >>> {self.theme.reset}")

    def _error(self, message: str) -> None:
        self._write(render_notice(message, self.theme))

    def _defer(self, message: str, kind: str = "error") -> None:
        self._notices.append(render_notice(message, self.theme, kind))

    def _render(self) -> None:
        listing = self.controller.listing
        if not self._relisted or listing is None:
            listing = self.controller.refresh()
        self._relisted = False
        if self._clear_screen:
            self._out.write(CLEAR_SCREEN)
        for line in render_listing(listing, self.theme):
            self._write(line)
        for notice in self._notices:
            self._write(notice)
        self._notices.clear()
        self._write()
        for line in render_commands(listing):
            self._write(line)

    def run(self) -> int:
        """Run until quit; return the process exit status."""
        try:
            while self._running:
                self._render()
                self._read_command()
        except (EOFError, KeyboardInterrupt):
            self._write()
        self._write(render_notice("🔸 Exiting.", self.theme, kind="info"))
        return 0

    def _read_command(self) -> None:
        """Prompt until a command requires a re-render."""
        while self._running:
            text = self._prompt("Number").strip()
            try:
                if text in self._commands:
                    if self._commands.dispatch(text):
                        return
                    continue
                self._select(self._parse_number(text))
                return
            except LazyFmError as exc:
                self._error(str(exc))

    @staticmethod
    def _parse_number(text: str) -> int:
        if not text.isdigit():
            raise InvalidInputError(f"invalid input {text!r}")
        return int(text)

    def _quit(self) -> bool:
        self._running = False
        return True

    def _refresh(self) -> bool:
        self._defer("Refreshing.", kind="info")
        return True

    def _next_page(self) -> bool:
        self.controller.next_page()
        self._relisted = True
        return True

    def _previous_page(self) -> bool:
        self.controller.previous_page()
        self._relisted = True
        return True

    def _go_up(self) -> bool:
        self.controller.go_up()
        self._relisted = True
        return True

    def _resize(self) -> bool:
        text = self._prompt(f"Page size (1-100, now {self.controller.page_state.page_size})")
        self.controller.set_page_size(parse_page_size(text))
        self._relisted = True
        return True

    def _select(self, number: int) -> None:
        entry = self.controller.select(number)
        actions = resolve_actions(entry)
        if not actions.supported:
            raise InvalidInputError(f"{entry.display_name}: {actions.reason}")
        self._action_menu(entry, actions)

    def _action_menu(self, entry: Entry, actions: ActionSet) -> None:
        for line in render_action_menu(entry, actions, self.theme):
            self._write(line)
        by_key = {ACTION_KEYS[action]: action for action in actions.actions}
        while self._running:
            choice = self._prompt("Menu").strip()
            if choice in {"c", "C"}:
                self._defer("Back to the listing.", kind="info")
                return
            if choice == "0":
                self._quit()
                return
            action = by_key.get(choice)
            if action is None:
                self._error("invalid choice, try again")
                continue
            try:
                self._perform(entry, action)
            except LazyFmError as exc:
                self._defer(str(exc))
            return

    def _perform(self, entry: Entry, action: str) -> None:
        if action == ACTION_ENTER and entry.type_tag.is_directory_like:
            self.controller.descend_into(entry)
            self._relisted = True
            return
        path = entry.path
        if path is None or not path.exists():
            raise NotFoundError(f"file no longer exists: {entry.display_name}")
        if action == ACTION_ENTER:
            self._view(path)
        elif action == ACTION_EDIT:
            self._edit(path)
        elif action == ACTION_DELETE:
            self._delete(path)

    def _view(self, path: Path) -> None:
        if not can_view(path):
            raise PermissionDeniedError(f"cannot read file: {path}")
        rows = self._collaborators.view(path, self.theme, self.settings.syntax_style)
        self._write(f"{self.theme.number}📄 Viewing: {self.theme.label}{path}{self.theme.reset}")
        self._write("=" * 80)
        for row in rows:
            self._write(row)
        self._write()
        self._input(f"{self.theme.success}Press Enter to continue...{self.theme.reset}")

    def _edit(self, path: Path) -> None:
        mode = resolve_edit_mode(path, self.settings.elevation_available)
        if mode == EDIT_DIRECT:
            error = self._collaborators.edit(path, self.settings.editor)
        elif mode == EDIT_ELEVATED:
            elevate = " ".join(self.settings.elevate_command)
            answer = self._input(
                f"{self.theme.warning}No write permission. Edit with '{elevate}'? (y/N) {self.theme.reset}"
            )
            if not is_confirmed(answer):
                self._defer("Edit cancelled.", kind="info")
                return
            error = self._collaborators.elevated_edit(path, self.settings.editor, self.settings.elevate_command)
        else:
            raise PermissionDeniedError(f"cannot edit file without write permission: {path}")
        if error is not None:
            self._defer(error)
        else:
            self._defer(f"Edited {path.name}.", kind="success")

    def _delete(self, path: Path) -> None:
        answer = self._input(f"{self.theme.error}Really delete '{path}'? (y/N) {self.theme.reset}")
        if not is_confirmed(answer):
            self._defer("Delete cancelled.", kind="info")
            return
        error = self._collaborators.remove(path)
        if error is not None:
            self._defer(error)
        else:
            self._defer(f"Deleted {path.name}.", kind="success")


def run_browser(start_directory: Path, settings: Settings, **kwargs) -> int:
    controller = NavigationController(
        start_directory,
        page_size=settings.page_size,
        show_hidden=settings.show_hidden,
    )
    logger.info("starting in %s with page size %d", controller.directory, settings.page_size)
    return BrowserSession(controller, settings, **kwargs).run()


__all__ = [
    "Collaborators",
    "BrowserSession",
    "run_browser",
]
