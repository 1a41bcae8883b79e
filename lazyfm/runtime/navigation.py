"""Navigation state machine: current directory, page, and selection.

The controller keeps only what is needed to regenerate a listing
(``NavigationState``). Each render pass produces a fresh ``Listing`` that is
used for selection until the next pass.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from ..errors import InvalidInputError, LazyFmError, NotFoundError, PermissionDeniedError
from ..file_model.fs import Listing, is_filesystem_root, list_directory
from ..file_model.types import Entry
from ..pagination import PageState, recompute, resize

logger = logging.getLogger(__name__)

Lister = Callable[..., Listing]


@dataclass(frozen=True)
class NavigationState:
    directory: Path
    page_state: PageState


def error_for_listing(listing: Listing) -> LazyFmError:
    exc = listing.error
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(f"permission denied: {listing.directory}")
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return NotFoundError(f"directory not found: {listing.directory}")
    return LazyFmError(f"cannot open {listing.directory}: {exc}")


class NavigationController:
    """Interpret browsing commands against a ``NavigationState``.

    Non-fatal failures are raised as ``LazyFmError`` subclasses with the state
    left exactly as it was before the command.
    """

    def __init__(
        self,
        start_directory: Path,
        page_size: int,
        show_hidden: bool = False,
        lister: Lister = list_directory,
    ) -> None:
        self.state = NavigationState(
            directory=Path(os.path.abspath(start_directory)),
            page_state=recompute(0, page_size, 1),
        )
        self.show_hidden = show_hidden
        self._lister = lister
        self.listing: Listing | None = None

    @property
    def directory(self) -> Path:
        return self.state.directory

    @property
    def page_state(self) -> PageState:
        return self.state.page_state

    def refresh(self) -> Listing:
        """Re-list the current directory/page, picking up filesystem changes."""
        listing = self._lister(self.state.directory, self.state.page_state, show_hidden=self.show_hidden)
        self.state = replace(self.state, page_state=listing.page_state)
        self.listing = listing
        return listing

    def _current_listing(self) -> Listing:
        if self.listing is None:
            return self.refresh()
        return self.listing

    def select(self, number: int) -> Entry:
        """Return the entry shown with display ``number`` on the current page."""
        listing = self._current_listing()
        entry = listing.entry_for_number(number)
        if entry is None:
            shown = listing.number_range
            if shown:
                raise InvalidInputError(f"invalid number {number} (choose {shown.start}-{shown.stop - 1})")
            raise InvalidInputError(f"invalid number {number} (nothing to select)")
        return entry

    def _change_directory(self, target: Path) -> Listing:
        previous = self.state
        self.state = NavigationState(directory=target, page_state=replace(previous.page_state, current_page=1))
        listing = self.refresh()
        if listing.ok:
            logger.info("changed directory to %s", target)
            return listing

        error = error_for_listing(listing)
        self.state = previous
        self.refresh()
        raise error

    def descend_into(self, entry: Entry) -> Listing:
        if entry.is_parent:
            return self.go_up()
        if not entry.type_tag.is_directory_like or entry.path is None:
            raise InvalidInputError(f"not a directory: {entry.display_name}")
        return self._change_directory(entry.path)

    def go_up(self) -> Listing:
        if is_filesystem_root(self.state.directory):
            raise InvalidInputError("already at the filesystem root")
        return self._change_directory(self.state.directory.parent)

    def next_page(self) -> Listing:
        page_state = self.state.page_state
        if not page_state.has_next:
            raise InvalidInputError("already at the last page")
        self.state = replace(self.state, page_state=replace(page_state, current_page=page_state.current_page + 1))
        return self.refresh()

    def previous_page(self) -> Listing:
        page_state = self.state.page_state
        if not page_state.has_previous:
            raise InvalidInputError("already at the first page")
        self.state = replace(self.state, page_state=replace(page_state, current_page=page_state.current_page - 1))
        return self.refresh()

    def set_page_size(self, page_size: int) -> Listing:
        self.state = replace(self.state, page_state=resize(self.state.page_state, page_size))
        return self.refresh()


__all__ = [
    "NavigationState",
    "NavigationController",
    "error_for_listing",
]
