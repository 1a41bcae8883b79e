"""Directory enumeration and per-page entry construction.

Listing is two-phase: a cheap name-only scan of the whole directory, then
classification and metadata probing for the visible page window only.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..pagination import PageState, recompute
from .classify import classify
from .probe import probe
from .types import Entry, Metadata, ProbeFailure, TypeTag, parent_entry

logger = logging.getLogger(__name__)

Classifier = Callable[[Path], TypeTag]
Prober = Callable[[Path], "Metadata | ProbeFailure"]


@dataclass(frozen=True)
class Listing:
    """One rendered page of a directory plus the page state it was cut with.

    ``error`` is set when the directory could not be opened; ``entries`` is
    empty in that case and the caller decides how to recover.
    """

    directory: Path
    entries: tuple[Entry, ...]
    page_state: PageState
    entry_count: int
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def number_range(self) -> range:
        if not self.entries:
            return range(0)
        return range(self.entries[0].number, self.entries[-1].number + 1)

    def entry_for_number(self, number: int) -> Entry | None:
        for entry in self.entries:
            if entry.number == number:
                return entry
        return None


def is_filesystem_root(directory: Path) -> bool:
    """Lexical check after collapsing ``..``; a symlink to ``/`` still has a parent."""
    absolute = Path(os.path.abspath(directory))
    return absolute.parent == absolute


def scan_child_names(directory: Path, show_hidden: bool = False) -> list[str]:
    """Return visible child names sorted by code point.

    Raises ``OSError`` when the directory cannot be opened.
    """
    names: list[str] = []
    with os.scandir(directory) as entries:
        for child in entries:
            name = child.name
            if not show_hidden and name.startswith("."):
                continue
            names.append(name)
    names.sort()
    return names


def build_entry(path: Path, number: int, classifier: Classifier = classify, prober: Prober = probe) -> Entry:
    return Entry(
        path=path,
        display_name=path.name,
        type_tag=classifier(path),
        number=number,
        metadata=prober(path),
    )


def list_directory(
    directory: Path,
    page_state: PageState,
    show_hidden: bool = False,
    classifier: Classifier = classify,
    prober: Prober = probe,
) -> Listing:
    """List one page of ``directory`` and return it with the clamped page state."""
    try:
        names = scan_child_names(directory, show_hidden=show_hidden)
    except OSError as exc:
        logger.warning("cannot list %s: %s", directory, exc)
        empty_state = recompute(0, page_state.page_size, page_state.current_page)
        return Listing(directory=directory, entries=(), page_state=empty_state, entry_count=0, error=exc)

    has_parent = not is_filesystem_root(directory)
    offset = 1 if has_parent else 0
    entry_count = len(names) + offset
    state = recompute(entry_count, page_state.page_size, page_state.current_page)

    entries: list[Entry] = []
    for local_index, absolute_index in enumerate(state.window(entry_count)):
        number = state.display_number(local_index)
        if has_parent and absolute_index == 0:
            entries.append(parent_entry(number))
            continue
        child_path = directory / names[absolute_index - offset]
        entries.append(build_entry(child_path, number, classifier=classifier, prober=prober))

    return Listing(directory=directory, entries=tuple(entries), page_state=state, entry_count=entry_count)


__all__ = [
    "Listing",
    "is_filesystem_root",
    "scan_child_names",
    "build_entry",
    "list_directory",
]
