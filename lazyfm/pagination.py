"""Page-size driven windowing over a listing of variable length."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import InvalidInputError

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageState:
    """Current page window; ``1 <= current_page <= total_pages`` always."""

    page_size: int
    current_page: int = 1
    total_pages: int = 1

    @property
    def first_index(self) -> int:
        return (self.current_page - 1) * self.page_size

    def window(self, entry_count: int) -> range:
        """Zero-based entry indices visible on the current page."""
        start = min(self.first_index, max(0, entry_count))
        stop = min(self.first_index + self.page_size, max(0, entry_count))
        return range(start, stop)

    def display_number(self, local_index: int) -> int:
        return self.first_index + local_index + 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1


def is_valid_page_size(page_size: object) -> bool:
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        return False
    return MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE


def page_count(entry_count: int, page_size: int) -> int:
    if entry_count <= 0:
        return 1
    return max(1, -(-entry_count // page_size))


def recompute(entry_count: int, page_size: int, current_page: int) -> PageState:
    """Return a ``PageState`` for ``entry_count`` entries with ``current_page`` clamped."""
    if not is_valid_page_size(page_size):
        raise InvalidInputError(f"page size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}")
    total_pages = page_count(entry_count, page_size)
    clamped = max(1, min(current_page, total_pages))
    return PageState(page_size=page_size, current_page=clamped, total_pages=total_pages)


def resize(state: PageState, page_size: int) -> PageState:
    """Switch page size and jump back to page 1.

    Raises ``InvalidInputError`` for sizes outside ``[1, 100]``; the caller's
    state is left untouched in that case.
    """
    if not is_valid_page_size(page_size):
        raise InvalidInputError(f"page size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}")
    return replace(state, page_size=page_size, current_page=1)


def parse_page_size(text: str) -> int:
    stripped = text.strip()
    try:
        value = int(stripped)
    except ValueError as exc:
        raise InvalidInputError(f"not a number: {stripped!r}") from exc
    if not is_valid_page_size(value):
        raise InvalidInputError(f"page size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}")
    return value


__all__ = [
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PageState",
    "is_valid_page_size",
    "page_count",
    "recompute",
    "resize",
    "parse_page_size",
]
