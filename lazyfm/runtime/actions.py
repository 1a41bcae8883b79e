"""Resolve which actions a selected entry offers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..file_model.types import Entry, TypeTag

ACTION_ENTER = "enter"
ACTION_EDIT = "edit"
ACTION_DELETE = "delete"

EDIT_DIRECT = "direct"
EDIT_ELEVATED = "elevated"

_FILE_ACTIONS = (ACTION_ENTER, ACTION_EDIT, ACTION_DELETE)
_UNSUPPORTED_REASONS = {
    TypeTag.LINK: "symbolic links are not supported",
    TypeTag.SPECIAL: "special files are not supported",
    TypeTag.NOTFOUND: "file no longer exists",
}


@dataclass(frozen=True)
class ActionSet:
    """Ordered actions for one entry; empty plus ``reason`` when unsupported."""

    actions: tuple[str, ...]
    reason: str | None = None

    def __contains__(self, action: object) -> bool:
        return action in self.actions

    @property
    def supported(self) -> bool:
        return bool(self.actions)


def resolve_actions(entry: Entry) -> ActionSet:
    tag = entry.type_tag
    if tag.is_directory_like:
        return ActionSet(actions=(ACTION_ENTER,))
    if tag in _UNSUPPORTED_REASONS:
        return ActionSet(actions=(), reason=_UNSUPPORTED_REASONS[tag])
    return ActionSet(actions=_FILE_ACTIONS)


def can_view(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def resolve_edit_mode(path: Path, elevation_available: bool) -> str | None:
    """Pick direct or elevated editing; ``None`` when neither is possible."""
    if not path.is_file():
        return None
    if os.access(path, os.W_OK):
        return EDIT_DIRECT
    if elevation_available:
        return EDIT_ELEVATED
    return None


__all__ = [
    "ACTION_ENTER",
    "ACTION_EDIT",
    "ACTION_DELETE",
    "EDIT_DIRECT",
    "EDIT_ELEVATED",
    "ActionSet",
    "resolve_actions",
    "can_view",
    "resolve_edit_mode",
]
