"""Text rendering for the listing table, action menu, and notices."""

from __future__ import annotations

from ..file_model.fs import Listing
from ..file_model.types import Entry
from ..runtime.actions import ACTION_DELETE, ACTION_EDIT, ACTION_ENTER, ActionSet
from .theme import UITheme, icon_for

RULE = "=" * 80
SHORT_RULE = "=" * 46
ROW_FORMAT = "{number:<4} {icon} {name:<25} {modified:<12} {size:<9} {owner:<9} {group:<9} {permissions:<12}"
PARENT_PLACEHOLDERS = {
    "modified": "--------",
    "size": "-----",
    "owner": "---",
    "group": "---",
    "permissions": "drwxr-xr-x",
}

ACTION_LABELS = {
    ACTION_ENTER: "Open",
    ACTION_EDIT: "Edit file",
    ACTION_DELETE: "Delete file",
}
ACTION_KEYS = {
    ACTION_ENTER: "1",
    ACTION_EDIT: "2",
    ACTION_DELETE: "3",
}


def render_header(listing: Listing, theme: UITheme) -> list[str]:
    state = listing.page_state
    return [
        f"{theme.heading}📁 Current directory: {theme.label}{listing.directory}{theme.reset}"
        f"  (page {state.current_page}/{state.total_pages}, {listing.entry_count} entries)",
        SHORT_RULE,
        f"{theme.label}"
        + ROW_FORMAT.format(
            number="No.",
            icon="  ",
            name="Name",
            modified="Modified",
            size="Size",
            owner="Owner",
            group="Group",
            permissions="Permissions",
        )
        + theme.reset,
        RULE,
    ]


def render_entry(entry: Entry, theme: UITheme) -> str:
    if entry.is_parent:
        fields = dict(PARENT_PLACEHOLDERS)
    else:
        fields = {name: entry.field(name) for name in PARENT_PLACEHOLDERS}
    color = theme.color_for(entry.type_tag)
    row = ROW_FORMAT.format(
        number=entry.number,
        icon=icon_for(entry.type_tag),
        name=entry.display_name,
        **fields,
    )
    number_width = 4
    return f"{theme.number}{row[:number_width]}{theme.reset}{color}{row[number_width:]}{theme.reset}"


def render_listing(listing: Listing, theme: UITheme) -> list[str]:
    lines = render_header(listing, theme)
    if listing.error is not None:
        lines.append(f"{theme.error}❌ Cannot open directory: {listing.error}{theme.reset}")
    elif not listing.entries:
        lines.append("(empty)")
    lines.extend(render_entry(entry, theme) for entry in listing.entries)
    lines.append(SHORT_RULE)
    return lines


def render_commands(listing: Listing) -> list[str]:
    shown = listing.number_range
    lines = []
    if shown:
        lines.append(f"[{shown.start}-{shown.stop - 1}] select an entry")
    lines.extend(
        [
            "[n] next page  [p] previous page  [s] page size  [u] up",
            "[c] refresh  [0] quit",
            RULE,
        ]
    )
    return lines


def render_action_menu(entry: Entry, actions: ActionSet, theme: UITheme) -> list[str]:
    lines = [
        "",
        SHORT_RULE,
        f"{theme.warning}📁 Actions for: {theme.label}{entry.display_name}{theme.reset}",
        SHORT_RULE,
    ]
    for action in actions.actions:
        label = ACTION_LABELS[action]
        if action == ACTION_ENTER and not entry.type_tag.is_directory_like:
            label = "View contents"
        lines.append(f"[{ACTION_KEYS[action]}] {label}")
    lines.extend(["[c] Cancel", "[0] Quit", SHORT_RULE])
    return lines


def render_notice(message: str, theme: UITheme, kind: str = "error") -> str:
    if kind == "error":
        return f"{theme.error}❌ {message}{theme.reset}"
    if kind == "success":
        return f"{theme.success}✅ {message}{theme.reset}"
    return f"{theme.warning}{message}{theme.reset}"


__all__ = [
    "RULE",
    "ACTION_KEYS",
    "render_header",
    "render_entry",
    "render_listing",
    "render_commands",
    "render_action_menu",
    "render_notice",
]
