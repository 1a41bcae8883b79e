"""ANSI palette and icons keyed by entry type.

A disabled theme keeps every field empty so renderers can interpolate
unconditionally.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..file_model.types import TypeTag

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
MAGENTA = "\033[0;35m"
CYAN = "\033[0;36m"
WHITE = "\033[1;37m"
RESET = "\033[0m"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    heading: str
    label: str
    number: str
    error: str
    warning: str
    success: str
    prompt: str
    line_number: str
    comment: str
    type_colors: dict[TypeTag, str]
    default_type_color: str

    def color_for(self, tag: TypeTag) -> str:
        return self.type_colors.get(tag, self.default_type_color)


DEFAULT_THEME = UITheme(
    name="default",
    reset=RESET,
    heading=BLUE,
    label=WHITE,
    number=CYAN,
    error=RED,
    warning=YELLOW,
    success=GREEN,
    prompt=CYAN,
    line_number=YELLOW,
    comment=GREEN,
    type_colors={
        TypeTag.DIR: BLUE,
        TypeTag.PARENT: BLUE,
        TypeTag.LINK: CYAN,
        TypeTag.EXEC: GREEN,
        TypeTag.SCRIPT: GREEN,
        TypeTag.SHELL: GREEN,
        TypeTag.TEXT: WHITE,
        TypeTag.IMAGE: MAGENTA,
        TypeTag.ARCHIVE: YELLOW,
        TypeTag.LOG: CYAN,
        TypeTag.NOTFOUND: RED,
    },
    default_type_color=WHITE,
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    heading="",
    label="",
    number="",
    error="",
    warning="",
    success="",
    prompt="",
    line_number="",
    comment="",
    type_colors={},
    default_type_color="",
)

TYPE_ICONS: dict[TypeTag, str] = {
    TypeTag.DIR: "📁",
    TypeTag.PARENT: "⬆",
    TypeTag.LINK: "🔗",
    TypeTag.EXEC: "⚡",
    TypeTag.SCRIPT: "📜",
    TypeTag.SHELL: "📜",
    TypeTag.TEXT: "📄",
    TypeTag.IMAGE: "🖼",
    TypeTag.ARCHIVE: "📦",
    TypeTag.LOG: "📋",
}
DEFAULT_ICON = "📄"


def icon_for(tag: TypeTag) -> str:
    return TYPE_ICONS.get(tag, DEFAULT_ICON)


def theme_for(color: bool) -> UITheme:
    return DEFAULT_THEME if color else PLAIN_THEME
