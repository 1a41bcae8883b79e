"""Domain datatypes for classified directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TypeTag(str, Enum):
    """Closed set of classification labels for one filesystem entry."""

    DIR = "dir"
    PARENT = "parent"
    LINK = "link"
    SPECIAL = "special"
    NOTFOUND = "notfound"
    TEXT = "text"
    CONFIG = "config"
    SHELL = "shell"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    C_CPP = "c_cpp"
    JAVA = "java"
    PHP = "php"
    RUBY = "ruby"
    GOLANG = "golang"
    RUST = "rust"
    WEB = "web"
    STYLE = "style"
    XML = "xml"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    ARCHIVE = "archive"
    LOG = "log"
    BINARY = "binary"
    BACKUP = "backup"
    COREDUMP = "coredump"
    SCRIPT = "script"
    EXEC = "exec"
    DATA = "data"
    UNKNOWN = "unknown"

    @property
    def is_directory_like(self) -> bool:
        return self in (TypeTag.DIR, TypeTag.PARENT)

    @property
    def is_regular_file(self) -> bool:
        return self not in _NON_FILE_TAGS


_NON_FILE_TAGS = frozenset(
    {TypeTag.DIR, TypeTag.PARENT, TypeTag.LINK, TypeTag.SPECIAL, TypeTag.NOTFOUND}
)


@dataclass(frozen=True)
class Metadata:
    """Rendered metadata fields gathered from one ``lstat`` call."""

    size: str
    modified: str
    owner: str
    group: str
    permissions: str
    size_bytes: int | None = None
    mtime: float | None = None


@dataclass(frozen=True)
class ProbeFailure:
    """Metadata query failed; every field renders as ``unknown``."""

    path: Path
    reason: str

    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Entry:
    """One row of a directory listing.

    ``number`` is the 1-based display number used for selection. The
    synthetic parent row carries only ``display_name`` and ``type_tag``.
    """

    path: Path | None
    display_name: str
    type_tag: TypeTag
    number: int = 0
    metadata: Metadata | ProbeFailure | None = None

    @property
    def is_parent(self) -> bool:
        return self.type_tag is TypeTag.PARENT

    def field(self, name: str) -> str:
        """Return a rendered metadata field, ``unknown`` when not probed."""
        if isinstance(self.metadata, Metadata):
            return str(getattr(self.metadata, name))
        return ProbeFailure.UNKNOWN


PARENT_NAME = ".."


def parent_entry(number: int = 1) -> Entry:
    return Entry(path=None, display_name=PARENT_NAME, type_tag=TypeTag.PARENT, number=number)


__all__ = [
    "TypeTag",
    "Metadata",
    "ProbeFailure",
    "Entry",
    "PARENT_NAME",
    "parent_entry",
]
