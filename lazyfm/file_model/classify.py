"""Multi-stage file type detection.

Stages run in a fixed order and the first hit wins:

1. filesystem kind (missing, symlink, directory, non-regular)
2. extension table
3. filename patterns
4. content oracle (``file(1)``) for the long tail

Earlier stages shadow later ones on purpose, e.g. ``app.log`` is a log even
if its bytes look like binary data. The oracle is the only expensive stage.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

from .oracle import ContentOracle, describe_file_content
from .types import TypeTag

_EXTENSION_GROUPS: tuple[tuple[TypeTag, str], ...] = (
    (TypeTag.TEXT, "txt md markdown rst text nfo readme"),
    (TypeTag.CONFIG, "ini cfg conf config toml yaml yml env properties lock editorconfig gitignore gitattributes"),
    (TypeTag.SHELL, "sh bash zsh ksh fish csh bashrc zshrc profile"),
    (TypeTag.PYTHON, "py pyw pyi python ipynb"),
    (TypeTag.JAVASCRIPT, "js mjs cjs jsx ts tsx json"),
    (TypeTag.C_CPP, "c h cc cpp cxx hh hpp hxx"),
    (TypeTag.JAVA, "java kt kts"),
    (TypeTag.PHP, "php phtml"),
    (TypeTag.RUBY, "rb erb rake gemspec"),
    (TypeTag.GOLANG, "go"),
    (TypeTag.RUST, "rs"),
    (TypeTag.WEB, "html htm xhtml vue svelte"),
    (TypeTag.STYLE, "css scss sass less"),
    (TypeTag.XML, "xml xsd xsl xslt plist rss atom"),
    (TypeTag.IMAGE, "jpg jpeg png gif bmp svg webp ico tif tiff heic"),
    (TypeTag.AUDIO, "mp3 wav flac ogg aac m4a opus wma"),
    (TypeTag.VIDEO, "mp4 avi mkv mov webm wmv flv m4v mpeg mpg"),
    (TypeTag.DOCUMENT, "pdf doc docx odt rtf epub tex"),
    (TypeTag.SPREADSHEET, "xls xlsx ods csv tsv"),
    (TypeTag.PRESENTATION, "ppt pptx odp key"),
    (TypeTag.ARCHIVE, "zip tar gz tgz bz2 xz 7z rar zst jar deb rpm"),
    (TypeTag.LOG, "log"),
    (TypeTag.BINARY, "bin o a so dll exe dylib class pyc pyo obj wasm"),
    (TypeTag.DATA, "db sqlite sqlite3 dat pkl pickle npy parquet"),
)

EXTENSION_TABLE: dict[str, TypeTag] = {}
for _tag, _extensions in _EXTENSION_GROUPS:
    for _ext in _extensions.split():
        EXTENSION_TABLE.setdefault(_ext, _tag)

CONFIG_FILENAMES = frozenset({"makefile", "dockerfile", "vagrantfile"})
TEXT_NAME_PREFIXES = ("readme", "license", "changelog", "todo")
BACKUP_SUFFIXES = (".bak", ".backup", ".tmp", ".temp")
COREDUMP_NAME = "core"


def extension_of(name: str) -> str:
    """Lower-cased text after the final dot, or ``""`` without one."""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


def classify_by_extension(name: str) -> TypeTag | None:
    ext = extension_of(name)
    if not ext:
        return None
    return EXTENSION_TABLE.get(ext)


def classify_by_name(name: str) -> TypeTag | None:
    lowered = name.lower()
    if lowered in CONFIG_FILENAMES:
        return TypeTag.CONFIG
    if lowered.startswith(TEXT_NAME_PREFIXES):
        return TypeTag.TEXT
    if lowered.endswith(BACKUP_SUFFIXES):
        return TypeTag.BACKUP
    if lowered == COREDUMP_NAME or lowered.startswith(COREDUMP_NAME + "."):
        return TypeTag.COREDUMP
    return None


def classify_executable_description(description: str | None) -> TypeTag:
    if description is None:
        return TypeTag.EXEC
    lowered = description.lower()
    if "shell script" in lowered or "bash script" in lowered:
        return TypeTag.SHELL
    if "python script" in lowered:
        return TypeTag.PYTHON
    if "text" in lowered:
        return TypeTag.SCRIPT
    return TypeTag.EXEC


def classify_plain_description(description: str | None) -> TypeTag:
    if description is None:
        return TypeTag.UNKNOWN
    lowered = description.lower()
    if "text" in lowered:
        return TypeTag.TEXT
    if "image" in lowered:
        return TypeTag.IMAGE
    if "audio" in lowered:
        return TypeTag.AUDIO
    if "video" in lowered:
        return TypeTag.VIDEO
    if "archive" in lowered or "compressed" in lowered:
        return TypeTag.ARCHIVE
    if "data" in lowered or "binary" in lowered:
        return TypeTag.DATA
    return TypeTag.UNKNOWN


def _is_executable(path: Path) -> bool:
    return os.access(path, os.X_OK)


def classify(
    path: Path,
    oracle: ContentOracle = describe_file_content,
    is_executable: Callable[[Path], bool] = _is_executable,
) -> TypeTag:
    """Return the ``TypeTag`` for ``path``; never raises.

    Symlinks are reported as ``link`` without following them, so a dangling
    link still classifies as ``link`` rather than ``notfound``.
    """
    try:
        st = os.lstat(path)
    except (OSError, ValueError):
        return TypeTag.NOTFOUND

    mode = st.st_mode
    if stat.S_ISLNK(mode):
        return TypeTag.LINK
    if stat.S_ISDIR(mode):
        return TypeTag.DIR
    if not stat.S_ISREG(mode):
        return TypeTag.SPECIAL

    name = path.name
    tag = classify_by_extension(name)
    if tag is not None:
        return tag
    tag = classify_by_name(name)
    if tag is not None:
        return tag

    try:
        description = oracle(path)
    except Exception:
        description = None
    if is_executable(path):
        return classify_executable_description(description)
    return classify_plain_description(description)


__all__ = [
    "EXTENSION_TABLE",
    "extension_of",
    "classify_by_extension",
    "classify_by_name",
    "classify_executable_description",
    "classify_plain_description",
    "classify",
]
