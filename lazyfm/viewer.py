"""Line-numbered file viewer with comment highlighting.

Lines whose first non-blank character is ``#`` are drawn in the comment
colour; blank lines show only their number. When a Pygments style is
configured, the remaining lines are syntax highlighted.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from .errors import NotFoundError, PermissionDeniedError
from .render.theme import UITheme

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_COMMENT_RE = re.compile(r"^\s*#")


def decode_file_bytes(data: bytes) -> str:
    """Decode as UTF-8 (BOM stripped), else latin-1, which accepts any byte."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def _escape_control(match: re.Match[str]) -> str:
    return f"\\x{ord(match.group()):02x}"


def sanitize_terminal_text(source: str) -> str:
    """Show control characters as ``\\xNN`` so file contents cannot drive the terminal.

    Newlines, carriage returns and tabs are left alone.
    """
    return _CONTROL_RE.sub(_escape_control, source)


def split_lines(source: str) -> list[str]:
    normalized = source.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_comment_line(line: str) -> bool:
    return _COMMENT_RE.match(line) is not None


def is_blank_line(line: str) -> bool:
    return not line.strip()


def highlight_lines(source: str, path: Path, style: str) -> list[str] | None:
    """Highlight ``source`` with Pygments; ``None`` if line counts drift."""
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    try:
        formatter = Terminal256Formatter(style=style)
    except ClassNotFound:
        formatter = Terminal256Formatter()
    rendered = split_lines(highlight(source, lexer, formatter))
    if len(rendered) != len(split_lines(source)):
        return None
    return rendered


def render_file_lines(path: Path, theme: UITheme, style: str | None = None) -> list[str]:
    """Return display rows for ``path``.

    Raises ``NotFoundError`` or ``PermissionDeniedError`` when the file cannot
    be read.
    """
    try:
        source = sanitize_terminal_text(decode_file_bytes(path.read_bytes()))
    except FileNotFoundError as exc:
        raise NotFoundError(f"file no longer exists: {path}") from exc
    except PermissionError as exc:
        raise PermissionDeniedError(f"cannot read file: {path}") from exc
    except IsADirectoryError as exc:
        raise NotFoundError(f"not a regular file: {path}") from exc

    lines = split_lines(source)
    highlighted = highlight_lines(source, path, style) if style and theme.reset else None

    rows: list[str] = []
    for index, line in enumerate(lines):
        number = f"{theme.line_number}{index + 1:02d}{theme.reset}"
        if is_comment_line(line):
            rows.append(f"{number} {theme.comment}{line}{theme.reset}")
        elif is_blank_line(line):
            rows.append(f"{number} ")
        elif highlighted is not None:
            rows.append(f"{number} {highlighted[index]}{theme.reset}")
        else:
            rows.append(f"{number} {line}")
    return rows


__all__ = [
    "decode_file_bytes",
    "sanitize_terminal_text",
    "split_lines",
    "is_comment_line",
    "is_blank_line",
    "highlight_lines",
    "render_file_lines",
]
