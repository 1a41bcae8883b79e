"""Content-type oracle backed by the ``file(1)`` utility.

Only consulted for files that neither extension nor filename patterns could
classify. Returns ``None`` when the utility is missing or fails so callers can
degrade instead of erroring.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

FILE_COMMAND = "file"
ORACLE_TIMEOUT_SECONDS = 2.0

ContentOracle = Callable[[Path], "str | None"]

_FILE_COMMAND_CHECKED = False
_FILE_COMMAND_PATH: str | None = None


def _file_command() -> str | None:
    global _FILE_COMMAND_CHECKED
    global _FILE_COMMAND_PATH

    if not _FILE_COMMAND_CHECKED:
        _FILE_COMMAND_CHECKED = True
        _FILE_COMMAND_PATH = shutil.which(FILE_COMMAND)
        if _FILE_COMMAND_PATH is None:
            logger.debug("content oracle unavailable: %r not on PATH", FILE_COMMAND)
    return _FILE_COMMAND_PATH


def reset_oracle_cache() -> None:
    global _FILE_COMMAND_CHECKED
    global _FILE_COMMAND_PATH

    _FILE_COMMAND_CHECKED = False
    _FILE_COMMAND_PATH = None


def describe_file_content(path: Path, timeout_seconds: float = ORACLE_TIMEOUT_SECONDS) -> str | None:
    """Return ``file -b`` output for ``path`` or ``None`` when unavailable."""
    command = _file_command()
    if command is None:
        return None
    try:
        proc = subprocess.run(
            [command, "-b", "--", str(path)],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("content oracle failed for %s: %s", path, exc)
        return None
    if proc.returncode != 0:
        return None
    description = proc.stdout.strip()
    return description or None


__all__ = [
    "ContentOracle",
    "describe_file_content",
    "reset_oracle_cache",
]
