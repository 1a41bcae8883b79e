"""Editor launch helpers for direct and elevated file edits.

Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def _run_editor(cmd: list[str], target: Path) -> str | None:
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as exc:
        logger.warning("failed to launch %s for %s: %s", cmd[0], target, exc)
        return f"Failed to launch editor: {exc}"
    if proc.returncode != 0:
        logger.warning("editor exited with status %d for %s", proc.returncode, target)
        return f"Editor exited with status {proc.returncode}."
    logger.info("edited %s", target)
    return None


def launch_editor(target: Path, editor: tuple[str, ...]) -> str | None:
    if not editor:
        return "Cannot edit: no editor configured."
    return _run_editor([*editor, str(target)], target)


def launch_elevated_editor(
    target: Path,
    editor: tuple[str, ...],
    elevate_command: tuple[str, ...],
) -> str | None:
    """Run the editor through ``elevate_command`` (for example ``sudo``)."""
    if not elevate_command:
        return "Cannot edit: no elevation command configured."
    if not editor:
        return "Cannot edit: no editor configured."
    return _run_editor([*elevate_command, *editor, str(target)], target)
