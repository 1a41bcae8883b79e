"""Delete collaborator guarded by an explicit yes/no confirmation."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def is_confirmed(answer: str) -> bool:
    """Only ``y``/``Y`` confirms; empty or any other input cancels."""
    return answer.strip() in {"y", "Y"}


def remove_path(target: Path) -> str | None:
    """Remove ``target`` (recursively for directories).

    Returns an error message on failure; never raises ``OSError``.
    """
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except FileNotFoundError:
        logger.warning("delete failed, %s vanished", target)
        return f"File no longer exists: {target}"
    except OSError as exc:
        logger.warning("delete failed for %s: %s", target, exc)
        return f"Failed to delete {target}: {exc.strerror or exc}"
    logger.info("deleted %s", target)
    return None
