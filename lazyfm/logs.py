"""File-only logging setup.

The interactive prompt owns the terminal, so log records never go to
stdout/stderr. A single ``FileHandler`` is attached to the ``lazyfm`` logger.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "lazyfm"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER: logging.Handler | None = None


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Handler:
    """Attach (or replace) the package log handler and return it.

    Falls back to a ``NullHandler`` when ``log_file`` is ``None`` or cannot be
    opened.
    """
    global _HANDLER

    root = logging.getLogger(LOGGER_NAME)
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
        _HANDLER.close()

    handler: logging.Handler
    if log_file is None:
        handler = logging.NullHandler()
    else:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.propagate = False
    _HANDLER = handler
    return handler
