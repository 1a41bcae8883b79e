"""Per-entry metadata probe plus size/date formatting.

All fields come from a single ``lstat`` call. Owner and group names fall back
to numeric ids when the account database has no entry for them.
"""

from __future__ import annotations

import grp
import logging
import os
import pwd
import stat
import time
from pathlib import Path

from .types import Metadata, ProbeFailure

logger = logging.getLogger(__name__)

KIB = 1 << 10
MIB = 1 << 20
GIB = 1 << 30
DATE_FORMAT = "%Y-%m-%d"
UNKNOWN = ProbeFailure.UNKNOWN


def _tenths(num_bytes: int, unit: int) -> str:
    # Truncated, never rounded up into the next unit.
    tenths = num_bytes * 10 // unit
    return f"{tenths // 10}.{tenths % 10}"


def format_size(num_bytes: object) -> str:
    """Render a byte count as ``12B``, ``1.5KB``, ``3.0MB``, or ``1.2GB``.

    Anything that is not a non-negative integer (``None``, strings, bools)
    renders as ``0B``.
    """
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, int) or num_bytes < 0:
        return "0B"
    if num_bytes >= GIB:
        return f"{_tenths(num_bytes, GIB)}GB"
    if num_bytes >= MIB:
        return f"{_tenths(num_bytes, MIB)}MB"
    if num_bytes >= KIB:
        return f"{_tenths(num_bytes, KIB)}KB"
    return f"{num_bytes}B"


def format_mtime(mtime: float | None) -> str:
    """Render a POSIX timestamp as a local calendar date."""
    if not mtime:
        return UNKNOWN
    try:
        return time.strftime(DATE_FORMAT, time.localtime(mtime))
    except (OverflowError, OSError, ValueError):
        return UNKNOWN


def _owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def probe(path: Path) -> Metadata | ProbeFailure:
    try:
        st = os.lstat(path)
    except OSError as exc:
        logger.debug("metadata probe failed for %s: %s", path, exc)
        return ProbeFailure(path=path, reason=exc.strerror or str(exc))

    return Metadata(
        size=format_size(int(st.st_size)),
        modified=format_mtime(st.st_mtime),
        owner=_owner_name(st.st_uid),
        group=_group_name(st.st_gid),
        permissions=stat.filemode(st.st_mode),
        size_bytes=int(st.st_size),
        mtime=st.st_mtime,
    )


__all__ = [
    "format_size",
    "format_mtime",
    "probe",
]
