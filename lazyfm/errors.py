"""Error taxonomy shared by the browser runtime and its collaborators.

Only ``ConfigError`` is fatal; everything else is reported as a notice and
the browsing loop carries on.
"""

from __future__ import annotations


class LazyFmError(Exception):
    """Base class for all lazyfm errors."""


class NotFoundError(LazyFmError):
    """Path vanished between listing and action."""


class PermissionDeniedError(LazyFmError):
    """Probe, view, or edit lacks filesystem rights."""


class InvalidInputError(LazyFmError):
    """Out-of-range selection or malformed page size."""


class CollaboratorError(LazyFmError):
    """External editor or delete primitive reported failure."""


class ConfigError(LazyFmError):
    """Mandatory configuration is missing or invalid."""
