"""Filesystem-facing domain model: classification, metadata, listings.

This package contains non-UI primitives:
- entry datatypes and the closed ``TypeTag`` set
- the staged classifier and its ``file(1)`` content oracle
- the single-``lstat`` metadata probe and size/date formatting
- the page-windowed directory lister
"""

from __future__ import annotations

from .types import Entry, Metadata, ProbeFailure, TypeTag, parent_entry
from .classify import classify
from .oracle import describe_file_content
from .probe import format_mtime, format_size, probe
from .fs import Listing, list_directory

__all__ = [
    "Entry",
    "Metadata",
    "ProbeFailure",
    "TypeTag",
    "parent_entry",
    "classify",
    "describe_file_content",
    "format_mtime",
    "format_size",
    "probe",
    "Listing",
    "list_directory",
]
