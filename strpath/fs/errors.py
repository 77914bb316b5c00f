"""Filesystem error taxonomy.

Boolean-returning operations never raise on filesystem failures; they map the
underlying ``OSError`` onto one of these kinds, emit a diagnostic and return
``False``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict


class FsErrorKind(Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    # Only meaningful when the failing call creates something: mkdir,
    # the destination side of rename, open(O_CREAT).
    PARENT_MISSING = "parent_missing"
    PERMISSION_OR_OTHER = "permission_or_other"


def classify(exc: OSError, *, creating: bool = False) -> FsErrorKind:
    """Map an ``OSError`` onto the taxonomy.

    ``creating`` tells whether the failing call was creating the path, in
    which case a missing component means a missing parent rather than a
    missing target.
    """
    if isinstance(exc, FileExistsError):
        return FsErrorKind.ALREADY_EXISTS
    if isinstance(exc, FileNotFoundError):
        return FsErrorKind.PARENT_MISSING if creating else FsErrorKind.NOT_FOUND
    return FsErrorKind.PERMISSION_OR_OTHER


def describe(exc: OSError, *, creating: bool = False) -> Dict[str, Any]:
    """Context fields for a diagnostic log entry."""
    return {
        "kind": classify(exc, creating=creating).value,
        "errno": exc.errno,
        "error": exc.strerror or str(exc),
    }


__all__ = ["FsErrorKind", "classify", "describe"]
