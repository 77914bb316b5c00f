"""Platform policy for path string semantics.

Every string algorithm in :mod:`strpath.core` depends on exactly three
platform parameters: the separator character, the drive-marker test and the
case sensitivity of comparisons. The algorithms take one of these policies
instead of branching on ``os.name``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from strpath.config.defaults import FS


@dataclass(frozen=True, slots=True)
class PlatformPolicy:
    """Separator and comparison rules for one platform family."""

    name: str
    separator: str
    alt_separator: Optional[str] = None
    drive_marker: Optional[str] = None
    case_insensitive: bool = False

    def is_drive_letter(self, segment: str) -> bool:
        """Return True if ``segment`` is a drive reference such as ``C:``."""
        if self.drive_marker is None:
            return False
        return len(segment) >= 2 and segment[1] == self.drive_marker

    def to_native(self, raw: str) -> str:
        if self.alt_separator is None:
            return raw
        return raw.replace(self.alt_separator, self.separator)

    def fold(self, raw: str) -> str:
        """Key used when comparing two canonical path strings."""
        return raw.lower() if self.case_insensitive else raw


POSIX = PlatformPolicy(name="posix", separator="/")
WINDOWS = PlatformPolicy(
    name="windows",
    separator="\\",
    alt_separator="/",
    drive_marker=":",
    case_insensitive=True,
)

_POLICIES = {"posix": POSIX, "windows": WINDOWS}


def policy_for(name: str) -> PlatformPolicy:
    """Resolve a policy name (``auto``, ``posix`` or ``windows``)."""
    key = (name or "auto").strip().lower()
    if key == "auto":
        key = "windows" if os.name == "nt" else "posix"
    try:
        return _POLICIES[key]
    except KeyError as exc:
        raise ValueError(f"unknown platform policy: {name}") from exc


# Selected once at import from SP_PLATFORM.
ACTIVE = policy_for(FS.platform)

__all__ = ["PlatformPolicy", "POSIX", "WINDOWS", "ACTIVE", "policy_for"]
