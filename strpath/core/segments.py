"""Segment model: tokenizing path strings into components and back.

No filesystem I/O is performed by any function in this module. A segment is
a plain ``str``; an empty string as the *last* element of a split means the
path ended with a separator.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ._platform import ACTIVE, PlatformPolicy


def is_absolute(path: str, policy: Optional[PlatformPolicy] = None) -> bool:
    """Return True if ``path`` is absolute under ``policy``.

    POSIX: starts with the separator. Windows: carries a drive marker at
    index 1 (``C:...``).
    """
    policy = policy or ACTIVE
    if policy.drive_marker is not None:
        return len(path) >= 2 and path[1] == policy.drive_marker
    return path.startswith(policy.separator)


def trailing_separator(path: str, policy: Optional[PlatformPolicy] = None) -> bool:
    policy = policy or ACTIVE
    if not path:
        return False
    last = path[-1]
    return last == policy.separator or (
        policy.alt_separator is not None and last == policy.alt_separator
    )


def split(path: str, policy: Optional[PlatformPolicy] = None) -> List[str]:
    """Split ``path`` into its ordered segments.

    The leading separator of an absolute path yields no segment. A trailing
    separator yields exactly one trailing ``""``.

    >>> split("/foo/bar/baz/")
    ['foo', 'bar', 'baz', '']
    """
    policy = policy or ACTIVE
    if not path:
        return []
    segments = path.split(policy.separator)
    if path.startswith(policy.separator):
        del segments[0]
    if trailing_separator(path, policy) and (not segments or segments[-1] != ""):
        segments.append("")
    return segments


def join(segments: Iterable[str], policy: Optional[PlatformPolicy] = None) -> str:
    """Join segments with one separator between neighbours.

    No leading separator is restored; callers re-add it for absolute paths.
    """
    policy = policy or ACTIVE
    return policy.separator.join(segments)


def trim(path: str, policy: Optional[PlatformPolicy] = None) -> str:
    """Strip trailing separators; a path of only separators becomes ``""``."""
    policy = policy or ACTIVE
    return path.rstrip(policy.separator)


def directory(path: str, policy: Optional[PlatformPolicy] = None) -> str:
    """Mark ``path`` as a directory: exactly one trailing separator."""
    policy = policy or ACTIVE
    return trim(path, policy) + policy.separator


__all__ = [
    "is_absolute",
    "trailing_separator",
    "split",
    "join",
    "trim",
    "directory",
]
