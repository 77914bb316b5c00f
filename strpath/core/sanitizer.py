"""Pure path normalization.

``sanitize`` canonicalizes a path string without touching the filesystem:

1. runs of consecutive separators collapse to one
2. ``.`` segments are removed
3. ``..`` removes the preceding real segment when there is one
4. absolute paths stay absolute, relative paths stay relative
5. a trailing separator (directory marker) is preserved

Relative paths keep any ``..`` that cannot be resolved so the path can still
be evaluated against an absolute base later. Absolute paths clamp at the
root: ``/..`` is ``/``.
"""

from __future__ import annotations

from typing import List, Optional

from ._platform import ACTIVE, PlatformPolicy
from .segments import directory, is_absolute, join, split, trailing_separator

PARENT = ".."
CURRENT = "."


def _prune(segments: List[str], relative: bool, policy: PlatformPolicy) -> List[str]:
    pruned: List[str] = []
    for pos, segment in enumerate(segments):
        if not segment or segment == CURRENT:
            continue

        # A drive reference anywhere but the front is malformed; drop it.
        if pos != 0 and policy.is_drive_letter(segment):
            continue

        if segment == PARENT:
            if relative:
                if pruned and pruned[-1] != PARENT:
                    pruned.pop()
                else:
                    pruned.append(segment)
            elif pruned and not policy.is_drive_letter(pruned[-1]):
                pruned.pop()
            continue

        pruned.append(segment)
    return pruned


def sanitize(path: str, policy: Optional[PlatformPolicy] = None) -> str:
    """Return the canonical form of ``path``.

    >>> sanitize("../../a/b////c")
    '../../a/b/c'
    >>> sanitize("/../../a/b////c")
    '/a/b/c'
    >>> sanitize("././a/b/c/")
    'a/b/c/'
    """
    policy = policy or ACTIVE
    # Captured before any segment is consumed; the drive rule depends on it.
    relative = not is_absolute(path, policy)
    was_directory = trailing_separator(path, policy)

    result = join(_prune(split(path, policy), relative, policy), policy)

    if not relative:
        # A Windows drive segment already anchors the path.
        if policy.drive_marker is None:
            result = policy.separator + result
        return directory(result, policy) if was_directory else result

    if result and was_directory:
        return directory(result, policy)
    return result


__all__ = ["sanitize", "PARENT", "CURRENT"]
