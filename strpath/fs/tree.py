"""Recursive directory listing and removal."""

from __future__ import annotations

import os
from typing import Any, List

from strpath.core.path import Path
from strpath.logging import create_logger

from .errors import describe
from .ops import _is_real_directory, scan_directory

_log = create_logger("strpath.fs.tree")


def recursive_listdir(root: Any) -> List[Path]:
    """Every entry below ``root`` at every depth, as absolute paths.

    Stack-based walk; sibling order is unspecified. Symbolic links to
    directories are listed but not descended into. An unreadable ``root``
    yields an empty list.
    """
    results: List[Path] = []
    stack = [Path(root)]
    while stack:
        current = stack.pop()
        for child, is_dir in scan_directory(current):
            results.append(child)
            if is_dir:
                stack.append(child)
    return results


def _removal_order(root: Path) -> List[Path]:
    # A file or a symbolic link, even one to a directory, is removed alone.
    if not _is_real_directory(root):
        return [root]
    contents = recursive_listdir(root)
    contents.append(root)
    # Longer absolute strings first approximates deepest-first: children
    # always sort before their parent, unrelated subtrees may interleave.
    contents.sort(key=lambda p: len(p.copy().absolute().string()), reverse=True)
    return contents


def rmdirs(root: Any, ignore_errors: bool = False) -> bool:
    """Remove ``root`` and everything below it.

    Stops at the first failure unless ``ignore_errors`` is set. Returns False
    if any removal failed.
    """
    success = True
    for entry in _removal_order(Path(root)):
        is_dir = _is_real_directory(entry)
        try:
            if is_dir:
                os.rmdir(entry)
            else:
                os.unlink(entry)
        except OSError as exc:
            success = False
            _log.error(
                "rmdirs step failed",
                operation="rmdir" if is_dir else "unlink",
                path=str(entry),
                **describe(exc),
            )
            if not ignore_errors:
                break
    return success


__all__ = ["recursive_listdir", "rmdirs"]
