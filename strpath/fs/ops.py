"""Stateless filesystem functions acting on paths.

Every function here is synchronous and blocking. Boolean results report
success; failures are logged to the error stream and never raised. Listing
functions return an empty list when a directory cannot be opened, which is
indistinguishable from a genuinely empty directory.
"""

from __future__ import annotations

import glob as _glob
import os
import stat as _stat
import tempfile
from typing import Any, List, Optional, Tuple

from strpath.config.defaults import FS
from strpath.core.path import Path
from strpath.logging import create_logger

from .errors import FsErrorKind, classify, describe

_log = create_logger("strpath.fs")


def join(a: Any, b: Any) -> Path:
    """Return ``a`` with ``b`` appended, as a new path."""
    return Path.join(a, b)


def cwd() -> Path:
    """Current working directory, directory-marked.

    Empty when the working directory cannot be read (for example after it
    was removed).
    """
    try:
        current = os.getcwd()
    except OSError as exc:
        _log.error("cannot read working directory", operation="getcwd", **describe(exc))
        return Path("")
    return Path(current).directory()


def tmp() -> Path:
    """Temporary directory (``TMPDIR``/``TEMP``/``TMP`` aware), directory-marked."""
    return Path(tempfile.gettempdir()).directory()


def touch(p: Any, mode: Optional[int] = None) -> bool:
    """Create ``p`` as an empty file if it does not exist.

    Missing parent directories are created and the open is retried once.
    """
    path = Path(p)
    mode = FS.file_mode if mode is None else mode
    flags = os.O_RDONLY | os.O_CREAT

    try:
        fd = os.open(path, flags, mode)
    except OSError as exc:
        failure = exc
        if classify(exc, creating=True) is FsErrorKind.PARENT_MISSING:
            makedirs(path.parent())
            try:
                fd = os.open(path, flags, mode)
                failure = None
            except OSError as retry_exc:
                failure = retry_exc
        if failure is not None:
            _log.error(
                "touch failed", operation="open", path=str(path), **describe(failure, creating=True)
            )
            return False

    try:
        os.close(fd)
    except OSError as exc:
        _log.error("touch failed", operation="close", path=str(path), **describe(exc))
        return False
    return True


def move(source: Any, dest: Any, mkdirs: bool = False) -> bool:
    """Rename ``source`` to ``dest``.

    With ``mkdirs`` set, a missing destination parent is created and the
    rename retried once.
    """
    src = Path(source)
    dst = Path(dest)
    try:
        os.rename(src, dst)
        return True
    except OSError as exc:
        failure = exc

    if mkdirs and classify(failure, creating=True) is FsErrorKind.PARENT_MISSING:
        makedirs(dst.parent())
        try:
            os.rename(src, dst)
            return True
        except OSError as exc:
            failure = exc

    _log.error(
        "move failed",
        operation="rename",
        path=str(src),
        dest=str(dst),
        **describe(failure, creating=True),
    )
    return False


def _is_real_directory(path: Path) -> bool:
    """True for a directory itself, False for a symbolic link to one."""
    try:
        st = os.lstat(path)
    except OSError:
        return False
    return _stat.S_ISDIR(st.st_mode)


def rm(p: Any) -> bool:
    """Remove a file or an empty directory. A symbolic link is unlinked."""
    path = Path(p)
    try:
        if _is_real_directory(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except OSError as exc:
        _log.error("remove failed", operation="remove", path=str(path), **describe(exc))
        return False
    return True


def makedirs(p: Any, mode: Optional[int] = None) -> bool:
    """Create ``p`` and any missing parents.

    Returns True when ``p`` exists as a directory afterwards.
    """
    target = Path(p).absolute()
    mode = FS.dir_mode if mode is None else mode
    if not target.is_absolute():
        _log.error(
            "makedirs failed",
            operation="getcwd",
            path=str(target),
            error="working directory unavailable",
        )
        return False
    try:
        os.mkdir(target, mode)
        return True
    except OSError as exc:
        kind = classify(exc, creating=True)
        failure = exc

    if kind is FsErrorKind.ALREADY_EXISTS:
        return target.is_directory()

    if kind is FsErrorKind.PARENT_MISSING:
        parent = target.parent()
        # The root always exists; a parent equal to its child means it does not.
        if parent != target:
            makedirs(parent, mode)
            try:
                os.mkdir(target, mode)
                return True
            except OSError as exc:
                failure = exc

    _log.error(
        "makedirs failed", operation="mkdir", path=str(target), **describe(failure, creating=True)
    )
    return False


def scan_directory(p: Any) -> List[Tuple[Path, bool]]:
    """List the children of ``p`` with a flag telling which are directories.

    Symbolic links are never reported as directories. Each child is the
    absolutized ``p`` joined with the entry name.
    """
    base = Path(p).absolute()
    entries: List[Tuple[Path, bool]] = []
    try:
        with os.scandir(base) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append((base.copy().relative(entry.name), is_dir))
    except OSError as exc:
        _log.debug("cannot open directory", operation="scandir", path=str(base), **describe(exc))
        return []
    return entries


def listdir(p: Any) -> List[Path]:
    """Absolute paths of the entries in ``p``, in no particular order."""
    return [child for child, _ in scan_directory(p)]


def glob(pattern: Any) -> List[Path]:
    """All paths matching the shell-glob ``pattern``, sorted."""
    try:
        matches = _glob.glob(str(pattern))
    except (OSError, ValueError) as exc:
        _log.debug("glob failed", operation="glob", pattern=str(pattern), error=str(exc))
        return []
    return [Path(match) for match in sorted(matches)]


__all__ = [
    "join",
    "cwd",
    "tmp",
    "touch",
    "move",
    "rm",
    "makedirs",
    "scan_directory",
    "listdir",
    "glob",
]
