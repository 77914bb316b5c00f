"""The ``Path`` value type.

A ``Path`` owns exactly one string in platform-native form. Everything else
(absolute-ness, trailing separator, segments) is derived from that string on
demand. Manipulators (``append``, ``relative``, ``up``, ``absolute``,
``sanitize``, ``directory``, ``trim``) change the path in place and return it
so calls can be chained; ``parent``, ``copy`` and ``+`` return new objects.

Equality (``==``) compares raw strings. Use :meth:`Path.equivalent` to ask
whether two paths name the same location.
"""

from __future__ import annotations

import os
import stat as _stat
from typing import Any, ClassVar, List

from . import segments as _segments
from ._platform import ACTIVE, POSIX, WINDOWS, PlatformPolicy
from .sanitizer import PARENT, sanitize as _sanitize


class PathInputError(ValueError):
    """Raised when a value cannot be turned into a path string."""


def _coerce(value: Any) -> str:
    if value is None:
        raise PathInputError("path must not be None")
    if isinstance(value, Path):
        return value._path
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return os.fsdecode(value)
    if isinstance(value, os.PathLike):
        return os.fsdecode(os.fspath(value))
    # Numbers and other printable values become path segments verbatim.
    return str(value)


class Path:
    """A filesystem path held as a single string."""

    policy: ClassVar[PlatformPolicy] = ACTIVE
    __slots__ = ("_path",)

    def __init__(self, value: Any = "") -> None:
        self._path = self.policy.to_native(_coerce(value))

    # ---------- Operators ----------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __lshift__(self, segment: Any) -> "Path":
        return self.append(segment)

    def __add__(self, segment: Any) -> "Path":
        return self.copy().append(segment)

    __truediv__ = __add__

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    def string(self) -> str:
        """Return the raw path string."""
        return self._path

    def copy(self) -> "Path":
        return type(self)(self._path)

    # ---------- Type tests (string only) ----------
    def is_absolute(self) -> bool:
        return _segments.is_absolute(self._path, self.policy)

    def trailing_slash(self) -> bool:
        """Does the path end with a separator?"""
        return _segments.trailing_separator(self._path, self.policy)

    def split(self) -> List[str]:
        """Return the segments of this path (see :func:`strpath.core.segments.split`)."""
        return _segments.split(self._path, self.policy)

    # ---------- Manipulations ----------
    def append(self, segment: Any) -> "Path":
        """Append ``segment`` after a separator. Does not sanitize."""
        if not self.trailing_slash():
            self._path += self.policy.separator
        self._path += type(self)(segment)._path
        return self

    def relative(self, rel: Any) -> "Path":
        """Evaluate ``rel`` against this path.

        An absolute ``rel`` replaces this path entirely; anything else is
        appended.
        """
        other = type(self)(rel)
        if other.is_absolute():
            self._path = other._path
            return self
        return self.append(other)

    def up(self) -> "Path":
        """Move to the parent directory.

        The empty path (the current directory) becomes ``../``.
        """
        if not self._path:
            self._path = PARENT
            return self.directory()
        self.append(PARENT).sanitize()
        if not self._path:
            return self
        return self.directory()

    def parent(self) -> "Path":
        return self.copy().up()

    def absolute(self) -> "Path":
        """Resolve against the current working directory unless already absolute."""
        if not self.is_absolute():
            base = type(self)._working_directory()
            # An unreadable working directory leaves the path relative.
            if base.string():
                self._path = base.append(self)._path
        return self

    def sanitize(self) -> "Path":
        self._path = _sanitize(self._path, self.policy)
        return self

    def directory(self) -> "Path":
        """Ensure exactly one trailing separator."""
        self._path = _segments.directory(self._path, self.policy)
        return self

    def trim(self) -> "Path":
        """Strip trailing separators, e.g. ``/foo//`` becomes ``/foo``."""
        self._path = _segments.trim(self._path, self.policy)
        return self

    def equivalent(self, other: Any) -> bool:
        """Do both paths resolve to the same absolute, sanitized location?

        Each side is absolutized against the working directory and
        sanitized independently. Case is ignored where the platform's
        namespace is case-insensitive.
        """
        this = self.copy().absolute().sanitize()._path
        that = type(self)(other).absolute().sanitize()._path
        return self.policy.fold(this) == self.policy.fold(that)

    # ---------- Getters ----------
    def filename(self) -> str:
        pos = self._path.rfind(self.policy.separator)
        if pos == -1:
            return ""
        return self._path[pos + 1 :]

    def extension(self) -> str:
        name = self.filename()
        pos = name.rfind(".")
        if pos == -1:
            return ""
        return name[pos + 1 :]

    def stem(self) -> "Path":
        """Return a copy without the final extension.

        A dot that belongs to a directory segment is not an extension.
        """
        sep_pos = self._path.rfind(self.policy.separator)
        dot_pos = self._path.rfind(".")
        if dot_pos == -1 or sep_pos > dot_pos:
            return self.copy()
        return type(self)(self._path[:dot_pos])

    # ---------- Filesystem queries ----------
    def _stat(self) -> os.stat_result | None:
        try:
            return os.stat(self._path)
        except (OSError, ValueError):
            return None

    def exists(self) -> bool:
        return self._stat() is not None

    def is_file(self) -> bool:
        st = self._stat()
        return st is not None and _stat.S_ISREG(st.st_mode)

    def is_directory(self) -> bool:
        st = self._stat()
        return st is not None and _stat.S_ISDIR(st.st_mode)

    def size(self) -> int:
        """File size in bytes, 0 when the path cannot be stat'd."""
        st = self._stat()
        return st.st_size if st is not None else 0

    # ---------- Construction helpers ----------
    @classmethod
    def join(cls, a: Any, b: Any) -> "Path":
        return cls(a).append(b)

    @classmethod
    def from_segments(cls, parts: List[str]) -> "Path":
        return cls(_segments.join(parts, cls.policy))

    @classmethod
    def _working_directory(cls) -> "Path":
        """Directory-marked working directory, empty when it cannot be read."""
        try:
            return cls(os.getcwd()).directory()
        except OSError:
            return cls("")


class PosixPath(Path):
    """Path with POSIX string semantics regardless of the host."""

    policy = POSIX
    __slots__ = ()


class WindowsPath(Path):
    """Path with Windows string semantics regardless of the host."""

    policy = WINDOWS
    __slots__ = ()


def equivalent(a: Any, b: Any) -> bool:
    return Path(a).equivalent(b)


__all__ = [
    "Path",
    "PosixPath",
    "WindowsPath",
    "PathInputError",
    "equivalent",
]
