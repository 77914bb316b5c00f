"""Path strings: segment model, normalization and the ``Path`` value type."""

from ._platform import ACTIVE, POSIX, WINDOWS, PlatformPolicy, policy_for
from .path import Path, PathInputError, PosixPath, WindowsPath, equivalent
from .sanitizer import sanitize
from .segments import directory, is_absolute, join, split, trailing_separator, trim

__all__ = [
    "ACTIVE",
    "POSIX",
    "WINDOWS",
    "PlatformPolicy",
    "policy_for",
    "Path",
    "PathInputError",
    "PosixPath",
    "WindowsPath",
    "equivalent",
    "sanitize",
    "directory",
    "is_absolute",
    "join",
    "split",
    "trailing_separator",
    "trim",
]
