"""Filesystem operations on strpath paths."""

from .errors import FsErrorKind, classify
from .ops import cwd, glob, join, listdir, makedirs, move, rm, tmp, touch
from .tree import recursive_listdir, rmdirs

__all__ = [
    "FsErrorKind",
    "classify",
    "cwd",
    "glob",
    "join",
    "listdir",
    "makedirs",
    "move",
    "recursive_listdir",
    "rm",
    "rmdirs",
    "tmp",
    "touch",
]
