"""strpath config defaults.

No side effects on import beyond reading the environment. Values can be
overridden via SP_* environment variables; reload this module to pick up
changes made after import.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env(name: str, default: str) -> str:
    if not name.startswith("SP_"):
        raise ValueError(f"Only SP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_mode(name: str, default: int) -> int:
    """Parse a permission mode written in octal (``755``, ``0o755`` or ``0755``)."""
    raw = _env(name, oct(default)).strip().lower()
    if raw.startswith("0o"):
        raw = raw[2:]
    try:
        value = int(raw, 8)
    except ValueError:
        return default
    if value < 0 or value > 0o7777:
        return default
    return value


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


def _env_optional(name: str) -> Optional[str]:
    raw = _env(name, "").strip()
    return raw or None


@dataclass(frozen=True)
class FsDefaults:
    platform: str = _env_choice("SP_PLATFORM", "auto", ("auto", "posix", "windows"))
    dir_mode: int = _env_mode("SP_DIR_MODE", 0o777)
    file_mode: int = _env_mode("SP_FILE_MODE", 0o777)


@dataclass(frozen=True)
class LogDefaults:
    log_dir: Optional[str] = _env_optional("SP_LOG_DIR")
    console: bool = _env_bool("SP_LOG_CONSOLE", True)
    level: str = _env_choice(
        "SP_LOG_LEVEL", "warning", ("debug", "info", "warning", "error", "critical")
    )


FS = FsDefaults()
LOG = LogDefaults()

__all__ = ["FS", "LOG", "FsDefaults", "LogDefaults"]
