"""strpath configuration.

All settings are backed by environment variables following the SP_* naming
convention.

Example:
    >>> from strpath.config import FS
    >>> oct(FS.dir_mode)
    '0o777'

Environment Variables:
    SP_PLATFORM: Path policy, one of auto/posix/windows (default: auto)
    SP_DIR_MODE: Octal mode used by makedirs (default: 0o777)
    SP_FILE_MODE: Octal mode used by touch (default: 0o777)
    SP_LOG_DIR: Directory for JSONL diagnostic logs (default: unset)
    SP_LOG_CONSOLE: Write diagnostics to stderr (default: true)
    SP_LOG_LEVEL: Minimum diagnostic level (default: warning)
"""

from strpath.config.defaults import FS, LOG, FsDefaults, LogDefaults

__all__ = ["FS", "LOG", "FsDefaults", "LogDefaults"]
