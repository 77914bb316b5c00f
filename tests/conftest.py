# tests/conftest.py
# Isolate filesystem tests in a scratch working directory and keep
# diagnostics deterministic.

from __future__ import annotations

import os
from pathlib import Path as StdPath

import pytest


def _set_test_env() -> None:
    """Pin the platform policy before strpath modules are imported."""
    os.environ.setdefault("SP_PLATFORM", "auto")
    for name in ("SP_LOG_DIR", "SP_LOG_LEVEL", "SP_LOG_CONSOLE"):
        os.environ.pop(name, None)


def pytest_sessionstart(session: pytest.Session) -> None:  # noqa: ARG001
    _set_test_env()


@pytest.fixture
def workdir(tmp_path: StdPath, monkeypatch: pytest.MonkeyPatch) -> StdPath:
    """Run the test with ``tmp_path`` as the current working directory.

    Relative paths such as ``foo/bar`` then land in a throwaway tree.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def tree(workdir: StdPath) -> StdPath:
    """Build the reference tree used by the listing tests.

    foo/1, foo/2
    foo/bar/1, foo/bar/2
    foo/bar2/1, foo/bar2/2
    foo/bar2/bar3/
    """
    root = workdir / "foo"
    (root / "bar").mkdir(parents=True)
    (root / "bar2" / "bar3").mkdir(parents=True)
    for rel in ("1", "2", "bar/1", "bar/2", "bar2/1", "bar2/2"):
        (root / rel).touch()
    return root
