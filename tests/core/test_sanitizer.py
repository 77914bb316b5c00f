"""Tests for sanitize() with POSIX and Windows policies."""

import pytest

from strpath.core import POSIX, WINDOWS
from strpath.core.sanitizer import sanitize
from strpath.core.segments import is_absolute, trailing_separator


SAMPLE_PATHS = [
    "",
    "/",
    "//",
    ".",
    "./",
    "..",
    "../",
    "a",
    "a/",
    "a/..",
    "a/../",
    "foo///bar/a/b/../c",
    "../foo///bar/a/b/../c",
    "../../a/b////c",
    "/../../a/b////c",
    "/./././a/./b/../../c",
    "././a/b/c/",
    "a/b/../../../..",
    "/a/b/../../../..//",
    "x/./y/.././../z/",
]


class TestSanitizePosix:
    """Reference cases for the POSIX policy."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("foo///bar/a/b/../c", "foo/bar/a/c"),
            ("../foo///bar/a/b/../c", "../foo/bar/a/c"),
            ("../../a/b////c", "../../a/b/c"),
            ("/../../a/b////c", "/a/b/c"),
            ("/./././a/./b/../../c", "/c"),
            ("././a/b/c/", "a/b/c/"),
        ],
    )
    def test_reference_cases(self, raw, expected):
        assert sanitize(raw, POSIX) == expected

    def test_empty_stays_empty(self):
        assert sanitize("", POSIX) == ""

    def test_root_stays_root(self):
        assert sanitize("/", POSIX) == "/"
        assert sanitize("///", POSIX) == "/"

    def test_root_is_its_own_parent(self):
        assert sanitize("/..", POSIX) == "/"
        assert sanitize("/../", POSIX) == "/"

    def test_excess_parents_kept_in_order(self):
        assert sanitize("a/b/../../../..", POSIX) == "../.."
        assert sanitize("../../a/b", POSIX) == "../../a/b"

    def test_parent_never_cancels_parent(self):
        assert sanitize("../..", POSIX) == "../.."
        assert sanitize("../../", POSIX) == "../../"

    def test_fully_cancelled_relative_path_is_empty(self):
        # No directory marker on an empty result
        assert sanitize("a/..", POSIX) == ""
        assert sanitize("a/../", POSIX) == ""
        assert sanitize("./", POSIX) == ""

    def test_dot_segments_removed(self):
        assert sanitize("./a/./b/.", POSIX) == "a/b"


class TestSanitizeWindows:
    """Reference cases for the Windows policy."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("foo\\\\\\bar\\a\\b\\..\\c", "foo\\bar\\a\\c"),
            ("..\\foo\\\\\\bar\\a\\b\\..\\c", "..\\foo\\bar\\a\\c"),
            ("..\\..\\a\\b\\\\\\\\c", "..\\..\\a\\b\\c"),
            ("C:\\..\\..\\a\\b\\\\\\\\c", "C:\\a\\b\\c"),
            ("C:\\.\\.\\.\\a\\.\\b\\..\\..\\c", "C:\\c"),
            (".\\.\\a\\b\\c\\", "a\\b\\c\\"),
        ],
    )
    def test_reference_cases(self, raw, expected):
        assert sanitize(raw, WINDOWS) == expected

    def test_drive_root_is_its_own_parent(self):
        assert sanitize("C:\\..", WINDOWS) == "C:"
        assert sanitize("C:\\..\\", WINDOWS) == "C:\\"

    def test_embedded_drive_segments_dropped(self):
        assert sanitize("C:\\a\\D:\\b", WINDOWS) == "C:\\a\\b"
        assert sanitize("a\\D:\\b", WINDOWS) == "a\\b"

    def test_no_leading_separator_added(self):
        assert sanitize("C:\\a", WINDOWS) == "C:\\a"


class TestInvariants:
    """Properties that hold for every input."""

    @pytest.mark.parametrize("raw", SAMPLE_PATHS)
    def test_idempotent(self, raw):
        once = sanitize(raw, POSIX)
        assert sanitize(once, POSIX) == once

    @pytest.mark.parametrize("raw", SAMPLE_PATHS)
    def test_absoluteness_preserved(self, raw):
        assert is_absolute(raw, POSIX) == is_absolute(sanitize(raw, POSIX), POSIX)

    @pytest.mark.parametrize("raw", SAMPLE_PATHS)
    def test_directory_marker_preserved(self, raw):
        result = sanitize(raw, POSIX)
        if result:
            assert trailing_separator(raw, POSIX) == trailing_separator(result, POSIX)

    @pytest.mark.parametrize("raw", SAMPLE_PATHS)
    def test_no_separator_runs_or_dot_segments(self, raw):
        result = sanitize(raw, POSIX)
        assert "//" not in result
        assert "." not in result.split("/")

    @pytest.mark.parametrize("raw", [p.replace("/", "\\") for p in SAMPLE_PATHS] + ["C:\\", "C:\\a\\..\\..\\"])
    def test_windows_idempotent(self, raw):
        once = sanitize(raw, WINDOWS)
        assert sanitize(once, WINDOWS) == once
