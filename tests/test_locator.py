"""Tests for tiapp.xml discovery."""

from pathlib import Path

import pytest

from tiapp.locator import (
    build_candidate,
    candidate_paths,
    find_tiapp,
    is_windows,
    split_segments,
)


@pytest.mark.parametrize(
    "platform,expected",
    [
        ("win32", True),
        ("cygwin", False),
        ("linux", False),
        ("darwin", False),
    ],
)
def test_is_windows(platform, expected):
    """Test platform detection for drive-letter-rooted systems."""
    assert is_windows(platform) == expected


def test_split_segments_posix():
    """Test that the empty root segment is dropped."""
    assert split_segments("/a/b/c", "/") == ["a", "b", "c"]
    assert split_segments("/a/b/", "/") == ["a", "b"]
    assert split_segments("/", "/") == []


def test_split_segments_windows():
    """Test that a drive letter is kept as the first segment."""
    assert split_segments("C:\\Users\\dev", "\\") == ["C:", "Users", "dev"]


def test_build_candidate_posix():
    """Test that candidates on POSIX systems are absolute."""
    assert build_candidate(["a", "b"], "linux", "/") == "/a/b/tiapp.xml"
    assert build_candidate(["a"], "darwin", "/") == "/a/tiapp.xml"


def test_build_candidate_windows():
    """Test that candidates on Windows have no leading separator."""
    assert build_candidate(["C:", "Users"], "win32", "\\") == "C:\\Users\\tiapp.xml"
    assert build_candidate(["C:"], "win32", "\\") == "C:\\tiapp.xml"


def test_candidate_paths_deepest_first():
    """Test that candidates go from the start directory up to its outermost parent."""
    assert candidate_paths("/a/b/c", "linux", "/") == [
        "/a/b/c/tiapp.xml",
        "/a/b/tiapp.xml",
        "/a/tiapp.xml",
    ]


def test_candidate_paths_windows_stops_at_drive():
    """Test that the drive root is the last Windows candidate."""
    assert candidate_paths("C:\\a\\b", "win32", "\\") == [
        "C:\\a\\b\\tiapp.xml",
        "C:\\a\\tiapp.xml",
        "C:\\tiapp.xml",
    ]


def test_candidate_paths_custom_filename():
    """Test searching for a different file name."""
    assert candidate_paths("/a/b", "linux", "/", "other.xml") == [
        "/a/b/other.xml",
        "/a/other.xml",
    ]


def test_find_tiapp_in_current_dir(tmp_path):
    """Test finding tiapp.xml in the start directory itself."""
    tiapp_xml = tmp_path / "tiapp.xml"
    tiapp_xml.write_text("<ti:app/>")

    assert find_tiapp(tmp_path) == str(tiapp_xml)


def test_find_tiapp_nearest_ancestor_wins(tmp_path):
    """Test that the nearest tiapp.xml above the start directory is returned."""
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    (tmp_path / "a" / "b" / "tiapp.xml").write_text("<b/>")
    (tmp_path / "tiapp.xml").write_text("<root/>")

    result = find_tiapp(deep)
    assert result == str(tmp_path / "a" / "b" / "tiapp.xml")


def test_find_tiapp_skips_directories(tmp_path):
    """Test that a directory named tiapp.xml is not a match."""
    deep = tmp_path / "a" / "b"
    (deep / "tiapp.xml").mkdir(parents=True)
    (tmp_path / "tiapp.xml").write_text("<root/>")

    assert find_tiapp(deep) == str(tmp_path / "tiapp.xml")


def test_find_tiapp_not_found(tmp_path):
    """Test that None is returned when no tiapp.xml exists."""
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)

    assert find_tiapp(deep) is None


def test_find_tiapp_defaults_to_cwd(tmp_path, monkeypatch):
    """Test that the search starts from the working directory by default."""
    tiapp_xml = tmp_path / "tiapp.xml"
    tiapp_xml.write_text("<root/>")
    subdir = tmp_path / "Resources"
    subdir.mkdir()
    monkeypatch.chdir(subdir)

    result = find_tiapp()
    assert result is not None
    assert Path(result).resolve() == tiapp_xml.resolve()


def test_find_tiapp_relative_start(tmp_path, monkeypatch):
    """Test that a relative start directory is resolved against cwd."""
    (tmp_path / "app").mkdir()
    tiapp_xml = tmp_path / "tiapp.xml"
    tiapp_xml.write_text("<root/>")
    monkeypatch.chdir(tmp_path)

    result = find_tiapp("app")
    assert result is not None
    assert Path(result).resolve() == tiapp_xml.resolve()


def test_candidate_paths_root_directory():
    """Test that starting at the filesystem root yields no candidates."""
    assert candidate_paths("/", "linux", "/") == []
    assert candidate_paths("/a", "linux", "/") == ["/a/tiapp.xml"]
