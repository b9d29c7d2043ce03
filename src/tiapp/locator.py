"""Upward discovery of tiapp.xml files."""

import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

TIAPP_FILENAME = "tiapp.xml"


def is_windows(platform: str | None = None) -> bool:
    """
    Check whether a platform tag names a drive-letter-rooted system.

    Args:
        platform: Platform tag as reported by sys.platform (defaults to current)

    Returns:
        True for win32/cygwin-style "win" platforms, False otherwise
    """
    if platform is None:
        platform = sys.platform
    return platform.startswith("win")


def split_segments(directory: str, sep: str = os.sep) -> list[str]:
    """
    Split a directory path into its segments.

    The empty leading segment produced by a separator-rooted path
    ("/a/b" -> ["", "a", "b"]) is dropped, as is a trailing empty
    segment left by a trailing separator.

    Args:
        directory: Directory path to split
        sep: Path separator

    Returns:
        List of path segments, outermost first
    """
    parts = directory.split(sep)
    if parts and parts[0] == "":
        parts = parts[1:]
    if parts and parts[-1] == "":
        parts = parts[:-1]
    return parts


def build_candidate(
    segments: list[str],
    platform: str | None = None,
    sep: str = os.sep,
    filename: str = TIAPP_FILENAME,
) -> str:
    """
    Build the candidate file path for a list of directory segments.

    Separator-rooted platforms get a leading separator so the result is
    absolute. Drive-letter-rooted platforms already carry the root in the
    first segment ("C:") and get no prefix.

    Args:
        segments: Directory segments, outermost first
        platform: Platform tag (defaults to sys.platform)
        sep: Path separator
        filename: Name of the file to append

    Returns:
        Candidate path string
    """
    joined = sep.join([*segments, filename])
    if is_windows(platform):
        return joined
    return sep + joined


def candidate_paths(
    directory: str,
    platform: str | None = None,
    sep: str = os.sep,
    filename: str = TIAPP_FILENAME,
) -> list[str]:
    """
    List every candidate location for the file, deepest directory first.

    Args:
        directory: Directory the search starts from
        platform: Platform tag (defaults to sys.platform)
        sep: Path separator
        filename: Name of the file to look for

    Returns:
        Candidate paths ordered from the starting directory up to its
        outermost segment (the drive on Windows)
    """
    segments = split_segments(directory, sep)

    # The outermost directory segment is the last one searched
    return [
        build_candidate(segments[:depth], platform, sep, filename)
        for depth in range(len(segments), 0, -1)
    ]


def find_tiapp(
    start_path: str | os.PathLike | None = None, filename: str = TIAPP_FILENAME
) -> str | None:
    """
    Find the nearest tiapp.xml by searching upward from start_path.

    Only regular files match; a directory named tiapp.xml is skipped and
    the search continues in the parent directories.

    Args:
        start_path: Starting directory for search (defaults to cwd)
        filename: Name of the file to look for

    Returns:
        Path to tiapp.xml if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    directory = str(Path(start_path).absolute())

    for candidate in candidate_paths(directory, filename=filename):
        if Path(candidate).is_file():
            logger.debug("Found %s at %s", filename, candidate)
            return candidate

    logger.debug("No %s found above %s", filename, start_path)
    return None
