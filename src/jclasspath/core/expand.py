"""
Path Expander.

Turns a classpath string into an ordered list of locations, expanding
`*` entries into the jar files they designate the same way the `java`
launcher does:

    *            every jar in the base directory
    lib/*        every jar in lib
    lib/scala-*  every jar in lib whose name matches the pattern

Segments without a star are returned untouched and are never checked for
existence here. A directory that cannot be listed expands to nothing.
"""

import os
import re
from pathlib import Path
from typing import Callable, List, Optional, Union
from urllib.parse import urlparse

from ..config import JAR_SUFFIX, URL_SCHEMES

PathLike = Union[str, Path]


def is_jar(name: str) -> bool:
    """Check for the archive suffix, ignoring case."""
    return name.lower().endswith(JAR_SUFFIX)


def _list_jars(
    directory: str,
    base_dir: Optional[PathLike],
    name_filter: Callable[[str], bool] = lambda name: True,
) -> List[str]:
    """
    List the jar files directly inside directory.

    The listing happens relative to base_dir, but the returned locations
    keep the directory spelling the caller used.
    """
    listed = Path(directory)
    if base_dir is not None and not listed.is_absolute():
        listed = Path(base_dir) / listed

    try:
        names = sorted(os.listdir(listed))
    except OSError:
        return []

    return [
        os.path.join(directory, name)
        for name in names
        if (listed / name).is_file() and name_filter(name) and is_jar(name)
    ]


def _basedir(pattern: str) -> str:
    if os.sep in pattern:
        # A separator at index 0 names the filesystem root
        return pattern[: pattern.rindex(os.sep)] or os.sep
    return "."


def _glob_regex(pattern: str) -> "re.Pattern[str]":
    """Compile a star pattern: every literal is escaped, each `*` matches anything."""
    return re.compile("^" + ".*".join(re.escape(part) for part in pattern.split("*")) + "$")


def expand_segment(pattern: str, base_dir: Optional[PathLike] = None) -> List[str]:
    """Expand a single path entry."""
    suffix = os.sep + "*"

    if pattern == "*":
        return _list_jars(".", base_dir)

    if pattern.endswith(suffix):
        return _list_jars(pattern[: -len(suffix)] or os.sep, base_dir)

    if "*" in pattern:
        directory = _basedir(pattern)
        regex = _glob_regex(pattern.rsplit(os.sep, 1)[-1])
        return _list_jars(directory, base_dir, lambda name: regex.match(name) is not None)

    return [pattern]


def split_path(path: str) -> List[str]:
    """Split on the platform path separator, keeping order and duplicates."""
    return path.split(os.pathsep)


def expand_path(
    path: str,
    expand_star: bool = True,
    base_dir: Optional[PathLike] = None,
) -> List[str]:
    """
    Split a classpath string and optionally expand its star entries.

    Args:
        path: Platform path-separator joined list of locations.
        expand_star: Whether `*` entries are expanded into jar files.
        base_dir: Directory that relative star entries are listed in.
            Defaults to the current working directory.

    Returns:
        Locations in classpath order.
    """
    segments = split_path(path)
    if not expand_star:
        return segments

    expanded: List[str] = []
    for segment in segments:
        expanded.extend(expand_segment(segment, base_dir))
    return expanded


def spec_to_url(spec: str) -> Optional[str]:
    """
    Validate a codebase URL specification.

    Returns:
        The specification if it is an absolute URL with a known scheme,
        otherwise None.
    """
    try:
        parsed = urlparse(spec)
    except ValueError:
        return None

    if parsed.scheme.lower() not in URL_SCHEMES:
        return None
    if parsed.scheme.lower() != "file" and not parsed.netloc:
        return None
    if not parsed.netloc and not parsed.path:
        return None
    return spec
