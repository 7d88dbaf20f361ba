"""
Virtual file access for classpath entries.

Presents local directories, local archives and remote archives as
AbstractFile trees. The classpath core only ever calls get_directory and
get_url; everything else is an implementation detail of this package.
"""

import logging
import zipfile
from pathlib import Path, PurePosixPath
from typing import Optional, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from ..config import ARCHIVE_SUFFIXES, REMOTE_TIMEOUT_SECONDS
from ..core.errors import FileAccessError
from ..core.result import Err, Ok, Result
from .archive import ZipArchive, ZipDirectory, ZipEntry
from .files import AbstractFile, PlainFile

logger = logging.getLogger(__name__)


def get_directory(location: Union[str, Path]) -> Optional[AbstractFile]:
    """
    Open a location as a directory-like tree.

    Args:
        location: Filesystem path to a directory, .jar or .zip file.

    Returns:
        A PlainFile for a directory, a ZipArchive for a readable archive,
        or None when the location is missing or is some other kind of file.
    """
    path = Path(location)
    if path.is_dir():
        return PlainFile(path)

    if path.is_file() and path.suffix.lower() in ARCHIVE_SUFFIXES:
        try:
            return ZipArchive.from_path(path)
        except (zipfile.BadZipFile, OSError) as e:
            logger.debug(f"Cannot open archive {path}: {e}")
            return None

    return None


def get_url(url: str) -> Result[AbstractFile, FileAccessError]:
    """
    Resolve a URL to the root of the archive (or directory) it names.

    file: URLs are opened locally; http and https URLs are downloaded with
    requests and opened in memory. Failures are returned, never raised.
    """
    parsed = urlparse(url)
    scheme = parsed.scheme.lower()

    if scheme == "file":
        local = url2pathname(parsed.path)
        directory = get_directory(local)
        if directory is None:
            return Err(FileAccessError(url, "not a directory or archive"))
        return Ok(directory)

    if scheme not in ("http", "https"):
        return Err(FileAccessError(url, f"unsupported URL scheme '{scheme}'"))

    try:
        response = requests.get(url, timeout=REMOTE_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Failed to fetch {url}: {e}")
        return Err(FileAccessError(url, str(e)))

    name = PurePosixPath(parsed.path).name or parsed.netloc
    try:
        return Ok(ZipArchive.from_bytes(response.content, name=name, location=url))
    except zipfile.BadZipFile as e:
        logger.warning(f"Downloaded {url} is not an archive: {e}")
        return Err(FileAccessError(url, f"not a zip archive: {e}"))


__all__ = [
    "AbstractFile",
    "PlainFile",
    "ZipArchive",
    "ZipDirectory",
    "ZipEntry",
    "get_directory",
    "get_url",
]
