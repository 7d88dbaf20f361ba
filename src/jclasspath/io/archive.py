"""
Zip and jar archives viewed as directory trees.

Archive members are indexed once, when the archive is opened. Directories
that only exist implicitly (as a prefix of a member path) are synthesised so
that every package in the archive can be navigated.
"""

import io
import zipfile
from pathlib import Path
from typing import Dict, Iterator, Union

from .files import AbstractFile

ZipSource = Union[Path, bytes]


def _open_zip(source: ZipSource) -> zipfile.ZipFile:
    if isinstance(source, bytes):
        return zipfile.ZipFile(io.BytesIO(source), "r")
    return zipfile.ZipFile(source, "r")


class ZipEntry(AbstractFile):
    """A regular file stored inside an archive."""

    def __init__(self, archive: "ZipArchive", member: str):
        self._archive = archive
        self._member = member

    @property
    def name(self) -> str:
        return self._member.rstrip("/").rsplit("/", 1)[-1]

    @property
    def path(self) -> str:
        return f"{self._archive.path}!/{self._member}"

    @property
    def is_directory(self) -> bool:
        return False

    def __iter__(self) -> Iterator[AbstractFile]:
        return iter(())

    def read_bytes(self) -> bytes:
        with _open_zip(self._archive.source) as zf:
            return zf.read(self._member)


class ZipDirectory(AbstractFile):
    """A directory inside an archive, explicit or implied."""

    def __init__(self, archive: "ZipArchive", member: str):
        self._archive = archive
        self._member = member
        self._children: Dict[str, AbstractFile] = {}

    @property
    def name(self) -> str:
        return self._member.rstrip("/").rsplit("/", 1)[-1]

    @property
    def path(self) -> str:
        return f"{self._archive.path}!/{self._member}"

    @property
    def is_directory(self) -> bool:
        return True

    def __iter__(self) -> Iterator[AbstractFile]:
        return iter([self._children[key] for key in sorted(self._children)])

    def read_bytes(self) -> bytes:
        raise IsADirectoryError(self.path)

    def _subdirectory(self, name: str) -> "ZipDirectory":
        child = self._children.get(name)
        if not isinstance(child, ZipDirectory):
            child = ZipDirectory(self._archive, f"{self._member}{name}/")
            self._children[name] = child
        return child

    def _add_file(self, name: str, member: str) -> None:
        # An explicit directory of the same name takes precedence
        if not isinstance(self._children.get(name), ZipDirectory):
            self._children[name] = ZipEntry(self._archive, member)


class ZipArchive(ZipDirectory):
    """
    The root of an archive.

    Args:
        source: Path to the archive on disk, or its raw bytes.
        name: Simple name reported for the archive root.
        location: Display path or URL of the archive.

    Raises:
        zipfile.BadZipFile: If source is not a zip archive.
        OSError: If the archive cannot be read.
    """

    def __init__(self, source: ZipSource, name: str, location: str):
        self.source = source
        self._name = name
        self._location = location
        super().__init__(self, "")
        self._index()

    @classmethod
    def from_path(cls, path: Path) -> "ZipArchive":
        """Open an archive stored on the local filesystem."""
        return cls(Path(path), Path(path).name, str(path))

    @classmethod
    def from_bytes(cls, data: bytes, name: str, location: str) -> "ZipArchive":
        """Open an archive held in memory, typically a download."""
        return cls(data, name, location)

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._location

    def _index(self) -> None:
        with _open_zip(self.source) as zf:
            infos = zf.infolist()

        for info in infos:
            parts = [part for part in info.filename.split("/") if part]
            if not parts:
                continue

            directory: ZipDirectory = self
            if info.is_dir():
                for part in parts:
                    directory = directory._subdirectory(part)
                continue

            for part in parts[:-1]:
                directory = directory._subdirectory(part)
            directory._add_file(parts[-1], info.filename)
