"""Abstract file handles and the plain filesystem implementation."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, List, Optional


class AbstractFile(ABC):
    """
    A navigable file or directory.

    Directories and archive contents both implement this interface so that
    classpath nodes can scan them the same way. Children are always yielded
    sorted by name.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Simple name, without any parent path."""
        ...

    @property
    @abstractmethod
    def path(self) -> str:
        """Display path identifying this file."""
        ...

    @property
    @abstractmethod
    def is_directory(self) -> bool:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator["AbstractFile"]:
        """Yield direct children. Non-directories yield nothing."""
        ...

    @abstractmethod
    def read_bytes(self) -> bytes:
        ...

    def lookup(self, name: str) -> Optional["AbstractFile"]:
        """Return the direct child called name, if any."""
        for child in self:
            if child.name == name:
                return child
        return None

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path!r})"


class PlainFile(AbstractFile):
    """A file or directory on the local filesystem."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def file(self) -> Path:
        """The underlying pathlib path."""
        return self._path

    @property
    def is_directory(self) -> bool:
        return self._path.is_dir()

    def __iter__(self) -> Iterator[AbstractFile]:
        if not self.is_directory:
            return iter(())
        try:
            children: List[Path] = sorted(self._path.iterdir(), key=lambda p: p.name)
        except OSError:
            # Unreadable directories contribute nothing
            return iter(())
        return (PlainFile(child) for child in children)

    def read_bytes(self) -> bytes:
        return self._path.read_bytes()

    def __eq__(self, other) -> bool:
        if isinstance(other, PlainFile):
            return self._path == other._path
        return False

    def __hash__(self) -> int:
        return hash(self._path)
