"""
Classpath Assembler.

Builds the complete JVM classpath from its five components. Entries are
added in this order, which is also their precedence:

    1. boot path       each location is one entry
    2. extension path  every jar, zip or directory inside each location
    3. user path       star expansion applies
    4. codebase        space separated URLs of (usually remote) archives
    5. source path     source trees, only when a source path is given

Locations that do not exist, are not archives, or cannot be fetched are
skipped. Each skip is logged and recorded on JavaClassPath.skipped so that
drivers can report a misconfigured classpath.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from ..config import ARCHIVE_SUFFIXES
from ..io import get_directory, get_url
from ..io.files import AbstractFile, PlainFile
from .classpath import AbstractFileClassPath, ClassPath, MergedClassPath
from .context import DEFAULT_JAVA_CONTEXT, JavaContext
from .expand import expand_path, spec_to_url

logger = logging.getLogger(__name__)


class EntryCategory(StrEnum):
    """The component of the classpath an entry came from."""
    BOOT = "boot"
    EXT = "ext"
    USER = "user"
    CODEBASE = "codebase"
    SOURCE = "source"


@dataclass(frozen=True)
class SkippedEntry:
    """A configured location that contributed nothing to the classpath."""
    category: EntryCategory
    location: str
    reason: str


class JavaClassPath(MergedClassPath[AbstractFile], AbstractFileClassPath):
    """
    The classpath used when compiling for the JVM.

    Class files are AbstractFiles; jar and zip archives are viewed as
    directories.

    Args:
        boot: Boot classpath, not star expanded.
        ext: Extension directories, not star expanded.
        user: User classpath, star expanded.
        source: Source path, not star expanded. Ignored when empty.
        codebase: Space separated URL specifications.
        context: Naming policy shared by every node of the classpath.
        base_dir: Directory that relative locations and `*` entries are
            resolved against. Defaults to the current working directory.

    Example:
        ```python
        cp = JavaClassPath(boot="rt.jar", ext="", user="lib/*", source="src", codebase="")
        rep = cp.find_class("scala.Option")
        ```
    """

    def __init__(
        self,
        boot: str,
        ext: str,
        user: str,
        source: str,
        codebase: str,
        context: JavaContext = DEFAULT_JAVA_CONTEXT,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        super().__init__([], context)
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self._skips: List[SkippedEntry] = []
        self.entries = tuple(self._assemble_entries(boot, ext, user, source, codebase))
        self.skipped: Tuple[SkippedEntry, ...] = tuple(self._skips)
        del self._skips
        logger.debug(
            f"Assembled classpath with {len(self.entries)} entries ({len(self.skipped)} skipped)"
        )

    @property
    def name(self) -> str:
        return ""

    def _open(self, location: str) -> Optional[AbstractFile]:
        path = Path(location)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return get_directory(path)

    def _skip(self, category: EntryCategory, location: str, reason: str) -> None:
        logger.debug(f"Skipping {category} entry '{location}': {reason}")
        self._skips.append(SkippedEntry(category, location, reason))

    def _assemble_entries(
        self, boot: str, ext: str, user: str, source: str, codebase: str
    ) -> List[ClassPath[AbstractFile]]:
        entries: List[ClassPath[AbstractFile]] = []

        def add_files_in_path(
            category: EntryCategory,
            path: str,
            expand: bool,
            create: Callable[[AbstractFile], ClassPath[AbstractFile]] = self.create_directory_path,
        ) -> None:
            for location in expand_path(path, expand_star=expand, base_dir=self.base_dir):
                if not location:
                    continue
                f = self._open(location)
                if f is None:
                    self._skip(category, location, "not a directory or archive")
                    continue
                entries.append(create(f))

        # 1. Boot classpath
        add_files_in_path(EntryCategory.BOOT, boot, False)

        # 2. Extension directories
        for location in expand_path(ext, expand_star=False):
            if not location:
                continue
            directory = self._open(location)
            if directory is None:
                self._skip(EntryCategory.EXT, location, "not a directory or archive")
                continue
            for f in directory:
                if not (f.name.lower().endswith(ARCHIVE_SUFFIXES) or f.is_directory):
                    continue
                archive = self._open_extension(f)
                if archive is None:
                    self._skip(EntryCategory.EXT, f.path, "not a readable archive")
                    continue
                entries.append(self.create_directory_path(archive))

        # 3. User classpath
        add_files_in_path(EntryCategory.USER, user, True)

        # 4. Codebase entries (URLs)
        for spec in codebase.strip().split(" "):
            if not spec:
                continue
            url = spec_to_url(spec)
            if url is None:
                self._skip(EntryCategory.CODEBASE, spec, "malformed URL")
                continue
            result = get_url(url)
            if result.is_err():
                self._skip(EntryCategory.CODEBASE, spec, result.unwrap_err().message)
                continue
            entries.append(self.create_directory_path(result.unwrap()))

        # 5. Source path
        if source != "":
            add_files_in_path(EntryCategory.SOURCE, source, False, self.create_source_path)

        return entries

    @staticmethod
    def _open_extension(f: AbstractFile) -> Optional[AbstractFile]:
        """Open a child of an extension directory as its own entry."""
        if isinstance(f, PlainFile):
            return get_directory(f.file)
        # Archives nested inside archives are not supported
        return f if f.is_directory else None

    def __str__(self) -> str:
        return "java classpath (" + "\n".join(str(e) for e in self.entries) + ")"


__all__ = ["EntryCategory", "JavaClassPath", "SkippedEntry"]
