"""
Classpath hierarchy.

A classpath is a tree of package nodes. Every node exposes the classes and
sub-packages it directly contains; lookups of dotted names recurse from a
node into its matching sub-package.

Three kinds of node exist:

- SourcePath: a source directory, contributing source-only classes
- DirectoryClassPath: a directory or archive of compiled classes
- MergedClassPath: several nodes presented as one, with duplicate classes
  completed and duplicate packages merged recursively

Node contents are scanned on first access and never recomputed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Dict, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..config import CLASS_SUFFIX, METADATA_DIRECTORY, SOURCE_EXTENSIONS
from ..io.files import AbstractFile
from .context import ClassPathContext, to_source_name
from .errors import FatalError

T = TypeVar("T")


@dataclass(frozen=True)
class ClassRep(Generic[T]):
    """
    A class that can be loaded from a compiled file, a source file, or both.

    The name comes from the compiled file when there is one, otherwise from
    the source file with its extension removed.

    Attributes:
        binary: The compiled representation, if any.
        source: The source file, if any.
        context: Naming policy used to derive the name.
        name: Simple class name, derived at construction.

    Raises:
        FatalError: If neither reference is given, or the name cannot be derived.
    """

    binary: Optional[T]
    source: Optional[AbstractFile]
    context: ClassPathContext[T] = field(repr=False, compare=False)
    name: str = field(init=False, compare=False)

    def __post_init__(self):
        if self.binary is not None:
            name = self.context.to_binary_name(self.binary)
        elif self.source is not None:
            name = to_source_name(self.source)
        else:
            raise FatalError("A ClassRep needs a binary or a source reference")
        object.__setattr__(self, "name", name)

    def complete(self, other: "ClassRep[T]") -> "ClassRep[T]":
        """
        Fill in whichever references this rep lacks from other.

        References already present are never replaced.
        """
        binary = self.binary if self.binary is not None else other.binary
        source = self.source if self.source is not None else other.source
        if binary is self.binary and source is self.source:
            return self
        return replace(self, binary=binary, source=source)


class ClassPath(ABC, Generic[T]):
    """
    A package containing classes and other packages.

    Subclasses provide the scans through _compute_classes, _compute_packages
    and _compute_sourcepaths; the public properties run each scan at most
    once.
    """

    def __init__(self, context: ClassPathContext[T]):
        self.context = context
        self._classes: Optional[Tuple[ClassRep[T], ...]] = None
        self._packages: Optional[Tuple["ClassPath[T]", ...]] = None
        self._sourcepaths: Optional[Tuple[AbstractFile, ...]] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """The simple package name, without prefix."""
        ...

    @abstractmethod
    def _compute_classes(self) -> Iterable[ClassRep[T]]:
        ...

    @abstractmethod
    def _compute_packages(self) -> Iterable["ClassPath[T]"]:
        ...

    @abstractmethod
    def _compute_sourcepaths(self) -> Iterable[AbstractFile]:
        ...

    @property
    def classes(self) -> Tuple[ClassRep[T], ...]:
        if self._classes is None:
            self._classes = tuple(self._compute_classes())
        return self._classes

    @property
    def packages(self) -> Tuple["ClassPath[T]", ...]:
        if self._packages is None:
            self._packages = tuple(self._compute_packages())
        return self._packages

    @property
    def sourcepaths(self) -> Tuple[AbstractFile, ...]:
        if self._sourcepaths is None:
            self._sourcepaths = tuple(self._compute_sourcepaths())
        return self._sourcepaths

    def create_source_path(self, directory: AbstractFile) -> "SourcePath[T]":
        """Create a source node that keeps this node's context."""
        return SourcePath(directory, self.context)

    # --- Filters ---

    def valid_class_file(self, name: str) -> bool:
        return name.endswith(CLASS_SUFFIX) and self.context.is_valid_name(name)

    def valid_package(self, name: str) -> bool:
        return name != METADATA_DIRECTORY and name != "" and not name.startswith(".")

    def valid_source_file(self, name: str) -> bool:
        return any(name.endswith(extension) for extension in SOURCE_EXTENSIONS)

    # --- Lookup ---

    def find_class(self, name: str) -> Optional[ClassRep[T]]:
        """
        Find a class by its dotted name, e.g. "package.subpackage.ClassName".

        Returns:
            The ClassRep, or None if any part of the name is unknown.

        Raises:
            FatalError: If the lookup reaches something that is not a ClassRep.
        """
        i = name.find(".")
        if i < 0:
            return next((c for c in self.classes if c.name == name), None)

        pkg, rest = name[:i], name[i + 1:]
        package = next((p for p in self.packages if p.name == pkg), None)
        if package is None:
            return None

        found = package.find_class(rest)
        if found is not None and not isinstance(found, ClassRep):
            raise FatalError(f"Unexpected ClassRep '{found!r}' found searching for name '{name}'")
        return found

    def find_source_file(self, name: str) -> Optional[AbstractFile]:
        """Return the source file attached to the named class, if any."""
        rep = self.find_class(name)
        if rep is None:
            return None
        return rep.source

    def find_package(self, name: str) -> Optional["ClassPath[T]"]:
        """Find a sub-package by dotted name. The empty name is this node."""
        node: ClassPath[T] = self
        for part in filter(None, name.split(".")):
            child = next((p for p in node.packages if p.name == part), None)
            if child is None:
                return None
            node = child
        return node


class SourcePath(ClassPath[T]):
    """A directory of source files, and its sub-packages."""

    def __init__(self, directory: AbstractFile, context: ClassPathContext[T]):
        super().__init__(context)
        self.directory = directory

    @property
    def name(self) -> str:
        return self.directory.name

    def _compute_classes(self) -> Iterable[ClassRep[T]]:
        return [
            ClassRep(None, f, self.context)
            for f in self.directory
            if not f.is_directory and self.valid_source_file(f.name)
        ]

    def _compute_packages(self) -> Iterable["SourcePath[T]"]:
        return [
            self.create_source_path(f)
            for f in self.directory
            if f.is_directory and self.valid_package(f.name)
        ]

    def _compute_sourcepaths(self) -> Iterable[AbstractFile]:
        return [self.directory]

    def __str__(self) -> str:
        return f"sourcepath: {self.directory}"


class AbstractFileClassPath(ClassPath[AbstractFile]):
    """A classpath whose compiled representations are files."""

    def create_directory_path(self, directory: AbstractFile) -> "DirectoryClassPath":
        """Create a directory node that keeps this node's context."""
        return DirectoryClassPath(directory, self.context)


class DirectoryClassPath(AbstractFileClassPath):
    """A directory, or the root of a jar, containing class files and packages."""

    def __init__(self, directory: AbstractFile, context: ClassPathContext[AbstractFile]):
        super().__init__(context)
        self.directory = directory

    @property
    def name(self) -> str:
        return self.directory.name

    def _compute_classes(self) -> Iterable[ClassRep[AbstractFile]]:
        return [
            ClassRep(f, None, self.context)
            for f in self.directory
            if not f.is_directory and self.valid_class_file(f.name)
        ]

    def _compute_packages(self) -> Iterable["DirectoryClassPath"]:
        return [
            self.create_directory_path(f)
            for f in self.directory
            if f.is_directory and self.valid_package(f.name)
        ]

    def _compute_sourcepaths(self) -> Iterable[AbstractFile]:
        return []

    def __str__(self) -> str:
        return f"directory classpath: {self.directory}"


class MergedClassPath(ClassPath[T]):
    """
    Several classpath entries unified into one package view.

    Entries are consulted in order. For a class name seen more than once the
    first rep keeps its position and its references; later reps only fill
    in a missing binary or source. A package name seen more than once becomes
    a MergedClassPath over every entry's package of that name, so merging
    applies at every depth.
    """

    def __init__(self, entries: Sequence[ClassPath[T]], context: ClassPathContext[T]):
        super().__init__(context)
        self.entries: Tuple[ClassPath[T], ...] = tuple(entries)

    @property
    def name(self) -> str:
        return self.entries[0].name if self.entries else ""

    def _compute_classes(self) -> Iterable[ClassRep[T]]:
        merged: List[ClassRep[T]] = []
        index: Dict[str, int] = {}
        for entry in self.entries:
            for rep in entry.classes:
                idx = index.get(rep.name)
                if idx is None:
                    index[rep.name] = len(merged)
                    merged.append(rep)
                else:
                    merged[idx] = merged[idx].complete(rep)
        return merged

    def _compute_packages(self) -> Iterable[ClassPath[T]]:
        merged: List[ClassPath[T]] = []
        index: Dict[str, int] = {}
        for entry in self.entries:
            for package in entry.packages:
                idx = index.get(package.name)
                if idx is None:
                    index[package.name] = len(merged)
                    merged.append(package)
                else:
                    merged[idx] = self._add_package(merged[idx], package)
        return merged

    def _compute_sourcepaths(self) -> Iterable[AbstractFile]:
        return [path for entry in self.entries for path in entry.sourcepaths]

    def _add_package(self, to: ClassPath[T], package: ClassPath[T]) -> "MergedClassPath[T]":
        if isinstance(to, MergedClassPath):
            existing = list(to.entries)
        else:
            existing = [to]
        return MergedClassPath(existing + [package], self.context)

    def __str__(self) -> str:
        return "merged classpath (" + "\n".join(str(e) for e in self.entries) + ")"
