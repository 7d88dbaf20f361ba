"""
Entry Context.

A context is the policy shared by every node of one classpath tree: which
file names are admissible, and how a compiled representation maps to its
class name. Nodes never create children without handing on their context.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..config import CLASS_SUFFIX, SOURCE_EXTENSIONS, TRAIT_IMPLEMENTATION_SUFFIX
from ..io.files import AbstractFile
from .errors import FatalError

T = TypeVar("T")


def is_trait_implementation(name: str) -> bool:
    """Synthetic trait implementation classes are not loadable on their own."""
    return name.endswith(TRAIT_IMPLEMENTATION_SUFFIX)


def to_source_name(f: AbstractFile) -> str:
    """
    Derive the class name of a source file.

    Raises:
        FatalError: If the file does not end in a known source extension.
    """
    name = f.name
    for extension in SOURCE_EXTENSIONS:
        if name.endswith(extension):
            return name[: -len(extension)]
    raise FatalError(f"Unexpected source file ending: {name}")


class ClassPathContext(ABC, Generic[T]):
    """
    Naming and filtering policy propagated through a classpath.

    T is the type of compiled representation the classpath holds.
    """

    def is_valid_name(self, name: str) -> bool:
        """Filter for excluding entries from the classpath by file name."""
        return True

    @abstractmethod
    def to_binary_name(self, rep: T) -> str:
        """Map a compiled representation to its simple class name."""
        ...


class JavaContext(ClassPathContext[AbstractFile]):
    """Context for JVM classpaths whose compiled units are .class files."""

    def to_binary_name(self, rep: AbstractFile) -> str:
        name = rep.name
        if not name.endswith(CLASS_SUFFIX):
            raise FatalError(f"Not a class file: {name}")
        return name[: -len(CLASS_SUFFIX)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class DefaultJavaContext(JavaContext):
    """JavaContext that hides trait implementation classes."""

    def is_valid_name(self, name: str) -> bool:
        return not is_trait_implementation(name)


DEFAULT_JAVA_CONTEXT = DefaultJavaContext()
