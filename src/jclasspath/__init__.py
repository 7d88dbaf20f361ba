"""
jclasspath - JVM classpath resolution.

Resolves a compiler classpath (boot, extension, user, codebase and source
components) into a single queryable tree of packages and classes, with
the same precedence and wildcard rules as the `java` launcher.

Key Components:
- core.expand: classpath string splitting and `*` expansion
- core.classpath: package nodes for source trees, directories and jars
- core.assembler: the complete merged classpath
- io: directories, local jars and remote jars as navigable trees

Usage:
    from jclasspath import JavaClassPath

    cp = JavaClassPath(boot="", ext="", user="lib/*:classes", source="src", codebase="")
    rep = cp.find_class("com.example.Main")
"""

__version__ = "0.1.0"

from .core.assembler import EntryCategory, JavaClassPath, SkippedEntry
from .core.classpath import (
    ClassPath,
    ClassRep,
    DirectoryClassPath,
    MergedClassPath,
    SourcePath,
)
from .core.context import (
    DEFAULT_JAVA_CONTEXT,
    ClassPathContext,
    DefaultJavaContext,
    JavaContext,
    is_trait_implementation,
    to_source_name,
)
from .core.errors import ClassPathError, FatalError, FileAccessError, ManifestError
from .core.expand import expand_path, spec_to_url
from .core.manifest import ClasspathManifest

__all__ = [
    "__version__",
    # Classpath model
    "ClassPath",
    "ClassRep",
    "SourcePath",
    "DirectoryClassPath",
    "MergedClassPath",
    "JavaClassPath",
    "EntryCategory",
    "SkippedEntry",
    # Context
    "ClassPathContext",
    "JavaContext",
    "DefaultJavaContext",
    "DEFAULT_JAVA_CONTEXT",
    "is_trait_implementation",
    "to_source_name",
    # Paths
    "expand_path",
    "spec_to_url",
    # Configuration
    "ClasspathManifest",
    # Errors
    "ClassPathError",
    "FatalError",
    "FileAccessError",
    "ManifestError",
]
