"""
Global Configuration and Naming Defaults.

This module centralizes the file naming conventions a JVM classpath relies
on: which files are compiled units, which are sources, which directories
are never packages, and which files count as archives.
"""

from typing import Set, Tuple

# --- Compiled units ---
CLASS_SUFFIX = ".class"

# Synthetic trait implementation classes, e.g. "Foo$class.class"
TRAIT_IMPLEMENTATION_SUFFIX = "$class.class"

# --- Sources ---
# Order matters: used to strip the extension when naming a source-only unit
SOURCE_EXTENSIONS: Tuple[str, ...] = (".scala", ".java")

# --- Packages ---
# Archive metadata directory, never a package
METADATA_DIRECTORY = "META-INF"

# --- Archives ---
JAR_SUFFIX = ".jar"

# Suffixes accepted when scanning extension directories
ARCHIVE_SUFFIXES: Tuple[str, ...] = (".jar", ".zip")

# --- Network ---
# URL schemes recognized in codebase specifications
URL_SCHEMES: Set[str] = {"file", "http", "https", "ftp", "jar"}

# Seconds to wait when downloading a remote archive
REMOTE_TIMEOUT_SECONDS = 30.0

# --- Configuration ---
DEFAULT_MANIFEST_NAME = "jclasspath.toml"
ENV_PREFIX = "JCLASSPATH_"
