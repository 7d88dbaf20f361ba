"""
Error types for classpath resolution.

Two kinds of failure exist. Environmental problems (missing directories,
unreachable URLs) are never raised: they are skipped and recorded. Internal
invariant violations raise FatalError immediately.
"""


class ClassPathError(Exception):
    """Base class for all jclasspath errors."""


class FatalError(ClassPathError):
    """
    Raised when the classpath data model is inconsistent.

    Indicates a logic error in a collaborator (for example a source file
    with an unknown extension reaching the naming function), not a problem
    with the user's environment.
    """


class FileAccessError(ClassPathError):
    """
    A location could not be opened as a classpath entry.

    Attributes:
        location: The path or URL that failed.
        message: Human-readable reason.
    """

    def __init__(self, location: str, message: str):
        self.location = location
        self.message = message
        super().__init__(f"{location}: {message}")


class ManifestError(ClassPathError):
    """Raised when a jclasspath.toml file cannot be parsed."""
