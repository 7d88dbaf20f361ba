"""
Manifest definition and parsing for jclasspath.toml.

The manifest supplies the five classpath components so that a classpath
can be described once per project instead of on every command line:

    [classpath]
    boot = "/usr/lib/jvm/rt.jar"
    ext = ""
    user = ["lib/*", "target/classes"]
    source = "src/main/java"
    codebase = "https://repo.example.com/extra.jar"

Path components may be a single separator-joined string or a list. Relative
locations are resolved against the manifest's directory unless base_dir is
set. JCLASSPATH_* environment variables override file values.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..config import ENV_PREFIX
from .assembler import JavaClassPath
from .context import DEFAULT_JAVA_CONTEXT, JavaContext
from .errors import ManifestError

logger = logging.getLogger(__name__)

_PATH_FIELDS = ("boot", "ext", "user", "source")


class ClasspathManifest(BaseModel):
    """
    The configured components of a classpath.

    Attributes:
        boot: Boot classpath string.
        ext: Extension directories string.
        user: User classpath string (star expanded).
        source: Source path string.
        codebase: Space separated URL specifications.
        base_dir: Directory relative locations are resolved against.
    """

    boot: str = ""
    ext: str = ""
    user: str = ""
    source: str = ""
    codebase: str = ""
    base_dir: Optional[Path] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def load(cls, path: Path) -> "ClasspathManifest":
        """
        Load the [classpath] table of a TOML file.

        Returns:
            The parsed manifest, or an empty manifest if the file does not exist.

        Raises:
            ManifestError: If the file is not valid TOML or has invalid values.
        """
        if not path.exists():
            return cls()

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            raise ManifestError(f"Failed to parse {path}: {e}") from e

        table = data.get("classpath", {})
        if not isinstance(table, dict):
            raise ManifestError(f"Invalid [classpath] table in {path}: expected a table")
        section: Dict[str, Any] = dict(table)
        for key in _PATH_FIELDS:
            if isinstance(section.get(key), list):
                section[key] = os.pathsep.join(str(item) for item in section[key])
        if isinstance(section.get("codebase"), list):
            section["codebase"] = " ".join(str(item) for item in section["codebase"])

        raw_base_dir = section.pop("base_dir", ".")
        if not isinstance(raw_base_dir, str):
            raise ManifestError(f"Invalid base_dir in {path}: expected a string")
        base_dir = Path(raw_base_dir)
        if not base_dir.is_absolute():
            base_dir = path.parent / base_dir

        try:
            return cls(base_dir=base_dir, **section)
        except ValidationError as e:
            raise ManifestError(f"Invalid [classpath] table in {path}: {e}") from e

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "ClasspathManifest":
        """Overlay JCLASSPATH_BOOT, _EXT, _USER, _SOURCE and _CODEBASE."""
        environ = os.environ if environ is None else environ
        updates = {}
        for key in (*_PATH_FIELDS, "codebase"):
            value = environ.get(f"{ENV_PREFIX}{key.upper()}")
            if value is not None:
                logger.debug(f"Using {ENV_PREFIX}{key.upper()} from environment")
                updates[key] = value
        return self.model_copy(update=updates)

    def with_overrides(self, **overrides: Optional[str]) -> "ClasspathManifest":
        """Replace components that were given explicitly (None means keep)."""
        return self.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    def build(self, context: JavaContext = DEFAULT_JAVA_CONTEXT) -> JavaClassPath:
        """Assemble the classpath this manifest describes."""
        return JavaClassPath(
            boot=self.boot,
            ext=self.ext,
            user=self.user,
            source=self.source,
            codebase=self.codebase,
            context=context,
            base_dir=self.base_dir,
        )
