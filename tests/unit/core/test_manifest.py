"""
Unit tests for jclasspath.toml parsing.
"""

import os

import pytest

from jclasspath.core.assembler import JavaClassPath
from jclasspath.core.errors import ManifestError
from jclasspath.core.manifest import ClasspathManifest


def test_manifest_load_defaults(tmp_path):
    """A missing manifest yields empty components."""
    manifest = ClasspathManifest.load(tmp_path / "jclasspath.toml")

    assert manifest.boot == ""
    assert manifest.user == ""
    assert manifest.codebase == ""
    assert manifest.base_dir is None


def test_manifest_load_valid(tmp_path):
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text(
        """
        [classpath]
        boot = "rt.jar"
        user = ["lib/*", "target/classes"]
        source = "src"
        codebase = ["https://a.example.com/a.jar", "https://b.example.com/b.jar"]
        """
    )

    manifest = ClasspathManifest.load(manifest_path)

    assert manifest.boot == "rt.jar"
    assert manifest.user == os.pathsep.join(["lib/*", "target/classes"])
    assert manifest.source == "src"
    assert manifest.codebase == "https://a.example.com/a.jar https://b.example.com/b.jar"
    assert manifest.base_dir == tmp_path


def test_manifest_relative_base_dir(tmp_path):
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text('[classpath]\nbase_dir = "project"\n')

    assert ClasspathManifest.load(manifest_path).base_dir == tmp_path / "project"


def test_manifest_parsing_error(tmp_path):
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text("invalid [ toml")

    with pytest.raises(ManifestError, match="Failed to parse"):
        ClasspathManifest.load(manifest_path)


def test_manifest_invalid_value(tmp_path):
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text("[classpath]\nboot = { nested = true }\n")

    with pytest.raises(ManifestError, match="Invalid"):
        ClasspathManifest.load(manifest_path)


def test_manifest_classpath_must_be_a_table(tmp_path):
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text('classpath = "lib"\n')

    with pytest.raises(ManifestError, match="expected a table"):
        ClasspathManifest.load(manifest_path)


def test_manifest_base_dir_must_be_a_string(tmp_path):
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text("[classpath]\nbase_dir = 5\n")

    with pytest.raises(ManifestError, match="base_dir"):
        ClasspathManifest.load(manifest_path)


def test_with_env_overrides_file_values():
    manifest = ClasspathManifest(boot="file-boot", user="file-user")

    updated = manifest.with_env({"JCLASSPATH_USER": "env-user", "JCLASSPATH_CODEBASE": "https://x/y.jar"})

    assert updated.boot == "file-boot"
    assert updated.user == "env-user"
    assert updated.codebase == "https://x/y.jar"
    assert manifest.user == "file-user"


def test_with_overrides_ignores_none():
    manifest = ClasspathManifest(boot="b", source="s")

    updated = manifest.with_overrides(boot=None, source="other")

    assert updated.boot == "b"
    assert updated.source == "other"


def test_build_resolves_relative_to_manifest(tmp_path, make_tree):
    make_tree(tmp_path / "classes", ["app/Main.class"])
    manifest_path = tmp_path / "jclasspath.toml"
    manifest_path.write_text('[classpath]\nuser = "classes"\n')

    classpath = ClasspathManifest.load(manifest_path).build()

    assert isinstance(classpath, JavaClassPath)
    assert classpath.find_class("app.Main") is not None
