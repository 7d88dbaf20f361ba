"""Unit tests for class representations and leaf classpath nodes."""

from pathlib import Path

import pytest

from jclasspath.core.classpath import ClassPath, ClassRep, DirectoryClassPath, SourcePath
from jclasspath.core.context import DEFAULT_JAVA_CONTEXT
from jclasspath.core.errors import FatalError
from jclasspath.io import get_directory
from jclasspath.io.files import PlainFile

CTX = DEFAULT_JAVA_CONTEXT


def pf(name: str) -> PlainFile:
    return PlainFile(Path("/cp") / name)


class _Stub(ClassPath):
    """In-memory node for exercising the lookup logic."""

    def __init__(self, name, classes=(), packages=()):
        super().__init__(CTX)
        self._name = name
        self._stub_classes = list(classes)
        self._stub_packages = list(packages)

    @property
    def name(self):
        return self._name

    def _compute_classes(self):
        return self._stub_classes

    def _compute_packages(self):
        return self._stub_packages

    def _compute_sourcepaths(self):
        return []


class _Corrupt(_Stub):
    def find_class(self, name):
        return "not a ClassRep"


class TestClassRep:
    def test_requires_a_reference(self):
        with pytest.raises(FatalError):
            ClassRep(None, None, CTX)

    def test_name_from_binary(self):
        assert ClassRep(pf("Foo.class"), None, CTX).name == "Foo"

    def test_name_from_source(self):
        assert ClassRep(None, pf("Foo.java"), CTX).name == "Foo"

    def test_binary_name_is_authoritative(self):
        assert ClassRep(pf("Foo.class"), pf("Other.scala"), CTX).name == "Foo"

    def test_unknown_source_extension_fails_at_construction(self):
        with pytest.raises(FatalError):
            ClassRep(None, pf("Foo.kt"), CTX)

    def test_complete_fills_missing_references(self):
        compiled = ClassRep(pf("Foo.class"), None, CTX)
        source = ClassRep(None, pf("Foo.scala"), CTX)

        merged = compiled.complete(source)

        assert merged.binary == pf("Foo.class")
        assert merged.source == pf("Foo.scala")
        assert merged.name == "Foo"

    def test_complete_never_overwrites(self):
        first = ClassRep(pf("a/Foo.class"), None, CTX)
        second = ClassRep(pf("b/Foo.class"), pf("b/Foo.scala"), CTX)

        merged = first.complete(second)

        assert merged.binary == pf("a/Foo.class")
        assert merged.source == pf("b/Foo.scala")

    def test_complete_returns_self_when_nothing_to_add(self):
        full = ClassRep(pf("Foo.class"), pf("Foo.scala"), CTX)
        assert full.complete(ClassRep(pf("x/Foo.class"), None, CTX)) is full

    def test_is_immutable(self):
        rep = ClassRep(pf("Foo.class"), None, CTX)
        with pytest.raises(AttributeError):
            rep.binary = None


class TestDirectoryClassPath:
    @pytest.fixture
    def classes_dir(self, tmp_path, make_tree):
        return make_tree(
            tmp_path / "classes",
            [
                "Foo.class",
                "Bar.class",
                "Foo$class.class",
                "README.txt",
                "Baz.scala",
                "pkg/Inner.class",
                "pkg/deeper/Deep.class",
                "META-INF/",
                ".hidden/",
            ],
        )

    def test_classes_are_valid_class_files(self, classes_dir):
        cp = DirectoryClassPath(PlainFile(classes_dir), CTX)
        assert [c.name for c in cp.classes] == ["Bar", "Foo"]
        assert all(c.source is None for c in cp.classes)

    def test_packages_skip_metadata_and_hidden(self, classes_dir):
        cp = DirectoryClassPath(PlainFile(classes_dir), CTX)
        assert [p.name for p in cp.packages] == ["pkg"]
        assert isinstance(cp.packages[0], DirectoryClassPath)
        assert cp.packages[0].context is CTX

    def test_has_no_sourcepaths(self, classes_dir):
        assert DirectoryClassPath(PlainFile(classes_dir), CTX).sourcepaths == ()

    def test_find_class_recurses(self, classes_dir):
        cp = DirectoryClassPath(PlainFile(classes_dir), CTX)
        rep = cp.find_class("pkg.deeper.Deep")
        assert rep is not None
        assert rep.binary == PlainFile(classes_dir / "pkg" / "deeper" / "Deep.class")

    @pytest.mark.parametrize("name", ["Missing", "pkg.Missing", "nope.Foo", "pkg.deeper", ""])
    def test_find_class_unknown_returns_none(self, classes_dir, name):
        assert DirectoryClassPath(PlainFile(classes_dir), CTX).find_class(name) is None

    def test_scan_runs_once(self, classes_dir):
        cp = DirectoryClassPath(PlainFile(classes_dir), CTX)
        first = cp.classes
        (classes_dir / "Late.class").write_bytes(b"")
        assert cp.classes is first
        assert cp.find_class("Late") is None

    def test_jar_root(self, tmp_path, make_jar):
        jar = make_jar(tmp_path / "lib.jar", ["META-INF/MANIFEST.MF", "scala/Option.class", "scala/Some.class"])
        cp = DirectoryClassPath(get_directory(jar), CTX)

        assert cp.name == "lib.jar"
        assert [p.name for p in cp.packages] == ["scala"]
        assert cp.find_class("scala.Some").binary.name == "Some.class"

    def test_str(self, classes_dir):
        assert str(DirectoryClassPath(PlainFile(classes_dir), CTX)) == f"directory classpath: {classes_dir}"


class TestSourcePath:
    @pytest.fixture
    def src_dir(self, tmp_path, make_tree):
        return make_tree(tmp_path / "src", ["Main.java", "Util.scala", "notes.md", "app/Service.scala"])

    def test_classes_are_source_only(self, src_dir):
        sp = SourcePath(PlainFile(src_dir), CTX)
        assert [c.name for c in sp.classes] == ["Main", "Util"]
        assert all(c.binary is None for c in sp.classes)

    def test_reports_itself_as_sourcepath(self, src_dir):
        sp = SourcePath(PlainFile(src_dir), CTX)
        assert sp.sourcepaths == (PlainFile(src_dir),)

    def test_packages_are_source_paths_sharing_context(self, src_dir):
        sp = SourcePath(PlainFile(src_dir), CTX)
        (package,) = sp.packages
        assert isinstance(package, SourcePath)
        assert package.context is CTX
        assert package.sourcepaths == (PlainFile(src_dir / "app"),)

    def test_find_source_file(self, src_dir):
        sp = SourcePath(PlainFile(src_dir), CTX)
        assert sp.find_source_file("app.Service") == PlainFile(src_dir / "app" / "Service.scala")
        assert sp.find_source_file("app.Missing") is None

    def test_find_source_file_without_source_is_none(self, tmp_path, make_tree):
        classes = make_tree(tmp_path / "classes", ["Foo.class"])
        assert DirectoryClassPath(PlainFile(classes), CTX).find_source_file("Foo") is None


class TestFindPackage:
    def test_dotted_package(self, tmp_path, make_tree):
        root = make_tree(tmp_path / "c", ["a/b/C.class"])
        cp = DirectoryClassPath(PlainFile(root), CTX)
        assert cp.find_package("a.b").name == "b"
        assert cp.find_package("") is cp
        assert cp.find_package("a.x") is None


def test_lookup_reaching_non_classrep_is_fatal():
    root = _Stub("", packages=[_Corrupt("bad")])
    with pytest.raises(FatalError, match="bad.X"):
        root.find_class("bad.X")
