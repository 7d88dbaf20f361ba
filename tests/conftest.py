"""Shared fixtures: real directories and jars built under tmp_path."""

import zipfile
from pathlib import Path
from typing import Iterable

import pytest

CLASS_BYTES = b"\xca\xfe\xba\xbe"


def write_jar(path: Path, members: Iterable[str]) -> Path:
    """Write a jar whose members are given as archive paths ("a/B.class", "META-INF/")."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for member in members:
            zf.writestr(member, b"" if member.endswith("/") else CLASS_BYTES)
    return path


def write_tree(root: Path, files: Iterable[str]) -> Path:
    """Create files (and directories, for names ending in '/') under root."""
    root.mkdir(parents=True, exist_ok=True)
    for name in files:
        target = root / name
        if name.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(CLASS_BYTES)
    return root


@pytest.fixture
def make_jar():
    return write_jar


@pytest.fixture
def make_tree():
    return write_tree
