from pathlib import Path

import pytest

from fstree.file_system_tree.entry import Entry
from fstree.file_system_tree.stats import Stats
from fstree.types import EntryKind


def _add(parent, name, kind=EntryKind.FILE, byte_size=None, **kwargs):
    relative_path = f"{parent.relative_path}/{name}" if parent.relative_path else name
    if kind is EntryKind.FILE and byte_size is None:
        byte_size = 0
    return Entry(name, parent.fs_path / name, relative_path, kind, byte_size=byte_size, parent=parent, **kwargs)


@pytest.fixture
def add_entry():
    """Attach a child Entry to a parent, deriving its paths."""
    return _add


@pytest.fixture
def project():
    """project/ with a.txt (10), b.txt (20) and sub/c.txt (5), plus matching stats."""
    root = Entry("project", Path("project"), "", EntryKind.DIRECTORY)
    _add(root, "a.txt", byte_size=10)
    _add(root, "b.txt", byte_size=20)
    sub = _add(root, "sub", EntryKind.DIRECTORY)
    _add(sub, "c.txt", byte_size=5)

    stats = Stats()
    for entry in root.descendants:
        stats.record(entry)
    return root, stats


@pytest.fixture
def nested():
    """A tree where a non-last directory has children, to exercise continuation prefixes."""
    root = Entry("root", Path("root"), "", EntryKind.DIRECTORY)
    src = _add(root, "src", EntryKind.DIRECTORY)
    pkg = _add(src, "pkg", EntryKind.DIRECTORY)
    _add(pkg, "core.py", byte_size=1500)
    _add(src, "main.py", byte_size=100)
    _add(root, "setup.cfg", byte_size=7)
    return root, Stats()
