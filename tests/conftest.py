"""Test configuration and fixtures for fstree."""

import os
import re

import pytest

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """A small project: a.txt (10 bytes), b.txt (20 bytes) and sub/c.txt (5 bytes)."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "b.txt").write_bytes(b"x" * 20)
    (root / "sub").mkdir()
    (root / "sub" / "c.txt").write_bytes(b"x" * 5)
    return root


@pytest.fixture
def can_symlink(tmp_path):
    """Whether symbolic links can be created here."""
    link = tmp_path / "check_link"
    try:
        os.symlink(tmp_path, link)
    except (OSError, NotImplementedError):
        return False
    link.unlink()
    return True


@pytest.fixture
def running_as_root():
    return hasattr(os, "geteuid") and os.geteuid() == 0


@pytest.fixture
def strip_ansi():
    """Function removing escape sequences, for comparing colored output to plain."""

    def strip(text):
        return ANSI_ESCAPE_RE.sub("", text)

    return strip
