"""Tests for the FsTree facade."""

import json

import pytest

from fstree.config import AppConfig, FilterConfig, RenderConfig
from fstree.exceptions import ConfigurationError, InvalidPatternError
from fstree.formatters import JSONFormatter
from fstree.fstree import FsTree, render_tree


def test_default_listing(sample_tree):
    listing = FsTree(sample_tree, render_config=RenderConfig(summary=True))
    assert listing.render() == (
        "project/\n"
        "├── a.txt\n"
        "├── b.txt\n"
        "└── sub/\n"
        "    └── c.txt\n"
        "\n"
        "1 directories, 3 files (35 bytes)\n"
    )


def test_max_depth_zero(sample_tree):
    listing = FsTree(sample_tree, max_depth=0, render_config=RenderConfig(summary=True))
    assert listing.render() == "project/\n\n0 directories, 0 files (0 bytes)\n"


def test_exclude_txt(sample_tree):
    listing = FsTree(
        sample_tree, filter_config=FilterConfig(exclude=["*.txt"]), render_config=RenderConfig(summary=True)
    )
    assert listing.render() == "project/\n└── sub/\n\n1 directories, 0 files (0 bytes)\n"


def test_counts(sample_tree):
    listing = FsTree(sample_tree)
    assert listing.directory_count == 1
    assert listing.file_count == 3
    assert listing.total_bytes == 35
    assert listing.stats.summary() == (1, 3, 35)
    assert listing.errors == []


def test_tree_is_built_lazily(sample_tree):
    listing = FsTree(sample_tree)
    assert listing._root is None
    assert listing.root.name == "project"
    assert listing._root is not None


def test_refresh(sample_tree):
    listing = FsTree(sample_tree)
    assert listing.file_count == 3
    (sample_tree / "new_file.txt").touch()
    assert listing.file_count == 3
    listing.refresh()
    assert listing.file_count == 4
    assert "new_file.txt" in listing.render()


def test_json_output(sample_tree):
    listing = FsTree(sample_tree, render_config=RenderConfig(output_format="json", summary=True))
    document = json.loads(listing.render())
    assert document["name"] == "project"
    assert [child["name"] for child in document["children"]] == ["a.txt", "b.txt", "sub"]
    assert document["summary"] == {"directories": 1, "files": 3, "bytes": 35}


def test_custom_formatter(sample_tree):
    listing = FsTree(sample_tree, formatter=JSONFormatter(indent=None))
    assert listing.render().count("\n") == 1


def test_from_config(sample_tree):
    config = AppConfig(
        root=sample_tree,
        filter=FilterConfig(include=["c.txt"]),
        render=RenderConfig(show_size=True),
        max_depth=5,
    )
    listing = FsTree.from_config(config)
    assert listing.directory == sample_tree
    assert listing.render() == "project/\n└── sub/\n    └── c.txt (5B)\n"


def test_configuration_errors_before_walk(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(InvalidPatternError):
        FsTree(missing, filter_config=FilterConfig(exclude=[""]))
    with pytest.raises(ConfigurationError):
        FsTree(missing, max_depth=-1)


def test_missing_root(tmp_path):
    listing = FsTree(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        listing.render()


def test_permission_action_by_name(sample_tree):
    listing = FsTree(sample_tree, permission_action="raise")
    assert listing.file_count == 3


def test_render_tree(sample_tree):
    output = render_tree(sample_tree, filter_config=FilterConfig(directories_only=True))
    assert output == "project/\n└── sub/\n"
