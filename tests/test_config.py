"""Tests for configuration loading and merging."""

import json
from argparse import Namespace
from pathlib import Path
from unittest.mock import patch

import pytest

from fstree.cli.argparser import create_parser
from fstree.config import (
    DEFAULT_CHILD_PREFIX,
    DEFAULT_LAST_PREFIX,
    DEFAULT_PREFIX,
    AppConfig,
    FilterConfig,
    RenderConfig,
    get_config_path,
    load_file_config,
    merge_configs,
)
from fstree.exceptions import ConfigurationError, InvalidSizeFormatError
from fstree.file_system_tree.read_error_action import ReadErrorAction
from fstree.helpers.bytes import SizeFormat


def parse(*argv):
    return create_parser().parse_args(list(argv))


@pytest.fixture
def config_file(tmp_path):
    def write(content):
        path = tmp_path / "config.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    return write


def test_defaults():
    filter_config = FilterConfig()
    assert filter_config.include == []
    assert filter_config.exclude == []
    assert not filter_config.show_hidden
    assert not filter_config.directories_only
    assert filter_config.ignore_files == [".gitignore"]

    render_config = RenderConfig()
    assert render_config.prefix == "├── "
    assert render_config.last_prefix == "└── "
    assert render_config.child_prefix == "│   "
    assert render_config.size_format is SizeFormat.BYTES
    assert render_config.output_format == "text"
    assert not render_config.color
    assert not render_config.summary


def test_filter_config_defaults_are_not_shared():
    first = FilterConfig()
    first.ignore_files.append(".dockerignore")
    assert FilterConfig().ignore_files == [".gitignore"]


def test_render_config_parses_size_format():
    assert RenderConfig(size_format="kb").size_format is SizeFormat.KILOBYTES
    with pytest.raises(InvalidSizeFormatError):
        RenderConfig(size_format="furlongs")


def test_render_config_rejects_unknown_format():
    with pytest.raises(ConfigurationError):
        RenderConfig(output_format="xml")


def test_app_config():
    config = AppConfig(root="src")
    assert config.root == Path("src")
    assert config.max_depth is None
    assert config.permission_action is ReadErrorAction.RECORD
    with pytest.raises(ConfigurationError):
        AppConfig(max_depth=-1)


def test_get_config_path():
    with patch("pathlib.Path.home", return_value=Path("/home/user")):
        assert get_config_path() == Path("/home/user/.config/fstree/config.json")


def test_load_missing_file(tmp_path):
    assert load_file_config(tmp_path / "missing.json") == {}


def test_load_empty_file(config_file):
    assert load_file_config(config_file("  \n")) == {}


def test_load_valid_file(config_file):
    path = config_file({"show-all": True, "exclude": ["*.pyc"], "size-format": "kb", "max-depth": 2})
    assert load_file_config(path) == {"show-all": True, "exclude": ["*.pyc"], "size-format": "kb", "max-depth": 2}


def test_load_default_location(tmp_path):
    path = tmp_path / ".config" / "fstree" / "config.json"
    path.parent.mkdir(parents=True)
    path.write_text('{"summary": true}')
    with patch("fstree.config.get_config_path", return_value=path):
        assert load_file_config() == {"summary": True}


def test_load_malformed_file(config_file, capsys):
    assert load_file_config(config_file("{not json")) == {}
    assert "Warning: Failed to parse config file" in capsys.readouterr().err


def test_load_non_object(config_file, capsys):
    assert load_file_config(config_file("[1, 2]")) == {}
    assert "expected a JSON object" in capsys.readouterr().err


def test_load_skips_unknown_and_mistyped_keys(config_file, capsys):
    path = config_file(
        {
            "colour": True,
            "max-depth": "deep",
            "summary": "yes",
            "exclude": ["ok", 3],
            "size": True,
        }
    )
    assert load_file_config(path) == {"size": True}
    err = capsys.readouterr().err
    assert "Unknown key 'colour'" in err
    assert "Ignoring 'max-depth'" in err
    assert "Ignoring 'summary'" in err
    assert "Ignoring 'exclude'" in err


def test_load_rejects_bool_as_depth(config_file, capsys):
    assert load_file_config(config_file({"max-depth": True})) == {}
    assert "Ignoring 'max-depth'" in capsys.readouterr().err


def test_load_accepts_single_string_for_lists(config_file):
    assert load_file_config(config_file({"include": "*.py"})) == {"include": "*.py"}


def test_merge_defaults():
    config = merge_configs({}, parse())
    assert config.root == Path(".")
    assert config.filter == FilterConfig()
    assert config.render.prefix == DEFAULT_PREFIX
    assert config.render.last_prefix == DEFAULT_LAST_PREFIX
    assert config.render.child_prefix == DEFAULT_CHILD_PREFIX
    assert config.render.color
    assert config.max_depth is None
    assert not config.follow_symlinks
    assert config.permission_action is ReadErrorAction.RECORD


def test_merge_cli_values():
    args = parse(
        "src",
        "-i",
        "*.py",
        "-i",
        "*.md",
        "-e",
        "tests",
        "--ignore",
        ".dockerignore",
        "-a",
        "--directory",
        "-f",
        "-s",
        "--size-format",
        "mb",
        "-d",
        "2",
        "--format",
        "json",
        "-r",
        "-L",
        "-P",
        "fail",
    )
    config = merge_configs({}, args)
    assert config.root == Path("src")
    assert config.filter.include == ["*.py", "*.md"]
    assert config.filter.exclude == ["tests"]
    assert config.filter.ignore_files == [".gitignore", ".dockerignore"]
    assert config.filter.show_hidden
    assert config.filter.directories_only
    assert config.render.full_path
    assert config.render.show_size
    assert config.render.size_format is SizeFormat.MEGABYTES
    assert config.render.output_format == "json"
    assert config.render.summary
    assert config.max_depth == 2
    assert config.follow_symlinks
    assert config.permission_action is ReadErrorAction.RAISE


def test_merge_file_values():
    file_config = {
        "prefix": "|-- ",
        "last-prefix": "`-- ",
        "child-prefix": "|   ",
        "exclude": "*.pyc",
        "ignore": [".npmignore"],
        "show-all": True,
        "size-format": "kb",
        "max-depth": 3,
        "format": "json",
    }
    config = merge_configs(file_config, parse())
    assert config.render.prefix == "|-- "
    assert config.render.last_prefix == "`-- "
    assert config.render.child_prefix == "|   "
    assert config.filter.exclude == ["*.pyc"]
    assert config.filter.ignore_files == [".gitignore", ".npmignore"]
    assert config.filter.show_hidden
    assert config.render.size_format is SizeFormat.KILOBYTES
    assert config.max_depth == 3
    assert config.render.output_format == "json"


def test_cli_overrides_file():
    file_config = {"max-depth": 3, "exclude": ["*.pyc"], "size-format": "kb", "prefix": "|-- "}
    config = merge_configs(file_config, parse("-d", "0", "-e", "*.log", "--size-format", "gb", "-p", "+ "))
    assert config.max_depth == 0
    assert config.filter.exclude == ["*.log"]
    assert config.render.size_format is SizeFormat.GIGABYTES
    assert config.render.prefix == "+ "


def test_boolean_flags_are_ored():
    config = merge_configs({"summary": True, "show-all": False}, parse("-a"))
    assert config.render.summary
    assert config.filter.show_hidden


def test_color_resolution():
    assert merge_configs({}, parse(), color_capable=True).render.color
    assert not merge_configs({}, parse(), color_capable=False).render.color
    assert not merge_configs({}, parse("--no-color"), color_capable=True).render.color
    assert not merge_configs({"no-color": True}, parse(), color_capable=True).render.color


def test_ignore_names_are_deduplicated():
    config = merge_configs({}, parse("--ignore", ".gitignore", "--ignore", ".npmignore", "--ignore", ".npmignore"))
    assert config.filter.ignore_files == [".gitignore", ".npmignore"]


def test_merge_invalid_values():
    with pytest.raises(InvalidSizeFormatError):
        merge_configs({"size-format": "furlongs"}, parse())
    with pytest.raises(ConfigurationError):
        merge_configs({"format": "xml"}, parse())
    with pytest.raises(ConfigurationError):
        merge_configs({"max-depth": -2}, parse())


def test_merge_accepts_plain_namespace():
    args = Namespace(
        root=None,
        include=None,
        exclude=None,
        ignore=None,
        show_all=False,
        directory=False,
        prefix=None,
        last_prefix=None,
        child_prefix=None,
        full_path=False,
        size=False,
        size_format=None,
        no_color=True,
        format=None,
        summary=True,
        max_depth=None,
        follow_symlinks=False,
        permission_action="warn",
    )
    config = merge_configs({}, args)
    assert config.render.summary
    assert config.permission_action is ReadErrorAction.RECORD
