"""Configuration objects and the JSON configuration file.

Settings come from three layers: command-line options, the user's configuration file at
``~/.config/fstree/config.json`` and built-in defaults. Command-line options win over the
file, which wins over the defaults. Boolean flags are OR-ed, since a flag on the command
line can only switch a feature on.

The file uses kebab-case keys named after the long options::

    {
        "show-all": true,
        "exclude": ["*.pyc", "__pycache__"],
        "size-format": "kb",
        "max-depth": 3
    }

A missing or empty file means "no overrides". A file that cannot be parsed, or a key with
the wrong type, produces a warning on stderr and is otherwise ignored.
"""

import json
import sys
from argparse import Namespace
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from fstree.exceptions import ConfigurationError
from fstree.file_system_tree.read_error_action import ReadErrorAction
from fstree.helpers.bytes import SizeFormat
from fstree.types import PathType

DEFAULT_PREFIX = "├── "
DEFAULT_LAST_PREFIX = "└── "
DEFAULT_CHILD_PREFIX = "│   "
DEFAULT_IGNORE_FILES = (".gitignore",)
OUTPUT_FORMATS = ("text", "json")

# Accepted keys of the configuration file and the types their values may take
FILE_CONFIG_KEYS: Dict[str, Tuple[Type[Any], ...]] = {
    "full-path": (bool,),
    "prefix": (str,),
    "last-prefix": (str,),
    "child-prefix": (str,),
    "show-all": (bool,),
    "include": (str, list),
    "exclude": (str, list),
    "ignore": (str, list),
    "directory": (bool,),
    "summary": (bool,),
    "size": (bool,),
    "size-format": (str,),
    "max-depth": (int,),
    "format": (str,),
    "no-color": (bool,),
    "follow-symlinks": (bool,),
}


@dataclass
class FilterConfig:
    """Resolved inclusion/exclusion rules for a walk.

    Attributes:
        include: Glob patterns a file must match to be shown. Empty means "everything".
        exclude: Glob patterns hiding matching entries. Exclusion wins over inclusion.
        show_hidden: Show entries whose name starts with a dot.
        directories_only: Hide all files.
        ignore_files: Names of ignore files (gitignore syntax) honoured in every directory.
    """

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    show_hidden: bool = False
    directories_only: bool = False
    ignore_files: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_FILES))


@dataclass
class RenderConfig:
    """Resolved presentation settings."""

    prefix: str = DEFAULT_PREFIX
    last_prefix: str = DEFAULT_LAST_PREFIX
    child_prefix: str = DEFAULT_CHILD_PREFIX
    full_path: bool = False
    show_size: bool = False
    size_format: SizeFormat = SizeFormat.BYTES
    color: bool = False
    output_format: str = "text"
    summary: bool = False

    def __post_init__(self) -> None:
        self.size_format = SizeFormat.parse(self.size_format)
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format: {self.output_format}. Must be one of: {', '.join(OUTPUT_FORMATS)}"
            )


@dataclass
class AppConfig:
    """The fully resolved configuration consumed by the builder and the formatters."""

    root: Path = field(default_factory=lambda: Path("."))
    filter: FilterConfig = field(default_factory=FilterConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    max_depth: Optional[int] = None
    follow_symlinks: bool = False
    permission_action: ReadErrorAction = ReadErrorAction.RECORD

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigurationError(f"Max depth cannot be negative: {self.max_depth}")


def get_config_path() -> Path:
    """Return the location of the user configuration file."""
    return Path.home() / ".config" / "fstree" / "config.json"


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def load_file_config(path: Optional[PathType] = None) -> Dict[str, Any]:
    """Load the JSON configuration file.

    Args:
        path: File to read. Defaults to ``get_config_path()``.

    Returns:
        A mapping from kebab-case keys to values that passed type validation. Empty if the
        file is missing, empty, unreadable or malformed.
    """
    config_path = Path(path) if path is not None else get_config_path()
    try:
        content = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        _warn(f"Failed to read config file at '{config_path}': {e}")
        return {}

    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        _warn(f"Failed to parse config file at '{config_path}': {e}")
        return {}
    if not isinstance(data, dict):
        _warn(f"Failed to parse config file at '{config_path}': expected a JSON object")
        return {}

    result: Dict[str, Any] = {}
    for key, value in data.items():
        expected = FILE_CONFIG_KEYS.get(key)
        if expected is None:
            _warn(f"Unknown key '{key}' in config file at '{config_path}'")
            continue
        # bool is an int subclass; "max-depth": true is not a depth
        if isinstance(value, bool) and bool not in expected:
            value_ok = False
        else:
            value_ok = isinstance(value, expected)
        if value_ok and isinstance(value, list):
            value_ok = all(isinstance(item, str) for item in value)
        if not value_ok:
            _warn(f"Ignoring '{key}' in config file at '{config_path}': unexpected value {value!r}")
            continue
        result[key] = value
    return result


def _as_list(value: Union[None, str, List[str]]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def merge_configs(file_config: Mapping[str, Any], args: Namespace, color_capable: bool = True) -> AppConfig:
    """Merge configuration file values with parsed command-line arguments.

    Args:
        file_config: Values returned by load_file_config (kebab-case keys).
        args: Parsed command-line arguments from fstree.cli.argparser.
        color_capable: Whether the output destination can display color. Color is only
            enabled when this is True and neither layer disables it.

    Returns:
        The resolved AppConfig.

    Raises:
        ConfigurationError: If a value is invalid (unknown size unit or output format,
            negative depth).
    """

    def pick(cli_value: Any, key: str, default: Any) -> Any:
        if cli_value is not None:
            return cli_value
        return file_config.get(key, default)

    def flag(cli_value: bool, key: str) -> bool:
        return bool(cli_value) or bool(file_config.get(key, False))

    ignore_files = list(DEFAULT_IGNORE_FILES)
    for name in _as_list(pick(args.ignore, "ignore", None)):
        if name not in ignore_files:
            ignore_files.append(name)

    filter_config = FilterConfig(
        include=_as_list(pick(args.include, "include", None)),
        exclude=_as_list(pick(args.exclude, "exclude", None)),
        show_hidden=flag(args.show_all, "show-all"),
        directories_only=flag(args.directory, "directory"),
        ignore_files=ignore_files,
    )

    render_config = RenderConfig(
        prefix=pick(args.prefix, "prefix", DEFAULT_PREFIX),
        last_prefix=pick(args.last_prefix, "last-prefix", DEFAULT_LAST_PREFIX),
        child_prefix=pick(args.child_prefix, "child-prefix", DEFAULT_CHILD_PREFIX),
        full_path=flag(args.full_path, "full-path"),
        show_size=flag(args.size, "size"),
        size_format=pick(args.size_format, "size-format", SizeFormat.BYTES),
        color=color_capable and not flag(args.no_color, "no-color"),
        output_format=pick(args.format, "format", "text"),
        summary=flag(args.summary, "summary"),
    )

    permission_action = ReadErrorAction.RAISE if args.permission_action == "fail" else ReadErrorAction.RECORD

    return AppConfig(
        root=args.root if args.root is not None else Path("."),
        filter=filter_config,
        render=render_config,
        max_depth=pick(args.max_depth, "max-depth", None),
        follow_symlinks=flag(args.follow_symlinks, "follow-symlinks"),
        permission_action=permission_action,
    )
