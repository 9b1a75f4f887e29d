"""Command-line argument parsing for fstree.

This module defines the command-line interface for fstree, handling argument parsing and
validation. Options that can also come from the configuration file default to None so
that the merge step can tell "not given" from an explicit value.
"""

import argparse
from pathlib import Path

from fstree import __version__
from fstree.config import OUTPUT_FORMATS, get_config_path


def non_negative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth cannot be negative: {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with fstree's options.
    """
    description = """
    fstree: display a directory as a tree.

    Walks ROOT (default: the current directory) and prints its contents as an ASCII-art
    tree or a JSON document. Entries can be filtered with glob patterns and ignore files,
    and the listing can be limited in depth.

    Filtering precedence:
    - hidden entries (names starting with '.') are skipped unless -a is given
    - exclude patterns (-e) win over everything else
    - patterns from ignore files (.gitignore and --ignore names) apply to the directory
      holding the file and everything below it
    - with include patterns (-i), only matching files are shown; directories are kept
      when they contain something shown or match a pattern themselves
    """

    epilog = f"""
    Configuration:
      Defaults for most options can be stored as JSON in {get_config_path()},
      using the long option names as keys, e.g. {{"show-all": true, "max-depth": 2}}.
      Command-line options take precedence. Use --no-config to ignore the file.

    Examples:
      # Basic listing of the current directory
      fstree

      # Two levels deep, with a summary
      fstree -d 2 -r /path/to/project

      # Only Python files, hiding tests
      fstree -i "*.py" -e "tests" /path/to/project

      # Include hidden files and show sizes in kilobytes
      fstree -a -s --size-format kb /path/to/project

      # Honour .dockerignore files in addition to .gitignore
      fstree --ignore .dockerignore /path/to/project

      # JSON document written to a file
      fstree --format json -o tree.json /path/to/project

      # Custom connectors
      fstree -p "|-- " -l "\\\\-- " -c "|   " /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="fstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"fstree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="The directory to display (default: current directory).",
    )
    parser.add_argument(
        "-f",
        "--full-path",
        action="store_true",
        help="Show the full path of each entry instead of its name.",
    )
    parser.add_argument("-p", "--prefix", metavar="STR", help="Connector for entries that have later siblings.")
    parser.add_argument("-l", "--last-prefix", metavar="STR", help="Connector for the last entry of a directory.")
    parser.add_argument(
        "-c",
        "--child-prefix",
        metavar="STR",
        help="Continuation drawn below entries that have later siblings.",
    )
    parser.add_argument(
        "-a",
        "--show-all",
        "--all",
        dest="show_all",
        action="store_true",
        help="Show hidden files and directories.",
    )
    parser.add_argument(
        "-i",
        "--include",
        "--pattern",
        dest="include",
        metavar="PATTERN",
        action="append",
        help="Only show files matching this glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERN",
        action="append",
        help="Hide entries matching this glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "--ignore",
        "--ignore-file",
        dest="ignore",
        metavar="NAME",
        action="append",
        help=(
            "Name of an additional ignore file (gitignore syntax) to honour in every directory, "
            "e.g. .dockerignore (can be specified multiple times). .gitignore is always honoured."
        ),
    )
    parser.add_argument(
        "--directory",
        "--dir",
        "--folder",
        dest="directory",
        action="store_true",
        help="Show directories only.",
    )
    parser.add_argument(
        "-r",
        "--summary",
        "--report",
        dest="summary",
        action="store_true",
        help="Print directory and file counts and the total size after the tree.",
    )
    parser.add_argument(
        "-s",
        "--size",
        "--filesize",
        dest="size",
        action="store_true",
        help="Show the size of each file.",
    )
    parser.add_argument(
        "--size-format",
        metavar="UNIT",
        help="Unit for file sizes: bytes, kb, mb, gb, tb, pb, eb or human (default: bytes).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        "--depth",
        "--level",
        dest="max_depth",
        metavar="N",
        type=non_negative_int,
        help="Descend at most N levels below the root (0 shows only the root).",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--no-color",
        "--plain",
        dest="no_color",
        action="store_true",
        help="Disable ANSI colors. Colors are also off when output is not a terminal.",
    )
    parser.add_argument(
        "--no-config",
        "--nocfg",
        dest="no_config",
        action="store_true",
        help="Do not load the configuration file.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links. By default links are shown with their target and not entered.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help=(
            "How to handle directories that cannot be read (default: ignore). They are always "
            "marked in the output; 'warn' also reports them on stderr, 'fail' aborts."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    for option in ("prefix", "last_prefix", "child_prefix"):
        value = getattr(args, option)
        if value is not None and "\n" in value:
            raise ValueError(f"--{option.replace('_', '-')} cannot contain a newline")
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")
