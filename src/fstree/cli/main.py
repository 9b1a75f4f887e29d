"""Command-line interface for fstree.

This module provides the ``fstree`` command. It parses arguments, merges them with the
configuration file, builds and renders the tree, and writes the result while handling
interruptions gracefully.

The tree is always built and rendered completely before anything is written, so a fatal
error produces a diagnostic on stderr and no partial output.

Exit Codes:
    0: Successful completion (including directories marked unreadable in the output)
    1: Fatal error: missing or unreadable root, invalid pattern, size unit or option
    2: Command-line syntax error
    126: Unreadable directory with --permission-action fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List the current directory
    $ fstree

    # Two levels, hidden files included, with a summary
    $ fstree -a -d 2 -r /path/to/project

    # Display version information
    $ fstree --version
"""

import sys
from typing import List, Optional, Sequence, Tuple

from fstree.cli.argparser import create_parser, validate_args
from fstree.cli.safe_writer import SafeWriter
from fstree.cli.signal_handler import setup_signal_handling, signal_handler
from fstree.config import load_file_config, merge_configs
from fstree.fstree import FsTree

EXIT_ERROR = 1
EXIT_PERMISSION_DENIED = 126


def format_read_errors(listing: FsTree, errors: List[Tuple[str, str]]) -> List[str]:
    """Format one warning line per directory that could not be read."""
    return [f"Warning: cannot read {listing.directory / relative_path}: {message}" for relative_path, message in errors]


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the fstree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)

        file_config = {} if args.no_config else load_file_config()
        color_capable = args.output is None and sys.stdout.isatty()
        config = merge_configs(file_config, args, color_capable=color_capable)

        listing = FsTree.from_config(config)
        output = listing.render()
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_PERMISSION_DENIED if args.permission_action == "fail" else EXIT_ERROR)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    if args.permission_action == "warn":
        for line in format_read_errors(listing, listing.errors):
            print(line, file=sys.stderr)

    try:
        with SafeWriter(args.output) as safe_writer:
            safe_writer.write(output)
    except BrokenPipeError:
        pass
    except OSError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
