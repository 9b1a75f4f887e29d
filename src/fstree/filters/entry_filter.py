"""Visibility decision for a single candidate entry."""

from typing import Optional, Sequence

from fstree.config import FilterConfig
from fstree.types import EntryKind

from .base_rules import BasePatternRules, as_match_path
from .git_rules import IgnoreScope, ignored_by
from .glob_rules import GlobRules

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def is_visible(
    path: str,
    kind: EntryKind,
    show_hidden: bool,
    include_patterns: Optional[BasePatternRules],
    exclude_patterns: Optional[BasePatternRules],
    ignore_patterns: Sequence[IgnoreScope],
    directories_only: bool = False,
    is_root: bool = False,
) -> bool:
    """Decide whether an entry belongs in the tree.

    Rules are applied in order and the first one that decides wins:

    1. hidden names are dropped unless ``show_hidden`` is set
    2. an exclude pattern match drops the entry
    3. an ignore-file verdict drops the entry; the deepest scope with a rule for the
       path decides
    4. with include patterns configured, a file's own path must match one of them;
       directories pass here so that matching descendants can still be reached
    5. with ``directories_only`` set, files are dropped

    The walk root is always visible.

    Args:
        path: POSIX-style path relative to the walk root.
        kind: Kind of the entry.
        show_hidden: Whether dot-prefixed names are shown.
        include_patterns: Include rules, or None.
        exclude_patterns: Exclude rules, or None.
        ignore_patterns: Ignore scopes active for the entry's parent directory, outermost
            first.
        directories_only: Whether files are hidden.
        is_root: Whether the entry is the walk root.

    Returns:
        True if the entry is visible.

    Example:
        >>> include = GlobRules(["*.txt"])
        >>> exclude = GlobRules(["secret.*"])
        >>> is_visible("notes.txt", EntryKind.FILE, False, include, exclude, [])
        True
        >>> is_visible("secret.txt", EntryKind.FILE, False, include, exclude, [])
        False
        >>> is_visible("src", EntryKind.DIRECTORY, False, include, exclude, [])
        True
        >>> is_visible(".env", EntryKind.FILE, False, None, None, [])
        False
    """
    if is_root:
        return True

    name = path.rstrip("/").rsplit("/", 1)[-1]
    if not show_hidden and is_hidden(name):
        return False

    match_path = as_match_path(path, kind)
    if exclude_patterns is not None and exclude_patterns.matches(match_path):
        return False

    if ignored_by(ignore_patterns, path, kind):
        return False

    if kind is EntryKind.FILE:
        if (
            include_patterns is not None
            and include_patterns.has_rules()
            and not include_patterns.matches_file(match_path)
        ):
            return False
        if directories_only:
            return False

    return True


class EntryFilter:
    """Visibility rules compiled from a FilterConfig.

    Patterns are compiled once, in the constructor, so that a malformed pattern aborts
    before any directory is read.

    Attributes:
        config (FilterConfig): The configuration the filter was built from.
        include (GlobRules): Compiled include patterns.
        exclude (GlobRules): Compiled exclude patterns.

    Raises:
        InvalidPatternError: If any include or exclude pattern is malformed.

    Example:
        >>> f = EntryFilter(FilterConfig(exclude=["*.txt"]))
        >>> f.is_visible("sub", EntryKind.DIRECTORY)
        True
        >>> f.is_visible("sub/c.txt", EntryKind.FILE)
        False
    """

    def __init__(self, config: FilterConfig):
        self.config = config
        self.include = GlobRules(config.include)
        self.exclude = GlobRules(config.exclude)

    @property
    def include_mode(self) -> bool:
        """True when include patterns restrict which files are shown."""
        return self.include.has_rules()

    def is_visible(
        self, relative_path: str, kind: EntryKind, ignore_scopes: Sequence[IgnoreScope] = (), is_root: bool = False
    ) -> bool:
        return is_visible(
            relative_path,
            kind,
            self.config.show_hidden,
            self.include,
            self.exclude,
            ignore_scopes,
            directories_only=self.config.directories_only,
            is_root=is_root,
        )

    def matches_include(self, relative_path: str, kind: EntryKind) -> bool:
        """Check a path against the include patterns alone."""
        return self.include.matches(as_match_path(relative_path, kind))
