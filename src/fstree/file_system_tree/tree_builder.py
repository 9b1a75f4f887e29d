"""Filtered, depth-limited construction of the entry tree.

This module walks a directory depth-first, consults the entry filter for every candidate,
honours ignore files found along the way and produces a tree of Entry nodes plus the
statistics describing it.
"""

import os
import stat
from pathlib import Path
from typing import List, NamedTuple, Optional, Set, Tuple

from fstree.config import FilterConfig
from fstree.exceptions import ConfigurationError
from fstree.file_system_tree.entry import LOOP_MARKER, Entry
from fstree.file_system_tree.file_identifier import FileIdentifier
from fstree.file_system_tree.read_error_action import ReadErrorAction
from fstree.file_system_tree.stats import Stats
from fstree.filters.entry_filter import EntryFilter
from fstree.filters.git_rules import GitIgnoreRules, IgnoreScope
from fstree.types import EntryKind, PathType

IgnoreScopes = Tuple[IgnoreScope, ...]


class BuildResult(NamedTuple):
    root: Entry
    errors: List[Tuple[str, str]]
    stats: Stats


class TreeBuilder:
    """Builds the in-memory tree for one root directory.

    Traversal is depth-first with children sorted by name, so the same filesystem state
    and configuration always give the same tree. Each candidate goes through the entry
    filter; directories are only listed while their depth is below ``max_depth``.

    With include patterns configured, every directory is walked so that matching files
    deeper down can be found. A directory is dropped afterwards if it ended up with no
    children and does not match an include pattern itself. Directories that could not be
    read are never dropped, so their error stays visible.

    Error Handling:
        - The root must exist, be a directory and be listable; otherwise the OSError
          (FileNotFoundError, NotADirectoryError, PermissionError, ...) propagates.
        - An OSError below the root is recorded on that directory's Entry (``error``) and
          in ``errors``, and the walk continues. With ReadErrorAction.RAISE it propagates.

    Symbolic Link Behavior:
        By default a symlink is a leaf FILE entry whose ``symlink_target`` holds the link
        text. With ``follow_symlinks`` the target is walked like any other entry; a link
        leading back to a directory on the current branch becomes a leaf marked
        ``[loop detected]``.

    Attributes:
        root_path (Path): The root directory as given.
        filter_config (FilterConfig): The filter configuration.
        max_depth (Optional[int]): Depth limit, None for unlimited.
        stats (Stats): Totals of the last build.
        errors (List[Tuple[str, str]]): ``(relative_path, message)`` for each unreadable directory.

    Example:
        >>> builder = TreeBuilder("src", FilterConfig(exclude=["*.pyc"]), max_depth=2)  # doctest: +SKIP
        >>> root = builder.build()  # doctest: +SKIP
        >>> str(builder.stats)  # doctest: +SKIP
        '3 directories, 12 files (48213 bytes)'
    """

    def __init__(
        self,
        root_path: PathType,
        filter_config: Optional[FilterConfig] = None,
        max_depth: Optional[int] = None,
        follow_symlinks: bool = False,
        permission_action: ReadErrorAction = ReadErrorAction.RECORD,
    ) -> None:
        """Initialize a TreeBuilder.

        Raises:
            InvalidPatternError: If an include or exclude pattern is malformed.
            ConfigurationError: If max_depth is negative.
        """
        if max_depth is not None and max_depth < 0:
            raise ConfigurationError(f"Max depth cannot be negative: {max_depth}")
        self.root_path = Path(root_path)
        self.filter_config = filter_config if filter_config is not None else FilterConfig()
        self.entry_filter = EntryFilter(self.filter_config)
        self.max_depth = max_depth
        self.follow_symlinks = follow_symlinks
        self.permission_action = ReadErrorAction(permission_action)
        self.stats = Stats()
        self.errors: List[Tuple[str, str]] = []

    def build(self) -> Entry:
        """Walk the filesystem and return the root Entry.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If the root cannot be listed, or a subdirectory cannot be listed and
                permission_action is RAISE.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        self.stats = Stats()
        self.errors = []

        root = Entry(self._root_name(), self.root_path, "", EntryKind.DIRECTORY)
        branch: Set[FileIdentifier] = set()
        self._descend(root, 0, (), branch)
        return root

    def _root_name(self) -> str:
        resolved = self.root_path.resolve()
        return resolved.name or str(resolved)

    def _descend(self, entry: Entry, depth: int, scopes: IgnoreScopes, branch: Set[FileIdentifier]) -> None:
        """List a directory's children unless the depth limit or a loop stops us."""
        if self.max_depth is not None and depth >= self.max_depth:
            return

        file_id = FileIdentifier.of(entry.fs_path) if self.follow_symlinks else None
        if file_id is not None and file_id in branch:
            entry.symlink_target = LOOP_MARKER
            return

        if file_id is not None:
            branch.add(file_id)
        try:
            self._populate(entry, depth, scopes, branch)
        finally:
            if file_id is not None:
                branch.discard(file_id)

    def _populate(self, entry: Entry, depth: int, scopes: IgnoreScopes, branch: Set[FileIdentifier]) -> None:
        try:
            names = sorted(os.listdir(entry.fs_path))
            scopes = scopes + self._load_ignore_scope(entry)
        except OSError as e:
            if entry.parent is None or self.permission_action is ReadErrorAction.RAISE:
                raise
            self._record_error(entry, e)
            return

        for name in names:
            child_path = entry.fs_path / name
            relative_path = f"{entry.relative_path}/{name}" if entry.relative_path else name

            inspected = self._inspect(child_path)
            if inspected is None:
                # Vanished between listing and stat
                continue
            kind, size, target = inspected

            if not self.entry_filter.is_visible(relative_path, kind, scopes):
                continue

            child = Entry(name, child_path, relative_path, kind, byte_size=size, symlink_target=target, parent=entry)
            if kind is EntryKind.DIRECTORY:
                self._descend(child, depth + 1, scopes, branch)
                if self._prune(child):
                    child.parent = None
                    continue
            self.stats.record(child)

    def _prune(self, entry: Entry) -> bool:
        """Whether an include-mode directory should be dropped after its walk."""
        if not self.entry_filter.include_mode:
            return False
        if entry.children or entry.error is not None:
            return False
        return not self.entry_filter.matches_include(entry.relative_path, entry.kind)

    def _inspect(self, path: Path) -> Optional[Tuple[EntryKind, Optional[int], Optional[str]]]:
        """Return ``(kind, size, symlink_target)`` for a path, or None if it is gone."""
        is_link = path.is_symlink()
        if is_link and not self.follow_symlinks:
            return EntryKind.FILE, self._lstat_size(path), self._read_link(path)

        try:
            stat_info = path.stat()
        except OSError:
            if is_link:
                # Dangling link: nothing to follow, show the link itself
                return EntryKind.FILE, self._lstat_size(path), self._read_link(path)
            return None

        if stat.S_ISDIR(stat_info.st_mode):
            return EntryKind.DIRECTORY, None, None
        return EntryKind.FILE, stat_info.st_size, None

    @staticmethod
    def _lstat_size(path: Path) -> int:
        try:
            return path.lstat().st_size
        except OSError:
            return 0

    @staticmethod
    def _read_link(path: Path) -> str:
        try:
            return os.readlink(path)
        except OSError:
            return ""

    def _load_ignore_scope(self, entry: Entry) -> IgnoreScopes:
        """Read the configured ignore files present in a directory into a new scope."""
        rules: Optional[GitIgnoreRules] = None
        for name in self.filter_config.ignore_files:
            candidate = entry.fs_path / name
            if candidate.is_file():
                if rules is None:
                    rules = GitIgnoreRules()
                rules.load_rules(candidate)
        if rules is None or not rules.has_rules():
            return ()
        return (IgnoreScope(entry.relative_path, rules),)

    def _record_error(self, entry: Entry, error: OSError) -> None:
        message = error.strerror or str(error)
        entry.error = message
        self.errors.append((entry.relative_path, message))


def build_tree(
    root_path: PathType,
    filter_config: Optional[FilterConfig] = None,
    max_depth: Optional[int] = None,
    **kwargs: object,
) -> BuildResult:
    """Build the tree for a root directory in one call.

    Args:
        root_path: Directory to walk.
        filter_config: Filter configuration, defaults to FilterConfig().
        max_depth: Depth limit, None for unlimited.
        **kwargs: Further TreeBuilder options (follow_symlinks, permission_action).

    Returns:
        BuildResult with the root Entry, the partial errors and the statistics.

    Example:
        >>> result = build_tree("docs", max_depth=1)  # doctest: +SKIP
        >>> result.root.name, result.errors  # doctest: +SKIP
        ('docs', [])
    """
    builder = TreeBuilder(root_path, filter_config, max_depth, **kwargs)  # type: ignore[arg-type]
    root = builder.build()
    return BuildResult(root, builder.errors, builder.stats)
