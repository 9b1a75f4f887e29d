"""Directory tree listing with filtering and multiple output formats.

This module ties the pieces together: the resolved configuration drives a TreeBuilder,
and the built tree and its statistics are handed to a formatter.
"""

from typing import List, Optional, Tuple, Union

from fstree.config import AppConfig, FilterConfig, RenderConfig
from fstree.file_system_tree.entry import Entry
from fstree.file_system_tree.read_error_action import ReadErrorAction
from fstree.file_system_tree.stats import Stats
from fstree.file_system_tree.tree_builder import TreeBuilder
from fstree.formatters import TreeFormatter, get_formatter
from fstree.types import PathType


class FsTree:
    """Builds and renders the listing for one directory.

    All configuration is validated in the constructor (patterns compiled, output format
    and size unit resolved), so a bad setting fails before the filesystem is touched. The
    tree is built on first access and the whole tree exists before any output is
    produced.

    Attributes:
        directory (Path): Root directory of the listing.
        render_config (RenderConfig): Presentation settings.

    Example:
        >>> listing = FsTree("src", render_config=RenderConfig(summary=True))  # doctest: +SKIP
        >>> print(listing.render(), end="")  # doctest: +SKIP
        src/
        ├── main.py
        └── utils/
            └── helpers.py
        <BLANKLINE>
        1 directories, 2 files (1523 bytes)

    Raises:
        ConfigurationError: If a pattern, the output format, the size unit or the depth
            limit is invalid.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        filter_config: Optional[FilterConfig] = None,
        render_config: Optional[RenderConfig] = None,
        max_depth: Optional[int] = None,
        follow_symlinks: bool = False,
        permission_action: Union[str, ReadErrorAction] = ReadErrorAction.RECORD,
        formatter: Optional[TreeFormatter] = None,
    ) -> None:
        self.render_config = render_config if render_config is not None else RenderConfig()
        self._builder = TreeBuilder(
            directory,
            filter_config,
            max_depth=max_depth,
            follow_symlinks=follow_symlinks,
            permission_action=ReadErrorAction(permission_action),
        )
        self.directory = self._builder.root_path
        self._formatter = formatter if formatter is not None else get_formatter(self.render_config.output_format)
        self._root: Optional[Entry] = None

    @classmethod
    def from_config(cls, config: AppConfig, formatter: Optional[TreeFormatter] = None) -> "FsTree":
        """Create a listing from a fully resolved AppConfig."""
        return cls(
            config.root,
            filter_config=config.filter,
            render_config=config.render,
            max_depth=config.max_depth,
            follow_symlinks=config.follow_symlinks,
            permission_action=config.permission_action,
            formatter=formatter,
        )

    @property
    def root(self) -> Entry:
        """The root Entry, building the tree if needed.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the path isn't a directory.
            OSError: If the directory can't be listed, or a subdirectory can't be listed
                and permission_action is RAISE.
        """
        self._ensure_built()
        assert self._root is not None
        return self._root

    def _ensure_built(self) -> None:
        if self._root is None:
            self._root = self._builder.build()

    @property
    def stats(self) -> Stats:
        self._ensure_built()
        return self._builder.stats

    @property
    def errors(self) -> List[Tuple[str, str]]:
        """``(relative_path, message)`` for each directory that could not be read."""
        self._ensure_built()
        return list(self._builder.errors)

    @property
    def directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        return self.stats.directories

    @property
    def file_count(self) -> int:
        return self.stats.files

    @property
    def total_bytes(self) -> int:
        return self.stats.total_bytes

    def render(self) -> str:
        """Render the complete output in the configured format."""
        return self._formatter.render(self.root, self.render_config, self.stats)

    def refresh(self) -> None:
        """Drop the built tree so the next access reflects the current filesystem."""
        self._root = None


def render_tree(directory: PathType, **kwargs: object) -> str:
    """Build and render a directory in one call.

    Args:
        directory: Root directory.
        **kwargs: Keyword arguments accepted by FsTree.

    Returns:
        The rendered output.
    """
    return FsTree(directory, **kwargs).render()  # type: ignore[arg-type]
