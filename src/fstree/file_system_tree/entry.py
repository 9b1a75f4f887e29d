"""Node representation for entries in the rendered tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node

from fstree.types import EntryKind

LOOP_MARKER = "[loop detected]"


class Entry(Node):  # type: ignore
    """One file or directory that made it into the tree.

    Extends anytree.Node, which provides parent/children bookkeeping and the ``depth``
    property (the root has depth 0, a child is one deeper than its parent). Children are
    kept in the order the builder attached them: sorted by name, already filtered.

    Note:
        anytree reserves ``path`` (the node chain from the root) and ``size`` (the
        subtree node count), hence ``fs_path`` and ``byte_size``.

    Attributes:
        name (str): Basename of the entry.
        fs_path (Path): The walk root as given, joined with the relative path.
        relative_path (str): POSIX-style path from the walk root, ``""`` for the root.
        kind (EntryKind): FILE or DIRECTORY.
        byte_size (Optional[int]): Size in bytes for files, None for directories.
        error (Optional[str]): Message describing why a directory could not be listed.
        symlink_target (Optional[str]): Link text for unfollowed symbolic links.

    Example:
        >>> root = Entry("project", Path("project"), "", EntryKind.DIRECTORY)
        >>> a = Entry("a.txt", Path("project/a.txt"), "a.txt", EntryKind.FILE, byte_size=10, parent=root)
        >>> b = Entry("b.txt", Path("project/b.txt"), "b.txt", EntryKind.FILE, byte_size=20, parent=root)
        >>> a.depth, a.is_last, b.is_last
        (1, False, True)
    """

    def __init__(
        self,
        name: str,
        fs_path: Path,
        relative_path: str,
        kind: EntryKind,
        byte_size: Optional[int] = None,
        error: Optional[str] = None,
        symlink_target: Optional[str] = None,
        parent: Optional["Entry"] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.fs_path = fs_path
        self.relative_path = relative_path
        self.kind = kind
        self.byte_size = byte_size
        self.error = error
        self.symlink_target = symlink_target

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.symlink_target is not None

    @property
    def is_last(self) -> bool:
        """Whether this is the final child of its parent. Always False for the root."""
        if self.parent is None:
            return False
        return self.parent.children[-1] is self
