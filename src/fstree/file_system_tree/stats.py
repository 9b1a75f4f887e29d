"""Running totals for the entries included in a tree."""

from typing import Tuple

from fstree.file_system_tree.entry import Entry


class Stats:
    """Directory count, file count and total file size of a built tree.

    The builder records an entry only once its place in the final tree is settled, so
    the totals always describe exactly what gets rendered. The root is never recorded.

    Example:
        >>> stats = Stats()
        >>> stats.directories, stats.files, stats.total_bytes
        (0, 0, 0)
        >>> str(stats)
        '0 directories, 0 files (0 bytes)'
    """

    def __init__(self) -> None:
        self.directories = 0
        self.files = 0
        self.total_bytes = 0

    def record(self, entry: Entry) -> None:
        """Add one included entry to the totals."""
        if entry.is_dir:
            self.directories += 1
        else:
            self.files += 1
            self.total_bytes += entry.byte_size or 0

    def summary(self) -> Tuple[int, int, int]:
        """Return ``(dir_count, file_count, total_bytes)``."""
        return self.directories, self.files, self.total_bytes

    def as_dict(self) -> dict:
        return {"directories": self.directories, "files": self.files, "bytes": self.total_bytes}

    def __str__(self) -> str:
        return f"{self.directories} directories, {self.files} files ({self.total_bytes} bytes)"

    def __repr__(self) -> str:
        return f"Stats(directories={self.directories}, files={self.files}, total_bytes={self.total_bytes})"
