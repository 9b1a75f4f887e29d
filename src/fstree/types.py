from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Kind of a node in the rendered tree.

    Unfollowed symbolic links are reported as FILE entries carrying a link target,
    so only two kinds ever appear in output.

    Attributes:
        FILE: Regular file (or an unfollowed symlink)
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
