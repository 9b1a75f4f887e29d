"""Action to take when a directory below the root cannot be read."""

from enum import Enum


class ReadErrorAction(str, Enum):
    """How the tree builder treats an unreadable subdirectory.

    Values:
        RECORD: Keep the directory as a leaf carrying an error marker and continue (default)
        RAISE: Propagate the OSError immediately, aborting the walk
    """

    RECORD = "record"
    RAISE = "raise"
