from abc import ABC, abstractmethod

from fstree.types import EntryKind


def as_match_path(relative_path: str, kind: EntryKind) -> str:
    """Return the form of a relative path that pattern matchers are given.

    Directories carry a trailing slash so that directory-only patterns such as
    ``build/`` match them and never match a file of the same name.

    Example:
        >>> as_match_path("src/build", EntryKind.DIRECTORY)
        'src/build/'
        >>> as_match_path("src/main.py", EntryKind.FILE)
        'src/main.py'
    """
    if kind is EntryKind.DIRECTORY and not relative_path.endswith("/"):
        return relative_path + "/"
    return relative_path


class BasePatternRules(ABC):
    """
    Abstract base class defining the interface for path-matching rules.

    Concrete rule sets (glob include/exclude lists, ignore-file contents) decide whether a
    relative path is matched. What a match *means* (hide, keep) is decided by the caller,
    the entry filter.

    Example:
        >>> from fstree.filters.glob_rules import GlobRules
        >>> rules = GlobRules(["*.pyc"])
        >>> rules.matches("pkg/module.pyc")
        True
        >>> rules.matches("pkg/module.py")
        False
    """

    @abstractmethod
    def matches(self, path: str) -> bool:
        """
        Determine whether a path is matched by any of the rules.

        Args:
            path (str): A POSIX-style path relative to the directory the rules are anchored
                at. Directories should carry a trailing slash (see ``as_match_path``).

        Returns:
            bool: True if the path is matched, False otherwise.
        """
        pass

    def matches_file(self, path: str) -> bool:
        """Like matches(), but a directory match must not carry over to files below it.

        Rule sets that never match through a parent directory can rely on this default.
        """
        return self.matches(path)

    @abstractmethod
    def has_rules(self) -> bool:
        """Return True if at least one pattern is configured."""
        pass
