"""Ignore-file rules using .gitignore pattern syntax, scoped to the directory holding the file."""

import re
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from fstree.types import EntryKind, PathType

from .base_rules import BasePatternRules, as_match_path
from .glob_rules import compile_pattern


class GitIgnoreRules(BasePatternRules):
    """Rules read from ignore files such as ``.gitignore``.

    Each line of an ignore file is one pattern. Blank lines and ``#`` comments are
    skipped, and so are lines that are not valid patterns, such as a lone ``!``. A
    leading ``!`` negates an earlier match and a trailing ``/`` restricts a pattern to
    directories. Patterns from later files and later ``add_rule`` calls take precedence
    over earlier ones, as in Git.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.matches("debug.log")
        True
        >>> rules.matches("keep.log")
        False

    Note:
        Paths given to matches() are relative to the directory the ignore file lives in
        and use forward slashes.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreRules with patterns from the given files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)
        if rules_files is not None:
            self.load_rules(rules_files)

    def matches(self, path: str) -> bool:
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        return any(p.include is not None for p in self._patterns)

    def decision(self, path: str) -> Optional[bool]:
        """Return the verdict of the last pattern matching a path.

        Returns:
            True if the path is ignored, False if a ``!`` pattern re-includes it, None if
            no pattern mentions it.

        Example:
            >>> rules = GitIgnoreRules()
            >>> rules.add_rule("*.log")
            >>> rules.add_rule("!keep.log")
            >>> rules.decision("debug.log"), rules.decision("keep.log"), rules.decision("a.txt")
            (True, False, None)
        """
        verdict: Optional[bool] = None
        for pattern in self._patterns:
            if pattern.include is not None and pattern.match_file(path) is not None:
                verdict = pattern.include
        return verdict

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            OSError: If a rules file exists but cannot be read.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()

            for line in lines:
                try:
                    self._patterns.append(GitWildMatchPattern(line))
                except (ValueError, re.error):
                    # Git skips lines it cannot parse and keeps the rest of the file
                    continue
        self.spec = PathSpec(self._patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Args:
            rule: One pattern, e.g. ``"*.pyc"``, ``"build/"`` or ``"!important.txt"``.

        Raises:
            InvalidPatternError: If the pattern cannot be compiled.
        """
        self._patterns.append(compile_pattern(rule))
        self.spec = PathSpec(self._patterns)


class IgnoreScope:
    """Ignore rules bound to the directory in which their ignore file was found.

    The rules apply to that directory's subtree only, and paths are matched relative to
    it, so a pattern like ``/dist`` in ``pkg/.gitignore`` hides ``pkg/dist`` and not
    ``dist``.

    Attributes:
        base (str): Relative POSIX path of the scope directory, ``""`` for the walk root.
        rules (GitIgnoreRules): The rules read from the ignore file(s) in that directory.

    Example:
        >>> rules = GitIgnoreRules()
        >>> rules.add_rule("/dist")
        >>> scope = IgnoreScope("pkg", rules)
        >>> scope.excludes("pkg/dist", EntryKind.DIRECTORY)
        True
        >>> scope.excludes("dist", EntryKind.DIRECTORY)
        False
    """

    def __init__(self, base: str, rules: GitIgnoreRules):
        self.base = base.strip("/")
        self.rules = rules

    def applies_to(self, relative_path: str) -> bool:
        return not self.base or relative_path.startswith(self.base + "/")

    def decision(self, relative_path: str, kind: EntryKind) -> Optional[bool]:
        """Verdict of this scope's rules for a path relative to the walk root.

        Args:
            relative_path: Path relative to the walk root.
            kind: Kind of the entry, used for directory-only patterns.

        Returns:
            None if the scope doesn't cover the path or no rule mentions it, otherwise
            True (ignored) or False (re-included by a ``!`` rule).
        """
        if not self.applies_to(relative_path):
            return None
        local = relative_path[len(self.base) + 1 :] if self.base else relative_path  # noqa: E203
        return self.rules.decision(as_match_path(local, kind))

    def excludes(self, relative_path: str, kind: EntryKind) -> bool:
        """Check whether this scope alone ignores a path."""
        return self.decision(relative_path, kind) is True

    def __repr__(self) -> str:
        return f"IgnoreScope(base={self.base!r})"


def ignored_by(scopes: Sequence[IgnoreScope], relative_path: str, kind: EntryKind) -> bool:
    """Check a path against nested ignore scopes, outermost first.

    As in Git, the deepest ignore file with a rule for the path decides, so a ``!rule``
    in a subdirectory re-includes what an outer file ignored.

    Example:
        >>> outer, inner = GitIgnoreRules(), GitIgnoreRules()
        >>> outer.add_rule("*.txt")
        >>> inner.add_rule("!keep.txt")
        >>> scopes = [IgnoreScope("", outer), IgnoreScope("sub", inner)]
        >>> ignored_by(scopes, "sub/keep.txt", EntryKind.FILE)
        False
        >>> ignored_by(scopes, "sub/other.txt", EntryKind.FILE)
        True
    """
    for scope in reversed(scopes):
        verdict = scope.decision(relative_path, kind)
        if verdict is not None:
            return verdict
    return False
