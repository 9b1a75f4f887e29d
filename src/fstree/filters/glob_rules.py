"""Include/exclude glob rules compiled once with pathspec."""

import re
from typing import Iterable, List

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from fstree.exceptions import InvalidPatternError

from .base_rules import BasePatternRules

# Capture group pathspec fills when a pattern matched a parent directory of the path
DIRECTORY_MARK = "ps_d"


def compile_pattern(pattern: str) -> GitWildMatchPattern:
    """Compile a single glob pattern, converting compiler failures to InvalidPatternError.

    Args:
        pattern: A shell-style glob (``*``, ``**``, ``?``, ``[...]``).

    Returns:
        The compiled pattern.

    Raises:
        InvalidPatternError: If the pattern is empty or rejected by the compiler. Patterns
            that compile to nothing, such as an unterminated ``[`` or a ``#`` comment, are
            rejected too.

    Example:
        >>> compile_pattern("*.txt").match_file("notes/a.txt") is not None
        True
    """
    if not pattern or not pattern.strip():
        raise InvalidPatternError(pattern, "pattern is empty")
    try:
        compiled = GitWildMatchPattern(pattern)
    except (ValueError, re.error) as e:
        raise InvalidPatternError(pattern, str(e))
    if compiled.include is None:
        raise InvalidPatternError(pattern, "pattern matches nothing")
    return compiled


class GlobRules(BasePatternRules):
    """A list of glob patterns matched against entry names and relative paths.

    Patterns follow gitignore wildmatch semantics as implemented by pathspec:

    - ``*`` matches any run of characters except ``/``
    - ``**`` matches any run of characters including ``/``
    - ``?`` matches one character, ``[...]`` a character class
    - a pattern without a ``/`` matches the entry name at any depth, a pattern with a
      ``/`` is anchored to the root of the walk

    Matching is case-sensitive. Every pattern is compiled once in the constructor, so a
    malformed pattern is reported before any traversal begins.

    Attributes:
        patterns (List[str]): The source patterns, in the order given.
        spec (PathSpec): The compiled matcher.

    Example:
        >>> rules = GlobRules(["*.txt", "docs/**/*.md"])
        >>> rules.matches("a.txt")
        True
        >>> rules.matches("sub/c.txt")
        True
        >>> rules.matches("docs/guide/intro.md")
        True
        >>> rules.matches("README.md")
        False
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[str] = list(patterns)
        self.spec = PathSpec([compile_pattern(p) for p in self.patterns])

    def matches(self, path: str) -> bool:
        return self.spec.match_file(path)

    def matches_file(self, path: str) -> bool:
        """Match a file path against the patterns themselves.

        A pattern that names a directory also matches everything below it, so ``*.txt``
        matches ``notes.txt/x.py`` through the directory ``notes.txt``. That extension is
        dropped here: a pattern counts only when it matches the file's own path.

        Example:
            >>> rules = GlobRules(["*.txt"])
            >>> rules.matches("notes.txt/x.py"), rules.matches_file("notes.txt/x.py")
            (True, False)
            >>> rules.matches_file("notes/a.txt")
            True
        """
        matched = False
        for pattern in self.spec.patterns:
            match = pattern.regex.search(path)
            if match is None or match.groupdict().get(DIRECTORY_MARK) is not None:
                continue
            matched = bool(pattern.include)
        return matched

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"GlobRules({self.patterns!r})"
