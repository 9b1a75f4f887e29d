"""Filter engine: glob include/exclude rules, scoped ignore files and the visibility decision."""

from .base_rules import BasePatternRules
from .entry_filter import EntryFilter, is_visible
from .git_rules import GitIgnoreRules, IgnoreScope, ignored_by
from .glob_rules import GlobRules

__all__ = [
    "BasePatternRules",
    "EntryFilter",
    "GitIgnoreRules",
    "GlobRules",
    "IgnoreScope",
    "ignored_by",
    "is_visible",
]
