"""Formatter base class defining how a built tree becomes output.

Concrete formatters receive the finished tree, so every decision that depends on
siblings (such as which child is the last one) is made against the filtered, sorted
children.
"""

from abc import ABC, abstractmethod
from typing import Callable

from fstree.config import RenderConfig
from fstree.file_system_tree.entry import Entry
from fstree.file_system_tree.stats import Stats
from fstree.helpers.ansi import colorize
from fstree.helpers.bytes import SizeFormat, format_bytes
from fstree.types import EntryKind

SizeFormatter = Callable[[int, SizeFormat], str]
Colorizer = Callable[[str, EntryKind], str]


class TreeFormatter(ABC):
    """Abstract base class for output formats.

    The byte formatter and the colorizer are injected so that callers can swap the
    presentation services without touching the tree layout logic.

    Attributes:
        size_formatter: Renders a byte count in a unit, ``format_bytes`` by default.
        colorizer: Wraps display text in color for an entry kind, ``colorize`` by default.

    Example:
        >>> class NamesOnly(TreeFormatter):
        ...     def render(self, root, render_config, stats):
        ...         return " ".join(e.name for e in root.descendants)
    """

    def __init__(self, size_formatter: SizeFormatter = format_bytes, colorizer: Colorizer = colorize) -> None:
        self.size_formatter = size_formatter
        self.colorizer = colorizer

    @abstractmethod
    def render(self, root: Entry, render_config: RenderConfig, stats: Stats) -> str:
        """Produce the complete output for a tree.

        Args:
            root: Root of the built tree.
            render_config: Presentation settings.
            stats: Totals for the tree, used when the summary is enabled.

        Returns:
            The full output, ending with a newline.
        """
        pass
