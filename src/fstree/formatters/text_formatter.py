"""ASCII-art tree output."""

from typing import Iterator

from fstree.config import RenderConfig
from fstree.file_system_tree.entry import Entry
from fstree.file_system_tree.stats import Stats

from .base_formatter import TreeFormatter


class TextFormatter(TreeFormatter):
    """Formats the tree like the Unix ``tree`` command.

    Each non-root line is built from:

    - one segment per ancestor below the root: ``child_prefix`` if that ancestor has
      later siblings, otherwise as many spaces as ``child_prefix`` is wide
    - ``last_prefix`` for the final child of a directory, ``prefix`` for the others
    - the display name, with ``/`` after directories, ``-> target`` after symlinks,
      an optional size and an optional ``[error: ...]`` annotation

    The summary, if enabled, follows the tree after a blank line.

    Example:
        >>> print(TextFormatter().render(root, RenderConfig(summary=True), stats), end="")  # doctest: +SKIP
        project/
        ├── a.txt
        ├── b.txt
        └── sub/
            └── c.txt
        <BLANKLINE>
        1 directories, 3 files (35 bytes)
    """

    def render(self, root: Entry, render_config: RenderConfig, stats: Stats) -> str:
        return "".join(line + "\n" for line in self.stream_lines(root, render_config, stats))

    def stream_lines(self, root: Entry, render_config: RenderConfig, stats: Stats) -> Iterator[str]:
        """Yield the output one line at a time, without line terminators."""
        yield self._label(root, render_config)
        yield from self._child_lines(root, "", render_config)

        if render_config.summary:
            yield ""
            yield str(stats)

    def _child_lines(self, entry: Entry, prefix: str, render_config: RenderConfig) -> Iterator[str]:
        for child in entry.children:
            connector = render_config.last_prefix if child.is_last else render_config.prefix
            yield f"{prefix}{connector}{self._label(child, render_config)}"

            if child.children:
                if child.is_last:
                    extension = " " * len(render_config.child_prefix)
                else:
                    extension = render_config.child_prefix
                yield from self._child_lines(child, prefix + extension, render_config)

    def _label(self, entry: Entry, render_config: RenderConfig) -> str:
        text = str(entry.fs_path) if render_config.full_path else entry.name
        if entry.is_dir:
            text += "/"
        if render_config.color:
            text = self.colorizer(text, entry.kind)

        if entry.symlink_target is not None:
            text += f" -> {entry.symlink_target}"
        if render_config.show_size and entry.byte_size is not None:
            text += f" ({self.size_formatter(entry.byte_size, render_config.size_format)})"
        if entry.error is not None:
            text += f" [error: {entry.error}]"
        return text
