"""JSON document output.

This module provides a formatter that serializes the tree as one nested JSON object,
with no prefix or branch concepts.
"""

import json
from typing import Any, Dict

from fstree.config import RenderConfig
from fstree.file_system_tree.entry import Entry
from fstree.file_system_tree.stats import Stats
from fstree.types import EntryKind

from .base_formatter import TreeFormatter


class JSONFormatter(TreeFormatter):
    """Formatter that emits the tree as a nested JSON document.

    Every node has the structure:
    {
        "name": "sub",
        "kind": "directory",      # or "file"
        "children": [...]         # directories only, in tree order
    }

    Files carry ``"size"`` (bytes) instead of ``"children"``. Optional keys:
    ``"path"`` in full-path mode, ``"target"`` for unfollowed symlinks and ``"error"``
    for directories that could not be read. When the summary is enabled the top-level
    object also carries ``"summary": {"directories": ..., "files": ..., "bytes": ...}``.

    Attributes:
        indent: Indentation passed to json.dumps, None for a single line.

    Example:
        >>> from pathlib import Path
        >>> root = Entry("project", Path("project"), "", EntryKind.DIRECTORY)
        >>> _ = Entry("a.txt", Path("project/a.txt"), "a.txt", EntryKind.FILE, byte_size=10, parent=root)
        >>> JSONFormatter(indent=None).render(root, RenderConfig(output_format="json"), Stats())
        '{"name": "project", "kind": "directory", "children": [{"name": "a.txt", "kind": "file", "size": 10}]}\\n'
    """

    def __init__(self, indent: Any = 2, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.indent = indent

    def render(self, root: Entry, render_config: RenderConfig, stats: Stats) -> str:
        return json.dumps(self.to_document(root, render_config, stats), indent=self.indent, ensure_ascii=False) + "\n"

    def to_document(self, root: Entry, render_config: RenderConfig, stats: Stats) -> Dict[str, Any]:
        """Build the document as plain Python objects."""
        document = self._node(root, render_config)
        if render_config.summary:
            document["summary"] = stats.as_dict()
        return document

    def _node(self, entry: Entry, render_config: RenderConfig) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": entry.name, "kind": entry.kind.value}
        if render_config.full_path:
            data["path"] = str(entry.fs_path)
        if entry.kind is EntryKind.FILE:
            data["size"] = entry.byte_size
        if entry.symlink_target is not None:
            data["target"] = entry.symlink_target
        if entry.error is not None:
            data["error"] = entry.error
        if entry.kind is EntryKind.DIRECTORY:
            data["children"] = [self._node(child, render_config) for child in entry.children]
        return data
