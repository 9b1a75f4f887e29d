"""Filesystem tree listing utilities.

This package renders a directory subtree as an ASCII-art tree or as a JSON
document, with glob and ignore-file filtering, depth limits and summary counts.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fstree")
except PackageNotFoundError:
    __version__ = "unknown"
