"""Command-line interface for fstree."""
