"""Filesystem tree model and builder.

This package provides the Entry node type, the filtered depth-limited tree builder and
the statistics collected while building.
"""
