"""Display helpers: byte-count formatting and ANSI coloring."""

from .ansi import colorize
from .bytes import SizeFormat, format_bytes

__all__ = ["SizeFormat", "colorize", "format_bytes"]
