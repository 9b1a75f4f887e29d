"""Output formatters for built trees."""

from typing import Any, Dict, Type

from fstree.exceptions import ConfigurationError

from .base_formatter import TreeFormatter
from .json_formatter import JSONFormatter
from .text_formatter import TextFormatter

FORMATTERS: Dict[str, Type[TreeFormatter]] = {
    "text": TextFormatter,
    "json": JSONFormatter,
}


def get_formatter(output_format: str, **kwargs: Any) -> TreeFormatter:
    """Return a formatter instance for an output format name.

    Args:
        output_format: ``"text"`` or ``"json"``.
        **kwargs: Passed to the formatter (size_formatter, colorizer, ...).

    Raises:
        ConfigurationError: If the format is unknown.
    """
    try:
        formatter_class = FORMATTERS[output_format]
    except KeyError:
        raise ConfigurationError(f"Unsupported output format: {output_format}")
    return formatter_class(**kwargs)


__all__ = ["FORMATTERS", "JSONFormatter", "TextFormatter", "TreeFormatter", "get_formatter"]
