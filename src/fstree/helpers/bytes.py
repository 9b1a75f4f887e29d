"""Byte-count display formatting.

The size suffix shown next to files is produced here. Fixed units divide by powers of
1000 and round with ``humanfriendly.round_number``; the ``human`` unit lets
``humanfriendly.format_size`` pick the unit per value.
"""

from enum import Enum
from typing import Dict, Union

from humanfriendly import format_size, round_number

from fstree.exceptions import InvalidSizeFormatError


class SizeFormat(str, Enum):
    """Unit used to display file sizes.

    Values:
        BYTES: Raw byte count, e.g. ``35B``
        KILOBYTES .. EXABYTES: Decimal multiples (1000-based), e.g. ``1.5KB``
        HUMAN: Automatically scaled, e.g. ``1.5 KB`` or ``35 bytes``
    """

    BYTES = "bytes"
    KILOBYTES = "kb"
    MEGABYTES = "mb"
    GIGABYTES = "gb"
    TERABYTES = "tb"
    PETABYTES = "pb"
    EXABYTES = "eb"
    HUMAN = "human"

    @classmethod
    def parse(cls, value: Union[str, "SizeFormat"]) -> "SizeFormat":
        """Resolve a unit name or alias, case-insensitively.

        Raises:
            InvalidSizeFormatError: If the name is not a known unit or alias.

        Example:
            >>> SizeFormat.parse("KiloBytes")
            <SizeFormat.KILOBYTES: 'kb'>
            >>> SizeFormat.parse("m")
            <SizeFormat.MEGABYTES: 'mb'>
        """
        if isinstance(value, SizeFormat):
            return value
        try:
            return _ALIASES[str(value).strip().lower()]
        except KeyError:
            raise InvalidSizeFormatError(str(value))


_ALIASES: Dict[str, SizeFormat] = {
    "bytes": SizeFormat.BYTES,
    "b": SizeFormat.BYTES,
    "kb": SizeFormat.KILOBYTES,
    "k": SizeFormat.KILOBYTES,
    "kilo": SizeFormat.KILOBYTES,
    "kilobytes": SizeFormat.KILOBYTES,
    "mb": SizeFormat.MEGABYTES,
    "m": SizeFormat.MEGABYTES,
    "mega": SizeFormat.MEGABYTES,
    "megabytes": SizeFormat.MEGABYTES,
    "gb": SizeFormat.GIGABYTES,
    "g": SizeFormat.GIGABYTES,
    "giga": SizeFormat.GIGABYTES,
    "gigabytes": SizeFormat.GIGABYTES,
    "tb": SizeFormat.TERABYTES,
    "t": SizeFormat.TERABYTES,
    "tera": SizeFormat.TERABYTES,
    "terabytes": SizeFormat.TERABYTES,
    "pb": SizeFormat.PETABYTES,
    "p": SizeFormat.PETABYTES,
    "peta": SizeFormat.PETABYTES,
    "petabytes": SizeFormat.PETABYTES,
    "eb": SizeFormat.EXABYTES,
    "e": SizeFormat.EXABYTES,
    "exa": SizeFormat.EXABYTES,
    "exabytes": SizeFormat.EXABYTES,
    "human": SizeFormat.HUMAN,
    "auto": SizeFormat.HUMAN,
}

# Divider exponent (power of 1000) and display symbol per fixed unit
_UNITS = {
    SizeFormat.BYTES: (0, "B"),
    SizeFormat.KILOBYTES: (1, "KB"),
    SizeFormat.MEGABYTES: (2, "MB"),
    SizeFormat.GIGABYTES: (3, "GB"),
    SizeFormat.TERABYTES: (4, "TB"),
    SizeFormat.PETABYTES: (5, "PB"),
    SizeFormat.EXABYTES: (6, "EB"),
}


def format_bytes(num_bytes: int, unit: Union[str, SizeFormat] = SizeFormat.BYTES) -> str:
    """Render a byte count in the requested unit.

    Args:
        num_bytes: Size in bytes. Must not be negative.
        unit: A SizeFormat or any name accepted by SizeFormat.parse.

    Returns:
        The display string, without surrounding parentheses.

    Raises:
        ValueError: If num_bytes is negative.
        InvalidSizeFormatError: If unit is not recognised.

    Example:
        >>> format_bytes(35)
        '35B'
        >>> format_bytes(1500, "kb")
        '1.5KB'
        >>> format_bytes(2_000_000, SizeFormat.MEGABYTES)
        '2MB'
        >>> format_bytes(1500, "human")
        '1.5 KB'
    """
    if num_bytes < 0:
        raise ValueError("Size cannot be negative")
    unit = SizeFormat.parse(unit)
    if unit is SizeFormat.HUMAN:
        return format_size(num_bytes)
    exponent, symbol = _UNITS[unit]
    if exponent == 0:
        return f"{num_bytes}{symbol}"
    return f"{round_number(num_bytes / 1000**exponent)}{symbol}"
