"""ANSI color helpers for tree output.

Only the entry name is ever wrapped in escape sequences; branch connectors stay plain so
that the tree lines up the same with and without color.
"""

from enum import IntEnum
from typing import Dict, Sequence, Tuple

from fstree.types import EntryKind


class ANSI(IntEnum):
    """SGR codes used by the palette."""

    RESET = 0
    BOLD = 1
    BLUE = 34
    BRIGHT_WHITE = 97


PALETTE: Dict[EntryKind, Tuple[ANSI, ...]] = {
    EntryKind.DIRECTORY: (ANSI.BOLD, ANSI.BLUE),
    EntryKind.FILE: (ANSI.BRIGHT_WHITE,),
}


def ansi(text: str, codes: Sequence[ANSI]) -> str:
    """Wrap text in an SGR sequence and a trailing reset.

    Example:
        >>> ansi("src/", [ANSI.BOLD, ANSI.BLUE])
        '\\x1b[1;34msrc/\\x1b[0m'
    """
    if not codes:
        return text
    return f"\x1b[{';'.join(str(int(c)) for c in codes)}m{text}\x1b[{int(ANSI.RESET)}m"


def colorize(text: str, kind: EntryKind, enabled: bool = True) -> str:
    """Color an entry's display text according to its kind.

    Args:
        text: The display text (name or path, with any ``/`` suffix).
        kind: Entry kind selecting the palette.
        enabled: When False, the text is returned unchanged.

    Example:
        >>> colorize("a.txt", EntryKind.FILE, enabled=False)
        'a.txt'
        >>> colorize("a.txt", EntryKind.FILE)
        '\\x1b[97ma.txt\\x1b[0m'
    """
    if not enabled:
        return text
    return ansi(text, PALETTE[kind])

