"""Core constants shared by the buffer, layout, and renderer."""

from typing import Tuple

Color = Tuple[float, float, float, float]

# Unwritten cell and line terminator characters
SENTINEL = "\0"
NEWLINE = "\n"
TERMINATORS = frozenset((SENTINEL, NEWLINE))

# Drawn in place of the glyph at the cursor
CURSOR_MARKER = "|"

DEFAULT_FOREGROUND: Color = (1.0, 1.0, 1.0, 1.0)
DEFAULT_BACKGROUND: Color = (0.0, 0.0, 0.0, 0.0)

DEFAULT_TITLE = "rterm"
DEFAULT_BUFFER_SIZE = 1000
DEFAULT_SCREEN_COLUMNS = 80
DEFAULT_SCREEN_ROWS = 24

__all__ = [
    "Color",
    "SENTINEL",
    "NEWLINE",
    "TERMINATORS",
    "CURSOR_MARKER",
    "DEFAULT_FOREGROUND",
    "DEFAULT_BACKGROUND",
    "DEFAULT_TITLE",
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_SCREEN_COLUMNS",
    "DEFAULT_SCREEN_ROWS",
]
