"""Fixed-width line wrapping over a sequence of glyphs."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from .constants import NEWLINE
from .glyph import Glyph


def wrap_lines(glyphs: Iterable[Glyph], max_col: int) -> Iterator[Tuple[int, int, Glyph]]:
    """Yield ``(col, row, glyph)`` for each glyph as if wrapped at ``max_col``.

    The position yielded is where the glyph itself sits. A newline ends its
    row; any other glyph advances one column and wraps once the row holds
    ``max_col`` glyphs. Only the order of the input matters, so the same
    walk lays text out forwards and counts rows backwards from the cursor.
    """
    col = 0
    row = 0
    for glyph in glyphs:
        yield col, row, glyph
        if glyph.char == NEWLINE:
            row += 1
            col = 0
        else:
            col += 1
        if col >= max_col:
            row += 1
            col = 0


__all__ = ["wrap_lines"]
