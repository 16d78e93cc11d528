"""Fixed-capacity ring of glyphs with a moving write cursor."""

from __future__ import annotations

import logging
from dataclasses import replace
from itertools import takewhile
from typing import Iterator, List, Optional, Tuple

from .constants import NEWLINE, TERMINATORS, Color
from .glyph import Glyph
from .line_iter import wrap_lines

logger = logging.getLogger(__name__)


class CircularBuffer:
    """Store glyphs in a fixed ring, overwriting the oldest cell on each push."""

    def __init__(self, capacity: int):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Buffer capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._cells: List[Glyph] = [Glyph() for _ in range(capacity)]
        self._cursor = 0
        logger.debug("Created buffer with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Index of the next cell to be written."""
        return self._cursor

    @property
    def cells(self) -> Tuple[Glyph, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> Glyph:
        return self._cells[index]

    def text(self) -> str:
        """Return every cell's character in array order."""
        return "".join(glyph.char for glyph in self._cells)

    def push_glyph(self, glyph: Glyph) -> None:
        # Each cell holds its own object so is_at_cursor can compare identity.
        self._cells[self._cursor] = replace(glyph)
        self.seek_cursor(1)

    def push_text(
        self,
        text: str,
        foreground: Optional[Color] = None,
        background: Optional[Color] = None,
    ) -> None:
        """Push one glyph per character, optionally overriding the colours."""
        overrides = {}
        if foreground is not None:
            overrides["foreground"] = foreground
        if background is not None:
            overrides["background"] = background
        for char in text:
            self.push_glyph(Glyph(char, **overrides))

    def seek_cursor(self, n: int) -> None:
        """Move the cursor by ``n`` cells, wrapping in either direction."""
        self._cursor = (self._cursor + n) % self._capacity

    def overwrite(self, glyph: Glyph) -> None:
        """Replace the cell at the cursor without moving the cursor."""
        self._cells[self._cursor] = replace(glyph)

    def is_at_cursor(self, glyph: Glyph) -> bool:
        return glyph is self._cells[self._cursor]

    def tail(self, max_col: int, max_row: int) -> Iterator[Glyph]:
        """Return the glyphs visible in a ``max_col`` x ``max_row`` window.

        Content is read backwards from the cursor. Everything from index 0
        through the cursor is taken, followed by the leftover cells after
        the cursor up to the first newline or unwritten cell, since those
        still continue the current line from the previous lap of the ring.
        That sequence is wrapped in reverse so row 0 is the line ending at
        the cursor, cut once ``max_row`` rows are filled, and handed back
        oldest first.

        The iterator references cells in place. Consume it before mutating
        the buffer again.
        """
        if max_col <= 0 or max_row <= 0:
            return iter(())

        offset = self._cursor + 1
        head = self._cells[:offset]
        leftover = takewhile(lambda glyph: glyph.char not in TERMINATORS, self._cells[offset:])
        logical = head + list(leftover)

        visible = [
            glyph
            for _, _, glyph in takewhile(
                lambda item: _effective_row(item[1], item[2]) < max_row,
                wrap_lines(reversed(logical), max_col),
            )
        ]
        return reversed(visible)


def _effective_row(row: int, glyph: Glyph) -> int:
    # A newline belongs to the row it terminates.
    return row + 1 if glyph.char == NEWLINE else row


__all__ = ["CircularBuffer"]
