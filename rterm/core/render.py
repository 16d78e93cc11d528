"""Placement of the visible window onto a character grid."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .buffer import CircularBuffer
from .constants import CURSOR_MARKER
from .glyph import Glyph
from .line_iter import wrap_lines

PlacedGlyph = Tuple[int, int, Glyph, Optional[str]]


def check_cell_size(cell_size: Tuple[float, float]) -> None:
    cell_width, cell_height = cell_size
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_size!r}")


def grid_size(
    view_size: Tuple[float, float], cell_size: Tuple[float, float]
) -> Tuple[int, int]:
    """Return how many whole cells fit in the view as ``(max_col, max_row)``."""
    check_cell_size(cell_size)
    cell_width, cell_height = cell_size
    view_width, view_height = view_size
    return (
        max(math.floor(view_width / cell_width), 0),
        max(math.floor(view_height / cell_height), 0),
    )


def layout(buffer: CircularBuffer, max_col: int, max_row: int) -> List[PlacedGlyph]:
    """Lay the tail window out top to bottom.

    Each entry is ``(col, row, glyph, char)``. ``char`` is the cursor marker
    for the glyph at the cursor, ``None`` for an unwritten cell or newline
    that draws nothing, and the stored character otherwise.
    """
    placed: List[PlacedGlyph] = []
    for col, row, glyph in wrap_lines(buffer.tail(max_col, max_row), max_col):
        if buffer.is_at_cursor(glyph):
            char: Optional[str] = CURSOR_MARKER
        elif glyph.is_terminator:
            char = None
        else:
            char = glyph.char
        placed.append((col, row, glyph, char))
    return placed


def render_lines(buffer: CircularBuffer, max_col: int, max_row: int) -> List[str]:
    """Render the window as ``max_row`` strings of ``max_col`` characters."""
    grid = [[" "] * max_col for _ in range(max_row)]
    for col, row, _, char in layout(buffer, max_col, max_row):
        if char is not None and row < max_row:
            grid[row][col] = char
    return ["".join(line) for line in grid]


__all__ = ["PlacedGlyph", "check_cell_size", "grid_size", "layout", "render_lines"]
