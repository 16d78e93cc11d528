"""Glyph ring buffer, line wrapping, and input handling."""

from .buffer import CircularBuffer
from .glyph import Glyph
from .handler import BufferHandler, DefaultHandler, Key
from .line_iter import wrap_lines
from .render import grid_size, layout, render_lines

__all__ = [
    "BufferHandler",
    "CircularBuffer",
    "DefaultHandler",
    "Glyph",
    "Key",
    "grid_size",
    "layout",
    "render_lines",
    "wrap_lines",
]
