"""rterm: a tiny ring-buffer terminal."""

from .core import (
    BufferHandler,
    CircularBuffer,
    DefaultHandler,
    Glyph,
    Key,
    grid_size,
    layout,
    render_lines,
    wrap_lines,
)

__version__ = "0.1.0"

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
