"""Single character cell with opaque display colours."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    SENTINEL,
    TERMINATORS,
    Color,
)


@dataclass(frozen=True)
class Glyph:
    """One character plus the colours it is drawn with.

    Colours are RGBA tuples in the 0.0-1.0 range. They are carried through
    the buffer untouched; only the renderer looks at them.
    """

    char: str = SENTINEL
    foreground: Color = DEFAULT_FOREGROUND
    background: Color = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Glyph needs exactly one character, got {self.char!r}")

    @property
    def is_terminator(self) -> bool:
        return self.char in TERMINATORS


__all__ = ["Glyph"]
