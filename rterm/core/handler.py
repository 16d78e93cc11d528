"""Input handlers that turn key and text events into buffer edits."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from .buffer import CircularBuffer
from .constants import NEWLINE
from .glyph import Glyph

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Keys the default handler reacts to, named as Textual names them."""

    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"


class BufferHandler(ABC):
    """Interface the front end calls once per input event."""

    @abstractmethod
    def on_key(self, buffer: CircularBuffer, key: Key | str) -> None:
        """
        Handle a non-text key press.

        Args:
            buffer: Live buffer to edit
            key: Key enum member or raw key name
        """

    @abstractmethod
    def on_text(self, buffer: CircularBuffer, text: str) -> None:
        """
        Handle typed text.

        Args:
            buffer: Live buffer to edit
            text: Characters produced by the event
        """


class DefaultHandler(BufferHandler):
    """Append typed text, move with the arrows, and blank cells on backspace."""

    def on_key(self, buffer: CircularBuffer, key: Key | str) -> None:
        try:
            key = Key(key)
        except ValueError:
            return

        logger.debug("Dispatching %s at cursor %d", key.value, buffer.cursor)
        if key is Key.ENTER:
            buffer.push_text(NEWLINE)
        elif key is Key.LEFT:
            buffer.seek_cursor(-1)
        elif key is Key.RIGHT:
            buffer.seek_cursor(1)
        elif key is Key.BACKSPACE:
            buffer.seek_cursor(-1)
            buffer.overwrite(Glyph(" "))

    def on_text(self, buffer: CircularBuffer, text: str) -> None:
        buffer.push_text(text)


__all__ = ["Key", "BufferHandler", "DefaultHandler"]
