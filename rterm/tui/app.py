"""Textual front end that draws the buffer and feeds it input events."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from rich.color import Color as RichColor
from rich.style import Style
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget

from ..config import Config, get_config
from ..core.buffer import CircularBuffer
from ..core.constants import Color
from ..core.glyph import Glyph
from ..core.handler import BufferHandler, DefaultHandler
from ..core.render import check_cell_size, grid_size, layout

logger = logging.getLogger(__name__)


def _rich_color(color: Color) -> Optional[RichColor]:
    red, green, blue, alpha = color
    if alpha <= 0:
        return None
    return RichColor.from_rgb(red * 255, green * 255, blue * 255)


def glyph_style(glyph: Glyph, with_background: bool = True) -> Style:
    """Translate a glyph's RGBA colours into a Rich style."""
    return Style(
        color=_rich_color(glyph.foreground),
        bgcolor=_rich_color(glyph.background) if with_background else None,
    )


class TerminalView(Widget, can_focus=True):
    """Widget that renders the tail of the buffer with a cursor marker."""

    DEFAULT_CSS = """
    TerminalView {
        height: 1fr;
        width: 1fr;
        background: black;
        color: white;
    }
    """

    def __init__(
        self,
        buffer: CircularBuffer,
        handler: BufferHandler,
        cell_size: Tuple[int, int] = (1, 1),
        **kwargs,
    ) -> None:
        check_cell_size(cell_size)
        super().__init__(**kwargs)
        self.buffer = buffer
        self.handler = handler
        self.cell_size = cell_size

    def on_key(self, event: events.Key) -> None:
        if event.is_printable and event.character:
            self.handler.on_text(self.buffer, event.character)
        else:
            self.handler.on_key(self.buffer, event.key)
        self.refresh()

    def grid(self) -> Tuple[int, int]:
        return grid_size((self.size.width, self.size.height), self.cell_size)

    def render(self) -> Text:
        max_col, max_row = self.grid()
        cells: List[List[Tuple[str, Optional[Style]]]] = [
            [(" ", None)] * max_col for _ in range(max_row)
        ]
        for col, row, glyph, char in layout(self.buffer, max_col, max_row):
            if char is None or row >= max_row:
                continue
            # The cursor marker keeps the glyph's colour but drops its background.
            with_background = not self.buffer.is_at_cursor(glyph)
            cells[row][col] = (char, glyph_style(glyph, with_background))

        cell_width, cell_height = self.cell_size
        padding = " " * (cell_width - 1)
        lines: List[Text] = []
        for row_cells in cells:
            line = Text(no_wrap=True, end="")
            for char, style in row_cells:
                line.append(char + padding, style)
            lines.append(line)
            lines.extend(Text("") for _ in range(cell_height - 1))
        return Text("\n").join(lines)


class RtermApp(App):
    BINDINGS = [Binding("escape", "quit", "Quit", priority=True)]

    CSS = """
    Screen {
        background: black;
    }
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        handler: Optional[BufferHandler] = None,
    ):
        super().__init__()
        self.config = config or get_config()
        self.buffer = CircularBuffer(self.config.buffer.size)
        self.cell_size = (self.config.display.cell_width, self.config.display.cell_height)
        check_cell_size(self.cell_size)
        self.handler = handler or DefaultHandler()
        self.title = self.config.window.title

    def compose(self) -> ComposeResult:
        yield TerminalView(
            self.buffer,
            self.handler,
            cell_size=self.cell_size,
            id="terminal",
        )

    def on_mount(self) -> None:
        logger.info(
            "Started %s with a %d glyph buffer", self.title, self.buffer.capacity
        )
        self.query_one(TerminalView).focus()

    def on_unmount(self) -> None:
        logger.info("Stopped %s", self.title)


async def launch_tui(
    config: Optional[Config] = None, handler: Optional[BufferHandler] = None
) -> None:
    app = RtermApp(config, handler)
    await app.run_async()


__all__ = ["RtermApp", "TerminalView", "glyph_style", "launch_tui"]
