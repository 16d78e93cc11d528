"""Command-line interface entrypoint for rterm."""

from __future__ import annotations

import asyncio
from typing import Optional

import click

from .config import get_config
from .core.buffer import CircularBuffer
from .core.render import render_lines
from .tui.app import launch_tui
from .utils.persistence import get_log_path, rotate_log, setup_logging


@click.group()
def cli() -> None:
    """rterm CLI commands."""


@cli.command()
@click.option("--title", default=None, help="Window title.")
@click.option(
    "--buffer-size", type=click.IntRange(min=1), default=None, help="Glyph capacity."
)
@click.option("--cell-width", type=click.IntRange(min=1), default=None)
@click.option("--cell-height", type=click.IntRange(min=1), default=None)
@click.option("--log-level", default=None, help="Override the configured log level.")
def run(
    title: Optional[str],
    buffer_size: Optional[int],
    cell_width: Optional[int],
    cell_height: Optional[int],
    log_level: Optional[str],
) -> None:
    """Open the terminal window."""
    config = get_config()
    if title is not None:
        config.window.title = title
    if buffer_size is not None:
        config.buffer.size = buffer_size
    if cell_width is not None:
        config.display.cell_width = cell_width
    if cell_height is not None:
        config.display.cell_height = cell_height

    log_path = get_log_path()
    rotate_log(log_path=log_path)
    setup_logging(log_level, log_path)
    try:
        asyncio.run(launch_tui(config))
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("text", nargs=-1)
@click.option("--cols", type=click.IntRange(min=0), default=None, help="Columns to show.")
@click.option("--rows", type=click.IntRange(min=0), default=None, help="Rows to show.")
@click.option("--buffer-size", type=click.IntRange(min=1), default=None)
@click.option("--stdin", "from_stdin", is_flag=True, help="Read text from stdin.")
def tail(
    text: tuple[str, ...],
    cols: Optional[int],
    rows: Optional[int],
    buffer_size: Optional[int],
    from_stdin: bool,
) -> None:
    """Push TEXT into a fresh buffer and print the visible window."""
    config = get_config()
    cols = config.display.columns if cols is None else cols
    rows = config.display.rows if rows is None else rows

    try:
        buffer = CircularBuffer(buffer_size or config.buffer.size)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if from_stdin:
        buffer.push_text(click.get_text_stream("stdin").read())
    else:
        buffer.push_text(" ".join(text))

    for line in render_lines(buffer, cols, rows):
        click.echo(line.rstrip())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
