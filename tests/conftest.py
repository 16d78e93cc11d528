"""Shared fixtures: keep config and logs inside a temporary data dir."""

from __future__ import annotations

import logging

import pytest

from rterm.config import reload_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    for key in (
        "RTERM_TITLE",
        "RTERM_BUFFER_SIZE",
        "RTERM_CELL_WIDTH",
        "RTERM_CELL_HEIGHT",
        "RTERM_COLUMNS",
        "RTERM_ROWS",
        "RTERM_LOG_DIR",
        "RTERM_LOG_LEVEL",
        "RTERM_MAX_LOG_LINES",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("RTERM_DATA_DIR", str(tmp_path))
    yield reload_config()

    logger = logging.getLogger("rterm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    reload_config()
