import logging
from pathlib import Path

import pytest

from rterm.config import reload_config
from rterm.utils import persistence


def test_log_dir_comes_from_config(tmp_path: Path) -> None:
    assert persistence.get_data_dir() == tmp_path
    assert persistence.get_logs_dir() == tmp_path / "logs"
    assert persistence.get_log_path() == tmp_path / "logs" / "rterm.log"


def test_setup_logging_writes_to_file(tmp_path: Path) -> None:
    log_path = persistence.setup_logging("debug")

    logging.getLogger("rterm.core.buffer").debug("hello from the buffer")
    for handler in logging.getLogger("rterm").handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "rterm.core.buffer - DEBUG - hello from the buffer" in content


def test_setup_logging_replaces_previous_file_handler(tmp_path: Path) -> None:
    persistence.setup_logging(log_path=tmp_path / "one.log")
    persistence.setup_logging(log_path=tmp_path / "two.log")

    handlers = [
        handler
        for handler in logging.getLogger("rterm").handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(handlers) == 1
    assert Path(handlers[0].baseFilename) == tmp_path / "two.log"


def test_rotate_log_trims_old_lines(tmp_path: Path) -> None:
    log_path = tmp_path / "rterm.log"
    log_path.write_text("first\nsecond\nthird\n", encoding="utf-8")

    persistence.rotate_log(max_lines=2, log_path=log_path)

    assert log_path.read_text(encoding="utf-8").splitlines() == ["second", "third"]


def test_rotate_log_uses_configured_limit(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RTERM_MAX_LOG_LINES", "1")
    reload_config()
    log_path = persistence.get_log_path()
    log_path.write_text("old\nnew\n", encoding="utf-8")

    persistence.rotate_log()

    assert log_path.read_text(encoding="utf-8").splitlines() == ["new"]


def test_rotate_log_ignores_missing_file(tmp_path: Path) -> None:
    persistence.rotate_log(max_lines=1, log_path=tmp_path / "missing.log")
    assert not (tmp_path / "missing.log").exists()
