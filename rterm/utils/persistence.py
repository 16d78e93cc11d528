"""rterm data directories and log file helpers."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from rterm.config import get_config

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _create_dir(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
        return True
    except OSError:
        return False


def _is_writable_directory(path: Path) -> bool:
    if not _create_dir(path):
        return False
    test_file = path / ".rterm_write_test"
    try:
        test_file.write_text("", encoding="utf-8")
        test_file.unlink()
        return True
    except OSError:
        return False


def get_data_dir() -> Path:
    """Get the data directory from config, falling back to the temp dir."""
    data_dir = get_config().paths.data_dir
    if data_dir is not None and _is_writable_directory(data_dir):
        return data_dir
    return Path(tempfile.gettempdir()) / "rterm"


def get_logs_dir() -> Path:
    """Get the logs directory from config, or the data directory if unusable."""
    log_dir = get_config().paths.log_dir
    if log_dir is not None and _is_writable_directory(log_dir):
        return log_dir
    return get_data_dir()


def get_log_path() -> Path:
    return get_logs_dir() / "rterm.log"


def setup_logging(level: str | None = None, log_path: Path | None = None) -> Path:
    """Send rterm logs to a file; the terminal belongs to the UI.

    Returns:
        Path of the log file in use
    """
    config = get_config()
    level_name = (level or config.logging.log_level).upper()
    log_path = log_path or get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("rterm")
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler):
            logger.removeHandler(existing)
            existing.close()

    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    return log_path


def rotate_log(max_lines: int | None = None, log_path: Path | None = None) -> None:
    """Keep only last N lines in the log.

    Args:
        max_lines: Maximum number of lines to keep. If None, uses config default.
        log_path: Log file to trim. Defaults to the configured log file.
    """
    if max_lines is None:
        max_lines = get_config().logging.max_log_lines

    log_path = log_path or get_log_path()
    if not log_path.exists():
        return
    lines = log_path.read_text(encoding="utf-8").splitlines()
    if len(lines) > max_lines:
        log_path.write_text("\n".join(lines[-max_lines:]) + "\n", encoding="utf-8")


__all__ = [
    "LOG_FORMAT",
    "get_data_dir",
    "get_logs_dir",
    "get_log_path",
    "setup_logging",
    "rotate_log",
]
