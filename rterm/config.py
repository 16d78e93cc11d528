"""Configuration management for rterm.

This module handles loading and accessing configuration from:
1. rterm.toml file in the data directory
2. Environment variables (RTERM_* prefix)
3. Default values

Environment variables override config file values, which override defaults.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml

from rterm.core.constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_SCREEN_COLUMNS,
    DEFAULT_SCREEN_ROWS,
    DEFAULT_TITLE,
)


@dataclass
class WindowConfig:
    """Window configuration."""

    title: str = DEFAULT_TITLE


@dataclass
class BufferConfig:
    """Glyph buffer configuration."""

    size: int = DEFAULT_BUFFER_SIZE


@dataclass
class DisplayConfig:
    """Glyph cell size and the grid used when there is no window."""

    cell_width: int = 1
    cell_height: int = 1
    columns: int = DEFAULT_SCREEN_COLUMNS
    rows: int = DEFAULT_SCREEN_ROWS


@dataclass
class PathConfig:
    """Directory path configuration."""

    data_dir: Path | None = None
    log_dir: Path | None = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    max_log_lines: int = 1000
    log_level: str = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    window: WindowConfig = field(default_factory=WindowConfig)
    buffer: BufferConfig = field(default_factory=BufferConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    paths: PathConfig = field(default_factory=PathConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Resolve paths after initialization."""
        if self.paths.data_dir is None:
            data_dir_str = os.environ.get("RTERM_DATA_DIR")
            if data_dir_str:
                self.paths.data_dir = Path(data_dir_str)
            else:
                self.paths.data_dir = _default_data_dir()
        if self.paths.log_dir is None:
            self.paths.log_dir = self.paths.data_dir / "logs"


def _default_data_dir() -> Path:
    # ~/.rterm on Unix or %APPDATA%/rterm on Windows
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", "")) / "rterm"
    return Path.home() / ".rterm"


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: str | None) -> str | None:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _get_env_path(key: str, default: Path | None) -> Path | None:
    """Get path from environment variable."""
    value = os.environ.get(key)
    if value:
        return Path(value)
    return default


def get_config_path() -> Path:
    """Location of rterm.toml, honouring RTERM_DATA_DIR."""
    data_dir = _get_env_path("RTERM_DATA_DIR", None) or _default_data_dir()
    return data_dir / "rterm.toml"


def _load_config_file() -> dict[str, Any]:
    """Load configuration from rterm.toml file."""
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError):
        return {}


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config."""
    config.window.title = (
        _get_env_str("RTERM_TITLE", config.window.title) or config.window.title
    )

    config.buffer.size = _get_env_int("RTERM_BUFFER_SIZE", config.buffer.size)

    config.display.cell_width = _get_env_int(
        "RTERM_CELL_WIDTH", config.display.cell_width
    )
    config.display.cell_height = _get_env_int(
        "RTERM_CELL_HEIGHT", config.display.cell_height
    )
    config.display.columns = _get_env_int("RTERM_COLUMNS", config.display.columns)
    config.display.rows = _get_env_int("RTERM_ROWS", config.display.rows)

    config.paths.data_dir = _get_env_path("RTERM_DATA_DIR", config.paths.data_dir)
    config.paths.log_dir = _get_env_path("RTERM_LOG_DIR", config.paths.log_dir)

    config.logging.max_log_lines = _get_env_int(
        "RTERM_MAX_LOG_LINES", config.logging.max_log_lines
    )
    config.logging.log_level = (
        _get_env_str("RTERM_LOG_LEVEL", config.logging.log_level)
        or config.logging.log_level
    )

    return config


def _apply_file_config(config: Config, file_config: dict[str, Any]) -> Config:
    """Apply configuration from file to config object."""
    if "window" in file_config:
        window = file_config["window"]
        config.window.title = window.get("title", config.window.title)

    if "buffer" in file_config:
        buffer = file_config["buffer"]
        config.buffer.size = buffer.get("size", config.buffer.size)

    if "display" in file_config:
        display = file_config["display"]
        config.display.cell_width = display.get(
            "cell_width", config.display.cell_width
        )
        config.display.cell_height = display.get(
            "cell_height", config.display.cell_height
        )
        config.display.columns = display.get("columns", config.display.columns)
        config.display.rows = display.get("rows", config.display.rows)

    if "paths" in file_config:
        paths = file_config["paths"]
        if "data_dir" in paths:
            config.paths.data_dir = Path(paths["data_dir"])
        if "log_dir" in paths:
            config.paths.log_dir = Path(paths["log_dir"])

    if "logging" in file_config:
        logging = file_config["logging"]
        config.logging.max_log_lines = logging.get(
            "max_log_lines", config.logging.max_log_lines
        )
        config.logging.log_level = logging.get("log_level", config.logging.log_level)

    return config


def load_config() -> Config:
    """Load configuration from defaults, file, and environment.

    Priority (highest to lowest):
    1. Environment variables (RTERM_*)
    2. rterm.toml file
    3. Default values

    Returns:
        Config: The loaded configuration object
    """
    config = Config()

    file_config = _load_config_file()
    if file_config:
        config = _apply_file_config(config, file_config)

    config = _apply_env_overrides(config)

    return config


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from file and environment.

    Returns:
        Config: The reloaded configuration object
    """
    global _config
    _config = load_config()
    return _config


__all__ = [
    "Config",
    "WindowConfig",
    "BufferConfig",
    "DisplayConfig",
    "PathConfig",
    "LoggingConfig",
    "get_config_path",
    "load_config",
    "get_config",
    "reload_config",
]
