from pathlib import Path

import pytest

from rterm.config import Config, get_config, get_config_path, load_config, reload_config


def _write_toml(tmp_path: Path, text: str) -> None:
    (tmp_path / "rterm.toml").write_text(text, encoding="utf-8")


def test_defaults(tmp_path: Path) -> None:
    config = load_config()

    assert config.window.title == "rterm"
    assert config.buffer.size == 1000
    assert (config.display.cell_width, config.display.cell_height) == (1, 1)
    assert (config.display.columns, config.display.rows) == (80, 24)
    assert config.logging.log_level == "INFO"
    assert config.paths.data_dir == tmp_path
    assert config.paths.log_dir == tmp_path / "logs"


def test_config_path_follows_data_dir(tmp_path: Path) -> None:
    assert get_config_path() == tmp_path / "rterm.toml"


def test_file_values_apply(tmp_path: Path) -> None:
    _write_toml(
        tmp_path,
        """
[window]
title = "scratch"

[buffer]
size = 64

[display]
cell_width = 2
rows = 10

[logging]
log_level = "DEBUG"
""",
    )

    config = load_config()

    assert config.window.title == "scratch"
    assert config.buffer.size == 64
    assert config.display.cell_width == 2
    assert config.display.cell_height == 1
    assert config.display.rows == 10
    assert config.logging.log_level == "DEBUG"


def test_env_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_toml(tmp_path, "[buffer]\nsize = 64\n")
    monkeypatch.setenv("RTERM_BUFFER_SIZE", "32")
    monkeypatch.setenv("RTERM_TITLE", "from-env")
    monkeypatch.setenv("RTERM_LOG_DIR", str(tmp_path / "elsewhere"))

    config = load_config()

    assert config.buffer.size == 32
    assert config.window.title == "from-env"
    assert config.paths.log_dir == tmp_path / "elsewhere"


def test_bad_values_fall_back(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_toml(tmp_path, "this is [not toml")
    monkeypatch.setenv("RTERM_COLUMNS", "wide")

    config = load_config()

    assert config.display.columns == 80
    assert config.buffer.size == 1000


def test_global_config_is_cached_until_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("RTERM_ROWS", "5")
    assert get_config().display.rows == 24
    assert reload_config().display.rows == 5
    assert get_config().display.rows == 5


def test_data_dir_follows_env(tmp_path: Path) -> None:
    config = Config()
    assert config.paths.data_dir == tmp_path
