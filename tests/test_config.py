# tests/test_config.py

from __future__ import annotations

import logging

from meshmerge.config import CONFIG_PATH, MergeSettings, load_config
from meshmerge.logging import get_logger


def test_load_config_missing_file_gives_defaults(tmp_path) -> None:
    cfg = load_config(tmp_path / "nope.yml")
    assert cfg.merge_settings() == MergeSettings()
    assert cfg.logging == {}
    assert cfg.debug is False


def test_load_config_reads_overrides(tmp_path) -> None:
    path = tmp_path / "meshmerge.yml"
    path.write_text("merge:\n  precision: 0.01\n  add_header: true\n", encoding="utf-8")
    settings = load_config(path).merge_settings()
    assert settings.precision == 0.01
    assert settings.add_header is True
    assert settings.decimals == MergeSettings().decimals


def test_empty_config_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "meshmerge.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).merge_settings() == MergeSettings()


def test_shipped_config_logs_warnings_only() -> None:
    cfg = load_config(CONFIG_PATH)
    assert str(cfg.logging.get("level")).upper() == "WARNING"
    assert cfg.merge_settings() == MergeSettings()


def test_get_logger_does_not_reset_an_existing_level() -> None:
    first = get_logger("tests.config")
    saved = first.level
    try:
        first.setLevel(logging.DEBUG)
        again = get_logger("tests.config")
        assert again is first
        assert again.level == logging.DEBUG
    finally:
        first.setLevel(saved)
