# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bob_tasks.config import Settings
from bob_tasks.logging_setup import setup_logging

_VARS = ("BOB_APP_NAME", "BOB_LOG_LEVEL", "BOB_LOG_TO_FILE", "BOB_DATA_DIR", "BOB_TASKS_PATH", "BOB_LOG_DIR")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "bob"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.data_dir == Path("data")
    assert s.tasks_path == Path("data") / "bob.txt"
    assert s.log_dir == Path("data")


def test_paths_follow_data_dir_unless_overridden(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("BOB_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "bob.txt"

    clean_env.setenv("BOB_TASKS_PATH", str(tmp_path / "other.txt"))
    clean_env.setenv("BOB_LOG_DIR", str(tmp_path / "logs"))
    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "other.txt"
    assert s.log_dir == tmp_path / "logs"


def test_blank_and_odd_values_fall_back(clean_env) -> None:
    clean_env.setenv("BOB_APP_NAME", "   ")
    clean_env.setenv("BOB_LOG_LEVEL", "debug")
    clean_env.setenv("BOB_LOG_TO_FILE", "off")
    s = Settings.from_env()
    assert s.app_name == "bob"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.CRITICAL)
        logging.getLogger("bob_tasks.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "bob.log").read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
