# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from taskpad.config import DEFAULT_TASKS_FILE, Settings
from taskpad.logging_setup import _ConsoleNoiseFilter


def test_settings_defaults(monkeypatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_TO_FILE", "DATA_DIR", "TASKS_FILE"):
        monkeypatch.delenv(f"TASKPAD_{name}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "taskpad"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.tasks_file == Path(DEFAULT_TASKS_FILE)


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_TASKS_FILE", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASKPAD_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKPAD_LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert s.tasks_file == tmp_path / "mine.json"
    assert s.log_to_file is False
    assert s.log_level == "debug"


def test_with_tasks_file_overrides_only_the_path(tmp_path: Path) -> None:
    s = Settings.from_env()
    other = s.with_tasks_file(tmp_path / "other.json")
    assert other.tasks_file == tmp_path / "other.json"
    assert (other.app_name, other.data_dir) == (s.app_name, s.data_dir)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_hides_library_noise() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskpad.tasks.task_store", logging.INFO))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))
