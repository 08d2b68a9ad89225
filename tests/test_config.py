# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from taskpad.config import Settings
from taskpad.logging_setup import _ConsoleNoiseFilter


def test_settings_defaults(monkeypatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_TO_FILE", "DATA_DIR", "TASKS_FILE"):
        monkeypatch.delenv(f"TASKPAD_{name}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "taskpad"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/taskpad")
    assert s.tasks_file_path == Path(".local/taskpad/tasks.txt")


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKPAD_LOG_TO_FILE", "no")
    monkeypatch.setenv("TASKPAD_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKPAD_TASKS_FILE", raising=False)

    s = Settings.from_env()

    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.tasks_file_path == tmp_path / "tasks.txt"


def test_console_filter_keeps_app_logs_and_mutes_third_party() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("taskpad.tasks.task_list", logging.INFO))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert not f.filter(rec("py.warnings", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
