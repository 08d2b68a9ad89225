# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_list import TaskList

from .fakes import FakeStorage, RecordingSink


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_file_path=data_dir / "tasks.txt",
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def ui() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def task_list(storage: FakeStorage, ui: RecordingSink) -> TaskList:
    return TaskList(storage, ui)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    storage: FakeStorage,
    ui: RecordingSink,
    task_list: TaskList,
) -> AppState:
    """
    AppState wired with the in-memory fakes.

    File-backed storage has its own tests (test_task_file.py).
    """
    return AppState(settings=settings, storage=storage, ui=ui, task_list=task_list)
