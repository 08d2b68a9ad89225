# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the file storage and console sink into a TaskList,
- rehydrates the TaskList from the task file.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleSink
from ..core import messages
from ..core.ports import OutputSink
from ..core.state import AppState
from ..storage.task_file import TaskFileStorage
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, ui: OutputSink | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if ui is None:
        ui = ConsoleSink()

    _ensure_local_dirs(settings)

    storage = TaskFileStorage(settings.tasks_file_path)
    tasks: list[Task]
    try:
        tasks = storage.load_all()
    except OSError:
        logger.exception("Failed to load tasks from %s", storage.path)
        ui.write_error(messages.ERROR_LOAD_FROM_FILE)
        tasks = []

    return AppState(
        settings=settings,
        storage=storage,
        ui=ui,
        task_list=TaskList(storage, ui, tasks),
    )
