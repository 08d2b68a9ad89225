# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import OutputSink, TaskStorage


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    storage: TaskStorage
    ui: OutputSink
    task_list: TaskList
