# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskList depends on these Protocols instead of the concrete file storage and
console sink, which keeps both swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """
    Persists the whole task sequence.

    write_all() receives the full list (never a delta) and raises OSError when the
    write did not land. A failed write must leave the previous file intact.
    """

    def load_all(self) -> list[Task]: ...
    def write_all(self, tasks: Sequence[Task]) -> None: ...


class OutputSink(Protocol):
    """Fire-and-forget user-visible output."""

    def write_line(self, text: str) -> None: ...
    def write_lines(self, *texts: str) -> None: ...
    def write_error(self, text: str) -> None: ...
