# src/taskpad/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from ..core import messages
from ..core.ports import OutputSink, TaskStorage
from .task_models import Task, TaskKind, format_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InvalidTaskNumber:
    task_number: int
    size: int

    @property
    def message(self) -> str:
        return messages.ERROR_INVALID_TASK_NUMBER


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}.{task.render()}" for i, task in enumerate(tasks, start=1)]


class TaskList:
    """
    Ordered, in-memory task collection.

    Task numbers are 1-based positions at call time, not stable ids: deleting
    task 2 makes the old task 3 the new task 2.

    Every mutation is followed by a full write through `storage`. A failed write
    is reported to the user but the in-memory change is kept; nothing here is
    transactional and persistence errors never reach the caller.
    """

    def __init__(
        self,
        storage: TaskStorage,
        ui: OutputSink,
        tasks: Iterable[Task] | None = None,
    ) -> None:
        self._storage = storage
        self._ui = ui
        self._tasks: list[Task] = list(tasks or [])

    @property
    def tasks(self) -> Sequence[Task]:
        return tuple(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- mutations ----

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        logger.debug("Task added kind=%s total=%d", task.kind.name, len(self._tasks))
        self._ui.write_lines(
            messages.TASK_ADDED,
            messages.INDENT + task.render(),
            messages.total_tasks(len(self._tasks)),
        )
        self._persist()
        return task

    def mark_done(self, task_number: int) -> Task | None:
        checked = self._validate_task_number(task_number)
        if isinstance(checked, InvalidTaskNumber):
            self._ui.write_error(checked.message)
            return None

        task = self._tasks[checked]
        task.mark_done()
        logger.debug("Task marked done number=%d", task_number)
        self._ui.write_lines(messages.TASK_MARKED_DONE, messages.INDENT + task.render())
        self._persist()
        return task

    def delete(self, task_number: int) -> Task | None:
        checked = self._validate_task_number(task_number)
        if isinstance(checked, InvalidTaskNumber):
            self._ui.write_error(checked.message)
            return None

        task = self._tasks.pop(checked)
        logger.debug("Task deleted number=%d total=%d", task_number, len(self._tasks))
        self._ui.write_lines(
            messages.TASK_REMOVED,
            messages.INDENT + task.render(),
            messages.total_tasks(len(self._tasks)),
        )
        self._persist()
        return task

    def _validate_task_number(self, task_number: int) -> int | InvalidTaskNumber:
        """Return the 0-based index for `task_number`, or InvalidTaskNumber."""
        if task_number < 1 or task_number > len(self._tasks):
            logger.debug("Invalid task number %s (size=%d)", task_number, len(self._tasks))
            return InvalidTaskNumber(task_number=task_number, size=len(self._tasks))
        return task_number - 1

    def _persist(self) -> bool:
        try:
            self._storage.write_all(list(self._tasks))
        except OSError:
            logger.warning("Failed to write %d tasks to storage", len(self._tasks), exc_info=True)
            self._ui.write_error(messages.ERROR_WRITE_TO_FILE)
            return False
        return True

    # ---- queries ----

    def list_all(self) -> list[Task]:
        self._ui.write_lines(messages.LIST_HEADER, *_numbered(self._tasks))
        return list(self._tasks)

    def find_by_keyword(self, keyword: str) -> list[Task]:
        """
        `keyword` must already be lower-cased by the caller.

        Matches are numbered by their position in the result, not in the list.
        """
        matches = [t for t in self._tasks if t.matches_keyword(keyword)]
        if matches:
            self._ui.write_lines(messages.MATCH_HEADER, *_numbered(matches))
        else:
            self._ui.write_line(messages.ERROR_NO_MATCH)
        return matches

    def find_by_date(self, day: date) -> tuple[list[Task], list[Task]]:
        """
        Deadlines and events whose parsed date falls on `day` (time of day ignored).

        Tasks whose date was kept as raw text never match here.
        """
        deadlines: list[Task] = []
        events: list[Task] = []
        for task in self._tasks:
            if not task.falls_on(day):
                continue
            if task.kind is TaskKind.DEADLINE:
                deadlines.append(task)
            elif task.kind is TaskKind.EVENT:
                events.append(task)

        lines = [messages.date_summary(len(deadlines), len(events), format_date(day))]
        if deadlines:
            lines.append(messages.DATE_DEADLINES_LABEL)
            lines.extend(_numbered(deadlines))
        if events:
            lines.append(messages.DATE_EVENTS_LABEL)
            lines.extend(_numbered(events))
        self._ui.write_lines(*lines)
        return deadlines, events
