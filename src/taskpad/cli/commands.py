# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core import messages
from ..core.state import AppState
from ..tasks.task_models import Task, TaskKind, parse_datetime

CommandHandler = Callable[[AppState, str], None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple command registry used by the console loop (todo, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> bool:
        """
        Handle a line like "deadline return book /by 2019-12-02 1800".

        The first word selects the command; the rest (after one space) is passed
        through untouched. Returns False if the command is unknown.
        """
        name, _, args = line.lstrip().partition(" ")
        name = name.lower()

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command %r", name)
            state.ui.write_error(messages.ERROR_UNKNOWN_COMMAND.format(name=name))
            return False

        handler(state, args)
        return True

    def help_lines(self) -> list[str]:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  bye - Save and quit.")
        return lines


registry = CommandRegistry()


def parse_task_number(args: str) -> int:
    """
    Raises ValueError with a user-facing message when `args` is not a number.
    """
    raw = args.strip()
    if not raw:
        raise ValueError(messages.ERROR_MISSING_TASK_NUMBER)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(messages.ERROR_NOT_A_TASK_NUMBER) from None


def _split_when(args: str, kind: TaskKind) -> tuple[str, str] | None:
    """Split at the first standalone "/by" (or "/at"); "/byline" is part of the text."""
    m = re.search(rf"(?:^|\s)/{kind.when_label}(?:\s|$)", args)
    if not m:
        return None
    return args[: m.start()].strip(), args[m.end() :].strip()


def cmd_help(state: AppState, args: str) -> None:
    state.ui.write_lines(*registry.help_lines())


def cmd_todo(state: AppState, args: str) -> None:
    description = args.strip()
    if not description:
        state.ui.write_error(messages.ERROR_EMPTY_DESCRIPTION.format(kind="todo"))
        return
    state.task_list.add(Task.todo(description))


def _add_dated(state: AppState, args: str, kind: TaskKind) -> None:
    name = kind.name.lower()
    parts = _split_when(args, kind)
    if parts is None:
        if not args.strip():
            state.ui.write_error(messages.ERROR_EMPTY_DESCRIPTION.format(kind=name))
        else:
            state.ui.write_error(messages.ERROR_MISSING_WHEN.format(kind=name, label=kind.when_label))
        return

    description, when = parts
    if not description:
        state.ui.write_error(messages.ERROR_EMPTY_DESCRIPTION.format(kind=name))
        return
    if not when:
        state.ui.write_error(messages.ERROR_MISSING_WHEN.format(kind=name, label=kind.when_label))
        return

    try:
        if kind is TaskKind.DEADLINE:
            task = Task.deadline(description, when)
        else:
            task = Task.event(description, when)
    except ValueError as e:
        logger.debug("Rejected %s: %s", name, e)
        state.ui.write_error(messages.ERROR_INVALID_WHEN.format(label=kind.when_label))
        return
    if not task.has_date_time():
        logger.info("Keeping %s date as text: %r", name, when)
    state.task_list.add(task)


def cmd_deadline(state: AppState, args: str) -> None:
    _add_dated(state, args, TaskKind.DEADLINE)


def cmd_event(state: AppState, args: str) -> None:
    _add_dated(state, args, TaskKind.EVENT)


def cmd_list(state: AppState, args: str) -> None:
    state.task_list.list_all()


def cmd_done(state: AppState, args: str) -> None:
    try:
        task_number = parse_task_number(args)
    except ValueError as e:
        state.ui.write_error(str(e))
        return
    state.task_list.mark_done(task_number)


def cmd_delete(state: AppState, args: str) -> None:
    try:
        task_number = parse_task_number(args)
    except ValueError as e:
        state.ui.write_error(str(e))
        return
    state.task_list.delete(task_number)


def cmd_find(state: AppState, args: str) -> None:
    if not args.strip():
        state.ui.write_error(messages.ERROR_EMPTY_KEYWORD)
        return
    state.task_list.find_by_keyword(args.lower())


def cmd_date(state: AppState, args: str) -> None:
    """
    date 2019-12-02   -> deadlines and events on that day
    """
    dt = parse_datetime(args)
    if dt is None:
        state.ui.write_error(messages.ERROR_INVALID_DATE)
        return
    state.task_list.find_by_date(dt.date())


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("todo", cmd_todo, help_text="Add a to-do: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by <date>."
)
registry.register("event", cmd_event, help_text="Add an event: event <description> /at <date>.")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task as done: done <number>.")
registry.register("delete", cmd_delete, help_text="Delete a task: delete <number>.", aliases=["rm"])
registry.register("find", cmd_find, help_text="Search descriptions and dates: find <keyword>.")
registry.register("date", cmd_date, help_text="Deadlines/events on a day: date <yyyy-mm-dd>.")
