# tests/test_console.py

from __future__ import annotations

import builtins
import io
from collections.abc import Iterator

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.connectors.console_connector import (
    ERROR_PREFIX,
    HORIZONTAL_LINE,
    ConsoleSink,
    run_console_loop,
)
from taskpad.core import messages
from taskpad.core.state import AppState
from taskpad.tasks.task_list import TaskList

from .fakes import FakeStorage, RecordingSink


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_console_sink_frames_and_indents() -> None:
    out = io.StringIO()
    sink = ConsoleSink(out)
    sink.write_lines("a", "b")
    sink.write_error("bad")
    assert out.getvalue().splitlines() == [
        HORIZONTAL_LINE,
        "    a",
        "    b",
        HORIZONTAL_LINE,
        HORIZONTAL_LINE,
        "    " + ERROR_PREFIX + "bad",
        HORIZONTAL_LINE,
    ]


def test_console_loop_runs_commands_until_bye(monkeypatch, settings) -> None:
    out = io.StringIO()
    ui = ConsoleSink(out)
    storage = FakeStorage()
    state = AppState(settings=settings, storage=storage, ui=ui, task_list=TaskList(storage, ui))

    _feed(monkeypatch, ["todo read book", "", "list", "bye", "todo never"])
    run_console_loop(state)

    text = out.getvalue()
    assert messages.GREETING in text
    assert "    1.[T][ ] read book" in text.splitlines()
    assert messages.FAREWELL in text
    assert state.task_list.size() == 1
    assert storage.writes == [["[T][ ] read book"]]


def test_console_loop_survives_crashing_handler(monkeypatch, state) -> None:
    def explode(task_number):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_list, "delete", explode)
    _feed(monkeypatch, ["delete 1", "todo after"])

    run_console_loop(state)

    assert state.ui.errors == [messages.ERROR_INTERNAL]
    assert [t.description for t in state.task_list.tasks] == ["after"]


def test_bootstrap_rehydrates_from_file(settings) -> None:
    settings.tasks_file_path.parent.mkdir(parents=True)
    settings.tasks_file_path.write_text(
        "[T][X] read book\n[D][ ] essay (by: next week)\n", "utf-8"
    )

    state = create_initial_state(settings=settings, ui=RecordingSink())

    assert [t.render() for t in state.task_list.tasks] == [
        "[T][X] read book",
        "[D][ ] essay (by: next week)",
    ]


def test_bootstrap_starts_empty_when_file_unreadable(settings) -> None:
    settings.tasks_file_path.mkdir(parents=True)
    ui = RecordingSink()

    state = create_initial_state(settings=settings, ui=ui)

    assert state.task_list.is_empty()
    assert ui.errors == [messages.ERROR_LOAD_FROM_FILE]
