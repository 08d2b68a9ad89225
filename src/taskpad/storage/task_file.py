# src/taskpad/storage/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Sequence
from pathlib import Path

from ..tasks.task_models import DONE_MARK, NOT_DONE_MARK, Task, TaskKind, parse_when

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^\[(?P<kind>[TDE])\]\[(?P<mark>.)\] (?P<body>.+)$")


class TaskDecodeError(ValueError):
    """A persisted line is not a valid rendered task."""


def encode_task(task: Task) -> str:
    return task.render()


def decode_task(line: str) -> Task:
    """
    Parse one rendered task line, e.g. "[D][X] return book (by: Dec 02 2019 1800)".

    The date qualifier goes through the same parser as user input, so parsed dates
    come back parsed and raw text comes back raw.
    """
    m = _LINE_RE.match(line.rstrip("\r\n"))
    if not m:
        raise TaskDecodeError(f"not a task line: {line!r}")

    kind = TaskKind(m.group("kind"))
    mark = m.group("mark")
    if mark not in (DONE_MARK, NOT_DONE_MARK):
        raise TaskDecodeError(f"unknown status mark {mark!r}")
    body = m.group("body")

    description, when = body, None
    if kind is not TaskKind.TODO:
        sep = kind.qualifier_prefix
        description, found, when_text = body.rpartition(sep)
        if not found or not when_text.endswith(")"):
            raise TaskDecodeError(f"missing '{kind.when_label}' qualifier: {line!r}")
        when = parse_when(when_text[:-1])

    try:
        task = Task(kind=kind, description=description, when=when)
    except ValueError as e:
        raise TaskDecodeError(str(e)) from e

    if mark == DONE_MARK:
        task.mark_done()
    return task


class TaskFileStorage:
    """
    Flat text file, one rendered task per line, in list order.

    Writes go to a temp file which then replaces the real one, so a failed write
    leaves the previous state on disk.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s; starting empty.", self._path)
            return []

        # surrogateescape keeps undecodable bytes so they are written back unchanged.
        tasks: list[Task] = []
        text = self._path.read_bytes().decode("utf-8", "surrogateescape")
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except TaskDecodeError:
                logger.warning("Skipping malformed line %d in %s: %r", lineno, self._path, line)
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def write_all(self, tasks: Sequence[Task]) -> None:
        payload = "".join(encode_task(t) + "\n" for t in tasks)
        try:
            data = payload.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError as e:
            raise OSError(f"cannot encode tasks for {self._path}: {e}") from e

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except BaseException:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Wrote %d tasks to %s", len(tasks), self._path)
