# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

DISPLAY_DATETIME_FORMAT = "%b %d %Y %H%M"
DISPLAY_DATE_FORMAT = "%b %d %Y"

# Tried in order; the display format is last so persisted lines parse back.
INPUT_DATETIME_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H%M",
    "%Y-%m-%d %H:%M",
    "%d/%m/%Y %H%M",
    "%Y-%m-%d",
    "%d/%m/%Y",
    DISPLAY_DATETIME_FORMAT,
)

DONE_MARK = "X"
NOT_DONE_MARK = " "


class TaskKind(StrEnum):
    """Task kind tag. The value is the one-letter marker used in the rendered form."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def when_label(self) -> str | None:
        if self is TaskKind.DEADLINE:
            return "by"
        if self is TaskKind.EVENT:
            return "at"
        return None

    @property
    def qualifier_prefix(self) -> str | None:
        """Text between the description and the date in the rendered form, e.g. " (by: "."""
        label = self.when_label
        return None if label is None else f" ({label}: "


@dataclass(frozen=True, slots=True)
class ParsedDateTime:
    value: datetime

    def render(self) -> str:
        return self.value.strftime(DISPLAY_DATETIME_FORMAT)


@dataclass(frozen=True, slots=True)
class RawText:
    """A date field that could not be parsed; kept exactly as the user typed it."""

    text: str

    def render(self) -> str:
        return self.text


When = ParsedDateTime | RawText


def parse_datetime(raw: str) -> datetime | None:
    s = raw.strip()
    for fmt in INPUT_DATETIME_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return None


def parse_when(raw: str) -> When:
    """
    Parse a `/by` or `/at` value.

    Anything that does not match one of INPUT_DATETIME_FORMATS degrades to RawText
    instead of failing, so "next week" is still a valid deadline.
    """
    dt = parse_datetime(raw)
    if dt is None:
        return RawText(raw.strip())
    return ParsedDateTime(dt)


def _has_line_break(text: str) -> bool:
    # str.splitlines() is what the task file reader splits on.
    return bool(text) and text.splitlines() != [text]


def format_date(d: date) -> str:
    return d.strftime(DISPLAY_DATE_FORMAT)


@dataclass(frozen=True, slots=True, eq=False)
class Task:
    """
    One trackable item.

    kind, description and when are fixed at construction; only `done` changes
    (and only from False to True, via mark_done()).
    Tasks compare by identity since `done` changes after construction.
    """

    kind: TaskKind
    description: str
    when: When | None = None
    done: bool = False

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        if self.kind is TaskKind.TODO:
            if self.when is not None:
                raise ValueError("todo tasks do not carry a date")
        elif self.when is None:
            raise ValueError(f"{self.kind.name.lower()} tasks require a date")

        # The rendered form is one persisted line, split on the last qualifier.
        if _has_line_break(self.description):
            raise ValueError("description must be a single line")
        if isinstance(self.when, RawText):
            if _has_line_break(self.when.text):
                raise ValueError("date text must be a single line")
            if self.kind.qualifier_prefix in self.when.text:
                raise ValueError(f"date text cannot contain {self.kind.qualifier_prefix.strip()!r}")

    # ---- constructors ----

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, by: str | When) -> Task:
        when = parse_when(by) if isinstance(by, str) else by
        return cls(kind=TaskKind.DEADLINE, description=description, when=when)

    @classmethod
    def event(cls, description: str, at: str | When) -> Task:
        when = parse_when(at) if isinstance(at, str) else at
        return cls(kind=TaskKind.EVENT, description=description, when=when)

    # ---- accessors ----

    @property
    def by(self) -> When | None:
        return self.when if self.kind is TaskKind.DEADLINE else None

    @property
    def at(self) -> When | None:
        return self.when if self.kind is TaskKind.EVENT else None

    def has_date_time(self) -> bool:
        return isinstance(self.when, ParsedDateTime)

    def mark_done(self) -> None:
        object.__setattr__(self, "done", True)

    # ---- matching ----

    def matches_keyword(self, keyword: str) -> bool:
        """
        `keyword` is expected lower-cased already.

        Deadline/Event raw-text dates are searched too; parsed dates are not.
        """
        if keyword in self.description.lower():
            return True
        if isinstance(self.when, RawText):
            return keyword in self.when.text.lower()
        return False

    def falls_on(self, day: date) -> bool:
        if isinstance(self.when, ParsedDateTime):
            return self.when.value.date() == day
        return False

    # ---- rendering ----

    def render(self) -> str:
        mark = DONE_MARK if self.done else NOT_DONE_MARK
        text = f"[{self.kind.value}][{mark}] {self.description}"
        prefix = self.kind.qualifier_prefix
        if prefix is not None and self.when is not None:
            text += f"{prefix}{self.when.render()})"
        return text

    def __str__(self) -> str:
        return self.render()
