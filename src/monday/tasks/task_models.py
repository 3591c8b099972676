# src/monday/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime, time
from enum import StrEnum

from ..core.errors import EmptyDescriptionError, InvalidDateTimeError

# Accepted user input, tried in order as (shape, strptime format). strptime
# alone accepts unpadded fields, so each shape pins the field widths.
INPUT_FORMATS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\d{4}-\d{2}-\d{2} \d{4}"), "%Y-%m-%d %H%M"),
    (re.compile(r"\d{1,2}/\d{1,2}/\d{4} \d{4}"), "%d/%m/%Y %H%M"),
)
DATE_ONLY_FORMAT = (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d")
END_OF_DAY = time(23, 59)


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def level(self) -> int:
        return _PRIORITY_LEVELS[self]

    @property
    def icon(self) -> str:
        return _PRIORITY_ICONS[self]


_PRIORITY_LEVELS = {Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}
_PRIORITY_ICONS = {Priority.HIGH: "(!!)", Priority.MEDIUM: "(!)", Priority.LOW: "()"}


class TaskKind(StrEnum):
    """
    Task variant. The value doubles as the record type code on disk.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def tag(self) -> str:
        return f"[{self.value}]"

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Due:
    at: datetime


@dataclass(frozen=True, slots=True)
class Span:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateTimeError("Start time cannot be after end time")


Schedule = Due | Span | None


@dataclass(frozen=True, slots=True)
class Task:
    """
    One task: a shared base (description, done, priority) plus the
    variant payload in `when`.

    Invariants checked at construction:
    - description is non-empty
    - TODO carries no payload, DEADLINE carries Due, EVENT carries Span
    """

    kind: TaskKind
    description: str
    done: bool = False
    priority: Priority = Priority.MEDIUM
    when: Schedule = None

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise EmptyDescriptionError(self.kind.label)
        expected = _PAYLOAD_TYPES[self.kind]
        if expected is None:
            if self.when is not None:
                raise ValueError(f"{self.kind.label} does not take a date")
        elif not isinstance(self.when, expected):
            raise ValueError(f"{self.kind.label} requires {expected.__name__}")

    @property
    def due_at(self) -> datetime | None:
        return self.when.at if isinstance(self.when, Due) else None

    @property
    def start_at(self) -> datetime | None:
        return self.when.start if isinstance(self.when, Span) else None

    @property
    def end_at(self) -> datetime | None:
        return self.when.end if isinstance(self.when, Span) else None

    def with_done(self, done: bool) -> Task:
        return replace(self, done=done)

    def __str__(self) -> str:
        return render_task(self)


_PAYLOAD_TYPES: dict[TaskKind, type | None] = {
    TaskKind.TODO: None,
    TaskKind.DEADLINE: Due,
    TaskKind.EVENT: Span,
}


# ---- date/time parsing ----


def parse_datetime(text: str, *, allow_date_only: bool = True) -> datetime:
    """
    Parse user-typed date/time text. First matching format wins:

    - yyyy-MM-dd HHmm  (2019-12-02 1800)
    - d/M/yyyy HHmm    (2/12/2019 1800)
    - yyyy-MM-dd       (2019-12-02 -> 23:59), only if allow_date_only
    """
    raw = (text or "").strip()
    for shape, fmt in INPUT_FORMATS:
        parsed = _strict_parse(raw, shape, fmt)
        if parsed is not None:
            return parsed

    supported = "yyyy-MM-dd HHmm, d/M/yyyy HHmm"
    if allow_date_only:
        supported += ", yyyy-MM-dd"
        parsed = _strict_parse(raw, *DATE_ONLY_FORMAT)
        if parsed is not None:
            return datetime.combine(parsed.date(), END_OF_DAY)

    raise InvalidDateTimeError(f"Unable to parse date/time: {raw}. Supported formats: {supported}")


def _strict_parse(raw: str, shape: re.Pattern[str], fmt: str) -> datetime | None:
    if not shape.fullmatch(raw):
        return None
    try:
        return datetime.strptime(raw, fmt)
    except ValueError:
        return None


# ---- constructors used by the interpreter ----


def make_todo(description: str, priority: Priority = Priority.MEDIUM) -> Task:
    return Task(kind=TaskKind.TODO, description=description.strip(), priority=priority)


def make_deadline(description: str, due_text: str, priority: Priority = Priority.MEDIUM) -> Task:
    due = parse_datetime(due_text, allow_date_only=True)
    return Task(
        kind=TaskKind.DEADLINE,
        description=description.strip(),
        priority=priority,
        when=Due(due),
    )


def make_event(
    description: str,
    start_text: str,
    end_text: str,
    priority: Priority = Priority.MEDIUM,
) -> Task:
    start = parse_datetime(start_text, allow_date_only=False)
    end = parse_datetime(end_text, allow_date_only=False)
    return Task(
        kind=TaskKind.EVENT,
        description=description.strip(),
        priority=priority,
        when=Span(start, end),
    )


# ---- rendering ----


def format_clock(moment: datetime) -> str:
    """h:mma, e.g. 6:00PM."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment:%M}{suffix}"


def format_display(moment: datetime) -> str:
    """MMM dd yyyy h:mma, e.g. Dec 31 2024 6:00PM."""
    return f"{moment:%b %d %Y} {format_clock(moment)}"


def status_icon(task: Task) -> str:
    return "[X]" if task.done else "[ ]"


def render_task(task: Task) -> str:
    head = f"{task.kind.tag}{status_icon(task)} {task.priority.icon} {task.description}"

    if isinstance(task.when, Due):
        return f"{head} (by: {format_display(task.when.at)})"

    if isinstance(task.when, Span):
        start, end = task.when.start, task.when.end
        # Same-day events only repeat the clock time.
        end_text = format_clock(end) if start.date() == end.date() else format_display(end)
        return f"{head} (at: {format_display(start)} to {end_text})"

    return head
