# src/monday/tasks/task_codec.py

"""
One task <-> one pipe-delimited record line.

    TYPE | STATUS | DESCRIPTION [| DATE [| DATE]]

Dates on disk always use the canonical `yyyy-MM-dd HHmm` layout, whatever
format the user typed. Priority is not stored.
"""

from __future__ import annotations

from datetime import datetime

from ..core.errors import MondayError
from .task_models import Due, Span, Task, TaskKind

SEPARATOR = " | "
CANONICAL_FORMAT = "%Y-%m-%d %H%M"

DONE_FLAG = "1"
NOT_DONE_FLAG = "0"


class RecordError(ValueError):
    """A single record line could not be decoded."""


def format_canonical(moment: datetime) -> str:
    return moment.strftime(CANONICAL_FORMAT)


def parse_canonical(text: str) -> datetime:
    return datetime.strptime(text.strip(), CANONICAL_FORMAT)


def encode_record(task: Task) -> str:
    fields = [task.kind.value, DONE_FLAG if task.done else NOT_DONE_FLAG, task.description]
    if isinstance(task.when, Due):
        fields.append(format_canonical(task.when.at))
    elif isinstance(task.when, Span):
        fields.append(format_canonical(task.when.start))
        fields.append(format_canonical(task.when.end))
    return SEPARATOR.join(fields)


def decode_record(line: str) -> Task:
    """
    Raises RecordError describing why the line was rejected.

    TYPE and STATUS are the first two fields and dates are the trailing
    ones, so a description may itself contain `|`.
    """
    head = line.strip().split("|", 2)
    if len(head) < 3:
        raise RecordError("fewer than 3 fields")

    code, status, rest = head[0].strip(), head[1].strip(), head[2]
    try:
        kind = TaskKind(code)
    except ValueError:
        raise RecordError(f"unknown task type {code!r}") from None

    done = status == DONE_FLAG

    try:
        if kind is TaskKind.TODO:
            return Task(kind=kind, description=rest.strip(), done=done)

        if kind is TaskKind.DEADLINE:
            description, sep, due = rest.rpartition("|")
            if not sep:
                raise RecordError("deadline without due date")
            return Task(kind=kind, description=description.strip(), done=done, when=Due(_date_field(due)))

        fields = rest.rsplit("|", 2)
        if len(fields) < 3:
            raise RecordError("event without start and end")
        description, start, end = fields
        when = Span(_date_field(start), _date_field(end))
        return Task(kind=kind, description=description.strip(), done=done, when=when)
    except MondayError as e:
        raise RecordError(str(e)) from e


def _date_field(raw: str) -> datetime:
    try:
        return parse_canonical(raw)
    except ValueError:
        raise RecordError(f"bad date {raw!r}") from None
