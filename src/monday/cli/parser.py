# src/monday/cli/parser.py

"""
Text line -> Command.

parse() is pure: it only checks the shape of the line. Index ranges and
dates are validated later by execute(), against the live task list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import (
    EmptyDescriptionError,
    Failure,
    InvalidCommandFormatError,
    MondayError,
)
from ..tasks.task_models import Priority

logger = logging.getLogger(__name__)

PRIORITY_SEP = " /priority "
BY_SEP = " /by "
FROM_SEP = " /from "
TO_SEP = " /to "

PRIORITY_ALIASES: dict[str, Priority] = {
    "high": Priority.HIGH,
    "1": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "2": Priority.MEDIUM,
    "low": Priority.LOW,
    "3": Priority.LOW,
}

DEADLINE_FORMAT = (
    "Invalid format for the 'deadline' command. Description and due date are required. "
    "Format: deadline <description> /by <yyyy-MM-dd HHmm> [/priority <high|medium|low>]"
)
EVENT_FORMAT = (
    "Invalid format for the 'event' command. Description, start and end times are required. "
    "Format: event <description> /from <start> /to <end> [/priority <high|medium|low>]"
)


class CommandType(StrEnum):
    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    DELETE = "delete"
    FIND = "find"
    HELP = "help"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Command:
    type: CommandType
    full_command: str
    description: str | None = None
    parameter: str | None = None
    parameters: tuple[str, str] | None = None
    priority: Priority | None = None


def parse(line: str) -> Command | Failure:
    """Parse one input line. Malformed syntax comes back as a Failure."""
    try:
        return parse_or_raise(line)
    except MondayError as e:
        logger.debug("Parse failed (%s): %r", e.kind, line)
        return Failure.from_error(e)


def parse_or_raise(line: str) -> Command:
    full = (line or "").strip()
    word, _, rest = full.partition(" ")
    rest = rest.strip()

    try:
        ctype = CommandType(word.lower())
    except ValueError:
        return Command(CommandType.UNKNOWN, full)
    if ctype is CommandType.UNKNOWN:
        return Command(CommandType.UNKNOWN, full)

    if ctype in (CommandType.BYE, CommandType.LIST, CommandType.HELP):
        return Command(ctype, full)

    if ctype in (CommandType.MARK, CommandType.UNMARK, CommandType.DELETE):
        if not rest:
            raise InvalidCommandFormatError(
                f"Invalid format for the '{ctype}' command. Please specify a task number."
            )
        return Command(ctype, full, parameter=rest)

    if ctype is CommandType.FIND:
        if not rest:
            raise InvalidCommandFormatError(
                "Invalid format for the 'find' command. Please specify a keyword to search for."
            )
        return Command(ctype, full, parameter=rest)

    if not rest:
        raise EmptyDescriptionError(str(ctype))

    body, priority = _extract_priority(rest)

    if ctype is CommandType.TODO:
        if not body:
            raise EmptyDescriptionError("todo")
        return Command(ctype, full, description=body, priority=priority)

    if ctype is CommandType.DEADLINE:
        description, due = _split_pair(body, BY_SEP, DEADLINE_FORMAT)
        return Command(ctype, full, description=description, parameter=due, priority=priority)

    description, span = _split_pair(body, FROM_SEP, EVENT_FORMAT)
    start, end = _split_pair(span, TO_SEP, EVENT_FORMAT)
    return Command(ctype, full, description=description, parameters=(start, end), priority=priority)


def parse_priority(raw: str | None) -> Priority:
    if raw is None or not raw.strip():
        return Priority.MEDIUM
    token = raw.strip().lower()
    try:
        return PRIORITY_ALIASES[token]
    except KeyError:
        raise InvalidCommandFormatError(
            f"Invalid priority: {token}. Valid options: high/1, medium/2, low/3"
        ) from None


def _extract_priority(text: str) -> tuple[str, Priority]:
    # Leading space lets a bare "/priority x" remainder match too.
    head, sep, tail = f" {text}".partition(PRIORITY_SEP)
    if not sep:
        return text.strip(), Priority.MEDIUM
    return head.strip(), parse_priority(tail)


def _split_pair(text: str, sep: str, detail: str) -> tuple[str, str]:
    left, found, right = text.partition(sep)
    left, right = left.strip(), right.strip()
    if not found or not left or not right:
        raise InvalidCommandFormatError(detail)
    return left, right
