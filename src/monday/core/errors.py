# src/monday/core/errors.py

"""
Error taxonomy.

Model and storage code raise `MondayError` subclasses. The interpreter
boundary (parse/execute) converts them into a `Failure` value, so callers
branch on the result instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_DESCRIPTION = "empty_description"
    INVALID_COMMAND_FORMAT = "invalid_command_format"
    UNKNOWN_COMMAND = "unknown_command"
    INVALID_TASK_INDEX = "invalid_task_index"
    INVALID_DATE_TIME = "invalid_date_time"
    TASK_LOADING = "task_loading"


SUPPORTED_DATE_FORMATS_HELP = (
    "  - yyyy-MM-dd HHmm (e.g., 2019-12-02 1800)\n"
    "  - d/M/yyyy HHmm (e.g., 2/12/2019 1800)\n"
    "  - yyyy-MM-dd (e.g., 2019-12-02, defaults to 11:59 PM for deadlines)"
)


class MondayError(Exception):
    """Base class for every user-facing failure."""

    kind: ErrorKind = ErrorKind.INVALID_COMMAND_FORMAT


class EmptyDescriptionError(MondayError):
    kind = ErrorKind.EMPTY_DESCRIPTION

    def __init__(self, task_type: str) -> None:
        super().__init__(f"The description of a {task_type} cannot be empty.")


class InvalidCommandFormatError(MondayError):
    kind = ErrorKind.INVALID_COMMAND_FORMAT

    def __init__(self, detail: str) -> None:
        super().__init__(f"Format: {detail}")


class UnknownCommandError(MondayError):
    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self) -> None:
        super().__init__("I'm sorry, but I don't recognize that command. Please try again.")


class InvalidTaskIndexError(MondayError):
    kind = ErrorKind.INVALID_TASK_INDEX

    def __init__(self) -> None:
        super().__init__("Invalid task number.")


class InvalidDateTimeError(MondayError):
    kind = ErrorKind.INVALID_DATE_TIME

    def __init__(self, original_message: str) -> None:
        super().__init__(
            "Invalid date/time format. Please use one of these formats:\n"
            f"{SUPPORTED_DATE_FORMATS_HELP}\n"
            f"Original error: {original_message}"
        )


class TaskLoadingError(MondayError):
    kind = ErrorKind.TASK_LOADING

    def __init__(self, message: str) -> None:
        super().__init__(
            f"Error loading tasks from storage: {message}. Starting with an empty task list."
        )


@dataclass(frozen=True, slots=True)
class Failure:
    """Tagged error value returned by parse/execute."""

    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, exc: MondayError) -> Failure:
        return cls(kind=exc.kind, message=str(exc))

    def __str__(self) -> str:
        return self.message
