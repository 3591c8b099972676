# src/monday/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core import replies
from ..core.errors import (
    SUPPORTED_DATE_FORMATS_HELP,
    Failure,
    InvalidTaskIndexError,
    MondayError,
    UnknownCommandError,
)
from ..tasks.task_list import TaskList
from ..tasks.task_models import Priority, make_deadline, make_event, make_todo
from .parser import Command, CommandType

CommandHandler = Callable[[Command, TaskList], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    help_text: str
    usage: str
    example: str | None = None


class CommandRegistry:
    """Maps each command type to the handler that runs it (and its help entry)."""

    def __init__(self) -> None:
        self._specs: dict[CommandType, CommandSpec] = {}

    def register(
        self,
        ctype: CommandType,
        handler: CommandHandler,
        help_text: str,
        usage: str,
        example: str | None = None,
    ) -> None:
        self._specs[ctype] = CommandSpec(
            name=str(ctype),
            handler=handler,
            help_text=help_text,
            usage=usage,
            example=example,
        )

    def execute(self, command: Command, tasks: TaskList) -> str | Failure:
        """
        Run one parsed command against the task list.

        Returns the response text, or a Failure for semantic errors
        (bad index, bad date, unknown command).
        """
        spec = self._specs.get(command.type)
        if spec is None:
            return Failure.from_error(UnknownCommandError())

        try:
            return spec.handler(command, tasks)
        except MondayError as e:
            logger.debug("Command %s failed (%s): %s", spec.name, e.kind, e)
            return Failure.from_error(e)

    def build_help(self) -> str:
        lines = ["Here are the available commands:", ""]
        for n, spec in enumerate(self._specs.values(), start=1):
            indent = " " * (len(str(n)) + 2)
            lines.append(f"{n}. {spec.name} - {spec.help_text}")
            lines.append(f"{indent}Usage: {spec.usage}")
            if spec.example:
                lines.append(f"{indent}Example: {spec.example}")
            lines.append("")
        lines.append("Note: Task numbers are 1-based (start from 1)")
        lines.append("Priority: high/1, medium/2 (default), low/3")
        lines.append("Date formats:")
        lines.append(SUPPORTED_DATE_FORMATS_HELP)
        return "\n".join(lines)


registry = CommandRegistry()


def execute(command: Command, tasks: TaskList) -> str | Failure:
    return registry.execute(command, tasks)


def _task_number(command: Command) -> int:
    try:
        return int(command.parameter or "")
    except ValueError:
        raise InvalidTaskIndexError() from None


def _priority(command: Command) -> Priority:
    return command.priority or Priority.MEDIUM


def cmd_bye(command: Command, tasks: TaskList) -> str:
    return replies.GOODBYE


def cmd_list(command: Command, tasks: TaskList) -> str:
    return replies.task_list(tasks.all())


def cmd_mark(command: Command, tasks: TaskList) -> str:
    return replies.task_marked(tasks.mark_done(_task_number(command)), True)


def cmd_unmark(command: Command, tasks: TaskList) -> str:
    return replies.task_marked(tasks.mark_not_done(_task_number(command)), False)


def cmd_todo(command: Command, tasks: TaskList) -> str:
    task = tasks.add(make_todo(command.description or "", _priority(command)))
    return replies.task_added(task, tasks.size())


def cmd_deadline(command: Command, tasks: TaskList) -> str:
    task = tasks.add(make_deadline(command.description or "", command.parameter or "", _priority(command)))
    return replies.task_added(task, tasks.size())


def cmd_event(command: Command, tasks: TaskList) -> str:
    start, end = command.parameters or ("", "")
    task = tasks.add(make_event(command.description or "", start, end, _priority(command)))
    return replies.task_added(task, tasks.size())


def cmd_delete(command: Command, tasks: TaskList) -> str:
    removed = tasks.delete(_task_number(command))
    return replies.task_deleted(removed, tasks.size())


def cmd_find(command: Command, tasks: TaskList) -> str:
    return replies.matching_tasks(tasks.find(command.parameter or ""))


def cmd_help(command: Command, tasks: TaskList) -> str:
    return registry.build_help()


registry.register(CommandType.LIST, cmd_list, "Display all tasks", "list")
registry.register(
    CommandType.TODO,
    cmd_todo,
    "Add a simple task",
    "todo <description> [/priority <high|medium|low>]",
    "todo read book /priority high",
)
registry.register(
    CommandType.DEADLINE,
    cmd_deadline,
    "Add a task with a due date",
    "deadline <description> /by <yyyy-MM-dd HHmm> [/priority <high|medium|low>]",
    "deadline return book /by 2024-12-31 1800",
)
registry.register(
    CommandType.EVENT,
    cmd_event,
    "Add an event with start and end times",
    "event <description> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm> [/priority <high|medium|low>]",
    "event project meeting /from 2024-12-01 1400 /to 2024-12-01 1600",
)
registry.register(CommandType.MARK, cmd_mark, "Mark a task as completed", "mark <task_number>", "mark 1")
registry.register(
    CommandType.UNMARK, cmd_unmark, "Mark a task as not completed", "unmark <task_number>", "unmark 1"
)
registry.register(
    CommandType.DELETE, cmd_delete, "Remove a task from the list", "delete <task_number>", "delete 1"
)
registry.register(
    CommandType.FIND, cmd_find, "Search for tasks containing a keyword", "find <keyword>", "find book"
)
registry.register(CommandType.HELP, cmd_help, "Show this help message", "help")
registry.register(CommandType.BYE, cmd_bye, "Exit the application", "bye")
