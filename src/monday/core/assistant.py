# src/monday/core/assistant.py

"""
Session facade.

Owns the task list for one process and exposes the two entry points a
front-end needs: load() at startup and respond()/get_response() per line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as default_registry
from ..cli.parser import CommandType, parse
from ..tasks.task_list import TaskList
from . import replies
from .errors import ErrorKind, Failure, TaskLoadingError
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    exit: bool = False
    error: ErrorKind | None = None


class Monday:
    def __init__(self, store: TaskRepo, *, registry: CommandRegistry | None = None) -> None:
        self._store = store
        self._registry = registry or default_registry
        self.tasks = TaskList(on_change=store.save)

    def load(self) -> str:
        """
        Hydrate the task list from storage.

        An unreadable file is reported once and the session continues with
        an empty list.
        """
        try:
            loaded = self._store.load()
        except TaskLoadingError as e:
            logger.warning("Task loading failed: %s", e)
            self.tasks.replace_all([])
            return str(e)

        self.tasks.replace_all(loaded)
        return replies.tasks_loaded(len(loaded))

    def respond(self, line: str) -> Reply:
        command = parse(line)
        if isinstance(command, Failure):
            return Reply(command.message, error=command.kind)

        if command.type is CommandType.BYE:
            return Reply(replies.GOODBYE, exit=True)

        result = self._registry.execute(command, self.tasks)
        if isinstance(result, Failure):
            return Reply(result.message, error=result.kind)
        return Reply(result)

    def get_response(self, line: str) -> str:
        """Single line in, response text out (non-interactive front-ends)."""
        return self.respond(line).text
