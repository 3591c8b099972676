# src/monday/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import InvalidTaskIndexError
from ..core.ports import SaveHook
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered in-memory task collection addressed by 1-based index.

    Every successful mutation calls `on_change` with the full list before
    returning (auto-save). Queries never do.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, on_change: SaveHook | None = None) -> None:
        self._tasks: list[Task] = list(tasks)
        self._on_change = on_change

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._position(index)]

    def last_task(self) -> Task:
        if not self._tasks:
            raise IndexError("Task list is empty")
        return self._tasks[-1]

    def find(self, keyword: str) -> list[Task]:
        """Case-sensitive substring match on description, insertion order."""
        return [t for t in self._tasks if keyword in t.description]

    # ---- mutations ----

    def add(self, task: Task) -> Task:
        if task is None:
            raise ValueError("Task cannot be None")
        self._tasks.append(task)
        self._autosave()
        return task

    def delete(self, index: int) -> Task:
        removed = self._tasks.pop(self._position(index))
        self._autosave()
        return removed

    def mark_done(self, index: int) -> Task:
        return self._set_done(index, True)

    def mark_not_done(self, index: int) -> Task:
        return self._set_done(index, False)

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Swap in a freshly loaded collection (no save)."""
        self._tasks = list(tasks)

    # ---- helpers ----

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise InvalidTaskIndexError()
        return index - 1

    def _set_done(self, index: int, done: bool) -> Task:
        pos = self._position(index)
        task = self._tasks[pos].with_done(done)
        self._tasks[pos] = task
        self._autosave()
        return task

    def _autosave(self) -> None:
        if self._on_change is None:
            return
        logger.debug("Auto-saving %d tasks", len(self._tasks))
        self._on_change(list(self._tasks))
