# src/monday/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..core.errors import TaskLoadingError
from .task_codec import RecordError, decode_record, encode_record
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_PATH = Path("data") / "monday.txt"


class TaskStore:
    """
    Flat-file task store.

    Holds no task state between calls: load() reads the whole file, save()
    rewrites the whole file. Corrupted lines are skipped one by one so that a
    damaged file still yields every readable task.
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_PATH) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TaskLoadingError(str(e)) from e

        tasks: list[Task] = []
        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue
            try:
                tasks.append(decode_record(line))
            except RecordError as e:
                logger.warning("Skipping corrupted line %d (%s): %s", lineno, e, line)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """
        Rewrite the file with one record per task.

        Failures are logged, never raised: the in-memory list stays
        authoritative for the session.
        """
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = "".join(f"{encode_record(t)}\n" for t in tasks)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
            logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        except (OSError, UnicodeError):
            logger.warning("Failed to save %d tasks to %s", len(tasks), self._path, exc_info=True)
            self._discard(tmp)

    @staticmethod
    def _discard(tmp: Path) -> None:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove %s", tmp, exc_info=True)
