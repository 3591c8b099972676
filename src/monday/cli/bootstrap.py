# src/monday/cli/bootstrap.py

"""
Composition root: settings -> TaskStore -> Monday.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..core.assistant import Monday
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_assistant(*, settings: Settings | None = None, tasks_path: str | Path | None = None) -> Monday:
    """
    Build a Monday session wired to the flat-file store.

    Keeping settings injectable makes the app easier to test. If settings is
    None, falls back to get_settings(). tasks_path overrides the configured file.
    """
    if settings is None:
        settings = get_settings()

    path = Path(tasks_path) if tasks_path is not None else settings.tasks_path
    logger.debug("Using task file %s", path)
    return Monday(TaskStore(path))
