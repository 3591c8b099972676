# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from monday.core.assistant import Monday
from monday.tasks.task_list import TaskList
from monday.tasks.task_store import TaskStore

from .fakes import FakeSaver, FakeTaskRepo


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    # Nested on purpose: save() must create missing parent directories.
    return tmp_path / "data" / "monday.txt"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def saver() -> FakeSaver:
    return FakeSaver()


@pytest.fixture()
def task_list(saver: FakeSaver) -> TaskList:
    return TaskList(on_change=saver)


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def assistant(store: TaskStore) -> Monday:
    """
    Monday wired to a real TaskStore in tmp_path.

    The flat-file store is kept real here because its round-trip behaviour
    is part of what the end-to-end tests check.
    """
    m = Monday(store)
    m.load()
    return m
