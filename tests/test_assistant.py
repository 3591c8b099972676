# tests/test_assistant.py

from __future__ import annotations

from pathlib import Path

from monday.core.assistant import Monday
from monday.core.errors import ErrorKind
from monday.core.replies import GOODBYE
from monday.tasks.task_models import TaskKind, make_todo, render_task
from monday.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


def test_end_to_end_scenario(store: TaskStore, tasks_path: Path) -> None:
    m = Monday(store)
    assert m.load() == "Successfully loaded 0 tasks from storage."

    m.get_response("todo buy milk")
    assert m.tasks.size() == 1
    assert render_task(m.tasks.get(1)) == "[T][ ] (!) buy milk"

    m.get_response("deadline submit report /by 2024-12-31 1800")
    assert m.tasks.size() == 2
    deadline = m.tasks.get(2)
    assert deadline.kind is TaskKind.DEADLINE

    m.get_response("mark 1")
    assert render_task(m.tasks.get(1)).startswith("[T][X]")

    reply = m.respond("delete 2")
    assert reply.error is None
    assert m.tasks.size() == 1
    assert f"  {render_task(deadline)}\n" in reply.text

    reloaded = Monday(TaskStore(tasks_path))
    assert reloaded.load() == "Successfully loaded 1 tasks from storage."
    assert reloaded.tasks.size() == 1
    assert reloaded.tasks.get(1) == m.tasks.get(1)


def test_bye_signals_exit(assistant: Monday) -> None:
    reply = assistant.respond("bye")
    assert reply.exit is True
    assert reply.text == GOODBYE
    assert assistant.get_response("BYE") == GOODBYE


def test_failures_are_tagged(assistant: Monday) -> None:
    assert assistant.respond("dance").error is ErrorKind.UNKNOWN_COMMAND
    assert assistant.respond("mark 5").error is ErrorKind.INVALID_TASK_INDEX
    assert assistant.respond("todo").error is ErrorKind.EMPTY_DESCRIPTION
    assert assistant.respond("event x /from 2024-01-01 1000").error is ErrorKind.INVALID_COMMAND_FORMAT
    assert assistant.respond("deadline x /by whenever").error is ErrorKind.INVALID_DATE_TIME
    assert assistant.tasks.is_empty()


def test_load_failure_starts_empty_and_keeps_working() -> None:
    repo = FakeTaskRepo(stored=[make_todo("unreachable")], fail_load=True)
    m = Monday(repo)

    message = m.load()

    assert message.startswith("Error loading tasks from storage: permission denied")
    assert message.endswith("Starting with an empty task list.")
    assert m.tasks.is_empty()

    m.get_response("todo fresh start")
    assert repo.saves == 1
    assert [t.description for t in repo.stored] == ["fresh start"]


def test_load_hydrates_from_repo() -> None:
    repo = FakeTaskRepo(stored=[make_todo("a"), make_todo("b")])
    m = Monday(repo)

    assert m.load() == "Successfully loaded 2 tasks from storage."
    assert m.get_response("list") == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] (!) a\n"
        "2.[T][ ] (!) b"
    )
    assert repo.saves == 0


def test_user_typed_date_is_normalized_on_disk(assistant: Monday, tasks_path: Path) -> None:
    assistant.get_response("deadline return book /by 2/12/2019 1800")

    assert tasks_path.read_text("utf-8") == "D | 0 | return book | 2019-12-02 1800\n"


def test_pipes_in_descriptions_survive_reload(store: TaskStore, tasks_path: Path) -> None:
    m = Monday(store)
    m.load()
    m.get_response("todo fix a | b bug")
    m.get_response("deadline pay rent | bills /by 2024-12-31 1800")

    reloaded = Monday(TaskStore(tasks_path))

    assert reloaded.load() == "Successfully loaded 2 tasks from storage."
    assert [t.description for t in reloaded.tasks] == ["fix a | b bug", "pay rent | bills"]
