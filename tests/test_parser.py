# tests/test_parser.py

from __future__ import annotations

import pytest

from monday.cli.parser import Command, CommandType, parse, parse_priority
from monday.core.errors import ErrorKind, Failure
from monday.tasks.task_models import Priority


def _ok(line: str) -> Command:
    result = parse(line)
    assert isinstance(result, Command), result
    return result


def _fail(line: str) -> Failure:
    result = parse(line)
    assert isinstance(result, Failure), result
    return result


@pytest.mark.parametrize(
    "line, ctype",
    [
        ("bye", CommandType.BYE),
        ("list", CommandType.LIST),
        ("help", CommandType.HELP),
        ("  list  ", CommandType.LIST),
        ("LIST", CommandType.LIST),
        ("help me please", CommandType.HELP),
    ],
)
def test_bare_commands(line: str, ctype: CommandType) -> None:
    assert _ok(line).type is ctype


@pytest.mark.parametrize("line", ["blah", "", "unknown", "todos read"])
def test_unrecognized_word_is_unknown_not_failure(line: str) -> None:
    assert _ok(line).type is CommandType.UNKNOWN


@pytest.mark.parametrize("word", ["mark", "unmark", "delete"])
def test_index_commands(word: str) -> None:
    cmd = _ok(f"{word} 2")
    assert cmd.type == CommandType(word)
    assert cmd.parameter == "2"

    # numeric validation happens at execution time
    assert _ok(f"{word} two").parameter == "two"

    failure = _fail(word)
    assert failure.kind is ErrorKind.INVALID_COMMAND_FORMAT
    assert "Please specify a task number" in failure.message


def test_find() -> None:
    assert _ok("find old book").parameter == "old book"
    assert _fail("find").kind is ErrorKind.INVALID_COMMAND_FORMAT
    assert _fail("find    ").kind is ErrorKind.INVALID_COMMAND_FORMAT


def test_todo() -> None:
    cmd = _ok("todo buy milk")
    assert cmd.type is CommandType.TODO
    assert cmd.description == "buy milk"
    assert cmd.priority is Priority.MEDIUM
    assert cmd.full_command == "todo buy milk"


@pytest.mark.parametrize(
    "line, priority",
    [
        ("todo x /priority high", Priority.HIGH),
        ("todo x /priority 1", Priority.HIGH),
        ("todo x /priority Medium", Priority.MEDIUM),
        ("todo x /priority 2", Priority.MEDIUM),
        ("todo x /priority LOW", Priority.LOW),
        ("todo x /priority 3", Priority.LOW),
    ],
)
def test_priority_clause(line: str, priority: Priority) -> None:
    cmd = _ok(line)
    assert cmd.description == "x"
    assert cmd.priority is priority


def test_bad_priority_names_valid_options() -> None:
    failure = _fail("todo x /priority urgent")
    assert failure.kind is ErrorKind.INVALID_COMMAND_FORMAT
    assert "Valid options: high/1, medium/2, low/3" in failure.message


@pytest.mark.parametrize("line", ["todo", "todo    ", "todo /priority high"])
def test_todo_empty_description(line: str) -> None:
    failure = _fail(line)
    assert failure.kind is ErrorKind.EMPTY_DESCRIPTION
    assert failure.message == "The description of a todo cannot be empty."


def test_deadline() -> None:
    cmd = _ok("deadline return book /by 2/12/2019 1800 /priority low")
    assert cmd.type is CommandType.DEADLINE
    assert cmd.description == "return book"
    assert cmd.parameter == "2/12/2019 1800"
    assert cmd.priority is Priority.LOW


def test_deadline_does_not_validate_date() -> None:
    assert _ok("deadline x /by someday").parameter == "someday"


def test_deadline_without_remainder_is_empty_description() -> None:
    assert _fail("deadline").kind is ErrorKind.EMPTY_DESCRIPTION


@pytest.mark.parametrize(
    "line",
    [
        "deadline return book",
        "deadline /by 2024-12-31",
        "deadline return book /by",
        "deadline return book by 2024-12-31",
    ],
)
def test_deadline_format_failures(line: str) -> None:
    failure = _fail(line)
    assert failure.kind is ErrorKind.INVALID_COMMAND_FORMAT
    assert "deadline <description> /by" in failure.message


def test_event() -> None:
    cmd = _ok("event project meeting /from 2024-12-01 1400 /to 2024-12-01 1600 /priority 1")
    assert cmd.type is CommandType.EVENT
    assert cmd.description == "project meeting"
    assert cmd.parameters == ("2024-12-01 1400", "2024-12-01 1600")
    assert cmd.priority is Priority.HIGH


@pytest.mark.parametrize(
    "line",
    [
        "event meeting",
        "event meeting /to 2024-12-01 1600",
        "event meeting /from 2024-12-01 1400",
        "event meeting /from 2024-12-01 1400 /to",
        "event /from 2024-12-01 1400 /to 2024-12-01 1600",
    ],
)
def test_event_format_failures(line: str) -> None:
    failure = _fail(line)
    assert failure.kind is ErrorKind.INVALID_COMMAND_FORMAT
    assert "event <description> /from <start> /to <end>" in failure.message


def test_parse_priority_defaults() -> None:
    assert parse_priority(None) is Priority.MEDIUM
    assert parse_priority("  ") is Priority.MEDIUM
