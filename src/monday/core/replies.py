# src/monday/core/replies.py

"""User-facing response texts (one string per command)."""

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task, render_task

GOODBYE = "Bye. Hope to see you again soon!"


def numbered(tasks: Sequence[Task]) -> list[str]:
    return [f"{i}.{render_task(t)}" for i, t in enumerate(tasks, start=1)]


def task_list(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "Your task list is empty."
    return "\n".join(["Here are the tasks in your list:", *numbered(tasks)])


def matching_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No matching tasks found."
    return "\n".join(["Here are the matching tasks in your list:", *numbered(tasks)])


def task_added(task: Task, total: int) -> str:
    return f"Got it. I've added this task:\n  {render_task(task)}\nNow you have {total} tasks in the list."


def task_deleted(task: Task, remaining: int) -> str:
    return f"Noted. I've removed this task:\n  {render_task(task)}\nNow you have {remaining} tasks in the list."


def task_marked(task: Task, done: bool) -> str:
    head = "Nice! I've marked this task as done:" if done else "OK, I've marked this task as not done yet:"
    return f"{head}\n  {render_task(task)}"


def tasks_loaded(count: int) -> str:
    return f"Successfully loaded {count} tasks from storage."
