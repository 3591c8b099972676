# src/monday/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list and the console loop depend on these Protocols instead of
concrete storage or terminal objects, which keeps both testable without a
filesystem or a TTY.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

SaveHook = Callable[[Sequence[Any]], None]
# Called with the full task sequence after every successful mutation.


class TaskRepo(Protocol):
    """Whole-collection persistence (load once, rewrite on every change)."""

    def load(self) -> list[Any]: ...
    def save(self, tasks: Sequence[Any]) -> None: ...


@dataclass(slots=True)
class ConsoleIO:
    """
    Explicit I/O context for the interactive loop.

    read_line() raises EOFError when the input source is exhausted.
    """

    read_line: Callable[[str], str] = input
    write: Callable[[str], None] = print
