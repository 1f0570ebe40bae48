# src/taskbot/errors.py

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tasks.task_list import TaskList


class TaskError(Exception):
    """
    The single user-facing error kind.

    Raised for malformed save lines, unreadable/unwritable save files,
    out-of-range task numbers and bad command input. `message` is a one-line
    text that connectors can show as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsavedChangesError(TaskError):
    """
    A mutating command succeeded in memory but the save file was not rewritten.

    `tasks` is the list the command produced; the session keeps it as the
    active state even though it is not durable.
    """

    def __init__(self, message: str, *, tasks: TaskList) -> None:
        super().__init__(message)
        self.tasks = tasks
