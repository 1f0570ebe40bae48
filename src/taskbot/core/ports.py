# src/taskbot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands receive a Ui and a TaskStorage as parameters instead of reaching for
globals. This keeps connectors/storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Whole-file persistence of the task list."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...


class Ui(Protocol):
    """
    Outbound presentation port.

    The core hands over values (the affected task, the new count, an error
    message); formatting them is up to the connector.
    """

    def show_welcome(self) -> None: ...
    def show_loading_error(self, message: str) -> None: ...
    def show_added(self, task: Task, count: int) -> None: ...
    def show_deleted(self, task: Task, count: int) -> None: ...
    def show_done(self, task: Task) -> None: ...
    def show_tasks(self, tasks: TaskList) -> None: ...
    def show_message(self, text: str) -> None: ...
    def show_error(self, message: str) -> None: ...
    def show_goodbye(self) -> None: ...
