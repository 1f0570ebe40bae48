# src/taskbot/core/commands.py

"""
Typed commands executed by the session.

Each command takes the current TaskList plus the Ui and TaskStorage ports and
returns the TaskList that should become current. Mutating commands save
exactly the list they return.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Protocol

from ..errors import TaskError, UnsavedChangesError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo
from .ports import TaskStorage, Ui

logger = logging.getLogger(__name__)


class Command(Protocol):
    is_exit: bool

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList: ...


def _persist(storage: TaskStorage, tasks: TaskList) -> TaskList:
    try:
        storage.save(tasks)
    except TaskError as e:
        raise UnsavedChangesError(
            f"{e.message} (changes are kept in memory only)", tasks=tasks
        ) from e
    return tasks


class _AddCommand:
    is_exit: ClassVar[bool] = False

    def build_task(self) -> Task:
        raise NotImplementedError

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList:
        task = self.build_task()
        new_tasks = tasks.add(task)
        logger.debug("Added %s task, total=%d", task.kind.name, new_tasks.size())
        ui.show_added(task, new_tasks.size())
        return _persist(storage, new_tasks)


@dataclass(frozen=True, slots=True)
class AddTodoCommand(_AddCommand):
    description: str

    def build_task(self) -> Task:
        return Todo(self.description)


@dataclass(frozen=True, slots=True)
class AddDeadlineCommand(_AddCommand):
    description: str
    by: str

    def build_task(self) -> Task:
        return Deadline(self.description, self.by)


@dataclass(frozen=True, slots=True)
class AddEventCommand(_AddCommand):
    description: str
    start: str
    end: str

    def build_task(self) -> Task:
        return Event(self.description, self.start, self.end)


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    task_id: int

    is_exit: ClassVar[bool] = False

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList:
        deleted = tasks.get(self.task_id)
        new_tasks = tasks.delete_task(self.task_id)
        logger.debug("Deleted task #%d, total=%d", self.task_id, new_tasks.size())
        ui.show_deleted(deleted, new_tasks.size())
        return _persist(storage, new_tasks)


@dataclass(frozen=True, slots=True)
class DoneCommand:
    task_id: int

    is_exit: ClassVar[bool] = False

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList:
        new_tasks = tasks.mark_done(self.task_id)
        ui.show_done(new_tasks.get(self.task_id))
        return _persist(storage, new_tasks)


@dataclass(frozen=True, slots=True)
class ListCommand:
    is_exit: ClassVar[bool] = False

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList:
        ui.show_tasks(tasks)
        return tasks


@dataclass(frozen=True, slots=True)
class HelpCommand:
    text: str

    is_exit: ClassVar[bool] = False

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList:
        ui.show_message(self.text)
        return tasks


@dataclass(frozen=True, slots=True)
class ExitCommand:
    is_exit: ClassVar[bool] = True

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStorage) -> TaskList:
        ui.show_goodbye()
        return tasks
