# src/taskbot/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import TaskError
from .task_models import Task


class TaskList:
    """
    Ordered, 1-indexed list of tasks.

    Instances never change: add/delete_task/mark_done return a new TaskList.
    Position is the only identity a task has, so deleting renumbers every
    task after it.
    """

    __slots__ = ("_tasks",)

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: tuple[Task, ...] = tuple(tasks)

    def _check_id(self, task_id: int) -> int:
        if task_id < 1 or task_id > len(self._tasks):
            raise TaskError(
                f"I can't find task number {task_id}! "
                f"You have {len(self._tasks)} task(s) in your list."
            )
        return task_id - 1

    def add(self, task: Task) -> TaskList:
        return TaskList((*self._tasks, task))

    def get(self, task_id: int) -> Task:
        return self._tasks[self._check_id(task_id)]

    def delete_task(self, task_id: int) -> TaskList:
        i = self._check_id(task_id)
        return TaskList(self._tasks[:i] + self._tasks[i + 1 :])

    def mark_done(self, task_id: int) -> TaskList:
        i = self._check_id(task_id)
        done = self._tasks[i].mark_done()
        return TaskList((*self._tasks[:i], done, *self._tasks[i + 1 :]))

    def size(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __hash__(self) -> int:
        return hash(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({list(self._tasks)!r})"
