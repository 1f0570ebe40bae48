# src/taskbot/tasks/task_codec.py

"""
Line codec for the save file.

One task per line:

    <TYPE> | <DONE> | <DESCRIPTION> [ | <EXTRA1> [ | <EXTRA2> ] ]

TYPE is the TaskKind tag (T/D/E), DONE is "1" or "0". Todo lines have 3 fields,
Deadline lines 4 (by), Event lines 5 (from, to). There is no escaping; the
model constructors reject values containing the separator instead.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..errors import TaskError
from .task_models import FIELD_SEPARATOR, Deadline, Event, Task, TaskKind, Todo

TASK_COMPLETE = "1"
TASK_INCOMPLETE = "0"


def encode_task(task: Task) -> str:
    """Return the one-line form of `task` (without a line terminator)."""
    fields = [
        str(task.kind),
        TASK_COMPLETE if task.is_done else TASK_INCOMPLETE,
        task.description,
        *task.extras(),
    ]
    return FIELD_SEPARATOR.join(fields)


def _read_todo(args: Sequence[str]) -> Task:
    if len(args) != 3:
        raise TaskError("Invalid number of arguments to create a To-do.")
    return Todo(args[2])


def _read_deadline(args: Sequence[str]) -> Task:
    if len(args) != 4:
        raise TaskError("Invalid number of arguments to create a Deadline.")
    return Deadline(args[2], args[3])


def _read_event(args: Sequence[str]) -> Task:
    if len(args) != 5:
        raise TaskError("Invalid number of arguments to create an Event.")
    return Event(args[2], args[3], args[4])


_READERS: dict[TaskKind, Callable[[Sequence[str]], Task]] = {
    TaskKind.TODO: _read_todo,
    TaskKind.DEADLINE: _read_deadline,
    TaskKind.EVENT: _read_event,
}


def _is_task(args: Sequence[str]) -> bool:
    return len(args) >= 3 and args[1] in (TASK_COMPLETE, TASK_INCOMPLETE)


def read_task(line: str) -> Task:
    """
    Rebuild a task from one save-file line.

    Raises TaskError when the line cannot form a task: too few fields, a done
    flag other than "0"/"1", an unknown type tag, a field count that does not
    match the tag, or an empty field.
    """
    # Trailing empty tokens are kept, so "T | 0 | foo | " has 4 fields and is rejected.
    args = line.rstrip("\r\n").split(FIELD_SEPARATOR)

    if not _is_task(args):
        raise TaskError("Arguments cannot be used to construct a valid task.")

    try:
        kind = TaskKind(args[0])
    except ValueError:
        raise TaskError(f"Unknown task type: {args[0]}") from None

    task = _READERS[kind](args)

    if args[1] == TASK_COMPLETE:
        task = task.mark_done()

    return task
