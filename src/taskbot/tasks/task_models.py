# src/taskbot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import ClassVar, TypeAlias

from ..errors import TaskError

FIELD_SEPARATOR = " | "

DONE_ICON = "✓"
NOT_DONE_ICON = "✘"


class TaskKind(StrEnum):
    """One-character type tag used in the save file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _check_field(name: str, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise TaskError(f"The {name} of a task cannot be empty.")
    # A leading "| " or trailing " |" merges with the neighbouring separator on disk.
    bar = FIELD_SEPARATOR.strip()
    if FIELD_SEPARATOR in value or value.startswith(bar + " ") or value.endswith(" " + bar):
        raise TaskError(f"The {name} cannot contain '{bar}' next to a space.")
    if "\n" in value or "\r" in value:
        raise TaskError(f"The {name} must fit on a single line.")


@dataclass(frozen=True, slots=True)
class Todo:
    description: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.TODO

    def __post_init__(self) -> None:
        _check_field("description", self.description)

    def extras(self) -> tuple[str, ...]:
        return ()

    def mark_done(self) -> Todo:
        return replace(self, is_done=True)

    def serialize(self) -> str:
        from .task_codec import encode_task

        return encode_task(self)

    def status_icon(self) -> str:
        return DONE_ICON if self.is_done else NOT_DONE_ICON

    def __str__(self) -> str:
        return f"[{self.kind}][{self.status_icon()}] {self.description}"


@dataclass(frozen=True, slots=True)
class Deadline:
    description: str
    by: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def __post_init__(self) -> None:
        _check_field("description", self.description)
        _check_field("deadline", self.by)

    def extras(self) -> tuple[str, ...]:
        return (self.by,)

    def mark_done(self) -> Deadline:
        return replace(self, is_done=True)

    def serialize(self) -> str:
        from .task_codec import encode_task

        return encode_task(self)

    def status_icon(self) -> str:
        return DONE_ICON if self.is_done else NOT_DONE_ICON

    def __str__(self) -> str:
        return f"[{self.kind}][{self.status_icon()}] {self.description} (by: {self.by})"


@dataclass(frozen=True, slots=True)
class Event:
    description: str
    start: str
    end: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __post_init__(self) -> None:
        _check_field("description", self.description)
        _check_field("start time", self.start)
        _check_field("end time", self.end)

    def extras(self) -> tuple[str, ...]:
        return (self.start, self.end)

    def mark_done(self) -> Event:
        return replace(self, is_done=True)

    def serialize(self) -> str:
        from .task_codec import encode_task

        return encode_task(self)

    def status_icon(self) -> str:
        return DONE_ICON if self.is_done else NOT_DONE_ICON

    def __str__(self) -> str:
        return (
            f"[{self.kind}][{self.status_icon()}] {self.description} "
            f"(from: {self.start} to: {self.end})"
        )


Task: TypeAlias = Todo | Deadline | Event
