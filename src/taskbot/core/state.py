# src/taskbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskStorage, Ui


@dataclass
class AppState:
    # Settings object (config.Settings or a test SimpleNamespace).
    settings: object

    storage: TaskStorage
    ui: Ui

    # Latest list produced by a command; replaced, never mutated.
    tasks: TaskList = field(default_factory=TaskList)
