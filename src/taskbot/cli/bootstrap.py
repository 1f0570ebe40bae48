# src/taskbot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the text store and the Ui into AppState,
- loads the saved task list, falling back to an empty one.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleUi
from ..core.ports import Ui
from ..core.state import AppState
from ..errors import TaskError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TextTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # An unusable location surfaces later as a load/save TaskError, not a crash.
    for d in (settings.data_dir, settings.tasks_path.parent):
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create directory %s: %s", d, e)


def create_initial_state(*, settings=None, ui: Ui | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and ui injectable makes the app easier to test.
    If settings is None, falls back to get_settings(); if ui is None, uses ConsoleUi.
    A save file that cannot be read is not fatal: the session starts empty.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if ui is None:
        ui = ConsoleUi(app_name=str(getattr(settings, "app_name", "taskbot")))

    storage = TextTaskStore(settings.tasks_path, atomic=getattr(settings, "atomic_save", True))

    try:
        tasks = TaskList(storage.load())
    except TaskError as e:
        logger.warning("No saved tasks loaded (%s); starting empty.", e.message)
        ui.show_loading_error(e.message)
        tasks = TaskList()

    return AppState(settings=settings, storage=storage, ui=ui, tasks=tasks)
