# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbot.core.state import AppState
from taskbot.tasks.task_list import TaskList
from taskbot.tasks.task_store import TextTaskStore

from .fakes import FakeUi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and .env files.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskbot-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        atomic_save=True,
    )


@pytest.fixture()
def ui() -> FakeUi:
    return FakeUi()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TextTaskStore:
    return TextTaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TextTaskStore, ui: FakeUi) -> AppState:
    """
    AppState wired with a recording Ui.

    NOTE: the real text store is kept here because what ends up on disk is
    part of what we want to test.
    """
    return AppState(settings=settings, storage=store, ui=ui, tasks=TaskList())
