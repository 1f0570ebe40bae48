# tests/test_task_store.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskbot.errors import TaskError
from taskbot.tasks.task_models import Deadline, Event, Todo
from taskbot.tasks.task_store import TextTaskStore


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "data" / "tasks.txt"
    store = TextTaskStore(path)
    tasks = [
        Todo("read book").mark_done(),
        Deadline("submit report", "2024-01-01"),
        Event("party", "7pm", "9pm"),
    ]

    store.save(tasks)

    assert path.read_text("utf-8") == (
        "T | 1 | read book\n"
        "D | 0 | submit report | 2024-01-01\n"
        "E | 0 | party | 7pm | 9pm\n"
    )
    assert store.load() == tasks
    assert not path.with_name("tasks.txt.tmp").exists()


def test_save_rewrites_whole_file(tmp_path: Path) -> None:
    store = TextTaskStore(tmp_path / "tasks.txt")
    store.save([Todo("a"), Todo("b"), Todo("c")])
    store.save([Todo("b")])

    assert store.load() == [Todo("b")]


def test_load_skips_corrupt_lines(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | good one\nT | 2 | foo\n\nZ | 0 | bar\nD | 1 | report\n", "utf-8")
    store = TextTaskStore(path)

    with caplog.at_level(logging.WARNING, logger="taskbot.tasks.task_store"):
        tasks = store.load()

    assert tasks == [Todo("good one")]
    assert sum("Skipping corrupt line" in r.getMessage() for r in caplog.records) == 3


def test_load_missing_file_raises(tmp_path: Path) -> None:
    store = TextTaskStore(tmp_path / "nope" / "tasks.txt")
    with pytest.raises(TaskError) as excinfo:
        store.load()
    assert "Could not read" in excinfo.value.message


def test_load_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("", "utf-8")
    assert TextTaskStore(path).load() == []


@pytest.mark.parametrize("atomic", [True, False])
def test_save_to_unwritable_target_raises(tmp_path: Path, atomic: bool) -> None:
    # A directory in place of the file cannot be opened or replaced for writing.
    target = tmp_path / "tasks.txt"
    target.mkdir()
    store = TextTaskStore(target, atomic=atomic)

    with pytest.raises(TaskError) as excinfo:
        store.save([Todo("a")])

    assert "Could not write" in excinfo.value.message
    assert not tmp_path.joinpath("tasks.txt.tmp").exists()


def test_non_atomic_save_round_trips(tmp_path: Path) -> None:
    store = TextTaskStore(tmp_path / "tasks.txt", atomic=False)
    store.save([Deadline("x", "y").mark_done()])
    assert store.load() == [Deadline("x", "y", is_done=True)]


def test_load_skips_line_with_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | keep me\nT | 0 | bad \xff byte\nT | 1 | keep too\n")

    assert TextTaskStore(path).load() == [Todo("keep me"), Todo("keep too", is_done=True)]
