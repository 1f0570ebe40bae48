# tests/test_task_codec.py

from __future__ import annotations

import pytest

from taskbot.errors import TaskError
from taskbot.tasks.task_codec import encode_task, read_task
from taskbot.tasks.task_models import Deadline, Event, Todo


def test_encode_each_variant() -> None:
    assert encode_task(Todo("read book")) == "T | 0 | read book"
    assert encode_task(Todo("read book").mark_done()) == "T | 1 | read book"
    assert encode_task(Deadline("submit report", "2024-01-01")) == (
        "D | 0 | submit report | 2024-01-01"
    )
    assert encode_task(Event("party", "7pm", "9pm").mark_done()) == "E | 1 | party | 7pm | 9pm"


def test_serialize_delegates_to_codec() -> None:
    task = Deadline("submit report", "2024-01-01")
    assert task.serialize() == encode_task(task)


def test_read_each_variant() -> None:
    assert read_task("T | 0 | read book") == Todo("read book")
    assert read_task("D | 1 | submit report | 2024-01-01") == Deadline(
        "submit report", "2024-01-01", is_done=True
    )
    assert read_task("E | 0 | party | 7pm | 9pm\n") == Event("party", "7pm", "9pm")


def test_read_strips_windows_line_ending() -> None:
    assert read_task("T | 1 | read book\r\n") == Todo("read book", is_done=True)


@pytest.mark.parametrize(
    "task",
    [
        Todo("read book"),
        Todo("read book").mark_done(),
        Deadline("submit report", "2024-01-01"),
        Event("conference", "2024-03-01 09:00", "2024-03-03 18:00").mark_done(),
    ],
)
def test_round_trip_preserves_task_and_done_flag(task) -> None:
    back = read_task(encode_task(task))
    assert back == task
    assert back.is_done == task.is_done


@pytest.mark.parametrize(
    "line,fragment",
    [
        ("", "valid task"),
        ("T | 0", "valid task"),
        ("T | 2 | foo", "valid task"),
        ("T | yes | foo", "valid task"),
        ("X | 0 | foo", "Unknown task type"),
        ("T | 0 | foo | extra", "To-do"),
        ("D | 0 | report", "Deadline"),
        ("D | 0 | report | mon | tue", "Deadline"),
        ("E | 0 | party | 7pm", "Event"),
        ("T|0|foo", "valid task"),
        ("T | 0 |  ", "empty"),
    ],
)
def test_malformed_lines_raise_task_error(line: str, fragment: str) -> None:
    with pytest.raises(TaskError) as excinfo:
        read_task(line)
    assert fragment in excinfo.value.message


@pytest.mark.parametrize(
    "task",
    [
        Todo("|"),
        Todo("a|b"),
        Todo("a || b"),
        Deadline("x|", "|y"),
        Deadline("|", "|"),
        Event("x", "|", "|"),
        Event("a ||", "|| b", "c"),
    ],
)
def test_round_trip_with_bars_near_separator(task) -> None:
    assert read_task(encode_task(task)) == task


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Deadline("x |", "y"),
        lambda: Deadline("x", "| y"),
        lambda: Event("party", "7pm |", "9pm"),
        lambda: Event("party", "7pm", "| 9pm"),
        lambda: Todo("| leading"),
    ],
)
def test_bar_touching_a_space_at_field_edge_is_rejected(factory) -> None:
    with pytest.raises(TaskError):
        factory()


def test_trailing_separator_is_rejected() -> None:
    # "T | 0 | foo | " splits into four fields; a To-do needs exactly three.
    with pytest.raises(TaskError) as excinfo:
        read_task("T | 0 | foo | ")
    assert "To-do" in excinfo.value.message
