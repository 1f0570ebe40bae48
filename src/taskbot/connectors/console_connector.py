# src/taskbot/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

from ..core.session import handle_line
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except OSError:
        print(line)


def _count_text(count: int) -> str:
    return f"Now you have {count} task{'' if count == 1 else 's'} in the list."


class ConsoleUi:
    """Ui port that prints timestamped lines to a text stream (stdout by default)."""

    def __init__(self, app_name: str = "taskbot", out: TextIO | None = None) -> None:
        self.app_name = app_name
        self._out = out

    def _print_ts_block(self, text: str) -> None:
        ts = _ts_local()
        lines = text.splitlines() or [""]
        for i, line in enumerate(lines):
            # keep alignment for multi-line output
            prefix = f"[{ts}] " if i == 0 else " " * (len(ts) + 3)
            print(prefix + line, file=self._out or sys.stdout)

    def show_welcome(self) -> None:
        self._print_ts_block(
            f"Hello! I'm {self.app_name}. What can I do for you?\n"
            "Type 'help' for commands, 'bye' to quit."
        )

    def show_loading_error(self, message: str) -> None:
        self._print_ts_block(f"[WARN] {message}\nStarting with an empty task list.")

    def show_added(self, task: Task, count: int) -> None:
        self._print_ts_block(f"Got it. I've added this task:\n  {task}\n{_count_text(count)}")

    def show_deleted(self, task: Task, count: int) -> None:
        self._print_ts_block(f"Noted. I've removed this task:\n  {task}\n{_count_text(count)}")

    def show_done(self, task: Task) -> None:
        self._print_ts_block(f"Nice! I've marked this task as done:\n  {task}")

    def show_tasks(self, tasks: TaskList) -> None:
        if not tasks.size():
            self._print_ts_block("Your task list is empty.")
            return
        lines = ["Here are the tasks in your list:"]
        for i, task in enumerate(tasks, start=1):
            lines.append(f"{i}. {task}")
        self._print_ts_block("\n".join(lines))

    def show_message(self, text: str) -> None:
        self._print_ts_block(text)

    def show_error(self, message: str) -> None:
        self._print_ts_block(f"[ERROR] {message}")

    def show_goodbye(self) -> None:
        self._print_ts_block("Bye. Hope to see you again soon!")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    state.ui.show_welcome()

    while True:
        try:
            user_input = input(">>> You: ").strip()
            _rewrite_prev_line(f"[{_ts_local()}] >>> You: {user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if handle_line(state, user_input):
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
