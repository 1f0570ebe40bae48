# src/taskbot/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.commands import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
)
from ..errors import TaskError

CommandFactory = Callable[[str], Command]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Verb registry: turns a raw input line into a typed command (todo, list, bye, ...)."""

    def __init__(self) -> None:
        self._factories: dict[str, CommandFactory] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        factory: CommandFactory,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._factories[key] = factory
        self._help[key] = help_text
        for alias in aliases:
            self._factories[alias.lower()] = factory

    def parse(self, line: str) -> Command:
        """
        Parse a line like "deadline return book /by sunday".
        Raises TaskError for an empty line, unknown verb or bad arguments.
        """
        line = line.strip()
        if not line:
            raise TaskError("Empty command. Type 'help' to list available commands.")

        verb, _, rest = line.partition(" ")
        name = verb.lower()

        factory = self._factories.get(name)
        if not factory:
            raise TaskError(f"Unknown command: {verb}. Type 'help' to list available commands.")

        logger.debug("Parsing command verb=%s", name)
        return factory(rest.strip())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_flag(text: str, flag: str, usage: str) -> tuple[str, str]:
    """Split "head /flag tail" into ("head", "tail"); both parts must be non-empty."""
    parts = re.split(rf"(?:^|\s+)/{flag}(?:\s+|$)", text, maxsplit=1)
    if len(parts) != 2:
        raise TaskError(f"Missing /{flag}. Usage: {usage}")
    head, tail = parts[0].strip(), parts[1].strip()
    if not head or not tail:
        raise TaskError(f"Incomplete command. Usage: {usage}")
    return head, tail


def _parse_task_id(args: str, verb: str) -> int:
    if not args:
        raise TaskError(f"Which task? Usage: {verb} <task number>")
    try:
        return int(args.split()[0])
    except ValueError:
        raise TaskError(f"Task number must be a whole number, got '{args.split()[0]}'.") from None


def make_todo(args: str) -> Command:
    if not args:
        raise TaskError("The description of a todo cannot be empty.")
    return AddTodoCommand(args)


def make_deadline(args: str) -> Command:
    usage = "deadline <description> /by <when>"
    description, by = _split_flag(args, "by", usage)
    return AddDeadlineCommand(description, by)


def make_event(args: str) -> Command:
    usage = "event <description> /from <start> /to <end>"
    description, times = _split_flag(args, "from", usage)
    start, end = _split_flag(times, "to", usage)
    return AddEventCommand(description, start, end)


def make_delete(args: str) -> Command:
    return DeleteCommand(_parse_task_id(args, "delete"))


def make_done(args: str) -> Command:
    return DoneCommand(_parse_task_id(args, "done"))


def make_list(args: str) -> Command:
    return ListCommand()


def make_help(args: str) -> Command:
    return HelpCommand(registry.build_help())


def make_exit(args: str) -> Command:
    return ExitCommand()


registry.register("todo", make_todo, help_text="Add a to-do: todo <description>.")
registry.register("deadline", make_deadline, help_text="Add a deadline: deadline <description> /by <when>.")
registry.register(
    "event", make_event, help_text="Add an event: event <description> /from <start> /to <end>."
)
registry.register("list", make_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("done", make_done, help_text="Mark a task as done: done <task number>.", aliases=["mark"])
registry.register("delete", make_delete, help_text="Delete a task: delete <task number>.", aliases=["rm"])
registry.register("help", make_help, help_text="Show available commands.", aliases=["?"])
registry.register("bye", make_exit, help_text="Save and quit.", aliases=["exit", "quit"])
