# src/taskbot/core/session.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as default_registry
from ..errors import TaskError, UnsavedChangesError
from .state import AppState

logger = logging.getLogger(__name__)


def handle_line(
    state: AppState,
    line: str,
    registry: CommandRegistry | None = None,
) -> bool:
    """
    Parse and execute one user line against `state`.

    The list returned by the command replaces state.tasks. Errors are reported
    through state.ui and never escape, so the caller can keep reading input.
    Returns True when the command asks the session to end.
    """
    registry = registry or default_registry

    try:
        command = registry.parse(line)
        state.tasks = command.execute(state.tasks, state.ui, state.storage)
        return command.is_exit
    except UnsavedChangesError as e:
        # The change happened; only the save failed. Keep working with it.
        state.tasks = e.tasks
        logger.warning("Command applied but not saved: %s", e.message)
        state.ui.show_error(e.message)
    except TaskError as e:
        logger.debug("Command rejected: %s", e.message)
        state.ui.show_error(e.message)
    except Exception:
        logger.exception("Command handler crashed.")
        state.ui.show_error("Internal error while handling a command.")

    return False
