# src/taskbot/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import TaskError
from .task_codec import encode_task, read_task
from .task_models import Task

logger = logging.getLogger(__name__)


class TextTaskStore:
    """
    Flat text save file, one encoded task per line.

    Every save rewrites the whole file. With atomic=True the new content goes
    to a sibling ".tmp" file first and is moved over the target with
    os.replace, so a crash mid-write leaves the previous file intact.
    With atomic=False the target is truncated and rewritten in place.
    """

    def __init__(self, path: str | Path = "data/tasks.txt", *, atomic: bool = True) -> None:
        self._path = Path(path)
        self._atomic = atomic
        with contextlib.suppress(OSError):
            self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("TextTaskStore ready path=%s atomic=%s", self._path, atomic)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read every task from the save file.

        Lines that cannot be decoded are logged and skipped; they never abort
        the load. Raises TaskError if the file cannot be opened or read.
        """
        tasks: list[Task] = []
        skipped = 0
        try:
            # Bytes in, decoded per line: invalid UTF-8 only costs its own line.
            with self._path.open("rb") as f:
                for lineno, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8")
                        if not line.strip():
                            continue
                        tasks.append(read_task(line))
                    except UnicodeDecodeError as e:
                        skipped += 1
                        logger.warning(
                            "Skipping undecodable line %s:%d: %s", self._path.name, lineno, e
                        )
                    except TaskError as e:
                        skipped += 1
                        logger.warning(
                            "Skipping corrupt line %s:%d: %s", self._path.name, lineno, e.message
                        )
        except OSError as e:
            logger.debug("Load failed path=%s: %s", self._path, e)
            raise TaskError(f"Could not read from file: {self._path}") from e

        logger.info("Loaded %d task(s) from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrite the save file with `tasks` in order. Raises TaskError on I/O failure."""
        lines = [encode_task(t) + "\n" for t in tasks]
        text = "".join(lines)

        try:
            if self._atomic:
                tmp = self._path.with_name(self._path.name + ".tmp")
                try:
                    with tmp.open("w", encoding="utf-8", newline="\n") as f:
                        f.write(text)
                    os.replace(tmp, self._path)
                except OSError:
                    with contextlib.suppress(OSError):
                        tmp.unlink()
                    raise
            else:
                with self._path.open("w", encoding="utf-8", newline="\n") as f:
                    f.write(text)
        except OSError as e:
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            raise TaskError(f"Could not write to file: {self._path}") from e

        logger.debug("Saved %d task(s) to %s", len(lines), self._path)
