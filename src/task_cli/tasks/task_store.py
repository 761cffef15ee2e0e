# src/task_cli/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import PersistenceError
from .task_models import Task

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    JSON file task store.

    The whole collection lives in one file as a pretty-printed array:
    - load_all() reads everything (missing/corrupt file -> empty collection)
    - save_all() rewrites everything (temp file + os.replace)

    No locking: two concurrent invocations race, last writer wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- public API ----

    def load_all(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("Task file %s does not exist; starting empty.", self._path)
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Failed to read task file %s; treating as empty.", self._path, exc_info=True)
            return []

        if not isinstance(data, list):
            logger.warning("Task file %s does not hold a JSON array; treating as empty.", self._path)
            return []

        tasks: list[Task] = []
        for i, raw in enumerate(data):
            if not isinstance(raw, dict):
                logger.warning("Skipping task record #%d: not an object.", i)
                continue
            try:
                tasks.append(Task.from_json(raw))
            except ValueError as e:
                logger.warning("Skipping task record #%d: %s", i, e)

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> None:
        try:
            payload = json.dumps([t.to_json() for t in tasks], ensure_ascii=False, indent=2).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"cannot serialize tasks: {e}") from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(payload)
            os.replace(tmp, self._path)
        except (OSError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceError(f"cannot write {self._path}: {e}") from e

        logger.debug("Saved tasks to %s", self._path)
