# tests/fakes.py

from __future__ import annotations

import copy
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from task_cli.errors import PersistenceError
from task_cli.tasks.task_models import Task


class InMemoryTaskRepo:
    """
    In-memory TaskRepo used for tracker unit tests.

    Stores deep copies so nothing the tracker mutates leaks in without save_all(),
    and counts saves for "no write happened" assertions.
    """

    def __init__(self, tasks: list[Task] | None = None, *, fail_on_save: bool = False) -> None:
        self.tasks: list[Task] = copy.deepcopy(tasks or [])
        self.saves = 0
        self.fail_on_save = fail_on_save

    def load_all(self) -> list[Task]:
        return copy.deepcopy(self.tasks)

    def save_all(self, tasks: Iterable[Task]) -> None:
        if self.fail_on_save:
            raise PersistenceError("disk full")
        self.tasks = copy.deepcopy(list(tasks))
        self.saves += 1


class FakeClock:
    """Deterministic clock: every call advances by `step`."""

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current
