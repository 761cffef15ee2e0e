# src/task_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskTracker depends on this Protocol instead of the JSON store,
so tests can swap in an in-memory repository.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection repository: no partial load/save."""

    def load_all(self) -> list[Task]: ...
    def save_all(self, tasks: Iterable[Task]) -> None: ...
