# src/task_cli/errors.py

from __future__ import annotations


class TaskCliError(Exception):
    """Base class for every error the tracker reports to the user."""


class UsageError(TaskCliError):
    """Too few arguments for a command."""

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


class InvalidIdError(UsageError):
    def __init__(self, token: str) -> None:
        super().__init__("Invalid ID")
        self.token = token


class TaskNotFoundError(TaskCliError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task not found: id={task_id}")
        self.task_id = task_id


class PersistenceError(TaskCliError):
    """Writing the task file failed (I/O or serialization)."""
