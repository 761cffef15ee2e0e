# src/task_cli/core/tracker.py

"""
Task tracker core.

Every operation is a stateless transaction against the repository:
load the whole collection, apply at most one mutation, save the whole
collection if (and only if) something changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from ..errors import TaskNotFoundError
from ..tasks.task_models import Task, TaskStatus
from .ports import TaskRepo

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _now() -> datetime:
    return datetime.now().astimezone()


def next_task_id(tasks: list[Task]) -> int:
    return max((t.id for t in tasks), default=0) + 1


def _find_index(tasks: list[Task], task_id: int) -> int:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    raise TaskNotFoundError(task_id)


class TaskTracker:
    def __init__(self, repo: TaskRepo, *, clock: Clock | None = None) -> None:
        self._repo = repo
        self._clock = clock or _now

    def _touch(self, task: Task) -> None:
        now = self._clock()
        # updated_at must strictly increase even with a coarse clock.
        if now <= task.updated_at:
            now = task.updated_at + timedelta(microseconds=1)
        task.updated_at = now

    def add(self, description: str) -> Task:
        tasks = self._repo.load_all()
        now = self._clock()
        task = Task(
            id=next_task_id(tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self._repo.save_all(tasks)
        logger.info("Task added id=%s", task.id)
        return task

    def update(self, task_id: int, description: str) -> Task:
        tasks = self._repo.load_all()
        task = tasks[_find_index(tasks, task_id)]
        task.description = description
        self._touch(task)
        self._repo.save_all(tasks)
        logger.info("Task updated id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        tasks = self._repo.load_all()
        task = tasks.pop(_find_index(tasks, task_id))
        self._repo.save_all(tasks)
        logger.info("Task deleted id=%s", task_id)
        return task

    def change_status(self, task_id: int, status: TaskStatus) -> Task:
        tasks = self._repo.load_all()
        task = tasks[_find_index(tasks, task_id)]
        task.status = status
        self._touch(task)
        self._repo.save_all(tasks)
        logger.info("Task status changed id=%s status=%s", task_id, status.value)
        return task

    def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        tasks = self._repo.load_all()
        if status is None:
            return tasks
        return [t for t in tasks if t.status == status]
