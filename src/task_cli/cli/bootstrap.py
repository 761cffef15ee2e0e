# src/task_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": settings -> JSON store -> TaskTracker.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.tracker import Clock, TaskTracker
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def create_tracker(*, settings: Settings | None = None, clock: Clock | None = None) -> TaskTracker:
    """
    Build a TaskTracker backed by the JSON file from settings.

    Settings and clock are injectable so tests can avoid global config reads.
    """
    if settings is None:
        settings = get_settings()

    store = JsonTaskStore(settings.tasks_file)
    logger.debug("Using task file %s", store.path)
    return TaskTracker(store, clock=clock)
