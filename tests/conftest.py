# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_cli.config import Settings
from task_cli.core.tracker import TaskTracker

from .fakes import FakeClock, InMemoryTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a tmp task file.

    Built directly rather than via get_settings(), to keep tests isolated
    from the developer's environment and .env.
    """
    return Settings(
        tasks_file=tmp_path / "tasks.json",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_to_file=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo()


@pytest.fixture()
def tracker(repo: InMemoryTaskRepo, clock: FakeClock) -> TaskTracker:
    return TaskTracker(repo, clock=clock)
