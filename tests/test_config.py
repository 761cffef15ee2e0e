# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_cli.config import DEFAULT_LOG_DIR, DEFAULT_TASKS_FILE, Settings
from task_cli.logging_setup import level_from_name

_VARS = ("TASK_CLI_TASKS_FILE", "TASK_CLI_LOG_LEVEL", "TASK_CLI_LOG_DIR", "TASK_CLI_LOG_TO_FILE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.tasks_file == DEFAULT_TASKS_FILE
    assert s.log_level == "WARNING"
    assert s.log_dir == DEFAULT_LOG_DIR
    assert s.log_to_file is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_FILE", str(tmp_path / "t.json"))
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_CLI_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TASK_CLI_LOG_TO_FILE", "yes")

    s = Settings.from_env()

    assert s.tasks_file == tmp_path / "t.json"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path / "logs"
    assert s.log_to_file is True


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_CLI_TASKS_FILE", "  ")
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "")
    monkeypatch.setenv("TASK_CLI_LOG_TO_FILE", "")
    s = Settings.from_env()
    assert s.tasks_file == DEFAULT_TASKS_FILE
    assert s.log_level == "WARNING"
    assert s.log_to_file is False


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("ERROR") == logging.ERROR
    assert level_from_name("chatty") == logging.WARNING
