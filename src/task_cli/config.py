# src/task_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required: every value has a default.
- Bad values fall back to defaults instead of failing the command.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"

DEFAULT_TASKS_FILE = Path("tasks.json")
DEFAULT_LOG_DIR = Path(".local/task-cli")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    tasks_file: Path

    # ---- Logging ----
    log_level: str
    log_dir: Path
    log_to_file: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_file=_env_path(_k("TASKS_FILE"), DEFAULT_TASKS_FILE),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings; reads .env (without overriding real env) on first call."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
