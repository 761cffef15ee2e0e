# src/task_cli/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class TaskStatus(StrEnum):
    """
    Task status.

    Flat set, no enforced transition order: any status may be set at any time.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        """Strict boundary parse: unknown tokens -> None."""
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def from_json(cls, raw: Any) -> TaskStatus:
        status = cls.parse(raw) if isinstance(raw, str) else None
        if status is None:
            # Rewritten as todo on the next save.
            logger.warning("Unknown task status %r; loading as %s.", raw, cls.TODO.value)
            return cls.TODO
        return status


def _parse_ts(raw: Any) -> datetime:
    if isinstance(raw, str) and raw.strip():
        try:
            dt = datetime.fromisoformat(raw)
        except ValueError:
            dt = None
        if dt is not None:
            return dt if dt.tzinfo is not None else dt.astimezone()
    return datetime.fromtimestamp(0).astimezone()


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from one persisted record.

        Lenient on everything except the id: unknown status -> todo,
        unparsable timestamps -> epoch. Raises ValueError if `id` is not an int.
        """
        tid = raw.get("id")
        if not isinstance(tid, int) or isinstance(tid, bool):
            raise ValueError(f"task record has no integer id: {tid!r}")
        return cls(
            id=tid,
            description=str(raw.get("description") or ""),
            status=TaskStatus.from_json(raw.get("status")),
            created_at=_parse_ts(raw.get("createdAt")),
            updated_at=_parse_ts(raw.get("updatedAt")),
        )
