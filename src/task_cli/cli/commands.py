# src/task_cli/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import StrEnum

from ..core.tracker import TaskTracker
from ..errors import InvalidIdError, PersistenceError, TaskNotFoundError, UsageError
from ..tasks.task_models import Task, TaskStatus

PROG = "task-cli"

CommandHandler = Callable[[TaskTracker, list[str]], str]

logger = logging.getLogger(__name__)


class Command(StrEnum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"
    MARK_IN_PROGRESS = "mark-in-progress"
    MARK_DONE = "mark-done"
    LIST = "list"
    HELP = "help"


class CommandRegistry:
    """Maps command-line verbs (add, update, list, ...) to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        self._handlers[str(name)] = handler
        self._help[str(name)] = help_text

    def handle(self, tracker: TaskTracker, argv: list[str]) -> str:
        """
        Handle one invocation: argv is everything after the program name.
        Returns the text to print; user-facing errors are turned into messages here.
        """
        if not argv:
            return f"Usage: {PROG} [command] [arguments]"

        name, args = argv[0], argv[1:]
        handler = self._handlers.get(name)
        if handler is None:
            return f"Unknown command: {name}"

        try:
            return handler(tracker, args)
        except UsageError as e:
            return e.usage
        except TaskNotFoundError as e:
            logger.debug("Task not found id=%s command=%s", e.task_id, name)
            return "Task not found."
        except PersistenceError as e:
            logger.error("Persistence failure in %s: %s", name, e)
            return f"Error saving tasks: {e}"

    def build_help(self) -> str:
        lines = [f"Usage: {PROG} [command] [arguments]", "", "Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_task_id(token: str) -> int:
    # Plain decimal only: int() alone would also take "1_0" or " 7 ".
    if not _ID_RE.fullmatch(token):
        raise InvalidIdError(token)
    return int(token)


def format_ts(dt: datetime) -> str:
    """RFC 3339 at seconds precision; a zero offset is written as "Z"."""
    s = dt.isoformat(timespec="seconds")
    if dt.utcoffset() == timedelta(0):
        s = s[: -len("+00:00")] + "Z"
    return s


def format_task(t: Task) -> str:
    return (
        f"ID: {t.id}\n"
        f"Description: {t.description}\n"
        f"Status: {t.status}\n"
        f"CreatedAt: {format_ts(t.created_at)}\n"
        f"UpdatedAt: {format_ts(t.updated_at)}\n"
    )


def format_tasks(tasks: list[Task]) -> str:
    # Blank line between blocks; print() supplies the one after the last.
    return "\n".join(format_task(t) for t in tasks)


def cmd_add(tracker: TaskTracker, args: list[str]) -> str:
    if not args:
        raise UsageError(f'Usage: {PROG} add "task name"')
    task = tracker.add(" ".join(args))
    return f"Task added successfully (ID: {task.id})"


def cmd_update(tracker: TaskTracker, args: list[str]) -> str:
    if len(args) < 2:
        raise UsageError(f'Usage: {PROG} update [id] "description"')
    task_id = parse_task_id(args[0])
    tracker.update(task_id, " ".join(args[1:]))
    return f"Task updated successfully (ID: {task_id})"


def cmd_delete(tracker: TaskTracker, args: list[str]) -> str:
    if not args:
        raise UsageError(f"Usage: {PROG} delete [id]")
    task_id = parse_task_id(args[0])
    tracker.delete(task_id)
    return f"Task deleted successfully (ID: {task_id})"


def _status_command(command: Command, status: TaskStatus) -> CommandHandler:
    def handler(tracker: TaskTracker, args: list[str]) -> str:
        if not args:
            raise UsageError(f"Usage: {PROG} {command} [id]")
        task_id = parse_task_id(args[0])
        tracker.change_status(task_id, status)
        return f"Task {task_id} marked as {status}."

    handler.__name__ = f"cmd_{command.name.lower()}"
    return handler


cmd_mark_in_progress = _status_command(Command.MARK_IN_PROGRESS, TaskStatus.IN_PROGRESS)
cmd_mark_done = _status_command(Command.MARK_DONE, TaskStatus.DONE)


def cmd_list(tracker: TaskTracker, args: list[str]) -> str:
    """
    list           -> every task, in collection order
    list <status>  -> only tasks with that status (unknown status matches nothing)
    """
    if len(args) == 1:
        token = args[0]
        status = TaskStatus.parse(token)
        tasks = tracker.list_tasks(status) if status is not None else []
        if not tasks:
            return f'No tasks with status "{token}".'
        return format_tasks(tasks)

    tasks = tracker.list_tasks()
    if not tasks:
        return "No tasks."
    return format_tasks(tasks)


def cmd_help(tracker: TaskTracker, args: list[str]) -> str:
    return registry.build_help()


registry.register(Command.ADD, cmd_add, help_text='Add a task: add "description".')
registry.register(Command.UPDATE, cmd_update, help_text='Change a description: update <id> "description".')
registry.register(Command.DELETE, cmd_delete, help_text="Delete a task: delete <id>.")
registry.register(
    Command.MARK_IN_PROGRESS, cmd_mark_in_progress, help_text="Mark a task in progress: mark-in-progress <id>."
)
registry.register(Command.MARK_DONE, cmd_mark_done, help_text="Mark a task done: mark-done <id>.")
registry.register(Command.LIST, cmd_list, help_text="List tasks: list [todo|in-progress|done].")
registry.register(Command.HELP, cmd_help, help_text="Show available commands.")
