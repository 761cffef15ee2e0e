"""
Command-line task tracker.

Components:
- tasks/: data structures (Task, TaskStatus) and the JSON file store
- core/: repository port and the TaskTracker CRUD logic
- cli/: command registry, composition root and the `task-cli` entrypoint
"""

__version__ = "0.1.0"
