"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_store.py: JSON-file-backed storage (load_all/save_all)
"""
