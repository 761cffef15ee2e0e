# config.example.py

"""
Documentation-only module (safe to commit).

The configuration is loaded from environment variables (optionally via a local .env file).
Nothing is required; every variable has a default.
"""

ENV_VARS = {
    # Storage
    "TASK_CLI_TASKS_FILE": "Path of the JSON task file (default: tasks.json in the current directory).",
    # Logging
    "TASK_CLI_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASK_CLI_LOG_TO_FILE": "Also write a DEBUG log file (true/false, default: false).",
    "TASK_CLI_LOG_DIR": "Directory of the log file (default: .local/task-cli).",
}
