# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMAN_APP_NAME": "App display name shown in the menu header (default: Task Manager).",
    "TASKMAN_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKMAN_LOG_TO_FILE": "Write a full DEBUG log to <data_dir>/task_manager.log (true/false).",
    # Paths
    "TASKMAN_DATA_DIR": "Local data directory (default: .local/task_manager).",
    "TASKMAN_DATA_FILE": "Pipe-delimited task file (default: tasks.txt).",
}
