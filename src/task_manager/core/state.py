# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings-like object (config.Settings or a test SimpleNamespace).
    settings: object
    task_store: TaskStore

    # Cleared by the save-and-exit command; the console loop stops on False.
    running: bool = True
