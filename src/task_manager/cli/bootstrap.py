# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the task file's directory exists,
- builds the TaskStore bound to the configured file and loads it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import LoadReport
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    # data_dir only holds the log file, which setup_logging creates when enabled.
    Path(settings.data_file).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> tuple[AppState, LoadReport]:
    """
    Create AppState from the provided settings and load the task file.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.data_file)
    report = store.load_from_file()

    state = AppState(settings=settings, task_store=store)
    return state, report


def describe_load(report: LoadReport) -> list[str]:
    """User-facing lines summarising a load (empty for a missing file)."""
    lines = [f"Error parsing task: {s.line}" for s in report.skipped]
    if report.error is not None:
        lines.append(f"Error reading from file: {report.error}")
    elif not report.missing:
        lines.append(f"Loaded {report.loaded} tasks from file.")
    return lines
