# src/task_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

PRIORITY_MIN = 1
PRIORITY_MAX = 5

PRIORITY_LABELS: dict[int, str] = {
    1: "Very Low",
    2: "Low",
    3: "Medium",
    4: "High",
    5: "Very High",
}


def priority_label(priority: int) -> str:
    return PRIORITY_LABELS.get(priority, "Unknown")


class TaskFilter(StrEnum):
    """Which tasks a listing should include."""

    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.INCOMPLETE:
            return not task.completed
        return True


class CompleteOutcome(StrEnum):
    COMPLETED = "completed"
    ALREADY_COMPLETE = "already_complete"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - priority is validated by TaskStore.add_task, not here
    - completed only ever goes False -> True (see mark_complete)
    """

    id: int
    title: str
    description: str
    priority: int
    due_date: str
    completed: bool = False

    def mark_complete(self) -> None:
        self.completed = True

    @property
    def priority_text(self) -> str:
        return priority_label(self.priority)

    @property
    def status_text(self) -> str:
        return "Completed" if self.completed else "Not Completed"

    def render(self) -> str:
        return (
            f"ID: {self.id}\n"
            f"Title: {self.title}\n"
            f"Description: {self.description}\n"
            f"Priority: {self.priority} ({self.priority_text})\n"
            f"Due Date: {self.due_date}\n"
            f"Status: {self.status_text}"
        )


@dataclass(frozen=True, slots=True)
class TaskListing:
    """Result of TaskStore.list_tasks."""

    filter: TaskFilter
    tasks: list[Task] = field(default_factory=list)
    # True when the store had no tasks at all (before filtering).
    store_empty: bool = False

    @property
    def ids(self) -> list[int]:
        return [t.id for t in self.tasks]

    def rendered(self) -> list[str]:
        return [t.render() for t in self.tasks]

    def empty_message(self) -> str | None:
        if self.store_empty:
            return "No tasks found."
        if not self.tasks:
            return f"No {self.filter.value} tasks found."
        return None


@dataclass(frozen=True, slots=True)
class SkippedLine:
    line_no: int
    line: str
    reason: str


@dataclass(frozen=True, slots=True)
class LoadReport:
    path: str
    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)
    missing: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class SaveReport:
    path: str
    saved: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
