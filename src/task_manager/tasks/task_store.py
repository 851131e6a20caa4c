# src/task_manager/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .task_models import (
    CompleteOutcome,
    LoadReport,
    SaveReport,
    SkippedLine,
    Task,
    TaskFilter,
    TaskListing,
)
from .validation import parse_priority, validate_due_date, validate_title

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
FIELD_COUNT = 6


def serialize_task(task: Task) -> str:
    """
    One task -> one line (no trailing newline).

    Fields are not escaped: a "|" inside title/description/due date will
    split into extra fields when the file is read back.
    """
    return FIELD_SEP.join(
        (
            str(task.id),
            task.title,
            task.description,
            str(task.priority),
            task.due_date,
            "true" if task.completed else "false",
        )
    )


def parse_task_line(line: str) -> Task:
    """
    Parse one stored line.

    Raises ValueError with a human-readable reason if the line is malformed.
    Priority and due date are taken as stored (no range / calendar check).
    """
    raw_parts = line.split(FIELD_SEP)
    # Trailing empty fields are dropped before counting ("...|true|" is 6 fields).
    while raw_parts and raw_parts[-1] == "":
        raw_parts.pop()
    parts = [p.strip() for p in raw_parts]
    if len(parts) != FIELD_COUNT:
        raise ValueError(f"expected {FIELD_COUNT} fields, got {len(parts)}")

    raw_id, title, description, raw_priority, due_date, raw_completed = parts
    try:
        task_id = int(raw_id)
    except ValueError:
        raise ValueError(f"id is not an integer: {raw_id!r}") from None
    try:
        priority = int(raw_priority)
    except ValueError:
        raise ValueError(f"priority is not an integer: {raw_priority!r}") from None

    return Task(
        id=task_id,
        title=title,
        description=description,
        priority=priority,
        due_date=due_date,
        completed=raw_completed.lower() == "true",
    )


class TaskStore:
    """
    In-memory task list backed by a pipe-delimited text file.

    - tasks keep insertion order; delete removes one entry in place
    - ids come from a high-water mark, so a deleted id is not handed out
      again during the same session
    - nothing is written to disk until save_to_file() is called
    """

    def __init__(self, path: str | Path = "tasks.txt", tasks: Iterable[Task] | None = None) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []
        self._max_issued_id = 0
        for task in tasks or ():
            self._append(task)

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(list(self._tasks))

    # ---- low-level helpers ----

    def _append(self, task: Task) -> None:
        self._tasks.append(task)
        self._max_issued_id = max(self._max_issued_id, task.id)

    def _find(self, task_id: int) -> tuple[int, Task] | None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx, task
        return None

    def next_id(self) -> int:
        current_max = max((t.id for t in self._tasks), default=0)
        return max(current_max, self._max_issued_id) + 1

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        found = self._find(task_id)
        return found[1] if found else None

    def add_task(self, title: str, description: str, priority: int | str, due_date: str) -> int:
        """
        Validate and append a new task, returning its id.

        Raises TaskValidationError (store untouched) on empty title,
        priority outside 1..5 or a due date that is not a real MM/DD/YYYY date.
        """
        clean_title = validate_title(title)
        clean_priority = parse_priority(priority)
        clean_due = validate_due_date(due_date)

        task_id = self.next_id()
        self._append(
            Task(
                id=task_id,
                title=clean_title,
                description=(description or "").strip(),
                priority=clean_priority,
                due_date=clean_due,
            )
        )
        logger.debug("Task added id=%s priority=%s due=%s", task_id, clean_priority, clean_due)
        return task_id

    def list_tasks(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> TaskListing:
        flt = TaskFilter(task_filter)
        if not self._tasks:
            return TaskListing(filter=flt, tasks=[], store_empty=True)
        return TaskListing(filter=flt, tasks=[t for t in self._tasks if flt.matches(t)])

    def complete_task(self, task_id: int) -> CompleteOutcome:
        found = self._find(task_id)
        if found is None:
            logger.debug("complete: task id=%s not found", task_id)
            return CompleteOutcome.NOT_FOUND

        _, task = found
        if task.completed:
            return CompleteOutcome.ALREADY_COMPLETE

        task.mark_complete()
        logger.debug("Task completed id=%s", task_id)
        return CompleteOutcome.COMPLETED

    def delete_task(self, task_id: int) -> bool:
        found = self._find(task_id)
        if found is None:
            logger.debug("delete: task id=%s not found", task_id)
            return False

        idx, _ = found
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        return True

    # ---- persistence ----

    def load_from_file(self, path: str | Path | None = None) -> LoadReport:
        """
        Replace the in-memory list with the file contents.

        Missing file -> empty store. Malformed lines (and repeated ids) are
        skipped and reported; everything else is kept. On an I/O error the
        store keeps what it had before the call.
        """
        target = Path(path) if path is not None else self._path
        if not target.exists():
            logger.info("No task file at %s; starting with an empty list.", target)
            self._tasks = []
            self._max_issued_id = 0
            return LoadReport(path=str(target), missing=True)

        try:
            data = target.read_bytes()
        except OSError as e:
            logger.error("Error reading from file %s: %s", target, e)
            return LoadReport(path=str(target), error=str(e))

        loaded: list[Task] = []
        seen: set[int] = set()
        skipped: list[SkippedLine] = []

        # \n, \r\n and \r all end a line; each line is decoded on its own.
        raw_lines = data.replace(b"\r\n", b"\n").replace(b"\r", b"\n").split(b"\n")
        for line_no, raw in enumerate(raw_lines, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                shown = raw.decode("utf-8", errors="replace")
                reason = f"not valid UTF-8 at byte {e.start}"
                skipped.append(SkippedLine(line_no=line_no, line=shown, reason=reason))
                logger.warning("Error parsing task (line %d, %s): %s", line_no, reason, shown)
                continue

            if not line.strip():
                continue
            try:
                task = parse_task_line(line)
            except ValueError as e:
                skipped.append(SkippedLine(line_no=line_no, line=line, reason=str(e)))
                logger.warning("Error parsing task (line %d, %s): %s", line_no, e, line)
                continue

            if task.id in seen:
                reason = f"duplicate id {task.id}"
                skipped.append(SkippedLine(line_no=line_no, line=line, reason=reason))
                logger.warning("Error parsing task (line %d, %s): %s", line_no, reason, line)
                continue

            seen.add(task.id)
            loaded.append(task)

        self._tasks = []
        self._max_issued_id = 0
        for task in loaded:
            self._append(task)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(loaded), target, len(skipped))
        return LoadReport(path=str(target), loaded=len(loaded), skipped=skipped)

    def save_to_file(self, path: str | Path | None = None) -> SaveReport:
        """Overwrite the file with the current list. Not atomic."""
        target = Path(path) if path is not None else self._path
        lines = [serialize_task(t) + "\n" for t in self._tasks]
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
        except OSError as e:
            logger.error("Error saving to file %s: %s", target, e)
            return SaveReport(path=str(target), error=str(e))

        logger.info("Saved %d tasks to %s", len(lines), target)
        return SaveReport(path=str(target), saved=len(lines))
