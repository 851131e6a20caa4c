# src/task_manager/tasks/validation.py

"""
Input rules for new tasks.

Each validator either returns the cleaned value or raises TaskValidationError
with a message that can be shown to the user as-is.
"""

from __future__ import annotations

from datetime import datetime

from .task_models import PRIORITY_MAX, PRIORITY_MIN

DUE_DATE_FORMAT = "%m/%d/%Y"


class TaskValidationError(ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def validate_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise TaskValidationError("title", "Title cannot be empty.")
    return cleaned


def parse_priority(raw: str | int) -> int:
    if isinstance(raw, bool):
        raise TaskValidationError("priority", "Please enter a valid number.")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise TaskValidationError("priority", "Please enter a valid number.") from None
    return validate_priority(value)


def validate_priority(priority: int) -> int:
    if priority < PRIORITY_MIN or priority > PRIORITY_MAX:
        raise TaskValidationError(
            "priority", f"Priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}."
        )
    return priority


def validate_due_date(due_date: str) -> str:
    """
    Accept MM/DD/YYYY only when it names a real calendar date.

    strptime rejects 02/30, 04/31, 13/01 and non-leap 02/29.
    """
    cleaned = (due_date or "").strip()
    try:
        datetime.strptime(cleaned, DUE_DATE_FORMAT)
    except ValueError:
        raise TaskValidationError(
            "due_date", "Invalid date format. Please use MM/DD/YYYY format."
        ) from None
    return cleaned


def parse_task_id(raw: str) -> int:
    try:
        return int((raw or "").strip())
    except ValueError:
        raise TaskValidationError("id", "Invalid ID. Please enter a number.") from None
