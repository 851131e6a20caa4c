# src/task_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import CompleteOutcome, TaskFilter
from ..tasks.validation import (
    TaskValidationError,
    parse_priority,
    parse_task_id,
    validate_due_date,
    validate_title,
)

Ask = Callable[[str], str]
CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, Ask, CommandEmitter], str | None]

logger = logging.getLogger(__name__)

TASK_SEPARATOR = "-----------------------"


class CommandRegistry:
    """Menu registry used by the console connector (1..7, or by name)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._order: list[str] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        if key not in self._help:
            self._order.append(key)
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        ask: Ask,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a menu choice such as "1" or "add".
        Returns the reply text (None when the handler printed everything itself).
        """
        choice = line.strip().lower()
        handler = self._handlers.get(choice)
        if not handler:
            return "Invalid choice. Please try again."

        return handler(state, ask, emit or (lambda _text: None))

    def build_menu(self, title: str = "Task Manager") -> str:
        lines = [f"\n===== {title} ====="]
        for i, name in enumerate(self._order, start=1):
            lines.append(f"{i}. {self._help[name]}")
        lines.append("=======================")
        return "\n".join(lines)

    def choice_prompt(self) -> str:
        return f"Enter your choice (1-{len(self._order)}): "


registry = CommandRegistry()


def _ask_until_valid(ask: Ask, emit: CommandEmitter, prompt: str, parse: Callable[[str], object]):
    """Re-prompt until parse() accepts the answer; each rejection is reported."""
    while True:
        raw = ask(prompt)
        try:
            return parse(raw)
        except TaskValidationError as e:
            emit(e.message)


def cmd_add(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    emit("\n----- Add New Task -----")

    title = _ask_until_valid(ask, emit, "Enter task title: ", validate_title)
    description = ask("Enter task description: ")
    priority = _ask_until_valid(
        ask, emit, "Enter priority (1-5, where 5 is highest): ", parse_priority
    )
    due_date = _ask_until_valid(ask, emit, "Enter due date (MM/DD/YYYY): ", validate_due_date)

    task_id = state.task_store.add_task(title, description, priority, due_date)
    return f"Task added successfully with ID: {task_id}"


def _view(state: AppState, task_filter: TaskFilter) -> str:
    listing = state.task_store.list_tasks(task_filter)
    if listing.store_empty:
        return listing.empty_message() or ""

    lines = ["\n----- Tasks -----"]
    for rendered in listing.rendered():
        lines.append(rendered)
        lines.append(TASK_SEPARATOR)

    empty = listing.empty_message()
    if empty:
        lines.append(empty)
    return "\n".join(lines)


def cmd_view_all(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    return _view(state, TaskFilter.ALL)


def cmd_view_completed(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    return _view(state, TaskFilter.COMPLETED)


def cmd_view_incomplete(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    return _view(state, TaskFilter.INCOMPLETE)


def cmd_complete(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    emit("\n----- Mark Task as Complete -----")
    try:
        task_id = parse_task_id(ask("Enter task ID to mark as complete: "))
    except TaskValidationError as e:
        return e.message

    outcome = state.task_store.complete_task(task_id)
    if outcome is CompleteOutcome.ALREADY_COMPLETE:
        return "Task is already marked as complete."
    if outcome is CompleteOutcome.COMPLETED:
        return "Task marked as complete successfully."
    return f"Task with ID {task_id} not found."


def cmd_delete(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    emit("\n----- Delete Task -----")
    try:
        task_id = parse_task_id(ask("Enter task ID to delete: "))
    except TaskValidationError as e:
        return e.message

    if state.task_store.delete_task(task_id):
        return "Task deleted successfully."
    return f"Task with ID {task_id} not found."


def cmd_save_and_exit(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    report = state.task_store.save_to_file()
    if report.ok:
        emit("Tasks saved to file successfully.")
    else:
        emit(f"Error saving to file: {report.error}")

    state.running = False
    return "Thank you for using TaskManager. Goodbye!"


registry.register("add", cmd_add, help_text="Add New Task", aliases=["1"])
registry.register("all", cmd_view_all, help_text="View All Tasks", aliases=["2"])
registry.register(
    "completed", cmd_view_completed, help_text="View Completed Tasks", aliases=["3"]
)
registry.register(
    "incomplete", cmd_view_incomplete, help_text="View Incomplete Tasks", aliases=["4"]
)
registry.register("complete", cmd_complete, help_text="Mark Task as Complete", aliases=["5"])
registry.register("delete", cmd_delete, help_text="Delete Task", aliases=["6"])
registry.register("exit", cmd_save_and_exit, help_text="Save and Exit", aliases=["7", "quit"])
