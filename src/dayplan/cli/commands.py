# src/dayplan/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import OpResult, OpStatus, Priority, Task

Ask = Callable[[str], str]
MenuHandler = Callable[[AppState, Ask], str]

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

MSG_INVALID_CHOICE = "Invalid choice. Try again."
MSG_EXIT = "Exiting application."


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler
    exits: bool = False


class MenuRegistry:
    """Numbered menu used by the console connector (1. Add Task, ...)."""

    def __init__(self) -> None:
        self._entries: dict[str, MenuEntry] = {}

    def register(self, key: str, label: str, handler: MenuHandler, *, exits: bool = False) -> None:
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler, exits=exits)

    def is_exit(self, choice: str) -> bool:
        entry = self._entries.get(choice.strip())
        return entry is not None and entry.exits

    def handle(self, state: AppState, choice: str, ask: Ask) -> str:
        """
        Run the handler for a menu choice and return the text to print.
        Unknown choices get the "Invalid choice" reply.
        """
        entry = self._entries.get(choice.strip())
        if entry is None:
            logger.debug("Invalid menu choice %r", choice)
            return MSG_INVALID_CHOICE
        return entry.handler(state, ask)

    def build_menu(self) -> str:
        return "\n".join(f"{e.key}. {e.label}" for e in self._entries.values())


# ---- input parsing ----


def parse_time(raw: str) -> str:
    """Accept H:MM or HH:MM (00:00-23:59) and return zero-padded HH:MM."""
    m = TIME_RE.match(raw.strip())
    if not m:
        raise ValueError(f"Invalid time {raw.strip()!r}, expected HH:MM.")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValueError(f"Invalid time {raw.strip()!r}, expected HH:MM.")
    return f"{hours:02d}:{minutes:02d}"


def parse_description(raw: str) -> str:
    text = raw.strip()
    if not text:
        raise ValueError("Description must not be empty.")
    return text


def _ask_task_fields(ask: Ask, *, prefix: str = "") -> tuple[str, str, str, Priority]:
    description = parse_description(ask(f"Enter {prefix}task description: "))
    start = parse_time(ask(f"Enter {prefix}start time (HH:MM): "))
    end = parse_time(ask(f"Enter {prefix}end time (HH:MM): "))
    if end <= start:
        raise ValueError("End time must be after start time.")
    priority = Priority.parse(ask(f"Enter {prefix}priority (High, Medium, Low): "))
    return description, start, end, priority


# ---- output formatting ----


def format_task(task: Task) -> str:
    status = " (Completed)" if task.completed else ""
    return f"{task.start} - {task.end}: {task.description} [{task.priority.value}]{status}"


def format_listing(result: OpResult) -> str:
    if result.status is not OpStatus.OK:
        return result.message
    return "\n".join(format_task(t) for t in result.tasks)


# ---- handlers ----


def cmd_add(state: AppState, ask: Ask) -> str:
    try:
        description, start, end, priority = _ask_task_fields(ask)
    except ValueError as e:
        return f"Error: {e}"
    return state.store.add_task(description, start, end, priority).message


def cmd_edit(state: AppState, ask: Ask) -> str:
    target = ask("Enter the description of the task to edit: ").strip()
    try:
        description, start, end, priority = _ask_task_fields(ask, prefix="new ")
    except ValueError as e:
        return f"Error: {e}"
    return state.store.edit_task(target, description, start, end, priority).message


def cmd_complete(state: AppState, ask: Ask) -> str:
    description = ask("Enter the description of the task to mark as completed: ").strip()
    return state.store.complete_task(description).message


def cmd_remove(state: AppState, ask: Ask) -> str:
    description = ask("Enter the description of the task to remove: ").strip()
    return state.store.remove_task(description).message


def cmd_view(state: AppState, ask: Ask) -> str:
    return format_listing(state.store.list_all())


def cmd_view_by_priority(state: AppState, ask: Ask) -> str:
    priority = ask("Enter priority (High, Medium, Low): ").strip()
    return format_listing(state.store.list_by_priority(priority))


def cmd_exit(state: AppState, ask: Ask) -> str:
    return MSG_EXIT


registry = MenuRegistry()

registry.register("1", "Add Task", cmd_add)
registry.register("2", "Edit Task", cmd_edit)
registry.register("3", "Complete Task", cmd_complete)
registry.register("4", "Remove Task", cmd_remove)
registry.register("5", "View Tasks", cmd_view)
registry.register("6", "View Tasks by Priority", cmd_view_by_priority)
registry.register("7", "Exit", cmd_exit, exits=True)
