# src/dayplan/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Priority(StrEnum):
    """Task priority. Values are the display names."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        """Case-insensitive lookup; raises ValueError for unknown names."""
        if isinstance(raw, Priority):
            return raw
        key = str(raw).strip().lower()
        for p in cls:
            if p.value.lower() == key:
                return p
        raise ValueError(f"Unknown priority: {raw!r} (expected High, Medium or Low)")


class OpStatus(StrEnum):
    """
    Outcome of a store operation.

    None of these are errors in the exception sense: every status is an
    expected result and is reported back to the caller as-is.
    """

    OK = "ok"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    NO_MATCH = "no_match"


@dataclass(slots=True)
class Task:
    description: str
    start: str
    end: str
    priority: Priority
    completed: bool = False


@dataclass(frozen=True, slots=True)
class OpResult:
    status: OpStatus
    message: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    conflict_with: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OpStatus.OK


def create_task(description: str, start: str, end: str, priority: str | Priority) -> Task:
    """Build a new, not yet completed task."""
    return Task(
        description=description,
        start=start,
        end=end,
        priority=Priority.parse(priority),
    )
