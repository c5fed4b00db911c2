# src/dayplan/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.ports import ScheduleReporter
from .task_models import OpResult, OpStatus, Priority, Task, create_task

logger = logging.getLogger(__name__)

MSG_ADDED = "Task added successfully. No conflicts."
MSG_EDITED = "Task edited successfully."
MSG_COMPLETED = "Task marked as completed."
MSG_REMOVED = "Task removed successfully."
MSG_NOT_FOUND = "Error: Task not found."
MSG_EMPTY = "No tasks scheduled for the day."


def _log_reporter(level: int, message: str) -> None:
    logger.log(level, message)


def overlaps(start: str, end: str, other: Task) -> bool:
    """
    Overlap rule for "HH:MM" strings (lexical == chronological when zero-padded):

        start == other.start OR (start < other.end AND end > other.start)

    Touching boundaries (end == other.start) do not overlap.
    """
    return start == other.start or (start < other.end and end > other.start)


class ScheduleStore:
    """
    In-memory schedule for one day.

    Tasks are kept sorted by start time (stable, so equal starts keep
    insertion order). Overlaps are rejected on add. Edits are only checked
    for overlaps when check_edit_conflicts is set.

    Lookups by description act on the first match in current order;
    duplicate descriptions are not prevented.

    Every operation returns an OpResult. Nothing here raises for an
    expected outcome (conflict, not found, empty list, no match). The one
    exception is ValueError from add_task/edit_task when the priority name
    is not High, Medium or Low; callers validate input before that.
    """

    def __init__(
        self,
        *,
        reporter: ScheduleReporter | None = None,
        check_edit_conflicts: bool = False,
    ) -> None:
        self._tasks: list[Task] = []
        self._report: ScheduleReporter = reporter or _log_reporter
        self._check_edit_conflicts = check_edit_conflicts
        logger.debug("ScheduleStore ready check_edit_conflicts=%s", check_edit_conflicts)

    # ---- low-level helpers ----

    def _sort(self) -> None:
        self._tasks.sort(key=lambda t: t.start)

    def _find(self, description: str) -> Task | None:
        for t in self._tasks:
            if t.description == description:
                return t
        return None

    def find_conflict(self, start: str, end: str, *, ignore: Task | None = None) -> Task | None:
        """Return the first task (in current order) overlapping [start, end), if any."""
        for t in self._tasks:
            if t is ignore:
                continue
            if overlaps(start, end, t):
                return t
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(
        self,
        description: str,
        start: str,
        end: str,
        priority: str | Priority,
    ) -> OpResult:
        clash = self.find_conflict(start, end)
        if clash is not None:
            self._report(
                logging.WARNING,
                f"Task conflict detected: {description!r} overlaps {clash.description!r}",
            )
            return OpResult(
                status=OpStatus.CONFLICT,
                message=f'Error: Task conflicts with an existing task "{clash.description}".',
                conflict_with=clash.description,
            )

        task = create_task(description, start, end, priority)
        self._tasks.append(task)
        self._sort()
        self._report(logging.INFO, f"Task added: {description}")
        return OpResult(status=OpStatus.OK, message=MSG_ADDED, tasks=(task,))

    def edit_task(
        self,
        target_description: str,
        new_description: str,
        new_start: str,
        new_end: str,
        new_priority: str | Priority,
    ) -> OpResult:
        """
        Overwrite description/start/end/priority of the first matching task.

        The completed flag is left as it is.
        """
        task = self._find(target_description)
        if task is None:
            self._report(logging.WARNING, "Edit failed: Task not found.")
            return OpResult(status=OpStatus.NOT_FOUND, message=MSG_NOT_FOUND)

        priority = Priority.parse(new_priority)

        if self._check_edit_conflicts:
            clash = self.find_conflict(new_start, new_end, ignore=task)
            if clash is not None:
                self._report(
                    logging.WARNING,
                    f"Edit conflict detected: {new_description!r} overlaps {clash.description!r}",
                )
                return OpResult(
                    status=OpStatus.CONFLICT,
                    message=f'Error: Task conflicts with an existing task "{clash.description}".',
                    conflict_with=clash.description,
                )

        task.description = new_description
        task.start = new_start
        task.end = new_end
        task.priority = priority
        self._sort()
        self._report(logging.INFO, f"Task edited: {new_description}")
        return OpResult(status=OpStatus.OK, message=MSG_EDITED, tasks=(task,))

    def complete_task(self, description: str) -> OpResult:
        task = self._find(description)
        if task is None:
            self._report(logging.WARNING, "Completion failed: Task not found.")
            return OpResult(status=OpStatus.NOT_FOUND, message=MSG_NOT_FOUND)

        task.completed = True
        self._report(logging.INFO, f"Task completed: {description}")
        return OpResult(status=OpStatus.OK, message=MSG_COMPLETED, tasks=(task,))

    def remove_task(self, description: str) -> OpResult:
        task = self._find(description)
        if task is None:
            self._report(logging.WARNING, "Removal failed: Task not found.")
            return OpResult(status=OpStatus.NOT_FOUND, message=MSG_NOT_FOUND)

        self._tasks.remove(task)
        self._report(logging.INFO, f"Task removed: {description}")
        return OpResult(status=OpStatus.OK, message=MSG_REMOVED, tasks=(task,))

    def list_all(self) -> OpResult:
        if not self._tasks:
            return OpResult(status=OpStatus.EMPTY, message=MSG_EMPTY)
        return OpResult(
            status=OpStatus.OK,
            message=f"{len(self._tasks)} task(s) scheduled.",
            tasks=tuple(self._tasks),
        )

    def list_by_priority(self, priority: str | Priority) -> OpResult:
        """Filter in current order; the priority name is stripped and matched case-insensitively."""
        key = str(priority).strip().lower()
        matched = tuple(t for t in self._tasks if t.priority.value.lower() == key)
        if not matched:
            return OpResult(
                status=OpStatus.NO_MATCH,
                message=f"No tasks found with priority: {priority}",
            )
        return OpResult(
            status=OpStatus.OK,
            message=f"{len(matched)} task(s) with priority {matched[0].priority.value}.",
            tasks=matched,
        )
