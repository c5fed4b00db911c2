# src/dayplan/core/ports.py

"""
Ports (interfaces) used by the console layer.

The menu handlers depend on these Protocols rather than on ScheduleStore
directly, so tests can swap in recording fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import OpResult, Priority

ScheduleReporter = Callable[[int, str], None]
# Observability sink: receives (logging level, message) for every store mutation.


class TaskRepo(Protocol):
    def add_task(
            self,
            description: str,
            start: str,
            end: str,
            priority: str | Priority,
    ) -> OpResult: ...

    def edit_task(
            self,
            target_description: str,
            new_description: str,
            new_start: str,
            new_end: str,
            new_priority: str | Priority,
    ) -> OpResult: ...

    def complete_task(self, description: str) -> OpResult: ...
    def remove_task(self, description: str) -> OpResult: ...
    def list_all(self) -> OpResult: ...
    def list_by_priority(self, priority: str | Priority) -> OpResult: ...
    def count_tasks(self) -> int: ...
