# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from dayplan.cli.bootstrap import create_initial_state
from dayplan.core.state import AppState
from dayplan.tasks.task_store import ScheduleStore

from .fakes import RecordingReporter


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace rather than the real config keeps tests independent of
    the process environment.
    """
    return SimpleNamespace(
        app_name="dayplan-test",
        log_level="WARNING",
        log_file=None,
        check_edit_conflicts=False,
    )


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def store(reporter: RecordingReporter) -> ScheduleStore:
    return ScheduleStore(reporter=reporter)


@pytest.fixture()
def state(settings: SimpleNamespace, reporter: RecordingReporter) -> AppState:
    return create_initial_state(settings=settings, reporter=reporter)
