# src/dayplan/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the composition root: it takes the settings and wires a
single ScheduleStore into AppState. The store lives exactly as long as the
state that owns it.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ScheduleReporter
from ..core.state import AppState
from ..tasks.task_store import ScheduleStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, reporter: ScheduleReporter | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). If reporter is None the
    store logs through its own module logger.
    """
    if settings is None:
        settings = get_settings()

    store = ScheduleStore(
        reporter=reporter,
        check_edit_conflicts=bool(getattr(settings, "check_edit_conflicts", False)),
    )
    logger.debug("AppState created app=%s", getattr(settings, "app_name", "dayplan"))
    return AppState(settings=settings, store=store)
