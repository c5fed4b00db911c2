# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from dayplan.logging_setup import setup_logging
from dayplan.tasks.task_store import ScheduleStore


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def test_file_log_receives_store_records(tmp_path: Path, restore_root_logging) -> None:
    log_file = tmp_path / "logs" / "dayplan.log"
    setup_logging(console_level=logging.ERROR, log_file=log_file)

    store = ScheduleStore()
    store.add_task("A", "09:00", "10:00", "High")
    store.add_task("B", "09:30", "10:30", "Low")
    for h in logging.getLogger().handlers:
        h.flush()

    text = log_file.read_text("utf-8")
    assert "INFO dayplan.tasks.task_store: Task added: A" in text
    assert "WARNING dayplan.tasks.task_store: Task conflict detected" in text


def test_setup_logging_replaces_handlers(restore_root_logging) -> None:
    setup_logging()
    setup_logging()
    assert len(logging.getLogger().handlers) == 1
