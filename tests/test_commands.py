# tests/test_commands.py

from __future__ import annotations

import pytest

from dayplan.cli.commands import (
    MenuRegistry,
    format_task,
    parse_time,
    registry,
)
from dayplan.tasks.task_models import create_task

from .fakes import ScriptedConsole


def test_menu_registry_routes_and_rejects_unknown(state) -> None:
    reg = MenuRegistry()
    called = {"a": 0}

    def h(state, ask):
        called["a"] += 1
        return ask("q? ")

    reg.register("1", "Do A", h)
    reg.register("9", "Quit", lambda state, ask: "bye", exits=True)

    console = ScriptedConsole(["answer"])
    assert reg.handle(state, " 1 ", console.read) == "answer"
    assert called["a"] == 1
    assert reg.handle(state, "2", console.read) == "Invalid choice. Try again."
    assert reg.is_exit("9") and not reg.is_exit("1") and not reg.is_exit("x")
    assert reg.build_menu() == "1. Do A\n9. Quit"


def test_default_menu_layout() -> None:
    assert registry.build_menu().splitlines() == [
        "1. Add Task",
        "2. Edit Task",
        "3. Complete Task",
        "4. Remove Task",
        "5. View Tasks",
        "6. View Tasks by Priority",
        "7. Exit",
    ]
    assert registry.is_exit("7")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("09:00", "09:00"), ("9:05", "09:05"), (" 23:59 ", "23:59"), ("0:00", "00:00")],
)
def test_parse_time_normalizes(raw, expected) -> None:
    assert parse_time(raw) == expected


@pytest.mark.parametrize("raw", ["24:00", "12:60", "noon", "1200", "12:5", ""])
def test_parse_time_rejects(raw) -> None:
    with pytest.raises(ValueError):
        parse_time(raw)


def test_format_task() -> None:
    task = create_task("Dock check", "09:00", "10:00", "high")
    assert format_task(task) == "09:00 - 10:00: Dock check [High]"
    task.completed = True
    assert format_task(task) == "09:00 - 10:00: Dock check [High] (Completed)"


def test_add_handler_validates_before_calling_store(state) -> None:
    bad_priority = ScriptedConsole(["Walk", "09:00", "10:00", "urgent"])
    assert registry.handle(state, "1", bad_priority.read).startswith("Error: Unknown priority")

    backwards = ScriptedConsole(["Walk", "10:00", "09:00"])
    assert registry.handle(state, "1", backwards.read) == "Error: End time must be after start time."

    empty = ScriptedConsole(["   "])
    assert registry.handle(state, "1", empty.read) == "Error: Description must not be empty."

    assert state.store.count_tasks() == 0


def test_add_then_views(state) -> None:
    ok = ScriptedConsole(["Walk", "9:00", "10:00", "low"])
    assert registry.handle(state, "1", ok.read) == "Task added successfully. No conflicts."

    clash = ScriptedConsole(["Run", "09:30", "10:30", "High"])
    assert registry.handle(state, "1", clash.read) == 'Error: Task conflicts with an existing task "Walk".'

    assert registry.handle(state, "5", ScriptedConsole([]).read) == "09:00 - 10:00: Walk [Low]"
    assert registry.handle(state, "6", ScriptedConsole(["LOW"]).read) == "09:00 - 10:00: Walk [Low]"
    assert (
        registry.handle(state, "6", ScriptedConsole(["High"]).read)
        == "No tasks found with priority: High"
    )


def test_edit_complete_remove_handlers(state) -> None:
    state.store.add_task("Walk", "09:00", "10:00", "Low")

    edit = ScriptedConsole(["Walk", "Jog", "07:00", "07:45", "Medium"])
    assert registry.handle(state, "2", edit.read) == "Task edited successfully."
    assert edit.prompts[1] == "Enter new task description: "

    missing = ScriptedConsole(["Nope", "X", "01:00", "02:00", "Low"])
    assert registry.handle(state, "2", missing.read) == "Error: Task not found."

    assert registry.handle(state, "3", ScriptedConsole(["Jog"]).read) == "Task marked as completed."
    assert registry.handle(state, "5", ScriptedConsole([]).read) == "07:00 - 07:45: Jog [Medium] (Completed)"

    assert registry.handle(state, "4", ScriptedConsole(["Jog"]).read) == "Task removed successfully."
    assert registry.handle(state, "4", ScriptedConsole(["Jog"]).read) == "Error: Task not found."
    assert registry.handle(state, "5", ScriptedConsole([]).read) == "No tasks scheduled for the day."


def test_ports_module_documents_itself() -> None:
    from dayplan.core import ports

    assert ports.__doc__ and "Ports (interfaces)" in ports.__doc__
