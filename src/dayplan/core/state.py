# src/dayplan/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so handlers can read them without a global lookup.
    settings: object
    store: TaskRepo
