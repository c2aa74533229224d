# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore
from .ports import ConsoleIO, StdConsole


@dataclass
class AppState:
    # Settings object (config.Settings or a compatible namespace in tests).
    settings: object

    task_store: TaskStore
    console: ConsoleIO = field(default_factory=StdConsole)
    color: bool = True
