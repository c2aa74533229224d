# tests/conftest.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_store import TaskStore

from .fakes import ScriptedConsole

TODAY = date(2024, 12, 22)


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        log_to_file=False,
        color=False,
        seed_demo=False,
        pause_after_action=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    """Empty store whose clock is pinned to TODAY."""
    return TaskStore(today=lambda: TODAY)


@pytest.fixture()
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, console: ScriptedConsole) -> AppState:
    return AppState(settings=settings, task_store=store, console=console, color=False)
