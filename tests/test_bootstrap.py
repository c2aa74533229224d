# tests/test_bootstrap.py

from __future__ import annotations

from taskboard.cli.bootstrap import create_initial_state
from taskboard.tasks import task_api
from taskboard.tasks.task_models import Category, Priority
from taskboard.tasks.task_store import TaskStore

from .conftest import TODAY
from .fakes import ScriptedConsole


def test_seeded_state_has_two_demo_tasks(settings) -> None:
    settings.seed_demo = True
    state = create_initial_state(
        settings=settings,
        store=TaskStore(today=lambda: TODAY),
        console=ScriptedConsole(),
    )

    a, b = state.task_store.get_all()
    assert (a.id, a.title, a.priority, a.category, a.due_date) == (
        1,
        "Изучить Kotlin",
        Priority.HIGH,
        Category.STUDY,
        "25.12.2024",
    )
    assert (b.id, b.title, b.priority, b.category, b.due_date) == (
        2,
        "Купить продукты",
        Priority.MEDIUM,
        Category.PERSONAL,
        "20.12.2024",
    )
    assert task_api.statistics(state.task_store).total == 2
    assert state.color is False


def test_seeding_can_be_disabled(settings) -> None:
    state = create_initial_state(settings=settings, console=ScriptedConsole())
    assert state.task_store.get_all() == []
