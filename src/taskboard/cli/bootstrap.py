# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings loaded once by main,
- builds the in-memory TaskStore and the AppState around it,
- seeds the two demo tasks shown on first start.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ConsoleIO, StdConsole
from ..core.state import AppState
from ..tasks.task_models import Category, Priority
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

DEMO_TASKS: list[tuple[str, str, Priority, str, Category]] = [
    ("Изучить Kotlin", "Освоить основы языка Kotlin", Priority.HIGH, "25.12.2024", Category.STUDY),
    ("Купить продукты", "Молоко, хлеб, фрукты", Priority.MEDIUM, "20.12.2024", Category.PERSONAL),
]


def seed_demo_tasks(store: TaskStore) -> None:
    for title, description, priority, due_date, category in DEMO_TASKS:
        store.create(title, description, priority, due_date, category)
    logger.info("Seeded %d demo tasks.", len(DEMO_TASKS))


def create_initial_state(
    *,
    settings=None,
    store: TaskStore | None = None,
    console: ConsoleIO | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings, store and console injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = store if store is not None else TaskStore()
    if getattr(settings, "seed_demo", True):
        seed_demo_tasks(store)

    return AppState(
        settings=settings,
        task_store=store,
        console=console or StdConsole(),
        color=bool(getattr(settings, "color", True)),
    )
