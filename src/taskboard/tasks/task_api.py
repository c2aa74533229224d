# src/taskboard/tasks/task_api.py

"""
Read-only queries and analytics over a TaskStore.

Every function recomputes from the store's current snapshot; nothing is cached.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date

from .task_models import Category, DueStatus, Priority, Task, parse_date
from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskStatistics:
    total: int
    completed: int
    active: int
    completion_percentage: float


def filter_by_status(store: TaskStore, completed: bool | None) -> list[Task]:
    """completed=None -> all tasks."""
    tasks = store.get_all()
    if completed is None:
        return tasks
    return [t for t in tasks if t.is_completed == completed]


def search(store: TaskStore, query: str) -> list[Task]:
    q = query.lower()
    return [t for t in store.get_all() if q in t.title.lower() or q in t.description.lower()]


def filter_by_category(store: TaskStore, category: Category | str) -> list[Task]:
    return [t for t in store.get_all() if t.category == category]


def filter_by_priority(store: TaskStore, priority: Priority | str) -> list[Task]:
    return [t for t in store.get_all() if t.priority == priority]


def due_status(task: Task, today: date) -> DueStatus:
    """
    Overdue policy for one task.

    A due date that does not parse yields UNPARSEABLE and is never reported
    as overdue. Completed tasks are never overdue.
    """
    if task.is_completed:
        return DueStatus.COMPLETED
    due = parse_date(task.due_date)
    if due is None:
        logger.debug("Task %s has unparseable due date %r", task.id, task.due_date)
        return DueStatus.UNPARSEABLE
    return DueStatus.OVERDUE if due < today else DueStatus.NOT_OVERDUE


def overdue_tasks(store: TaskStore, today: date | None = None) -> list[Task]:
    today = today or store.today()
    return [t for t in store.get_all() if due_status(t, today) is DueStatus.OVERDUE]


def overdue_count(store: TaskStore, today: date | None = None) -> int:
    return len(overdue_tasks(store, today))


def statistics(store: TaskStore) -> TaskStatistics:
    tasks = store.get_all()
    total = len(tasks)
    completed = sum(1 for t in tasks if t.is_completed)
    pct = (completed / total * 100) if total > 0 else 0.0
    return TaskStatistics(
        total=total,
        completed=completed,
        active=total - completed,
        completion_percentage=pct,
    )


def priority_distribution(store: TaskStore) -> dict[str, int]:
    """Count per priority, in first-seen order; priorities with no tasks are absent."""
    return dict(Counter(str(t.priority) for t in store.get_all()))


def category_distribution(store: TaskStore) -> dict[str, int]:
    return dict(Counter(str(t.category) for t in store.get_all()))
