# src/taskboard/tasks/validation.py

"""
Input predicates used by the console before it calls the store.

They are advisory: TaskStore itself accepts whatever it is given.
"""

from __future__ import annotations

from .task_models import CATEGORIES, PRIORITIES, parse_date


def validate_title(title: str) -> bool:
    return bool(title and title.strip())


def validate_date(text: str) -> bool:
    return parse_date(text) is not None


def validate_priority(priority: str) -> bool:
    return priority in PRIORITIES


def validate_category(category: str) -> bool:
    return category in CATEGORIES


def parse_task_id(raw: str) -> int | None:
    """Numeric id from user input, or None."""
    try:
        return int(raw.strip())
    except (ValueError, AttributeError):
        return None
