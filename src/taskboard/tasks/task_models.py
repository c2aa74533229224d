# src/taskboard/tasks/task_models.py

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

# Fixed display/input format for all dates (no localization).
DATE_FORMAT = "%d.%m.%Y"
_DATE_RE = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")


class Priority(StrEnum):
    """
    Task priority, ordered low -> urgent by declaration (see PRIORITIES and rank).

    Values are the display labels, so a plain label string compares equal
    to its member. Comparing members with < compares the label text, not the
    level; sort by `rank` instead.
    """

    LOW = "Низкий 🔵"
    MEDIUM = "Средний 🟡"
    HIGH = "Высокий 🟠"
    URGENT = "Срочный 🔴"

    @property
    def rank(self) -> int:
        """0 for LOW up to 3 for URGENT."""
        return PRIORITIES.index(self)


class Category(StrEnum):
    WORK = "Работа"
    PERSONAL = "Личное"
    STUDY = "Учеба"
    HEALTH = "Здоровье"
    FINANCE = "Финансы"


PRIORITIES: list[Priority] = list(Priority)
CATEGORIES: list[Category] = list(Category)


class UpdateResult(StrEnum):
    """
    Outcome of a mutating store call.

    Truthy only for OK, so `if store.delete(...)` reads as success.
    """

    OK = "ok"
    NOT_FOUND = "not_found"
    COMPLETED = "completed"  # task is completed and therefore immutable

    def __bool__(self) -> bool:
        return self is UpdateResult.OK


class DueStatus(StrEnum):
    """Result of the overdue check for a single task."""

    OVERDUE = "overdue"
    NOT_OVERDUE = "not_overdue"
    UNPARSEABLE = "unparseable"  # due date text does not match DATE_FORMAT
    COMPLETED = "completed"


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def parse_date(text: str) -> date | None:
    """
    Parse `dd.mm.yyyy` (two-digit day/month, four-digit year); None if it does not parse.

    Lenient on month length: any day 01-31 is accepted and clamped to the
    last day of that month, so 31.02.2024 -> 29.02.2024 and 29.02.2023 -> 28.02.2023.
    """
    if not isinstance(text, str):
        return None
    m = _DATE_RE.match(text.strip())
    if not m:
        return None
    day, month, year = (int(g) for g in m.groups())
    if not (1 <= day <= 31 and 1 <= month <= 12 and year >= 1):
        return None
    _, last_day = calendar.monthrange(year, month)
    return date(year, month, min(day, last_day))


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    due_date: str  # dd.mm.yyyy, parsed on demand
    category: Category
    created_at: str  # dd.mm.yyyy, stamped by the store

    is_completed: bool = False
