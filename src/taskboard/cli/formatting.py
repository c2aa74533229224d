# src/taskboard/cli/formatting.py

"""Text rendering for tasks, task lists and analytics."""

from __future__ import annotations

from ..tasks.task_api import TaskStatistics
from ..tasks.task_models import Priority, Task

RESET = "\033[0m"

PRIORITY_COLORS: dict[str, str] = {
    Priority.LOW.value: "\033[34m",
    Priority.MEDIUM.value: "\033[33m",
    Priority.HIGH.value: "\033[31m",
    Priority.URGENT.value: "\033[35m",
}

NO_DESCRIPTION = "нет описания"
NOT_FOUND_TEXT = "Задачи не найдены"


def format_task(task: Task, *, color: bool = True) -> str:
    status_mark = "✅" if task.is_completed else "⏳"
    status_text = "Выполнена" if task.is_completed else "Активна"
    description = task.description if task.description.strip() else NO_DESCRIPTION

    priority_line = f"⚡ Приоритет: {task.priority}"
    if color:
        priority_line = f"{PRIORITY_COLORS.get(str(task.priority), RESET)}{priority_line}{RESET}"

    lines = [
        f"─── ЗАДАЧА #{task.id} ─────────────────────────────",
        f"Название: {task.title}",
        f"Описание: {description}",
        f"Категория: {task.category}",
        priority_line,
        f"Создана: {task.created_at}",
        f"Выполнить до: {task.due_date}",
        f"{status_mark} Статус: {status_text}",
        "────────────────────────────────────────────────",
    ]
    return "\n".join(lines)


def format_task_list(tasks: list[Task], *, color: bool = True) -> str:
    if not tasks:
        return NOT_FOUND_TEXT
    return "\n".join(format_task(t, color=color) for t in tasks)


def format_analytics(
    stats: TaskStatistics,
    priorities: dict[str, int],
    categories: dict[str, int],
    overdue: int,
) -> str:
    lines = [
        "ОБЩАЯ СТАТИСТИКА:",
        f" Всего задач: {stats.total}",
        f" Выполнено: {stats.completed}",
        f" Активных: {stats.active}",
        f" Процент выполнения: {stats.completion_percentage:.1f}%",
        "",
        "РАСПРЕДЕЛЕНИЕ ПО ПРИОРИТЕТАМ:",
    ]
    lines += [f"   {name}: {count} задач" for name, count in priorities.items()]
    lines += ["", "РАСПРЕДЕЛЕНИЕ ПО КАТЕГОРИЯМ:"]
    lines += [f"   {name}: {count} задач" for name, count in categories.items()]
    lines += ["", f"ПРОСРОЧЕННЫХ ЗАДАЧ: {overdue}"]
    return "\n".join(lines)
