# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import CATEGORIES, PRIORITIES, Task, UpdateResult
from ..tasks.validation import parse_task_id, validate_date, validate_title
from .formatting import format_analytics, format_task, format_task_list
from .prompts import read_text, read_validated, select_from_list

logger = logging.getLogger(__name__)


class MenuAction(StrEnum):
    CONTINUE = "continue"
    EXIT = "exit"


MenuHandler = Callable[[AppState], MenuAction]

CANCEL = "Отмена"

VIEW_ALL = "Все задачи"
VIEW_ACTIVE = "Активные задачи"
VIEW_COMPLETED = "Выполненные задачи"

EDIT_TITLE = "Название"
EDIT_DESCRIPTION = "Описание"
EDIT_PRIORITY = "Приоритет"
EDIT_CATEGORY = "Категорию"
EDIT_DUE_DATE = "Дату выполнения"

SEARCH_CONTENT = "По содержимому"
SEARCH_CATEGORY = "По категории"
SEARCH_PRIORITY = "По приоритету"
SEARCH_OVERDUE = "Просроченные задачи"

TITLE_ERROR = "Название не может быть пустым"
DATE_ERROR = "Неверный формат даты. Используйте дд.мм.гггг"
EDIT_DATE_ERROR = "Неверный формат даты"
BAD_ID = "Неверный формат ID"

CONFIRM_ANSWERS = ("да", "д")


class MenuRegistry:
    """Numbered main-menu registry used by the console connector (1 = view, ..., 8 = exit)."""

    def __init__(self, title: str = "СИСТЕМА УПРАВЛЕНИЯ ЗАДАЧАМИ") -> None:
        self.title = title
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.strip().lower()
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.strip().lower()] = handler

    def keys(self) -> list[str]:
        return list(self._labels)

    def handle(self, state: AppState, choice: str) -> MenuAction | None:
        """
        Dispatch a menu choice.
        Returns the handler's action, or None if the choice is not a known key.
        """
        handler = self._handlers.get(choice.strip().lower())
        if handler is None:
            return None
        return handler(state)

    def build_menu(self) -> str:
        rule = "=" * 50
        lines = ["", rule, self.title, rule]
        for key, label in self._labels.items():
            lines.append(f"{key}.{label}")
        lines.append(rule)
        return "\n".join(lines)

    def choice_prompt(self) -> str:
        keys = self.keys()
        if not keys:
            return "Выберите действие: "
        return f"Выберите действие ({keys[0]}-{keys[-1]}): "

    def invalid_choice_message(self) -> str:
        keys = self.keys()
        return f"Неверный выбор. Пожалуйста, введите число от {keys[0]} до {keys[-1]}"


# ---- helpers ----


def _show(state: AppState, tasks: list[Task]) -> None:
    state.console.write(format_task_list(tasks, color=state.color))


def _read_id(state: AppState, prompt: str) -> int | None:
    task_id = parse_task_id(read_text(state.console, prompt))
    if task_id is None:
        state.console.write(BAD_ID)
    return task_id


def _not_found(state: AppState, task_id: int) -> None:
    state.console.write(f"Задача с ID {task_id} не найдена")


# ---- handlers ----


def cmd_view(state: AppState) -> MenuAction:
    console = state.console
    console.write("\nПРОСМОТР ЗАДАЧ")
    choice = select_from_list(
        console,
        [VIEW_ALL, VIEW_ACTIVE, VIEW_COMPLETED],
        "Выберите тип отображения:",
    )

    if choice == VIEW_ACTIVE:
        tasks = task_api.filter_by_status(state.task_store, False)
    elif choice == VIEW_COMPLETED:
        tasks = task_api.filter_by_status(state.task_store, True)
    else:
        tasks = state.task_store.get_all()

    _show(state, tasks)
    return MenuAction.CONTINUE


def cmd_add(state: AppState) -> MenuAction:
    console = state.console
    console.write("\nДОБАВЛЕНИЕ НОВОЙ ЗАДАЧИ")

    title = read_validated(console, "Введите название задачи: ", validate_title, TITLE_ERROR)
    description = read_text(console, "Введите описание задачи: ")
    priority = select_from_list(console, PRIORITIES, "Выберите приоритет:")
    category = select_from_list(console, CATEGORIES, "Выберите категорию:")
    due_date = read_validated(
        console, "Введите дату выполнения (дд.мм.гггг): ", validate_date, DATE_ERROR
    )

    task = state.task_store.create(title, description, priority, due_date, category)
    logger.info("Task %s created from console", task.id)
    console.write("Задача успешно создана!")
    console.write(format_task(task, color=state.color))
    return MenuAction.CONTINUE


def cmd_edit(state: AppState) -> MenuAction:
    console = state.console
    store = state.task_store
    console.write("\nРЕДАКТИРОВАНИЕ ЗАДАЧИ")

    task_id = _read_id(state, "Введите ID задачи для редактирования: ")
    if task_id is None:
        return MenuAction.CONTINUE

    task = store.get_by_id(task_id)
    if task is None:
        _not_found(state, task_id)
        return MenuAction.CONTINUE
    if task.is_completed:
        console.write("Невозможно редактировать выполненную задачу")
        return MenuAction.CONTINUE

    console.write("Текущие данные задачи:")
    console.write(format_task(task, color=state.color))

    console.write("\nЧто вы хотите изменить?")
    field = select_from_list(
        console,
        [EDIT_TITLE, EDIT_DESCRIPTION, EDIT_PRIORITY, EDIT_CATEGORY, EDIT_DUE_DATE, CANCEL],
        "Выберите поле для редактирования:",
    )

    if field == CANCEL:
        return MenuAction.CONTINUE

    if field == EDIT_TITLE:
        title = read_validated(console, "Новое название: ", validate_title, TITLE_ERROR)
        result = store.update(task_id, lambda t: setattr(t, "title", title))
        done_text = "Название обновлено"
    elif field == EDIT_DESCRIPTION:
        description = read_text(console, "Новое описание: ")
        result = store.update(task_id, lambda t: setattr(t, "description", description))
        done_text = "Описание обновлено"
    elif field == EDIT_PRIORITY:
        priority = select_from_list(console, PRIORITIES, "Новый приоритет:")
        result = store.update(task_id, lambda t: setattr(t, "priority", priority))
        done_text = "Приоритет обновлен"
    elif field == EDIT_CATEGORY:
        category = select_from_list(console, CATEGORIES, "Новая категория:")
        result = store.update(task_id, lambda t: setattr(t, "category", category))
        done_text = "Категория обновлена"
    else:
        due_date = read_validated(
            console, "Новая дата выполнения (дд.мм.гггг): ", validate_date, EDIT_DATE_ERROR
        )
        result = store.update(task_id, lambda t: setattr(t, "due_date", due_date))
        done_text = "Дата выполнения обновлена"

    if result is UpdateResult.OK:
        console.write(done_text)
    elif result is UpdateResult.COMPLETED:
        console.write("Невозможно редактировать выполненную задачу")
    else:
        _not_found(state, task_id)
    return MenuAction.CONTINUE


def cmd_complete(state: AppState) -> MenuAction:
    console = state.console
    console.write("\nОТМЕТКА О ВЫПОЛНЕНИИ")

    task_id = _read_id(state, "Введите ID выполненной задачи: ")
    if task_id is None:
        return MenuAction.CONTINUE

    result = state.task_store.mark_completed(task_id)
    if result is UpdateResult.OK:
        logger.info("Task %s marked completed", task_id)
        console.write("Задача отмечена как выполненная")
    elif result is UpdateResult.COMPLETED:
        console.write(f"Задача #{task_id} уже выполнена")
    else:
        _not_found(state, task_id)
    return MenuAction.CONTINUE


def cmd_delete(state: AppState) -> MenuAction:
    console = state.console
    store = state.task_store
    console.write("\nУДАЛЕНИЕ ЗАДАЧИ")

    task_id = _read_id(state, "Введите ID задачи для удаления: ")
    if task_id is None:
        return MenuAction.CONTINUE

    task = store.get_by_id(task_id)
    if task is None:
        _not_found(state, task_id)
        return MenuAction.CONTINUE

    console.write("Вы собираетесь удалить задачу:")
    console.write(format_task(task, color=state.color))

    answer = read_text(console, "Вы уверены? (да/нет): ").lower()
    if answer not in CONFIRM_ANSWERS:
        console.write("Удаление отменено")
        return MenuAction.CONTINUE

    if store.delete(task_id):
        logger.info("Task %s deleted from console", task_id)
        console.write("Задача успешно удалена")
    else:
        console.write("Ошибка при удалении задачи")
    return MenuAction.CONTINUE


def cmd_search(state: AppState) -> MenuAction:
    console = state.console
    store = state.task_store
    console.write("\nПОИСК ЗАДАЧ")

    kind = select_from_list(
        console,
        [SEARCH_CONTENT, SEARCH_CATEGORY, SEARCH_PRIORITY, SEARCH_OVERDUE, CANCEL],
        "Выберите тип поиска:",
    )

    if kind == CANCEL:
        return MenuAction.CONTINUE

    if kind == SEARCH_CONTENT:
        query = read_text(console, "Введите поисковый запрос: ")
        results = task_api.search(store, query)
    elif kind == SEARCH_CATEGORY:
        category = select_from_list(console, CATEGORIES, "Выберите категорию:")
        results = task_api.filter_by_category(store, category)
    elif kind == SEARCH_PRIORITY:
        priority = select_from_list(console, PRIORITIES, "Выберите приоритет:")
        results = task_api.filter_by_priority(store, priority)
    else:
        results = task_api.overdue_tasks(store)
        _show(state, results)
        console.write(f"Просроченных задач: {len(results)}")
        return MenuAction.CONTINUE

    _show(state, results)
    console.write(f"Найдено задач: {len(results)}")
    return MenuAction.CONTINUE


def cmd_analytics(state: AppState) -> MenuAction:
    store = state.task_store
    state.console.write("\nАНАЛИТИКА ЗАДАЧ")
    state.console.write(
        format_analytics(
            task_api.statistics(store),
            task_api.priority_distribution(store),
            task_api.category_distribution(store),
            task_api.overdue_count(store),
        )
    )
    return MenuAction.CONTINUE


def cmd_exit(state: AppState) -> MenuAction:
    state.console.write("Конец!")
    return MenuAction.EXIT


def build_registry() -> MenuRegistry:
    reg = MenuRegistry()
    reg.register("1", cmd_view, "Просмотреть задачи")
    reg.register("2", cmd_add, "Добавить задачу")
    reg.register("3", cmd_edit, "Редактировать задачу")
    reg.register("4", cmd_complete, "Отметить как выполненную")
    reg.register("5", cmd_delete, "Удалить задачу")
    reg.register("6", cmd_search, "Поиск и фильтрация")
    reg.register("7", cmd_analytics, "Аналитика")
    reg.register("8", cmd_exit, "Выход", aliases=["q", "exit"])
    return reg


registry = build_registry()
