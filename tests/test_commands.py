# tests/test_commands.py

from __future__ import annotations

from taskboard.cli import commands
from taskboard.cli.commands import MenuAction, MenuRegistry
from taskboard.tasks.task_models import Category, Priority

from .fakes import ScriptedConsole


def _seed(state) -> None:
    store = state.task_store
    store.create("Изучить Kotlin", "Освоить основы", Priority.HIGH, "25.12.2024", Category.STUDY)
    store.create("Купить продукты", "Молоко", Priority.MEDIUM, "20.12.2024", Category.PERSONAL)


def test_menu_registry_routes_and_builds_menu(state) -> None:
    reg = MenuRegistry(title="T")
    called = []

    def h(st):
        called.append(st)
        return MenuAction.CONTINUE

    reg.register("1", h, "First", aliases=["f"])
    reg.register("2", lambda st: MenuAction.EXIT, "Quit")

    assert reg.handle(state, " 1 ") is MenuAction.CONTINUE
    assert reg.handle(state, "F") is MenuAction.CONTINUE
    assert reg.handle(state, "2") is MenuAction.EXIT
    assert reg.handle(state, "9") is None
    assert called == [state, state]

    menu = reg.build_menu()
    assert "1.First" in menu and "2.Quit" in menu
    assert reg.choice_prompt() == "Выберите действие (1-2): "
    assert "от 1 до 2" in reg.invalid_choice_message()


def test_default_registry_has_eight_entries() -> None:
    assert commands.registry.keys() == [str(i) for i in range(1, 9)]


def test_add_reprompts_until_valid(state, console: ScriptedConsole) -> None:
    console.feed(
        "  ",  # blank title -> re-prompt
        "Новая задача",
        "описание",
        "0",  # out of range -> re-prompt
        "abc",
        "4",  # Срочный
        "5",  # Финансы
        "32.13.2024",  # bad date -> re-prompt
        "01.01.2025",
    )

    assert commands.cmd_add(state) is MenuAction.CONTINUE

    [task] = state.task_store.get_all()
    assert task.title == "Новая задача"
    assert task.description == "описание"
    assert task.priority is Priority.URGENT
    assert task.category is Category.FINANCE
    assert task.due_date == "01.01.2025"
    assert "❌ Название не может быть пустым" in console.output
    assert console.output.count("Пожалуйста, введите число от 1 до 4") == 2
    assert "❌ Неверный формат даты. Используйте дд.мм.гггг" in console.output
    assert "Задача успешно создана!" in console.output


def test_view_active_only(state, console: ScriptedConsole) -> None:
    _seed(state)
    state.task_store.mark_completed(1)
    console.feed("2")

    commands.cmd_view(state)

    assert "ЗАДАЧА #2" in console.text
    assert "ЗАДАЧА #1" not in console.text


def test_view_completed_when_none(state, console: ScriptedConsole) -> None:
    _seed(state)
    console.feed("3")
    commands.cmd_view(state)
    assert console.output[-1] == "Задачи не найдены"


def test_edit_title(state, console: ScriptedConsole) -> None:
    _seed(state)
    console.feed("1", "1", "Изучить Python")

    commands.cmd_edit(state)

    assert state.task_store.get_by_id(1).title == "Изучить Python"
    assert console.output[-1] == "Название обновлено"


def test_edit_priority_and_due_date(state, console: ScriptedConsole) -> None:
    _seed(state)
    console.feed("2", "3", "1")
    commands.cmd_edit(state)
    console.feed("2", "5", "bad", "10.01.2025")
    commands.cmd_edit(state)
    assert "❌ Неверный формат даты" in console.output
    assert "❌ Неверный формат даты. Используйте дд.мм.гггг" not in console.output

    task = state.task_store.get_by_id(2)
    assert task.priority is Priority.LOW
    assert task.due_date == "10.01.2025"


def test_edit_cancel_changes_nothing(state, console: ScriptedConsole) -> None:
    _seed(state)
    console.feed("1", "6")
    commands.cmd_edit(state)
    assert state.task_store.get_by_id(1).title == "Изучить Kotlin"


def test_edit_errors(state, console: ScriptedConsole) -> None:
    _seed(state)
    state.task_store.mark_completed(1)

    console.feed("x")
    commands.cmd_edit(state)
    assert console.output[-1] == "Неверный формат ID"

    console.feed("42")
    commands.cmd_edit(state)
    assert console.output[-1] == "Задача с ID 42 не найдена"

    console.feed("1")
    commands.cmd_edit(state)
    assert console.output[-1] == "Невозможно редактировать выполненную задачу"


def test_complete_reports_distinct_failures(state, console: ScriptedConsole) -> None:
    _seed(state)

    console.feed("1")
    commands.cmd_complete(state)
    assert console.output[-1] == "Задача отмечена как выполненная"

    console.feed("1")
    commands.cmd_complete(state)
    assert console.output[-1] == "Задача #1 уже выполнена"

    console.feed("9")
    commands.cmd_complete(state)
    assert console.output[-1] == "Задача с ID 9 не найдена"


def test_delete_requires_confirmation(state, console: ScriptedConsole) -> None:
    _seed(state)
    state.task_store.mark_completed(2)

    console.feed("2", "нет")
    commands.cmd_delete(state)
    assert console.output[-1] == "Удаление отменено"
    assert state.task_store.count() == 2

    console.feed("2", "ДА")
    commands.cmd_delete(state)
    assert console.output[-1] == "Задача успешно удалена"
    assert [t.id for t in state.task_store.get_all()] == [1]


def test_search_by_content_and_overdue(state, console: ScriptedConsole) -> None:
    _seed(state)

    console.feed("1", "КОТЛИН")
    commands.cmd_search(state)
    assert console.output[-1] == "Найдено задач: 0"

    console.feed("1", "kotlin")
    commands.cmd_search(state)
    assert console.output[-1] == "Найдено задач: 1"

    console.feed("4")
    commands.cmd_search(state)
    assert console.output[-1] == "Просроченных задач: 1"
    assert "ЗАДАЧА #2" in console.output[-2]


def test_search_by_category_priority_and_cancel(state, console: ScriptedConsole) -> None:
    _seed(state)

    console.feed("2", "2")  # Личное
    commands.cmd_search(state)
    assert console.output[-1] == "Найдено задач: 1"

    console.feed("3", "1")  # Низкий
    commands.cmd_search(state)
    assert console.output[-2:] == ["Задачи не найдены", "Найдено задач: 0"]

    before = len(console.output)
    console.feed("5")
    commands.cmd_search(state)
    assert not any("Найдено" in line for line in console.output[before:])


def test_analytics(state, console: ScriptedConsole) -> None:
    _seed(state)
    state.task_store.mark_completed(1)

    commands.cmd_analytics(state)

    assert " Процент выполнения: 50.0%" in console.text
    assert "ПРОСРОЧЕННЫХ ЗАДАЧ: 1" in console.text


def test_exit(state, console: ScriptedConsole) -> None:
    assert commands.cmd_exit(state) is MenuAction.EXIT
    assert console.output == ["Конец!"]
