# src/taskboard/cli/prompts.py

"""Re-prompting input helpers on top of ConsoleIO."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from ..core.ports import ConsoleIO

T = TypeVar("T")


def read_text(console: ConsoleIO, prompt: str) -> str:
    return console.read_line(prompt).strip()


def read_validated(
    console: ConsoleIO,
    prompt: str,
    validate: Callable[[str], bool],
    error_message: str,
) -> str:
    """Ask until `validate` accepts the (stripped) answer."""
    while True:
        value = read_text(console, prompt)
        if validate(value):
            return value
        console.write(f"❌ {error_message}")


def select_from_list(console: ConsoleIO, options: Sequence[T], prompt: str) -> T:
    """Print numbered options and ask until a number in 1..len(options) is entered."""
    console.write(prompt)
    for i, option in enumerate(options, start=1):
        console.write(f"{i}. {option}")

    n = len(options)
    while True:
        raw = read_text(console, f"Выберите вариант (1-{n}): ")
        try:
            choice = int(raw)
        except ValueError:
            choice = 0
        if 1 <= choice <= n:
            return options[choice - 1]
        console.write(f"Пожалуйста, введите число от 1 до {n}")
