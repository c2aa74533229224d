# src/taskboard/core/ports.py

"""
Ports (interfaces) used by the presentation layer.

The console loop talks to a ConsoleIO instead of calling input()/print()
directly, so tests can drive it with a scripted fake.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleIO(Protocol):
    """Line-oriented terminal I/O."""

    def read_line(self, prompt: str = "") -> str:
        """Print `prompt` and block for one line. Raises EOFError when input is closed."""
        ...

    def write(self, text: str = "") -> None: ...


class StdConsole:
    """ConsoleIO backed by stdin/stdout."""

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write(self, text: str = "") -> None:
        print(text, flush=True)
