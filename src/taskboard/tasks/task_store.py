# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import date

from .task_models import Category, Priority, Task, UpdateResult, format_date

logger = logging.getLogger(__name__)

TaskMutation = Callable[[Task], None]


class TaskStore:
    """
    In-memory task store.

    Owns the ordered task list and the id counter. Nothing is persisted:
    the store lives for one run of the program.

    Rules:
    - ids start at 1 and are never reused, even after delete
    - completed tasks are immutable (update refuses them), but can be deleted
    - inputs are not validated here; callers validate before calling create/update
    """

    def __init__(self, *, today: Callable[[], date] | None = None) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._today = today or date.today
        logger.debug("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def today(self) -> date:
        """Current date as seen by this store (injectable for tests)."""
        return self._today()

    # ---- public API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def count(self) -> int:
        return len(self._tasks)

    def create(
        self,
        title: str,
        description: str,
        priority: Priority | str,
        due_date: str,
        category: Category | str,
    ) -> Task:
        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            priority=priority,  # type: ignore[arg-type]
            due_date=due_date,
            category=category,  # type: ignore[arg-type]
            created_at=format_date(self._today()),
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug(
            "Task created id=%s priority=%s category=%s due=%s",
            task.id,
            task.priority,
            task.category,
            task.due_date,
        )
        return task

    def get_all(self) -> list[Task]:
        """All tasks in creation order (a new list; the store's own list stays private)."""
        return list(self._tasks)

    def get_by_id(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def update(self, task_id: int, mutation: TaskMutation) -> UpdateResult:
        """
        Apply `mutation` to the task.

        Returns:
        - NOT_FOUND if there is no such task
        - COMPLETED if the task is already completed (mutation is not called)
        - OK otherwise
        """
        task = self._find(task_id)
        if task is None:
            logger.debug("Update refused: task %s not found", task_id)
            return UpdateResult.NOT_FOUND
        if task.is_completed:
            logger.debug("Update refused: task %s is completed", task_id)
            return UpdateResult.COMPLETED

        mutation(task)
        logger.debug("Task %s updated", task_id)
        return UpdateResult.OK

    def delete(self, task_id: int) -> UpdateResult:
        task = self._find(task_id)
        if task is None:
            logger.debug("Delete refused: task %s not found", task_id)
            return UpdateResult.NOT_FOUND

        self._tasks.remove(task)
        logger.debug("Task %s deleted (completed=%s)", task_id, task.is_completed)
        return UpdateResult.OK

    def mark_completed(self, task_id: int) -> UpdateResult:
        def _complete(task: Task) -> None:
            task.is_completed = True

        return self.update(task_id, _complete)
