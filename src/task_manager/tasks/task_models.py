# src/task_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    One item of the task list.

    `id` is the row id assigned by the store; it stays None for tasks
    that only live in memory (persistence disabled).
    """

    description: str
    is_done: bool = False
    id: int | None = None

    def toggle(self) -> None:
        self.is_done = not self.is_done
