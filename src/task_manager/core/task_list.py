# src/task_manager/core/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..tasks.task_models import Task


class TaskList:
    """
    Ordered in-memory tasks plus the selection cursor.

    Invariant: the cursor is None exactly when the list is empty,
    otherwise 0 <= cursor < len(self). Movement clamps at both ends.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._items: list[Task] = list(tasks)
        self._cursor: int | None = 0 if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Task:
        return self._items[index]

    @property
    def cursor(self) -> int | None:
        return self._cursor

    def selected(self) -> Task | None:
        if self._cursor is None:
            return None
        return self._items[self._cursor]

    # ---- selection ----

    def select_next(self) -> None:
        if not self._items:
            return
        if self._cursor is None:
            self._cursor = 0
        else:
            self._cursor = min(self._cursor + 1, len(self._items) - 1)

    def select_previous(self) -> None:
        if not self._items:
            return
        if self._cursor is None:
            self._cursor = len(self._items) - 1
        else:
            self._cursor = max(self._cursor - 1, 0)

    def select_first(self) -> None:
        if self._items:
            self._cursor = 0

    def select_last(self) -> None:
        if self._items:
            self._cursor = len(self._items) - 1

    # ---- mutation ----

    def append(self, task: Task) -> None:
        self._items.append(task)
        self._cursor = len(self._items) - 1

    def remove(self, index: int) -> Task:
        if not 0 <= index < len(self._items):
            raise IndexError(f"task index out of range: {index}")
        task = self._items.pop(index)
        if not self._items:
            self._cursor = None
        elif self._cursor is not None and self._cursor >= len(self._items):
            self._cursor = len(self._items) - 1
        return task

    def toggle(self, index: int) -> Task | None:
        if not 0 <= index < len(self._items):
            return None
        task = self._items[index]
        task.toggle()
        return task
